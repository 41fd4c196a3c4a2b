"""Jobs: parameter access, runner and logger interfaces, and job messages."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import IO, Any, TypeVar

from deploykit.auth import AuthArgsV1, AuthArgsV2
from deploykit.automations import AutomationDataDtoV1
from deploykit.enums.commands import CommandType
from deploykit.enums.parameters import ParameterKey

__all__ = [
    "ParameterError",
    "ContextV1",
    "Runner",
    "Logger",
    "get_parameter_value",
    "set_parameter_value",
    "CompletingJobDtoV1",
    "CompletingJobsArgsV1",
    "CompletingJobsReplyV1",
    "JobsCountArgsV1",
    "JobsCountDtoV1",
    "JobsCountArgsV2",
    "SaasJobsCountArgsV1",
    "SaasJobsCountDtoV1",
    "PendingJobsArgsV1",
    "PendingJobDtoV1",
    "PendingJobsDtoV1",
    "PendingJobsArgsV2",
    "PendingJobsForSaasArgsV1",
    "PendingJobForSaasDtoV1",
    "PendingJobsForSaasDtoV1",
    "UpdateJobOutputDtoV1",
    "UpdateJobOutputArgsV1",
    "UpdateJobOutputReplyV1",
    "UpsertJobHeartbeatArgsV1",
    "UpsertJobHeartbeatReplyV1",
]

T = TypeVar("T")

_PARAMETER_TYPES = (int, str, dict, list, bool, AutomationDataDtoV1)


class ParameterError(ValueError):
    """A job parameter is missing or has the wrong type."""


@dataclass
class ContextV1:
    organization_id: str = ""
    environment_id: str = ""
    deployment_id: str = ""
    build_id: str = ""


class Runner(ABC):
    """Something that executes one command of a job."""

    @abstractmethod
    def run(self, parameters: dict[str, Any], logs_writer: IO[str]) -> dict[str, Any]:
        """Run with the job's parameters and return the updated parameters."""


class Logger(ABC):
    """Sink for job log messages."""

    @abstractmethod
    def log(self, messages: list[str]) -> None:
        """Record the given messages."""


def get_parameter_value(parameters: dict[str, Any], key: ParameterKey, expected_type: type[T]) -> T:
    """Return the parameter stored under ``key``, checking its type."""
    try:
        value = parameters[key.key()]
    except KeyError:
        raise ParameterError(f"{key} is missing") from None
    wrong_bool = isinstance(value, bool) and expected_type is not bool
    if wrong_bool or not isinstance(value, expected_type):
        raise ParameterError(f"{key} is not of valid type")
    return value


def set_parameter_value(parameters: dict[str, Any], key: ParameterKey, value: Any) -> None:
    """Store ``value`` under ``key``; only parameter-compatible types are accepted."""
    if not isinstance(value, _PARAMETER_TYPES):
        raise TypeError(f"unsupported parameter type: {type(value).__name__}")
    parameters[key.key()] = value


@dataclass
class CompletingJobDtoV1:
    id: str = ""
    error: str = ""


@dataclass
class CompletingJobsArgsV1(AuthArgsV1):
    jobs: list[CompletingJobDtoV1] = field(default_factory=list)


@dataclass
class CompletingJobsReplyV1:
    done: bool = False


@dataclass
class JobsCountArgsV1(AuthArgsV1):
    pass


@dataclass
class JobsCountDtoV1:
    count: int = 0
    runner_on_timeout_seconds: int = 0


@dataclass
class JobsCountArgsV2(AuthArgsV2):
    pass


@dataclass
class SaasJobsCountArgsV1(AuthArgsV2):
    pass


@dataclass
class SaasJobsCountDtoV1:
    count: int = 0
    runner_on_timeout_seconds: int = 0


@dataclass
class PendingJobsArgsV1(AuthArgsV1):
    """Request for pending jobs."""


@dataclass
class PendingJobDtoV1:
    """A pending deployment job from the server."""

    job_id: str = ""
    command_enums: list[CommandType] = field(default_factory=list)
    parameters: dict[str, Any] = field(default_factory=dict)


@dataclass
class PendingJobsDtoV1:
    jobs: list[PendingJobDtoV1] = field(default_factory=list)


@dataclass
class PendingJobsArgsV2(AuthArgsV2):
    pass


@dataclass
class PendingJobsForSaasArgsV1(AuthArgsV2):
    pass


@dataclass
class PendingJobForSaasDtoV1:
    job_id: str = ""
    organization_id: str = ""
    command_enums: list[CommandType] = field(default_factory=list)
    parameters: dict[str, Any] = field(default_factory=dict)


@dataclass
class PendingJobsForSaasDtoV1:
    jobs: list[PendingJobForSaasDtoV1] = field(default_factory=list)


@dataclass
class UpdateJobOutputDtoV1:
    id: str = ""
    output: str = ""


@dataclass
class UpdateJobOutputArgsV1(AuthArgsV1):
    jobs: list[UpdateJobOutputDtoV1] = field(default_factory=list)


@dataclass
class UpdateJobOutputReplyV1:
    done: bool = False


@dataclass
class UpsertJobHeartbeatArgsV1(AuthArgsV1):
    job_id: str = ""


@dataclass
class UpsertJobHeartbeatReplyV1:
    stopping: bool = False