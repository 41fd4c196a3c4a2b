"""Small enumerations describing builds, runners and infrastructure."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "BuildStatus",
    "ClusterType",
    "CpuArchitecture",
    "EmailProvider",
    "GitProvider",
    "ModelType",
    "LoggerType",
    "MessageType",
    "MonitoringType",
    "NotificationType",
    "OSType",
    "RegistryType",
    "RunnerMode",
    "TargetCloud",
    "VpcType",
    "message_type_from_string",
    "target_cloud_from_string",
]


class BuildStatus(IntEnum):
    """Status of a build or deployment."""

    PENDING = 1
    SUCCESS = 2
    ERROR = 3
    RUNNING = 4
    STOPPING = 5
    STOPPED = 6
    TIMED_OUT = 7

    def __str__(self) -> str:
        return _BUILD_STATUS_LABELS[self]


class ClusterType(IntEnum):
    ECS = 1

    def __str__(self) -> str:
        return "ECS"


class CpuArchitecture(IntEnum):
    ARM = 1
    AMD = 2

    def __str__(self) -> str:
        return _CPU_ARCH_LABELS[self]


class EmailProvider(IntEnum):
    SENDGRID = 1
    SES = 2
    SMTP = 3


class GitProvider(IntEnum):
    GITHUB = 1
    GITLAB = 2
    BITBUCKET = 3

    def __str__(self) -> str:
        return _GIT_PROVIDER_LABELS[self]


class ModelType(IntEnum):
    GPT_4O = 1

    def __str__(self) -> str:
        return "gpt-4o"


class LoggerType(IntEnum):
    CLOUDWATCH = 1

    def __str__(self) -> str:
        return "Cloudwatch"


class MessageType(IntEnum):
    """Author of a chat message."""

    USER = 1
    ASSISTANT = 2
    OUTPUT = 3

    def __str__(self) -> str:
        return _MESSAGE_TYPE_LABELS[self]


class MonitoringType(IntEnum):
    CLOUDWATCH = 1

    def __str__(self) -> str:
        return "Cloudwatch"


class NotificationType(IntEnum):
    BUILD_STARTED = 1
    PREVIEW_STARTED = 2
    PREVIEW_COMPLETED_SUCCESS = 3
    PREVIEW_COMPLETED_ERROR = 4
    PREVIEW_DELETED_SUCCESS = 5
    PREVIEW_DELETION_STARTED = 6
    PREVIEW_DELETION_UNDONE = 7
    BUILD_CREATED = 8
    BUILD_COMPLETED_SUCCESS = 9
    BUILD_COMPLETED_ERROR = 10
    HEADERS_UPDATED_SUCCESS = 11
    HEADERS_UPDATED_ERROR = 12
    DOMAIN_UPDATED_SUCCESS = 13
    DOMAIN_UPDATED_ERROR = 14
    DEPLOYMENT_DELETED_SUCCESS = 15
    DEPLOYMENT_DELETED_ERROR = 16


class OSType(IntEnum):
    LINUX = 1
    WINDOWS = 2

    def __str__(self) -> str:
        return _OS_LABELS[self]


class RegistryType(IntEnum):
    GITHUB = 1
    GITLAB = 2
    DOCKER = 3

    def __str__(self) -> str:
        return _REGISTRY_LABELS[self]


class RunnerMode(IntEnum):
    LOCAL = 1
    AWS_ECS = 2
    SAAS = 3

    def __str__(self) -> str:
        return _RUNNER_MODE_LABELS[self]


class TargetCloud(IntEnum):
    AWS = 1

    def __str__(self) -> str:
        return "aws"


class VpcType(IntEnum):
    AWS_VPC = 1

    def __str__(self) -> str:
        return "AWS VPC"


_BUILD_STATUS_LABELS = {
    BuildStatus.PENDING: "Deployment Pending",
    BuildStatus.SUCCESS: "Deployment Successful",
    BuildStatus.ERROR: "Error",
    BuildStatus.RUNNING: "Deploying",
    BuildStatus.STOPPING: "Stopping Deployment",
    BuildStatus.STOPPED: "Deployment Stopped",
    BuildStatus.TIMED_OUT: "Deployment Timed out",
}

_CPU_ARCH_LABELS = {
    CpuArchitecture.ARM: "arm",
    CpuArchitecture.AMD: "amd",
}

_GIT_PROVIDER_LABELS = {
    GitProvider.GITHUB: "GitHub",
    GitProvider.GITLAB: "GitLab",
    GitProvider.BITBUCKET: "BitBucket",
}

_MESSAGE_TYPE_LABELS = {
    MessageType.USER: "user",
    MessageType.ASSISTANT: "assistant",
    MessageType.OUTPUT: "output",
}

_OS_LABELS = {
    OSType.LINUX: "linux",
    OSType.WINDOWS: "windows",
}

_REGISTRY_LABELS = {
    RegistryType.GITHUB: "github",
    RegistryType.GITLAB: "gitlab",
    RegistryType.DOCKER: "docker",
}

_RUNNER_MODE_LABELS = {
    RunnerMode.LOCAL: "local",
    RunnerMode.AWS_ECS: "aws",
    RunnerMode.SAAS: "saas",
}


def message_type_from_string(text: str) -> MessageType:
    """Parse ``user``, ``assistant`` or ``output``."""
    for member, label in _MESSAGE_TYPE_LABELS.items():
        if label == text:
            return member
    raise ValueError("invalid message type")


def target_cloud_from_string(text: str) -> TargetCloud:
    """Parse a target cloud name."""
    if text == "aws":
        return TargetCloud.AWS
    raise ValueError(f"invalid target cloud: {text}")