"""Authentication arguments, shared error types and git token refresh messages."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "TRUE",
    "FALSE",
    "AuthArgsV1",
    "AuthArgsV2",
    "KitError",
    "ServerShuttingDown",
    "InvalidUserKeySecret",
    "JobStoppedByUser",
    "ProcessingRequestError",
    "RefreshInProcess",
    "RefreshGitProviderTokenArgsV1",
    "RefreshGitProviderTokenDtoV1",
]

# Boolean flags travel as strings in some messages.
TRUE = "true"
FALSE = "false"


@dataclass
class AuthArgsV1:
    """Credentials a runner sends with every request."""

    organization_id: str = ""
    token: str = ""
    docker_image: str = ""


@dataclass
class AuthArgsV2:
    """Credentials plus details about where the runner is deployed."""

    organization_id: str = ""
    token: str = ""
    docker_image: str = ""
    cloud_account_id: str = ""
    runner_region: str = ""
    go_arch: str = ""
    go_os: str = ""


class KitError(Exception):
    """Base class for errors exchanged between runner and server."""

    default_message = ""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class ServerShuttingDown(KitError):
    default_message = "server is shutting down"


class InvalidUserKeySecret(KitError):
    default_message = "User key or secret is invalid"


class JobStoppedByUser(KitError):
    default_message = "user stopped job"


class ProcessingRequestError(KitError):
    default_message = "error processing request"


class RefreshInProcess(KitError):
    default_message = (
        "a client is already in process of refreshing git token for installation"
    )


@dataclass
class RefreshGitProviderTokenArgsV1(AuthArgsV1):
    """Request for a fresh git provider token for an installation."""

    installation_id: str = ""


@dataclass
class RefreshGitProviderTokenDtoV1:
    """A refreshed git provider token."""

    token: str = ""