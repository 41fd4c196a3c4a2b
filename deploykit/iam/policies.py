"""Keep the deployment runner's inline IAM policy up to date."""

from __future__ import annotations

import time
from typing import Any, Iterable, Mapping, Protocol
from urllib.parse import unquote_plus

from deploykit.enums.iam_policy import PolicyType
from deploykit.enums.platform import RunnerMode, TargetCloud
from deploykit.enums.region import region_from_string
from deploykit.iam.policy_schema import PolicyDocument, Statement

__all__ = [
    "IamClient",
    "task_role_name",
    "policy_name",
    "should_add_policy",
    "merge_policy_actions",
    "add_aws_policy_for_deployment_runner",
]

_ADDED_SID = "deploymentIoAdded"
_DEFAULT_SETTLE_SECONDS = 60.0


class IamClient(Protocol):
    """The two IAM calls used here, with AWS request parameter names."""

    def get_role_policy(self, *, RoleName: str, PolicyName: str) -> Mapping[str, Any]: ...

    def put_role_policy(self, *, RoleName: str, PolicyName: str, PolicyDocument: str) -> Any: ...


def task_role_name(os_str: str, cpu_str: str, organization_id: str, region: str) -> str:
    """Name of the runner's task role: ``dr-task-role-<os><cpu>-<org>-<region>``."""
    return f"dr-task-role-{os_str}{cpu_str}-{organization_id}-{region}"


def policy_name(os_str: str, cpu_str: str, organization_id: str, region: str) -> str:
    """Name of the runner's inline policy: ``dr-policy-<os><cpu>-<org>-<region>``."""
    return f"dr-policy-{os_str}{cpu_str}-{organization_id}-{region}"


def should_add_policy(mode: RunnerMode, cloud: TargetCloud) -> bool:
    """Policies are managed only for AWS runners in SaaS or ECS mode."""
    return mode in (RunnerMode.SAAS, RunnerMode.AWS_ECS) and cloud is TargetCloud.AWS


def merge_policy_actions(document: PolicyDocument, actions: Iterable[str]) -> list[str]:
    """Add missing actions to the document's managed statement.

    The managed statement is created if absent. Returns the actions added,
    in order; an empty list means the document needs no update.
    """
    statement = next((s for s in document.statement if s.sid == _ADDED_SID), None)
    if statement is None:
        statement = Statement(sid=_ADDED_SID, effect="Allow", action=[], resource=["*"])
        document.statement.append(statement)
    existing = set(statement.action)
    added = [action for action in actions if action not in existing]
    statement.action.extend(added)
    return added


def _load_document(raw: Any) -> PolicyDocument:
    if not raw:
        raise ValueError("got empty policy document from AWS")
    try:
        if isinstance(raw, Mapping):
            return PolicyDocument.from_dict(raw)
        return PolicyDocument.from_json(unquote_plus(raw))
    except ValueError as exc:
        raise ValueError(f"error parsing policy data: {exc}") from exc


def add_aws_policy_for_deployment_runner(
    iam_client: IamClient,
    policy_type: PolicyType,
    os_str: str,
    cpu_str: str,
    organization_id: str,
    runner_region: str,
    mode: RunnerMode,
    cloud: TargetCloud,
    settle_seconds: float = _DEFAULT_SETTLE_SECONDS,
) -> list[str]:
    """Grant the runner's task role the actions of ``policy_type``.

    Returns the actions that were added. After an update, waits
    ``settle_seconds`` for IAM to propagate the change.
    """
    if not should_add_policy(mode, cloud):
        return []
    region_from_string(runner_region)

    role = task_role_name(os_str, cpu_str, organization_id, runner_region)
    name = policy_name(os_str, cpu_str, organization_id, runner_region)

    response = iam_client.get_role_policy(RoleName=role, PolicyName=name)
    document = _load_document(response.get("PolicyDocument"))

    added = merge_policy_actions(document, policy_type.actions())
    if added:
        iam_client.put_role_policy(
            RoleName=role, PolicyName=name, PolicyDocument=document.to_json()
        )
        time.sleep(settle_seconds)
    return added