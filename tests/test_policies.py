from unittest.mock import patch
from urllib.parse import quote

import pytest

from deploykit.enums.iam_policy import PolicyType
from deploykit.enums.platform import RunnerMode, TargetCloud
from deploykit.iam.policies import (
    add_aws_policy_for_deployment_runner,
    merge_policy_actions,
    policy_name,
    should_add_policy,
    task_role_name,
)
from deploykit.iam.policy_schema import PolicyDocument, Statement


class FakeIam:
    def __init__(self, document):
        self.document = document
        self.gets = []
        self.puts = []

    def get_role_policy(self, *, RoleName, PolicyName):
        self.gets.append((RoleName, PolicyName))
        return {"PolicyDocument": self.document}

    def put_role_policy(self, *, RoleName, PolicyName, PolicyDocument):
        self.puts.append((RoleName, PolicyName, PolicyDocument))
        self.document = quote(PolicyDocument)


def _base_doc() -> PolicyDocument:
    return PolicyDocument(
        version="2012-10-17",
        statement=[Statement(sid="base", effect="Allow", action=["s3:*"], resource=["*"])],
    )


def _run(client, policy_type=PolicyType.AWS_LOGS, mode=RunnerMode.SAAS, region="us-east-1"):
    return add_aws_policy_for_deployment_runner(
        client, policy_type, "linux", "arm", "org1", region, mode, TargetCloud.AWS, 0
    )


def test_names():
    assert task_role_name("linux", "arm", "org1", "us-east-1") == "dr-task-role-linuxarm-org1-us-east-1"
    assert policy_name("linux", "arm", "org1", "us-east-1") == "dr-policy-linuxarm-org1-us-east-1"


@pytest.mark.parametrize(
    "mode, expected",
    [(RunnerMode.SAAS, True), (RunnerMode.AWS_ECS, True), (RunnerMode.LOCAL, False)],
)
def test_should_add_policy(mode, expected):
    assert should_add_policy(mode, TargetCloud.AWS) is expected


def test_merge_creates_managed_statement():
    doc = _base_doc()
    added = merge_policy_actions(doc, PolicyType.AWS_LOGS.actions())
    assert added == PolicyType.AWS_LOGS.actions()
    managed = doc.statement[-1]
    assert managed.sid == "deploymentIoAdded"
    assert managed.resource == ["*"]
    assert managed.action == added
    assert len(doc.statement) == 2


def test_merge_skips_existing_actions():
    doc = _base_doc()
    doc.statement.append(Statement(sid="deploymentIoAdded", action=["logs:*"]))
    added = merge_policy_actions(doc, PolicyType.AWS_LOGS.actions())
    assert "logs:*" not in added
    assert doc.statement[-1].action.count("logs:*") == 1
    assert set(doc.statement[-1].action) == set(PolicyType.AWS_LOGS.actions())


def test_add_policy_updates_role_then_is_idempotent():
    client = FakeIam(quote(_base_doc().to_json()))
    added = _run(client)
    assert added == PolicyType.AWS_LOGS.actions()
    role, name, body = client.puts[0]
    assert role == task_role_name("linux", "arm", "org1", "us-east-1")
    assert name == policy_name("linux", "arm", "org1", "us-east-1")
    stored = PolicyDocument.from_json(body)
    assert stored.statement[0] == _base_doc().statement[0]
    assert _run(client) == []
    assert len(client.puts) == 1


def test_add_policy_accepts_decoded_document():
    client = FakeIam(_base_doc().to_dict())
    assert _run(client, PolicyType.AWS_RDS_DEPLOYMENT) == PolicyType.AWS_RDS_DEPLOYMENT.actions()


def test_add_policy_waits_after_update():
    client = FakeIam(quote(_base_doc().to_json()))
    with patch("deploykit.iam.policies.time.sleep") as sleep:
        added = add_aws_policy_for_deployment_runner(
            client, PolicyType.AWS_ECR_UPLOAD, "linux", "arm", "org1", "us-east-1",
            RunnerMode.AWS_ECS, TargetCloud.AWS,
        )
    assert added == ["ecr:*"]
    assert len(client.puts) == 1
    sleep.assert_called_once_with(60.0)


def test_local_mode_does_nothing():
    client = FakeIam(quote(_base_doc().to_json()))
    assert _run(client, mode=RunnerMode.LOCAL) == []
    assert client.gets == []


def test_unknown_region_raises():
    client = FakeIam(quote(_base_doc().to_json()))
    with pytest.raises(ValueError):
        _run(client, region="mars-1")
    assert client.gets == []


def test_empty_document_raises():
    with pytest.raises(ValueError, match="empty policy document"):
        _run(FakeIam(""))


def test_malformed_document_raises():
    with pytest.raises(ValueError, match="error parsing policy data"):
        _run(FakeIam(quote("{not json")))