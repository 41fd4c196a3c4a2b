import pytest

from deploykit.enums.iam_policy import PolicyType


@pytest.mark.parametrize(
    ("policy_type", "expected"),
    [
        (PolicyType.AWS_ECR_UPLOAD, ["ecr:*"]),
        (PolicyType.AWS_SECRETS_MANAGER, ["secretsmanager:*"]),
        (PolicyType.AWS_RDS_DEPLOYMENT, ["rds:*"]),
    ],
)
def test_single_service_policies(policy_type, expected):
    assert policy_type.actions() == expected


def test_logs_policy_covers_logging_services():
    actions = PolicyType.AWS_LOGS.actions()
    assert len(actions) == 3
    assert actions[0] == "cloudwatch:*"
    assert {"logs:*", "events:*"} <= set(actions)


def test_certificate_manager_policy():
    actions = PolicyType.AWS_CERTIFICATE_MANAGER.actions()
    assert actions[0] == "acm:*"
    assert "elasticloadbalancing:*" in actions
    assert len(actions) == 2


def test_static_site_policy_has_cdn_and_storage():
    actions = PolicyType.AWS_STATIC_SITE_DEPLOYMENT.actions()
    assert actions[:2] == ["cloudfront:*", "s3:*"]
    assert "route53:*" in actions
    assert "ecs:*" not in actions


def test_web_service_policy_extends_controller_start():
    controller = set(PolicyType.AWS_DEPLOYMENT_RUNNER_CONTROLLER_START.actions())
    web_service = set(PolicyType.AWS_WEB_SERVICE_DEPLOYMENT.actions())
    assert controller < web_service
    assert {"servicediscovery:*", "route53:*"} <= web_service - controller
    assert len(web_service) == 8


@pytest.mark.parametrize("value", range(1, 9))
def test_every_type_has_wildcard_actions(value):
    actions = PolicyType(value).actions()
    assert actions
    assert all(action.endswith(":*") for action in actions)
    assert len(set(actions)) == len(actions)


def test_actions_are_a_fresh_list():
    first = PolicyType.AWS_RDS_DEPLOYMENT.actions()
    first.append("extra:*")
    assert PolicyType.AWS_RDS_DEPLOYMENT.actions() == ["rds:*"]