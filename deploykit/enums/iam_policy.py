"""IAM policy bundles a deployment runner may need."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["PolicyType"]


class PolicyType(IntEnum):
    """A set of permissions added to the runner's task role."""

    AWS_DEPLOYMENT_RUNNER_CONTROLLER_START = 1
    AWS_STATIC_SITE_DEPLOYMENT = 2
    AWS_WEB_SERVICE_DEPLOYMENT = 3
    AWS_LOGS = 4
    AWS_ECR_UPLOAD = 5
    AWS_CERTIFICATE_MANAGER = 6
    AWS_SECRETS_MANAGER = 7
    AWS_RDS_DEPLOYMENT = 8

    def actions(self) -> list[str]:
        """IAM actions this policy type grants, in order."""
        return [f"{service}:*" for service in _SERVICES[self]]


# Each bundle grants every action of the listed AWS service prefixes.
_SERVICES: dict[PolicyType, tuple[str, ...]] = {
    PolicyType.AWS_DEPLOYMENT_RUNNER_CONTROLLER_START: (
        "application-autoscaling", "autoscaling", "ec2", "ecs", "secretsmanager",
    ),
    PolicyType.AWS_STATIC_SITE_DEPLOYMENT: ("cloudfront", "s3", "secretsmanager", "route53"),
    PolicyType.AWS_WEB_SERVICE_DEPLOYMENT: (
        "application-autoscaling", "autoscaling", "ec2", "ecs",
        "elasticloadbalancing", "secretsmanager", "servicediscovery", "route53",
    ),
    PolicyType.AWS_ECR_UPLOAD: ("ecr",),
    PolicyType.AWS_LOGS: ("cloudwatch", "logs", "events"),
    PolicyType.AWS_CERTIFICATE_MANAGER: ("acm", "elasticloadbalancing"),
    PolicyType.AWS_SECRETS_MANAGER: ("secretsmanager",),
    PolicyType.AWS_RDS_DEPLOYMENT: ("rds",),
}