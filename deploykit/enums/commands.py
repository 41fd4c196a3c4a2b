"""Commands a deployment job can run."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["CommandType"]


class CommandType(IntEnum):
    """A single step of a deployment job."""

    CHECKOUT_REPO = 1
    BUILD_STATIC_SITE = 2
    DEPLOY_AWS_STATIC_SITE = 3
    DEPLOY_AWS_WEB_SERVICE = 4
    BUILD_DOCKER_IMAGE = 5
    CREATE_AWS_VPC = 6
    CREATE_ECS_CLUSTER = 7
    UPLOAD_IMAGE_TO_ECR = 8
    ADD_AWS_STATIC_SITE_RESPONSE_HEADERS = 9
    UPDATE_AWS_STATIC_SITE_DOMAINS = 10
    DEPLOY_AWS_CLOUDFRONT_VIEWER_REQUEST_FUNCTION = 11
    CREATE_ACM_CERTIFICATE = 12
    UPDATE_AWS_WEB_SERVICE_DOMAIN = 13
    VERIFY_ACM_CERTIFICATE = 14
    DELETE_AWS_STATIC_SITE = 15
    DELETE_AWS_WEB_SERVICE = 16
    LIST_CLOUDWATCH_METRICS_AWS_ECS_WEB_SERVICE = 17
    CREATE_SECRET_AWS_SECRET_MANAGER = 18
    DEPLOY_AWS_PRIVATE_SERVICE = 19
    DELETE_AWS_PRIVATE_SERVICE = 20
    DEPLOY_AWS_RDS_DATABASE = 21
    DELETE_AWS_RDS_DATABASE = 22
    BUILD_NIXPACKS_IMAGE = 23
    RUN_NEW_AUTOMATION = 24

    def __str__(self) -> str:
        return _LABELS[self]


_LABELS = {
    CommandType.CHECKOUT_REPO: "Checkout Repo",
    CommandType.BUILD_STATIC_SITE: "Build Static Site",
    CommandType.DEPLOY_AWS_STATIC_SITE: "Deploy AWS Static Site",
    CommandType.DEPLOY_AWS_WEB_SERVICE: "Deploy AWS Web Service",
    CommandType.BUILD_DOCKER_IMAGE: "Build docker image",
    CommandType.CREATE_AWS_VPC: "Create AWS VPC",
    CommandType.CREATE_ECS_CLUSTER: "Create ECS Cluster",
    CommandType.UPLOAD_IMAGE_TO_ECR: "Upload image to ECR",
    CommandType.ADD_AWS_STATIC_SITE_RESPONSE_HEADERS: "Add AWS Static Site Response Headers",
    CommandType.UPDATE_AWS_STATIC_SITE_DOMAINS: "Update AWS Static Site Domains",
    CommandType.DEPLOY_AWS_CLOUDFRONT_VIEWER_REQUEST_FUNCTION: "CF function on viewer request event",
    CommandType.CREATE_ACM_CERTIFICATE: "Create ACM certificate",
    CommandType.UPDATE_AWS_WEB_SERVICE_DOMAIN: "Update AWS Web Service Domain",
    CommandType.VERIFY_ACM_CERTIFICATE: "Verify ACM certificate",
    CommandType.DELETE_AWS_STATIC_SITE: "Delete AWS Static Site",
    CommandType.DELETE_AWS_WEB_SERVICE: "Delete AWS Web Service",
    CommandType.LIST_CLOUDWATCH_METRICS_AWS_ECS_WEB_SERVICE: "List cloudwatch metrics for AWS ECS Web Service",
    CommandType.CREATE_SECRET_AWS_SECRET_MANAGER: "Create secret in AWS Secret Manager",
    CommandType.DEPLOY_AWS_PRIVATE_SERVICE: "Deploy AWS Private Service",
    CommandType.DELETE_AWS_PRIVATE_SERVICE: "Delete AWS Private Service",
    CommandType.DEPLOY_AWS_RDS_DATABASE: "Deploy AWS RDS Database",
    CommandType.DELETE_AWS_RDS_DATABASE: "Delete AWS RDS Database",
    CommandType.BUILD_NIXPACKS_IMAGE: "Build NixPacks Image",
    CommandType.RUN_NEW_AUTOMATION: "Run New Automation",
}