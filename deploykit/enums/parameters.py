"""Keys of the parameter map that travels with a job."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["ParameterKey"]


class ParameterKey(IntEnum):
    """A named entry in a job's parameter map.

    The map itself is keyed by the decimal string returned by :meth:`key`.
    """

    REPO_CLONE_URL = 1
    REPO_NAME = 2
    REPO_BRANCH = 3
    REPO_PROVIDER_TOKEN = 4
    REPO_DIRECTORY_PATH = 5
    REPO_GIT_PROVIDER = 6
    LOGGER_TYPE = 7
    ORGANIZATION_ID_NAMESPACE = 8
    DEPLOYMENT_ID = 9
    BUILD_ID = 10
    ENVIRONMENT_ID = 11
    ROOT_DIRECTORY = 12
    BUILD_COMMAND = 13
    PUBLISH_DIRECTORY = 14
    NODE_VERSION = 15
    ENVIRONMENT_VARIABLES = 16
    ENVIRONMENT_FILES = 17
    REGION = 18
    CLOUDFRONT_ID = 19
    COMMIT_HASH = 20
    CPU = 21
    MEMORY = 22
    RUNTIME = 23
    DOCKER_IMAGE_NAME_AND_TAG = 24
    DOCKER_BUILD_ARGS = 25
    VPC_ID = 26
    INTERNET_GATEWAY_ID = 27
    SUBNETS = 28
    ELASTIC_IP_ALLOCATIONS = 29
    NAT_GATEWAYS = 30
    ROUTE_TABLES = 31
    ECS_CLUSTER_ARN = 32
    VPC_CIDR = 33
    PORT = 34
    HEALTH_CHECK_PATH = 35
    PUBLIC_SUBNETS = 36
    ECR_REPOSITORY_URI = 37
    DOCKER_REPOSITORY_URI_WITH_TAG = 38
    ECS_TASK_EXECUTION_ROLE_ARN = 39
    PRIVATE_SUBNETS = 40
    ALB_SECURITY_GROUP_ID = 41
    LOAD_BALANCER_ARN = 42
    TARGET_GROUP_ARN = 43
    ECS_SERVICE_ARN = 44
    TASK_DEFINITION_ARN = 45
    INSTALLATION_ID = 46
    RESPONSE_HEADERS = 48
    DOMAINS = 49
    REDIRECT_DOMAIN = 50
    ACM_CERTIFICATE_ARN = 51
    CERTIFICATE_REGION = 52
    CERTIFICATE_DOMAIN = 53
    CERTIFICATE_ID = 54
    PARENT_DOMAIN = 55
    CREATE_MULTIPLE_NATS = 56
    ERROR_PAGES = 57
    PREVIEW_ID = 58
    IS_PREVIEW = 59
    ECS_CLUSTER_NAME = 60
    SHOULD_SEND_CHAT_OUTPUT = 61
    JOB_ID = 62
    SECRET_NAME = 63
    SECRET_VALUE = 64
    IS_PRIVATE_REGISTRY = 65
    DEPLOYED_FROM_IMAGE = 66
    IS_PRIVATE_SERVICE = 67
    DEPLOYMENT_NAME = 68
    ENVIRONMENT_NAME = 69
    RDS_ENGINE = 70
    CPU_MEMORY_RDS_INSTANCE = 71
    ALLOCATED_STORAGE = 72
    MAX_ALLOCATED_STORAGE = 73
    USE_MULTI_AZ = 74
    USE_DELETION_PROTECTION = 75
    APPLY_RDS_CHANGES_IMMEDIATELY = 76
    SHOULD_UPDATE_PASSWORD = 77
    DOCKER_FILE_PATH = 78
    START_COMMAND = 79
    NIXPACKS_USERNAME_KEY = 80
    NIXPACKS_PASSWORD_KEY = 81
    ORGANIZATION_ID_FROM_JOB = 82
    AUTOMATION_DATA = 83
    AUTOMATION_ID = 84
    SMTP_USERNAME = 85
    SMTP_PASSWORD = 86
    SMTP_HOST = 87
    SMTP_PORT = 88
    EMAIL_TOOL_FROM_ADDRESS = 89
    DEBUG_AUTOMATION = 90
    DEBUG_OPENAI_CALLS_IN_AUTOMATION = 91

    def __str__(self) -> str:
        return _LABELS.get(self, "")

    def key(self) -> str:
        """The string under which this entry is stored in a parameter map."""
        return str(int(self))


_LABELS = {
    ParameterKey.REPO_CLONE_URL: "repo clone url",
    ParameterKey.REPO_NAME: "repo name",
    ParameterKey.REPO_BRANCH: "repo branch",
    ParameterKey.REPO_PROVIDER_TOKEN: "repo provider token",
    ParameterKey.REPO_DIRECTORY_PATH: "repo directory path",
    ParameterKey.REPO_GIT_PROVIDER: "repo git provider",
    ParameterKey.LOGGER_TYPE: "logger type",
    ParameterKey.ORGANIZATION_ID_NAMESPACE: "organization id namespace",
    ParameterKey.DEPLOYMENT_ID: "deployment id",
    ParameterKey.BUILD_ID: "build id",
    ParameterKey.ENVIRONMENT_ID: "environment id",
    ParameterKey.ROOT_DIRECTORY: "root directory",
    ParameterKey.BUILD_COMMAND: "build command",
    ParameterKey.PUBLISH_DIRECTORY: "publish directory",
    ParameterKey.NODE_VERSION: "node version",
    ParameterKey.ENVIRONMENT_VARIABLES: "environment variables",
    ParameterKey.ENVIRONMENT_FILES: "environment files",
    ParameterKey.REGION: "region",
    ParameterKey.CLOUDFRONT_ID: "cloudfront",
    ParameterKey.COMMIT_HASH: "commit hash",
    ParameterKey.CPU: "cpu",
    ParameterKey.MEMORY: "memory",
    ParameterKey.RUNTIME: "runtime",
    ParameterKey.DOCKER_IMAGE_NAME_AND_TAG: "docker image name and tag",
    ParameterKey.DOCKER_BUILD_ARGS: "docker build arguments",
    ParameterKey.VPC_ID: "vpc id",
    ParameterKey.INTERNET_GATEWAY_ID: "internet gateway id",
    ParameterKey.SUBNETS: "subnets map",
    ParameterKey.ELASTIC_IP_ALLOCATIONS: "elastic ip allocations map",
    ParameterKey.NAT_GATEWAYS: "nat gateways map",
    ParameterKey.ROUTE_TABLES: "route tables",
    ParameterKey.ECS_CLUSTER_ARN: "ecs cluster arn",
    ParameterKey.VPC_CIDR: "vpc cidr",
    ParameterKey.PORT: "port",
    ParameterKey.HEALTH_CHECK_PATH: "health check path",
    ParameterKey.PUBLIC_SUBNETS: "public subnets",
    ParameterKey.ECR_REPOSITORY_URI: "ecr repository uri",
    ParameterKey.DOCKER_REPOSITORY_URI_WITH_TAG: "docker repository with tag",
    ParameterKey.ECS_TASK_EXECUTION_ROLE_ARN: "ecs task execution role arn",
    ParameterKey.PRIVATE_SUBNETS: "private subnets",
    ParameterKey.ALB_SECURITY_GROUP_ID: "alb security group id",
    ParameterKey.LOAD_BALANCER_ARN: "load balancer arn",
    ParameterKey.TARGET_GROUP_ARN: "target group arn",
    ParameterKey.ECS_SERVICE_ARN: "ecs service arn",
    ParameterKey.TASK_DEFINITION_ARN: "task definition arn",
    ParameterKey.INSTALLATION_ID: "installation id",
    ParameterKey.RESPONSE_HEADERS: "response headers",
    ParameterKey.DOMAINS: "domains",
    ParameterKey.REDIRECT_DOMAIN: "redirect domain",
    ParameterKey.ACM_CERTIFICATE_ARN: "ACM certificate Arn",
    ParameterKey.CERTIFICATE_REGION: "Certificate region",
    ParameterKey.CERTIFICATE_DOMAIN: "Certificate domain",
    ParameterKey.CERTIFICATE_ID: "Certificate ID",
    ParameterKey.PARENT_DOMAIN: "Parent domain",
    ParameterKey.CREATE_MULTIPLE_NATS: "Create multiple nats",
    ParameterKey.ERROR_PAGES: "error pages",
    ParameterKey.PREVIEW_ID: "Preview ID",
    ParameterKey.IS_PREVIEW: "Is the job of type preview",
    ParameterKey.ECS_CLUSTER_NAME: "ECS cluster name",
    ParameterKey.SHOULD_SEND_CHAT_OUTPUT: "Should output be sent back to the chat",
    ParameterKey.JOB_ID: "job Id",
    ParameterKey.SECRET_NAME: "secret name",
    ParameterKey.SECRET_VALUE: "secret value",
    ParameterKey.IS_PRIVATE_REGISTRY: "is private registry",
    ParameterKey.DEPLOYED_FROM_IMAGE: "deployed from image",
    ParameterKey.IS_PRIVATE_SERVICE: "is private service",
    ParameterKey.DEPLOYMENT_NAME: "deployment name",
    ParameterKey.ENVIRONMENT_NAME: "environment name",
    ParameterKey.RDS_ENGINE: "rds engine",
    ParameterKey.CPU_MEMORY_RDS_INSTANCE: "cpu memory rds instance",
    ParameterKey.ALLOCATED_STORAGE: "allocated storage",
    ParameterKey.MAX_ALLOCATED_STORAGE: "max allocated storage",
    ParameterKey.USE_MULTI_AZ: "use multi az",
    ParameterKey.USE_DELETION_PROTECTION: "use deletion protection",
    ParameterKey.APPLY_RDS_CHANGES_IMMEDIATELY: "apply rds changes immediately",
    ParameterKey.SHOULD_UPDATE_PASSWORD: "should update password",
    ParameterKey.DOCKER_FILE_PATH: "docker file path",
    ParameterKey.START_COMMAND: "start command",
    ParameterKey.NIXPACKS_USERNAME_KEY: "nix packs username",
    ParameterKey.NIXPACKS_PASSWORD_KEY: "nix packs password",
    ParameterKey.ORGANIZATION_ID_FROM_JOB: "org id from job",
    ParameterKey.AUTOMATION_DATA: "automation data",
    ParameterKey.AUTOMATION_ID: "automation id",
    ParameterKey.SMTP_USERNAME: "smtp username",
    ParameterKey.SMTP_PASSWORD: "smtp password",
    ParameterKey.SMTP_HOST: "smtp host",
    ParameterKey.SMTP_PORT: "smtp port",
    ParameterKey.EMAIL_TOOL_FROM_ADDRESS: "smtp from address",
    ParameterKey.DEBUG_AUTOMATION: "debug automation",
    ParameterKey.DEBUG_OPENAI_CALLS_IN_AUTOMATION: "debug open ai calls in automation",
}