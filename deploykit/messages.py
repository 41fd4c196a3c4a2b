"""Request and reply messages for builds, certificates, clusters, deployments,
job logs, notifications, pings and previews."""

from __future__ import annotations

from dataclasses import dataclass, field

from deploykit.auth import AuthArgsV1, AuthArgsV2
from deploykit.enums.deployment import DeletionState
from deploykit.enums.platform import BuildStatus, ClusterType, NotificationType
from deploykit.enums.region import Region

__all__ = [
    "UpdateBuildDtoV1",
    "UpdateBuildsArgsV1",
    "UpdateBuildsReplyV1",
    "UpdateCertificateDtoV1",
    "UpdateCertificatesArgsV1",
    "UpdateCertificatesReplyV1",
    "UpsertClusterDtoV1",
    "UpsertClustersArgsV1",
    "UpsertClustersReplyV1",
    "UpsertClustersArgsV2",
    "GetDeploymentsArgsV1",
    "GetDeploymentDtoV1",
    "GetDeploymentsReplyV1",
    "UpdateDeploymentDtoV1",
    "UpdateDeploymentsArgsV1",
    "UpdateDeploymentsReplyV1",
    "AddJobLogDtoV1",
    "AddJobLogsArgsV1",
    "AddJobLogsReplyV1",
    "SendNotificationDtoV1",
    "SendNotificationsArgsV1",
    "SendNotificationsReplyV1",
    "PingArgsV1",
    "PingReplyV1",
    "PingArgsV2",
    "PingReplyV2",
    "GetPreviewsArgsV1",
    "GetPreviewDtoV1",
    "GetPreviewsReplyV1",
    "UpdatePreviewDtoV1",
    "UpdatePreviewsArgsV1",
    "UpdatePreviewsReplyV1",
]


# Builds


@dataclass
class UpdateBuildDtoV1:
    id: str = ""
    build_ts: int = 0
    commit_hash: str = ""
    commit_message: str = ""
    status: BuildStatus | None = None
    error_message: str = ""
    task_definition_arn: str = ""


@dataclass
class UpdateBuildsArgsV1(AuthArgsV1):
    builds: list[UpdateBuildDtoV1] = field(default_factory=list)


@dataclass
class UpdateBuildsReplyV1:
    done: bool = False


# Certificates


@dataclass
class UpdateCertificateDtoV1:
    id: str = ""
    certificate_arn: str = ""
    cname_name: str = ""
    cname_value: str = ""
    verified: str = ""


@dataclass
class UpdateCertificatesArgsV1(AuthArgsV1):
    certificates: list[UpdateCertificateDtoV1] = field(default_factory=list)


@dataclass
class UpdateCertificatesReplyV1:
    done: bool = False


# Clusters


@dataclass
class UpsertClusterDtoV1:
    type: ClusterType | None = None
    region: Region | None = None
    name: str = ""
    cluster_arn: str = ""
    ecs_task_execution_role_arn: str = ""


@dataclass
class UpsertClustersArgsV1(AuthArgsV1):
    clusters: list[UpsertClusterDtoV1] = field(default_factory=list)


@dataclass
class UpsertClustersReplyV1:
    done: bool = False


@dataclass
class UpsertClustersArgsV2(AuthArgsV2):
    clusters: list[UpsertClusterDtoV1] = field(default_factory=list)


# Deployments


@dataclass
class GetDeploymentsArgsV1(AuthArgsV1):
    ids: list[str] = field(default_factory=list)


@dataclass
class GetDeploymentDtoV1:
    id: str = ""
    cloudfront_distribution_id: str = ""
    cloudfront_distribution_arn: str = ""
    cloudfront_distribution_domain_name: str = ""


@dataclass
class GetDeploymentsReplyV1:
    deployments: list[GetDeploymentDtoV1] = field(default_factory=list)


@dataclass
class UpdateDeploymentDtoV1:
    id: str = ""
    cloudfront_distribution_id: str = ""
    cloudfront_distribution_arn: str = ""
    cloudfront_distribution_domain_name: str = ""
    ecr_repository_uri: str = ""
    alb_security_group_id: str = ""
    alb_security_ingress_rule_id: str = ""
    alb_security_egress_rule_id: str = ""
    target_group_arn: str = ""
    listener_arn_port80: str = ""
    listener_arn_port443: str = ""
    load_balancer_arn: str = ""
    load_balancer_dns: str = ""
    ecs_service_arn: str = ""
    dns_name: str = ""
    last_deployment_ts: int = 0
    error_message: str = ""
    status: BuildStatus | None = None
    deletion_state: DeletionState = DeletionState.NOT_STARTED
    namespace_name: str = ""
    port: int = 0
    rds_database_arn: str = ""
    rds_user_password: str = ""
    rds_user_name: str = ""
    rds_engine_version: str = ""
    allocated_storage: int = 0
    max_allocated_storage: int = 0
    db_instance_class: str = ""


@dataclass
class UpdateDeploymentsArgsV1(AuthArgsV1):
    deployments: list[UpdateDeploymentDtoV1] = field(default_factory=list)


@dataclass
class UpdateDeploymentsReplyV1:
    done: bool = False


# Job logs


@dataclass
class AddJobLogDtoV1:
    id: str = ""
    message: str = ""
    error_message: str = ""
    ts: int = 0


@dataclass
class AddJobLogsArgsV1(AuthArgsV1):
    job_logs: list[AddJobLogDtoV1] = field(default_factory=list)


@dataclass
class AddJobLogsReplyV1:
    done: bool = False


# Notifications


@dataclass
class SendNotificationDtoV1:
    preview_id: str = ""
    deployment_id: str = ""
    build_id: str = ""
    type: NotificationType | None = None


@dataclass
class SendNotificationsArgsV1(AuthArgsV1):
    notifications: list[SendNotificationDtoV1] = field(default_factory=list)


@dataclass
class SendNotificationsReplyV1:
    done: bool = False


# Ping


@dataclass
class PingArgsV1(AuthArgsV1):
    send: str = ""
    first_ping: bool = False
    go_arch: str = ""


@dataclass
class PingReplyV1:
    send: str = ""
    docker_upgrade_image: str = ""
    upgrade_from_ts: int = 0
    upgrade_to_ts: int = 0


@dataclass
class PingArgsV2(AuthArgsV2):
    send: str = ""
    first_ping: bool = False


@dataclass
class PingReplyV2:
    send: str = ""
    runner_upgrade_docker_image: str = ""
    controller_upgrade_docker_image: str = ""
    upgrade_from_ts: int = 0
    upgrade_to_ts: int = 0


# Previews


@dataclass
class GetPreviewsArgsV1(AuthArgsV1):
    ids: list[str] = field(default_factory=list)


@dataclass
class GetPreviewDtoV1:
    id: str = ""
    cloudfront_distribution_id: str = ""
    cloudfront_distribution_arn: str = ""
    cloudfront_distribution_domain_name: str = ""


@dataclass
class GetPreviewsReplyV1:
    previews: list[GetPreviewDtoV1] = field(default_factory=list)


@dataclass
class UpdatePreviewDtoV1:
    id: str = ""
    build_ts: int = 0
    commit_hash: str = ""
    commit_message: str = ""
    status: BuildStatus | None = None
    error_message: str = ""
    task_definition_arn: str = ""
    cloudfront_distribution_id: str = ""
    cloudfront_distribution_arn: str = ""
    cloudfront_distribution_domain_name: str = ""
    ecr_repository_uri: str = ""
    alb_security_group_id: str = ""
    alb_security_ingress_rule_id: str = ""
    alb_security_egress_rule_id: str = ""
    target_group_arn: str = ""
    listener_arn_port80: str = ""
    listener_arn_port443: str = ""
    load_balancer_arn: str = ""
    load_balancer_dns: str = ""
    ecs_service_arn: str = ""
    dns_name: str = ""
    deletion_state: DeletionState = DeletionState.NOT_STARTED
    namespace_name: str = ""


@dataclass
class UpdatePreviewsArgsV1(AuthArgsV1):
    previews: list[UpdatePreviewDtoV1] = field(default_factory=list)


@dataclass
class UpdatePreviewsReplyV1:
    done: bool = False