import pytest

from deploykit.enums.platform import (
    BuildStatus,
    ClusterType,
    CpuArchitecture,
    EmailProvider,
    GitProvider,
    LoggerType,
    MessageType,
    ModelType,
    MonitoringType,
    NotificationType,
    OSType,
    RegistryType,
    RunnerMode,
    TargetCloud,
    VpcType,
    message_type_from_string,
    target_cloud_from_string,
)


def test_build_status_labels():
    assert str(BuildStatus(1)) == "Deployment Pending"
    assert str(BuildStatus(4)) == "Deploying"
    assert str(BuildStatus(7)) == "Deployment Timed out"


def test_build_status_labels_distinct():
    labels = [str(BuildStatus(value)) for value in range(1, 8)]
    assert len(set(labels)) == 7
    with pytest.raises(ValueError):
        BuildStatus(8)


def test_single_member_labels():
    assert str(ClusterType(1)) == "ECS"
    assert str(ModelType(1)) == "gpt-4o"
    assert str(LoggerType(1)) == "Cloudwatch"
    assert str(MonitoringType(1)) == "Cloudwatch"
    assert str(VpcType(1)) == "AWS VPC"


def test_cpu_and_os_labels():
    assert [str(CpuArchitecture(value)) for value in (1, 2)] == ["arm", "amd"]
    assert [str(OSType(value)) for value in (1, 2)] == ["linux", "windows"]


def test_git_and_registry_labels():
    assert [str(GitProvider(value)) for value in (1, 2, 3)] == ["GitHub", "GitLab", "BitBucket"]
    assert [str(RegistryType(value)) for value in (1, 2, 3)] == ["github", "gitlab", "docker"]


def test_email_provider_values():
    assert EmailProvider(1) is EmailProvider.SENDGRID
    assert EmailProvider(2) is EmailProvider.SES
    assert EmailProvider(3) is EmailProvider.SMTP
    with pytest.raises(ValueError):
        EmailProvider(4)


def test_notification_values_contiguous():
    assert [n.value for n in NotificationType] == list(range(1, 17))
    assert NotificationType(15) is NotificationType.DEPLOYMENT_DELETED_SUCCESS


@pytest.mark.parametrize("member", list(MessageType))
def test_message_type_round_trip(member):
    assert message_type_from_string(str(member)) is member


def test_message_type_invalid():
    with pytest.raises(ValueError, match="invalid message type"):
        message_type_from_string("system")


def test_runner_mode_labels():
    assert str(RunnerMode(1)) == "local"
    assert str(RunnerMode(2)) == "aws"
    assert str(RunnerMode(3)) == "saas"


def test_target_cloud_round_trip():
    assert target_cloud_from_string(str(TargetCloud.AWS)) is TargetCloud.AWS


def test_target_cloud_invalid():
    with pytest.raises(ValueError, match="invalid target cloud: gcp"):
        target_cloud_from_string("gcp")