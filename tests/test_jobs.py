import io

import pytest

from deploykit.automations import AutomationDataDtoV1
from deploykit.enums.commands import CommandType
from deploykit.enums.parameters import ParameterKey
from deploykit.jobs import (
    Logger,
    ParameterError,
    PendingJobDtoV1,
    PendingJobsDtoV1,
    Runner,
    UpsertJobHeartbeatArgsV1,
    get_parameter_value,
    set_parameter_value,
)


@pytest.mark.parametrize(
    "key, value, expected_type",
    [
        (ParameterKey.REGION, 14, int),
        (ParameterKey.REPO_NAME, "repo", str),
        (ParameterKey.ENVIRONMENT_VARIABLES, {"A": "1"}, dict),
        (ParameterKey.DOMAINS, ["a.example.com"], list),
        (ParameterKey.IS_PREVIEW, True, bool),
        (ParameterKey.AUTOMATION_DATA, AutomationDataDtoV1(id="x"), AutomationDataDtoV1),
    ],
)
def test_set_then_get_round_trip(key, value, expected_type):
    parameters = {}
    set_parameter_value(parameters, key, value)
    assert get_parameter_value(parameters, key, expected_type) == value
    assert list(parameters) == [key.key()]


def test_missing_parameter_raises():
    with pytest.raises(ParameterError, match="region is missing"):
        get_parameter_value({}, ParameterKey.REGION, int)


def test_wrong_type_raises():
    parameters = {ParameterKey.PORT.key(): "8080"}
    with pytest.raises(ParameterError, match="port is not of valid type"):
        get_parameter_value(parameters, ParameterKey.PORT, int)


def test_bool_is_not_an_int_parameter():
    parameters = {ParameterKey.PORT.key(): True}
    with pytest.raises(ParameterError):
        get_parameter_value(parameters, ParameterKey.PORT, int)


def test_set_rejects_unsupported_type():
    with pytest.raises(TypeError):
        set_parameter_value({}, ParameterKey.PORT, 1.5)


def test_runner_is_abstract():
    with pytest.raises(TypeError):
        Runner()


class _EchoRunner(Runner):
    def run(self, parameters, logs_writer):
        logs_writer.write(get_parameter_value(parameters, ParameterKey.REPO_NAME, str))
        result = dict(parameters)
        set_parameter_value(result, ParameterKey.IS_PREVIEW, True)
        return result


def test_runner_subclass_runs():
    parameters = {}
    set_parameter_value(parameters, ParameterKey.REPO_NAME, "repo")
    writer = io.StringIO()
    result = _EchoRunner().run(parameters, writer)
    assert get_parameter_value(result, ParameterKey.IS_PREVIEW, bool) is True
    assert get_parameter_value(result, ParameterKey.REPO_NAME, str) == "repo"
    assert writer.getvalue() == "repo"


class _ListLogger(Logger):
    def __init__(self):
        self.lines = []

    def log(self, messages):
        self.lines.extend(messages)


def test_logger_subclass_collects():
    logger = _ListLogger()
    logger.log(["one", "two"])
    assert logger.lines == ["one", "two"]
    with pytest.raises(TypeError):
        Logger()


def test_pending_jobs_hold_commands():
    job = PendingJobDtoV1(job_id="j", command_enums=[CommandType.CHECKOUT_REPO])
    jobs = PendingJobsDtoV1(jobs=[job])
    assert jobs.jobs[0].command_enums == [CommandType.CHECKOUT_REPO]
    assert PendingJobDtoV1().parameters == {}


def test_heartbeat_args_carry_auth_and_job():
    args = UpsertJobHeartbeatArgsV1(organization_id="org", job_id="j")
    assert (args.organization_id, args.job_id, args.token) == ("org", "j", "")