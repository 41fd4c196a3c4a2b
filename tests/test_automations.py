from dataclasses import replace

from deploykit.auth import AuthArgsV1
from deploykit.automations import (
    AutomationDataDtoV1,
    MessageDataDtoV1,
    NodeDtoV1,
    UpdateResponseArgsV1,
    UpdateResponseDtoV1,
    UpdateResponseReplyV1,
)
from deploykit.enums.automation import Entity, NodeType
from deploykit.enums.platform import MessageType, ModelType


def _automation():
    start = NodeDtoV1(id="a", children=["b"], is_start=True, node_type=NodeType.CHAT_TRIGGER)
    agent = NodeDtoV1(id="b", node_type=NodeType.CUSTOM_AGENT, goal="watch cpu")
    return AutomationDataDtoV1(
        id="auto",
        name="monitor",
        start_node_id="a",
        entity=Entity.WEB_SERVICE,
        nodes_map={"a": start, "b": agent},
        chat_history=[MessageDataDtoV1(content="hi", type=MessageType.USER)],
        llm_model_type=ModelType.GPT_4O,
    )


def test_nodes_map_lookup_follows_children():
    automation = _automation()
    start = automation.nodes_map[automation.start_node_id]
    child = automation.nodes_map[start.children[0]]
    assert child.node_type is NodeType.CUSTOM_AGENT
    assert child.goal == "watch cpu"


def test_defaults_are_empty_and_not_shared():
    first = AutomationDataDtoV1()
    second = AutomationDataDtoV1()
    first.chat_history.append(MessageDataDtoV1(content="x"))
    assert second.chat_history == []
    assert second.nodes_map == {}
    assert second.extra_help_available is False


def test_replace_keeps_other_fields():
    automation = _automation()
    renamed = replace(automation, name="other")
    assert renamed.name == "other"
    assert renamed.nodes_map == automation.nodes_map
    assert renamed != automation


def test_update_response_args_carry_auth():
    response = UpdateResponseDtoV1(job_id="job", output="done", need_help=True)
    args = UpdateResponseArgsV1(organization_id="org", token="token", responses=[response])
    assert isinstance(args, AuthArgsV1)
    assert args.organization_id == "org"
    assert args.responses[0].need_help is True


def test_reply_default_not_done():
    assert UpdateResponseReplyV1().done is False
    assert UpdateResponseReplyV1(done=True).done is True