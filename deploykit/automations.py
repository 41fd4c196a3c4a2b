"""Automation graphs and the responses a runner reports for them."""

from __future__ import annotations

from dataclasses import dataclass, field

from deploykit.auth import AuthArgsV1
from deploykit.enums.automation import Entity, NodeType, ToolType, TriggerType
from deploykit.enums.platform import MessageType, ModelType

__all__ = [
    "NodeDtoV1",
    "MessageDataDtoV1",
    "AutomationDataDtoV1",
    "UpdateResponseDtoV1",
    "UpdateResponseArgsV1",
    "UpdateResponseReplyV1",
]


@dataclass
class NodeDtoV1:
    """One node of an automation graph."""

    id: str = ""
    children: list[str] = field(default_factory=list)
    is_start: bool = False
    node_type: NodeType | None = None
    goal: str = ""
    backstory: str = ""
    tool_type: ToolType | None = None
    trigger_type: TriggerType | None = None
    llm_model_type: ModelType | None = None


@dataclass
class MessageDataDtoV1:
    """A chat message in an automation's history."""

    content: str = ""
    type: MessageType | None = None


@dataclass
class AutomationDataDtoV1:
    """Everything a runner needs to execute an automation."""

    id: str = ""
    name: str = ""
    goal: str = ""
    start_node_id: str = ""
    entity: Entity | None = None
    nodes_map: dict[str, NodeDtoV1] = field(default_factory=dict)
    chat_history: list[MessageDataDtoV1] = field(default_factory=list)
    llm_model_type: ModelType | None = None
    openai_api_key: str = ""
    openai_base_url: str = ""
    extra_help_available: bool = False


@dataclass
class UpdateResponseDtoV1:
    """Output of an automation job."""

    job_id: str = ""
    output: str = ""
    need_help: bool = False


@dataclass
class UpdateResponseArgsV1(AuthArgsV1):
    responses: list[UpdateResponseDtoV1] = field(default_factory=list)


@dataclass
class UpdateResponseReplyV1:
    done: bool = False