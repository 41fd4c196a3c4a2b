"""Automation entities, node types, tool types and trigger types."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "Entity",
    "NodeType",
    "ToolType",
    "TriggerType",
    "node_type_from_key",
    "tool_type_from_node_type",
    "trigger_type_from_node_type",
]


class Entity(IntEnum):
    """Kind of object an automation works on."""

    WEB_SERVICE = 1
    STATIC_SITE = 2
    PRIVATE_SERVICE = 3
    ENVIRONMENT = 4
    DATABASE = 5

    def __str__(self) -> str:
        return _ENTITY_LABELS[self]

    def tool_types(self) -> list[ToolType]:
        """Tool types this entity can use."""
        return list(_ENTITY_TOOLS.get(self, ()))

    def is_service_type(self) -> bool:
        return self in (Entity.PRIVATE_SERVICE, Entity.WEB_SERVICE, Entity.STATIC_SITE)

    def is_backend_service_type(self) -> bool:
        return self in (Entity.PRIVATE_SERVICE, Entity.WEB_SERVICE)

    def is_database_type(self) -> bool:
        return self is Entity.DATABASE


class NodeType(IntEnum):
    """Kind of node in an automation graph."""

    CUSTOM_AGENT = 1
    SEND_EMAIL_TOOL = 2
    CHAT_TRIGGER = 3
    GET_CPU_MEMORY_USAGE_TOOL = 4
    GET_APPLICATION_LOGS_TOOL = 5

    def __str__(self) -> str:
        return _NODE_TYPE_LABELS[self]

    def is_tool_type(self) -> bool:
        return self in _NODE_TO_TOOL

    def is_trigger_type(self) -> bool:
        return self in _NODE_TO_TRIGGER

    def is_agent_type(self) -> bool:
        return self is NodeType.CUSTOM_AGENT


class ToolType(IntEnum):
    """Kind of tool that can be run on an entity."""

    GET_CPU_MEMORY_USAGE = 1
    SEND_EMAIL = 2
    GET_APPLICATION_LOGS = 3

    def __str__(self) -> str:
        return _TOOL_TYPE_LABELS[self]

    def entities(self) -> list[Entity]:
        """Entities that can run this tool type."""
        return list(_TOOL_ENTITIES.get(self, ()))


class TriggerType(IntEnum):
    """Kind of event that starts an automation."""

    CHAT = 1

    def __str__(self) -> str:
        return _TRIGGER_TYPE_LABELS[self]


_ENTITY_LABELS = {
    Entity.WEB_SERVICE: "Web service automation",
    Entity.STATIC_SITE: "Static site automation",
    Entity.PRIVATE_SERVICE: "Private service automation",
    Entity.ENVIRONMENT: "Environment automation",
    Entity.DATABASE: "Database automation",
}

_ENTITY_TOOLS = {
    Entity.WEB_SERVICE: (ToolType.GET_CPU_MEMORY_USAGE,),
    Entity.PRIVATE_SERVICE: (ToolType.GET_CPU_MEMORY_USAGE,),
}

_NODE_TYPE_KEYS = {
    "customAgent": NodeType.CUSTOM_AGENT,
    "chatTrigger": NodeType.CHAT_TRIGGER,
    "sendEmailTool": NodeType.SEND_EMAIL_TOOL,
    "getCpuMemoryUsageTool": NodeType.GET_CPU_MEMORY_USAGE_TOOL,
    "getApplicationLogsTool": NodeType.GET_APPLICATION_LOGS_TOOL,
}

_NODE_TYPE_LABELS = {
    NodeType.CUSTOM_AGENT: "Custom Agent",
    NodeType.SEND_EMAIL_TOOL: "Email Tool",
    NodeType.CHAT_TRIGGER: "Chat Trigger",
    NodeType.GET_CPU_MEMORY_USAGE_TOOL: "CPU Memory Usage Tool",
    NodeType.GET_APPLICATION_LOGS_TOOL: "Application Logs Tool",
}

_TOOL_TYPE_LABELS = {
    ToolType.GET_CPU_MEMORY_USAGE: "GetCPUMemoryUsage",
    ToolType.SEND_EMAIL: "Email",
    ToolType.GET_APPLICATION_LOGS: "GetApplicationLogs",
}

_TOOL_ENTITIES = {
    ToolType.GET_CPU_MEMORY_USAGE: (Entity.WEB_SERVICE, Entity.PRIVATE_SERVICE),
    ToolType.GET_APPLICATION_LOGS: (Entity.WEB_SERVICE, Entity.PRIVATE_SERVICE),
}

_NODE_TO_TOOL = {
    NodeType.SEND_EMAIL_TOOL: ToolType.SEND_EMAIL,
    NodeType.GET_CPU_MEMORY_USAGE_TOOL: ToolType.GET_CPU_MEMORY_USAGE,
    NodeType.GET_APPLICATION_LOGS_TOOL: ToolType.GET_APPLICATION_LOGS,
}

_TRIGGER_TYPE_LABELS = {
    TriggerType.CHAT: "Chat",
}

_NODE_TO_TRIGGER = {
    NodeType.CHAT_TRIGGER: TriggerType.CHAT,
}


def node_type_from_key(key: str) -> NodeType:
    """Return the node type named by a graph key such as ``customAgent``."""
    try:
        return _NODE_TYPE_KEYS[key]
    except KeyError:
        raise ValueError(f"unknown node type {key}") from None


def tool_type_from_node_type(node_type: NodeType) -> ToolType:
    """Return the tool type behind a tool node."""
    try:
        return _NODE_TO_TOOL[node_type]
    except KeyError:
        raise ValueError("node type is not of tool type") from None


def trigger_type_from_node_type(node_type: NodeType) -> TriggerType:
    """Return the trigger type behind a trigger node."""
    try:
        return _NODE_TO_TRIGGER[node_type]
    except KeyError:
        raise ValueError("node type is not of trigger type") from None