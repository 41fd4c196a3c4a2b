"""IAM policy document model with the JSON layout AWS uses."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping

__all__ = ["Principal", "Condition", "Statement", "PolicyDocument"]

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _string(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string")
    return value


def _string_list(data: Mapping[str, Any], key: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"{key} must be a list of strings")
    return list(value)


def _string_map(data: Mapping[str, Any], key: str) -> dict[str, str]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    ):
        raise ValueError(f"{key} must map strings to strings")
    return dict(value)


def _mapping(data: Mapping[str, Any], key: str) -> Mapping[str, Any] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise ValueError(f"{key} must be an object")
    return value


def _sorted(mapping: Mapping[str, str]) -> dict[str, str]:
    return dict(sorted(mapping.items()))


@dataclass
class Principal:
    service: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"Service": list(self.service)} if self.service else {}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Principal:
        return cls(service=_string_list(data, "Service"))


@dataclass
class Condition:
    arn_like: dict[str, str] = field(default_factory=dict)
    string_equals: dict[str, str] = field(default_factory=dict)
    string_like: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.arn_like:
            out["ArnLike"] = _sorted(self.arn_like)
        if self.string_equals:
            out["StringEquals"] = _sorted(self.string_equals)
        if self.string_like:
            out["StringLike"] = _sorted(self.string_like)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Condition:
        return cls(
            arn_like=_string_map(data, "ArnLike"),
            string_equals=_string_map(data, "StringEquals"),
            string_like=_string_map(data, "StringLike"),
        )


@dataclass
class Statement:
    sid: str = ""
    effect: str = ""
    principal: Principal | None = None
    action: list[str] = field(default_factory=list)
    resource: list[str] = field(default_factory=list)
    condition: Condition | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.sid:
            out["Sid"] = self.sid
        if self.effect:
            out["Effect"] = self.effect
        if self.principal is not None:
            out["Principal"] = self.principal.to_dict()
        if self.action:
            out["Action"] = list(self.action)
        if self.resource:
            out["Resource"] = list(self.resource)
        if self.condition is not None:
            out["Condition"] = self.condition.to_dict()
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Statement:
        principal = _mapping(data, "Principal")
        condition = _mapping(data, "Condition")
        return cls(
            sid=_string(data, "Sid"),
            effect=_string(data, "Effect"),
            principal=Principal.from_dict(principal) if principal is not None else None,
            action=_string_list(data, "Action"),
            resource=_string_list(data, "Resource"),
            condition=Condition.from_dict(condition) if condition is not None else None,
        )


@dataclass
class PolicyDocument:
    version: str = ""
    statement: list[Statement] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.version:
            out["Version"] = self.version
        if self.statement:
            out["Statement"] = [s.to_dict() for s in self.statement]
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PolicyDocument:
        raw = data.get("Statement")
        if raw is None:
            raw = []
        if not isinstance(raw, list):
            raise ValueError("Statement must be a list")
        statements = []
        for item in raw:
            if not isinstance(item, Mapping):
                raise ValueError("each statement must be an object")
            statements.append(Statement.from_dict(item))
        return cls(version=_string(data, "Version"), statement=statements)

    def to_json(self) -> str:
        """Compact JSON with the same escaping AWS tooling expects."""
        text = json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)
        for char, escape in _HTML_ESCAPES.items():
            text = text.replace(char, escape)
        return text

    @classmethod
    def from_json(cls, text: str) -> PolicyDocument:
        data = json.loads(text)
        if not isinstance(data, Mapping):
            raise ValueError("policy document must be a JSON object")
        return cls.from_dict(data)