"""Relational database engines."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["Engine"]


class Engine(IntEnum):
    """A database engine offered on RDS."""

    POSTGRES = 1
    MYSQL = 2
    MARIADB = 3

    def __str__(self) -> str:
        return _ENGINE_IDS[self]

    def display_name(self) -> str:
        """Product name, such as ``PostgreSQL``."""
        return _ENGINE_NAMES[self]

    def enable_performance_insights(self) -> bool:
        return self is Engine.POSTGRES

    def engine_lifecycle_support(self) -> str | None:
        """Extended-support setting, or None where the engine has none."""
        if self in (Engine.POSTGRES, Engine.MYSQL):
            return "open-source-rds-extended-support-disabled"
        return None

    def license_model(self) -> str | None:
        if self is Engine.POSTGRES:
            return "postgresql-license"
        if self in (Engine.MYSQL, Engine.MARIADB):
            return "general-public-license"
        return None


_ENGINE_IDS = {
    Engine.POSTGRES: "postgres",
    Engine.MYSQL: "mysql",
    Engine.MARIADB: "mariadb",
}

_ENGINE_NAMES = {
    Engine.POSTGRES: "PostgreSQL",
    Engine.MYSQL: "MySQL",
    Engine.MARIADB: "MariaDB",
}