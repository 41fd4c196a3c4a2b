"""Deployment sizing, database instance classes, deletion states and runtimes."""

from __future__ import annotations

from enum import IntEnum

from deploykit.enums.commands import CommandType

__all__ = [
    "CpuMemory",
    "RdsInstance",
    "DeletionState",
    "Runtime",
    "rds_instance_from_name",
    "runtimes",
]


class CpuMemory(IntEnum):
    """A Fargate CPU and memory combination."""

    CPU_025_MEM_05 = 1
    CPU_025_MEM_1 = 2
    CPU_025_MEM_2 = 3

    CPU_05_MEM_1 = 4
    CPU_05_MEM_2 = 5
    CPU_05_MEM_3 = 6
    CPU_05_MEM_4 = 7

    CPU_1_MEM_2 = 8
    CPU_1_MEM_3 = 9
    CPU_1_MEM_4 = 10
    CPU_1_MEM_5 = 11
    CPU_1_MEM_6 = 12
    CPU_1_MEM_7 = 13
    CPU_1_MEM_8 = 14

    CPU_2_MEM_4 = 15
    CPU_2_MEM_5 = 16
    CPU_2_MEM_6 = 17
    CPU_2_MEM_7 = 18
    CPU_2_MEM_8 = 19
    CPU_2_MEM_9 = 20
    CPU_2_MEM_10 = 21
    CPU_2_MEM_11 = 22
    CPU_2_MEM_12 = 23
    CPU_2_MEM_13 = 24
    CPU_2_MEM_14 = 25
    CPU_2_MEM_15 = 26
    CPU_2_MEM_16 = 27

    CPU_4_MEM_8 = 28
    CPU_4_MEM_9 = 29
    CPU_4_MEM_10 = 30
    CPU_4_MEM_11 = 31
    CPU_4_MEM_12 = 32
    CPU_4_MEM_13 = 33
    CPU_4_MEM_14 = 34
    CPU_4_MEM_15 = 35
    CPU_4_MEM_16 = 36
    CPU_4_MEM_17 = 37
    CPU_4_MEM_18 = 38
    CPU_4_MEM_19 = 39
    CPU_4_MEM_20 = 40
    CPU_4_MEM_21 = 41
    CPU_4_MEM_22 = 42
    CPU_4_MEM_23 = 43
    CPU_4_MEM_24 = 44
    CPU_4_MEM_25 = 45
    CPU_4_MEM_26 = 46
    CPU_4_MEM_27 = 47
    CPU_4_MEM_28 = 48
    CPU_4_MEM_29 = 49
    CPU_4_MEM_30 = 50

    def __str__(self) -> str:
        cpu, memory = _CPU_MEMORY[self]
        return f"{cpu}, {memory}"

    def cpu(self) -> str:
        """The vCPU part, such as ``.25 vCPU``."""
        return _CPU_MEMORY[self][0]

    def memory(self) -> str:
        """The memory part, such as ``0.5 GB``."""
        return _CPU_MEMORY[self][1]


_CPU_MEMORY_SPECS = (
    [(".25 vCPU", "0.5 GB"), (".25 vCPU", "1 GB"), (".25 vCPU", "2 GB")]
    + [(".5 vCPU", f"{gb} GB") for gb in range(1, 5)]
    + [("1 vCPU", f"{gb} GB") for gb in range(2, 9)]
    + [("2 vCPU", f"{gb} GB") for gb in range(4, 17)]
    + [("4 vCPU", f"{gb} GB") for gb in range(8, 31)]
)

_CPU_MEMORY = dict(zip(CpuMemory, _CPU_MEMORY_SPECS, strict=True))


class RdsInstance(IntEnum):
    """An RDS database instance class."""

    T2_MICRO = 1
    T3_MICRO = 2
    T2_SMALL = 3
    T3_SMALL = 4
    T2_MEDIUM = 5
    T3_MEDIUM = 6
    T2_LARGE = 7
    T3_LARGE = 8
    M5_LARGE = 9
    T2_XLARGE = 10
    T3_XLARGE = 11
    M5_XLARGE = 12
    T2_2XLARGE = 13
    T3_2XLARGE = 14
    M5_2XLARGE = 15
    M5_4XLARGE = 16
    M5_8XLARGE = 17
    M5_12XLARGE = 18
    M5_16XLARGE = 19
    M5_24XLARGE = 20

    def description(self) -> str:
        """Human-readable size; empty for classes no longer offered."""
        return _RDS_DESCRIPTIONS.get(self, "")

    def instance(self) -> str:
        """The instance class name, such as ``db.t3.micro``."""
        return _RDS_INSTANCE_NAMES[self]

    def supports_encryption(self) -> bool:
        return self is not RdsInstance.T2_MICRO


_RDS_DESCRIPTIONS = {
    RdsInstance.T3_MICRO: "2 vCPU, 1 GB (db.t3.micro)",
    RdsInstance.T3_SMALL: "2 vCPU, 2 GB (db.t3.small)",
    RdsInstance.T3_MEDIUM: "2 vCPU, 4 GB (db.t3.medium)",
    RdsInstance.T3_LARGE: "2 vCPU, 8 GB (db.t3.large)",
    RdsInstance.M5_LARGE: "2 vCPU, 8 GB (db.m5.large)",
    RdsInstance.T2_XLARGE: "4 vCPU, 16 GB (db.t2.xlarge)",
    RdsInstance.T3_XLARGE: "4 vCPU, 16 GB (db.t3.xlarge)",
    RdsInstance.M5_XLARGE: "4 vCPU, 16 GB (db.m5.xlarge)",
    RdsInstance.T2_2XLARGE: "8 vCPU, 32 GB (db.t2.2xlarge)",
    RdsInstance.T3_2XLARGE: "8 vCPU, 32 GB (db.t3.2xlarge)",
    RdsInstance.M5_2XLARGE: "8 vCPU, 32 GB (db.m5.2xlarge)",
    RdsInstance.M5_4XLARGE: "16 vCPU, 64 GB (db.m5.4xlarge)",
    RdsInstance.M5_8XLARGE: "32 vCPU, 128 GB (db.m5.8xlarge)",
    RdsInstance.M5_12XLARGE: "48 vCPU, 192 GB (db.m5.12xlarge)",
    RdsInstance.M5_16XLARGE: "64 vCPU, 256 GB (db.m5.16xlarge)",
    RdsInstance.M5_24XLARGE: "96 vCPU, 384 GB (db.m5.24xlarge)",
}

_RDS_INSTANCE_NAMES = {
    RdsInstance.T2_MICRO: "db.t2.micro",
    RdsInstance.T3_MICRO: "db.t3.micro",
    RdsInstance.T2_SMALL: "db.t2.small",
    RdsInstance.T3_SMALL: "db.t3.small",
    RdsInstance.T2_MEDIUM: "db.t2.medium",
    RdsInstance.T3_MEDIUM: "db.t3.medium",
    RdsInstance.T2_LARGE: "db.t2.large",
    RdsInstance.T3_LARGE: "db.t3.large",
    RdsInstance.M5_LARGE: "db.m5.large",
    RdsInstance.T2_XLARGE: "db.t2.xlarge",
    RdsInstance.T3_XLARGE: "db.t3.xlarge",
    RdsInstance.M5_XLARGE: "db.m5.xlarge",
    RdsInstance.T2_2XLARGE: "db.t2.2xlarge",
    RdsInstance.T3_2XLARGE: "db.t3.2xlarge",
    RdsInstance.M5_2XLARGE: "db.m5.2xlarge",
    RdsInstance.M5_4XLARGE: "db.m5.4xlarge",
    RdsInstance.M5_8XLARGE: "db.m5.8xlarge",
    RdsInstance.M5_12XLARGE: "db.m5.12xlarge",
    RdsInstance.M5_16XLARGE: "db.m5.16xlarge",
    RdsInstance.M5_24XLARGE: "db.m5.24xlarge",
}

_RDS_BY_NAME = {name: member for member, name in _RDS_INSTANCE_NAMES.items()}


def rds_instance_from_name(name: str) -> RdsInstance:
    """Return the instance class for a name such as ``db.m5.large``."""
    try:
        return _RDS_BY_NAME[name]
    except KeyError:
        raise ValueError(f"unknown rds instance class: {name}") from None


class DeletionState(IntEnum):
    """Progress of deleting a deployment."""

    NOT_STARTED = 0
    IN_PROCESS = 1
    DONE = 2
    UNDONE = 3  # deletion aborted, e.g. a pull request was reopened


class Runtime(IntEnum):
    """Language runtime an application is built for."""

    DOCKER = 1
    ELIXIR = 2
    GO = 3
    NODE = 4
    PYTHON3 = 5
    RUBY = 6
    RUST = 7

    def __str__(self) -> str:
        return _RUNTIME_LABELS[self]

    def build_command(self) -> CommandType:
        """The command that builds an image for this runtime."""
        if self is Runtime.DOCKER:
            return CommandType.BUILD_DOCKER_IMAGE
        return CommandType.BUILD_NIXPACKS_IMAGE


_RUNTIME_LABELS = {
    Runtime.DOCKER: "Docker",
    Runtime.ELIXIR: "Elixir",
    Runtime.GO: "Go",
    Runtime.NODE: "Node",
    Runtime.PYTHON3: "Python",
    Runtime.RUBY: "Ruby",
    Runtime.RUST: "Rust",
}


def runtimes() -> list[Runtime]:
    """Runtimes offered to users, in display order."""
    return [Runtime.DOCKER, Runtime.GO, Runtime.NODE, Runtime.PYTHON3, Runtime.RUST]