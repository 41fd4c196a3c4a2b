"""VPC upsert messages and lookups built from them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from deploykit.auth import FALSE, TRUE, AuthArgsV1, AuthArgsV2
from deploykit.enums.platform import VpcType
from deploykit.enums.region import Region

__all__ = [
    "SubnetDtoV1",
    "RouteTableDtoV1",
    "NatGatewayDtoV1",
    "DefaultSecurityIngressRuleDtoV1",
    "UpsertVpcDtoV1",
    "UpsertVpcsArgsV1",
    "UpsertVpcsReplyV1",
    "UpsertVpcsArgsV2",
    "subnets_map",
    "private_subnet_ids",
    "public_subnet_ids",
    "route_tables_map",
    "nat_gateways_map",
    "allocations_map",
]


@dataclass
class SubnetDtoV1:
    name: str = ""
    id: str = ""
    cidr: str = ""
    az: str = ""
    is_private: str = ""


@dataclass
class RouteTableDtoV1:
    name: str = ""
    id: str = ""
    is_private: str = ""


@dataclass
class NatGatewayDtoV1:
    name: str = ""
    id: str = ""
    elastic_ip_allocation_name: str = ""
    elastic_ip_allocation_id: str = ""


@dataclass
class DefaultSecurityIngressRuleDtoV1:
    id: str = ""


@dataclass
class UpsertVpcDtoV1:
    type: VpcType | None = None
    region: Region | None = None
    vpc_id: str = ""
    vpc_cidr: str = ""
    internet_gateway_id: str = ""
    nat_gateways: list[NatGatewayDtoV1] = field(default_factory=list)
    subnets: list[SubnetDtoV1] = field(default_factory=list)
    route_tables: list[RouteTableDtoV1] = field(default_factory=list)
    default_security_ingress_rules: list[DefaultSecurityIngressRuleDtoV1] = field(default_factory=list)
    default_security_group_id: str = ""


@dataclass
class UpsertVpcsArgsV1(AuthArgsV1):
    vpcs: list[UpsertVpcDtoV1] = field(default_factory=list)


@dataclass
class UpsertVpcsReplyV1:
    done: bool = False


@dataclass
class UpsertVpcsArgsV2(AuthArgsV2):
    vpcs: list[UpsertVpcDtoV1] = field(default_factory=list)


def subnets_map(subnets: Iterable[SubnetDtoV1]) -> dict[str, str]:
    """Subnet ids by name; a later duplicate name wins."""
    return {subnet.name: subnet.id for subnet in subnets}


def private_subnet_ids(subnets: Iterable[SubnetDtoV1]) -> list[str]:
    """Ids of subnets flagged private, in order."""
    return [subnet.id for subnet in subnets if subnet.is_private == TRUE]


def public_subnet_ids(subnets: Iterable[SubnetDtoV1]) -> list[str]:
    """Ids of subnets flagged public, in order."""
    return [subnet.id for subnet in subnets if subnet.is_private == FALSE]


def route_tables_map(route_tables: Iterable[RouteTableDtoV1]) -> dict[str, str]:
    """Route table ids by name."""
    return {table.name: table.id for table in route_tables}


def nat_gateways_map(nat_gateways: Iterable[NatGatewayDtoV1]) -> dict[str, str]:
    """NAT gateway ids by name."""
    return {gateway.name: gateway.id for gateway in nat_gateways}


def allocations_map(nat_gateways: Iterable[NatGatewayDtoV1]) -> dict[str, str]:
    """Elastic IP allocation ids by allocation name."""
    return {
        gateway.elastic_ip_allocation_name: gateway.elastic_ip_allocation_id
        for gateway in nat_gateways
    }