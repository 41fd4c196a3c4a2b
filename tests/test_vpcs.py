from deploykit.auth import FALSE, TRUE
from deploykit.vpcs import (
    NatGatewayDtoV1,
    RouteTableDtoV1,
    SubnetDtoV1,
    UpsertVpcDtoV1,
    UpsertVpcsArgsV2,
    allocations_map,
    nat_gateways_map,
    private_subnet_ids,
    public_subnet_ids,
    route_tables_map,
    subnets_map,
)

SUBNETS = [
    SubnetDtoV1(name="priv-a", id="subnet-1", is_private=TRUE),
    SubnetDtoV1(name="pub-a", id="subnet-2", is_private=FALSE),
    SubnetDtoV1(name="priv-b", id="subnet-3", is_private=TRUE),
    SubnetDtoV1(name="odd", id="subnet-4", is_private="maybe"),
]

GATEWAYS = [
    NatGatewayDtoV1(name="nat-a", id="nat-1", elastic_ip_allocation_name="eip-a", elastic_ip_allocation_id="alloc-1"),
    NatGatewayDtoV1(name="nat-b", id="nat-2", elastic_ip_allocation_name="eip-b", elastic_ip_allocation_id="alloc-2"),
]


def test_subnets_map():
    assert subnets_map(SUBNETS) == {
        "priv-a": "subnet-1",
        "pub-a": "subnet-2",
        "priv-b": "subnet-3",
        "odd": "subnet-4",
    }


def test_subnets_map_later_duplicate_wins():
    subnets = [SubnetDtoV1(name="x", id="first"), SubnetDtoV1(name="x", id="second")]
    assert subnets_map(subnets) == {"x": "second"}


def test_private_and_public_ids_partition_flagged_subnets():
    assert private_subnet_ids(SUBNETS) == ["subnet-1", "subnet-3"]
    assert public_subnet_ids(SUBNETS) == ["subnet-2"]


def test_empty_inputs():
    assert private_subnet_ids([]) == []
    assert public_subnet_ids([]) == []
    assert subnets_map([]) == {}


def test_route_tables_map():
    tables = [RouteTableDtoV1(name="rt-a", id="rtb-1"), RouteTableDtoV1(name="rt-b", id="rtb-2")]
    assert route_tables_map(tables) == {"rt-a": "rtb-1", "rt-b": "rtb-2"}


def test_nat_and_allocation_maps():
    assert nat_gateways_map(GATEWAYS) == {"nat-a": "nat-1", "nat-b": "nat-2"}
    assert allocations_map(GATEWAYS) == {"eip-a": "alloc-1", "eip-b": "alloc-2"}


def test_upsert_args_v2_carry_vpcs_and_auth():
    vpc = UpsertVpcDtoV1(vpc_id="vpc-1", subnets=list(SUBNETS))
    args = UpsertVpcsArgsV2(runner_region="us-east-1", vpcs=[vpc])
    assert args.runner_region == "us-east-1"
    assert private_subnet_ids(args.vpcs[0].subnets) == ["subnet-1", "subnet-3"]
    assert UpsertVpcDtoV1().nat_gateways == []