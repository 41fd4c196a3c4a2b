# deploykit

Building blocks shared by a deployment runner and the control plane it
reports to: enumerations for commands, regions, runtimes, statuses and
automation graphs; the request and reply records exchanged between the
two; job parameter helpers; VPC lookups; and a routine that keeps a
runner's inline IAM policy up to date.

## Install

```
pip install deploykit
```

For running the tests:

```
pip install "deploykit[test]"
pytest
```

## Enumerations

All enumerations are `IntEnum`s under `deploykit.enums`; their `str()`
gives the label the control plane displays.

```python
from deploykit.enums.region import Region, region_from_string
from deploykit.enums.deployment import CpuMemory, Runtime, rds_instance_from_name
from deploykit.enums.commands import CommandType

region = region_from_string("eu-west-1")
str(region)              # "eu-west-1"
region.display_name()    # "Europe(Ireland) eu-west-1"

CpuMemory.CPU_1_MEM_2.cpu()         # "1 vCPU"
str(CpuMemory.CPU_1_MEM_2)          # "1 vCPU, 2 GB"
Runtime.DOCKER.build_command()      # CommandType.BUILD_DOCKER_IMAGE
rds_instance_from_name("db.t3.micro").supports_encryption()   # True
```

Other modules: `enums.automation` (entities, node, tool and trigger
types), `enums.platform` (build status, runner mode, target cloud,
message type and more), `enums.rds` (database engines),
`enums.iam_policy` (`PolicyType.actions()`), `enums.parameters`
(`ParameterKey`) and `enums.thread`, whose `thread_from_page_context`
turns `"service/<object id>"` into a `bson.ObjectId` and
`ThreadType.SERVICE`.

Lookups that cannot be resolved raise `ValueError`.

## Job parameters

Parameters travel as a dictionary keyed by `ParameterKey.key()`, the
decimal string of the key's value:

```python
from deploykit.enums.parameters import ParameterKey
from deploykit.jobs import get_parameter_value, set_parameter_value

parameters = {}
set_parameter_value(parameters, ParameterKey.REGION, 18)
get_parameter_value(parameters, ParameterKey.REGION, int)   # 18
```

A missing parameter, or one of the wrong type, raises `ParameterError`.
`deploykit.jobs` also defines the `Runner` and `Logger` abstract bases
and the job request and reply records.

## Messages

`deploykit.auth`, `deploykit.automations`, `deploykit.jobs`,
`deploykit.vpcs` and `deploykit.messages` hold plain dataclasses for the
requests and replies: builds, certificates, clusters, deployments, job
logs, notifications, pings and previews. `deploykit.auth` also defines
the shared error classes, all subclasses of `KitError`.

## VPC helpers

```python
from deploykit.vpcs import SubnetDtoV1, private_subnet_ids, subnets_map

subnets = [SubnetDtoV1(name="a", id="subnet-1", is_private="true")]
subnets_map(subnets)          # {"a": "subnet-1"}
private_subnet_ids(subnets)   # ["subnet-1"]
```

## IAM policies

`deploykit.iam.policy_schema.PolicyDocument` reads and writes policy
documents as JSON, dropping empty fields. `deploykit.iam.policies.merge_policy_actions`
adds the actions a `PolicyType` needs to the statement the runner
manages, and `add_aws_policy_for_deployment_runner` fetches, merges and
writes back the runner's inline policy, then waits `settle_seconds`
after an update.

## What this package does not do

It does not create cloud clients or hold credentials. The IAM routine
works through a client you pass in that offers `get_role_policy` and
`put_role_policy` with the AWS parameter names (the `IamClient`
protocol). It does not talk to the control plane either: the message
records are data only.

## Random strings

```python
from deploykit.utils import generate_random_string

generate_random_string(16)   # 16 characters from 0-9, A-Z and a-z
```