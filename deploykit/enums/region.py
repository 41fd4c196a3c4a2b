"""Cloud regions a deployment can target."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["Region", "region_from_string"]


class Region(IntEnum):
    """An AWS region."""

    EU_WEST_1 = 1
    AP_SOUTH_1 = 2
    AP_NORTHEAST_1 = 3
    AP_NORTHEAST_2 = 4
    AP_NORTHEAST_3 = 5
    AP_SOUTHEAST_1 = 6
    AP_SOUTHEAST_2 = 7
    CA_CENTRAL_1 = 8
    EU_CENTRAL_1 = 9
    EU_NORTH_1 = 10
    EU_WEST_2 = 11
    EU_WEST_3 = 12
    SA_EAST_1 = 13
    US_EAST_1 = 14
    US_EAST_2 = 15
    US_WEST_1 = 16
    US_WEST_2 = 17
    AF_SOUTH_1 = 18
    AP_EAST_1 = 19
    AP_SOUTH_2 = 20
    AP_SOUTHEAST_3 = 21
    AP_SOUTHEAST_4 = 22
    EU_CENTRAL_2 = 23
    EU_SOUTH_1 = 24
    EU_SOUTH_2 = 25
    ME_CENTRAL_1 = 26
    ME_SOUTH_1 = 27

    def __str__(self) -> str:
        return _CODES[self]

    def display_name(self) -> str:
        """Location and code, such as ``Europe(Ireland) eu-west-1``."""
        return _NAMES[self]


_CODES = {
    Region.EU_WEST_1: "eu-west-1",
    Region.AP_SOUTH_1: "ap-south-1",
    Region.AP_NORTHEAST_1: "ap-northeast-1",
    Region.AP_NORTHEAST_2: "ap-northeast-2",
    Region.AP_NORTHEAST_3: "ap-northeast-3",
    Region.AP_SOUTHEAST_1: "ap-southeast-1",
    Region.AP_SOUTHEAST_2: "ap-southeast-2",
    Region.CA_CENTRAL_1: "ca-central-1",
    Region.EU_CENTRAL_1: "eu-central-1",
    Region.EU_NORTH_1: "eu-north-1",
    Region.EU_WEST_2: "eu-west-2",
    Region.EU_WEST_3: "eu-west-3",
    Region.SA_EAST_1: "sa-east-1",
    Region.US_EAST_1: "us-east-1",
    Region.US_EAST_2: "us-east-2",
    Region.US_WEST_1: "us-west-1",
    Region.US_WEST_2: "us-west-2",
    Region.AF_SOUTH_1: "af-south-1",
    Region.AP_EAST_1: "ap-east-1",
    Region.AP_SOUTH_2: "ap-south-2",
    Region.AP_SOUTHEAST_3: "ap-southeast-3",
    Region.AP_SOUTHEAST_4: "ap-southeast-4",
    Region.EU_CENTRAL_2: "eu-central-2",
    Region.EU_SOUTH_1: "eu-south-1",
    Region.EU_SOUTH_2: "eu-south-2",
    Region.ME_CENTRAL_1: "me-central-1",
    Region.ME_SOUTH_1: "me-south-1",
}

_NAMES = {
    Region.EU_WEST_1: "Europe(Ireland) eu-west-1",
    Region.AP_SOUTH_1: "Asia Pacific(Mumbai) ap-south-1",
    Region.AP_NORTHEAST_1: "Asia Pacific(Tokyo) ap-northeast-1",
    Region.AP_NORTHEAST_2: "Asia Pacific(Seoul) ap-northeast-2",
    Region.AP_NORTHEAST_3: "Asia Pacific(Osaka) ap-northeast-3",
    Region.AP_SOUTHEAST_1: "Asia Pacific(Singapore) ap-southeast-1",
    Region.AP_SOUTHEAST_2: "Asia Pacific(Sydney) ap-southeast-2",
    Region.CA_CENTRAL_1: "Canada(Central) ca-central-1",
    Region.EU_CENTRAL_1: "Europe(Frankfurt) eu-central-1",
    Region.EU_NORTH_1: "Europe(Stockholm) eu-north-1",
    Region.EU_WEST_2: "Europe(London) eu-west-2",
    Region.EU_WEST_3: "Europe(Paris) eu-west-3",
    Region.SA_EAST_1: "South America(Sao Paulo) sa-east-1",
    Region.US_EAST_1: "US East(N. Virginia) us-east-1",
    Region.US_EAST_2: "US East(Ohio) us-east-2",
    Region.US_WEST_1: "US West(N. California) us-west-1",
    Region.US_WEST_2: "US West(Oregon) us-west-2",
    Region.AF_SOUTH_1: "Africa(Cape Town) af-south-1",
    Region.AP_EAST_1: "Asia Pacific(Hong Kong) ap-east-1",
    Region.AP_SOUTH_2: "Asia Pacific(Hyderabad) ap-south-2",
    Region.AP_SOUTHEAST_3: "Asia Pacific(Jakarta) ap-southeast-3",
    Region.AP_SOUTHEAST_4: "Asia Pacific(Melbourne) ap-southeast-4",
    Region.EU_CENTRAL_2: "Europe(Zurich) eu-central-2",
    Region.EU_SOUTH_1: "Europe(Milan) eu-south-1",
    Region.EU_SOUTH_2: "Asia Pacific(Spain) eu-south-2",
    Region.ME_CENTRAL_1: "Middle East(UAE) me-central-1",
    Region.ME_SOUTH_1: "Middle East(Bahrain) me-south-1",
}

_BY_CODE = {code: region for region, code in _CODES.items()}


def region_from_string(text: str) -> Region:
    """Return the region for a code such as ``us-east-1``."""
    try:
        return _BY_CODE[text]
    except KeyError:
        raise ValueError(f"error finding type for string: {text}") from None