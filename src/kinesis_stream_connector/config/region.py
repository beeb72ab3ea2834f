from enum import Enum


class Region(str, Enum):
    """AWS regions a stream can live in."""

    GOV_CLOUD = "us-gov-west-1"
    US_EAST_1 = "us-east-1"
    US_EAST_2 = "us-east-2"
    US_WEST_1 = "us-west-1"
    US_WEST_2 = "us-west-2"
    CA_CENTRAL_1 = "ca-central-1"
    SA_EAST_1 = "sa-east-1"
    EU_WEST_1 = "eu-west-1"
    EU_WEST_2 = "eu-west-2"
    EU_WEST_3 = "eu-west-3"
    EU_CENTRAL_1 = "eu-central-1"
    EU_NORTH_1 = "eu-north-1"
    AP_SOUTH_1 = "ap-south-1"
    AP_SOUTHEAST_1 = "ap-southeast-1"
    AP_SOUTHEAST_2 = "ap-southeast-2"
    AP_NORTHEAST_1 = "ap-northeast-1"
    AP_NORTHEAST_2 = "ap-northeast-2"
    CN_NORTH_1 = "cn-north-1"

    @classmethod
    def from_name(cls, name: str) -> "Region":
        """Resolve a region from its member name ("US_EAST_1") or id ("us-east-1").

        Raises:
            ValueError: If the name matches no known region.
        """
        if isinstance(name, cls):
            return name
        try:
            return cls[name]
        except KeyError:
            pass
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unknown region: {name!r}") from None


DEFAULT_REGION = Region.US_WEST_2
