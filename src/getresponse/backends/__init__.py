"""GetResponse backends module."""

from dataclasses import dataclass, field, fields


def _to_json(value):
    """Convert a value to its JSON-ready representation."""
    if isinstance(value, list):
        return [_to_json(item) for item in value]
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


def _check_type(key, value, kind):
    """Ensure a decoded JSON value has the expected type."""
    # bool is an int subclass
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise TypeError(f"{key!r} must be of type {kind.__name__}, got {type(value).__name__}")
    return value


class JSONRecord:
    """
    Mixin mapping dataclass attributes to the camelCase names of the API.

    Each field declares its JSON name in its metadata, along with either the
    type of its values ("kind") or the record class of nested objects
    ("record"), and whether it holds an array ("many"). Fields set to None are
    left out of the serialized payload, unknown keys are ignored on decoding.
    """

    def to_dict(self) -> dict:
        """Serialize the record, omitting unset fields."""
        data = {}
        for record_field in fields(self):
            value = getattr(self, record_field.name)
            if value is None:
                continue
            data[record_field.metadata["json"]] = _to_json(value)
        return data

    @classmethod
    def from_dict(cls, data: dict):
        """
        Build the record from an API payload.

        Raises:
            TypeError: If the payload or one of its values has an unexpected type

        """
        if not isinstance(data, dict):
            raise TypeError(f"{cls.__name__} payload must be an object, got {type(data).__name__}")

        kwargs = {}
        for record_field in fields(cls):
            metadata = record_field.metadata
            key = metadata["json"]
            if key not in data or data[key] is None:
                continue
            value = data[key]
            if metadata["many"]:
                items = _check_type(key, value, list)
            else:
                items = [value]

            record = metadata.get("record")
            if record is not None:
                items = [record.from_dict(item) for item in items]
            else:
                items = [_check_type(key, item, metadata["kind"]) for item in items]
            kwargs[record_field.name] = items if metadata["many"] else items[0]
        return cls(**kwargs)


def _json(name, kind=str, record=None, many=False, **kwargs):
    metadata = {"json": name, "kind": kind, "many": many}
    if record is not None:
        metadata["record"] = record
    return field(metadata=metadata, **kwargs)


@dataclass
class Campaign(JSONRecord):
    """A campaign contacts belong to."""

    campaign_id: str = _json("campaignId", default="")
    name: str | None = _json("name", default=None)
    href: str | None = _json("href", default=None)

    def to_dict(self) -> dict:
        """Serialize the campaign, campaignId is always sent."""
        data = super().to_dict()
        data["campaignId"] = self.campaign_id
        if not self.name:
            data.pop("name", None)
        return data


@dataclass
class CustomField(JSONRecord):
    """Values of a custom field attached to a contact."""

    custom_field_id: str = _json("customFieldId", default="")
    value: list[str] = _json("value", many=True, default_factory=list)
    href: str | None = _json("href", default=None)


@dataclass
class Geolocation(JSONRecord):
    """Geolocation data of a contact."""

    latitude: str | None = _json("latitude", default=None)
    longitude: str | None = _json("longitude", default=None)
    continent_code: str | None = _json("continentCode", default=None)
    country_code: str | None = _json("countryCode", default=None)
    region: str | None = _json("region", default=None)
    postal_code: str | None = _json("postalCode", default=None)
    dma_code: str | None = _json("dmaCode", default=None)
    city: str | None = _json("city", default=None)


@dataclass
class Tag(JSONRecord):
    """A tag assigned to a contact."""

    tag_id: str = _json("tagId", default="")


@dataclass
class Contact(JSONRecord):
    """
    A GetResponse contact.

    Every field is optional: the API only returns the requested fields and
    updates accept partial representations. created_on and changed_on are kept
    as the strings sent by the API, their timezone is not documented.
    """

    contact_id: str | None = _json("contactId", default=None)
    href: str | None = _json("href", default=None)
    name: str | None = _json("name", default=None)
    email: str | None = _json("email", default=None)
    note: str | None = _json("note", default=None)
    day_of_cycle: int | None = _json("dayOfCycle", kind=int, default=None)
    origin: str | None = _json("origin", default=None)
    created_on: str | None = _json("createdOn", default=None)
    changed_on: str | None = _json("changedOn", default=None)
    campaign: Campaign | None = _json("campaign", record=Campaign, default=None)
    geolocation: Geolocation | None = _json("geolocation", record=Geolocation, default=None)
    tags: list[Tag] | None = _json("tags", record=Tag, many=True, default=None)
    custom_field_values: list[CustomField] | None = _json(
        "customFieldValues", record=CustomField, many=True, default=None
    )
    time_zone: str | None = _json("timeZone", default=None)
    ip_address: str | None = _json("ipAddress", default=None)
    activities: str | None = _json("activities", default=None)
    scoring: int | None = _json("scoring", kind=int, default=None)


@dataclass
class ErrorResponse(JSONRecord):
    """
    Error payload returned by the API.

    Example:
        {
          "httpStatus": 400,
          "code": 1000,
          "codeDescription": "General error of validation process",
          "message": "Custom field invalid",
          "moreInfo": "https://apidocs.getresponse.com/en/v3/errors/1000",
          "context": ["Empty value. ID: y8jnp"],
          "uuid": "5a42dd48-7f57-4919-9b32-391e594ce375"
        }

    """

    code: int = _json("code", kind=int, default=0)
    http_status: int | None = _json("httpStatus", kind=int, default=None)
    code_description: str | None = _json("codeDescription", default=None)
    message: str = _json("message", default="")
    more_info: str | None = _json("moreInfo", default=None)
    context: list[str] = _json("context", many=True, default_factory=list)
    uuid: str | None = _json("uuid", default=None)
