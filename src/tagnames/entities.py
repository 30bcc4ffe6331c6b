"""Unit and service names, the entities that own actions."""

import re
from dataclasses import dataclass
from typing import ClassVar

from tagnames.tags import parse_tag, register_kind
from tagnames.types import InvalidTagError

UNIT_TAG_KIND = "unit"
SERVICE_TAG_KIND = "service"

_SERVICE_SNIPPET = r"(?:[a-z][a-z0-9]*(?:-[a-z0-9]*[a-z][a-z0-9]*)*)"
_NUMBER_SNIPPET = r"(?:0|[1-9][0-9]*)"

_VALID_SERVICE = re.compile(_SERVICE_SNIPPET)
_VALID_UNIT = re.compile(f"({_SERVICE_SNIPPET})/({_NUMBER_SNIPPET})")


def is_valid_service(name: str) -> bool:
    """Check that ``name`` is a legal service name."""
    return _VALID_SERVICE.fullmatch(name) is not None


def is_valid_unit(name: str) -> bool:
    """Check that ``name`` is a legal ``<service>/<number>`` unit name."""
    return _VALID_UNIT.fullmatch(name) is not None


def unit_service(unit_name: str) -> str:
    """Return the name of the service a unit belongs to."""
    match = _VALID_UNIT.fullmatch(unit_name)
    if match is None:
        raise ValueError(f"{unit_name!r} is not a valid unit name")
    return match.group(1)


@dataclass(frozen=True, slots=True)
class ServiceTag:
    """Tag for a service."""

    id: str
    kind: ClassVar[str] = SERVICE_TAG_KIND

    def __post_init__(self) -> None:
        if not is_valid_service(self.id):
            raise ValueError(f"{self.id!r} is not a valid service name")

    def __str__(self) -> str:
        return f"{self.kind}-{self.id}"

    def __repr__(self) -> str:
        return f"ServiceTag({self.id!r})"


@dataclass(frozen=True, slots=True)
class UnitTag:
    """Tag for a unit of a service. Its id looks like ``wordpress/0``."""

    id: str
    kind: ClassVar[str] = UNIT_TAG_KIND

    def __post_init__(self) -> None:
        if not is_valid_unit(self.id):
            raise ValueError(f"{self.id!r} is not a valid unit name")

    @property
    def service_name(self) -> str:
        return unit_service(self.id)

    @property
    def number(self) -> int:
        return int(self.id.rpartition("/")[2])

    def __str__(self) -> str:
        return f"{self.kind}-{self.id.replace('/', '-')}"

    def __repr__(self) -> str:
        return f"UnitTag({self.id!r})"


def new_service_tag(name: str) -> ServiceTag:
    """Tag for a service name known to be valid. Raises ValueError if not."""
    return ServiceTag(name)


def new_unit_tag(name: str) -> UnitTag:
    """Tag for a unit name known to be valid. Raises ValueError if not."""
    return UnitTag(name)


def parse_service_tag(tag: str) -> ServiceTag:
    """Parse an untrusted ``service-<name>`` string."""
    try:
        result = parse_tag(tag)
    except InvalidTagError as e:
        raise InvalidTagError(tag, SERVICE_TAG_KIND) from e
    if not isinstance(result, ServiceTag):
        raise InvalidTagError(tag, SERVICE_TAG_KIND)
    return result


def parse_unit_tag(tag: str) -> UnitTag:
    """Parse an untrusted ``unit-<service>-<number>`` string."""
    try:
        result = parse_tag(tag)
    except InvalidTagError as e:
        raise InvalidTagError(tag, UNIT_TAG_KIND) from e
    if not isinstance(result, UnitTag):
        raise InvalidTagError(tag, UNIT_TAG_KIND)
    return result


def _service_from_id(id: str) -> ServiceTag | None:
    if not is_valid_service(id):
        return None
    return ServiceTag(id)


def _unit_from_id(id: str) -> UnitTag | None:
    # The last hyphen of the tag body stands in for the slash.
    service, sep, number = id.rpartition("-")
    if not sep:
        return None
    name = f"{service}/{number}"
    if not is_valid_unit(name):
        return None
    return UnitTag(name)


register_kind(UNIT_TAG_KIND, _unit_from_id)
register_kind(SERVICE_TAG_KIND, _service_from_id)
