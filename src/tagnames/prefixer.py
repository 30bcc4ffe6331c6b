"""Shared behavior for tags with structured ``<owner><marker><n>`` ids.

Concrete kinds such as ActionTag hold an IdPrefixer and delegate to it
rather than subclassing it.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from tagnames.entities import ServiceTag, UnitTag, is_valid_service, is_valid_unit
from tagnames.ids import split_id
from tagnames.tags import parse_tag
from tagnames.types import InvalidTagError, Tag

logger = logging.getLogger(__name__)

OwnerKind = tuple[Callable[[str], bool], Callable[[str], Tag]]

# Checked in order; the first matching predicate builds the owner tag.
_OWNER_KINDS: list[OwnerKind] = [
    (is_valid_unit, UnitTag),
    (is_valid_service, ServiceTag),
]


def register_owner_kind(
    predicate: Callable[[str], bool], constructor: Callable[[str], Tag]
) -> None:
    """Allow a new kind of entity to own prefixed ids.

    Registered kinds are tried after units and services.
    """
    _OWNER_KINDS.append((predicate, constructor))
    name = getattr(constructor, "__name__", constructor)
    logger.debug("registered owner kind %r", name)


def is_valid_owner(prefix: str) -> bool:
    """Check whether ``prefix`` names any known owning entity."""
    return any(predicate(prefix) for predicate, _ in _OWNER_KINDS)


def resolve_owner(prefix: str) -> Tag | None:
    """Build the tag of the entity named by ``prefix``.

    Owner names are bare (``wordpress/0``, not ``unit-wordpress-0``), so the
    registered owner kinds are tried before falling back to ``parse_tag``.
    """
    for predicate, constructor in _OWNER_KINDS:
        if predicate(prefix):
            return constructor(prefix)
    try:
        return parse_tag(prefix)
    except InvalidTagError:
        return None


def is_valid_prefixed_id(id: str, marker: str) -> bool:
    """Check that ``id`` splits on ``marker`` and its prefix names an owner."""
    parts = split_id(id, marker)
    if parts is None:
        return False
    return is_valid_owner(parts[0])


@dataclass(frozen=True, slots=True)
class IdPrefixer:
    """Id, kind and marker of a tag with a structured id.

    Construction fails unless the marker splits the id into a non-empty
    prefix and a canonical sequence number.
    """

    id: str
    kind: str
    marker: str

    def __post_init__(self) -> None:
        parts = split_id(self.id, self.marker)
        if parts is None or not parts[0]:
            raise ValueError(
                f"{self.id!r} is not a valid {self.kind} id for marker {self.marker!r}"
            )

    def __str__(self) -> str:
        return f"{self.kind}-{self.id}"

    @property
    def prefix(self) -> str:
        parts = split_id(self.id, self.marker)
        if parts is None:
            return ""
        return parts[0]

    @property
    def sequence(self) -> int:
        parts = split_id(self.id, self.marker)
        if parts is None:
            return -1
        return parts[1]

    def prefix_tag(self) -> Tag | None:
        """Tag of the unit, service or other entity that owns this id."""
        parts = split_id(self.id, self.marker)
        if parts is None:
            return None
        return resolve_owner(parts[0])
