"""Core types for the tagnames library."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Tag(Protocol):
    """A typed identifier for a domain entity.

    The canonical form, ``str(tag)``, is ``<kind>-<id>`` for every kind
    except where a kind re-encodes its id (units turn ``/`` into ``-``).
    """

    @property
    def kind(self) -> str:
        """Discriminator naming what sort of entity this is."""
        ...

    @property
    def id(self) -> str:
        """Kind-scoped unique id."""
        ...


@runtime_checkable
class PrefixTag(Tag, Protocol):
    """A tag whose id is an owner prefix, a marker and a sequence number."""

    @property
    def prefix(self) -> str:
        """Owner name fragment, or "" if the id cannot be split."""
        ...

    @property
    def sequence(self) -> int:
        """Numeric suffix, or -1 if the id cannot be split."""
        ...

    def prefix_tag(self) -> Tag | None:
        """Tag of the entity named by the prefix."""
        ...


class InvalidTagError(ValueError):
    """Raised when an untrusted string is not a tag of the expected kind."""

    def __init__(self, tag: str, kind: str = "") -> None:
        self.tag = tag
        self.kind = kind
        if kind:
            message = f"{tag!r} is not a valid {kind} tag"
        else:
            message = f"{tag!r} is not a valid tag"
        super().__init__(message)
