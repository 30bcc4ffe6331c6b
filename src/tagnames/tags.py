"""Tag envelope parsing and kind dispatch."""

import logging
from collections.abc import Callable

from tagnames.types import InvalidTagError, Tag

logger = logging.getLogger(__name__)

# Body parser: receives the id part of "<kind>-<id>", returns None if invalid.
KindParser = Callable[[str], Tag | None]

_KIND_PARSERS: dict[str, KindParser] = {}


def register_kind(kind: str, parser: KindParser) -> None:
    """Make ``parse_tag`` understand tags of ``kind``."""
    if not kind or "-" in kind:
        raise ValueError(f"Invalid tag kind: {kind!r}")
    if kind in _KIND_PARSERS:
        raise ValueError(f"Tag kind already registered: {kind!r}")
    _KIND_PARSERS[kind] = parser
    logger.debug("registered tag kind %r", kind)


def known_kinds() -> tuple[str, ...]:
    """All kinds ``parse_tag`` can dispatch to."""
    return tuple(sorted(_KIND_PARSERS))


def split_tag(tag: str) -> tuple[str, str]:
    """Split a tag string on its first hyphen into ``(kind, id)``."""
    kind, sep, body = tag.partition("-")
    if not sep or not kind:
        raise InvalidTagError(tag)
    return kind, body


def parse_tag(tag: str) -> Tag:
    """Parse any registered tag from its ``<kind>-<id>`` form.

    Raises:
        InvalidTagError: the envelope is malformed, the kind is unknown,
            or the id is not valid for the kind.
    """
    kind, body = split_tag(tag)
    parser = _KIND_PARSERS.get(kind)
    if parser is None:
        logger.debug("unknown tag kind %r in %r", kind, tag)
        raise InvalidTagError(tag)

    result = parser(body)
    if result is None:
        logger.debug("rejected %s tag %r", kind, tag)
        raise InvalidTagError(tag, kind)
    return result
