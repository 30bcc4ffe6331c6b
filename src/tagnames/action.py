"""Action and action result tags.

Action ids look like ``wordpress/0_a_3``: the name of the unit or service
the action was queued for, a marker, and a sequence number unique for that
owner. Action result ids use the ``_ar_`` marker instead.
"""

import logging
from dataclasses import dataclass
from typing import ClassVar

from tagnames.ids import join_id
from tagnames.prefixer import IdPrefixer, is_valid_owner, is_valid_prefixed_id
from tagnames.tags import parse_tag, register_kind
from tagnames.types import InvalidTagError, Tag

logger = logging.getLogger(__name__)

ACTION_TAG_KIND = "action"
ACTION_RESULT_TAG_KIND = "actionresult"

# Markers are chosen so they cannot occur in unit or service names.
ACTION_MARKER = "_a_"
ACTION_RESULT_MARKER = "_ar_"


@dataclass(frozen=True, slots=True)
class ActionTag:
    """Tag for an action queued for a unit or service."""

    _prefixer: IdPrefixer
    kind: ClassVar[str] = ACTION_TAG_KIND

    def __post_init__(self) -> None:
        if (
            self._prefixer.kind != ACTION_TAG_KIND
            or self._prefixer.marker != ACTION_MARKER
        ):
            raise ValueError(f"{self._prefixer!r} does not describe an action")
        if not is_valid_owner(self._prefixer.prefix):
            raise ValueError(f"{self.id!r} is not a valid action id")

    @property
    def id(self) -> str:
        return self._prefixer.id

    @property
    def prefix(self) -> str:
        return self._prefixer.prefix

    @property
    def sequence(self) -> int:
        return self._prefixer.sequence

    def prefix_tag(self) -> Tag | None:
        return self._prefixer.prefix_tag()

    def __str__(self) -> str:
        return str(self._prefixer)

    def __repr__(self) -> str:
        return f"ActionTag({self.id!r})"


@dataclass(frozen=True, slots=True)
class ActionResultTag:
    """Tag for the recorded result of an action."""

    _prefixer: IdPrefixer
    kind: ClassVar[str] = ACTION_RESULT_TAG_KIND

    def __post_init__(self) -> None:
        if (
            self._prefixer.kind != ACTION_RESULT_TAG_KIND
            or self._prefixer.marker != ACTION_RESULT_MARKER
        ):
            raise ValueError(f"{self._prefixer!r} does not describe an action result")
        if not is_valid_owner(self._prefixer.prefix):
            raise ValueError(f"{self.id!r} is not a valid action result id")

    @property
    def id(self) -> str:
        return self._prefixer.id

    @property
    def prefix(self) -> str:
        return self._prefixer.prefix

    @property
    def sequence(self) -> int:
        return self._prefixer.sequence

    def prefix_tag(self) -> Tag | None:
        return self._prefixer.prefix_tag()

    def __str__(self) -> str:
        return str(self._prefixer)

    def __repr__(self) -> str:
        return f"ActionResultTag({self.id!r})"


# -----------------------------------------------------------------------------
# Actions
# -----------------------------------------------------------------------------


def is_valid_action(action_id: str) -> bool:
    """Check that ``action_id`` is ``<unit or service>_a_<n>``."""
    return is_valid_prefixed_id(action_id, ACTION_MARKER)


def new_action_tag(action_id: str) -> ActionTag:
    """Tag for an action id known to be valid.

    Only for ids that are already trusted, e.g. read back from storage.
    Untrusted input goes through ``parse_action_tag``.

    Raises:
        ValueError: ``action_id`` is not a valid action id.
    """
    tag = _action_from_id(action_id)
    if tag is None:
        raise ValueError(f"{action_id!r} is not a valid action id")
    return tag


def join_action_tag(prefix: str, sequence: int) -> ActionTag:
    """Rebuild an action tag from its owner prefix and sequence number."""
    if isinstance(sequence, bool) or not isinstance(sequence, int):
        raise ValueError("bad prefix or sequence")
    tag = _action_from_id(join_id(prefix, ACTION_MARKER, sequence))
    if tag is None:
        raise ValueError("bad prefix or sequence")
    return tag


def parse_action_tag(tag: str) -> ActionTag:
    """Parse an untrusted ``action-<id>`` string.

    Raises:
        InvalidTagError: ``tag`` is not a valid action tag.
    """
    try:
        result = parse_tag(tag)
    except InvalidTagError as e:
        raise InvalidTagError(tag, ACTION_TAG_KIND) from e
    if not isinstance(result, ActionTag):
        logger.debug("%r parsed as %s, not action", tag, result.kind)
        raise InvalidTagError(tag, ACTION_TAG_KIND)
    return result


def _action_from_id(action_id: str) -> ActionTag | None:
    if not is_valid_action(action_id):
        return None
    return ActionTag(IdPrefixer(action_id, ACTION_TAG_KIND, ACTION_MARKER))


# -----------------------------------------------------------------------------
# Action results
# -----------------------------------------------------------------------------


def is_valid_action_result(result_id: str) -> bool:
    """Check that ``result_id`` is ``<unit or service>_ar_<n>``."""
    return is_valid_prefixed_id(result_id, ACTION_RESULT_MARKER)


def new_action_result_tag(result_id: str) -> ActionResultTag:
    """Tag for an action result id known to be valid.

    Raises:
        ValueError: ``result_id`` is not a valid action result id.
    """
    tag = _action_result_from_id(result_id)
    if tag is None:
        raise ValueError(f"{result_id!r} is not a valid action result id")
    return tag


def parse_action_result_tag(tag: str) -> ActionResultTag:
    """Parse an untrusted ``actionresult-<id>`` string."""
    try:
        result = parse_tag(tag)
    except InvalidTagError as e:
        raise InvalidTagError(tag, ACTION_RESULT_TAG_KIND) from e
    if not isinstance(result, ActionResultTag):
        logger.debug("%r parsed as %s, not actionresult", tag, result.kind)
        raise InvalidTagError(tag, ACTION_RESULT_TAG_KIND)
    return result


def _action_result_from_id(result_id: str) -> ActionResultTag | None:
    if not is_valid_action_result(result_id):
        return None
    return ActionResultTag(
        IdPrefixer(result_id, ACTION_RESULT_TAG_KIND, ACTION_RESULT_MARKER)
    )


register_kind(ACTION_TAG_KIND, _action_from_id)
register_kind(ACTION_RESULT_TAG_KIND, _action_result_from_id)
