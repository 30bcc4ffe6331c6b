"""tagnames - structured, parseable tags for units, services and actions."""

from tagnames.action import (
    ACTION_MARKER,
    ACTION_RESULT_MARKER,
    ACTION_RESULT_TAG_KIND,
    ACTION_TAG_KIND,
    ActionResultTag,
    ActionTag,
    is_valid_action,
    is_valid_action_result,
    join_action_tag,
    new_action_result_tag,
    new_action_tag,
    parse_action_result_tag,
    parse_action_tag,
)
from tagnames.entities import (
    SERVICE_TAG_KIND,
    UNIT_TAG_KIND,
    ServiceTag,
    UnitTag,
    is_valid_service,
    is_valid_unit,
    new_service_tag,
    new_unit_tag,
    parse_service_tag,
    parse_unit_tag,
    unit_service,
)
from tagnames.ids import MAX_SEQUENCE, join_id, split_id
from tagnames.prefixer import (
    IdPrefixer,
    is_valid_owner,
    register_owner_kind,
    resolve_owner,
)
from tagnames.tags import known_kinds, parse_tag, register_kind, split_tag

# Core types
from tagnames.types import InvalidTagError, PrefixTag, Tag

__version__ = "0.1.0"

__all__ = [
    "ACTION_MARKER",
    "ACTION_RESULT_MARKER",
    "ACTION_RESULT_TAG_KIND",
    "ACTION_TAG_KIND",
    "MAX_SEQUENCE",
    "SERVICE_TAG_KIND",
    "UNIT_TAG_KIND",
    "ActionResultTag",
    "ActionTag",
    "IdPrefixer",
    "InvalidTagError",
    "PrefixTag",
    "ServiceTag",
    "Tag",
    "UnitTag",
    "is_valid_action",
    "is_valid_action_result",
    "is_valid_owner",
    "is_valid_service",
    "is_valid_unit",
    "join_action_tag",
    "join_id",
    "known_kinds",
    "new_action_result_tag",
    "new_action_tag",
    "new_service_tag",
    "new_unit_tag",
    "parse_action_result_tag",
    "parse_action_tag",
    "parse_service_tag",
    "parse_tag",
    "parse_unit_tag",
    "register_kind",
    "register_owner_kind",
    "resolve_owner",
    "split_id",
    "split_tag",
    "unit_service",
]
