"""Tests for the tag envelope and kind dispatch."""

import pytest

from tagnames import (
    ActionResultTag,
    ActionTag,
    InvalidTagError,
    ServiceTag,
    Tag,
    UnitTag,
    known_kinds,
    parse_tag,
    register_kind,
    split_tag,
)


class TestSplitTag:
    """Tests for split_tag function."""

    def test_simple_tag(self) -> None:
        assert split_tag("service-mysql") == ("service", "mysql")

    def test_splits_on_first_hyphen(self) -> None:
        assert split_tag("unit-foo-bar-0") == ("unit", "foo-bar-0")

    def test_empty_body(self) -> None:
        assert split_tag("service-") == ("service", "")

    @pytest.mark.parametrize("tag", ["", "service", "-mysql"])
    def test_malformed(self, tag: str) -> None:
        with pytest.raises(InvalidTagError) as exc_info:
            split_tag(tag)
        assert exc_info.value.tag == tag
        assert exc_info.value.kind == ""


class TestParseTag:
    """Tests for parse_tag function."""

    def test_service(self) -> None:
        assert parse_tag("service-mysql") == ServiceTag("mysql")

    def test_unit(self) -> None:
        """Test that the last hyphen of a unit tag becomes a slash."""
        assert parse_tag("unit-foo-bar-12") == UnitTag("foo-bar/12")

    def test_action(self) -> None:
        tag = parse_tag("action-foo/0_a_5")
        assert isinstance(tag, ActionTag)
        assert tag.id == "foo/0_a_5"

    def test_action_result(self) -> None:
        tag = parse_tag("actionresult-mysql_ar_2")
        assert isinstance(tag, ActionResultTag)
        assert tag.id == "mysql_ar_2"

    def test_unknown_kind(self) -> None:
        with pytest.raises(InvalidTagError) as exc_info:
            parse_tag("machine-0")
        assert exc_info.value.kind == ""
        assert str(exc_info.value) == "'machine-0' is not a valid tag"

    @pytest.mark.parametrize(
        ("tag", "kind"),
        [
            ("service-Bad", "service"),
            ("unit-foo", "unit"),
            ("unit-foo-01", "unit"),
            ("action-foo/0_a_01", "action"),
            ("action-foo/0", "action"),
            ("actionresult-foo/0_a_1", "actionresult"),
        ],
    )
    def test_invalid_body(self, tag: str, kind: str) -> None:
        with pytest.raises(InvalidTagError) as exc_info:
            parse_tag(tag)
        assert exc_info.value.tag == tag
        assert exc_info.value.kind == kind
        assert str(exc_info.value) == f"{tag!r} is not a valid {kind} tag"

    def test_invalid_tag_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_tag("nonsense")

    @pytest.mark.parametrize(
        "tag",
        [
            "service-mysql",
            "unit-mysql-3",
            "action-mysql/3_a_0",
            "actionresult-mysql_ar_9",
        ],
    )
    def test_canonical_form_is_preserved(self, tag: str) -> None:
        assert str(parse_tag(tag)) == tag


class TestRegisterKind:
    """Tests for the kind registry."""

    def test_builtin_kinds(self) -> None:
        assert known_kinds() == ("action", "actionresult", "service", "unit")

    @pytest.mark.usefixtures("isolated_registries")
    def test_register_new_kind(self) -> None:
        """Test that a registered kind is dispatched to."""
        register_kind("model", lambda id: ServiceTag(id) if id.isalpha() else None)
        assert "model" in known_kinds()
        assert parse_tag("model-admin") == ServiceTag("admin")
        with pytest.raises(InvalidTagError) as exc_info:
            parse_tag("model-42")
        assert exc_info.value.kind == "model"

    @pytest.mark.usefixtures("isolated_registries")
    def test_duplicate_kind(self) -> None:
        with pytest.raises(ValueError, match="already registered"):
            register_kind("unit", lambda id: None)

    @pytest.mark.parametrize("kind", ["", "my-kind"])
    def test_invalid_kind_name(self, kind: str) -> None:
        with pytest.raises(ValueError, match="Invalid tag kind"):
            register_kind(kind, lambda id: None)

    def test_parsed_tags_satisfy_protocol(self) -> None:
        assert isinstance(parse_tag("unit-mysql-0"), Tag)
