"""Shared pytest fixtures."""

import pytest

import tagnames.prefixer
import tagnames.tags
from tagnames import ActionTag, UnitTag, new_action_tag, new_unit_tag


@pytest.fixture
def unit_tag() -> UnitTag:
    """A unit that owns actions."""
    return new_unit_tag("wordpress/0")


@pytest.fixture
def action_tag() -> ActionTag:
    """An action queued for the wordpress/0 unit."""
    return new_action_tag("wordpress/0_a_5")


@pytest.fixture
def isolated_registries(monkeypatch: pytest.MonkeyPatch) -> None:
    """Let a test register kinds without leaking them into other tests."""
    monkeypatch.setattr(
        tagnames.tags, "_KIND_PARSERS", dict(tagnames.tags._KIND_PARSERS)
    )
    monkeypatch.setattr(
        tagnames.prefixer, "_OWNER_KINDS", list(tagnames.prefixer._OWNER_KINDS)
    )
