"""Tests for domain value objects and enums."""

import pytest

from adminkit.domain.enums import Decision
from adminkit.domain.value_objects.core import EntityId, PermissionCode


def test_permission_code_parts() -> None:
    code = PermissionCode("Menu.View")
    assert code.action == "View"
    assert str(code) == "Menu.View"


def test_group_code_has_no_action() -> None:
    code = PermissionCode("SystemSetting")
    assert code.action is None


@pytest.mark.parametrize("value", ["", "Menu View", " Menu.View", "Menu.View\n"])
def test_permission_code_rejects_empty_and_whitespace(value: str) -> None:
    with pytest.raises(ValueError):
        PermissionCode(value)


def test_permission_code_equality_is_case_sensitive() -> None:
    assert PermissionCode("Menu.View") == PermissionCode("Menu.View")
    assert PermissionCode("Menu.View") != PermissionCode("menu.view")


def test_entity_id_canonical_form() -> None:
    raw = "4F1C2B1E8A7D4D1E9F001A2B3C4D5E6F"
    assert EntityId.parse(raw) == "4f1c2b1e-8a7d-4d1e-9f00-1a2b3c4d5e6f"


@pytest.mark.parametrize("raw", [None, "", "   ", "abc", "5", 42])
def test_entity_id_parse_never_raises(raw: object) -> None:
    assert EntityId.parse(raw) is None


def test_decision_serializes_as_its_value() -> None:
    assert Decision.ALLOW == "allow"
    assert Decision("deny") is Decision.DENY
