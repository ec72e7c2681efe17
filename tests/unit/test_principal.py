"""Tests for Principal construction from codes and claim bags."""

from adminkit.application.dtos.principal import Principal


def test_from_claims_mapping_with_list() -> None:
    principal = Principal.from_claims(
        "u1", {"sub": "u1", "permission": ["Menu.View", "Role.View", "Menu.View"]}
    )
    assert principal.permission_codes == {"Menu.View", "Role.View"}
    assert principal.held_order == ("Menu.View", "Role.View")


def test_from_claims_mapping_with_single_string() -> None:
    principal = Principal.from_claims("u1", {"permission": "Menu.View"})
    assert principal.permission_codes == {"Menu.View"}


def test_from_claims_pairs_ignore_other_types() -> None:
    claims = [
        ("permission", "Menu.View"),
        ("role", "Menu.Edit"),
        ("permission", "User.View"),
        ("malformed",),
    ]
    principal = Principal.from_claims("u1", claims)
    assert principal.held_order == ("Menu.View", "User.View")


def test_from_claims_custom_claim_type() -> None:
    principal = Principal.from_claims("u1", {"perms": ["A.B"], "permission": ["C.D"]}, claim_type="perms")
    assert principal.permission_codes == {"A.B"}


def test_non_string_and_empty_values_ignored() -> None:
    principal = Principal.from_claims("u1", {"permission": ["Menu.View", 3, None, ""]})
    assert principal.permission_codes == {"Menu.View"}


def test_missing_claims_yield_no_codes() -> None:
    assert Principal.from_claims("u1", None).permission_codes == frozenset()
    assert Principal.from_claims("u1", {"permission": 7}).permission_codes == frozenset()


def test_display_id_fallbacks() -> None:
    assert Principal.from_codes("u1", [], name="alice").display_id == "alice"
    assert Principal.from_codes("u1", []).display_id == "u1"
    assert Principal(id=None).display_id == "Unknown"


def test_held_order_defaults_to_sorted_codes() -> None:
    principal = Principal(id="u1", permission_codes=frozenset({"b", "a"}))
    assert principal.held_order == ("a", "b")
