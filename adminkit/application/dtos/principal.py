"""Authenticated caller as seen by the authorization evaluator."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

PERMISSION_CLAIM_TYPE = "permission"

ClaimPairs = Iterable[tuple[str, str]]


def _claim_values(
    claims: Mapping[str, object] | ClaimPairs | None,
    claim_type: str,
) -> list[str]:
    """Collect string values of one claim type, keeping first-seen order."""
    if claims is None:
        return []
    values: list[object] = []
    if isinstance(claims, Mapping):
        raw = claims.get(claim_type)
        if isinstance(raw, str):
            values.append(raw)
        elif isinstance(raw, Iterable):
            values.extend(raw)
    else:
        for pair in claims:
            if isinstance(pair, (tuple, list)) and len(pair) == 2 and pair[0] == claim_type:
                values.append(pair[1])
    seen: dict[str, None] = {}
    for value in values:
        if isinstance(value, str) and value:
            seen.setdefault(value, None)
    return list(seen)


@dataclass(frozen=True)
class Principal:
    """Caller identity plus the explicit set of permission codes it holds.

    held_order keeps the order codes were presented in, for diagnostics only;
    permission_codes is what decisions are made on.
    """

    id: str | None
    name: str | None = None
    permission_codes: frozenset[str] = field(default_factory=frozenset)
    held_order: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        codes = frozenset(self.permission_codes)
        object.__setattr__(self, "permission_codes", codes)
        if not self.held_order:
            object.__setattr__(self, "held_order", tuple(sorted(codes)))

    @classmethod
    def from_codes(
        cls,
        principal_id: str | None,
        codes: Iterable[str],
        name: str | None = None,
    ) -> Principal:
        ordered = _claim_values({PERMISSION_CLAIM_TYPE: list(codes)}, PERMISSION_CLAIM_TYPE)
        return cls(
            id=principal_id,
            name=name,
            permission_codes=frozenset(ordered),
            held_order=tuple(ordered),
        )

    @classmethod
    def from_claims(
        cls,
        principal_id: str | None,
        claims: Mapping[str, object] | ClaimPairs | None,
        name: str | None = None,
        claim_type: str = PERMISSION_CLAIM_TYPE,
    ) -> Principal:
        """Build a principal from a claims bag.

        Accepts (claim_type, value) pairs or a mapping whose claim_type entry is a
        string or a list of strings (JWT payload shape). Other claim types and
        non-string values are ignored; a missing or malformed bag yields no codes.
        """
        ordered = _claim_values(claims, claim_type)
        return cls(
            id=principal_id,
            name=name,
            permission_codes=frozenset(ordered),
            held_order=tuple(ordered),
        )

    @property
    def display_id(self) -> str:
        """Name for log lines: name, then id, then 'Unknown'."""
        return self.name or self.id or "Unknown"
