"""QueryRepository integration tests against in-memory SQLite (aiosqlite)."""

from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from adminkit.application.query.pagination import PageParams
from adminkit.application.query.predicate import MATCH_ALL, Eq, PredicateBuilder
from adminkit.domain.exceptions import ValidationException
from adminkit.infrastructure.persistence.models import Menu, User
from adminkit.infrastructure.persistence.repositories import QueryRepository
from adminkit.schemas.menu import MenuQuery
from adminkit.schemas.user import UserQuery
from adminkit.shared.utils.generators import generate_id

NOW = datetime.now(UTC)


@pytest.fixture
async def menus(db_session: AsyncSession) -> list[Menu]:
    """Five menus: Dashboard root with children, one hidden, one old."""
    root = Menu(
        id=generate_id(), name="Dashboard", title="Dashboard", path="/dashboard",
        sort=0, created_at=NOW - timedelta(days=1),
    )
    rows = [
        root,
        Menu(
            id=generate_id(), parent_id=root.id, name="Users", title="User List",
            path="/admin/users", sort=1, created_at=NOW - timedelta(days=2),
        ),
        Menu(
            id=generate_id(), parent_id=root.id, name="Roles", title="Role List",
            path="/admin/roles", sort=2, created_at=NOW - timedelta(days=3),
        ),
        Menu(
            id=generate_id(), name="Secret", title="Hidden Page", path="/secret",
            sort=3, is_hide=True, created_at=NOW - timedelta(days=4),
        ),
        Menu(
            id=generate_id(), name="Archive", title="Old Dashboard", path="/archive",
            sort=4, created_at=NOW - timedelta(days=90),
        ),
    ]
    db_session.add_all(rows)
    await db_session.commit()
    return rows


async def test_match_all_returns_everything_newest_first(
    db_session: AsyncSession, menus: list[Menu]
) -> None:
    repo = QueryRepository(db_session, Menu)
    found = await repo.find(MATCH_ALL)
    assert [m.name for m in found] == ["Dashboard", "Users", "Roles", "Secret", "Archive"]
    assert await repo.count(MATCH_ALL) == 5


async def test_regex_match_is_case_insensitive(
    db_session: AsyncSession, menus: list[Menu]
) -> None:
    repo = QueryRepository(db_session, Menu)
    predicate = MenuQuery(title="dashboard").to_predicate()
    found = await repo.find(predicate)
    assert {m.name for m in found} == {"Dashboard", "Archive"}


async def test_regex_anchors_and_literal_text(
    db_session: AsyncSession, menus: list[Menu]
) -> None:
    repo = QueryRepository(db_session, Menu)
    found = await repo.find(MenuQuery(path="^/admin/").to_predicate())
    assert {m.name for m in found} == {"Users", "Roles"}


async def test_parent_and_hidden_filters(db_session: AsyncSession, menus: list[Menu]) -> None:
    repo = QueryRepository(db_session, Menu)
    root = menus[0]
    children = await repo.find(MenuQuery(parent_id=root.id).to_predicate())
    assert {m.name for m in children} == {"Users", "Roles"}
    hidden = await repo.find(MenuQuery(is_hide=True).to_predicate())
    assert [m.name for m in hidden] == ["Secret"]


async def test_id_and_ids_filters(db_session: AsyncSession, menus: list[Menu]) -> None:
    repo = QueryRepository(db_session, Menu)
    one = await repo.find(MenuQuery(id=menus[1].id).to_predicate())
    assert [m.name for m in one] == ["Users"]
    some = await repo.find(MenuQuery(ids=[menus[2].id, "junk", menus[3].id]).to_predicate())
    assert {m.name for m in some} == {"Roles", "Secret"}


async def test_id_combined_with_entity_field(db_session: AsyncSession, menus: list[Menu]) -> None:
    """id narrows and name narrows further; a mismatching name empties the result."""
    repo = QueryRepository(db_session, Menu)
    assert await repo.count(MenuQuery(id=menus[1].id, name="user").to_predicate()) == 1
    assert await repo.count(MenuQuery(id=menus[1].id, name="role").to_predicate()) == 0


async def test_default_time_range_excludes_old_rows(
    db_session: AsyncSession, menus: list[Menu]
) -> None:
    repo = QueryRepository(db_session, Menu)
    found = await repo.find(MenuQuery(is_time_range=True).to_predicate())
    assert "Archive" not in {m.name for m in found}
    assert len(found) == 4


async def test_explicit_time_range(db_session: AsyncSession, menus: list[Menu]) -> None:
    repo = QueryRepository(db_session, Menu)
    query = MenuQuery(
        is_time_range=True,
        start_time=NOW - timedelta(days=3, hours=1),
        end_time=NOW - timedelta(days=1, hours=1),
    )
    found = await repo.find(query.to_predicate())
    assert {m.name for m in found} == {"Users", "Roles"}


async def test_page_query_sorts_and_paginates(
    db_session: AsyncSession, menus: list[Menu]
) -> None:
    repo = QueryRepository(db_session, Menu)
    params = PageParams(page_number=2, page_size=2, sort_field="sort", ascending=True)
    page = await repo.page_query(MenuQuery(), params)
    assert [m.name for m in page.items] == ["Roles", "Secret"]
    assert page.total_count == 5
    assert page.total_pages == 3
    assert page.has_previous_page and page.has_next_page


async def test_page_beyond_last_is_empty(db_session: AsyncSession, menus: list[Menu]) -> None:
    repo = QueryRepository(db_session, Menu)
    page = await repo.page(MATCH_ALL, PageParams(page_number=9, page_size=2))
    assert page.items == []
    assert page.total_count == 5
    assert not page.has_next_page


async def test_page_query_rejects_unsortable_field(
    db_session: AsyncSession, menus: list[Menu]
) -> None:
    repo = QueryRepository(db_session, Menu)
    with pytest.raises(ValidationException):
        await repo.page_query(MenuQuery(), PageParams(sort_field="path"))


async def test_get_one(db_session: AsyncSession, menus: list[Menu]) -> None:
    repo = QueryRepository(db_session, Menu)
    found = await repo.get_one(Eq("name", "Roles"))
    assert found is not None and found.id == menus[2].id
    assert await repo.get_one(Eq("name", "Nope")) is None


async def test_unknown_field_rejected(db_session: AsyncSession) -> None:
    repo = QueryRepository(db_session, Menu)
    with pytest.raises(ValidationException):
        await repo.find(PredicateBuilder().eq("colour", "blue").build())


async def test_literal_email_match(db_session: AsyncSession) -> None:
    db_session.add_all(
        [
            User(id=generate_id(), user_name="ops", email="ops+alerts@example.com"),
            User(id=generate_id(), user_name="opss", email="opssalerts@example.com"),
        ]
    )
    await db_session.commit()
    repo = QueryRepository(db_session, User)
    found = await repo.find(UserQuery(email="OPS+ALERTS").to_predicate())
    assert [u.user_name for u in found] == ["ops"]
