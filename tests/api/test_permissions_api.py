"""HTTP tests for the permissions endpoints and bearer authentication."""

from collections.abc import Callable

from httpx import AsyncClient

AuthHeaders = Callable[..., dict[str, str]]


async def test_tree_requires_token(client: AsyncClient) -> None:
    response = await client.get("/api/v1/permissions/tree")
    assert response.status_code == 401
    assert response.json()["error"] == "AUTHENTICATION_ERROR"
    assert response.headers["WWW-Authenticate"] == "Bearer"


async def test_invalid_token_rejected(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/permissions/tree", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 401


async def test_tree_without_permission_forbidden(
    client: AsyncClient, auth_headers: AuthHeaders
) -> None:
    """Holding the parent group code does not grant Permission.View."""
    response = await client.get(
        "/api/v1/permissions/tree", headers=auth_headers("TenantManage", "Permission")
    )
    assert response.status_code == 403
    body = response.json()
    assert body["error"] == "PERMISSION_DENIED"
    assert body["details"] == {"permission": "Permission.View"}


async def test_tree_shape(client: AsyncClient, auth_headers: AuthHeaders) -> None:
    response = await client.get(
        "/api/v1/permissions/tree", headers=auth_headers("Permission.View")
    )
    assert response.status_code == 200
    roots = response.json()
    assert [r["group_code"] for r in roots] == ["TenantManage", "SystemSetting"]
    system = roots[1]
    assert system["kind"] == "group"
    assert [c.get("code") or c.get("group_code") for c in system["children"]] == [
        "SystemSetting.View",
        "Menu",
    ]
    menu = system["children"][1]
    assert menu["children"][0] == {
        "kind": "permission",
        "code": "Menu.View",
        "display_name": "Menu Management.View",
        "sort": 0,
    }


async def test_codes(client: AsyncClient, auth_headers: AuthHeaders) -> None:
    response = await client.get(
        "/api/v1/permissions/codes", headers=auth_headers("Permission.View")
    )
    assert response.status_code == 200
    codes = response.json()["codes"]
    assert len(codes) == 33
    assert codes == sorted(codes)
    assert "Menu.Delete" in codes


async def test_me_reports_held_and_unknown_codes(
    client: AsyncClient, auth_headers: AuthHeaders
) -> None:
    response = await client.get(
        "/api/v1/permissions/me",
        headers=auth_headers("Menu.View", "Legacy.Thing", subject="u-9", name="alice"),
    )
    assert response.status_code == 200
    assert response.json() == {
        "id": "u-9",
        "name": "alice",
        "permissions": ["Menu.View", "Legacy.Thing"],
        "unknown_permissions": ["Legacy.Thing"],
    }


async def test_health_reports_catalog(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["permission_count"] == 33


async def test_request_id_echoed(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"
    generated = await client.get("/api/v1/health", headers={"X-Request-ID": "bad id!"})
    assert generated.headers["X-Request-ID"] != "bad id!"
