"""Built-in permission declarations.

Each group lists its leaf permissions in declaration order; the label is
what administration screens show after the group name (e.g. 'Role
Management.View'). Codes are '<Group>.<Action>'. Add new groups here; the
catalog is built from this table once at startup.
"""

from adminkit.domain.entities.permission import PermissionGroupDeclaration

VIEW = "View"
CREATE = "Create"
EDIT = "Edit"
DELETE = "Delete"


def _crud(group: str) -> tuple[tuple[str, str], ...]:
    """Return the standard View/Create/Edit/Delete permissions for a group."""
    return tuple((f"{group}.{action}", action) for action in (VIEW, CREATE, EDIT, DELETE))


class TenantManagePermissions:
    VIEW = "TenantManage.View"


class TenantPermissions:
    VIEW = "Tenant.View"
    CREATE = "Tenant.Create"
    EDIT = "Tenant.Edit"
    DELETE = "Tenant.Delete"


class PermissionPermissions:
    VIEW = "Permission.View"
    CREATE = "Permission.Create"
    EDIT = "Permission.Edit"
    DELETE = "Permission.Delete"


class RolePermissions:
    VIEW = "Role.View"
    CREATE = "Role.Create"
    EDIT = "Role.Edit"
    DELETE = "Role.Delete"


class UserPermissions:
    VIEW = "User.View"
    CREATE = "User.Create"
    EDIT = "User.Edit"
    DELETE = "User.Delete"


class SystemSettingPermissions:
    VIEW = "SystemSetting.View"


class MenuPermissions:
    VIEW = "Menu.View"
    CREATE = "Menu.Create"
    EDIT = "Menu.Edit"
    DELETE = "Menu.Delete"


PERMISSION_GROUPS: tuple[PermissionGroupDeclaration, ...] = (
    PermissionGroupDeclaration(
        code="TenantManage",
        parent_code="",
        display_name="Tenant Management",
        sort=0,
        permissions=((TenantManagePermissions.VIEW, VIEW),),
    ),
    PermissionGroupDeclaration(
        code="Tenant",
        parent_code="TenantManage",
        display_name="Tenant",
        sort=0,
        permissions=_crud("Tenant"),
    ),
    PermissionGroupDeclaration(
        code="Permission",
        parent_code="TenantManage",
        display_name="Permission Management",
        sort=1,
        permissions=_crud("Permission"),
    ),
    PermissionGroupDeclaration(
        code="Role",
        parent_code="TenantManage",
        display_name="Role Management",
        sort=2,
        permissions=_crud("Role"),
    ),
    PermissionGroupDeclaration(
        code="User",
        parent_code="TenantManage",
        display_name="User Management",
        sort=3,
        permissions=_crud("User"),
    ),
    PermissionGroupDeclaration(
        code="SystemSetting",
        parent_code="",
        display_name="System Settings",
        sort=1,
        permissions=((SystemSettingPermissions.VIEW, VIEW),),
    ),
    PermissionGroupDeclaration(
        code="Menu",
        parent_code="SystemSetting",
        display_name="Menu Management",
        sort=0,
        permissions=_crud("Menu"),
    ),
)
