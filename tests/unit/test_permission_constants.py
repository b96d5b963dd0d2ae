"""Tests for the permission and role tables."""

import pytest

from app.features.permissions.constants import (
    ADMIN_ACCESS,
    DEFAULT_USER_ROLE,
    PERMISSION_NAMES,
    PERMISSIONS,
    ROLE_FALLBACK_PRIORITY,
    ROLE_HIERARCHY,
    ROLE_NAMES,
    ROLE_PERMISSIONS,
    USER_TYPE_PERMISSIONS,
    Role,
    UserType,
)


class TestPermissionBits:
    def test_each_value_is_a_single_bit(self) -> None:
        for value in PERMISSIONS.values():
            assert value > 0
            assert value & (value - 1) == 0

    def test_bits_are_unique(self) -> None:
        assert len(set(PERMISSIONS.values())) == len(PERMISSIONS)

    def test_admin_is_bit_30(self) -> None:
        assert PERMISSIONS["ADMIN_ACCESS"] == ADMIN_ACCESS == 1073741824

    def test_every_permission_has_a_display_name(self) -> None:
        assert set(PERMISSION_NAMES) == set(PERMISSIONS.values())

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            PERMISSIONS["NEW"] = 1 << 15  # type: ignore[index]
        with pytest.raises(TypeError):
            ROLE_PERMISSIONS[Role.USER] = ()  # type: ignore[index]


class TestRoles:
    def test_declaration_order(self) -> None:
        assert [role.value for role in Role] == [
            "user",
            "client_manager",
            "token_manager",
            "user_manager",
            "admin",
        ]
        assert list(ROLE_PERMISSIONS) == list(Role)

    def test_plain_string_lookup(self) -> None:
        assert ROLE_NAMES["client_manager"] == "클라이언트 관리자"

    def test_admin_only_holds_admin_bit(self) -> None:
        assert ROLE_PERMISSIONS[Role.ADMIN] == (ADMIN_ACCESS,)

    def test_no_ordinary_role_holds_admin_bit(self) -> None:
        for role, permissions in ROLE_PERMISSIONS.items():
            if role != Role.ADMIN:
                assert ADMIN_ACCESS not in permissions

    def test_fallback_priority(self) -> None:
        assert ROLE_FALLBACK_PRIORITY == (
            Role.USER_MANAGER,
            Role.CLIENT_MANAGER,
            Role.TOKEN_MANAGER,
            Role.USER,
        )

    def test_hierarchy_is_acyclic(self) -> None:
        def visit(role: Role, path: tuple) -> None:
            assert role not in path
            for parent in ROLE_HIERARCHY[role]:
                visit(parent, path + (role,))

        for role in Role:
            visit(role, ())

    def test_every_role_has_a_display_name(self) -> None:
        assert set(ROLE_NAMES) == set(Role)


class TestUserTypes:
    def test_regular_folds_user_role(self) -> None:
        assert USER_TYPE_PERMISSIONS[UserType.REGULAR] == 0x959

    def test_developer_folds_client_manager_role(self) -> None:
        assert USER_TYPE_PERMISSIONS["developer"] == 0x59F8

    def test_default_role(self) -> None:
        assert DEFAULT_USER_ROLE is Role.CLIENT_MANAGER
