"""Tests for hex encoding and permission name lookups."""

import logging

import pytest

from app.features.permissions.constants import (
    ADMIN_ACCESS,
    PERMISSIONS,
    READ_USER,
    UPLOAD_FILE,
    WRITE_CLIENT,
)
from app.features.permissions.exceptions import (
    InvalidPermissionFormat,
    PermissionModelError,
    UnknownPermissionError,
)
from app.features.permissions.utils import (
    get_permission_names,
    get_permission_value,
    hex_to_permissions,
    permissions_to_hex,
)


class TestPermissionsToHex:
    def test_zero(self) -> None:
        assert permissions_to_hex(0) == "0x0"

    def test_uppercase_digits(self) -> None:
        assert permissions_to_hex(0x59F8) == "0x59F8"

    def test_admin_bit(self) -> None:
        assert permissions_to_hex(ADMIN_ACCESS) == "0x40000000"

    def test_negative_rejected(self) -> None:
        with pytest.raises(InvalidPermissionFormat):
            permissions_to_hex(-1)


class TestHexToPermissions:
    @pytest.mark.parametrize("mask", [0, 1, 0x959, ADMIN_ACCESS | 0x7FFF, 1 << 40])
    def test_round_trip(self, mask: int) -> None:
        assert hex_to_permissions(permissions_to_hex(mask)) == mask

    def test_prefix_optional(self) -> None:
        assert hex_to_permissions("1F") == 31

    def test_case_insensitive(self) -> None:
        assert hex_to_permissions("0Xabc") == 0xABC

    def test_surrounding_whitespace(self) -> None:
        assert hex_to_permissions("  0x10\n") == 16

    @pytest.mark.parametrize("value", ["", "0x", "xyz", "0x1G", "-0x1", "0x1_0", "12 34"])
    def test_malformed(self, value: str) -> None:
        with pytest.raises(InvalidPermissionFormat):
            hex_to_permissions(value)

    def test_non_string(self) -> None:
        with pytest.raises(InvalidPermissionFormat):
            hex_to_permissions(None)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", ["0xZZ", None, 31])
    def test_rejection_is_logged(self, value: object, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="app.features.permissions.utils"):
            with pytest.raises(InvalidPermissionFormat):
                hex_to_permissions(value)  # type: ignore[arg-type]

        assert [r.levelno for r in caplog.records] == [logging.WARNING]
        assert repr(value) in caplog.records[0].getMessage()

    def test_error_hierarchy(self) -> None:
        with pytest.raises(ValueError):
            hex_to_permissions("nope")
        with pytest.raises(PermissionModelError):
            hex_to_permissions("nope")


class TestPermissionNames:
    def test_no_permissions(self) -> None:
        assert get_permission_names(0) == []

    def test_declaration_order(self) -> None:
        assert get_permission_names(UPLOAD_FILE | READ_USER | WRITE_CLIENT) == [
            "사용자 조회",
            "클라이언트 수정",
            "파일 업로드",
        ]

    def test_admin_label(self) -> None:
        assert get_permission_names(ADMIN_ACCESS) == ["관리자 접근"]

    def test_unknown_bits_ignored(self) -> None:
        assert get_permission_names(1 << 20 | READ_USER) == ["사용자 조회"]


class TestPermissionValue:
    def test_known(self) -> None:
        assert get_permission_value("UPLOAD_FILE") == 1 << 14

    def test_every_name(self) -> None:
        for name, value in PERMISSIONS.items():
            assert get_permission_value(name) == value

    def test_unknown(self) -> None:
        with pytest.raises(UnknownPermissionError) as exc_info:
            get_permission_value("FLY")
        assert str(exc_info.value) == "Unknown permission: FLY"
