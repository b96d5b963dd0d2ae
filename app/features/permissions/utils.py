"""
Helpers for bitmask-based permissions.

Every function here is pure: masks are plain integers passed by value and the
tables in `constants` are never mutated.
"""
import re
from collections import deque
from functools import reduce
from typing import Iterable, List, Tuple, Union

from app.features.permissions.constants import (
    ADMIN_ACCESS,
    CUSTOM_ROLE_NAME,
    PERMISSION_NAMES,
    PERMISSIONS,
    ROLE_FALLBACK_PRIORITY,
    ROLE_HIERARCHY,
    ROLE_NAMES,
    ROLE_PERMISSIONS,
    Role,
)
from app.features.permissions.exceptions import (
    InvalidPermissionFormat,
    UnknownPermissionError,
    UnknownRoleError,
)
from app.utils import get_logger


log = get_logger(__name__)

HEX_PATTERN = re.compile(r"^(0[xX])?[0-9a-fA-F]+$")


# ============================================================================
# Aggregates
# ============================================================================

def get_all_permissions() -> List[int]:
    """Every permission except ADMIN_ACCESS, in declaration order."""
    return [value for value in PERMISSIONS.values() if value != ADMIN_ACCESS]


def get_all_permissions_mask() -> int:
    """OR of every permission except ADMIN_ACCESS."""
    return reduce(lambda acc, permission: acc | permission, get_all_permissions(), 0)


def get_admin_permission() -> int:
    return ADMIN_ACCESS


def get_permission_value(name: str) -> int:
    """
    Look up a permission bit by its constant name.

    Raises:
        UnknownPermissionError: If no permission has that name
    """
    try:
        return PERMISSIONS[name]
    except KeyError:
        raise UnknownPermissionError(name) from None


# ============================================================================
# Bit algebra
# ============================================================================

def has_permission(user_permissions: int, required_permission: int) -> bool:
    """
    Check whether every bit of `required_permission` is set.

    A required permission of 0 is always satisfied.
    """
    return (user_permissions & required_permission) == required_permission


def has_any_permission(user_permissions: int, required_permissions: Iterable[int]) -> bool:
    """True if at least one of the permissions is held. Empty input is False."""
    return any(has_permission(user_permissions, p) for p in required_permissions)


def has_all_permissions(user_permissions: int, required_permissions: Iterable[int]) -> bool:
    """True if every permission is held. Empty input is True."""
    return all(has_permission(user_permissions, p) for p in required_permissions)


def add_permissions(current_permissions: int, permissions_to_add: Iterable[int]) -> int:
    return reduce(lambda acc, permission: acc | permission, permissions_to_add, current_permissions)


def remove_permissions(current_permissions: int, permissions_to_remove: Iterable[int]) -> int:
    return reduce(lambda acc, permission: acc & ~permission, permissions_to_remove, current_permissions)


def is_admin(permissions: int) -> bool:
    """True when the ADMIN_ACCESS bit is set, whatever else is set."""
    return has_permission(permissions, ADMIN_ACCESS)


def get_default_permissions() -> int:
    """Mask granted by the plain `user` role."""
    return get_role_permissions_mask(Role.USER)


# ============================================================================
# Roles
# ============================================================================

def _to_role(role: Union[Role, str]) -> Role:
    try:
        return Role(role)
    except ValueError:
        raise UnknownRoleError(str(role)) from None


def get_role_permissions_mask(role: Union[Role, str]) -> int:
    """
    OR of a role's defining permissions.

    Raises:
        UnknownRoleError: If `role` is not a defined role identifier
    """
    return add_permissions(0, ROLE_PERMISSIONS[_to_role(role)])


def get_role_ancestors(role: Union[Role, str]) -> Tuple[Role, ...]:
    """
    All roles subsumed by `role` according to the display hierarchy.

    Parents come before grandparents; each role appears once.
    """
    ancestors: List[Role] = []
    pending = deque(ROLE_HIERARCHY[_to_role(role)])
    while pending:
        parent = pending.popleft()
        if parent in ancestors:
            continue
        ancestors.append(parent)
        pending.extend(ROLE_HIERARCHY[parent])
    return tuple(ancestors)


def get_role_name(permissions: int) -> str:
    """
    Pick the display name of the role that best describes a mask.

    Resolution order:
    1. ADMIN_ACCESS set: the admin name, regardless of other bits
    2. First non-admin role, in declaration order, whose permissions are all held
    3. First role from ROLE_FALLBACK_PRIORITY whose permissions are all held
    4. CUSTOM_ROLE_NAME
    """
    if is_admin(permissions):
        return ROLE_NAMES[Role.ADMIN]

    for role, role_permissions in ROLE_PERMISSIONS.items():
        if role != Role.ADMIN and has_all_permissions(permissions, role_permissions):
            return ROLE_NAMES[role]

    # Same roles as above, ranked most powerful first
    for role in ROLE_FALLBACK_PRIORITY:
        if has_all_permissions(permissions, ROLE_PERMISSIONS[role]):
            log.debug(f"Mask {permissions} resolved to {role.value} by priority")
            return ROLE_NAMES[role]

    log.debug(f"No role matches mask {permissions}")
    return CUSTOM_ROLE_NAME


def get_permission_names(permissions: int) -> List[str]:
    """Display names of every known permission set in the mask."""
    return [
        name for value, name in PERMISSION_NAMES.items()
        if has_permission(permissions, value)
    ]


# ============================================================================
# Hex encoding
# ============================================================================

def permissions_to_hex(permissions: int) -> str:
    """
    Render a mask as an uppercase hex string, e.g. 0x4009.

    Raises:
        InvalidPermissionFormat: If the mask is negative
    """
    if permissions < 0:
        raise InvalidPermissionFormat(permissions)
    return f"0x{permissions:X}"


def hex_to_permissions(hex_string: str) -> int:
    """
    Parse a hex mask. The 0x prefix is optional and case does not matter.

    Raises:
        InvalidPermissionFormat: If the string is not a plain hex number
    """
    if not isinstance(hex_string, str) or not HEX_PATTERN.match(hex_string.strip()):
        log.warning(f"Rejected permission mask {hex_string!r}")
        raise InvalidPermissionFormat(hex_string)
    return int(hex_string.strip(), 16)
