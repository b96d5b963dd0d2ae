"""
Permission bit assignments, roles and the lookup tables built from them.

Every permission is a single bit in an integer mask. A user's permissions are
the OR of the bits they were granted; no other structure is attached to them.
Bit 30 is reserved for ADMIN_ACCESS, which is disjoint from every other
permission and is never part of the "all permissions" aggregates.

All tables are built once at import and exposed read-only.
"""
import enum
from functools import reduce
from operator import or_
from types import MappingProxyType
from typing import Mapping, Tuple


# ============================================================================
# Permission bits
# ============================================================================

# User permissions
READ_USER = 1 << 0
WRITE_USER = 1 << 1
DELETE_USER = 1 << 2

# Client permissions
READ_CLIENT = 1 << 3
WRITE_CLIENT = 1 << 4
DELETE_CLIENT = 1 << 5

# Token permissions
READ_TOKEN = 1 << 6
WRITE_TOKEN = 1 << 7
DELETE_TOKEN = 1 << 8

# System permissions
MANAGE_USERS = 1 << 9
MANAGE_SYSTEM = 1 << 10

# Dashboard permissions
READ_DASHBOARD = 1 << 11
WRITE_DASHBOARD = 1 << 12
MANAGE_DASHBOARD = 1 << 13

# Upload permissions
UPLOAD_FILE = 1 << 14

# Super permission, kept apart from everything above
ADMIN_ACCESS = 1 << 30


# Declaration order is significant: aggregates and name listings follow it.
PERMISSIONS: Mapping[str, int] = MappingProxyType({
    "READ_USER": READ_USER,
    "WRITE_USER": WRITE_USER,
    "DELETE_USER": DELETE_USER,
    "READ_CLIENT": READ_CLIENT,
    "WRITE_CLIENT": WRITE_CLIENT,
    "DELETE_CLIENT": DELETE_CLIENT,
    "READ_TOKEN": READ_TOKEN,
    "WRITE_TOKEN": WRITE_TOKEN,
    "DELETE_TOKEN": DELETE_TOKEN,
    "MANAGE_USERS": MANAGE_USERS,
    "MANAGE_SYSTEM": MANAGE_SYSTEM,
    "READ_DASHBOARD": READ_DASHBOARD,
    "WRITE_DASHBOARD": WRITE_DASHBOARD,
    "MANAGE_DASHBOARD": MANAGE_DASHBOARD,
    "UPLOAD_FILE": UPLOAD_FILE,
    "ADMIN_ACCESS": ADMIN_ACCESS,
})

PERMISSION_NAMES: Mapping[int, str] = MappingProxyType({
    READ_USER: "사용자 조회",
    WRITE_USER: "사용자 수정",
    DELETE_USER: "사용자 삭제",
    READ_CLIENT: "클라이언트 조회",
    WRITE_CLIENT: "클라이언트 수정",
    DELETE_CLIENT: "클라이언트 삭제",
    READ_TOKEN: "토큰 조회",
    WRITE_TOKEN: "토큰 수정",
    DELETE_TOKEN: "토큰 삭제",
    MANAGE_USERS: "사용자 관리",
    MANAGE_SYSTEM: "시스템 관리",
    READ_DASHBOARD: "대시보드 조회",
    WRITE_DASHBOARD: "대시보드 수정",
    MANAGE_DASHBOARD: "대시보드 관리",
    UPLOAD_FILE: "파일 업로드",
    ADMIN_ACCESS: "관리자 접근",
})


# ============================================================================
# Roles
# ============================================================================

class Role(str, enum.Enum):
    """Fixed role identifiers. Declaration order is the role priority."""
    USER = "user"
    CLIENT_MANAGER = "client_manager"
    TOKEN_MANAGER = "token_manager"
    USER_MANAGER = "user_manager"
    ADMIN = "admin"


ROLE_PERMISSIONS: Mapping[Role, Tuple[int, ...]] = MappingProxyType({
    Role.USER: (
        READ_USER,
        READ_DASHBOARD,
        READ_CLIENT,
        WRITE_CLIENT,  # regular users may register their own OAuth2 clients
        READ_TOKEN,
        DELETE_TOKEN,  # and revoke their own tokens
    ),
    Role.CLIENT_MANAGER: (
        READ_CLIENT,
        WRITE_CLIENT,
        DELETE_CLIENT,
        READ_TOKEN,
        WRITE_TOKEN,
        DELETE_TOKEN,
        READ_DASHBOARD,
        WRITE_DASHBOARD,
        UPLOAD_FILE,
    ),
    Role.TOKEN_MANAGER: (
        READ_TOKEN,
        WRITE_TOKEN,
        DELETE_TOKEN,
    ),
    Role.USER_MANAGER: (
        READ_USER,
        WRITE_USER,
        DELETE_USER,
        MANAGE_USERS,
    ),
    Role.ADMIN: (ADMIN_ACCESS,),
})

# Display only. Permission checks never consult the hierarchy.
ROLE_HIERARCHY: Mapping[Role, Tuple[Role, ...]] = MappingProxyType({
    Role.USER: (),
    Role.CLIENT_MANAGER: (Role.USER,),
    Role.TOKEN_MANAGER: (Role.USER,),
    Role.USER_MANAGER: (Role.USER, Role.CLIENT_MANAGER),
    Role.ADMIN: (Role.USER, Role.CLIENT_MANAGER, Role.TOKEN_MANAGER, Role.USER_MANAGER),
})

ROLE_NAMES: Mapping[Role, str] = MappingProxyType({
    Role.USER: "일반 사용자",
    Role.CLIENT_MANAGER: "클라이언트 관리자",
    Role.TOKEN_MANAGER: "토큰 관리자",
    Role.USER_MANAGER: "사용자 관리자",
    Role.ADMIN: "시스템 관리자",
})

# Label for masks that match no role
CUSTOM_ROLE_NAME = "사용자 정의"

# Second-pass order for role resolution, most powerful first
ROLE_FALLBACK_PRIORITY: Tuple[Role, ...] = (
    Role.USER_MANAGER,
    Role.CLIENT_MANAGER,
    Role.TOKEN_MANAGER,
    Role.USER,
)

# Role granted to newly created accounts (OAuth2 client features)
DEFAULT_USER_ROLE = Role.CLIENT_MANAGER


# ============================================================================
# User types
# ============================================================================

class UserType(str, enum.Enum):
    """Account flavours with their own default permission sets."""
    REGULAR = "regular"  # signs in through OAuth2 only
    DEVELOPER = "developer"  # manages OAuth2 clients


def _fold(permissions: Tuple[int, ...]) -> int:
    return reduce(or_, permissions, 0)


USER_TYPE_PERMISSIONS: Mapping[UserType, int] = MappingProxyType({
    UserType.REGULAR: _fold(ROLE_PERMISSIONS[Role.USER]),
    UserType.DEVELOPER: _fold(ROLE_PERMISSIONS[Role.CLIENT_MANAGER]),
})
