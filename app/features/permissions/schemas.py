"""
Pydantic schemas describing permission masks and roles.

Used by the auth layer to hand permission information to clients.
"""
from typing import Any, List, Union
from pydantic import BaseModel, Field, ConfigDict, computed_field, field_validator

from app.features.permissions import utils as permission_utils
from app.features.permissions.constants import ROLE_HIERARCHY, ROLE_NAMES, ROLE_PERMISSIONS, Role


# ============================================================================
# Permission Schemas
# ============================================================================

class PermissionSummary(BaseModel):
    """
    Human-readable view of a permission mask.

    Only `permissions` is input; every other field is derived from it, so
    values supplied for them are ignored.
    """
    permissions: int = Field(..., ge=0, description="Permission bitmask")

    model_config = ConfigDict(frozen=True)

    @field_validator('permissions', mode='before')
    @classmethod
    def parse_hex_mask(cls, v: Any) -> Any:
        """Accept 0x-prefixed hex strings as well as integers."""
        if isinstance(v, str):
            return permission_utils.hex_to_permissions(v)
        return v

    @computed_field(description="Bitmask as 0x-prefixed uppercase hex")
    @property
    def hex(self) -> str:
        return permission_utils.permissions_to_hex(self.permissions)

    @computed_field(description="Display names of the granted permissions")
    @property
    def names(self) -> List[str]:
        return permission_utils.get_permission_names(self.permissions)

    @computed_field(description="Display name of the best matching role")
    @property
    def role_name(self) -> str:
        return permission_utils.get_role_name(self.permissions)

    @computed_field
    @property
    def is_admin(self) -> bool:
        return permission_utils.is_admin(self.permissions)

    @classmethod
    def from_mask(cls, permissions: Union[int, str]) -> "PermissionSummary":
        if isinstance(permissions, str):
            permissions = permission_utils.hex_to_permissions(permissions)
        return cls(permissions=permissions)


# ============================================================================
# Role Schemas
# ============================================================================

class RoleDefinition(BaseModel):
    """A role with its defining permissions and display-only parents."""
    name: Role
    display_name: str
    permissions: List[int] = Field(default_factory=list, description="Defining permission bits")
    mask: int = Field(..., ge=0, description="OR of the defining permission bits")
    parents: List[Role] = Field(default_factory=list, description="Roles this one subsumes")

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    @classmethod
    def for_role(cls, role: Union[Role, str]) -> "RoleDefinition":
        mask = permission_utils.get_role_permissions_mask(role)
        role = Role(role)
        return cls(
            name=role,
            display_name=ROLE_NAMES[role],
            permissions=list(ROLE_PERMISSIONS[role]),
            mask=mask,
            parents=list(ROLE_HIERARCHY[role]),
        )

    @classmethod
    def all_roles(cls) -> List["RoleDefinition"]:
        return [cls.for_role(role) for role in Role]
