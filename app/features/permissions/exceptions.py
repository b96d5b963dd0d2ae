"""
Exceptions raised by the permission model.
"""


class PermissionModelError(Exception):
    """Base class for permission model errors."""


class InvalidPermissionFormat(PermissionModelError, ValueError):
    """A permission mask could not be parsed from or rendered to hex."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid permission mask: {value!r}")


class UnknownPermissionError(PermissionModelError, KeyError):
    """No permission is defined under the given name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown permission: {self.name}"


class UnknownRoleError(PermissionModelError, KeyError):
    """No role is defined under the given identifier."""

    def __init__(self, role: str):
        self.role = role
        super().__init__(role)

    def __str__(self) -> str:
        return f"Unknown role: {self.role}"
