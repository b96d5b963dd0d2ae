"""
Permission model feature module.

Bitmask-encoded permissions, role-to-permission mappings, the role hierarchy,
and helpers to test, combine and describe permission masks.
"""
