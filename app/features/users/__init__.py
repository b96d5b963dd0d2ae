"""
User authentication feature module.

Holds the constants the auth service and clients agree on.
"""
