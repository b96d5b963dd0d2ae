"""Global test fixtures."""

import os

# Set JWT secret before any test modules import the auth constants.
# This must happen at module load time, not in a fixture
os.environ["JWT_SECRET"] = "test-secret-for-unit-tests"
