import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Secret used by the auth layer to sign JWTs. Unset means the documented
# fallback from app.features.users.constants applies.
JWT_SECRET: Optional[str] = os.environ.get("JWT_SECRET")

# Access token lifetime in the auth layer's duration notation
JWT_EXPIRES_IN: str = os.environ.get("JWT_EXPIRES_IN", "1h")

# Root log level
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
