"""
Authentication constants shared with the auth layer.

Token issuance, credential checks and sessions live in the auth service; this
module only fixes the values they agree on.
"""
import enum
from types import MappingProxyType
from typing import Mapping, Tuple

from app.core import config
from app.features.permissions.constants import DEFAULT_USER_ROLE
from app.utils import get_logger


log = get_logger(__name__)

# Used when JWT_SECRET is unset; never acceptable outside development
JWT_SECRET_FALLBACK = "your-secret-key"

if not config.JWT_SECRET:
    log.warning("JWT_SECRET is not set, falling back to the development secret")

JWT_SECRET_KEY: str = config.JWT_SECRET or JWT_SECRET_FALLBACK
JWT_EXPIRES_IN: str = config.JWT_EXPIRES_IN
JWT_ALGORITHMS: Tuple[str, ...] = ("HS256",)
JWT_TOKEN_TYPE = "access"


class TokenType(str, enum.Enum):
    """Flow that issued a JWT."""
    LOGIN = "login"
    OAUTH2 = "oauth2"


# Token lifetimes in hours
LOGIN_TOKEN_EXPIRY_HOURS = 24
OAUTH2_TOKEN_EXPIRY_HOURS = 1

JWT_TOKEN_EXPIRY_HOURS: Mapping[TokenType, int] = MappingProxyType({
    TokenType.LOGIN: LOGIN_TOKEN_EXPIRY_HOURS,
    TokenType.OAUTH2: OAUTH2_TOKEN_EXPIRY_HOURS,
})

BCRYPT_SALT_ROUNDS = 10
DEFAULT_USER_PERMISSIONS = DEFAULT_USER_ROLE
TOKEN_EXPIRATION_SECONDS = LOGIN_TOKEN_EXPIRY_HOURS * 60 * 60

# Cache lifetimes in milliseconds
USER_CACHE_TTL = 600_000
PERMISSIONS_CACHE_TTL = 300_000

# TOTP settings
TWO_FACTOR_SECRET_LENGTH = 32
TWO_FACTOR_BACKUP_CODE_COUNT = 10
TWO_FACTOR_BACKUP_CODE_LENGTH = 10
TWO_FACTOR_WINDOW_SECONDS = 30


class AuthErrorMessage(str, enum.Enum):
    """User-facing error messages."""
    JWT_SECRET_MISSING = "JWT_SECRET 환경 변수가 필요합니다"
    INVALID_CREDENTIALS = "잘못된 자격 증명입니다"
    USER_NOT_FOUND = "사용자를 찾을 수 없습니다"
    TOKEN_EXPIRED = "토큰이 만료되었습니다"
    INVALID_TOKEN = "잘못된 토큰입니다"
    INVALID_TOKEN_TYPE = "잘못된 토큰 유형입니다"
    UNAUTHORIZED = "권한이 없습니다"
    AUTHENTICATION_FAILED = "인증에 실패했습니다"
    USER_ALREADY_EXISTS = "이미 존재하는 사용자입니다"
    LOGIN_FAILED = "로그인에 실패했습니다"
    TWO_FACTOR_NOT_ENABLED = "이 사용자에 대해 2단계 인증이 활성화되지 않았습니다"
    INVALID_TWO_FACTOR_TOKEN = "잘못된 2단계 인증 토큰입니다"
    INVALID_BACKUP_CODE = "잘못된 백업 코드입니다"


class AuthLogMessage(str, enum.Enum):
    """Log message prefixes; the caller appends the subject."""
    JWT_STRATEGY_INITIALIZED = "JWT Strategy initialized with Bearer token extraction"
    LOGIN_ATTEMPT = "Login attempt for email:"
    LOGIN_SUCCESSFUL = "Login successful for user:"
    LOGIN_FAILED_USER_NOT_FOUND = "Login failed: User not found for email:"
    LOGIN_FAILED_INVALID_PASSWORD = "Login failed: Invalid password for user:"
    JWT_VALIDATION_SUCCESSFUL = "JWT validation successful for user:"
    JWT_VALIDATION_ERROR = "JWT validation error:"
    PROFILE_REQUEST = "Profile request for user ID:"
    PROFILE_RETRIEVAL_SUCCESSFUL = "Profile retrieved for user:"
    PROFILE_RETRIEVAL_FAILED = "Profile retrieval failed for user ID:"
    INVALID_JWT_PAYLOAD_SUB = "Invalid JWT payload: missing or invalid sub claim"
    LOGIN_FAILED = "Login error for email"
    INVALID_JWT_PAYLOAD_EMAIL = "Invalid JWT payload: missing or invalid email claim"
    INVALID_TOKEN_TYPE = "Invalid token type:"
    USER_NOT_FOUND_BY_ID = "User not found for ID:"
    EMAIL_MISMATCH = "Email mismatch for user ID:"
