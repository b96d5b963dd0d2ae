"""
Storage key names. Values are the literal keys written to client storage.
"""
import enum
from types import MappingProxyType
from typing import Mapping, Type


class CookieKey(str, enum.Enum):
    """Cookie names."""
    TOKEN = "token"  # HTTP-only auth cookie set by the backend
    CSRF_TOKEN = "csrf_token"
    SESSION_ID = "session_id"


class LocalStorageKey(str, enum.Enum):
    """Local storage keys, kept across browser sessions."""
    LOGIN_TOKEN = "auth_token_login"
    OAUTH2_TOKEN = "auth_token_oauth2"
    REFRESH_LOGIN_TOKEN = "refresh_token_login"
    REFRESH_OAUTH2_TOKEN = "refresh_token_oauth2"
    USER_PROFILE = "user_profile"
    USER_PERMISSIONS = "user_permissions"
    THEME_PREFERENCE = "theme_preference"
    LANGUAGE_PREFERENCE = "language_preference"
    LAST_LOGIN_EMAIL = "last_login_email"  # email autocomplete


class SessionStorageKey(str, enum.Enum):
    """Session storage keys, dropped with the tab."""
    # Redirect guards against OAuth2 redirect loops
    OAUTH2_REDIRECTING = "oauth2_redirecting"
    OAUTH2_API_REDIRECTING = "oauth2_api_redirecting"
    TWO_FACTOR_IN_PROGRESS = "two_factor_in_progress"
    TEMP_LOGIN_DATA = "temp_login_data"
    FORM_DATA_CACHE = "form_data_cache"
    OIDC_NONCE = "oidc_nonce"
    OIDC_STATE = "oidc_state"
    RELOAD_COUNTER = "reload_counter"  # guards against reload loops


STORAGE_KEYS: Mapping[str, Type[enum.Enum]] = MappingProxyType({
    "COOKIE": CookieKey,
    "LOCAL_STORAGE": LocalStorageKey,
    "SESSION_STORAGE": SessionStorageKey,
})
