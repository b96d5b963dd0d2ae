"""
Token storage key helpers.
"""
from typing import List, Union

from app.features.storage.constants import LocalStorageKey
from app.features.users.constants import TokenType
from app.utils import get_logger


log = get_logger(__name__)


def _to_token_type(token_type: Union[TokenType, str]) -> TokenType:
    try:
        return TokenType(token_type)
    except ValueError:
        log.warning(f"Unknown token type: {token_type!r}")
        raise ValueError(f"Unknown token type: {token_type!r}") from None


def get_token_key(token_type: Union[TokenType, str]) -> str:
    """
    Local storage key holding the access token for a token type.

    Raises:
        ValueError: If token_type is neither "login" nor "oauth2"
    """
    if _to_token_type(token_type) is TokenType.LOGIN:
        return LocalStorageKey.LOGIN_TOKEN.value
    return LocalStorageKey.OAUTH2_TOKEN.value


def get_refresh_token_key(token_type: Union[TokenType, str]) -> str:
    """
    Local storage key holding the refresh token for a token type.

    Raises:
        ValueError: If token_type is neither "login" nor "oauth2"
    """
    if _to_token_type(token_type) is TokenType.LOGIN:
        return LocalStorageKey.REFRESH_LOGIN_TOKEN.value
    return LocalStorageKey.REFRESH_OAUTH2_TOKEN.value


def get_all_token_keys() -> List[str]:
    return [
        LocalStorageKey.LOGIN_TOKEN.value,
        LocalStorageKey.OAUTH2_TOKEN.value,
        LocalStorageKey.REFRESH_LOGIN_TOKEN.value,
        LocalStorageKey.REFRESH_OAUTH2_TOKEN.value,
    ]


def get_all_auth_keys() -> List[str]:
    """Every auth-related local storage key, for clearing on logout."""
    return [
        *get_all_token_keys(),
        LocalStorageKey.USER_PROFILE.value,
        LocalStorageKey.USER_PERMISSIONS.value,
    ]
