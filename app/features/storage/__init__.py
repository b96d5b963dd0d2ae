"""
Client storage key names shared by the frontend and backend.

Cookie, local storage and session storage keys used to persist tokens and UI
state, plus helpers that pick the right token key for a token type.
"""
