"""Admin service for authentication and session state management."""
import os
from typing import Tuple

import streamlit as st

from src.services.supabase_client import load_env

SESSION_FLAG_KEY = "admin_authenticated"
SESSION_FLAG_VALUE = "true"


def authenticate_admin(username: str, password: str) -> bool:
    """
    Authenticate admin credentials.

    Args:
        username: Admin username
        password: Admin password

    Returns:
        True if credentials valid, False otherwise

    Behavior:
        - Loads credentials from environment variables (or .env)
        - Plain-text comparison; an unset password never matches
    """
    load_env()

    admin_username = os.getenv("ADMIN_USERNAME", "admin")
    admin_password = os.getenv("ADMIN_PASSWORD", "")

    if not admin_password:
        return False

    return username == admin_username and password == admin_password


def is_admin_authenticated() -> bool:
    """
    Check if admin is authenticated in current session.

    Returns:
        True only if st.session_state['admin_authenticated'] is exactly "true"
    """
    return st.session_state.get(SESSION_FLAG_KEY) == SESSION_FLAG_VALUE


def login_admin(username: str, password: str) -> Tuple[bool, str]:
    """
    Log in admin user.

    Returns:
        Tuple of (success: bool, message: str)
        - (True, "Login successful") on success
        - (False, "Invalid username or password") on failure
    """
    if authenticate_admin(username, password):
        st.session_state[SESSION_FLAG_KEY] = SESSION_FLAG_VALUE
        return True, "Login successful"
    return False, "Invalid username or password"


def logout_admin() -> None:
    """Clear the session flag."""
    if SESSION_FLAG_KEY in st.session_state:
        del st.session_state[SESSION_FLAG_KEY]
