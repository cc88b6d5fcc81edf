"""Route guard for admin-only pages."""
from typing import Callable

import streamlit as st

from src.services.admin_service import is_admin_authenticated

LOGIN_PAGE = "admin_login"
PAGE_KEY = "current_page"


def protected_page(render: Callable[[], None]) -> None:
    """
    Render an admin-only page or redirect to the login page.

    Behavior:
        - Authenticated: calls render() and nothing else
        - Otherwise: replaces the current page with the login page and reruns,
          so the guarded page is not left behind in navigation
    """
    if is_admin_authenticated():
        render()
        return

    st.session_state[PAGE_KEY] = LOGIN_PAGE
    st.rerun()
