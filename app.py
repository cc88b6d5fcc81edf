"""
BrainLit webinar admin dashboard
"""
import logging
import os

import streamlit as st

from src.services.supabase_client import load_env
from src.ui.access_guard import LOGIN_PAGE, PAGE_KEY, protected_page
from src.ui.admin_dashboard import render_admin_dashboard
from src.ui.login_page import DASHBOARD_PAGE, render_login_page

load_env()
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


st.set_page_config(
    page_title="Admin Dashboard - BrainLit",
    page_icon="📊",
    layout="wide",
    initial_sidebar_state="collapsed"
)


def initialize_session_state():
    """Set session state defaults."""
    if PAGE_KEY not in st.session_state:
        st.session_state[PAGE_KEY] = DASHBOARD_PAGE


def render_current_page():
    """Render the page named by session state."""
    try:
        page = st.session_state[PAGE_KEY]

        if page == DASHBOARD_PAGE:
            protected_page(render_admin_dashboard)

        elif page == LOGIN_PAGE:
            render_login_page()

        else:
            st.error(f"Unknown page: {page}")
            if st.button("Back to dashboard"):
                st.session_state[PAGE_KEY] = DASHBOARD_PAGE
                st.rerun()

    except Exception as e:
        logger.exception("Unhandled exception while rendering page")
        st.error("Something went wrong, please try again")

        with st.expander("🔍 Error details"):
            st.code(str(e))


def main():
    """Application entry point."""
    initialize_session_state()
    render_current_page()


if __name__ == "__main__":
    main()
