"""Admin login page."""
import streamlit as st

from src.services.admin_service import login_admin
from src.ui.access_guard import PAGE_KEY
from src.ui.notifications import push_notice
from src.ui.styles import inject_admin_styles
from src.utils.validation import validate_credentials

DASHBOARD_PAGE = "admin_dashboard"


def render_login_page():
    """Render admin login page."""
    inject_admin_styles()

    with st.form("admin_login_form", clear_on_submit=False):
        st.markdown("<h1 class='login-title'>🔐 Admin Login</h1>", unsafe_allow_html=True)
        st.markdown(
            "<div class='login-description'>Sign in to manage webinar registrations</div>",
            unsafe_allow_html=True,
        )

        username = st.text_input("Username", placeholder="Admin username", key="admin_username_input")
        password = st.text_input("Password", type="password", placeholder="Password", key="admin_password_input")

        submit = st.form_submit_button("Log in", key="admin_login_submit", width='stretch', type="primary")

        if submit:
            is_valid, error_msg = validate_credentials(username, password)
            if not is_valid:
                st.error(f"❌ {error_msg}")
                return

            success, message = login_admin(username, password)
            if success:
                push_notice("success", message)
                st.session_state[PAGE_KEY] = DASHBOARD_PAGE
                st.rerun()
            else:
                st.error(f"❌ {message}")
