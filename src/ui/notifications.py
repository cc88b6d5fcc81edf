"""Toast notices queued in session state so they survive st.rerun()."""
import streamlit as st

NOTICE_KEY = "admin_notices"

NOTICE_ICONS = {
    "success": "✅",
    "error": "❌",
    "warning": "⚠️",
    "info": "ℹ️",
}


def push_notice(level: str, message: str) -> None:
    """Queue a notice for the next render."""
    st.session_state.setdefault(NOTICE_KEY, []).append((level, message))


def flush_notices() -> None:
    """Show and clear queued notices."""
    notices = st.session_state.pop(NOTICE_KEY, [])
    for level, message in notices:
        st.toast(message, icon=NOTICE_ICONS.get(level, NOTICE_ICONS["info"]))
