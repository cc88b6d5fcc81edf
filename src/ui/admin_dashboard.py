"""Admin dashboard: registration table, webinar date and CSV export."""
import logging
import os
import traceback
from datetime import tzinfo
from typing import Dict, List

import streamlit as st
import streamlit.components.v1 as components

from src.models.dashboard_state import RegistrationListState, WebinarSettingsState
from src.models.registration import Registration
from src.services.admin_service import logout_admin
from src.services.export_service import EXPORT_HEADERS, EXPORT_MIME, export_bytes, export_filename
from src.services.registration_service import refresh_registrations
from src.services.settings_service import load_webinar_settings, save_webinar_date
from src.ui.access_guard import LOGIN_PAGE, PAGE_KEY
from src.ui.notifications import flush_notices, push_notice
from src.ui.styles import html_block, inject_admin_styles
from src.utils.date_utils import (
    format_local_input,
    format_registered_at,
    join_local_input,
    resolve_timezone,
    split_local_input,
)
from src.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

LIST_STATE_KEY = "registration_list_state"
SETTINGS_STATE_KEY = "webinar_settings_state"
ACTIVATED_KEY = "admin_dashboard_activated"
DATE_WIDGET_KEY = "webinar_date_day"
TIME_WIDGET_KEY = "webinar_date_time"


def _show_admin_exception(error: Exception, context: str) -> None:
    """Display error details in UI and log full traceback."""
    logger.exception("Admin dashboard error during %s", context)

    st.error(f"❌ {context} failed: {error}")
    with st.expander("🔍 Error details"):
        st.code("".join(traceback.format_exception(type(error), error, error.__traceback__)))


def _list_state() -> RegistrationListState:
    if LIST_STATE_KEY not in st.session_state:
        st.session_state[LIST_STATE_KEY] = RegistrationListState()
    return st.session_state[LIST_STATE_KEY]


def _settings_state() -> WebinarSettingsState:
    if SETTINGS_STATE_KEY not in st.session_state:
        st.session_state[SETTINGS_STATE_KEY] = WebinarSettingsState()
    return st.session_state[SETTINGS_STATE_KEY]


def viewer_timezone() -> tzinfo:
    """Configured timezone, else the browser's, else the server's."""
    context = getattr(st, "context", None)
    browser_tz = getattr(context, "timezone", None) if context is not None else None
    return resolve_timezone(os.getenv("DASHBOARD_TIMEZONE"), browser_tz)


def registration_rows(registrations: List[Registration], tz: tzinfo) -> List[Dict[str, str]]:
    """Table rows keyed by export header, with registered-at formatted for display."""
    rows = []
    for registration in registrations:
        values = registration.as_export_row()
        values[-1] = format_registered_at(registration.registered_at, tz)
        rows.append(dict(zip(EXPORT_HEADERS, values)))
    return rows


def _seed_date_widgets(value: str) -> None:
    """Copy the editable value into the picker widgets."""
    day, moment = split_local_input(value)
    st.session_state[DATE_WIDGET_KEY] = day
    st.session_state[TIME_WIDGET_KEY] = moment


def reset_dashboard_state() -> None:
    """Forget both tracks so the next dashboard entry loads them again."""
    for key in (ACTIVATED_KEY, LIST_STATE_KEY, SETTINGS_STATE_KEY, DATE_WIDGET_KEY, TIME_WIDGET_KEY):
        st.session_state.pop(key, None)


def _activate(list_state: RegistrationListState, settings_state: WebinarSettingsState, tz: tzinfo) -> None:
    """Initial load of both tracks, once per session."""
    with st.spinner("Loading registrations..."):
        refresh_registrations(list_state, push_notice)

    load_webinar_settings(settings_state, tz)
    _seed_date_widgets(settings_state.webinar_date)
    st.session_state[ACTIVATED_KEY] = True


def _redirect_home() -> None:
    """Full-page navigation to the site root."""
    home_url = os.getenv("HOME_URL", "/")
    components.html(
        f"""
        <script>
        window.parent.location.href = {home_url!r};
        </script>
        """,
        height=0,
    )


def _render_header() -> None:
    st.markdown(
        html_block(
            """
            <div class="admin-header">
                <h1 class="admin-title">📊 Admin Dashboard</h1>
                <div class="admin-subtitle">BrainLit webinar registrations</div>
            </div>
            """
        ),
        unsafe_allow_html=True,
    )


def _render_settings_card(settings_state: WebinarSettingsState, tz: tzinfo) -> None:
    with st.container(border=True):
        st.markdown("### 📅 Webinar Settings")
        st.caption("Set the next webinar date and time")

        # Streamlit drops widget keys when the widgets skip a run.
        if DATE_WIDGET_KEY not in st.session_state or TIME_WIDGET_KEY not in st.session_state:
            _seed_date_widgets(settings_state.webinar_date)

        date_col, time_col, save_col = st.columns([2, 2, 1.4], gap="small", vertical_alignment="bottom")
        with date_col:
            st.date_input("Next Webinar Date", key=DATE_WIDGET_KEY, format="YYYY-MM-DD")
        with time_col:
            st.time_input("Time", key=TIME_WIDGET_KEY, step=60)

        settings_state.webinar_date = join_local_input(
            st.session_state.get(DATE_WIDGET_KEY),
            st.session_state.get(TIME_WIDGET_KEY),
        )

        with save_col:
            label = "Saving..." if settings_state.is_saving else "Save Webinar Date"
            if st.button(
                label,
                key="save_webinar_date",
                type="primary",
                width='stretch',
                disabled=settings_state.is_saving,
            ):
                success, message = save_webinar_date(settings_state, tz)
                push_notice("success" if success else "error", message)
                st.rerun()

        if settings_state.webinar_date:
            st.caption(f"Current: {format_local_input(settings_state.webinar_date)}")


def _render_registrations_card(list_state: RegistrationListState, tz: tzinfo) -> None:
    with st.container(border=True):
        title_col, refresh_col, export_col, home_col, logout_col = st.columns(
            [3, 1, 1, 1, 1], gap="small", vertical_alignment="center"
        )
        with title_col:
            st.markdown("### Registrations")
            st.caption(f"Manage webinar registrations ({len(list_state.registrations)} total)")
        with refresh_col:
            if st.button("🔄 Refresh", key="refresh_registrations", width='stretch', disabled=list_state.is_loading):
                with st.spinner("Loading registrations..."):
                    refresh_registrations(list_state, push_notice)
                st.rerun()
        with export_col:
            st.download_button(
                "⬇️ Export CSV",
                data=export_bytes(list_state.registrations),
                file_name=export_filename(),
                mime=EXPORT_MIME,
                width='stretch',
                on_click=push_notice,
                args=("success", "CSV exported successfully!"),
            )
        with home_col:
            if st.button("🏠 Home", key="home", width='stretch'):
                _redirect_home()
        with logout_col:
            if st.button("🚪 Log out", key="logout", width='stretch'):
                logout_admin()
                reset_dashboard_state()
                st.session_state[PAGE_KEY] = LOGIN_PAGE
                st.rerun()

        if list_state.last_error:
            st.warning(f"Showing the last loaded list. Refresh failed: {list_state.last_error}")

        if list_state.is_loading:
            st.markdown("<div class='empty-state'>Loading registrations...</div>", unsafe_allow_html=True)
        elif list_state.is_empty:
            st.markdown("<div class='empty-state'>No registrations found</div>", unsafe_allow_html=True)
        else:
            st.dataframe(
                registration_rows(list_state.registrations, tz),
                hide_index=True,
                width='stretch',
            )


def render_admin_dashboard():
    """Render the admin dashboard. Callers are expected to wrap it in the access guard."""
    try:
        inject_admin_styles()

        tz = viewer_timezone()
        list_state = _list_state()
        settings_state = _settings_state()

        if not st.session_state.get(ACTIVATED_KEY):
            _activate(list_state, settings_state, tz)

        flush_notices()

        _render_header()
        _render_settings_card(settings_state, tz)
        _render_registrations_card(list_state, tz)

    except ConfigurationError as error:
        logger.error("Dashboard misconfigured: %s", error)
        st.error(f"❌ {error}")
    except Exception as error:
        _show_admin_exception(error, "Loading admin dashboard")
