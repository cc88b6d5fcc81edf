"""Tests for queued toast notices."""
from unittest.mock import call, patch

from src.ui.notifications import NOTICE_KEY, flush_notices, push_notice


class TestNotices:
    """Tests for push_notice and flush_notices."""

    @patch('src.ui.notifications.st')
    def test_push_queues_in_order(self, mock_st):
        """Notices are kept in the order they were pushed."""
        mock_st.session_state = {}

        push_notice("error", "first")
        push_notice("info", "second")

        assert mock_st.session_state[NOTICE_KEY] == [("error", "first"), ("info", "second")]

    @patch('src.ui.notifications.st')
    def test_flush_shows_toasts_and_clears(self, mock_st):
        """Flushing shows each notice once with its icon."""
        mock_st.session_state = {NOTICE_KEY: [("success", "saved"), ("unknown", "hmm")]}

        flush_notices()

        assert mock_st.toast.call_args_list == [
            call("saved", icon="✅"),
            call("hmm", icon="ℹ️"),
        ]
        assert NOTICE_KEY not in mock_st.session_state

    @patch('src.ui.notifications.st')
    def test_flush_with_nothing_queued(self, mock_st):
        """No queued notices means no toasts."""
        mock_st.session_state = {}

        flush_notices()

        mock_st.toast.assert_not_called()
