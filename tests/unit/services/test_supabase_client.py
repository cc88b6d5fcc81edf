"""Unit tests for supabase_client."""
import pytest
from unittest.mock import patch

from src.services import supabase_client
from src.utils.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def fresh_client():
    """Reset the cached client and skip .env loading."""
    supabase_client._reset_client()
    with patch('src.services.supabase_client.load_env'):
        yield
    supabase_client._reset_client()


class TestGetClient:
    """Test get_client function."""

    def test_missing_settings_raise(self, monkeypatch):
        """Missing URL or key is a configuration error."""
        monkeypatch.delenv("SUPABASE_URL", raising=False)
        monkeypatch.setenv("SUPABASE_KEY", "anon-key")

        with pytest.raises(ConfigurationError, match="SUPABASE_URL"):
            supabase_client.get_client()

    @patch('src.services.supabase_client.create_client')
    def test_client_is_created_once(self, mock_create, monkeypatch):
        """The client is cached for the process."""
        monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
        monkeypatch.setenv("SUPABASE_KEY", "anon-key")

        first = supabase_client.get_client()
        second = supabase_client.get_client()

        assert first is second
        mock_create.assert_called_once_with("https://example.supabase.co", "anon-key")
