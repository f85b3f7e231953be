"""Unit tests for Gmail client."""

from unittest.mock import MagicMock

import pytest

from subaddress_labeler.exceptions import AuthenticationError, ConfigurationError, GmailAPIError
from subaddress_labeler.gmail.client import GmailClient


@pytest.fixture
def client(mock_settings) -> GmailClient:
    """Provide a client wired to a mocked discovery service."""
    gmail = GmailClient(mock_settings)
    gmail._service = MagicMock()
    return gmail


class TestGmailClient:
    """Test suite for GmailClient class."""

    def test_gmail_client_initialization(self, mock_settings) -> None:
        """Test that Gmail client is properly initialized."""
        client = GmailClient(mock_settings)

        assert client.settings is mock_settings
        assert client._service is None

    def test_authenticate_missing_credentials_raises(self, mock_settings) -> None:
        """Test that authenticate fails fast when the credentials file is missing."""
        client = GmailClient(mock_settings)

        with pytest.raises(ConfigurationError):
            client.authenticate()

    def test_authenticate_wraps_oauth_failures(self, mock_settings, tmp_path, monkeypatch) -> None:
        credentials = tmp_path / "credentials.json"
        credentials.write_text("{}", encoding="utf-8")
        mock_settings.gmail_credentials_path = credentials
        client = GmailClient(mock_settings)
        monkeypatch.setattr(client, "_build_service", MagicMock(side_effect=ValueError("bad client file")))

        with pytest.raises(AuthenticationError, match="bad client file"):
            client.authenticate()

    @pytest.mark.parametrize(
        ("method", "args"),
        [
            ("list_threads", ()),
            ("get_thread", ("t1",)),
            ("list_labels", ()),
            ("create_label", ("Foo",)),
            ("add_labels_to_thread", ("t1", ["Label_1"])),
        ],
    )
    def test_operations_require_authentication(self, mock_settings, method, args) -> None:
        client = GmailClient(mock_settings)

        with pytest.raises(AuthenticationError):
            getattr(client, method)(*args)

    def test_list_threads_follows_pages(self, client) -> None:
        threads_api = client._service.users.return_value.threads.return_value
        threads_api.list.return_value.execute.side_effect = [
            {"threads": [{"id": "t1"}, {"id": "t2"}], "nextPageToken": "page2"},
            {"threads": [{"id": "t3"}]},
        ]

        threads = client.list_threads(query="in:inbox")

        assert [t["id"] for t in threads] == ["t1", "t2", "t3"]
        assert threads_api.list.call_args.kwargs["pageToken"] == "page2"
        assert threads_api.list.call_args.kwargs["q"] == "in:inbox"

    def test_list_threads_respects_max_results(self, client) -> None:
        threads_api = client._service.users.return_value.threads.return_value
        threads_api.list.return_value.execute.return_value = {
            "threads": [{"id": "t1"}, {"id": "t2"}],
            "nextPageToken": "more",
        }

        threads = client.list_threads(max_results=2)

        assert [t["id"] for t in threads] == ["t1", "t2"]
        assert threads_api.list.call_args.kwargs["maxResults"] == 2

    def test_get_thread_requests_metadata_headers(self, client, sample_thread_data) -> None:
        threads_api = client._service.users.return_value.threads.return_value
        threads_api.get.return_value.execute.return_value = sample_thread_data

        assert client.get_thread("thread789") == sample_thread_data
        kwargs = threads_api.get.call_args.kwargs
        assert kwargs["id"] == "thread789"
        assert kwargs["format"] == "metadata"
        assert kwargs["metadataHeaders"] == ["From", "To", "Subject"]

    def test_create_label_sends_visible_label(self, client) -> None:
        labels_api = client._service.users.return_value.labels.return_value
        labels_api.create.return_value.execute.return_value = {"id": "Label_1", "name": "Abc/Def"}

        assert client.create_label("Abc/Def") == {"id": "Label_1", "name": "Abc/Def"}
        body = labels_api.create.call_args.kwargs["body"]
        assert body["name"] == "Abc/Def"
        assert body["labelListVisibility"] == "labelShow"

    def test_add_labels_to_thread(self, client) -> None:
        threads_api = client._service.users.return_value.threads.return_value

        client.add_labels_to_thread("t1", ["Label_1"])

        kwargs = threads_api.modify.call_args.kwargs
        assert kwargs["id"] == "t1"
        assert kwargs["body"] == {"addLabelIds": ["Label_1"]}

    def test_api_failures_are_wrapped(self, client) -> None:
        labels_api = client._service.users.return_value.labels.return_value
        labels_api.list.return_value.execute.side_effect = RuntimeError("quota exceeded")

        with pytest.raises(GmailAPIError, match="quota exceeded"):
            client.list_labels()
