"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest
import structlog


@dataclass(frozen=True)
class FakeLabel:
    name: str


@dataclass
class FakeMessage:
    from_header: str = ""
    to_header: str = ""
    subject: str = ""

    def get_from(self) -> str:
        return self.from_header

    def get_to(self) -> str:
        return self.to_header


@dataclass
class FakeThread:
    id: str
    messages: list[FakeMessage] = field(default_factory=list)
    labels: list[FakeLabel] = field(default_factory=list)
    fail_on_add: bool = False
    fail_on_label: str | None = None
    add_calls: int = 0

    def get_messages(self) -> list[FakeMessage]:
        return list(self.messages)

    def get_labels(self) -> list[FakeLabel]:
        return list(self.labels)

    def add_label(self, label: FakeLabel) -> None:
        self.add_labels([label])

    def add_labels(self, labels: list[FakeLabel]) -> None:
        self.add_calls += 1
        if self.fail_on_add or any(label.name == self.fail_on_label for label in labels):
            raise RuntimeError("quota exceeded")
        self.labels.extend(labels)

    def get_first_message_subject(self) -> str:
        return self.messages[0].subject if self.messages else ""


class FakeLabelStore:
    """In-memory label store recording every label it creates."""

    def __init__(self, label_names: list[str] | None = None) -> None:
        self.labels = {name: FakeLabel(name) for name in label_names or []}
        self.threads: list[FakeThread] = []
        self.created: list[str] = []

    def list_inbox_threads(self) -> list[FakeThread]:
        return list(self.threads)

    def find_label(self, name: str) -> FakeLabel | None:
        return self.labels.get(name)

    def create_label(self, name: str) -> FakeLabel:
        label = FakeLabel(name)
        self.labels[name] = label
        self.created.append(name)
        return label


@pytest.fixture
def label_store() -> FakeLabelStore:
    """Provide an empty in-memory label store."""
    return FakeLabelStore()


@pytest.fixture
def mock_settings():
    """Provide settings that never touch real credentials."""
    from subaddress_labeler.config import Settings

    return Settings(
        trusted_creator_domains=["bswck.dev"],
        gmail_credentials_path="missing-credentials.json",
        gmail_token_path="missing-token.json",
        log_level="DEBUG",
        debug=True,
    )


@pytest.fixture
def sample_thread_data() -> dict:
    """Provide a Gmail API thread (format=metadata)."""
    return {
        "id": "thread789",
        "messages": [
            {
                "id": "msg1",
                "threadId": "thread789",
                "labelIds": ["INBOX", "UNREAD"],
                "payload": {
                    "headers": [
                        {"name": "Subject", "value": "Casino night"},
                        {"name": "From", "value": '"J" <j@bswck.dev>'},
                        {"name": "To", "value": "casino.omega+inquiries@gmail.com"},
                    ],
                },
            },
            {
                "id": "msg2",
                "threadId": "thread789",
                "labelIds": ["INBOX", "Label_7"],
                "payload": {
                    "headers": [
                        {"name": "Subject", "value": "Re: Casino night"},
                        {"name": "From", "value": "casino.omega@gmail.com"},
                        {"name": "To", "value": "j@bswck.dev"},
                    ],
                },
            },
        ],
    }


@pytest.fixture
def make_store():
    """Build an in-memory label store holding the given label names."""

    def _make(label_names: list[str] | None = None) -> FakeLabelStore:
        return FakeLabelStore(label_names)

    return _make


@pytest.fixture
def make_thread():
    """Build a thread from (From, To, Subject) tuples and label names."""

    def _make(
        thread_id: str,
        messages: list[tuple[str, str, str]],
        labels: list[str] | None = None,
        fail_on_add: bool = False,
        fail_on_label: str | None = None,
    ) -> FakeThread:
        return FakeThread(
            id=thread_id,
            messages=[FakeMessage(f, t, s) for f, t, s in messages],
            labels=[FakeLabel(name) for name in labels or []],
            fail_on_add=fail_on_add,
            fail_on_label=fail_on_label,
        )

    return _make


@pytest.fixture(autouse=True)
def reset_structlog():
    """Drop logging configuration made by the CLI so no test keeps a captured stream."""
    yield
    structlog.reset_defaults()
