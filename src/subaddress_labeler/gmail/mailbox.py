"""Gmail-backed label store for the labeling core."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

import structlog

from .client import GmailClient
from .parsing import header_map, thread_label_ids, thread_messages

logger = structlog.get_logger()


@dataclass(frozen=True)
class GmailLabel:
    id: str
    name: str


@dataclass(frozen=True)
class GmailMessage:
    from_header: str = ""
    to_header: str = ""
    subject: str = ""

    @classmethod
    def from_api(cls, message: dict[str, Any]) -> GmailMessage:
        hm = header_map(message)
        return cls(
            from_header=hm.get("from", ""),
            to_header=hm.get("to", ""),
            subject=hm.get("subject", ""),
        )

    def get_from(self) -> str:
        return self.from_header

    def get_to(self) -> str:
        return self.to_header


class GmailThread:
    """A Gmail thread, fetched on first use."""

    def __init__(self, mailbox: GmailMailbox, thread_id: str) -> None:
        self.mailbox = mailbox
        self._id = thread_id
        self._raw: dict[str, Any] | None = None

    @property
    def id(self) -> str:
        return self._id

    def _thread(self) -> dict[str, Any]:
        if self._raw is None:
            self._raw = self.mailbox.client.get_thread(self._id)
        return self._raw

    def get_messages(self) -> list[GmailMessage]:
        return [GmailMessage.from_api(m) for m in thread_messages(self._thread())]

    def get_labels(self) -> list[GmailLabel]:
        return [self.mailbox.label_for_id(label_id) for label_id in thread_label_ids(self._thread())]

    def add_label(self, label: GmailLabel) -> None:
        self.mailbox.client.add_labels_to_thread(self._id, [label.id])

    def add_labels(self, labels: list[GmailLabel]) -> None:
        # A single threads.modify call applies all labels or fails as a whole.
        self.mailbox.client.add_labels_to_thread(self._id, [label.id for label in labels])

    def get_first_message_subject(self) -> str:
        messages = self.get_messages()
        return messages[0].subject if messages else ""


class GmailMailbox:
    """Label store over a Gmail account.

    Labels are listed once and cached by name. Labels created through this
    mailbox join the cache, so a second lookup finds them without another
    API call.
    """

    def __init__(
        self,
        client: GmailClient,
        query: str = "in:inbox",
        max_threads: int | None = None,
    ) -> None:
        self.client = client
        self.query = query
        self.max_threads = max_threads
        self._labels_by_name: dict[str, GmailLabel] | None = None

    def _labels(self) -> dict[str, GmailLabel]:
        if self._labels_by_name is None:
            labels: dict[str, GmailLabel] = {}
            for raw in self.client.list_labels():
                label_id = raw.get("id")
                name = raw.get("name")
                if label_id and name:
                    labels[str(name)] = GmailLabel(id=str(label_id), name=str(name))
            self._labels_by_name = labels
            logger.debug("gmail_labels_loaded", label_count=len(labels))
        return self._labels_by_name

    def label_for_id(self, label_id: str) -> GmailLabel:
        for label in self._labels().values():
            if label.id == label_id:
                return label
        # Labels created elsewhere after the cache was loaded.
        return GmailLabel(id=label_id, name=label_id)

    def list_inbox_threads(self) -> Iterator[GmailThread]:
        for stub in self.client.list_threads(query=self.query, max_results=self.max_threads):
            thread_id = stub.get("id")
            if isinstance(thread_id, str) and thread_id:
                yield GmailThread(self, thread_id)

    def find_label(self, name: str) -> GmailLabel | None:
        return self._labels().get(name)

    def create_label(self, name: str) -> GmailLabel:
        raw = self.client.create_label(name)
        label = GmailLabel(id=str(raw["id"]), name=str(raw.get("name") or name))
        self._labels()[label.name] = label
        return label
