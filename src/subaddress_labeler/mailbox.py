"""Capabilities the labeling core needs from a mailbox.

The core never talks to Gmail directly. Anything providing these methods can
be labeled, which is how the tests run against an in-memory store.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol


class Label(Protocol):
    """A label identified by its full hierarchical name, e.g. ``Work/Acme``."""

    @property
    def name(self) -> str: ...


class Message(Protocol):
    def get_from(self) -> str:
        """Raw From header."""
        ...

    def get_to(self) -> str:
        """Raw To header."""
        ...


class Thread(Protocol):
    @property
    def id(self) -> str: ...

    def get_messages(self) -> Sequence[Message]: ...

    def get_labels(self) -> Sequence[Label]: ...

    def add_label(self, label: Label) -> None: ...

    def add_labels(self, labels: Sequence[Label]) -> None:
        """Add all ``labels`` in one store call, or none of them."""
        ...

    def get_first_message_subject(self) -> str: ...


class LabelStore(Protocol):
    def list_inbox_threads(self) -> Iterable[Thread]: ...

    def find_label(self, name: str) -> Label | None:
        """Return the label named exactly ``name``, or None."""
        ...

    def create_label(self, name: str) -> Label: ...
