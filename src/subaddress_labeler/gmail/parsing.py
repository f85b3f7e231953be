"""Helpers for reading Gmail API thread payloads."""

from __future__ import annotations

from typing import Any


def header_map(message: dict[str, Any]) -> dict[str, str]:
    """Lowercased header name -> value for a Gmail API message."""
    payload = message.get("payload") or {}
    headers = payload.get("headers") or []
    result: dict[str, str] = {}
    for h in headers:
        name = h.get("name")
        value = h.get("value")
        if isinstance(name, str) and isinstance(value, str):
            # Gmail can include duplicates; keep the first for now.
            result.setdefault(name.lower(), value)
    return result


def thread_messages(thread: dict[str, Any]) -> list[dict[str, Any]]:
    messages = thread.get("messages") or []
    if not isinstance(messages, list):
        return []
    return [m for m in messages if isinstance(m, dict)]


def thread_label_ids(thread: dict[str, Any]) -> list[str]:
    """Label IDs on any message of the thread, first seen first.

    Gmail keeps labels per message; a thread carries the union.
    """

    seen: dict[str, None] = {}
    for message in thread_messages(thread):
        label_ids = message.get("labelIds") or []
        if not isinstance(label_ids, list):
            continue
        for label_id in label_ids:
            if isinstance(label_id, str):
                seen.setdefault(label_id, None)
    return list(seen)
