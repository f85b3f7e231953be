"""Deciding which labels a thread gets.

Only the first message of a thread is ever inspected. If its From or To
header is empty the thread is left alone, even when a later message would
have qualified.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from subaddress_labeler.mailbox import LabelStore, Thread
from subaddress_labeler.models import LabelingResult, RunSummary
from subaddress_labeler.routing import (
    decode_label_paths,
    extract_address,
    get_subroute,
    parse_address,
)

from .resolver import LabelResolver

logger = structlog.get_logger()


class ThreadLabelingPolicy:
    """Apply subaddress labels to threads.

    Args:
        store: Label store used to look up and create labels.
        trusted_creator_domains: Sender domains allowed to create missing
            labels. Lowercased into a frozenset, later changes to the passed
            collection have no effect.
    """

    def __init__(self, store: LabelStore, trusted_creator_domains: Iterable[str]) -> None:
        self.resolver = LabelResolver(store)
        self.trusted_creator_domains = frozenset(domain.lower() for domain in trusted_creator_domains)

    def is_trusted_creator(self, sender: str) -> bool:
        """Whether the sender's domain is on the allow-list, ignoring case."""
        return parse_address(sender).domain.lower() in self.trusted_creator_domains

    def label_thread(self, thread: Thread) -> LabelingResult | None:
        """Add the labels encoded in the thread's first recipient address.

        Returns:
            What was added, or None when the thread was skipped or already
            carried every resolved label.

        Raises:
            Whatever the label store raises. Callers labeling many threads
            should isolate failures per thread, as ``label_inbox`` does.
        """
        messages = thread.get_messages()
        if not messages:
            return None

        # Later messages never qualify a thread, see the module docstring.
        message = messages[0]
        sender = extract_address(message.get_from())
        recipient = extract_address(message.get_to())
        if not sender or not recipient:
            logger.debug("thread_skipped_missing_address", thread_id=thread.id)
            return None

        subroute = get_subroute(recipient)
        paths = decode_label_paths(subroute)
        create_if_absent = self.is_trusted_creator(sender)

        current = {label.name for label in thread.get_labels()}
        new_labels = [
            label
            for label in self.resolver.resolve_all(paths, create_if_absent)
            if label.name not in current
        ]
        if not new_labels:
            return None

        thread.add_labels(new_labels)

        result = LabelingResult(
            thread_id=thread.id,
            subject=thread.get_first_message_subject(),
            sender=sender,
            recipient=recipient,
            subroute=subroute,
            added_labels=[label.name for label in new_labels],
        )
        logger.info(
            "labels_added",
            thread_id=result.thread_id,
            labels=result.added_labels,
            subject=result.subject,
            sender=result.sender,
        )
        return result


def label_inbox(store: LabelStore, policy: ThreadLabelingPolicy) -> RunSummary:
    """Label every inbox thread of ``store``.

    A failing thread is logged and counted, the remaining threads are still
    processed. Nothing is retried.
    """

    summary = RunSummary()
    for thread in store.list_inbox_threads():
        summary.threads_seen += 1
        try:
            result = policy.label_thread(thread)
        except Exception as exc:  # noqa: BLE001
            summary.threads_failed += 1
            logger.exception("thread_labeling_failed", thread_id=thread.id, error=str(exc))
            continue

        if result is not None:
            summary.threads_labeled += 1
            summary.results.append(result)

    logger.info(
        "inbox_labeling_completed",
        threads_seen=summary.threads_seen,
        threads_labeled=summary.threads_labeled,
        threads_failed=summary.threads_failed,
    )
    return summary
