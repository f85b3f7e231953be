"""Mapping label paths to labels in a label store."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from subaddress_labeler.mailbox import Label, LabelStore

logger = structlog.get_logger()


class LabelResolver:
    """Look up labels by name, creating missing ones when allowed.

    Whether creation is allowed is decided by the caller; see
    ``ThreadLabelingPolicy.is_trusted_creator``.
    """

    def __init__(self, store: LabelStore) -> None:
        self.store = store

    def resolve_label(self, name: str, create_if_absent: bool) -> Label | None:
        """Return the label called ``name``.

        Args:
            name: Full hierarchical label name.
            create_if_absent: Create the label when the store has none by that name.

        Returns:
            The existing or newly created label, or None when it does not
            exist and may not be created.
        """
        label = self.store.find_label(name)
        if label is not None:
            return label
        if not create_if_absent:
            logger.debug("label_not_found", label=name)
            return None

        label = self.store.create_label(name)
        logger.info("label_created", label=name)
        return label

    def resolve_all(self, paths: Iterable[str], create_if_absent: bool) -> list[Label]:
        """Resolve every path in order, dropping the ones that stay absent."""
        labels: list[Label] = []
        for path in paths:
            label = self.resolve_label(path, create_if_absent)
            if label is not None:
                labels.append(label)
        return labels
