"""Resolving decoded label paths and applying them to threads."""

from .policy import ThreadLabelingPolicy, label_inbox
from .resolver import LabelResolver

__all__ = ["LabelResolver", "ThreadLabelingPolicy", "label_inbox"]
