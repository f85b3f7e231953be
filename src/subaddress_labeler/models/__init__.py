"""Data models for Subaddress Labeler.

This module contains Pydantic models describing what a labeling run did.
"""

from pydantic import BaseModel, Field


class LabelingResult(BaseModel):
    """Labels added to a single thread."""

    thread_id: str = Field(description="Labeled thread ID")
    subject: str = Field(default="", description="Subject of the thread's first message")
    sender: str = Field(description="Bare sender address of the inspected message")
    recipient: str = Field(description="Bare recipient address the labels were decoded from")
    subroute: str = Field(description="Routing tag extracted from the recipient")
    added_labels: list[str] = Field(
        default_factory=list,
        description="Names of the labels added to the thread",
    )


class RunSummary(BaseModel):
    """Outcome of labeling a batch of threads."""

    threads_seen: int = Field(default=0, description="Threads examined")
    threads_labeled: int = Field(default=0, description="Threads that received new labels")
    threads_failed: int = Field(default=0, description="Threads skipped because of an error")
    results: list[LabelingResult] = Field(
        default_factory=list,
        description="Per-thread results for labeled threads",
    )
