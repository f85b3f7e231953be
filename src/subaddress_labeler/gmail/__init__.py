"""Gmail adapter for the labeling core."""

from .client import GmailClient
from .mailbox import GmailLabel, GmailMailbox, GmailMessage, GmailThread

__all__ = ["GmailClient", "GmailLabel", "GmailMailbox", "GmailMessage", "GmailThread"]
