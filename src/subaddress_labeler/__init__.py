"""Subaddress Labeler - Gmail labels from plus-addressed recipients.

Mail sent to ``me+work.acme+urgent@example.com`` ends up in a thread
labeled ``Work/Acme`` and ``Urgent``. Missing labels are only created
when the sender belongs to a trusted domain.
"""

__version__ = "0.1.0"
__author__ = "Trickl"

from subaddress_labeler.config import Settings, get_settings

__all__ = ["Settings", "get_settings", "__version__", "__author__"]
