"""Routing tag extraction from the local part of an address."""

from __future__ import annotations

from .address import parse_address

TAG_DELIMITER = "+"
DIRECT_SUBROUTE = "direct"


def get_subroute(address: str) -> str:
    """Return everything after the first ``+`` of the local part.

    Addresses without a tag route to ``DIRECT_SUBROUTE``. Later ``+``
    characters are kept, they separate label groups.
    """

    local_part = parse_address(address).local_part
    _, sep, subroute = local_part.partition(TAG_DELIMITER)
    if not sep:
        return DIRECT_SUBROUTE
    return subroute
