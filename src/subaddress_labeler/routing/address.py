"""Splitting raw addresses and recipient signatures.

Nothing here validates addresses. Every function accepts any string and
returns a best-effort result instead of raising.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# "Display Name" <user@example.com>
_SIGNATURE_RE = re.compile(r'"(.*)" <(.*)>')


@dataclass(frozen=True)
class ParsedAddress:
    local_part: str
    domain: str


def parse_address(address: str) -> ParsedAddress:
    """Split ``address`` into local part and domain.

    The last ``@`` is the boundary, so ``"a@b@c.com"`` has the local part
    ``"a@b"`` and the domain ``"c.com"``. Without any ``@`` the whole input
    is the local part and the domain is empty.
    """

    local_part, sep, domain = address.rpartition("@")
    if not sep:
        return ParsedAddress(local_part=address, domain="")
    return ParsedAddress(local_part=local_part, domain=domain)


def extract_address(signature: str) -> str:
    """Return the bare address from a ``"Name" <address>`` signature.

    Anything not in that shape is assumed to be a bare address already and is
    returned unchanged.
    """

    match = _SIGNATURE_RE.search(signature)
    if match is None:
        return signature
    return match.group(2)
