"""Pure address -> label path decoding."""

from .address import ParsedAddress, extract_address, parse_address
from .decoder import decode_label_paths, label_paths_for_address, title_case_word
from .subroute import DIRECT_SUBROUTE, get_subroute

__all__ = [
    "DIRECT_SUBROUTE",
    "ParsedAddress",
    "decode_label_paths",
    "extract_address",
    "get_subroute",
    "label_paths_for_address",
    "parse_address",
    "title_case_word",
]
