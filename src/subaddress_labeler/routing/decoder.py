"""Decoding subroutes into hierarchical label paths.

A subroute such as ``abc.def+foo_bar`` holds one label path per
``+``-separated group. Dots nest labels and underscores separate words::

    >>> decode_label_paths("abc.def+foo_bar+biz")
    ['Abc/Def', 'Foo Bar', 'Biz']

Empty groups, segments and words are kept as empty strings. Whether such a
path resolves to anything is up to the label store.
"""

from __future__ import annotations

from .subroute import get_subroute

GROUP_DELIMITER = "+"
HIERARCHY_DELIMITER = "."
WORD_DELIMITER = "_"
LABEL_PATH_SEPARATOR = "/"


def title_case_word(word: str) -> str:
    """Uppercase the first character and lowercase the rest."""
    return word[:1].upper() + word[1:].lower()


def normalize_segment(segment: str) -> str:
    """Turn ``foo_bar`` into ``Foo Bar``."""
    return " ".join(title_case_word(word) for word in segment.split(WORD_DELIMITER))


def decode_label_paths(subroute: str) -> list[str]:
    """Decode ``subroute`` into label paths, one per group, in order."""
    return [
        LABEL_PATH_SEPARATOR.join(
            normalize_segment(segment) for segment in group.split(HIERARCHY_DELIMITER)
        )
        for group in subroute.split(GROUP_DELIMITER)
    ]


def label_paths_for_address(address: str) -> list[str]:
    """Label paths encoded in a recipient address."""
    return decode_label_paths(get_subroute(address))
