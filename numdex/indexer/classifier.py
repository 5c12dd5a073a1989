"""Decide which folders belong to a numbering scheme."""

import re

_STARTS_WITH_DIGIT = re.compile(r"[0-9]")
_YEAR_PREFIX = re.compile(r"(19|20)[0-9]{2}")
_BARE_YEAR = re.compile(r"[0-9]{4}")


def is_numbered_name(name: str) -> bool:
    """Check a folder's own name when deciding whether to index it.

    Names starting with 1900-2099 are treated as calendar years no matter
    what follows, so "2024" and "2024 Trips" are both rejected.
    """
    return bool(_STARTS_WITH_DIGIT.match(name)) and not _YEAR_PREFIX.match(name)


def is_numbered_segment(segment: str) -> bool:
    """Check one path segment while descending into the tree.

    Only a bare four digit token counts as a year here; "2024.01 - Notes"
    is a sub-number and qualifies.
    """
    return bool(_STARTS_WITH_DIGIT.match(segment)) and not _BARE_YEAR.fullmatch(segment)


def is_numbered_folder_path(path: str) -> bool:
    """Path-level check on the terminal folder name."""
    return is_numbered_name(path.split("/")[-1])
