"""
Office Open XML package disambiguation.

Word, Excel and PowerPoint documents are all ZIP archives starting with `PK\\x03\\x04`. They
differ only in the folder their content lives in (`word/`, `xl/`, `ppt/`). When that folder is
the first entry, its name sits right after the first local file header. Usually, though, the
first entry is packaging metadata (`[Content_Types].xml` or `_rels/.rels`), so we hop forward
through the next few local headers looking for the folder name.

This is a bounded forward scan, not a central directory parse: each hop searches at most
`OOXML_SCAN_WINDOW` bytes and we give up after `OOXML_MAX_HOPS` hops. A package with more
bookkeeping entries before its content folder, or an unusual entry order, is not recognized.
That is accepted: classifying from the first few kilobytes matters more than being exact.
"""

from __future__ import annotations

from mimesniff.defaults import (
    CONTENT_TYPES_ENTRY,
    OOXML_MAX_HOPS,
    OOXML_SCAN_WINDOW,
    PRESENTATION_FRAGMENT,
    RELS_ENTRY,
    SPREADSHEET_FRAGMENT,
    WORDPROCESSING_FRAGMENT,
    ZIP_LOCAL_HEADER_LEN,
    ZIP_LOCAL_HEADER_SIG,
    ZIP_SIZE_BYTEORDER,
    ZIP_SIZE_FIELD_OFFSET,
)
from mimesniff.signatures import Predicate, _equals, _startswith, _u32

# The second header is expected right after the first entry's data:
# fixed header + "[Content_Types].xml" + compressed size.
_FIRST_ENTRY_OVERHEAD = ZIP_LOCAL_HEADER_LEN + len(CONTENT_TYPES_ENTRY)


def _next_entry_name(buf: bytes, start: int, window: int) -> int:
    """
    Find the next local file header in `buf[start:start + window]`.

    Returns the offset of that header's entry name, or -1 when the window is empty
    or holds no header.
    """
    end = min(start + window, len(buf))
    if start >= end:
        return -1
    found = buf.find(ZIP_LOCAL_HEADER_SIG, start, end)
    if found == -1:
        return -1
    return found + ZIP_LOCAL_HEADER_LEN


def has_office_fragment(
    buf: bytes,
    fragment: bytes,
    *,
    window: int = OOXML_SCAN_WINDOW,
    max_hops: int = OOXML_MAX_HOPS,
) -> bool:
    """Return True if `buf` is a ZIP whose content entries live under `fragment` (e.g. b"xl/")."""
    if not _startswith(buf, ZIP_LOCAL_HEADER_SIG):
        return False

    if _equals(buf, ZIP_LOCAL_HEADER_LEN, fragment):
        return True

    if not (
        _equals(buf, ZIP_LOCAL_HEADER_LEN, CONTENT_TYPES_ENTRY)
        or _equals(buf, ZIP_LOCAL_HEADER_LEN, RELS_ENTRY)
    ):
        return False

    size = _u32(buf, ZIP_SIZE_FIELD_OFFSET, ZIP_SIZE_BYTEORDER)
    if size < 0:
        return False

    # No 32-bit wraparound: a size near 2**32 points past the buffer.
    cursor = size + _FIRST_ENTRY_OVERHEAD
    for _ in range(max_hops):
        cursor = _next_entry_name(buf, cursor, window)
        if cursor == -1:
            return False
        if _equals(buf, cursor, fragment):
            return True
    return False


def office_package(
    fragment: bytes,
    *,
    window: int = OOXML_SCAN_WINDOW,
    max_hops: int = OOXML_MAX_HOPS,
) -> Predicate:
    """Build a predicate recognizing the OOXML family whose content lives under `fragment`."""

    def predicate(buf: bytes) -> bool:
        return has_office_fragment(buf, fragment, window=window, max_hops=max_hops)

    predicate.__name__ = predicate.__qualname__ = f"office_package[{fragment.decode('ascii')}]"
    return predicate


is_presentation = office_package(PRESENTATION_FRAGMENT)
is_spreadsheet = office_package(SPREADSHEET_FRAGMENT)
is_wordprocessing = office_package(WORDPROCESSING_FRAGMENT)
