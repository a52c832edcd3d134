# region ---[ Sniffing Window ]---

SNIFF_LEN = 512
"""Magic numbers live in a file's first 512 bytes. Simple predicates and the fallback never see more."""

DEFAULT_MIME_TYPE = "application/octet-stream"
"""Answer for an empty buffer, and what the fallback settles on when nothing fits."""

# endregion ---[ Sniffing Window ]---

# region ---[ ZIP / Office Packages ]---

ZIP_LOCAL_HEADER_SIG = b"PK\x03\x04"
ZIP_LOCAL_HEADER_LEN = 30
"""Fixed part of a local file header; the entry name starts right after it (0x1e)."""

ZIP_SIZE_FIELD_OFFSET = 18
"""Compressed-size field of the first local file header."""

ZIP_SIZE_BYTEORDER = "big"

CONTENT_TYPES_ENTRY = b"[Content_Types].xml"
RELS_ENTRY = b"_rels/.rels"

OOXML_SCAN_WINDOW = 6000
"""Forward search window for the next local header, per hop."""

OOXML_MAX_HOPS = 3
"""Local headers probed past the first one before giving up."""

PRESENTATION_FRAGMENT = b"ppt/"
SPREADSHEET_FRAGMENT = b"xl/"
WORDPROCESSING_FRAGMENT = b"word/"

# endregion ---[ ZIP / Office Packages ]---
