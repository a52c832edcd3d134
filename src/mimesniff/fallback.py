"""
Generic content-type classifier, used when no magic number matched.

Implements the content-type sniffing algorithm of the WHATWG MIME Sniffing standard
(https://mimesniff.spec.whatwg.org/): markup and well-known web formats first, then a
"no binary bytes" rule for plain text. It looks at no more than SNIFF_LEN bytes and
always answers; "application/octet-stream" when nothing fits.
"""

from __future__ import annotations

from typing import Callable

from mimesniff.defaults import DEFAULT_MIME_TYPE, SNIFF_LEN

_Matcher = Callable[[bytes, int], str | None]

# 0xWS and 0xTT from https://mimesniff.spec.whatwg.org/#terminology
_WHITESPACE = frozenset(b"\t\n\x0c\r ")
_TAG_TERMINATORS = frozenset(b" >")

# 0x00-0x08, 0x0B, 0x0E-0x1A, 0x1C-0x1F
_BINARY_BYTES = frozenset([*range(0x00, 0x09), 0x0B, *range(0x0E, 0x1B), *range(0x1C, 0x20)])


def _exact(sig: bytes, content_type: str) -> _Matcher:
    def match(data: bytes, first_non_ws: int) -> str | None:
        return content_type if data.startswith(sig) else None

    return match


def _masked(mask: bytes, pattern: bytes, content_type: str, *, skip_ws: bool = False) -> _Matcher:
    # https://mimesniff.spec.whatwg.org/#pattern-matching-algorithm
    if len(mask) != len(pattern):
        raise ValueError(f"Mask and pattern lengths differ for {content_type}: {len(mask)} != {len(pattern)}")

    def match(data: bytes, first_non_ws: int) -> str | None:
        if skip_ws:
            data = data[first_non_ws:]
        if len(data) < len(pattern):
            return None
        for i, expected in enumerate(pattern):
            if data[i] & mask[i] != expected:
                return None
        return content_type

    return match


def _html(tag: bytes) -> _Matcher:
    def match(data: bytes, first_non_ws: int) -> str | None:
        data = data[first_non_ws:]
        if len(data) < len(tag) + 1:
            return None
        for i, expected in enumerate(tag):
            actual = data[i]
            if ord("A") <= expected <= ord("Z"):
                actual &= 0xDF  # case-insensitive
            if actual != expected:
                return None
        if data[len(tag)] not in _TAG_TERMINATORS:
            return None
        return "text/html; charset=utf-8"

    return match


def _mp4(data: bytes, first_non_ws: int) -> str | None:
    # https://mimesniff.spec.whatwg.org/#signature-for-mp4
    if len(data) < 12:
        return None
    box_size = int.from_bytes(data[:4], "big")
    if len(data) < box_size or box_size % 4 != 0:
        return None
    if data[4:8] != b"ftyp":
        return None
    for offset in range(8, box_size, 4):
        if offset == 12:
            # Minor version of the major brand
            continue
        if data[offset : offset + 3] == b"mp4":
            return "video/mp4"
    return None


def _text(data: bytes, first_non_ws: int) -> str | None:
    if any(b in _BINARY_BYTES for b in data[first_non_ws:]):
        return None
    return "text/plain; charset=utf-8"


_SNIFF_SIGNATURES: tuple[_Matcher, ...] = (
    # Markup
    _html(b"<!DOCTYPE HTML"),
    _html(b"<HTML"),
    _html(b"<HEAD"),
    _html(b"<SCRIPT"),
    _html(b"<IFRAME"),
    _html(b"<H1"),
    _html(b"<DIV"),
    _html(b"<FONT"),
    _html(b"<TABLE"),
    _html(b"<A"),
    _html(b"<STYLE"),
    _html(b"<TITLE"),
    _html(b"<B"),
    _html(b"<BODY"),
    _html(b"<BR"),
    _html(b"<P"),
    _html(b"<!--"),
    _masked(b"\xff\xff\xff\xff\xff", b"<?xml", "text/xml; charset=utf-8", skip_ws=True),
    _exact(b"%PDF-", "application/pdf"),
    _exact(b"%!PS-Adobe-", "application/postscript"),
    # UTF BOMs
    _masked(b"\xff\xff\x00\x00", b"\xfe\xff\x00\x00", "text/plain; charset=utf-16be"),
    _masked(b"\xff\xff\x00\x00", b"\xff\xfe\x00\x00", "text/plain; charset=utf-16le"),
    _masked(b"\xff\xff\xff\x00", b"\xef\xbb\xbf\x00", "text/plain; charset=utf-8"),
    # Images
    _exact(b"\x00\x00\x01\x00", "image/x-icon"),
    _exact(b"\x00\x00\x02\x00", "image/x-icon"),
    _exact(b"BM", "image/bmp"),
    _exact(b"GIF87a", "image/gif"),
    _exact(b"GIF89a", "image/gif"),
    _masked(
        b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff\xff\xff",
        b"RIFF\x00\x00\x00\x00WEBPVP",
        "image/webp",
    ),
    _exact(b"\x89PNG\r\n\x1a\n", "image/png"),
    _exact(b"\xff\xd8\xff", "image/jpeg"),
    # Audio / video, in the order the standard prescribes
    _masked(
        b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff",
        b"FORM\x00\x00\x00\x00AIFF",
        "audio/aiff",
    ),
    _masked(b"\xff\xff\xff", b"ID3", "audio/mpeg"),
    _masked(b"\xff\xff\xff\xff\xff", b"OggS\x00", "application/ogg"),
    _masked(b"\xff\xff\xff\xff\xff\xff\xff\xff", b"MThd\x00\x00\x00\x06", "audio/midi"),
    _masked(
        b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff",
        b"RIFF\x00\x00\x00\x00AVI ",
        "video/avi",
    ),
    _masked(
        b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff",
        b"RIFF\x00\x00\x00\x00WAVE",
        "audio/wave",
    ),
    _mp4,
    _exact(b"\x1a\x45\xdf\xa3", "video/webm"),
    # Fonts
    _masked(
        b"\x00" * 34 + b"\xff\xff",  # 34 don't-care bytes, then "LP"
        b"\x00" * 34 + b"LP",
        "application/vnd.ms-fontobject",
    ),
    _exact(b"\x00\x01\x00\x00", "font/ttf"),
    _exact(b"OTTO", "font/otf"),
    _exact(b"ttcf", "font/collection"),
    _exact(b"wOFF", "font/woff"),
    _exact(b"wOF2", "font/woff2"),
    # Archives
    _exact(b"\x1f\x8b\x08", "application/x-gzip"),
    _exact(b"PK\x03\x04", "application/zip"),
    # RAR 4 and RAR 5, as RAR Labs defines them
    _exact(b"Rar!\x1a\x07\x00", "application/x-rar-compressed"),
    _exact(b"Rar!\x1a\x07\x01\x00", "application/x-rar-compressed"),
    _exact(b"\x00asm", "application/wasm"),
    # Must stay last
    _text,
)


def detect_content_type(data: bytes) -> str:
    """
    Best-effort content type of `data`, considering at most its first SNIFF_LEN bytes.

    Never raises; returns "application/octet-stream" when it cannot tell.
    """
    data = bytes(data[:SNIFF_LEN]) if data else b""

    first_non_ws = 0
    while first_non_ws < len(data) and data[first_non_ws] in _WHITESPACE:
        first_non_ws += 1

    for matcher in _SNIFF_SIGNATURES:
        content_type = matcher(data, first_non_ws)
        if content_type:
            return content_type

    return DEFAULT_MIME_TYPE
