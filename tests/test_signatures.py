from __future__ import annotations

import pytest

from mimesniff.catalog import CATALOG
from mimesniff.core import Sniffer
from mimesniff.defaults import SNIFF_LEN
from mimesniff.signatures import Signature, _equals, _startswith, _u32, is_elf, is_tar
from tests.utils import local_header


def _pad(prefix: bytes, size: int = 64) -> bytes:
    return prefix + b"\x00" * max(0, size - len(prefix))


TAR_HEADER = _pad(b"hello.txt", 257) + b"ustar\x0000" + b"\x00" * 248

SAMPLES: list[tuple[str, bytes]] = [
    ("application/epub+zip", local_header(b"mimetype", b"application/epub+zip")),
    ("application/font-sfnt", _pad(b"\x00\x01\x00\x00\x00\x0c\x00\x80")),
    ("application/font-sfnt", _pad(b"OTTO\x00\x0a\x00\x80")),
    ("application/font-woff", _pad(b"wOFF\x00\x01\x00\x00")),
    ("application/font-woff", _pad(b"wOF2\x00\x01\x00\x00")),
    ("application/msword", _pad(b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1")),
    ("application/rtf", b"{\\rtf1\\ansi\\deff0 hello}"),
    ("application/vnd.ms-cab-compressed", _pad(b"MSCF")),
    ("application/vnd.ms-cab-compressed", _pad(b"ISc(")),
    ("application/x-7z-compressed", _pad(b"7z\xbc\xaf\x27\x1c\x00\x04")),
    ("application/x-bzip2", b"BZh91AY&SY"),
    ("application/x-compress", _pad(b"\x1f\x9d\x90")),
    ("application/x-compress", _pad(b"\x1f\xa0")),
    ("application/x-deb", b"!<arch>\ndebian-binary   1342943816  0     0     100644  4         `\n"),
    ("application/x-unix-archive", b"!<arch>\nfoo.o/          0           0     0     644     10        `\n"),
    ("application/x-google-chrome-extension", _pad(b"Cr24\x02\x00\x00\x00")),
    ("application/x-lzip", _pad(b"LZIP\x01")),
    ("application/x-rpm", _pad(b"\xed\xab\xee\xdb\x03\x00", 128)),
    ("application/x-tar", TAR_HEADER),
    ("application/x-xz", _pad(b"\xfd7zXZ\x00\x00\x04")),
    ("application/x-executable", _pad(b"\x7fELF\x02\x01\x01")),
    ("application/x-msdownload", _pad(b"MZ\x90\x00\x03")),
    ("application/x-nintendo-nes-rom", _pad(b"NES\x1a\x02\x01")),
    ("application/x-shockwave-flash", _pad(b"FWS\x0a")),
    ("application/x-shockwave-flash", _pad(b"CWS\x0a")),
    ("application/x-sqlite3", b"SQLite format 3\x00\x10\x00"),
    ("audio/aac", b"\xff\xf1\x50\x80"),
    ("audio/aac", b"\xff\xf9\x50\x80"),
    ("audio/amr", b"#!AMR\n<\x91\x17\x16\xbe\x66"),
    ("audio/m4a", _pad(b"\x00\x00\x00\x20ftypM4A \x00\x00\x00\x00")),
    ("audio/ogg", _pad(b"OggS\x00\x02")),
    ("audio/x-flac", _pad(b"fLaC\x00\x00\x00\x22")),
    ("audio/x-wav", _pad(b"RIFF\x24\x08\x00\x00WAVEfmt ")),
    ("image/jp2", _pad(b"\x00\x00\x00\x0cjP  \r\n\x87\n\x00\x00\x00\x14ftypjp2 ")),
    ("image/x-canon-cr2", _pad(b"II*\x00\x10\x00\x00\x00CR\x02\x00")),
    ("image/tiff", _pad(b"II*\x00\x08\x00\x00\x00")),
    ("image/tiff", _pad(b"MM\x00*\x00\x00\x00\x08")),
    ("image/vnd.adobe.photoshop", _pad(b"8BPS\x00\x01")),
    ("video/mpeg", _pad(b"\x00\x00\x01\xba\x44")),
    ("video/mpeg", _pad(b"\x00\x00\x01\xb3\x14")),
    ("video/x-m4v", _pad(b"\x00\x00\x00\x1cftypM4V \x00\x00\x00\x01")),
    ("video/quicktime", _pad(b"\x00\x00\x00\x14ftypqt  \x00\x00\x00\x00")),
    ("video/quicktime", _pad(b"\x00\x00\x00\x08moov")),
    ("video/quicktime", _pad(b"\x00\x00\x00\x08wide\x00\x00\x00\x00mdat")),
    ("video/x-flv", _pad(b"FLV\x01\x05")),
    ("video/x-matroska", _pad(b"\x1a\x45\xdf\xa3\x93\x42\x82\x88matroska")),
    ("video/x-ms-wmv", _pad(bytes.fromhex("3026B2758E66CF11A6D900AA0062CE6C"))),
    ("video/x-msvideo", _pad(b"RIFF\x00\x10\x00\x00AVI LIST")),
]


@pytest.mark.parametrize("expected, buf", SAMPLES, ids=[f"{m}-{i}" for i, (m, _) in enumerate(SAMPLES)])
def test_catalog_sample(sniffer: Sniffer, expected: str, buf: bytes):
    assert sniffer.sniff(buf) == expected


def test_every_catalog_type_has_a_sample():
    shadowed = {"application/vnd.ms-excel", "application/vnd.ms-powerpoint"}
    office = {s.mime_type for s in CATALOG if s.window is None}
    covered = {m for m, _ in SAMPLES}
    assert {s.mime_type for s in CATALOG} - covered - shadowed - office == set()


def test_catalog_keys_are_unique():
    keys = [s.mime_type for s in CATALOG]
    assert len(keys) == len(set(keys))


def test_specific_entries_precede_generic_ones():
    order = [s.mime_type for s in CATALOG]
    assert order.index("application/x-deb") < order.index("application/x-unix-archive")
    assert order.index("image/x-canon-cr2") < order.index("image/tiff")
    assert order.index("audio/m4a") < order.index("video/quicktime")
    assert order.index("video/x-m4v") < order.index("video/quicktime")


@pytest.mark.parametrize("signature", CATALOG, ids=lambda s: s.mime_type)
def test_short_buffers_never_raise(signature: Signature):
    for size in range(0, 64):
        assert signature.matches(b"\xff" * size) in (True, False)
        assert signature.matches(b"\x00" * size) in (True, False)


def test_elf_needs_a_full_header(sniffer: Sniffer):
    assert not is_elf(b"\x7fELF\x02\x01\x01")
    assert sniffer.sniff(b"\x7fELF\x02\x01\x01") != "application/x-executable"


def test_tar_magic_beyond_window_is_ignored():
    assert is_tar(TAR_HEADER)
    tar_sig = Signature("application/x-tar", is_tar)
    assert tar_sig.matches(TAR_HEADER)
    assert not tar_sig.matches(TAR_HEADER, limit=256)


def test_simple_predicates_see_at_most_sniff_len_bytes():
    seen: list[int] = []
    signature = Signature("x/y", lambda b: seen.append(len(b)) or False)
    signature.matches(b"\x00" * (SNIFF_LEN * 3))
    assert seen == [SNIFF_LEN]


def test_unbounded_window_sees_the_whole_buffer():
    seen: list[int] = []
    signature = Signature("x/y", lambda b: seen.append(len(b)) or False, window=None)
    signature.matches(b"\x00" * (SNIFF_LEN * 3))
    assert seen == [SNIFF_LEN * 3]


# --- Byte helpers ---


def test_startswith_out_of_bounds():
    assert _startswith(b"abc", b"abc")
    assert not _startswith(b"ab", b"abc")
    assert not _startswith(b"abc", b"c", 3)
    assert not _startswith(b"abc", b"a", -1)


def test_equals_at_offset():
    assert _equals(b"xxabc", 2, b"abc")
    assert not _equals(b"xxab", 2, b"abc")


def test_u32_byte_order():
    buf = b"\x01\x00\x00\x00"
    assert _u32(buf) == 1
    assert _u32(buf, byteorder="big") == 0x01000000
    assert _u32(buf, 1) == -1
