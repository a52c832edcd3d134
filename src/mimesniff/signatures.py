"""
Fixed-offset signature predicates.

Every predicate takes the leading bytes of a buffer and answers whether its magic number
is there. Bounds are checked before each access, so a short buffer is simply "no match".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal

from mimesniff.defaults import SNIFF_LEN, ZIP_LOCAL_HEADER_SIG

Predicate = Callable[[bytes], bool]

OLE_CFBF = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"
ASF_GUID_PREFIX = bytes.fromhex("3026B2758E66CF11A6D9")
EPUB_MIMETYPE_ENTRY = b"mimetypeapplication/epub+zip"


@dataclass(frozen=True)
class Signature:
    """A catalog entry: the MIME type to report when `predicate` matches."""

    mime_type: str
    predicate: Predicate
    # How many leading bytes the predicate may observe. None: the whole buffer.
    window: int | None = SNIFF_LEN
    description: str | None = None

    def matches(self, buf: bytes, limit: int | None = None) -> bool:
        window = self.window
        if window is not None:
            if limit is not None:
                window = min(window, limit)
            buf = buf[:window]
        return bool(self.predicate(buf))


def _startswith(buf: bytes, sig: bytes, offset: int = 0) -> bool:
    if offset < 0 or offset + len(sig) > len(buf):
        return False
    return buf[offset : offset + len(sig)] == sig


def _equals(buf: bytes, start: int, sig: bytes) -> bool:
    return _startswith(buf, sig, start)


def _u32(buf: bytes, offset: int = 0, byteorder: Literal["little", "big"] = "little") -> int:
    if offset < 0 or offset + 4 > len(buf):
        return -1
    return int.from_bytes(buf[offset : offset + 4], byteorder)


def _riff_form(buf: bytes, form: bytes) -> bool:
    # b"RIFF" + 4 size bytes + form (WAVE/AVI)
    return _startswith(buf, b"RIFF", 0) and _startswith(buf, form, 8)


# ===== Archives / packages =====


def is_epub(buf: bytes) -> bool:
    # First stored entry is the uncompressed "mimetype" file.
    return _startswith(buf, ZIP_LOCAL_HEADER_SIG) and _equals(buf, 30, EPUB_MIMETYPE_ENTRY)


def is_cab(buf: bytes) -> bool:
    return _startswith(buf, b"MSCF") or _startswith(buf, b"ISc(")


def is_7z(buf: bytes) -> bool:
    return _startswith(buf, b"7z\xbc\xaf\x27\x1c")


def is_bzip2(buf: bytes) -> bool:
    return _startswith(buf, b"BZh")


def is_compress(buf: bytes) -> bool:
    return _startswith(buf, b"\x1f\xa0") or _startswith(buf, b"\x1f\x9d")


def is_deb(buf: bytes) -> bool:
    return _startswith(buf, b"!<arch>\ndebian-binary")


def is_unix_archive(buf: bytes) -> bool:
    return _startswith(buf, b"!<arch>")


def is_lzip(buf: bytes) -> bool:
    return _startswith(buf, b"LZIP")


def is_rpm(buf: bytes) -> bool:
    # The lead alone is 96 bytes.
    return len(buf) > 96 and _startswith(buf, b"\xed\xab\xee\xdb")


def is_tar(buf: bytes) -> bool:
    # POSIX "ustar" magic at 257
    return _equals(buf, 257, b"ustar")


def is_xz(buf: bytes) -> bool:
    return _startswith(buf, b"\xfd7zXZ\x00")


def is_chrome_extension(buf: bytes) -> bool:
    return _startswith(buf, b"Cr24")


# ===== Executables / binaries =====


def is_elf(buf: bytes) -> bool:
    # Shorter than a 32-bit ELF header cannot be an executable.
    return len(buf) > 52 and _startswith(buf, b"\x7fELF")


def is_msdownload(buf: bytes) -> bool:
    return _startswith(buf, b"MZ")


def is_nes_rom(buf: bytes) -> bool:
    return _startswith(buf, b"NES\x1a")


def is_shockwave_flash(buf: bytes) -> bool:
    # FWS (uncompressed) or CWS (zlib)
    return len(buf) > 2 and buf[0] in (0x43, 0x46) and _equals(buf, 1, b"WS")


def is_sqlite3(buf: bytes) -> bool:
    return _startswith(buf, b"SQLi")


# ===== Documents / fonts =====


def is_ole_compound(buf: bytes) -> bool:
    return _startswith(buf, OLE_CFBF)


def is_rtf(buf: bytes) -> bool:
    return _startswith(buf, b"{\\rtf")


def is_font_sfnt(buf: bytes) -> bool:
    return _startswith(buf, b"\x00\x01\x00\x00\x00") or _startswith(buf, b"OTTO\x00")


def is_font_woff(buf: bytes) -> bool:
    return _startswith(buf, b"wOFF\x00\x01\x00\x00") or _startswith(buf, b"wOF2\x00\x01\x00\x00")


# ===== Images =====


def is_jp2(buf: bytes) -> bool:
    return _startswith(buf, b"\x00\x00\x00\x0cjP  \r\n\x87\n\x00")


def is_tiff(buf: bytes) -> bool:
    return _startswith(buf, b"II*\x00") or _startswith(buf, b"MM\x00*")


def is_canon_cr2(buf: bytes) -> bool:
    return is_tiff(buf) and _equals(buf, 8, b"CR")


def is_photoshop(buf: bytes) -> bool:
    return _startswith(buf, b"8BPS")


# ===== Audio =====


def is_aac(buf: bytes) -> bool:
    # ADTS sync word, MPEG-4 (f1) or MPEG-2 (f9), no CRC
    return _startswith(buf, b"\xff\xf1") or _startswith(buf, b"\xff\xf9")


def is_amr(buf: bytes) -> bool:
    return len(buf) > 11 and _startswith(buf, b"#!AMR\n")


def is_m4a(buf: bytes) -> bool:
    return len(buf) > 10 and (_equals(buf, 4, b"ftypM4A") or _startswith(buf, b"M4A "))


def is_ogg(buf: bytes) -> bool:
    return _startswith(buf, b"OggS")


def is_flac(buf: bytes) -> bool:
    return _startswith(buf, b"fLaC")


def is_wav(buf: bytes) -> bool:
    return _riff_form(buf, b"WAVE")


# ===== Video =====


def is_mpeg(buf: bytes) -> bool:
    # Pack header or sequence header start codes 0x000001B0..BF
    return len(buf) > 3 and _startswith(buf, b"\x00\x00\x01") and 0xB0 <= buf[3] <= 0xBF


def is_m4v(buf: bytes) -> bool:
    return _equals(buf, 4, b"ftypM4V")


def is_quicktime(buf: bytes) -> bool:
    if len(buf) <= 15:
        return False
    return (
        _startswith(buf, b"\x00\x00\x00\x14ftyp")
        or _equals(buf, 4, b"moov")
        or _equals(buf, 4, b"mdat")
        or _equals(buf, 12, b"mdat")
    )


def is_flv(buf: bytes) -> bool:
    return _startswith(buf, b"FLV\x01")


def is_matroska(buf: bytes) -> bool:
    # EBML header with DocType "matroska", either packed right after the header or at 31
    return _startswith(buf, b"\x1a\x45\xdf\xa3\x93\x42\x82\x88matroska") or _equals(
        buf, 31, b"matroska"
    )


def is_wmv(buf: bytes) -> bool:
    return _startswith(buf, ASF_GUID_PREFIX)


def is_msvideo(buf: bytes) -> bool:
    return _riff_form(buf, b"AVI")
