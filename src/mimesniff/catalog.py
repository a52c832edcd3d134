"""
The built-in signature catalog.

Entries are tried top to bottom and the first match wins. Where two layouts overlap, the
more specific entry comes first: deb before a plain ar archive, CR2 before TIFF, M4A/M4V
before QuickTime, EPUB and the Office packages before anything that could claim a ZIP.

The three OLE2 compound document types share one signature. Only the first of them can
win `sniff`; `candidates` still reports all three.
"""

from __future__ import annotations

from mimesniff import containers
from mimesniff import signatures as sig
from mimesniff.signatures import Signature

CATALOG: tuple[Signature, ...] = (
    # ZIP-based
    Signature("application/epub+zip", sig.is_epub, description="ZIP + stored mimetype entry"),
    Signature(
        "application/vnd.openxmlformats-officedocument.presentationml.presentation",
        containers.is_presentation,
        window=None,
        description="ZIP + ppt/ entry",
    ),
    Signature(
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        containers.is_spreadsheet,
        window=None,
        description="ZIP + xl/ entry",
    ),
    Signature(
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        containers.is_wordprocessing,
        window=None,
        description="ZIP + word/ entry",
    ),
    # Fonts
    Signature("application/font-sfnt", sig.is_font_sfnt, description="TrueType/OpenType"),
    Signature("application/font-woff", sig.is_font_woff, description="WOFF/WOFF2"),
    # OLE2 compound documents
    Signature("application/msword", sig.is_ole_compound, description="D0 CF 11 E0 ..."),
    Signature("application/vnd.ms-excel", sig.is_ole_compound, description="D0 CF 11 E0 ..."),
    Signature("application/vnd.ms-powerpoint", sig.is_ole_compound, description="D0 CF 11 E0 ..."),
    Signature("application/rtf", sig.is_rtf, description="{\\rtf"),
    # Archives / packages
    Signature("application/vnd.ms-cab-compressed", sig.is_cab, description="MSCF / ISc("),
    Signature("application/x-7z-compressed", sig.is_7z, description="7z header"),
    Signature("application/x-bzip2", sig.is_bzip2, description="BZh"),
    Signature("application/x-compress", sig.is_compress, description="LZW .Z"),
    Signature("application/x-deb", sig.is_deb, description="ar + debian-binary"),
    Signature("application/x-unix-archive", sig.is_unix_archive, description="!<arch>"),
    Signature("application/x-google-chrome-extension", sig.is_chrome_extension, description="Cr24"),
    Signature("application/x-lzip", sig.is_lzip, description="LZIP"),
    Signature("application/x-rpm", sig.is_rpm, description="RPM lead"),
    Signature("application/x-tar", sig.is_tar, description="ustar field @257"),
    Signature("application/x-xz", sig.is_xz, description="xz header"),
    # Executables / binaries
    Signature("application/x-executable", sig.is_elf, description="ELF"),
    Signature("application/x-msdownload", sig.is_msdownload, description="MZ"),
    Signature("application/x-nintendo-nes-rom", sig.is_nes_rom, description="NES\\x1a"),
    Signature("application/x-shockwave-flash", sig.is_shockwave_flash, description="FWS / CWS"),
    Signature("application/x-sqlite3", sig.is_sqlite3, description="SQLite format 3"),
    # Audio
    Signature("audio/aac", sig.is_aac, description="ADTS sync"),
    Signature("audio/amr", sig.is_amr, description="#!AMR"),
    Signature("audio/m4a", sig.is_m4a, description="ftyp M4A"),
    Signature("audio/ogg", sig.is_ogg, description="OggS"),
    Signature("audio/x-flac", sig.is_flac, description="fLaC"),
    Signature("audio/x-wav", sig.is_wav, description="RIFF/WAVE"),
    # Images
    Signature("image/jp2", sig.is_jp2, description="JPEG 2000 signature box"),
    Signature("image/x-canon-cr2", sig.is_canon_cr2, description="TIFF + CR @8"),
    Signature("image/tiff", sig.is_tiff, description="II*\\0 / MM\\0*"),
    Signature("image/vnd.adobe.photoshop", sig.is_photoshop, description="8BPS"),
    # Video
    Signature("video/mpeg", sig.is_mpeg, description="00 00 01 Bx"),
    Signature("video/x-m4v", sig.is_m4v, description="ftyp M4V"),
    Signature("video/quicktime", sig.is_quicktime, description="ftyp/moov/mdat"),
    Signature("video/x-flv", sig.is_flv, description="FLV"),
    Signature("video/x-matroska", sig.is_matroska, description="EBML + DocType=matroska"),
    Signature("video/x-ms-wmv", sig.is_wmv, description="ASF GUID"),
    Signature("video/x-msvideo", sig.is_msvideo, description="RIFF/AVI"),
)
