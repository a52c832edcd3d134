"""
Sniff the MIME type of a byte buffer from its magic numbers.

    >>> from mimesniff import sniff
    >>> sniff(b"\\xff\\xf1")
    'audio/aac'
"""

from mimesniff.catalog import CATALOG
from mimesniff.core import Sniffer, candidates, default_sniffer, register, sniff
from mimesniff.defaults import DEFAULT_MIME_TYPE, SNIFF_LEN
from mimesniff.fallback import detect_content_type
from mimesniff.media_type import is_media_type, normalize_media_type, parse_media_type
from mimesniff.registry import Registry
from mimesniff.signatures import Predicate, Signature

__all__ = [
    "CATALOG",
    "DEFAULT_MIME_TYPE",
    "SNIFF_LEN",
    "Predicate",
    "Registry",
    "Signature",
    "Sniffer",
    "candidates",
    "default_sniffer",
    "detect_content_type",
    "is_media_type",
    "normalize_media_type",
    "parse_media_type",
    "register",
    "sniff",
]
