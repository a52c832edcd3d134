"""
Dispatch: registered predicates first, then the built-in catalog, then the generic fallback.

`Sniffer` owns its registry, catalog and fallback so tests and embedders can hold
independent instances. The module-level `register`/`sniff`/`candidates` share one
process-wide instance.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, Sequence

from mimesniff.catalog import CATALOG
from mimesniff.defaults import DEFAULT_MIME_TYPE, SNIFF_LEN
from mimesniff.fallback import detect_content_type
from mimesniff.media_type import is_media_type
from mimesniff.registry import Registry
from mimesniff.signatures import Predicate, Signature

Buffer = bytes | bytearray | memoryview | None
Fallback = Callable[[bytes], str]


def _as_bytes(buffer: Buffer) -> bytes:
    if buffer is None:
        return b""
    if isinstance(buffer, bytes):
        return buffer
    if isinstance(buffer, (bytearray, memoryview)):
        return bytes(buffer)
    raise TypeError(f"Expected bytes, bytearray, memoryview or None, got {type(buffer).__name__}")


class Sniffer:
    """
    Resolves a buffer to a MIME type.

    Never raises for any buffer: a registered predicate or catalog signature that raises
    counts as a miss, and a fallback that raises or answers garbage degrades to
    DEFAULT_MIME_TYPE. Anything other than bytes, bytearray, memoryview or None is a
    TypeError.
    """

    registry: Registry
    catalog: Sequence[Signature]
    fallback: Fallback
    sniff_len: int

    def __init__(
        self,
        registry: Registry | None = None,
        *,
        catalog: Sequence[Signature] = CATALOG,
        fallback: Fallback = detect_content_type,
        sniff_len: int = SNIFF_LEN,
    ) -> None:
        self.registry = registry if registry is not None else Registry()
        self.catalog = tuple(catalog)
        self.fallback = fallback
        self.sniff_len = sniff_len

    def register(self, mime_type: str, predicate: Predicate) -> bool:
        return self.registry.register(mime_type, predicate)

    def sniff(self, buffer: Buffer) -> str:
        data = _as_bytes(buffer)
        if not data:
            return DEFAULT_MIME_TYPE
        for mime_type in self._iter_matches(data):
            return mime_type
        return self._fallback_type(data)

    def candidates(self, buffer: Buffer) -> list[str]:
        """
        Every MIME type whose predicate matches, in evaluation order (registry, then catalog).

        When nothing matches, a single-element list with the fallback's answer.
        """
        data = _as_bytes(buffer)
        if not data:
            return [DEFAULT_MIME_TYPE]
        seen: dict[str, None] = {}
        for mime_type in self._iter_matches(data):
            seen.setdefault(mime_type, None)
        return list(seen) or [self._fallback_type(data)]

    def _iter_matches(self, data: bytes) -> Iterator[str]:
        head = data[: self.sniff_len]
        for mime_type, predicate in self.registry.items():
            if self._call_registered(mime_type, predicate, head):
                logging.getLogger(__name__).debug(f"Registered predicate matched: {mime_type}")
                yield mime_type
        for signature in self.catalog:
            if self._call_signature(signature, data, self.sniff_len):
                logging.getLogger(__name__).debug(f"Catalog signature matched: {signature.mime_type}")
                yield signature.mime_type

    @staticmethod
    def _call_registered(mime_type: str, predicate: Predicate, head: bytes) -> bool:
        try:
            return bool(predicate(head))
        except Exception as e:
            logging.getLogger(__name__).warning(
                f"[WARNING] Predicate registered for {mime_type!r} raised {e!r}. Treating as no match."
            )
            return False

    @staticmethod
    def _call_signature(signature: Signature, data: bytes, limit: int) -> bool:
        try:
            return bool(signature.matches(data, limit))
        except Exception as e:
            logging.getLogger(__name__).warning(
                f"[WARNING] Catalog signature for {signature.mime_type!r} raised {e!r}. Treating as no match."
            )
            return False

    def _fallback_type(self, data: bytes) -> str:
        try:
            mime_type = self.fallback(data[: self.sniff_len])
        except Exception as e:
            logging.getLogger(__name__).warning(
                f"[WARNING] Fallback classifier {self.fallback!r} raised {e!r}. Using {DEFAULT_MIME_TYPE}."
            )
            return DEFAULT_MIME_TYPE
        if not is_media_type(mime_type):
            logging.getLogger(__name__).warning(
                f"[WARNING] Fallback classifier returned invalid MIME type {mime_type!r}. Using {DEFAULT_MIME_TYPE}."
            )
            return DEFAULT_MIME_TYPE
        logging.getLogger(__name__).debug(f"No signature matched; fallback answered {mime_type}")
        return mime_type


_default_sniffer = Sniffer(Registry())


def default_sniffer() -> Sniffer:
    return _default_sniffer


def register(mime_type: str, predicate: Predicate) -> bool:
    """Register `predicate` process-wide. Invalid MIME types are silently ignored (returns False)."""
    return _default_sniffer.register(mime_type, predicate)


def sniff(buffer: Buffer) -> str:
    """
    Sniff the MIME type of `buffer`. Considers at most its first SNIFF_LEN bytes, except for
    the Office package scan which may look a few kilobytes further.

    Always returns a valid MIME type; "application/octet-stream" when nothing more specific fits.
    """
    return _default_sniffer.sniff(buffer)


def candidates(buffer: Buffer) -> list[str]:
    return _default_sniffer.candidates(buffer)
