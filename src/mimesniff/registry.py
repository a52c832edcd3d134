from __future__ import annotations

import logging
import threading

from mimesniff.media_type import normalize_media_type
from mimesniff.signatures import Predicate


class Registry:
    """
    Caller-registered signature predicates, consulted before the built-in catalog.

    Keys are normalized MIME types; re-registering a key replaces its predicate and keeps
    its position. Iteration is in order of first registration, over a snapshot, so a
    concurrent `register` never disturbs a running sniff.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._predicates: dict[str, Predicate] = {}

    def register(self, mime_type: str, predicate: Predicate) -> bool:
        """
        Upsert `predicate` under `mime_type`.

        An invalid MIME type or a non-callable predicate is silently dropped. The return
        value tells whether the registration was stored; ignoring it is fine.
        """
        try:
            key = normalize_media_type(mime_type)
        except ValueError as e:
            logging.getLogger(__name__).debug(f"Dropping registration for {mime_type!r}: {e}")
            return False
        if not callable(predicate):
            logging.getLogger(__name__).debug(
                f"Dropping registration for {key!r}: predicate {predicate!r} is not callable"
            )
            return False
        with self._lock:
            self._predicates[key] = predicate
        return True

    def get(self, mime_type: str) -> Predicate | None:
        try:
            key = normalize_media_type(mime_type)
        except ValueError:
            return None
        with self._lock:
            return self._predicates.get(key)

    def items(self) -> tuple[tuple[str, Predicate], ...]:
        with self._lock:
            return tuple(self._predicates.items())

    def clear(self) -> None:
        with self._lock:
            self._predicates.clear()

    def __contains__(self, mime_type: object) -> bool:
        return isinstance(mime_type, str) and self.get(mime_type) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._predicates)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[key for key, _ in self.items()]!r})"
