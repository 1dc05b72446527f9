"""Payload sanitization applied before user updates reach the store."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

Payload = dict[str, Any]


class Sanitizer(Protocol):
    """Capability that cleans an inbound payload without changing its shape."""

    def transform(self, payload: Mapping[str, Any]) -> Payload: ...


class OperatorKeySanitizer:
    """Drops query-operator keys from a payload.

    Keys beginning with ``$`` or containing ``.`` are removed at every
    nesting level so they can never be interpreted as store operators or
    dotted paths. With ``strip_strings`` set, surrounding whitespace is also
    trimmed from string values.
    """

    def __init__(self, *, strip_strings: bool = False) -> None:
        self._strip_strings = strip_strings

    def transform(self, payload: Mapping[str, Any]) -> Payload:
        return {
            key: self._clean(value)
            for key, value in payload.items()
            if not self._is_unsafe_key(key)
        }

    @staticmethod
    def _is_unsafe_key(key: str) -> bool:
        return key.startswith("$") or "." in key

    def _clean(self, value: Any) -> Any:
        if isinstance(value, Mapping):
            return self.transform(value)
        if isinstance(value, list):
            return [self._clean(item) for item in value]
        if isinstance(value, str) and self._strip_strings:
            return value.strip()
        return value
