"""
MIME type keys: `type/subtype[; attribute=value]*` as in RFC 2045 section 5.1.

Keys are compared by their normalized form: lowercased, with parameters rendered
as `; name=value` and values quoted only when they are not plain tokens.
"""

from __future__ import annotations

import re
from re import Pattern

# RFC 2045 token: any CHAR except SPACE, CTLs and tspecials ()<>@,;:\"/[]?=
_TOKEN = r"[!#$%&'*+\-.^_`{|}~0-9A-Za-z]+"
_QUOTED_STRING = r'"(?:[^"\\]|\\.)*"'

_RE_TYPE: Pattern[str] = re.compile(rf"\s*({_TOKEN})/({_TOKEN})\s*")
_RE_PARAM: Pattern[str] = re.compile(rf"\s*;\s*({_TOKEN})\s*=\s*({_TOKEN}|{_QUOTED_STRING})\s*")
_RE_TRAILING_SEMICOLON: Pattern[str] = re.compile(r"\s*;\s*")
_RE_IS_TOKEN: Pattern[str] = re.compile(_TOKEN)
_RE_QUOTED_PAIR: Pattern[str] = re.compile(r"\\(.)", re.DOTALL)


def _unquote(value: str) -> str:
    if value.startswith('"'):
        return _RE_QUOTED_PAIR.sub(r"\1", value[1:-1])
    return value


def _quote(value: str) -> str:
    if _RE_IS_TOKEN.fullmatch(value):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def parse_media_type(value: str) -> tuple[str, dict[str, str]]:
    """
    Split a media type into its lowercased `type/subtype` and its parameters.

    Parameter names are lowercased, values are unquoted but otherwise kept as written.
    Raises ValueError when `value` does not follow the grammar.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Media type cannot be empty: {value!r}")
    m = _RE_TYPE.match(value)
    if m is None:
        raise ValueError(f"Expected 'type/subtype', got {value!r}")
    full_type = f"{m[1]}/{m[2]}".lower()

    params: dict[str, str] = {}
    pos = m.end()
    while pos < len(value):
        pm = _RE_PARAM.match(value, pos)
        if pm is None:
            if _RE_TRAILING_SEMICOLON.fullmatch(value, pos):
                break
            raise ValueError(f"Invalid media type parameter at offset {pos} in {value!r}")
        name = pm[1].lower()
        if name in params:
            raise ValueError(f"Duplicate media type parameter {name!r} in {value!r}")
        params[name] = _unquote(pm[2])
        pos = pm.end()
    return full_type, params


def is_media_type(value) -> bool:
    try:
        parse_media_type(value)
    except ValueError:
        return False
    return True


def normalize_media_type(value: str) -> str:
    """Case-fold `value` and render it canonically, e.g. 'Foo/Bar;Charset=UTF8' -> 'foo/bar; charset=utf8'."""
    if not isinstance(value, str):
        raise ValueError(f"Media type must be a string, got {type(value).__name__}")
    full_type, params = parse_media_type(value.lower())
    return "".join([full_type, *(f"; {name}={_quote(val)}" for name, val in params.items())])
