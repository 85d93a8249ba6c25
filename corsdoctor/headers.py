"""Host-neutral header access.

Hosts hand us headers in different shapes: WSGI and ASGI give lists of
(name, value) pairs, starlette/werkzeug/urllib3 give objects with ``getlist``,
http.server gives an ``email.message.Message`` with ``get_all``, and
``requests`` gives a case-insensitive dict. Everything here reads any of them
and never raises on missing or odd values.
"""

from collections.abc import Mapping
from typing import Any, Optional


def _text(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    return str(value)


def header_values(headers: Any, name: str) -> list[str]:
    """All values set for *name*, in order. Lookup is case-insensitive."""
    if headers is None:
        return []
    lookup = name.lower()
    getlist = getattr(headers, "getlist", None)
    get_all = getattr(headers, "get_all", None)
    if callable(getlist):
        values = list(getlist(name) or [])
    elif callable(get_all):
        # email.message.Message, used by http.client and http.server
        values = list(get_all(name) or [])
    elif isinstance(headers, Mapping):
        values = []
        for key, value in headers.items():
            if _text(key).lower() != lookup or value is None:
                continue
            if isinstance(value, (list, tuple)):
                values.extend(value)
            else:
                values.append(value)
    else:
        values = [value for key, value in headers if _text(key).lower() == lookup]
    return [_text(v) for v in values if v is not None]


def header_value(headers: Any, name: str) -> Optional[str]:
    """Combined value of *name* (repeats joined with ", "), or None if unset."""
    values = header_values(headers, name)
    if not values:
        return None
    return ", ".join(values)


def parse_list(value: Optional[str]) -> tuple[str, ...]:
    """Split a comma list, trim and lower-case each token, drop empty tokens."""
    if not value:
        return ()
    tokens = (token.strip().lower() for token in value.split(","))
    return tuple(token for token in tokens if token)
