"""Escaping and URL building for the shields.io APIs."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING
from urllib.parse import SplitResult, parse_qsl, quote, urlencode, urlsplit, urlunsplit

from badgegen.errors import InvalidUrlError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone, besides ASCII letters and digits.
_URI_COMPONENT_SAFE = "-_.!~*'()"

# Escapes of these characters survive a decodeURI pass.
_URI_RESERVED = frozenset(";/?:@&=+$,#")

_ESCAPE_RUN = re.compile(r"(?:%[0-9A-Fa-f]{2})+")

_DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}


def encode_separators(value: str, space_to_underscore: bool) -> str:
    """Replace dashes, underscores and spaces to match the shields.io dash API.

    Spaces are converted to underscores after the other replacements, so they
    are neither doubled nor turned into '%20' by a later encode step.
    """
    value = value.replace("-", "--").replace("_", "__")

    if space_to_underscore:
        value = value.replace(" ", "_")

    return value


def decode_angle_brackets(value: str) -> str:
    """Turn URL-encoded '<' and '>' back into characters."""
    return value.replace("%3E", ">").replace("%3C", "<")


def encode_uri_component(value: str) -> str:
    """Percent-encode a value the way JavaScript's ``encodeURIComponent`` does."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


def encode_param(value: str, space_to_underscore: bool = True) -> str:
    """Encode a value to be safe as a segment of a dash-based badge path.

    Note the shields.io API renders oddly if a value mixes a dash and a space,
    or an underscore and a space, even when escaped correctly. For example
    'A - B - C' becomes 'A_--_B_--_C', which renders as 'A - B_- C'. Prefer
    values like 'A-B-C'.

    Not idempotent: encoding an already encoded value escapes it again.
    """
    value = encode_separators(value, space_to_underscore)
    encoded = encode_uri_component(value)

    return decode_angle_brackets(encoded)


def _decode_escape_run(match: re.Match[str]) -> str:
    text = match.group(0)
    out: list[str] = []
    pending = bytearray()

    def flush() -> None:
        if pending:
            out.append(pending.decode("utf-8"))
            pending.clear()

    for i in range(0, len(text), 3):
        escape = text[i : i + 3]
        byte = int(escape[1:], 16)
        if chr(byte) in _URI_RESERVED:
            flush()
            out.append(escape)
        else:
            pending.append(byte)
    flush()

    return "".join(out)


def decode_uri(url: str) -> str:
    """Reverse percent-encoding like JavaScript's ``decodeURI``.

    Escapes of reserved characters such as '&' and '/' are kept so the URL
    still splits into the same parts.

    Raises:
        InvalidUrlError: If an escape sequence is not valid UTF-8.
    """
    try:
        return _ESCAPE_RUN.sub(_decode_escape_run, url)
    except UnicodeDecodeError as e:
        raise InvalidUrlError(url, "malformed percent-encoding") from e


def _normalize_netloc(parts: SplitResult) -> str:
    """Lowercase the host and drop the scheme's default port."""
    userinfo, _, _ = parts.netloc.rpartition("@")
    host = parts.hostname or ""
    if ":" in host:
        host = f"[{host}]"

    port = parts.port
    if port is not None and port != _DEFAULT_PORTS.get(parts.scheme):
        host = f"{host}:{port}"

    return f"{userinfo}@{host}" if userinfo else host


def build_url(url_str: str, params: Mapping[str, str]) -> str:
    """Serialize a URL with query params.

    The URL must have a scheme and host or it is considered invalid. Params
    with empty values are dropped to keep the result short.

    The host is lowercased and a default port dropped. When params are added,
    any query already on the URL is re-serialized with them, so '?x=a b'
    becomes '?x=a+b'.

    The query encoding is reversed at the end so the result reads well as a
    badge target. Spaces become '+' and reserved characters stay escaped.

    Args:
        url_str: Absolute base URL, which may already carry a query.
        params: Query params to append, in order.

    Returns:
        The decoded URL string.

    Raises:
        InvalidUrlError: If ``url_str`` is not an absolute URL.
    """
    try:
        parts = urlsplit(url_str.strip())
    except ValueError as e:
        raise InvalidUrlError(url_str, str(e)) from e

    if not parts.scheme or not parts.hostname:
        raise InvalidUrlError(url_str)

    try:
        netloc = _normalize_netloc(parts)
    except ValueError as e:
        raise InvalidUrlError(url_str, str(e)) from e

    query = parts.query
    pairs = [(key, value) for key, value in params.items() if value]
    if pairs:
        query = urlencode(parse_qsl(query, keep_blank_values=True) + pairs)

    url = urlunsplit((parts.scheme, netloc, parts.path or "/", query, parts.fragment))
    logger.debug("Built URL %s", url)

    return decode_uri(url)
