"""URI syntax checking for identifier fields.

Every identifier in the model (entity ids, component types, relationship
endpoints) must be an absolute URI in the RFC 3986 sense:
``scheme ":" hier-part ["?" query] ["#" fragment]``. Square brackets are only
accepted around an IP-literal host and ``#`` only once, as the fragment
delimiter. Nothing here resolves or normalizes a URI; a value that passes is
stored exactly as given, so
``"https://example.com"`` never turns into ``"https://example.com/"``.
"""

import re
from typing import Annotated

from pydantic import AfterValidator, Field, StrictStr
from pydantic_core import PydanticCustomError

_SCHEME = r"[A-Za-z][A-Za-z0-9+.\-]*"
# unreserved, sub-delims and "%" (percent-encodings are checked separately)
_U = r"A-Za-z0-9\-._~!$&'()*+,;=%"
_PCHAR = rf"[{_U}:@]"
_USERINFO = rf"(?:[{_U}:]*@)?"
_IP_LITERAL = rf"\[[{_U}:]+\]"
_HOST = rf"(?:{_IP_LITERAL}|[{_U}]*)"
_PORT = r"(?::[0-9]*)?"
_HIER_PART = rf"(?://{_USERINFO}{_HOST}{_PORT}(?:/{_PCHAR}*)*|(?:{_PCHAR}|/)*)"
_QUERY = rf"(?:\?(?:{_PCHAR}|[/?])*)?"
_FRAGMENT = rf"(?:#(?:{_PCHAR}|[/?])*)?"
_URI_RE = re.compile(rf"{_SCHEME}:{_HIER_PART}{_QUERY}{_FRAGMENT}")
_BAD_PERCENT_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def is_uri(value: object) -> bool:
    """Return True if ``value`` is a string with absolute-URI syntax.

    Examples:
        >>> is_uri("did:example:alice")
        True
        >>> is_uri("urn:isbn:0451450523")
        True
        >>> is_uri("not a uri")
        False
    """
    if not isinstance(value, str):
        return False
    if _URI_RE.fullmatch(value) is None:
        return False
    return _BAD_PERCENT_RE.search(value) is None


def _check_uri(value: str) -> str:
    if not is_uri(value):
        raise PydanticCustomError(
            "uri_format",
            "Input should be an absolute URI, got {value}",
            {"value": value},
        )
    return value


Uri = Annotated[
    StrictStr,
    AfterValidator(_check_uri),
    Field(json_schema_extra={"format": "uri"}),
]
"""A strict string that must satisfy :func:`is_uri`."""

NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]
"""A strict string with at least one character (used for predicates)."""
