"""Internationalized resource identifier value object.

Reference and update targets in CIP-100 documents are IRIs. Only syntax is
checked here; nothing is resolved or fetched.

Accepted shape (RFC 3987, simplified):
- scheme: ALPHA *( ALPHA / DIGIT / "+" / "-" / "." ) followed by ":"
- no whitespace, control characters, or any of <>"{}|\\^`
- every "%" followed by two hex digits
- at most one "#"
- "[" and "]" only around an IP literal in the authority
- port, when present, made of digits

Non-ASCII characters are permitted.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

SCHEME_PATTERN: re.Pattern[str] = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")
FORBIDDEN_CHAR_PATTERN: re.Pattern[str] = re.compile(
    r'[\x00-\x20\x7f-\x9f<>"{}|\\^`]'
)
BAD_PERCENT_PATTERN: re.Pattern[str] = re.compile(r"%(?![0-9A-Fa-f]{2})")
IP_LITERAL_HOST_PATTERN: re.Pattern[str] = re.compile(r"^\[[0-9A-Za-z:.\-+_~!$&'()*,;=]+\]$")
PORT_PATTERN: re.Pattern[str] = re.compile(r"^[0-9]*$")


def _authority_of(hier_part: str) -> tuple[str, str] | None:
    """Split an authority off a hierarchical part.

    Returns:
        (authority, remainder) if the part starts with "//", None otherwise.
    """
    if not hier_part.startswith("//"):
        return None
    rest = hier_part[2:]
    end = len(rest)
    for delimiter in "/?#":
        index = rest.find(delimiter)
        if index != -1:
            end = min(end, index)
    return rest[:end], rest[end:]


def _validate_authority(authority: str) -> None:
    # userinfo never contains "@" so the last one splits it off
    host_port = authority.rsplit("@", 1)[-1]
    if host_port.startswith("["):
        close = host_port.find("]")
        if close == -1:
            raise ValueError("unterminated IP literal")
        host, port_part = host_port[: close + 1], host_port[close + 1 :]
        if not IP_LITERAL_HOST_PATTERN.match(host):
            raise ValueError(f"invalid IP literal: {host}")
        if port_part and not port_part.startswith(":"):
            raise ValueError("unexpected characters after IP literal")
        port = port_part[1:] if port_part else ""
    else:
        if "[" in host_port or "]" in host_port:
            raise ValueError("square brackets outside IP literal")
        _, _, port = host_port.partition(":")
    if not PORT_PATTERN.match(port):
        raise ValueError(f"port must be numeric, got {port!r}")


def validate_iri(value: str) -> None:
    """Validate IRI syntax.

    Args:
        value: Candidate IRI text.

    Raises:
        ValueError: If value is not a syntactically valid IRI.
    """
    if not SCHEME_PATTERN.match(value):
        raise ValueError("missing or malformed scheme")

    forbidden = FORBIDDEN_CHAR_PATTERN.search(value)
    if forbidden:
        raise ValueError(
            f"forbidden character {forbidden.group()!r} at position {forbidden.start()}"
        )

    if BAD_PERCENT_PATTERN.search(value):
        raise ValueError("percent sign not followed by two hex digits")

    if value.count("#") > 1:
        raise ValueError("more than one fragment delimiter")

    hier_part = value.split(":", 1)[1]
    split = _authority_of(hier_part)
    if split is not None:
        authority, remainder = split
        _validate_authority(authority)
    else:
        remainder = hier_part

    if "[" in remainder or "]" in remainder:
        raise ValueError("square brackets outside IP literal")


@dataclass(frozen=True, eq=True)
class Iri:
    """A syntactically valid IRI.

    Equality is textual: no normalization is applied, so the extracted
    value is exactly what the source document carried.

    Attributes:
        value: The IRI text.

    Example:
        >>> Iri("https://314pool.com").scheme
        'https'
    """

    value: str

    def __post_init__(self) -> None:
        """Validate IRI syntax.

        Raises:
            TypeError: If value is not a string.
            ValueError: If value is not a valid IRI.
        """
        if not isinstance(self.value, str):
            raise TypeError(f"value must be str, got {type(self.value).__name__}")
        validate_iri(self.value)

    @property
    def scheme(self) -> str:
        """The IRI scheme, lowercased."""
        return self.value.split(":", 1)[0].lower()

    def __str__(self) -> str:
        return self.value
