"""Cookie header parsing and Set-Cookie generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

_WHITESPACE = " \t\n\r\f\v"


class CookieError(ValueError):
    """A request carries cookies that cannot be accepted."""

    status = 400


def parse_cookie_header(header: str) -> dict[str, str]:
    """Parse a Cookie header value; on repeated names the first value wins."""
    jar: dict[str, str] = {}
    size = len(header)
    pos = 0
    while pos < size:
        pos_equal = header.find("=", pos)
        if pos_equal == -1:
            break
        name = header[pos:pos_equal].strip(_WHITESPACE)
        pos = pos_equal + 1
        while pos < size and header[pos] == " ":
            pos += 1
        if pos == size:
            break
        pos_semicolon = header.find(";", pos)
        raw = header[pos:] if pos_semicolon == -1 else header[pos:pos_semicolon]
        value = raw.strip(_WHITESPACE)
        if value and value[0] == '"' and value[-1] == '"':
            value = value[1:-1]
        jar.setdefault(name, value)
        if pos_semicolon == -1:
            break
        pos = pos_semicolon + 1
        while pos < size and header[pos] == " ":
            pos += 1
    return jar


@dataclass
class CookieJar:
    """Cookies received with a request and cookies to send back with the response."""

    jar: dict[str, str] = field(default_factory=dict)
    cookies_to_add: dict[str, str] = field(default_factory=dict)

    def get_cookie(self, key: str) -> str:
        """Return the received cookie's value, or "" if it was not sent."""
        return self.jar.get(key, "")

    def set_cookie(self, key: str, value: str) -> None:
        """Queue a cookie for the response; the first value set for a key is kept."""
        self.cookies_to_add.setdefault(key, value)

    def load(self, cookie_headers: Iterable[str]) -> None:
        """Read the request's Cookie header values; more than one is an error."""
        headers = list(cookie_headers)
        if not headers:
            return
        if len(headers) > 1:
            raise CookieError("more than one Cookie header")
        for name, value in parse_cookie_header(headers[0]).items():
            self.jar.setdefault(name, value)

    def set_cookie_headers(self) -> list[str]:
        """Return the Set-Cookie header values for the queued cookies."""
        return [
            f'{key}=""' if not value else f"{key}={value}"
            for key, value in self.cookies_to_add.items()
        ]