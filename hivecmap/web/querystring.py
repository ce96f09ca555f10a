"""URL query-string parsing with lookups of plain, list and dictionary parameters."""

from __future__ import annotations

from typing import Optional

MAX_KEY_VALUE_PAIRS_COUNT = 256

_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")
_STOP_BYTES = frozenset(b"=#&\0")


def _at(data: bytes, index: int) -> int:
    """Byte at index, or 0 past the end, as a C string would read."""
    return data[index] if 0 <= index < len(data) else 0


def _is_qs_char(byte: int) -> bool:
    return byte not in _STOP_BYTES


def _hex_value(byte: int) -> int:
    return int(chr(byte), 16)


def _first_of(data: bytes, chars: bytes) -> int:
    """Index of the first byte of data found in chars, or len(data)."""
    for index, byte in enumerate(data):
        if byte in chars:
            return index
    return len(data)


def _cut_at_nul(data: bytes) -> bytes:
    return data.split(b"\0", 1)[0]


def _to_text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _decode_bytes(data: bytes) -> bytes:
    """Decode '+' and %XX up to the first '=', '#' or '&'; a bad escape ends the value."""
    out = bytearray()
    pos = 0
    while pos < len(data) and _is_qs_char(data[pos]):
        byte = data[pos]
        if byte == ord("+"):
            out.append(ord(" "))
        elif byte == ord("%"):
            high, low = _at(data, pos + 1), _at(data, pos + 2)
            if high not in _HEX_DIGITS or low not in _HEX_DIGITS:
                return bytes(out)
            out.append(_hex_value(high) * 16 + _hex_value(low))
            pos += 2
        else:
            out.append(byte)
        pos += 1
    return bytes(out)


def decode_value(text: str) -> str:
    """Decode a query value up to its first '=', '#', '&' or decoded NUL."""
    return _to_text(_cut_at_nul(_decode_bytes(text.encode("utf-8"))))


def _read_char(data: bytes, pos: int) -> tuple[int, int]:
    """Read one possibly encoded character for comparison; return it and the next position."""
    byte = _at(data, pos)
    pos += 1
    if not _is_qs_char(byte):
        byte = 0
    if byte == ord("+"):
        byte = ord(" ")
    if byte == ord("%"):
        high, low = _at(data, pos), _at(data, pos + 1)
        pos += 2
        if high in _HEX_DIGITS and low in _HEX_DIGITS:
            byte = _hex_value(high) * 16 + _hex_value(low)
        else:
            byte = 0
    return byte, pos


def _compare(key: bytes, pair: bytes, length: int) -> int:
    key_pos = pair_pos = 0
    for _ in range(length):
        u1, key_pos = _read_char(key, key_pos)
        u2, pair_pos = _read_char(pair, pair_pos)
        if u1 != u2:
            return u1 - u2
        if u1 == 0:
            return 0
    return -1 if _is_qs_char(_at(pair, pair_pos)) else 0


def _key_matches(key: bytes, pair: bytes) -> bool:
    return _compare(key, pair, len(key)) == 0


def key_matches(key: str, pair: str) -> bool:
    """Whether a pair's key equals key, with URL-encoding honoured on both sides."""
    return _key_matches(key.encode("utf-8"), pair.encode("utf-8"))


def _split_pairs(raw: bytes, limit: int) -> list[bytes]:
    start = _first_of(raw, b"?#")
    if start == len(raw) or limit <= 0:
        return []
    pairs = []
    for piece in raw[start + 1 :].split(b"&", limit - 1):
        stop = _first_of(piece, b"=&#")
        if stop == len(piece) or piece[stop] == ord("&"):
            pair = piece[:stop]
        else:
            pair = piece[: stop + 1] + _decode_bytes(piece[stop + 1 :])
        pairs.append(_cut_at_nul(pair))
    return pairs


def split_pairs(url: str, limit: int = MAX_KEY_VALUE_PAIRS_COUNT) -> list[str]:
    """Split the query of a URL into at most limit pairs, each value decoded."""
    return [_to_text(p) for p in _split_pairs(url.encode("utf-8"), limit)]


def scan_value(key: str, url: str) -> Optional[str]:
    """Look a key up in a raw URL without parsing all of it; None if it is absent."""
    raw = url.encode("utf-8")
    key_bytes = key.encode("utf-8")
    question = raw.find(b"?")
    pos = question + 1 if question != -1 else 0
    while pos < len(raw) and raw[pos] not in b"#\0":
        if _key_matches(key_bytes, raw[pos:]):
            break
        amp = raw.find(b"&", pos)
        pos = len(raw) + 1 if amp == -1 else amp + 1
    if _at(raw, pos) == 0:
        return None
    pos += _first_of(raw[pos:], b"=&#")
    if _at(raw, pos) != ord("="):
        return ""
    pos += 1
    end = pos + _first_of(raw[pos:], b"&=#")
    return _to_text(_cut_at_nul(_decode_bytes(raw[pos:end])))


def _dict_entry(pair: bytes) -> Optional[tuple[bytes, bytes]]:
    equal = pair.find(b"=")
    value_start = len(pair) if equal == -1 else equal + 1
    bracket = pair.find(b"[")
    key_start = len(pair) if bracket == -1 else bracket + 1
    close = pair.find(b"]")
    key_end = len(pair) if close == -1 else close
    if key_start <= key_end and key_start > 0 and key_end > 0:
        return pair[key_start:key_end], pair[value_start:]
    return None


class QueryString:
    """The decoded key/value pairs of a URL's query part."""

    def __init__(self, url: str = "") -> None:
        self._url = url
        self._pairs = (
            _split_pairs(url.encode("utf-8"), MAX_KEY_VALUE_PAIRS_COUNT) if url else []
        )

    def __str__(self) -> str:
        return "[ " + ", ".join(self.pairs()) + " ]"

    def __repr__(self) -> str:
        return f"QueryString({self._url!r})"

    def _nth(self, key: bytes, nth: int) -> Optional[str]:
        for pair in self._pairs:
            if not _key_matches(key, pair):
                continue
            if nth == 0:
                equal = pair.find(b"=")
                return "" if equal == -1 else _to_text(pair[equal + 1 :])
            nth -= 1
        return None

    def get(self, name: str) -> Optional[str]:
        """Return the first value for name, "" for a key with no value, None if absent."""
        return self._nth(name.encode("utf-8"), 0)

    def get_list(self, name: str) -> list[str]:
        """Return every value given as name[]=value, in order."""
        key = (name + "[]").encode("utf-8")
        values = []
        while (value := self._nth(key, len(values))) is not None:
            values.append(value)
        return values

    def get_dict(self, name: str) -> dict[str, str]:
        """Return the entries given as name[key]=value; the first value of a key wins."""
        prefix = name.encode("utf-8")
        result: dict[str, str] = {}
        for pair in self._pairs:
            if not pair.startswith(prefix):
                continue
            entry = _dict_entry(pair)
            if entry is None:
                break
            result.setdefault(_to_text(entry[0]), _to_text(entry[1]))
        return result

    def pairs(self) -> list[str]:
        """Return the pairs as key=decoded-value strings."""
        return [_to_text(p) for p in self._pairs]

    def clear(self) -> None:
        self._url = ""
        self._pairs = []