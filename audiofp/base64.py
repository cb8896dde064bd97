"""URL-safe base64 without padding, as used for compressed fingerprints."""

from __future__ import annotations

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
_REVERSED = {ord(char): index for index, char in enumerate(_ALPHABET)}


def encoded_size(size: int) -> int:
    """Return the length of the text that encodes ``size`` bytes."""
    return (size * 4 + 2) // 3


def decoded_size(size: int) -> int:
    """Return the number of bytes decoded from ``size`` characters."""
    return size * 3 // 4


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def encode(data: bytes | bytearray | memoryview | str) -> str:
    """Encode bytes to unpadded URL-safe base64 text.

    A trailing partial group is encoded as if padded with zero bytes and
    only the characters that carry input bits are kept.
    """
    raw = _as_bytes(data)
    chars: list[str] = []
    for start in range(0, len(raw), 3):
        chunk = raw[start:start + 3]
        group = int.from_bytes(chunk.ljust(3, b"\0"), "big")
        chars.extend(
            _ALPHABET[(group >> shift) & 63] for shift in (18, 12, 6, 0)
        )
    return "".join(chars[: encoded_size(len(raw))])


def decode(text: str | bytes | bytearray | memoryview) -> bytes:
    """Decode unpadded URL-safe base64 text to bytes.

    Characters outside the alphabet decode as zero; the output is always
    ``decoded_size(len(text))`` bytes long.
    """
    raw = _as_bytes(text)
    out = bytearray()
    for start in range(0, len(raw), 4):
        chunk = raw[start:start + 4]
        group = 0
        for position in range(4):
            value = _REVERSED.get(chunk[position], 0) if position < len(chunk) else 0
            group = (group << 6) | value
        out += group.to_bytes(3, "big")
    return bytes(out[: decoded_size(len(raw))])