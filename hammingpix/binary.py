"""Byte/bit conversions and the Hamming(8,4) code used by the image format.

A byte is a list of eight bits, most significant first. Each byte is
protected as two codewords of eight bits, one per nibble, laid out as
``[p1, p2, d1, p4, d2, d3, d4, p8]``. ``p1``, ``p2`` and ``p4`` are the
Hamming parity bits and ``p8`` makes the parity of the whole codeword even.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

BITS_PER_BYTE = 8
ROWS_PER_BYTE = 2

Bits = list[int]

# Positions of the data bits inside one codeword.
_DATA_POSITIONS = (2, 4, 5, 6)


def _check_bits(bits: Sequence[int], length: int = BITS_PER_BYTE) -> None:
    if len(bits) != length:
        raise ValueError(f"expected {length} bits, got {len(bits)}")
    if any(bit not in (0, 1) for bit in bits):
        raise ValueError(f"bits must be 0 or 1: {list(bits)!r}")


def ascii_to_bits(code: int) -> Bits:
    """Return the low eight bits of ``code``, most significant first."""
    if code < 0:
        raise ValueError(f"character code must not be negative: {code}")
    return [(code >> shift) & 1 for shift in range(BITS_PER_BYTE - 1, -1, -1)]


def bits_to_ascii(bits: Sequence[int]) -> int:
    """Return the integer value of eight bits, most significant first."""
    _check_bits(bits)
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value


def string_to_bits(text: str | bytes) -> list[Bits]:
    """Return one row of eight bits for each byte of ``text`` (UTF-8 for str)."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    return [ascii_to_bits(byte) for byte in data]


def bits_to_string(rows: Iterable[Sequence[int]]) -> str:
    """Rebuild the text whose bytes are given as rows of eight bits."""
    data = bytes(bits_to_ascii(row) for row in rows)
    return data.decode("utf-8", errors="replace")


def format_bits(rows: Iterable[Sequence[int]]) -> str:
    """Render rows of bits as lines of digits, one row per line."""
    return "".join("".join(str(bit) for bit in row) + "\n" for row in rows)


def _encode_nibble(d1: int, d2: int, d3: int, d4: int) -> Bits:
    p1 = (d1 + d2 + d4) % 2
    p2 = (d1 + d3 + d4) % 2
    p4 = (d2 + d3 + d4) % 2
    p8 = (p1 + p2 + p4 + d1 + d2 + d3 + d4) % 2
    return [p1, p2, d1, p4, d2, d3, d4, p8]


def _decode_nibble(codeword: Sequence[int]) -> Bits:
    if len(codeword) != BITS_PER_BYTE:
        raise ValueError(f"a codeword has {BITS_PER_BYTE} bits, got {len(codeword)}")
    return [codeword[position] for position in _DATA_POSITIONS]


def byte_to_hamming(bits: Sequence[int]) -> list[Bits]:
    """Encode one byte as two Hamming codewords (high nibble first)."""
    _check_bits(bits)
    return [_encode_nibble(*bits[:4]), _encode_nibble(*bits[4:])]


def bits_to_hamming(rows: Iterable[Sequence[int]]) -> list[Bits]:
    """Encode every byte row as two codewords; the result has twice as many rows."""
    return [codeword for row in rows for codeword in byte_to_hamming(row)]


def hamming_to_bits(code: Sequence[Sequence[int]]) -> list[Bits]:
    """Recover byte rows from pairs of codewords; a trailing odd row is ignored."""
    pairs = len(code) // ROWS_PER_BYTE
    return [
        _decode_nibble(code[2 * index]) + _decode_nibble(code[2 * index + 1])
        for index in range(pairs)
    ]


def hamming_to_byte(code: Sequence[Sequence[int]]) -> Bits:
    """Recover one byte from its first two codewords."""
    if len(code) < ROWS_PER_BYTE:
        raise ValueError(f"a byte needs {ROWS_PER_BYTE} codewords, got {len(code)}")
    return _decode_nibble(code[0]) + _decode_nibble(code[1])