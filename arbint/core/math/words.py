"""
Word Buffers — Import/Export of Magnitudes as Sequences of Words

Buffer layout:
    [sign byte][word 0][word 1]...[word k-1]

- sign byte: SIGN_NON_NEGATIVE (0) or SIGN_NEGATIVE (1)
- each word is `size` bytes in the requested byte order
- the top `nails` bits of every word carry no value: written as zero,
  ignored on import
- words run most-significant first or least-significant first
- zero is written as a single all-zero word

CRITICAL INVARIANTS:
1. import_words(export_words(v, ...), ...) == v for every parameter set
2. Malformed buffers import as None, never as a partial value
"""

from typing import Final, Literal

from arbint.core.math.numerical_safeguards import validate_in_range, validate_positive

SIGN_NON_NEGATIVE: Final[int] = 0
SIGN_NEGATIVE: Final[int] = 1

ByteOrder = Literal["big", "little"]


def validate_word_geometry(size: int, nails: int) -> int:
    """
    Validate word size and nails, returning the value bits per word.

    Raises:
        ValueError: If size < 1 or nails is outside [0, 8*size)
    """
    validate_positive(size, "size")
    validate_in_range(nails, "nails", 0, 8 * size - 1)
    return 8 * size - nails


def _magnitude_to_words(magnitude: int, size: int, value_bits: int, count: int) -> list[int]:
    """Words of the magnitude, least significant first."""
    if value_bits == 8 * size:
        raw = magnitude.to_bytes(count * size, "little")
        return [int.from_bytes(raw[i : i + size], "little") for i in range(0, len(raw), size)]

    mask = (1 << value_bits) - 1
    return [(magnitude >> (value_bits * i)) & mask for i in range(count)]


def _words_to_magnitude(words: list[int], size: int, value_bits: int) -> int:
    """Inverse of _magnitude_to_words for least-significant-first words."""
    if value_bits == 8 * size:
        raw = b"".join(word.to_bytes(size, "little") for word in words)
        return int.from_bytes(raw, "little")

    magnitude = 0
    for word in reversed(words):
        magnitude = (magnitude << value_bits) | word
    return magnitude


def export_words(
    value: int,
    size: int = 1,
    nails: int = 0,
    most_significant_first: bool = True,
    byteorder: ByteOrder = "big",
) -> bytes:
    """
    Serialize an integer into a sign byte followed by magnitude words.

    Args:
        value: Value to export
        size: Bytes per word
        nails: High bits per word that carry no value
        most_significant_first: Word order
        byteorder: Byte order inside each word

    Returns:
        Buffer of 1 + k*size bytes, k >= 1

    Examples:
        >>> export_words(258, size=2)
        b'\\x00\\x01\\x02'
        >>> export_words(-258, size=1, most_significant_first=False)
        b'\\x01\\x02\\x01'
    """
    value_bits = validate_word_geometry(size, nails)
    magnitude = abs(value)
    count = max(-(-magnitude.bit_length() // value_bits), 1)

    words = _magnitude_to_words(magnitude, size, value_bits, count)
    if most_significant_first:
        words.reverse()

    sign = SIGN_NEGATIVE if value < 0 else SIGN_NON_NEGATIVE
    return bytes([sign]) + b"".join(word.to_bytes(size, byteorder) for word in words)


def import_words(
    data: bytes,
    size: int = 1,
    nails: int = 0,
    most_significant_first: bool = True,
    byteorder: ByteOrder = "big",
) -> int | None:
    """
    Deserialize a buffer produced by export_words.

    Returns:
        The value, or None when the buffer is shorter than a sign byte plus
        one word, is not a whole number of words, or has an unknown sign byte

    Examples:
        >>> import_words(b"\\x00\\x01\\x02", size=2)
        258
        >>> import_words(b"") is None
        True
    """
    value_bits = validate_word_geometry(size, nails)
    if len(data) < 1 + size:
        return None

    sign = data[0]
    if sign not in (SIGN_NON_NEGATIVE, SIGN_NEGATIVE):
        return None

    payload = data[1:]
    if len(payload) % size:
        return None

    mask = (1 << value_bits) - 1
    words = [
        int.from_bytes(payload[i : i + size], byteorder) & mask
        for i in range(0, len(payload), size)
    ]
    if most_significant_first:
        words.reverse()

    magnitude = _words_to_magnitude(words, size, value_bits)
    return -magnitude if sign == SIGN_NEGATIVE else magnitude
