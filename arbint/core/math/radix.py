"""
Radix Conversion — Parsing and Rendering in Bases 2..62

Alphabet:
- Bases up to 36 use 0-9 then a-z; parsing is case-insensitive
- Bases 37..62 use 0-9, A-Z (10..35), a-z (36..61); parsing is case-sensitive
- Negative render radixes -36..-2 render with uppercase letters

Radix 0 on parse auto-detects the base from the prefix: 0x/0X → 16,
0b/0B → 2, a leading 0 → 8, anything else → 10.

Large values are converted by divide and conquer so that neither direction
is bounded by the interpreter's int/str digit limit.

CRITICAL INVARIANTS:
1. parse(render(v, b), b) == v for every supported base
2. Parse failures return None; they never raise and never partially apply
3. size_in_base matches len(render(v, b)) exactly, sign included
"""

import math
import string
from typing import Final

from arbint.core.errors import InvalidRadixError

# =============================================================================
# ALPHABETS AND LIMITS
# =============================================================================

MIN_RADIX: Final[int] = 2
MAX_RADIX: Final[int] = 62
MAX_CASE_INSENSITIVE_RADIX: Final[int] = 36
DEFAULT_RADIX: Final[int] = 10

DIGITS_LOWER: Final[str] = string.digits + string.ascii_lowercase
DIGITS_UPPER: Final[str] = string.digits + string.ascii_uppercase
DIGITS_62: Final[str] = string.digits + string.ascii_uppercase + string.ascii_lowercase

# Below this bit length digit-by-digit conversion beats splitting
_SCHOOLBOOK_BITS: Final[int] = 1024
# Digit runs shorter than this are accumulated directly when parsing
_SCHOOLBOOK_DIGITS: Final[int] = 300

_CASE_INSENSITIVE_TABLE: Final[dict[str, int]] = {
    **{ch: i for i, ch in enumerate(DIGITS_LOWER)},
    **{ch: i for i, ch in enumerate(DIGITS_UPPER)},
}
_CASE_SENSITIVE_TABLE: Final[dict[str, int]] = {ch: i for i, ch in enumerate(DIGITS_62)}

# Bases whose builtin int()/format() conversions are not digit-limited
_BUILTIN_PARSE_RADIXES: Final[frozenset[int]] = frozenset({2, 4, 8, 16, 32})
_BUILTIN_FORMAT_CODES: Final[dict[int, str]] = {2: "b", 8: "o", 16: "x"}


# =============================================================================
# RADIX VALIDATION
# =============================================================================


def validate_render_radix(radix: int) -> int:
    """
    Validate a render radix and return its absolute base.

    Raises:
        InvalidRadixError: Unless radix is in 2..62 or -36..-2
    """
    if MIN_RADIX <= radix <= MAX_RADIX:
        return radix
    if -MAX_CASE_INSENSITIVE_RADIX <= radix <= -MIN_RADIX:
        return -radix
    raise InvalidRadixError(radix, "in 2..62 or -36..-2")


def validate_parse_radix(radix: int) -> None:
    """
    Validate a parse radix.

    Raises:
        InvalidRadixError: Unless radix is 0 or in 2..62
    """
    if radix != 0 and not MIN_RADIX <= radix <= MAX_RADIX:
        raise InvalidRadixError(radix, "0 or in 2..62")


def detect_radix(body: str) -> tuple[int, str]:
    """
    Detect the base of an unsigned literal from its prefix.

    Args:
        body: Literal without sign

    Returns:
        (radix, digits without the prefix)

    Examples:
        >>> detect_radix("0x1F")
        (16, '1F')
        >>> detect_radix("017")
        (8, '17')
        >>> detect_radix("0")
        (10, '0')
    """
    prefix = body[:2]
    if prefix in ("0x", "0X"):
        return 16, body[2:]
    if prefix in ("0b", "0B"):
        return 2, body[2:]
    if len(body) > 1 and body[0] == "0":
        return 8, body[1:]
    return DEFAULT_RADIX, body


# =============================================================================
# PARSING
# =============================================================================


def _digit_values(digits: str, radix: int) -> list[int] | None:
    table = _CASE_INSENSITIVE_TABLE if radix <= MAX_CASE_INSENSITIVE_RADIX else _CASE_SENSITIVE_TABLE
    values = []
    for ch in digits:
        value = table.get(ch)
        if value is None or value >= radix:
            return None
        values.append(value)
    return values


def _combine_digits(values: list[int], radix: int, low: int, high: int) -> int:
    if high - low <= _SCHOOLBOOK_DIGITS:
        accumulator = 0
        for value in values[low:high]:
            accumulator = accumulator * radix + value
        return accumulator

    middle = (low + high) // 2
    upper = _combine_digits(values, radix, low, middle)
    lower = _combine_digits(values, radix, middle, high)
    return upper * radix ** (high - middle) + lower


def parse(text: str, radix: int = DEFAULT_RADIX) -> int | None:
    """
    Parse a radix literal with an optional leading '-'.

    Args:
        text: Literal to parse
        radix: 0 (auto-detect) or 2..62

    Returns:
        Parsed value, or None for an empty or malformed literal

    Raises:
        InvalidRadixError: If radix is not supported
        TypeError: If text is not a str

    Examples:
        >>> parse("-ff", 16)
        -255
        >>> parse("0x10", 0)
        16
        >>> parse("12a") is None
        True
    """
    validate_parse_radix(radix)
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")

    negative = text.startswith("-")
    body = text[1:] if negative else text
    if radix == 0:
        radix, body = detect_radix(body)
    if not body:
        return None

    values = _digit_values(body, radix)
    if values is None:
        return None

    if radix in _BUILTIN_PARSE_RADIXES:
        # Digits are already validated, so int() sees a plain literal
        magnitude = int("".join(DIGITS_LOWER[v] for v in values), radix)
    else:
        magnitude = _combine_digits(values, radix, 0, len(values))
    return -magnitude if negative else magnitude


# =============================================================================
# RENDERING
# =============================================================================


def _render_schoolbook(magnitude: int, base: int, alphabet: str) -> str:
    out = []
    while magnitude:
        magnitude, digit = divmod(magnitude, base)
        out.append(alphabet[digit])
    return "".join(reversed(out))


def _render_magnitude(magnitude: int, base: int, alphabet: str, width: int = 0) -> str:
    """Digits of magnitude, left-padded with zeros to width when width > 0."""
    if magnitude.bit_length() <= _SCHOOLBOOK_BITS:
        digits = _render_schoolbook(magnitude, base, alphabet)
        return digits.rjust(width, "0") if width else digits

    split = int(magnitude.bit_length() * math.log(2) / math.log(base)) // 2
    upper, lower = divmod(magnitude, base**split)
    upper_width = width - split if width else 0
    return (
        _render_magnitude(upper, base, alphabet, upper_width)
        + _render_magnitude(lower, base, alphabet, split)
    )


def render(value: int, radix: int = DEFAULT_RADIX) -> str:
    """
    Render an integer in the given radix.

    Args:
        value: Value to render
        radix: 2..62, or -36..-2 for uppercase letters

    Returns:
        Literal with a leading '-' for negative values

    Raises:
        InvalidRadixError: If radix is not supported

    Examples:
        >>> render(255, 16)
        'ff'
        >>> render(255, -16)
        'FF'
        >>> render(-61, 62)
        '-z'
    """
    base = validate_render_radix(radix)
    if value == 0:
        return "0"

    magnitude = abs(value)
    if radix in _BUILTIN_FORMAT_CODES:
        digits = format(magnitude, _BUILTIN_FORMAT_CODES[radix])
    elif radix < 0:
        digits = _render_magnitude(magnitude, base, DIGITS_UPPER)
    elif base <= MAX_CASE_INSENSITIVE_RADIX:
        digits = _render_magnitude(magnitude, base, DIGITS_LOWER)
    else:
        digits = _render_magnitude(magnitude, base, DIGITS_62)
    return "-" + digits if value < 0 else digits


def size_in_base(value: int, radix: int = DEFAULT_RADIX) -> int:
    """
    Exact length of render(value, radix) without rendering.

    Examples:
        >>> size_in_base(255, 16)
        2
        >>> size_in_base(-1000, 10)
        5
        >>> size_in_base(0, 2)
        1
    """
    base = validate_render_radix(radix)
    magnitude = abs(value)
    sign_width = 1 if value < 0 else 0
    if magnitude == 0:
        return 1

    if base & (base - 1) == 0:
        bits_per_digit = base.bit_length() - 1
        return -(-magnitude.bit_length() // bits_per_digit) + sign_width

    digits = max(int((magnitude.bit_length() - 1) * math.log(2) / math.log(base)), 1)
    while base**digits <= magnitude:
        digits += 1
    while digits > 1 and base ** (digits - 1) > magnitude:
        digits -= 1
    return digits + sign_width
