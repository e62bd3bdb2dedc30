"""Field decoders shared by the UCD file parsers.

Every decoder is a pure function that raises ValueError on bad input.
Parsers wrap those failures with file and line context.
"""

from __future__ import annotations

from enum import Enum
import re
from typing import TypeVar

from core.constants import MAX_CODEPOINT, RANGE_SEPARATOR
from core.ucd_codes import DecompositionType, NumericType

_EnumT = TypeVar("_EnumT", bound=Enum)

_HEX_PATTERN = re.compile(r"[0-9A-Fa-f]+")


def parse_hex(value: str) -> int:
    """Decode a base-16 codepoint string.

    Args:
        value: Hex digits such as ``"0041"``.

    Returns:
        Decoded codepoint.

    Raises:
        ValueError: If the value is not hex or exceeds the codepoint space.
    """
    if not value:
        raise ValueError("expected hex codepoint, got empty value")
    if _HEX_PATTERN.fullmatch(value) is None:
        raise ValueError(f"expected hex codepoint, got '{value}'")
    codepoint = int(value, 16)
    if codepoint > MAX_CODEPOINT:
        raise ValueError(f"codepoint {value} is outside 0..10FFFF")
    return codepoint


def parse_codepoint_range(value: str) -> range:
    """Decode ``"0041"`` or ``"0041..005A"`` into an inclusive range.

    Args:
        value: Single hex codepoint or two joined by ``..``.

    Returns:
        Range covering both bounds.

    Raises:
        ValueError: If a bound is invalid or the bounds are reversed.
    """
    if RANGE_SEPARATOR not in value:
        start = parse_hex(value)
        return range(start, start + 1)
    start_text, end_text = value.split(RANGE_SEPARATOR, 1)
    start = parse_hex(start_text)
    end = parse_hex(end_text)
    if end < start:
        raise ValueError(f"range end precedes start in '{value}'")
    return range(start, end + 1)


def parse_optional_int(value: str) -> int | None:
    """Decode an optional decimal integer field."""
    if not value:
        return None
    if not (value.isascii() and value.isdigit()):
        raise ValueError(f"expected decimal integer, got '{value}'")
    return int(value)


def parse_code(enum_type: type[_EnumT], value: str) -> _EnumT:
    """Parse a raw property code into its closed enumeration.

    Args:
        enum_type: Enumeration class to validate against.
        value: Raw code from the source file.

    Returns:
        Matching enumeration member.

    Raises:
        ValueError: If the code is not a member of the enumeration.
    """
    try:
        return enum_type(value)
    except ValueError as error:
        raise ValueError(f"unknown {enum_type.__name__} code '{value}'") from error


def parse_bidi_mirrored(value: str) -> bool:
    """Return True only for the exact ``"Y"`` flag."""
    return value == "Y"


def parse_decomposition(value: str) -> tuple[DecompositionType | None, str | None]:
    """Decode the decomposition field into type and decimal mapping.

    A leading ``<tag>`` token names the compatibility type and is excluded
    from the mapping. Without a tag the decomposition is canonical and every
    token belongs to the mapping.

    Args:
        value: Raw field such as ``"<compat> 0020 0308"`` or ``"0041 0300"``.

    Returns:
        Pair of decomposition type and space-joined decimal mapping,
        both None for an empty field.

    Raises:
        ValueError: If the tag is unknown or a mapping token is not hex.
    """
    tokens = value.split()
    if not tokens:
        return None, None
    first = tokens[0]
    if first.startswith("<") and first.endswith(">"):
        decomposition_type = parse_code(DecompositionType, first[1:-1])
        mapping_tokens = tokens[1:]
    else:
        decomposition_type = DecompositionType.CANONICAL
        mapping_tokens = tokens
    if not mapping_tokens:
        raise ValueError(f"decomposition '{value}' has a type but no mapping")
    mapping = " ".join(str(parse_hex(token)) for token in mapping_tokens)
    return decomposition_type, mapping


def classify_numeric(
    decimal_value: int | None,
    digit_value: int | None,
    numeric_value: str | None,
) -> tuple[NumericType | None, str | None]:
    """Derive numeric type and value from the three numeric fields.

    Branches are evaluated in order: all three present gives ``decimal``,
    digit and numeric present gives ``digit``, numeric alone gives
    ``numeric``. Any other combination yields no classification.

    Args:
        decimal_value: Decimal digit field.
        digit_value: Digit field.
        numeric_value: Free-form numeric field.

    Returns:
        Pair of numeric type and value text.
    """
    if decimal_value is not None and digit_value is not None and numeric_value is not None:
        return NumericType.DECIMAL, str(decimal_value)
    if digit_value is not None and numeric_value is not None:
        return NumericType.DIGIT, str(digit_value)
    if decimal_value is None and digit_value is None and numeric_value is not None:
        return NumericType.NUMERIC, numeric_value
    return None, None


def parse_case_mapping(value: str) -> int | None:
    """Decode an optional hex case mapping."""
    if not value:
        return None
    return parse_hex(value)
