"""Closed code sets used by the Unicode Character Database.

Each enumeration validates raw property codes at the ingestion boundary.
Unknown codes are rejected instead of being passed through as strings.
"""

from __future__ import annotations

from enum import Enum


class GeneralCategory(str, Enum):
    """Two-letter general category codes."""

    UPPERCASE_LETTER = "Lu"
    LOWERCASE_LETTER = "Ll"
    TITLECASE_LETTER = "Lt"
    MODIFIER_LETTER = "Lm"
    OTHER_LETTER = "Lo"
    NONSPACING_MARK = "Mn"
    SPACING_MARK = "Mc"
    ENCLOSING_MARK = "Me"
    DECIMAL_NUMBER = "Nd"
    LETTER_NUMBER = "Nl"
    OTHER_NUMBER = "No"
    CONNECTOR_PUNCTUATION = "Pc"
    DASH_PUNCTUATION = "Pd"
    OPEN_PUNCTUATION = "Ps"
    CLOSE_PUNCTUATION = "Pe"
    INITIAL_PUNCTUATION = "Pi"
    FINAL_PUNCTUATION = "Pf"
    OTHER_PUNCTUATION = "Po"
    MATH_SYMBOL = "Sm"
    CURRENCY_SYMBOL = "Sc"
    MODIFIER_SYMBOL = "Sk"
    OTHER_SYMBOL = "So"
    SPACE_SEPARATOR = "Zs"
    LINE_SEPARATOR = "Zl"
    PARAGRAPH_SEPARATOR = "Zp"
    CONTROL = "Cc"
    FORMAT = "Cf"
    SURROGATE = "Cs"
    PRIVATE_USE = "Co"
    UNASSIGNED = "Cn"

    @property
    def description(self) -> str:
        """Return the human readable category label."""
        return _CATEGORY_DESCRIPTIONS[self.value]


_CATEGORY_DESCRIPTIONS = {
    "Lu": "Uppercase Letter",
    "Ll": "Lowercase Letter",
    "Lt": "Titlecase Letter",
    "Lm": "Modifier Letter",
    "Lo": "Other Letter",
    "Mn": "Non-spacing Mark",
    "Mc": "Spacing Mark",
    "Me": "Enclosing Mark",
    "Nd": "Decimal Number",
    "Nl": "Letter Number",
    "No": "Other Number",
    "Pc": "Connector Punctuation",
    "Pd": "Dash Punctuation",
    "Ps": "Opening Punctuation",
    "Pe": "Closing Punctuation",
    "Pi": "Initial Quotation Mark",
    "Pf": "Final Quotation Mark",
    "Po": "Other Punctuation",
    "Sm": "Mathematical Symbol",
    "Sc": "Currency Sign",
    "Sk": "Non-letter Modifier Symbol",
    "So": "Other Symbol",
    "Zs": "Space Separator",
    "Zl": "Line Separator",
    "Zp": "Paragraph Separator",
    "Cc": "Control Character",
    "Cf": "Format Control Character",
    "Cs": "Surrogate Code Point",
    "Co": "Private-use Character",
    "Cn": "Reserved Unassigned Code Point",
}


class BidiClass(str, Enum):
    """Bidirectional class codes."""

    LEFT_TO_RIGHT = "L"
    RIGHT_TO_LEFT = "R"
    ARABIC_LETTER = "AL"
    EUROPEAN_NUMBER = "EN"
    EUROPEAN_SEPARATOR = "ES"
    EUROPEAN_TERMINATOR = "ET"
    ARABIC_NUMBER = "AN"
    COMMON_SEPARATOR = "CS"
    NONSPACING_MARK = "NSM"
    BOUNDARY_NEUTRAL = "BN"
    PARAGRAPH_SEPARATOR = "B"
    SEGMENT_SEPARATOR = "S"
    WHITE_SPACE = "WS"
    OTHER_NEUTRAL = "ON"
    LEFT_TO_RIGHT_EMBEDDING = "LRE"
    LEFT_TO_RIGHT_OVERRIDE = "LRO"
    RIGHT_TO_LEFT_EMBEDDING = "RLE"
    RIGHT_TO_LEFT_OVERRIDE = "RLO"
    POP_DIRECTIONAL_FORMAT = "PDF"
    LEFT_TO_RIGHT_ISOLATE = "LRI"
    RIGHT_TO_LEFT_ISOLATE = "RLI"
    FIRST_STRONG_ISOLATE = "FSI"
    POP_DIRECTIONAL_ISOLATE = "PDI"


class DecompositionType(str, Enum):
    """Decomposition mapping types: canonical plus compatibility tags."""

    CANONICAL = "canonical"
    FONT = "font"
    NO_BREAK = "noBreak"
    INITIAL = "initial"
    MEDIAL = "medial"
    FINAL = "final"
    ISOLATED = "isolated"
    CIRCLE = "circle"
    SUPER = "super"
    SUB = "sub"
    VERTICAL = "vertical"
    WIDE = "wide"
    NARROW = "narrow"
    SMALL = "small"
    SQUARE = "square"
    FRACTION = "fraction"
    COMPAT = "compat"


class NumericType(str, Enum):
    """Numeric type derived from the three numeric value fields."""

    DECIMAL = "decimal"
    DIGIT = "digit"
    NUMERIC = "numeric"
