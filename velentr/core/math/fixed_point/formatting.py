"""
Culture-aware decimal text for fixed-point values.

Rendering:
    The double value is rounded half away from zero to exactly `precision`
    fractional digits and written in plain positional notation (never
    exponential). 61.375 at two digits renders as "61.38".

Parsing:
    [ws][sign]digits[group digits...][decimal fraction][e|E[sign]exp][ws]
    The result is an exact Decimal; scaling and rounding to a raw value is
    done by the fixed-point type.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from functools import lru_cache
from typing import Final, Optional

from pydantic import BaseModel, Field, model_validator

from velentr.core.math.fixed_point.errors import FixedPointFormatError


# =============================================================================
# CULTURE MODEL
# =============================================================================


class Culture(BaseModel):
    """
    Number-format conventions of a locale.

    Immutable model (frozen=True); the registry below holds the presets.
    """

    name: str = Field(..., description="Culture identifier, empty for invariant")
    decimal_separator: str = Field(".", min_length=1)
    group_separator: str = Field(",", min_length=1)
    negative_sign: str = Field("-", min_length=1)
    positive_sign: str = Field("+", min_length=1)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_distinct_separators(self) -> "Culture":
        """Decimal and group separators must not collide."""
        if self.decimal_separator == self.group_separator:
            raise ValueError(
                f"decimal_separator and group_separator must differ, "
                f"both are {self.decimal_separator!r}"
            )
        return self

    @classmethod
    def get(cls, name: str) -> "Culture":
        """
        Look up a registered culture by name.

        Raises:
            KeyError: If the culture is not registered
        """
        try:
            return _CULTURES[name]
        except KeyError:
            raise KeyError(f"Unknown culture: {name!r}") from None


INVARIANT_CULTURE: Final[Culture] = Culture(name="")

_CULTURES: dict[str, Culture] = {
    "": INVARIANT_CULTURE,
    "en-US": Culture(name="en-US"),
    "de-DE": Culture(name="de-DE", decimal_separator=",", group_separator="."),
    "fr-FR": Culture(name="fr-FR", decimal_separator=",", group_separator=" "),
}


def register_culture(culture: Culture) -> None:
    """Add or replace a culture in the registry."""
    _CULTURES[culture.name] = culture


# =============================================================================
# RENDERING
# =============================================================================


def format_fixed(value: float, precision: int, culture: Culture) -> str:
    """
    Render a double with exactly `precision` fractional digits.

    Args:
        value: Finite double
        precision: Number of fractional digits
        culture: Separators and signs to use

    Returns:
        Fixed-decimal text, e.g. "96.45"
    """
    with localcontext() as ctx:
        ctx.prec = 60
        quantum = Decimal(1).scaleb(-precision)
        rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)

    text = format(rounded, "f")
    sign = ""
    if text.startswith("-"):
        sign, text = culture.negative_sign, text[1:]

    return sign + text.replace(".", culture.decimal_separator)


# =============================================================================
# PARSING
# =============================================================================

EXPONENT_SLACK: Final[int] = 400


@lru_cache(maxsize=32)
def _number_pattern(
    decimal_separator: str,
    group_separator: str,
    negative_sign: str,
    positive_sign: str,
) -> re.Pattern[str]:
    signs = "|".join(re.escape(s) for s in (negative_sign, positive_sign))
    return re.compile(
        rf"\s*(?P<sign>{signs})?"
        rf"(?P<int>[0-9](?:[0-9]|{re.escape(group_separator)})*)?"
        rf"(?:{re.escape(decimal_separator)}(?P<frac>[0-9]*))?"
        r"(?:[eE](?P<exp>[+-]?[0-9]+))?\s*"
    )


def _clamp_exponent(exponent: str, digit_count: int) -> int:
    """
    Limit an exponent to what still changes the result.

    Beyond digit_count + EXPONENT_SLACK the value is past double range (or
    rounds to zero), so larger magnitudes are equivalent. Works on the digit
    string to avoid converting arbitrarily long exponents.
    """
    negative = exponent.startswith("-")
    magnitude = exponent.lstrip("+-").lstrip("0") or "0"
    limit = digit_count + EXPONENT_SLACK
    if len(magnitude) > len(str(limit)) or int(magnitude) > limit:
        return -limit if negative else limit
    return -int(magnitude) if negative else int(magnitude)


def parse_decimal(text: Optional[str], culture: Culture) -> Decimal:
    """
    Parse culture-formatted decimal text into an exact Decimal.

    Args:
        text: Input text
        culture: Separators and signs to accept

    Returns:
        Exact decimal value of the text

    Raises:
        FixedPointFormatError: If text is not a string or is malformed

    Examples:
        >>> parse_decimal("1,234.5", INVARIANT_CULTURE)
        Decimal('1234.5')
        >>> parse_decimal("-3,57", Culture.get("de-DE"))
        Decimal('-3.57')
    """
    if not isinstance(text, str):
        raise FixedPointFormatError(f"Cannot parse {type(text).__name__} as a decimal number")

    pattern = _number_pattern(
        culture.decimal_separator,
        culture.group_separator,
        culture.negative_sign,
        culture.positive_sign,
    )
    match = pattern.fullmatch(text)
    if match is None or not (match.group("int") or match.group("frac")):
        raise FixedPointFormatError(f"Input string was not in a correct format: {text!r}")

    sign = "-" if match.group("sign") == culture.negative_sign else ""
    digits = (match.group("int") or "0").replace(culture.group_separator, "")
    fraction = match.group("frac") or "0"
    exponent = match.group("exp")

    literal = f"{sign}{digits}.{fraction}"
    if exponent:
        literal += f"E{_clamp_exponent(exponent, len(digits) + len(fraction))}"

    try:
        return Decimal(literal)
    except InvalidOperation as e:
        raise FixedPointFormatError(f"Input string was not in a correct format: {text!r}") from e
