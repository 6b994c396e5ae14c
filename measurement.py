"""
Physical measurements with a unit, and parsing of user-entered sizes.

Accepted forms: "8.5", "8.5in", '8.5"', "8 1/2", "8-1/2in", "17/2",
"210mm", "21cm". A bare number is inches. Fractions are imperial only.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional
import math
import re

MILLIMETERS_PER_INCH = 25.4

_DECIMAL = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)$')
_INTEGER = re.compile(r'^[+-]?\d+$')
_DIGITS = re.compile(r'^\d+$')


class MeasurementFormatError(ValueError):
    """Raised for a measurement string that can't be understood."""


class UnitOfMeasure(Enum):
    INCHES = 'in'
    MILLIMETERS = 'mm'


@dataclass(frozen=True)
class Measurement:
    """A length in inches or millimeters."""
    value: float
    unit: UnitOfMeasure = UnitOfMeasure.INCHES

    def __post_init__(self):
        if not math.isfinite(self.value):
            raise MeasurementFormatError(f"Measurement value must be finite (got {self.value})")

    @classmethod
    def parse(cls, text: str) -> 'Measurement':
        if text is None or not text.strip():
            raise MeasurementFormatError("Measurement string cannot be empty.")

        s = text.strip()
        lower = s.lower()

        if lower.endswith('cm'):
            value = _parse_decimal(s[:-2])
            if value is None:
                raise MeasurementFormatError(f"Invalid centimeter measurement: '{text}'.")
            return cls(value * 10, UnitOfMeasure.MILLIMETERS)

        if lower.endswith('mm'):
            value = _parse_decimal(s[:-2])
            if value is None:
                raise MeasurementFormatError(f"Invalid millimeter measurement: '{text}'.")
            return cls(value, UnitOfMeasure.MILLIMETERS)

        if lower.endswith('in'):
            s = s[:-2]
        elif s.endswith('"'):
            s = s[:-1]

        value = _parse_imperial(s)
        if value is None:
            raise MeasurementFormatError(
                f"Invalid measurement format: '{text}'. "
                "Expected '8.5', '8 1/2\"', '8-1/2in', '210mm', or '21cm'."
            )
        return cls(value, UnitOfMeasure.INCHES)

    @classmethod
    def try_parse(cls, text: str) -> Optional['Measurement']:
        try:
            return cls.parse(text)
        except MeasurementFormatError:
            return None

    def to_inches(self) -> float:
        if self.unit == UnitOfMeasure.INCHES:
            return self.value
        return self.value / MILLIMETERS_PER_INCH

    def to_millimeters(self) -> float:
        if self.unit == UnitOfMeasure.MILLIMETERS:
            return self.value
        return self.value * MILLIMETERS_PER_INCH

    def to_common_unit(self) -> float:
        """Inches, the unit the layout engine works in."""
        return self.to_inches()

    def __str__(self):
        if self.unit == UnitOfMeasure.INCHES:
            return f"{self.value:.3f}in"
        return f"{self.value:.2f}mm"


def _parse_decimal(s: str) -> Optional[float]:
    s = s.strip()
    if not _DECIMAL.match(s):
        return None
    return float(s)


def _parse_imperial(s: str) -> Optional[float]:
    """Decimal inches, or a whole number with a fraction ("8 1/2", "8-1/2", "17/2")."""
    s = s.strip()
    if not s:
        return None

    value = _parse_decimal(s)
    if value is not None:
        return value

    whole_part = None
    fraction = s
    # A leading sign belongs to the whole number, not the separator
    space, dash = s.find(' '), s.find('-', 1)
    separator = space if space >= 0 else dash
    if separator > 0:
        whole_part = s[:separator].strip()
        if not _INTEGER.match(whole_part):
            return None
        fraction = s[separator + 1:].strip()

    numerator, slash, denominator = fraction.partition('/')
    numerator, denominator = numerator.strip(), denominator.strip()
    if not slash or not numerator:
        return None
    # Only a bare fraction may carry its own sign ("-17/2")
    numerator_pattern = _INTEGER if whole_part is None else _DIGITS
    if not numerator_pattern.match(numerator) or not _DIGITS.match(denominator):
        return None
    if int(denominator) == 0:
        return None

    value = int(numerator) / int(denominator)
    if whole_part is None:
        return value
    # "-8 1/2" is -(8 + 1/2), and "-0 1/2" keeps its sign too
    if whole_part.startswith('-'):
        return int(whole_part) - value
    return int(whole_part) + value


def inches(value: float) -> Measurement:
    return Measurement(value, UnitOfMeasure.INCHES)


def millimeters(value: float) -> Measurement:
    return Measurement(value, UnitOfMeasure.MILLIMETERS)


def centimeters(value: float) -> Measurement:
    return Measurement(value * 10, UnitOfMeasure.MILLIMETERS)
