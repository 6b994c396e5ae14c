"""
Print media presets.

A page setup is a width, an optional height (None for continuous label
tape that grows to fit) and an optional margin.
"""
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from measurement import Measurement, inches, millimeters

DEFAULT_STRIP_SPACING = inches(0.125)


@dataclass(frozen=True)
class PageSetup:
    width: Measurement
    height: Optional[Measurement] = None
    margin: Optional[Measurement] = None

    @property
    def is_continuous(self) -> bool:
        return self.height is None

    def resolve(self) -> Tuple[float, Optional[float], float]:
        """Width, height and margin in inches."""
        height = self.height.to_inches() if self.height is not None else None
        margin = self.margin.to_inches() if self.margin is not None else 0.0
        return self.width.to_inches(), height, margin

    @classmethod
    def letter_portrait(cls, margin: Optional[Measurement] = None) -> 'PageSetup':
        return cls(inches(8.5), inches(11), margin or inches(0.25))

    @classmethod
    def letter_landscape(cls, margin: Optional[Measurement] = None) -> 'PageSetup':
        return cls(inches(11), inches(8.5), margin or inches(0.25))

    @classmethod
    def legal_portrait(cls, margin: Optional[Measurement] = None) -> 'PageSetup':
        return cls(inches(8.5), inches(14), margin or inches(0.25))

    @classmethod
    def a4_portrait(cls, margin: Optional[Measurement] = None) -> 'PageSetup':
        return cls(millimeters(210), millimeters(297), margin or millimeters(10))

    @classmethod
    def a4_landscape(cls, margin: Optional[Measurement] = None) -> 'PageSetup':
        return cls(millimeters(297), millimeters(210), margin or millimeters(10))

    @classmethod
    def a3_portrait(cls, margin: Optional[Measurement] = None) -> 'PageSetup':
        return cls(millimeters(297), millimeters(420), margin or millimeters(10))

    @classmethod
    def continuous_label(cls, width: Measurement,
                         margin: Optional[Measurement] = None) -> 'PageSetup':
        """Label tape of fixed width and unbounded length."""
        return cls(width, None, margin or inches(0.125))

    def __str__(self):
        height = str(self.height) if self.height is not None else "continuous"
        margin = str(self.margin) if self.margin is not None else "none"
        return f"{self.width} x {height} (margin {margin})"


PAPER_SIZES: Dict[str, Callable[..., PageSetup]] = {
    'letter': PageSetup.letter_portrait,
    'letter-landscape': PageSetup.letter_landscape,
    'legal': PageSetup.legal_portrait,
    'a4': PageSetup.a4_portrait,
    'a4-landscape': PageSetup.a4_landscape,
    'a3': PageSetup.a3_portrait,
}
