from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from numbers import Integral

from scaled_decimal.DecimalError import InvalidMagnitude, InvalidScale


def _is_integer(v: any) -> bool:
    return isinstance(v, Integral) and not isinstance(v, bool)


@dataclass(frozen=True, repr=False)
class ScaledValue:
    """
    Decimal stored as an unscaled int with the number of digits to the right of the decimal point, 12.340 is
    (12340, 3). Trailing zeros are part of the representation so equality is structural, (150, 2) and (15, 1) are
    different values even though they are numerically equal.

    Digit strings go through Decimal since str(int) is capped at 4300 digits.
    """

    unscaled: int
    scale: int

    def __post_init__(self):
        if not _is_integer(self.unscaled):
            raise InvalidMagnitude(self.unscaled)
        if not _is_integer(self.scale) or self.scale < 0:
            raise InvalidScale(self.scale)

        # numpy integers are held as plain ints so products never wrap
        object.__setattr__(self, 'unscaled', int(self.unscaled))
        object.__setattr__(self, 'scale', int(self.scale))

    def __repr__(self):
        sign = '-' if self.unscaled < 0 else ''
        return f'ScaledValue(unscaled={sign}{self.digits}, scale={self.scale})'

    def zero(self) -> ScaledValue:
        return ScaledValue(0, self.scale)

    def is_negative(self) -> bool:
        return self.unscaled < 0

    @property
    def digits(self) -> str:
        """ Decimal digits of the absolute unscaled value. """
        return format(Decimal(abs(self.unscaled)), 'f')

    @property
    def precision(self) -> int:
        """ Number of digits in the unscaled value, zero has 1. """
        return len(self.digits)

    @property
    def float(self):
        """ Lossy export, out of range magnitudes become inf or 0.0. """
        sign = '-' if self.unscaled < 0 else ''
        return float(Decimal(f'{sign}{self.digits}E-{self.scale}'))
