from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from scaled_decimal import Arithmetic, Parse
from scaled_decimal.DecimalError import DecimalError, InvalidScale, PrecisionExceeded
from scaled_decimal.ScaledValue import ScaledValue

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrecisionBounds:
    """
    Fixed precision on top of the unbounded core, every result is checked after the fact instead of forking
    ScaledValue. Precision is the max number of digits in the unscaled value and scale, if given, the max number of
    fractional digits, like NUMERIC(precision, scale).
    """

    precision: int
    scale: Optional[int] = None

    @staticmethod
    def from_dict(config: Dict[str, any]) -> PrecisionBounds:
        """ Bounds from a config mapping, e.g. {'precision': 18, 'scale': 6}. """
        unknown = set(config) - {'precision', 'scale'}
        if unknown:
            raise DecimalError(config, f'Unknown precision bounds config {sorted(unknown)}.')
        if 'precision' not in config:
            raise DecimalError(config, 'Precision bounds config requires precision.')

        return PrecisionBounds(config['precision'], config.get('scale'))

    def __post_init__(self):
        if isinstance(self.precision, bool) or not isinstance(self.precision, int) or self.precision < 1:
            raise DecimalError(self.precision, f'Invalid precision {self.precision!r}, must be a positive integer.')

        if self.scale is not None:
            if isinstance(self.scale, bool) or not isinstance(self.scale, int) or self.scale < 0:
                raise InvalidScale(self.scale)
            if self.scale > self.precision:
                raise InvalidScale(self.scale, f'must not be larger than precision {self.precision}')

    def check(self, value: ScaledValue) -> ScaledValue:
        if value.precision > self.precision:
            _logger.debug('%s has %d digits, bound is %d.', value, value.precision, self.precision)
            raise PrecisionExceeded(value, f'precision of {self.precision} digits')

        if self.scale is not None and value.scale > self.scale:
            _logger.debug('%s has scale %d, bound is %d.', value, value.scale, self.scale)
            raise PrecisionExceeded(value, f'scale of {self.scale} digits')

        return value

    def parse(self, literal: any) -> ScaledValue:
        return self.check(Parse.parse(literal))

    def add(self, a: ScaledValue, b: ScaledValue) -> ScaledValue:
        return self.check(Arithmetic.add(a, b))

    def subtract(self, a: ScaledValue, b: ScaledValue) -> ScaledValue:
        return self.check(Arithmetic.subtract(a, b))

    def multiply(self, a: ScaledValue, b: ScaledValue) -> ScaledValue:
        return self.check(Arithmetic.multiply(a, b))
