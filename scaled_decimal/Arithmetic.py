from functools import reduce
from numbers import Integral
from typing import Iterable

from scaled_decimal.DecimalError import InvalidScale
from scaled_decimal.ScaledValue import ScaledValue


def rescale(value: ScaledValue, scale: int) -> ScaledValue:
    """
    Align a value to a larger or equal scale by appending zero digits, exact since no digits are dropped.
    """
    if isinstance(scale, bool) or not isinstance(scale, Integral):
        raise InvalidScale(scale)
    if scale < value.scale:
        raise InvalidScale(scale, f'can not reduce scale of {value} without rounding')

    if scale == value.scale:
        return value

    return ScaledValue(value.unscaled * 10**(scale - value.scale), scale)


def add(a: ScaledValue, b: ScaledValue) -> ScaledValue:
    scale = max(a.scale, b.scale)
    return ScaledValue(rescale(a, scale).unscaled + rescale(b, scale).unscaled, scale)


def subtract(a: ScaledValue, b: ScaledValue) -> ScaledValue:
    """ a - b at the larger of the two scales. """
    scale = max(a.scale, b.scale)
    return ScaledValue(rescale(a, scale).unscaled - rescale(b, scale).unscaled, scale)


def multiply(a: ScaledValue, b: ScaledValue) -> ScaledValue:
    """
    Product of the unscaled values with the scales summed, p and q fractional digits multiply out to exactly p + q.
    Trailing zeros are kept so 2.5 * 0.4 is 1.00.
    """
    return ScaledValue(a.unscaled * b.unscaled, a.scale + b.scale)


def negate(value: ScaledValue) -> ScaledValue:
    return ScaledValue(-value.unscaled, value.scale)


def sum_values(values: Iterable[ScaledValue], scale: int = 0) -> ScaledValue:
    """ Add up values starting from zero at the given scale, result scale is the largest seen. """
    return reduce(add, values, ScaledValue(0, scale))
