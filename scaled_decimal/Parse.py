import logging
import re
from decimal import Decimal
from numbers import Integral

import numpy

from scaled_decimal.DecimalError import MalformedDecimal, MagnitudeOverflow, NotANumber
from scaled_decimal.ScaledValue import ScaledValue

# largest integer a double holds exactly, anything past it has already lost digits before we see it
MAX_EXACT_FLOAT_INTEGER = 2**53 - 1

_INTEGER_PART = re.compile(r'-?[0-9]*')
_FRACTION_PART = re.compile(r'[0-9]*')

_logger = logging.getLogger(__name__)


def exact_integer_limit(literal: any) -> int:
    """ Largest integer the literal's float type holds exactly, 2**24 - 1 for float32. """
    return 2**(numpy.finfo(type(literal)).nmant + 1) - 1


def to_text(literal: any) -> str:
    """
    Render a literal to the decimal text it will be parsed from. Floats use the shortest positional text that round
    trips so 5.678 is '5.678' and not the binary expansion.
    """
    if isinstance(literal, bool):
        raise MalformedDecimal(literal)

    if isinstance(literal, str):
        return literal.strip()

    if isinstance(literal, Integral):
        return format(Decimal(int(literal)), 'f')

    if isinstance(literal, Decimal):
        if not literal.is_finite():
            raise NotANumber(literal)
        return format(literal, 'f')

    if isinstance(literal, (float, numpy.floating)):
        if not numpy.isfinite(literal):
            raise NotANumber(literal)
        limit = exact_integer_limit(literal)
        if abs(int(literal)) > limit:
            raise MagnitudeOverflow(literal, limit)
        return numpy.format_float_positional(literal, unique=True, trim='-')

    raise MalformedDecimal(literal)


def parse(literal: any) -> ScaledValue:
    """
    Parse a numeric or text literal into a ScaledValue, the scale is the count of digits after the decimal point as
    written so '1.50' is (150, 2).
    """
    try:
        text = to_text(literal)
    except (MalformedDecimal, NotANumber, MagnitudeOverflow) as e:
        _logger.debug('Rejected literal %r: %s', literal, e)
        raise

    if text == '':
        return ScaledValue(0, 0)

    parts = text.split('.')
    if len(parts) > 2:
        _logger.debug('Rejected %r, more than one decimal point.', literal)
        raise MalformedDecimal(literal)

    integer_part = parts[0]
    # no decimal point is an integer at scale 0
    fraction_part = parts[1] if len(parts) == 2 else ''

    if (
        not _INTEGER_PART.fullmatch(integer_part)
        or not _FRACTION_PART.fullmatch(fraction_part)
        or integer_part.lstrip('-') + fraction_part == ''
    ):
        _logger.debug('Rejected %r, expected digits with an optional sign and decimal point.', literal)
        raise MalformedDecimal(literal)

    return ScaledValue(int(Decimal(integer_part + fraction_part)), len(fraction_part))
