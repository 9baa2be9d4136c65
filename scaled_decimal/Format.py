from scaled_decimal.ScaledValue import ScaledValue


def format_decimal(value: ScaledValue) -> str:
    """
    Canonical text for a value, always showing exactly scale fractional digits and a sign only when negative.
    """
    digits = value.digits
    sign = '-' if value.unscaled < 0 else ''

    if value.scale == 0:
        return f'{sign}{digits}'

    padded = digits.rjust(value.scale + 1, '0')
    integer_part = padded[:-value.scale] or '0'
    fraction_part = padded[-value.scale:]

    return f'{sign}{integer_part}.{fraction_part}'
