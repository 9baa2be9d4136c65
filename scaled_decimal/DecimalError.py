class DecimalError(ValueError):
    """
    Base for every rejection raised while building or bounding a scaled decimal. Carries the rejected input.
    """

    value: any

    def __init__(self, value: any, message: str):
        self.value = value

        super().__init__(message)


class MalformedDecimal(DecimalError):

    def __init__(self, value: any):
        super().__init__(value, f'{value!r} is not a valid decimal number')


class NotANumber(DecimalError):

    def __init__(self, value: any):
        super().__init__(value, f'{value!r} is not a number')


class MagnitudeOverflow(DecimalError):

    def __init__(self, value: any, limit: int):
        super().__init__(value, f'{value!r} is larger than {limit} and can not be represented exactly')


class InvalidScale(DecimalError):

    def __init__(self, value: any, reason: str = 'scale must be a non-negative integer'):
        super().__init__(value, f'Invalid scale {value!r}, {reason}.')


class InvalidMagnitude(DecimalError):

    def __init__(self, value: any):
        super().__init__(value, f'Unscaled value {value!r} must be an integer.')


class PrecisionExceeded(DecimalError):

    def __init__(self, value: any, reason: str):
        super().__init__(value, f'{value!r} exceeds {reason}.')
