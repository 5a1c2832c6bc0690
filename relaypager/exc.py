class BaseRelayPagerException(Exception):
    pass


class PaginationArgumentError(BaseRelayPagerException, ValueError):
    """ Invalid pagination argument provided by the User

    Reported when `first` or `last` is negative or not an integer
    """

    def __init__(self, err: str = 'Pagination argument must be positive', *, argument_name: str = None):
        self.argument_name = argument_name
        super().__init__(err)


class CursorDecodeError(BaseRelayPagerException, ValueError):
    """ Malformed cursor provided by the User

    Reported when `after` or `before` cannot be parsed into a cursor.
    The message is the underlying parser's message; the original error is chained as `__cause__`
    """

    def __init__(self, argument_name: str, err: str):
        self.argument_name = argument_name
        super().__init__(err)


class IntegerConversionError(BaseRelayPagerException, OverflowError):
    """ A pagination bound or a result length does not fit into the pagination integer type """

    def __init__(self, name: str, value: int, max_value: int):
        self.name = name
        self.value = value
        self.max_value = max_value

        super().__init__(f'Integer conversion failed: "{name}"={value} is out of range (max: {max_value})')
