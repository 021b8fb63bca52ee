class PagingError(Exception):
    pass


class InvalidArgumentError(PagingError, ValueError):
    pass


class UnsupportedOperationError(PagingError, RuntimeError):
    pass
