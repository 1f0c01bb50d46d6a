class CoaltimeError(Exception):
    """Base class for all errors raised by coaltime."""

    pass


class InvalidArgumentError(CoaltimeError):
    """An error raised when an estimator receives inputs it cannot date."""

    pass


class RootNotFoundError(CoaltimeError):
    """An error raised when no confidence bound can be bracketed in [0, 1]."""

    pass


class PairwiseMatrixError(CoaltimeError):
    """An ExceptionClass for PairwiseMatrix class."""

    pass


class UnspecifiedConfigParameterError(CoaltimeError):
    pass
