"""Exception types raised by the yield curve package."""


class CurveError(Exception):
    """Base class for all curve construction and query failures."""


class InvalidInputError(CurveError, ValueError):
    """Raised when market data or curve inputs are malformed or insufficient."""

    pass


class ExtrapolationError(CurveError, ValueError):
    """Raised when a curve is queried outside its pillar range with extrapolation disabled."""

    pass


class UnknownError(CurveError, RuntimeError):
    """Wraps any unexpected failure surfaced at the top level."""

    pass
