class ChartError(Exception):
    """
    Base exception for all chart-related domain errors.
    """
    pass


class MissingAscendantError(ChartError):
    """
    Raised when a birth chart is requested without a usable Ascendant.
    """
    pass


class InvalidBodyRecordError(ChartError):
    """
    Raised when a single body record is missing fields or carries
    non-numeric values.
    """
    pass


class AstrologyApiError(ChartError):
    """
    Raised when the planetary-position API fails or returns
    an unexpected payload.
    """
    pass


class LocationLookupError(ChartError):
    """
    Raised when the place search backend cannot be reached.
    """
    pass
