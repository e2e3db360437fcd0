from enum import Enum


class ErrorCode(str, Enum):
    PROVIDER_UNAVAILABLE = "PROVIDER_UNAVAILABLE"
    INTERNAL = "INTERNAL"


class BikeStationError(Exception):
    """Base class for bike station lookup errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL):
        super().__init__(message)
        self.code: ErrorCode = code
        self.message: str = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, msg={self.message})"


class StationServiceError(BikeStationError):
    """The station provider could not be reached or returned unusable data."""

    def __init__(self, message: str = "Station provider unavailable"):
        super().__init__(message, code=ErrorCode.PROVIDER_UNAVAILABLE)
