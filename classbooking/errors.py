"""Errors raised by the class booking service."""

from __future__ import annotations

CREATING_BOOKING_MESSAGE = "Error while creating booking:"


class BookingServiceError(Exception):
    """Base class for every error the service reports to a client."""

    default_message = "booking service error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)

    @property
    def message(self) -> str:
        return str(self.args[0])


class UnmarshallingError(BookingServiceError):
    """A request body could not be decoded into the expected shape."""

    default_message = "error while unamrshalling"

    def __init__(self, detail: str = "") -> None:
        super().__init__()
        self.detail = detail


class ClassNotExistError(BookingServiceError):
    """The requested class has not been created."""

    default_message = "Please Check Your Class Name"


class BookingDatePassedError(BookingServiceError):
    """The booking date lies outside the class's running dates."""

    default_message = "booking for the mentioned date is not allowed for the class"


class SlotsFullError(BookingServiceError):
    """The class is already at capacity on the requested date."""

    default_message = "booking full for the requested class on the mentioned date"


class EndTimeBeforeStartTimeError(BookingServiceError):
    """A class was given an end date earlier than its start date."""

    default_message = "class end date can not be less than start end date"


class DateParseError(BookingServiceError, ValueError):
    """A date string did not match the configured layout."""