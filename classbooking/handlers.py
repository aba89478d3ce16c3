"""Request handlers that decode bodies and call the business service."""

from __future__ import annotations

import logging
from http import HTTPStatus

from classbooking.config import BOOKING_SUCCESS, CLASS_SUCCESS
from classbooking.errors import (
    CREATING_BOOKING_MESSAGE,
    BookingServiceError,
    UnmarshallingError,
)
from classbooking.models import BookingInfo, ClassRequest
from classbooking.response import create_response

logger = logging.getLogger(__name__)


class BookingHandler:
    """Handles requests to book a user into a class."""

    def __init__(self, store, lock, service) -> None:
        self.store = store
        self.lock = lock
        self.service = service

    def create_booking(self, body):
        """Process a booking request body; return ``(response, status)``."""
        try:
            booking_info = BookingInfo.from_json(body)
        except UnmarshallingError as exc:
            logger.info("%s %s", exc.message, exc.detail)
            return create_response(False, exc.message), HTTPStatus.BAD_REQUEST

        try:
            self.service.create_booking(booking_info)
        except BookingServiceError as exc:
            logger.info("%s %s", CREATING_BOOKING_MESSAGE, exc)
            return create_response(False, str(exc)), HTTPStatus.BAD_REQUEST

        return create_response(True, BOOKING_SUCCESS), HTTPStatus.OK


class ClassHandler:
    """Handles requests to create a class."""

    def __init__(self, store, lock, service) -> None:
        self.store = store
        self.lock = lock
        self.service = service

    def create_class(self, body):
        """Process a class creation body; return ``(response, status)``."""
        try:
            class_data = ClassRequest.from_json(body)
        except UnmarshallingError as exc:
            logger.info("%s %s", exc.message, exc.detail)
            return create_response(False, exc.message), HTTPStatus.BAD_REQUEST

        try:
            self.service.create_class(class_data)
        except BookingServiceError as exc:
            return create_response(False, str(exc)), HTTPStatus.BAD_REQUEST

        return create_response(True, CLASS_SUCCESS), HTTPStatus.OK