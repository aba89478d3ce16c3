"""HTTP routing of the class and booking endpoints."""

from __future__ import annotations

from flask import Flask, jsonify, request

from classbooking.handlers import BookingHandler, ClassHandler


def _join(base, path):
    parts = [part.strip("/") for part in (base, path)]
    return "/" + "/".join(part for part in parts if part)


def _view(handle):
    def view():
        response, status = handle(request.get_data())
        return jsonify(response.to_dict()), int(status)

    return view


class Router:
    """Wires the handlers to a WSGI application under the configured base route."""

    def __init__(self, store, lock, config, services) -> None:
        self.store = store
        self.lock = lock
        self.config = config
        self.services = services
        self.app = Flask(__name__)
        self.app.json.sort_keys = False

    def set_routes(self):
        """Register every endpoint and return the WSGI application."""
        self._class_routes()
        self._booking_routes()
        return self.app

    def _class_routes(self):
        handler = ClassHandler(self.store, self.lock, self.services)
        self.app.add_url_rule(
            _join(self.config.base_route, "class"),
            "create_class",
            _view(handler.create_class),
            methods=["POST"],
        )

    def _booking_routes(self):
        handler = BookingHandler(self.store, self.lock, self.services)
        self.app.add_url_rule(
            _join(self.config.base_route, "booking"),
            "create_booking",
            _view(handler.create_booking),
            methods=["POST"],
        )