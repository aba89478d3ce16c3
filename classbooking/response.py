"""JSON response envelope returned by the HTTP handlers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Response:
    """Outcome of a request; ``data`` is omitted from JSON when empty."""

    success: bool
    message: str
    data: str = ""

    def to_dict(self):
        body = {"success": self.success, "message": self.message}
        if self.data:
            body["data"] = self.data
        return body


def create_response(success, message, *args):
    """Build a response; only the first extra argument becomes ``data``."""
    return Response(success=success, message=message, data=args[0] if args else "")