"""HTTP server lifecycle and the command-line entry point."""

from __future__ import annotations

import argparse
import logging
import signal
import threading

from werkzeug.serving import WSGIRequestHandler, make_server

from classbooking.config import CONFIG_LOAD_FAILED, FILE_PATH, load_config
from classbooking.routes import Router
from classbooking.service import initialize_service
from classbooking.store import new_map_store

logger = logging.getLogger(__name__)

_HEADER_TIMEOUT_SECONDS = 20


class _RequestHandler(WSGIRequestHandler):
    timeout = _HEADER_TIMEOUT_SECONDS


class Server:
    """Serves the routes on the configured port until asked to stop."""

    def __init__(self, config) -> None:
        self.config = config
        self.status = False
        self._http = None
        self._thread = None
        self._stop = threading.Event()

    @property
    def port(self):
        """The bound port while the server is listening, else None."""
        if self._http is None or not self.status:
            return None
        return self._http.socket.getsockname()[1]

    def run(self, store, lock, services):
        """Start serving and block until a shutdown request or signal."""
        self._start(store, lock, services)
        self._wait_for_stop()
        self._http.shutdown()
        self._thread.join()
        self._http.server_close()
        logger.info("Server shut down gracefully")

    def shutdown(self):
        """Ask a running server to stop gracefully."""
        self._stop.set()

    def _start(self, store, lock, services):
        app = Router(store, lock, self.config, services).set_routes()
        try:
            self._http = make_server(
                "0.0.0.0",
                int(self.config.port or 0),
                app,
                threaded=True,
                request_handler=_RequestHandler,
            )
        except (OSError, ValueError) as exc:
            logger.error("Error: failed to start server: %s", exc)
            raise
        self.status = True
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()
        logger.info("Server successfully started on port %s", self.port)

    def _serve(self):
        try:
            self._http.serve_forever()
        finally:
            self.status = False
            logger.info("Error: server was closed gracefully")

    def _wait_for_stop(self):
        previous = {}
        if threading.current_thread() is threading.main_thread():
            for signum in (signal.SIGINT, signal.SIGTERM):
                previous[signum] = signal.signal(signum, lambda *_: self._stop.set())
        try:
            while not self._stop.wait(0.5):
                pass
        finally:
            for signum, handler in previous.items():
                signal.signal(signum, handler)


def main(argv=None):
    """Load the configuration and serve until interrupted."""
    parser = argparse.ArgumentParser(description="Class booking HTTP service")
    parser.add_argument("--config", default=FILE_PATH, help="path of the JSON configuration")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    try:
        config = load_config(args.config)
    except (OSError, ValueError, TypeError) as exc:
        raise SystemExit(CONFIG_LOAD_FAILED % exc) from exc

    lock = threading.Lock()
    store = new_map_store(lock)
    services = initialize_service(store, lock, config)
    Server(config).run(store, lock, services)