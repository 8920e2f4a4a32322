"""
Process entry point — configures logging and serves the application with
uvicorn until terminated.

Usage:
    affinity-server
    python -m affinity.server

Listens on 0.0.0.0:8080 unless HOST / PORT say otherwise.  Ctrl+C and
SIGTERM shut the server down gracefully and exit with status 0.
"""
import logging
import signal
import sys

import uvicorn

from affinity.config import get_settings
from affinity.main import create_app

logger = logging.getLogger(__name__)


def run_server(host: str, port: int, log_level: str = "info") -> None:
    """Serve a fresh application on ``host:port``.

    Exits with status 1 if the listener never came up, e.g. the port is
    already in use.
    """
    config = uvicorn.Config(create_app(), host=host, port=port, log_level=log_level.lower())
    server = uvicorn.Server(config)

    logger.info("Starting session counter on http://%s:%d/incr", host, port)

    try:
        server.run()
    except KeyboardInterrupt:
        # uvicorn re-raises the shutdown signal once it has drained
        logger.info("Session counter on %s:%d stopped", host, port)
        return
    except SystemExit:
        # uvicorn logs the bind OSError itself, then calls sys.exit(1)
        logger.critical("Could not start listener on %s:%d", host, port)
        raise

    if not server.started:
        logger.critical("Server on %s:%d stopped before it started serving", host, port)
        sys.exit(1)


def main() -> None:
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # SIGTERM ends the process the same way Ctrl+C does
    signal.signal(signal.SIGTERM, signal.default_int_handler)

    run_server(settings.host, settings.port, settings.log_level)


if __name__ == "__main__":
    main()
