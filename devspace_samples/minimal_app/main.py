import logging
import os
import socket
import sys
from datetime import datetime
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)

HOST = "0.0.0.0"
DEFAULT_PORT = "9090"
DEFAULT_ENVIRONMENT = "development"

ANY_METHOD = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def create_app(environment: Optional[str] = None) -> FastAPI:
    """Build the greeting app.

    ``environment`` falls back to the ``ENVIRONMENT`` variable, then to
    ``development``; an empty value counts as unset.
    """
    environment = environment or os.getenv("ENVIRONMENT") or DEFAULT_ENVIRONMENT
    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)

    @app.api_route("/health", methods=ANY_METHOD, response_class=PlainTextResponse)
    def health():
        return "OK"

    # registered last so /health is matched first
    @app.api_route("/{path:path}", methods=ANY_METHOD, response_class=PlainTextResponse)
    def root():
        logger.info("handling request at %s", datetime.now())
        return f"Hello from DevSpace! Environment: {environment}\n"

    return app


app = create_app()


def bind_socket(port: int) -> socket.socket:
    """Bind the listening socket up front so bind errors surface here."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.bind((HOST, port))
    except OSError:
        sock.close()
        raise
    return sock


def main():
    logging.basicConfig(level=logging.INFO)
    try:
        port = int(os.getenv("PORT") or DEFAULT_PORT)
        sock = bind_socket(port)
    except (OSError, ValueError, OverflowError) as e:
        print(f"Server error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Server listening on :{port}")
    server = uvicorn.Server(uvicorn.Config(create_app()))
    server.run(sockets=[sock])


if __name__ == "__main__":
    main()
