import logging
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)

PORT = 3000
API_URL = "http://api:8080/api"

ANY_METHOD = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def fetch_upstream(url: str, timeout: Optional[float] = None) -> bytes:
    """GET ``url`` and return the whole body.

    The response is held open only inside the ``with`` block, so the
    connection is released whether reading succeeds or raises.
    """
    with httpx.stream("GET", url, timeout=timeout) as response:
        return response.read()


def create_app(api_url: str = API_URL, timeout: Optional[float] = None) -> FastAPI:
    # timeout=None blocks until the upstream answers
    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)

    @app.api_route("/{path:path}", methods=ANY_METHOD)
    def relay():
        try:
            body = fetch_upstream(api_url, timeout)
        except httpx.HTTPError as e:
            logger.warning("Error calling API at %s: %s", api_url, e)
            return PlainTextResponse(f"Error calling API: {e}")
        return PlainTextResponse(b"Frontend calling API: " + body)

    return app


app = create_app()


def main():
    logging.basicConfig(level=logging.INFO)
    print(f"Frontend listening on :{PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    main()
