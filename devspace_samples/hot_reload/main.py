import logging
from datetime import datetime

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)

PORT = 9090

ANY_METHOD = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)

@app.api_route("/{path:path}", methods=ANY_METHOD, response_class=PlainTextResponse)
def hello():
    logger.info("Handler called @ %s", datetime.now())
    return "Hello hello!\n"


def main():
    logging.basicConfig(level=logging.INFO)
    print(f"Started server on :{PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    main()
