import logging

import uvicorn
from fastapi import FastAPI
from fastapi.responses import Response

PORT = 8080
MESSAGE = '{"message": "Hello from API!"}'

ANY_METHOD = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)

@app.api_route("/api", methods=ANY_METHOD)
def api():
    return Response(content=MESSAGE, media_type="application/json")


def main():
    logging.basicConfig(level=logging.INFO)
    print(f"API listening on :{PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    main()
