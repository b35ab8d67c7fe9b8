import os
import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse


DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8001
MESSAGE = "Hello World"


logger = structlog.get_logger()
app = FastAPI(title="first-microservice", docs_url=None, redoc_url=None, openapi_url=None)


# === Logging ===
@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    logger.info(
        "request_log",
        path=request.url.path,
        method=request.method,
        status=response.status_code
    )
    return response


@app.get("/hello", response_class=PlainTextResponse)
def hello():
    return MESSAGE


# === Startup ===
def run():
    host = os.environ.get("HOST", DEFAULT_HOST)
    port = int(os.environ.get("PORT", DEFAULT_PORT))
    logger.info("service_start", service="first-microservice", host=host, port=port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
