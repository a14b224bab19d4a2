import logging

import uvicorn

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from core.config import settings
from core.container import get_container, shutdown_container
from core.logging_config import configure_logging
from core.utils.signature import SIGNATURE_HEADER, verify_signature
from api import router

configure_logging()

logger = logging.getLogger(__name__)

WEBHOOK_PATH = "/webhook"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info(f"Webhook server running on port {settings.server.port}")
    logger.info("Endpoints: GET /webhook (verification) | POST /webhook (notifications) | GET /health")
    yield
    logger.info("Shutting down gracefully")
    await shutdown_container()


app = FastAPI(title="Instagram Comment Relay", lifespan=lifespan)
app.include_router(router=router)


# Signature check runs on the raw body, before anything parses it
@app.middleware("http")
async def verify_webhook_signature(request: Request, call_next):
    if request.method == "POST" and request.url.path.rstrip("/") == WEBHOOK_PATH:
        signature = request.headers.get(SIGNATURE_HEADER)
        body = await request.body()
        secret = get_container().settings().app_secret

        if not verify_signature(body, signature, secret):
            logger.warning(
                f"Invalid signature | body_length={len(body)} | "
                f"signature_prefix={(signature[:10] + '...') if signature else '[MISSING]'}"
            )
            return PlainTextResponse("Forbidden", status_code=403)

        logger.debug(f"Webhook signature verification successful | body_length={len(body)}")

        # Keep the exact bytes for the view
        request.state.body = body

    return await call_next(request)


if __name__ == "__main__":
    logger.info(
        f"Starting Instagram comment relay | host={settings.server.host} | port={settings.server.port}"
    )
    uvicorn.run(app, host=settings.server.host, port=settings.server.port, log_config=None)
