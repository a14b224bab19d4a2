"""Instagram webhook endpoints for comment relaying."""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from core.container import Container, get_container
from core.logging_config import trace_id_ctx
from core.schemas.webhook import WebhookEnvelope
from core.utils.signature import verify_webhook_challenge

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Webhooks"])


@router.get("")
@router.get("/")
async def webhook_verification(
    request: Request,
    container: Container = Depends(get_container),
):
    """Handle Instagram webhook verification challenge."""
    hub_mode = request.query_params.get("hub.mode")
    hub_verify_token = request.query_params.get("hub.verify_token")
    hub_challenge = request.query_params.get("hub.challenge")

    logger.info(f"Webhook verification attempt | mode={hub_mode}")

    challenge = verify_webhook_challenge(
        hub_mode=hub_mode,
        hub_verify_token=hub_verify_token,
        hub_challenge=hub_challenge,
        expected_token=container.settings().verify_token,
    )
    if challenge is None:
        logger.warning(f"Webhook verification failed | mode={hub_mode}")
        return PlainTextResponse("Forbidden", status_code=status.HTTP_403_FORBIDDEN)

    logger.info("Webhook verified successfully")
    return PlainTextResponse(challenge)


@router.post("")
@router.post("/")
async def process_webhook(
    request: Request,
    container: Container = Depends(get_container),
):
    """Relay Instagram comment notifications.

    The signature was already checked by the middleware in ``main``. From here
    on the answer is always 200 so Instagram does not redeliver.
    """
    if incoming_trace := request.headers.get("X-Trace-Id"):
        trace_id_ctx.set(incoming_trace)

    raw_body = getattr(request.state, "body", None)
    if raw_body is None:
        raw_body = await request.body()

    try:
        envelope = WebhookEnvelope.model_validate_json(raw_body or b"{}")
    except ValidationError as e:
        logger.warning(f"Ignoring malformed webhook payload | body_length={len(raw_body)} | errors={e.error_count()}")
        return PlainTextResponse("OK")

    logger.debug(f"Webhook received | object={envelope.object} | entries={len(envelope.entry)}")

    use_case = container.relay_comment_use_case()
    await use_case.execute(envelope)

    return PlainTextResponse("OK")
