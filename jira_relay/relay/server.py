"""FastAPI server relaying Jira webhooks to a Mattermost incoming webhook."""

import logging
from typing import Dict, Optional

from fastapi import FastAPI, Request, HTTPException
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from ..common import (
    setup_logging,
    log_server_message,
    log_webhook_request,
    log_error,
)
from ..config import MessageConfig
from ..transform import ParseError, render_payload
from .config import RelayConfig
from .dispatcher import WebhookDispatcher

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[RelayConfig] = None,
    dispatcher: Optional[WebhookDispatcher] = None,
) -> FastAPI:
    """Build the relay application.

    ``dispatcher`` defaults to a ``WebhookDispatcher`` using the configured
    timeout; anything with a compatible ``dispatch(url, payload)`` works.
    """
    config = config or RelayConfig.from_env()
    message_config = MessageConfig.load(config.message_config_path)
    dispatcher = dispatcher or WebhookDispatcher(timeout=config.dispatch_timeout)

    setup_logging(config.log_dir)

    app = FastAPI(title="Jira Relay", version="1.0.0")
    app.state.config = config
    app.state.message_config = message_config
    app.state.dispatcher = dispatcher

    @app.on_event("startup")
    async def startup_event():
        """Handle application startup."""
        log_server_message("Server starting up")
        log_server_message(f"Webhook endpoint: {config.webhook_endpoint}")
        log_server_message(f"Destination parameter: {config.hook_url_param}")
        log_server_message("Server ready")

    @app.on_event("shutdown")
    async def shutdown_event():
        """Handle application shutdown."""
        log_server_message("Server shutting down")

    @app.get("/health")
    async def health_check() -> Dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "service": "jira_relay"}

    @app.post(config.webhook_endpoint)
    async def jira_webhook(request: Request):
        """Translate a Jira webhook and forward it to the chat webhook URL."""
        body = await request.body()
        query_params = dict(request.query_params)

        if config.capture_requests:
            log_webhook_request(body, query_params, config.log_dir)

        hook_url = query_params.get(config.hook_url_param)
        if not hook_url:
            log_server_message(f"No {config.hook_url_param} given, nothing to forward")
            return {"status": "ignored", "message": f"Missing {config.hook_url_param} parameter"}

        try:
            payload = render_payload(body, message_config, strict=config.strict_parse)
        except ParseError as e:
            log_error(f"Rejected webhook payload: {e}", body.decode("utf-8", errors="ignore"), config.log_dir)
            raise HTTPException(status_code=400, detail="Invalid webhook payload")

        result = await run_in_threadpool(dispatcher.dispatch, hook_url, payload)
        if not result.ok:
            log_error(
                f"Delivery to chat webhook failed: {result.error}",
                payload.decode("utf-8", errors="ignore"),
                config.log_dir,
            )
            return JSONResponse(
                status_code=502,
                content={"status": "error", "message": f"Delivery failed: {result.error}"},
            )

        log_server_message("Webhook forwarded successfully")
        return {"status": "success", "message": "Webhook forwarded successfully"}

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: HTTPException):
        """Handle 404 errors."""
        log_server_message(f"404 Not Found: {request.url}")
        return JSONResponse(
            status_code=404,
            content={"error": "Not found", "path": str(request.url)}
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "jira_relay.relay.server:app",
        host=app.state.config.host,
        port=app.state.config.port,
        reload=False,
        log_level="info"
    )
