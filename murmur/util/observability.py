"""Logfire setup and instrumentation.

Application code talks to logfire directly:

    with logfire.span("comment_service.like", comment_id=str(comment_id)):
        ...
        logfire.info("Comment liked", comment_id=str(comment_id))
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from murmur.config import ObservabilitySettings, Settings

# Route parameters that carry credentials; never recorded on spans
CREDENTIAL_PARAMS = frozenset({"x_auth_token", "auth_token"})


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """Explicit setting wins; otherwise send only when a token is configured."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Set ``OBSERVABILITY__LOGFIRE_TOKEN`` to ship telemetry to Logfire cloud,
    or ``OBSERVABILITY__SEND_TO_LOGFIRE`` to force it either way. Without
    either, spans only go to the console.

    Args:
        settings: Application settings
    """
    send = should_send_to_logfire(settings.observability)

    logfire.configure(
        service_name="murmur-api",
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
        git_sha=settings.git_sha,
    )


def redact_credentials(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Request attributes mapper that blanks out token parameters."""
    values = {
        name: "[redacted]" if name in CREDENTIAL_PARAMS and value else value
        for name, value in (attributes.get("values") or {}).items()
    }
    return {**attributes, "values": values}


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health checks."""
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=redact_credentials,
        excluded_urls="/health",
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement issued through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
