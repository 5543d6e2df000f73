"""Endpoint de ingestão de mensagens de telemetria.

Endpoints:
- POST /messages: recebe uma mensagem, valida, deduplica e publica evento

Respostas:
- 204: aceita (nova ou duplicada, mesmo status)
- 400: JSON inválido ou mensagem malformada
- 502: falha ao publicar no barramento
- 503: ledger de dedupe indisponível
- 500: erro inesperado
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from api.connectors.messages import InvalidJsonError, parse_message_body
from api.validators.rocket import MessageValidationError
from app.bootstrap import get_ingest_use_case
from app.observability import CORRELATION_HEADER, correlation_scope
from utils.errors import EventPublishError, InfrastructureError

if TYPE_CHECKING:
    from app.use_cases.rocket import IngestRocketMessageUseCase

logger = logging.getLogger(__name__)

router = APIRouter()


def _resolve_use_case(request: Request) -> IngestRocketMessageUseCase:
    """Use case montado no lifespan; fallback para o singleton do bootstrap."""
    use_case = getattr(request.app.state, "ingest_use_case", None)
    if use_case is None:
        use_case = get_ingest_use_case()
    return use_case


def _bad_request(reason: str) -> JSONResponse:
    return JSONResponse(
        content={"error": "bad_request", "reason": reason},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


def _error(error: str, status_code: int, correlation_id: str) -> JSONResponse:
    return JSONResponse(
        content={"error": error, "correlation_id": correlation_id},
        status_code=status_code,
    )


@router.post("/messages", response_model=None, status_code=status.HTTP_204_NO_CONTENT)
async def receive_message(request: Request) -> Response:
    """Recebe mensagem de telemetria de foguete."""
    with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
        raw_body = await request.body()
        try:
            data = parse_message_body(raw_body)
        except InvalidJsonError as exc:
            logger.warning(
                "messages_json_invalid",
                extra={"error": str(exc), "payload_size": len(raw_body)},
            )
            return _bad_request("Invalid JSON body")

        try:
            await _resolve_use_case(request).execute(data)
        except MessageValidationError as exc:
            return _bad_request(exc.reason)
        except EventPublishError as exc:
            logger.error(
                "messages_publish_failed",
                extra={"event_type": exc.event_type, "error_type": type(exc.__cause__).__name__},
            )
            return _error("publish_failed", status.HTTP_502_BAD_GATEWAY, correlation_id)
        except InfrastructureError as exc:
            logger.error("messages_infra_failed", extra={"error_type": type(exc).__name__})
            return _error("service_unavailable", status.HTTP_503_SERVICE_UNAVAILABLE, correlation_id)
        except Exception:
            logger.exception("messages_processing_failed")
            return _error("internal_error", status.HTTP_500_INTERNAL_SERVER_ERROR, correlation_id)

        return Response(status_code=status.HTTP_204_NO_CONTENT)
