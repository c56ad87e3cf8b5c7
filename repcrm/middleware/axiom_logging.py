"""Middleware de log da API no Axiom.

Axiom API logging middleware.
Sends one structured event per request: method, path, params, masked body,
status code, duration and error detail for 4xx/5xx responses.
Credentials are replaced with "***"; phone numbers keep only the last
four digits so a record can still be told apart in the logs.
"""

import json
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from repcrm.config import settings

# Campos de credencial, mascarados por completo
_SENSITIVE_KEYS = re.compile(
    r"(password|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# Campos de contato pessoal (phone, owner_phone)
_PHONE_KEYS = re.compile(r"phone", re.IGNORECASE)

# Caminhos fora do log; uploads levam binário no corpo
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}
_SKIP_PREFIXES = ("/uploads/", "/api/v1/storage/upload/")

_MAX_DEPTH = 5
_MAX_ITEMS = 20
_MAX_DETAIL = 500


def _mask_phone(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    digits = re.sub(r"\D", "", value)
    return f"***{digits[-4:]}" if len(digits) > 4 else "***"


def _mask_dict(data: Any, depth: int = 0) -> Any:
    """Mascara credenciais e telefones em dicts/listas aninhados."""
    if depth > _MAX_DEPTH:
        return "..."
    if isinstance(data, dict):
        masked: dict[str, Any] = {}
        for key, value in data.items():
            if _SENSITIVE_KEYS.search(key):
                masked[key] = "***"
            elif _PHONE_KEYS.search(key):
                masked[key] = _mask_phone(value)
            else:
                masked[key] = _mask_dict(value, depth + 1)
        return masked
    if isinstance(data, list):
        return [_mask_dict(item, depth + 1) for item in data[:_MAX_ITEMS]]
    return data


def _truncate(value: Any, max_len: int = 2000) -> Any:
    if isinstance(value, str) and len(value) > max_len:
        return value[:max_len] + "...(truncated)"
    return value


def _error_detail(body: bytes) -> str:
    """Extrai o "detail" do corpo de erro do FastAPI."""
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace")[:_MAX_DETAIL]

    detail = data.get("detail", data) if isinstance(data, dict) else data
    text = detail if isinstance(detail, str) else json.dumps(_mask_dict(detail), ensure_ascii=False)
    return text[:_MAX_DETAIL] + "..." if len(text) > _MAX_DETAIL else text


def _should_skip(path: str) -> bool:
    return path in _SKIP_PATHS or path.startswith(_SKIP_PREFIXES)


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """Envia cada requisição/resposta da API ao Axiom.

    Middleware that logs API requests and responses to Axiom.
    Passes straight through when AXIOM_API_TOKEN/AXIOM_DATASET are unset.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def _read_body(self, request: Request) -> Any:
        if request.method not in ("POST", "PUT", "PATCH"):
            return None
        body_bytes = await request.body()
        if not body_bytes:
            return None
        try:
            return _truncate(_mask_dict(json.loads(body_bytes)))
        except (json.JSONDecodeError, UnicodeDecodeError):
            return "(non-json body)"

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if not self._client or _should_skip(request.url.path):
            return await call_next(request)

        start_time = time.time()
        request_body: Any = await self._read_body(request)

        event: dict[str, Any] = {
            "method": request.method,
            "path": request.url.path,
            "status_code": 500,
        }
        if request.query_params:
            event["query_params"] = _mask_dict(dict(request.query_params))
        if request_body is not None:
            event["request_body"] = request_body

        try:
            response = await call_next(request)
            event["status_code"] = response.status_code

            if response.status_code >= 400:
                # O corpo é consumido para ler o erro e depois devolvido
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                event["error"] = _error_detail(resp_body)
                response = Response(
                    content=resp_body,
                    status_code=response.status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event["duration_ms"] = round((time.time() - start_time) * 1000, 2)
            try:
                self._client.ingest_events(self._dataset, [event])
            except Exception:
                pass  # falha de log nunca derruba a requisição

        return response
