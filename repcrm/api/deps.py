"""Dependências FastAPI — usuário autenticado.

FastAPI dependency injection module — Authentication.

Authentication Flow:
    1. O cliente envia Authorization: Bearer <token> emitido pelo provedor de auth
       (Client sends the token minted by the hosted auth provider)
    2. HTTPBearer extrai o token (HTTPBearer extracts the token)
    3. decode_token() valida assinatura, expiração e audiência
       (decode_token verifies signature, expiry and audience)
    4. O "sub" do payload vira o dono dos registros (Payload "sub" scopes every query)
"""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from repcrm.utils.exceptions import UnauthorizedError
from repcrm.utils.jwt import decode_token

# Extrai o JWT do cabeçalho Authorization: Bearer <token>
security: HTTPBearer = HTTPBearer()


@dataclass(frozen=True)
class CurrentUser:
    """Usuário autenticado — identity carried by the verified token."""

    id: UUID
    email: str | None = None


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
) -> CurrentUser:
    """Valida o bearer token e devolve o usuário.

    Decode the JWT from the Authorization header and return the caller.
    There is no local users table; the token's "sub" is the owner id.

    Args:
        credentials: credenciais Bearer do cabeçalho (Bearer token credentials)

    Returns:
        CurrentUser: usuário autenticado (Authenticated caller)

    Raises:
        UnauthorizedError(401): token inválido, expirado ou sem "sub" válido
    """
    try:
        payload: dict = decode_token(credentials.credentials)
        user_id = UUID(payload["sub"])
    except (jwt.InvalidTokenError, KeyError, TypeError, ValueError):
        raise UnauthorizedError("Invalid or expired token")

    return CurrentUser(id=user_id, email=payload.get("email"))
