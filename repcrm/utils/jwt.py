"""Validação de JWT emitido pelo provedor de autenticação.

JWT verification utility module.
Tokens are minted by the hosted auth provider; this service only decodes
and verifies them with the shared secret.

JWT Payload Structure (campos usados — fields we rely on):
    {
        "sub": "user_uuid",          # ID do usuário (User identifier)
        "email": "corretor@x.com",   # e-mail (optional)
        "aud": "authenticated",      # audiência (Audience)
        "exp": 1234567890            # expiração UNIX (Expiration)
    }
"""

from typing import Any

import jwt

from repcrm.config import settings


def decode_token(token: str) -> dict[str, Any]:
    """Decodifica e valida um token JWT.

    Decode and verify a JWT token string against the configured secret,
    algorithm and audience.

    Args:
        token: token JWT codificado (Encoded JWT token string)

    Returns:
        dict[str, Any]: payload decodificado (Decoded payload dictionary)

    Raises:
        jwt.ExpiredSignatureError: token expirado (When token has expired)
        jwt.InvalidTokenError: token inválido (When token is invalid)
    """
    return jwt.decode(
        token,
        settings.JWT_SECRET_KEY,
        algorithms=[settings.JWT_ALGORITHM],
        audience=settings.JWT_AUDIENCE,
    )
