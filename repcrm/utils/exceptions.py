"""Exceções HTTP customizadas.

Custom HTTP exception classes module.
Pre-configured HTTPException subclasses so services can raise errors
without specifying status codes at each call site. The ``detail`` text is
shown to the user as-is, so it stays short and generic.

Usage:
    from repcrm.utils.exceptions import NotFoundError, DuplicateError
    raise NotFoundError("Imóvel não encontrado")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found — registro inexistente ou de outro usuário.

    Raised when a requested property, client or match does not exist
    or is not owned by the caller.

    Args:
        detail: mensagem de erro (Error message)
    """

    def __init__(self, detail: str = "Registro não encontrado") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict — violação de unicidade.

    Raised when creating a record that already exists
    (e.g. the same client/property match ingested twice).

    Args:
        detail: mensagem de erro (Error message)
    """

    def __init__(self, detail: str = "Registro já existe") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized — token ausente, inválido ou expirado.

    Args:
        detail: mensagem de erro (Error message)
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request — regra de negócio violada.

    Raised when the request is well-formed but breaks a business rule
    that Pydantic validation cannot catch (e.g. a cover photo that is
    not attached to the property).

    Args:
        detail: mensagem de erro (Error message)
    """

    def __init__(self, detail: str = "Requisição inválida") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
