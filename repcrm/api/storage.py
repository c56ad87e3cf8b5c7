"""Router de storage — URL pré-assinada + upload local.

Storage Router — Generates presigned URLs for the property-photos bucket.
Em modo local, o PUT chega neste servidor e o arquivo é gravado em disco.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from repcrm.api.deps import CurrentUser, get_current_user
from repcrm.schemas.common import MessageResponse
from repcrm.schemas.storage import PresignedUrlRequest, PresignedUrlResponse
from repcrm.services.storage_service import storage_service
from repcrm.utils.exceptions import BadRequestError

router: APIRouter = APIRouter()


@router.post("/presigned-url", response_model=PresignedUrlResponse)
async def create_presigned_url(
    data: PresignedUrlRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> PresignedUrlResponse:
    """Gera a URL de upload (S3 ou local) sob a pasta do usuário."""
    result: dict[str, str] = storage_service.generate_presigned_upload_url(
        filename=data.filename,
        content_type=data.content_type,
        user_id=current_user.id,
    )
    return PresignedUrlResponse(**result)


@router.put("/upload/{key:path}", response_model=MessageResponse)
async def upload_local(
    key: str,
    request: Request,
) -> MessageResponse:
    """Somente modo local — grava o corpo do PUT no disco.

    Sem autenticação: a chave foi emitida junto com a URL pré-assinada.
    """
    if not storage_service.is_local:
        raise BadRequestError("Upload local desativado")

    body: bytes = await request.body()
    try:
        storage_service.save_local(key, body)
    except ValueError:
        raise BadRequestError("Chave de arquivo inválida")
    return MessageResponse(message="ok")
