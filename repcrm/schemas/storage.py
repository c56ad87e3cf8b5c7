"""Schemas de upload para o storage.

Storage upload request/response schema definitions.
"""

from pydantic import BaseModel

from repcrm.schemas.common import RequiredText


class PresignedUrlRequest(BaseModel):
    """Pedido de URL de upload — Presigned upload URL request."""

    filename: RequiredText  # nome original do arquivo, usado só pela extensão
    content_type: RequiredText  # ex.: image/jpeg, video/mp4


class PresignedUrlResponse(BaseModel):
    """URL de upload e URL pública final do arquivo.

    Attributes:
        upload_url: URL para o PUT do arquivo (Presigned PUT URL)
        file_url: URL pública a gravar em photos/videos (Public file URL)
        key: chave do objeto no bucket (Object key)
    """

    upload_url: str
    file_url: str
    key: str
