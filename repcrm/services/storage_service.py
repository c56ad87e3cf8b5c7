"""Serviço de storage — bucket property-photos (S3-compatível) ou disco local.

Storage Service — presigned URLs for the S3-compatible property-photos
bucket, or local file storage when no credentials are configured.

Chaves dos objetos: ``<user_id>/<epoch-ms>-<random>.<ext>``.
"""

import secrets
import time
from pathlib import Path
from uuid import UUID

from repcrm.config import settings

# Diretório local de uploads: LOCAL_UPLOADS_DIR do .env ou <raiz>/uploads
_SERVER_ROOT: Path = Path(__file__).resolve().parent.parent.parent
UPLOADS_DIR: Path = Path(settings.LOCAL_UPLOADS_DIR) if settings.LOCAL_UPLOADS_DIR else _SERVER_ROOT / "uploads"


class StorageService:
    """Upload de fotos e vídeos — escolhe S3 ou modo local automaticamente."""

    def __init__(self, uploads_dir: Path | None = None) -> None:
        self._client = None
        self.uploads_dir: Path = uploads_dir or UPLOADS_DIR

    @property
    def bucket(self) -> str:
        return settings.STORAGE_BUCKET

    @property
    def is_local(self) -> bool:
        return not settings.AWS_ACCESS_KEY_ID or not settings.AWS_SECRET_ACCESS_KEY

    @property
    def client(self):
        if self.is_local:
            return None
        if self._client is None:
            import boto3
            from botocore.config import Config as BotoConfig

            self._client = boto3.client(
                "s3",
                region_name=settings.AWS_S3_REGION,
                endpoint_url=settings.STORAGE_ENDPOINT_URL or None,
                aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
                aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
                config=BotoConfig(signature_version="s3v4"),
            )
        return self._client

    @property
    def public_base_url(self) -> str:
        """Prefixo público das URLs dos arquivos (sem barra final)."""
        if self.is_local:
            return f"{settings.PUBLIC_BASE_URL}/uploads/{self.bucket}"
        if settings.STORAGE_PUBLIC_URL:
            return f"{settings.STORAGE_PUBLIC_URL.rstrip('/')}/{self.bucket}"
        return f"https://{self.bucket}.s3.{settings.AWS_S3_REGION}.amazonaws.com"

    def generate_key(self, filename: str, user_id: UUID) -> str:
        ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else "bin"
        return f"{user_id}/{int(time.time() * 1000)}-{secrets.token_hex(4)}.{ext}"

    def public_url(self, key: str) -> str:
        return f"{self.public_base_url}/{key}"

    def generate_presigned_upload_url(
        self,
        filename: str,
        content_type: str,
        user_id: UUID,
        expires: int = 3600,
    ) -> dict[str, str]:
        """URL de PUT pré-assinada e URL pública do arquivo.

        Return the presigned PUT URL, the final public file URL and the key.
        In local mode the upload URL points at this API's own upload endpoint.
        """
        key = self.generate_key(filename, user_id)
        file_url = self.public_url(key)

        if self.is_local:
            upload_url = f"{settings.PUBLIC_BASE_URL}/api/v1/storage/upload/{key}"
            return {"upload_url": upload_url, "file_url": file_url, "key": key}

        upload_url = self.client.generate_presigned_url(
            "put_object",
            Params={
                "Bucket": self.bucket,
                "Key": key,
                "ContentType": content_type,
                "CacheControl": "max-age=3600",
            },
            ExpiresIn=expires,
        )
        return {"upload_url": upload_url, "file_url": file_url, "key": key}

    def save_local(self, key: str, data: bytes) -> Path:
        """Grava o arquivo no disco local e devolve o caminho."""
        path = self._local_path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    def _local_path(self, key: str) -> Path:
        root = self.uploads_dir.resolve()
        path = (root / key).resolve()
        if root not in path.parents:
            raise ValueError(f"Invalid storage key: {key}")
        return path

    def extract_key(self, file_url: str) -> str | None:
        """Extrai a chave do objeto de uma URL pública do bucket.

        Strips the configured public prefix; other URLs are split on
        ``/property-photos/``. Foreign URLs and keys with empty, "." or ".."
        segments give None.
        """
        prefix = f"{self.public_base_url}/"
        if file_url.startswith(prefix):
            key = file_url[len(prefix):]
        else:
            parts = file_url.split(f"/{self.bucket}/")
            if len(parts) != 2:
                return None
            key = parts[1]

        if not key or any(segment in ("", ".", "..") for segment in key.split("/")):
            return None
        return key

    def delete_object(self, file_url: str, user_id: UUID) -> bool:
        """Remove o objeto referenciado pela URL.

        Only keys under the caller's ``<user_id>/`` folder are deleted;
        anything else returns False and the object is left untouched.
        """
        key = self.extract_key(file_url)
        if key is None or not key.startswith(f"{user_id}/"):
            return False

        if self.is_local:
            self._local_path(key).unlink(missing_ok=True)
            return True

        self.client.delete_object(Bucket=self.bucket, Key=key)
        return True


storage_service: StorageService = StorageService()
