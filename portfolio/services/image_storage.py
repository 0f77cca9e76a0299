from __future__ import annotations

import random
import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog

from portfolio.core.errors import InternalError, NotFoundError, ValidationError

log = structlog.get_logger()

# Armazena imagens localmente no diretório público, servido como estático.

CHUNK_SIZE = 1024 * 1024
DEFAULT_MAX_BYTES = 10 * 1024 * 1024


@dataclass
class StoredImage:
    filename: str
    url: str
    original_name: str
    size: int


def build_upload_filename(original_name: str | None) -> str:
    """{nome-sanitizado}-{epoch ms}-{aleatório}{ext}"""
    original = Path(original_name or "image").name
    suffix = Path(original).suffix
    stem = original[: -len(suffix)] if suffix else original
    name = re.sub(r"[^a-z0-9]", "-", stem.lower()) or "image"
    unique = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
    return f"{name}-{unique}{suffix}"


class ImageStorage:
    def __init__(self, directory: Path, url_prefix: str = "/images", max_bytes: int = DEFAULT_MAX_BYTES):
        self.directory = Path(directory)
        self.url_prefix = "/" + url_prefix.strip("/")
        self.max_bytes = int(max_bytes)

    def ensure_base_dirs(self) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)

    def public_url(self, filename: str) -> str:
        return f"{self.url_prefix}/{filename}"

    def _resolve(self, filename: str) -> Path:
        name = str(filename or "")
        target = (self.directory / name).resolve()
        if not name or target.parent != self.directory.resolve():
            raise ValidationError("Invalid filename")
        return target

    def save_upload(self, file: Any) -> StoredImage:
        """Salva um UploadFile-like (possui .filename, .content_type, .file).

        Levanta ValidationError para tipo não-imagem ou arquivo acima do limite e
        InternalError se a cópia falhar; em qualquer falha o arquivo parcial é removido.
        """
        ct = (getattr(file, "content_type", None) or "").lower()
        if not ct.startswith("image/"):
            raise ValidationError("Only image files are allowed")

        self.ensure_base_dirs()
        original_name = getattr(file, "filename", None) or "image"
        filename = build_upload_filename(original_name)
        file_path = self.directory / filename

        size = 0
        too_large = False
        try:
            with file_path.open("wb") as out:
                while True:
                    chunk = file.file.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > self.max_bytes:
                        too_large = True
                        break
                    out.write(chunk)
        except OSError as e:
            file_path.unlink(missing_ok=True)
            log.error("image_save_error", filename=filename, error=str(e))
            raise InternalError("Failed to upload file") from e
        except Exception:
            file_path.unlink(missing_ok=True)
            raise
        if too_large:
            file_path.unlink(missing_ok=True)
            limit_mb = self.max_bytes // (1024 * 1024)
            raise ValidationError(f"File too large. Maximum size is {limit_mb}MB.")

        log.info("image_saved", filename=filename, size=size, content_type=ct)
        return StoredImage(filename=filename, url=self.public_url(filename), original_name=original_name, size=size)

    def list_images(self) -> list[dict[str, str]]:
        if not self.directory.exists():
            return []
        return [
            {"name": p.name, "url": self.public_url(p.name)}
            for p in sorted(self.directory.iterdir())
            if p.is_file()
        ]

    def delete_image(self, filename: str) -> None:
        target = self._resolve(filename)
        if not target.is_file():
            raise NotFoundError("File not found")
        target.unlink()
        log.info("image_deleted", filename=target.name)
