from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from portfolio.api.deps import get_image_storage, require_writable
from portfolio.api.schemas.projects import FileListOut, FileOut, MessageOut, UploadOut
from portfolio.core.errors import ValidationError
from portfolio.services.image_storage import ImageStorage

router = APIRouter()


@router.post(
    "/upload",
    response_model=UploadOut,
    dependencies=[Depends(require_writable)],
    summary="Upload de imagem (multipart, campo `image`)",
    description="Aceita apenas tipos image/*, até 10MB. Retorna a URL pública do arquivo salvo.",
)
def upload_image(
    image: Optional[UploadFile] = File(None),
    storage: ImageStorage = Depends(get_image_storage),
):
    if image is None or not image.filename:
        raise ValidationError("No file uploaded")
    stored = storage.save_upload(image)
    return UploadOut(
        url=stored.url,
        filename=stored.filename,
        original_name=stored.original_name,
        size=stored.size,
    )


@router.get("/files/images", response_model=FileListOut, summary="Listar imagens enviadas")
def list_images(storage: ImageStorage = Depends(get_image_storage)):
    return FileListOut(files=[FileOut(**f) for f in storage.list_images()])


@router.delete(
    "/files/images/{filename}",
    response_model=MessageOut,
    dependencies=[Depends(require_writable)],
    summary="Remover imagem enviada",
)
def delete_image(filename: str, storage: ImageStorage = Depends(get_image_storage)):
    storage.delete_image(filename)
    return MessageOut(message="File deleted")
