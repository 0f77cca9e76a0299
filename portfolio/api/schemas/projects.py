from pydantic import BaseModel, ConfigDict, Field
from typing import Any


class ProjectMutationOut(BaseModel):
    success: bool = True
    project: dict[str, Any]


class UploadOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    url: str
    filename: str
    original_name: str = Field(serialization_alias="originalName")
    size: int


class FileOut(BaseModel):
    name: str
    url: str


class FileListOut(BaseModel):
    files: list[FileOut]


class MessageOut(BaseModel):
    success: bool = True
    message: str


class HealthOut(BaseModel):
    status: str
    message: str
    timestamp: str
