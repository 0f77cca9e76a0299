from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, TypeAdapter, field_validator
from pydantic import ValidationError as SchemaError

Category = Literal["Design", "Video", "Both"]


class _CamelModel(BaseModel):
    # chaves não declaradas são preservadas e regravadas como vieram
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class ProjectBase(_CamelModel):
    id: str = Field(..., min_length=1)
    title: str = ""
    description: str = ""
    category: Category
    subcategory: str = ""
    thumbnail_url: str = Field(default="", alias="thumbnailUrl")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v: Any) -> Any:
        # ids numéricos em JSON antigo viram string
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("thumbnail_url", mode="before")
    @classmethod
    def _none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class ImageProject(ProjectBase):
    is_video: bool = Field(default=False, alias="isVideo")
    gallery_images: list[str] = Field(default_factory=list, alias="galleryImages")

    @field_validator("is_video", mode="before")
    @classmethod
    def _none_as_false(cls, v: Any) -> Any:
        return False if v is None else v

    @field_validator("is_video")
    @classmethod
    def _must_be_image(cls, v: bool) -> bool:
        if v:
            raise ValueError("image project requires isVideo=false")
        return v


class VideoProject(ProjectBase):
    is_video: bool = Field(default=True, alias="isVideo")
    video_url: str = Field(default="", alias="videoUrl")
    video_urls: list[str] = Field(default_factory=list, alias="videoUrls")

    @field_validator("is_video")
    @classmethod
    def _must_be_video(cls, v: bool) -> bool:
        if not v:
            raise ValueError("video project requires isVideo=true")
        return v

    def all_videos(self) -> list[str]:
        """Vídeo principal seguido dos secundários, sem entradas vazias."""
        return [u for u in [self.video_url, *self.video_urls] if u]


_bool_adapter: TypeAdapter[bool] = TypeAdapter(bool)


def _is_video_flag(raw: Any) -> bool:
    # mesma coerção do campo: "false"/"0"/"off" são falsos; inválido cai em imagem e falha no campo
    if raw is None:
        return False
    try:
        return _bool_adapter.validate_python(raw)
    except SchemaError:
        return False


def _project_kind(value: Any) -> str:
    if isinstance(value, dict):
        return "video" if _is_video_flag(value.get("isVideo", value.get("is_video"))) else "image"
    return "video" if getattr(value, "is_video", False) else "image"


Project = Annotated[
    Union[Annotated[ImageProject, Tag("image")], Annotated[VideoProject, Tag("video")]],
    Discriminator(_project_kind),
]

_project_adapter: TypeAdapter[Project] = TypeAdapter(Project)


def parse_project(data: Any) -> ImageProject | VideoProject:
    return _project_adapter.validate_python(data)


def variant_keys(cls: type[ProjectBase]) -> set[str]:
    """Chaves JSON exclusivas de uma variante (ex.: galleryImages para ImageProject)."""
    return {
        f.alias or name
        for name, f in cls.model_fields.items()
        if name not in ProjectBase.model_fields and name != "is_video"
    }


class SkillCategory(_CamelModel):
    title: str
    skills: list[str] = Field(default_factory=list)


class CatalogDocument(_CamelModel):
    projects: list[Project] = Field(default_factory=list)
    skill_categories: list[SkillCategory] = Field(default_factory=list, alias="skillCategories")
    tools: list[str] = Field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
