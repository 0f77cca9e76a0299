from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Optional

from portfolio.core.errors import ValidationError
from portfolio.domain.models import ImageProject, VideoProject
from portfolio.domain.video_urls import (
    fill_thumbnail,
    is_derived_thumbnail,
    parse_video_url_list,
    resolve_video_id,
)


@dataclass(frozen=True)
class ProjectFormState:
    """Estado do formulário de projeto do admin. Cada alteração gera um novo valor."""

    title: str = ""
    description: str = ""
    category: str = "Design"
    subcategory: str = ""
    thumbnail_url: str = ""
    gallery_images: tuple[str, ...] = ()
    is_video: bool = False
    video_url: str = ""
    video_urls: tuple[str, ...] = ()

    @classmethod
    def from_project(cls, project: Optional[ImageProject | VideoProject]) -> "ProjectFormState":
        if project is None:
            return cls()
        base = dict(
            title=project.title,
            description=project.description,
            category=project.category,
            subcategory=project.subcategory,
            thumbnail_url=project.thumbnail_url,
        )
        if isinstance(project, VideoProject):
            return cls(**base, is_video=True, video_url=project.video_url, video_urls=tuple(project.video_urls))
        return cls(**base, gallery_images=tuple(project.gallery_images))


_FIELD_NAMES = {f.name for f in fields(ProjectFormState)}
_SEQUENCE_FIELDS = {"gallery_images", "video_urls"}


def change_field(state: ProjectFormState, field: str, value: Any) -> ProjectFormState:
    if field not in _FIELD_NAMES:
        raise ValidationError(f"unknown_form_field: {field}")
    if field in _SEQUENCE_FIELDS:
        value = tuple(value or ())
    updated = replace(state, **{field: value})

    if field == "video_url" and value and resolve_video_id(value):
        updated = replace(updated, thumbnail_url=fill_thumbnail(updated.thumbnail_url, value))

    if field == "is_video":
        if value and updated.video_url:
            updated = replace(updated, thumbnail_url=fill_thumbnail(updated.thumbnail_url, updated.video_url))
        elif not value:
            thumb = "" if is_derived_thumbnail(updated.thumbnail_url) else updated.thumbnail_url
            updated = replace(updated, video_url="", thumbnail_url=thumb)

    return updated


def add_gallery_images(state: ProjectFormState, urls: list[str] | str) -> ProjectFormState:
    new = [urls] if isinstance(urls, str) else list(urls)
    return replace(state, gallery_images=state.gallery_images + tuple(new))


def remove_gallery_image(state: ProjectFormState, index: int) -> ProjectFormState:
    return replace(state, gallery_images=tuple(u for i, u in enumerate(state.gallery_images) if i != index))


def add_video_urls(state: ProjectFormState, urls: list[str]) -> ProjectFormState:
    return replace(state, video_urls=state.video_urls + tuple(urls))


def remove_video_url(state: ProjectFormState, index: int) -> ProjectFormState:
    return replace(state, video_urls=tuple(u for i, u in enumerate(state.video_urls) if i != index))


def apply_bulk_videos(state: ProjectFormState, text: str) -> ProjectFormState:
    urls = parse_video_url_list(text)
    if not urls:
        return state
    updated = add_video_urls(state, urls)
    if not updated.video_url:
        updated = change_field(updated, "video_url", urls[0])
    return updated


def to_payload(state: ProjectFormState) -> dict[str, Any]:
    """Payload de envio (camelCase). Projetos de vídeo recebem thumbnail derivada se não houver upload."""
    thumb = state.thumbnail_url
    if state.is_video:
        primary = state.video_url or (state.video_urls[0] if state.video_urls else "")
        if primary:
            thumb = fill_thumbnail(thumb, primary)

    payload: dict[str, Any] = {
        "title": state.title,
        "description": state.description,
        "category": state.category,
        "subcategory": state.subcategory,
        "thumbnailUrl": thumb,
        "isVideo": state.is_video,
    }
    if state.is_video:
        payload["videoUrl"] = state.video_url
        payload["videoUrls"] = list(state.video_urls)
    else:
        payload["galleryImages"] = list(state.gallery_images)
    return payload
