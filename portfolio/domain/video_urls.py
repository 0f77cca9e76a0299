from __future__ import annotations

import re
from typing import Optional

# Formatos aceitos: watch?v=, youtu.be/, embed/, v/, e/, shorts/ e caminhos aninhados.
# music.youtube.com e m.youtube.com casam por conterem "youtube.com/watch?v=".
_VIDEO_ID_RE = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=|shorts/)|youtu\.be/)([^\"&?/\s]{11})"
)
_PLAYLIST_ID_RE = re.compile(r"[?&]list=([a-zA-Z0-9_-]+)")

EMBED_URL_TEMPLATE = "https://www.youtube.com/embed/{video_id}?autoplay=1&rel=0"
THUMBNAIL_URL_TEMPLATE = "https://img.youtube.com/vi/{video_id}/maxresdefault.jpg"
THUMBNAIL_HOST = "img.youtube.com"
UPLOAD_PREFIX = "/images/"


def resolve_video_id(url: Optional[str]) -> Optional[str]:
    """Extrai o id de 11 caracteres de uma URL do YouTube; None quando não reconhecida."""
    if not url:
        return None
    m = _VIDEO_ID_RE.search(str(url))
    return m.group(1) if m else None


def embed_url(url: Optional[str]) -> str:
    video_id = resolve_video_id(url)
    if video_id:
        return EMBED_URL_TEMPLATE.format(video_id=video_id)
    return url or ""


def thumbnail_url(url: Optional[str]) -> Optional[str]:
    video_id = resolve_video_id(url)
    if video_id:
        return THUMBNAIL_URL_TEMPLATE.format(video_id=video_id)
    return None


def playlist_id(url: Optional[str]) -> Optional[str]:
    if not url:
        return None
    m = _PLAYLIST_ID_RE.search(str(url))
    return m.group(1) if m else None


def is_youtube_url(url: Optional[str]) -> bool:
    u = str(url or "")
    return "youtube.com" in u or "youtu.be" in u


def is_uploaded_thumbnail(url: Optional[str]) -> bool:
    return bool(url) and str(url).startswith(UPLOAD_PREFIX)


def is_derived_thumbnail(url: Optional[str]) -> bool:
    return bool(url) and THUMBNAIL_HOST in str(url)


def fill_thumbnail(current: Optional[str], video_url: Optional[str]) -> str:
    """Thumbnail enviada manualmente sempre prevalece; a derivada só preenche."""
    current = current or ""
    if is_uploaded_thumbnail(current):
        return current
    derived = thumbnail_url(video_url)
    return derived or current


def parse_video_url_list(text: Optional[str]) -> list[str]:
    """Entrada em lote (uma URL por linha). Mantém playlists e vídeos com id resolvível."""
    urls: list[str] = []
    for line in (text or "").splitlines():
        u = line.strip()
        if not u or not is_youtube_url(u):
            continue
        if "list=" in u or resolve_video_id(u):
            urls.append(u)
    return urls
