"""
Resolução de URLs do YouTube: id, embed, thumbnail e entrada em lote.
"""
import pytest

from portfolio.domain import video_urls as vu

VIDEO_ID = "dQw4w9WgXcQ"


@pytest.mark.parametrize(
    "url",
    [
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ?t=42",
        "https://www.youtube.com/embed/dQw4w9WgXcQ",
        "https://www.youtube.com/v/dQw4w9WgXcQ",
        "https://youtube.com/shorts/dQw4w9WgXcQ",
        "https://music.youtube.com/watch?v=dQw4w9WgXcQ&list=RDAMVM",
    ],
)
def test_resolve_video_id_known_shapes(url):
    assert vu.resolve_video_id(url) == VIDEO_ID


@pytest.mark.parametrize("url", ["https://example.com/video", "", None, "https://youtu.be/short", "not a url"])
def test_resolve_video_id_absent(url):
    assert vu.resolve_video_id(url) is None


def test_embed_url_with_autoplay_and_no_related():
    assert vu.embed_url("https://youtu.be/dQw4w9WgXcQ") == (
        "https://www.youtube.com/embed/dQw4w9WgXcQ?autoplay=1&rel=0"
    )


def test_embed_url_falls_back_to_input():
    assert vu.embed_url("https://vimeo.com/123") == "https://vimeo.com/123"
    assert vu.embed_url(None) == ""


def test_thumbnail_url():
    assert vu.thumbnail_url("https://youtu.be/dQw4w9WgXcQ") == (
        "https://img.youtube.com/vi/dQw4w9WgXcQ/maxresdefault.jpg"
    )
    assert vu.thumbnail_url("https://example.com/video") is None


def test_playlist_id():
    assert vu.playlist_id("https://www.youtube.com/playlist?list=PL_abc-123") == "PL_abc-123"
    assert vu.playlist_id("https://youtu.be/dQw4w9WgXcQ") is None


def test_fill_thumbnail_never_overrides_upload():
    assert vu.fill_thumbnail("/images/custom.png", "https://youtu.be/dQw4w9WgXcQ") == "/images/custom.png"


def test_fill_thumbnail_fills_missing_or_external():
    derived = "https://img.youtube.com/vi/dQw4w9WgXcQ/maxresdefault.jpg"
    assert vu.fill_thumbnail("", "https://youtu.be/dQw4w9WgXcQ") == derived
    assert vu.fill_thumbnail("https://cdn.example.com/a.jpg", "https://youtu.be/dQw4w9WgXcQ") == derived
    # sem id resolvível, mantém o valor atual
    assert vu.fill_thumbnail("https://cdn.example.com/a.jpg", "https://vimeo.com/1") == "https://cdn.example.com/a.jpg"


def test_thumbnail_kind_checks():
    assert vu.is_uploaded_thumbnail("/images/a.png")
    assert not vu.is_uploaded_thumbnail("https://img.youtube.com/vi/x/maxresdefault.jpg")
    assert vu.is_derived_thumbnail("https://img.youtube.com/vi/x/maxresdefault.jpg")
    assert not vu.is_derived_thumbnail("")


def test_parse_video_url_list_keeps_videos_and_playlists():
    text = """
    https://www.youtube.com/watch?v=dQw4w9WgXcQ

    https://example.com/not-youtube
    https://www.youtube.com/playlist?list=PL123
    https://youtube.com/shorts/abcdefghijk
    https://www.youtube.com/channel/foo
    """
    assert vu.parse_video_url_list(text) == [
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://www.youtube.com/playlist?list=PL123",
        "https://youtube.com/shorts/abcdefghijk",
    ]
    assert vu.parse_video_url_list("") == []
