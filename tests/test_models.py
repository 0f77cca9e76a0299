import pytest
from pydantic import ValidationError

from portfolio.domain.models import CatalogDocument, ImageProject, VideoProject, parse_project


def test_is_video_selects_variant():
    video = parse_project(
        {
            "id": "1",
            "category": "Video",
            "isVideo": True,
            "videoUrl": "https://youtu.be/dQw4w9WgXcQ",
            "videoUrls": ["", "https://youtube.com/shorts/abcdefghijk"],
            "galleryImages": ["/images/ignored.png"],
        }
    )
    assert isinstance(video, VideoProject)
    assert video.all_videos() == ["https://youtu.be/dQw4w9WgXcQ", "https://youtube.com/shorts/abcdefghijk"]
    assert not hasattr(video, "gallery_images")
    assert video.model_extra == {"galleryImages": ["/images/ignored.png"]}

    image = parse_project({"id": "2", "category": "Design", "galleryImages": ["/images/a.png"]})
    assert isinstance(image, ImageProject)
    assert image.is_video is False


def test_numeric_id_is_coerced_to_string():
    assert parse_project({"id": 7, "category": "Both"}).id == "7"


def test_unknown_category_is_rejected():
    with pytest.raises(ValidationError):
        parse_project({"id": "1", "category": "Painting"})


def test_document_round_trips_with_camel_case(sample_document):
    doc = CatalogDocument.model_validate(sample_document)
    out = doc.to_json()
    assert set(out) == {"projects", "skillCategories", "tools"}
    video = next(p for p in out["projects"] if p["id"] == "10")
    assert video["isVideo"] is True
    assert video["videoUrl"] == "https://youtu.be/dQw4w9WgXcQ"
    image = next(p for p in out["projects"] if p["id"] == "3")
    assert image["isVideo"] is False
    assert image["galleryImages"] == ["/images/brand-1.png", "/images/brand-2.png"]


@pytest.mark.parametrize(
    ("flag", "expected"),
    [("false", ImageProject), ("0", ImageProject), ("off", ImageProject), (None, ImageProject),
     ("true", VideoProject), ("1", VideoProject), (1, VideoProject)],
)
def test_is_video_strings_follow_bool_coercion(flag, expected):
    project = parse_project({"id": "1", "category": "Design", "isVideo": flag})
    assert isinstance(project, expected)
    assert project.is_video is (expected is VideoProject)


def test_is_video_garbage_is_rejected():
    with pytest.raises(ValidationError):
        parse_project({"id": "1", "category": "Design", "isVideo": "maybe"})


def test_unknown_keys_survive_round_trip():
    raw = {
        "projects": [{"id": "1", "category": "Design", "featured": True, "client": {"name": "ACME"}}],
        "hero": {"headline": "Hi"},
    }
    out = CatalogDocument.model_validate(raw).to_json()
    assert out["hero"] == {"headline": "Hi"}
    assert out["projects"][0]["featured"] is True
    assert out["projects"][0]["client"] == {"name": "ACME"}
