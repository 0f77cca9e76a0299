import json
import os
import sys
import tempfile

import pytest
from fastapi.testclient import TestClient

# Garantir ambiente de testes previsível: diretório público temporário antes de importar o app
os.environ["PORTFOLIO_APP_ENV"] = "test"
os.environ["PORTFOLIO_LOG_LEVEL"] = "WARNING"
os.environ.setdefault("PORTFOLIO_PUBLIC_DIR", tempfile.mkdtemp(prefix="portfolio-public-"))

# Ensure the project root (which contains the 'portfolio' package) is on sys.path
THIS_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(THIS_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from portfolio.main import app
from portfolio.api.deps import get_catalog_store, get_image_storage
from portfolio.services.catalog_store import CatalogStore
from portfolio.services.image_storage import ImageStorage


SAMPLE_DOCUMENT = {
    "projects": [
        {
            "id": "3",
            "title": "Brand Identity",
            "description": "Logo and guidelines",
            "category": "Design",
            "subcategory": "Branding",
            "thumbnailUrl": "/images/brand-1.png",
            "galleryImages": ["/images/brand-1.png", "/images/brand-2.png"],
        },
        {
            "id": "10",
            "title": "Music Video",
            "description": "Edit and color",
            "category": "Video",
            "subcategory": "Music",
            "thumbnailUrl": "https://img.youtube.com/vi/dQw4w9WgXcQ/maxresdefault.jpg",
            "isVideo": True,
            "videoUrl": "https://youtu.be/dQw4w9WgXcQ",
            "videoUrls": ["https://youtube.com/shorts/abcdefghijk"],
        },
        {
            "id": "2",
            "title": "Motion Poster",
            "description": "Poster with animated cut",
            "category": "Both",
            "subcategory": "Motion",
            "thumbnailUrl": "/images/poster.png",
            "galleryImages": [],
        },
    ],
    "skillCategories": [{"title": "Editing", "skills": ["Premiere", "DaVinci"]}],
    "tools": ["Figma", "After Effects"],
}


@pytest.fixture
def sample_document():
    return json.loads(json.dumps(SAMPLE_DOCUMENT))


@pytest.fixture
def catalog_file(tmp_path, sample_document):
    path = tmp_path / "projects.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path


@pytest.fixture
def store(catalog_file):
    return CatalogStore(catalog_file)


@pytest.fixture
def storage(tmp_path):
    return ImageStorage(tmp_path / "images")


@pytest.fixture(scope="function")
def client(store, storage):
    """TestClient com catálogo e uploads isolados em tmp_path."""
    app.dependency_overrides[get_catalog_store] = lambda: store
    app.dependency_overrides[get_image_storage] = lambda: storage
    yield TestClient(app)
    del app.dependency_overrides[get_catalog_store]
    del app.dependency_overrides[get_image_storage]
