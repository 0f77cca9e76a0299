from __future__ import annotations

from typing import Iterable, Iterator, Optional

import httpx
import structlog
from pydantic import ValidationError as SchemaError

from portfolio.core.errors import LoadError
from portfolio.domain.filters import ProjectLike, available_subcategories, filtered_projects
from portfolio.domain.models import CatalogDocument, SkillCategory

log = structlog.get_logger()

DEFAULT_TIMEOUT = 10.0


def _numeric_id(project: ProjectLike) -> Optional[int]:
    try:
        return int(str(project.id).strip())
    except ValueError:
        return None


def sort_newest_first(projects: Iterable[ProjectLike]) -> list[ProjectLike]:
    """Ordena por id numérico decrescente; ids não numéricos vão para o fim, na ordem original."""
    numeric: list[tuple[int, ProjectLike]] = []
    other: list[ProjectLike] = []
    for p in projects:
        n = _numeric_id(p)
        if n is None:
            other.append(p)
        else:
            numeric.append((n, p))
    numeric.sort(key=lambda t: t[0], reverse=True)
    return [p for _, p in numeric] + other


class Catalog:
    """Catálogo carregado uma única vez e mantido só para leitura."""

    def __init__(self, document: CatalogDocument):
        self._projects: tuple[ProjectLike, ...] = tuple(sort_newest_first(document.projects))
        self._skill_categories: tuple[SkillCategory, ...] = tuple(document.skill_categories)
        self._tools: tuple[str, ...] = tuple(document.tools)

    @classmethod
    def from_json(cls, payload: object) -> "Catalog":
        try:
            return cls(CatalogDocument.model_validate(payload))
        except SchemaError as e:
            raise LoadError(f"invalid_catalog_document: {e.error_count()} error(s)") from e

    @property
    def projects(self) -> tuple[ProjectLike, ...]:
        return self._projects

    @property
    def skill_categories(self) -> tuple[SkillCategory, ...]:
        return self._skill_categories

    @property
    def tools(self) -> tuple[str, ...]:
        return self._tools

    def get(self, project_id: str) -> Optional[ProjectLike]:
        for p in self._projects:
            if p.id == str(project_id):
                return p
        return None

    def subcategories(self, category: str) -> list[str]:
        return available_subcategories(self._projects, category)

    def filter(self, category: str, subcategory: str) -> list[ProjectLike]:
        return filtered_projects(self._projects, category, subcategory)

    def __len__(self) -> int:
        return len(self._projects)

    def __iter__(self) -> Iterator[ProjectLike]:
        return iter(self._projects)


async def load_catalog(
    url: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Catalog:
    """Busca o documento JSON do catálogo uma vez. Qualquer falha vira LoadError."""
    owns_client = client is None
    http = client or httpx.AsyncClient(timeout=timeout)
    try:
        try:
            resp = await http.get(url)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            log.warning("catalog_fetch_error", url=url, error=str(e))
            raise LoadError("Failed to fetch project data") from e
        try:
            payload = resp.json()
        except ValueError as e:
            log.warning("catalog_parse_error", url=url, error=str(e))
            raise LoadError("Failed to parse project data") from e
    finally:
        if owns_client:
            await http.aclose()

    catalog = Catalog.from_json(payload)
    log.info("catalog_loaded", url=url, projects=len(catalog))
    return catalog
