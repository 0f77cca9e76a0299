from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Sequence

from portfolio.domain.models import ImageProject, VideoProject

ALL = "All"
BOTH = "Both"

ProjectLike = ImageProject | VideoProject


def _matches_category(project: ProjectLike, selected_category: str) -> bool:
    return selected_category == ALL or project.category == selected_category or project.category == BOTH


def available_subcategories(projects: Iterable[ProjectLike], selected_category: str) -> list[str]:
    """Subcategorias oferecidas para a aba selecionada.

    Vazio quando a aba é "All". Caso contrário, "All" seguido das subcategorias
    distintas (ordem de primeira aparição) dos projetos da aba ou marcados "Both".
    """
    if selected_category == ALL:
        return []
    seen: dict[str, None] = {}
    for p in projects:
        if p.category == selected_category or p.category == BOTH:
            seen.setdefault(p.subcategory, None)
    return [ALL, *seen.keys()]


def filtered_projects(
    projects: Iterable[ProjectLike],
    selected_category: str,
    selected_subcategory: str,
) -> list[ProjectLike]:
    return [
        p
        for p in projects
        if _matches_category(p, selected_category)
        and (selected_subcategory == ALL or p.subcategory == selected_subcategory)
    ]


@dataclass(frozen=True)
class FilterSelection:
    category: str = ALL
    subcategory: str = ALL

    def with_category(self, category: str) -> "FilterSelection":
        # trocar a aba sempre volta a subcategoria para "All"
        return FilterSelection(category=category, subcategory=ALL)

    def with_subcategory(self, subcategory: str) -> "FilterSelection":
        return replace(self, subcategory=subcategory)

    def subcategories(self, projects: Sequence[ProjectLike]) -> list[str]:
        return available_subcategories(projects, self.category)

    def apply(self, projects: Sequence[ProjectLike]) -> list[ProjectLike]:
        return filtered_projects(projects, self.category, self.subcategory)
