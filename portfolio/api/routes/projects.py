from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends

from portfolio.api.deps import get_catalog_store, require_writable
from portfolio.api.schemas.projects import ProjectMutationOut
from portfolio.domain.filters import ProjectLike
from portfolio.services.catalog_store import CatalogStore

router = APIRouter()


def _mutation_out(project: ProjectLike) -> ProjectMutationOut:
    return ProjectMutationOut(project=project.model_dump(mode="json", by_alias=True))


@router.get("/projects", summary="Documento completo do catálogo")
def list_projects(store: CatalogStore = Depends(get_catalog_store)) -> dict[str, Any]:
    return store.list_document().to_json()


@router.post(
    "/projects",
    response_model=ProjectMutationOut,
    dependencies=[Depends(require_writable)],
    summary="Criar projeto",
    description="Sem `id` no corpo, recebe o maior id numérico existente + 1.",
)
def create_project(
    payload: dict[str, Any] = Body(...),
    store: CatalogStore = Depends(get_catalog_store),
):
    return _mutation_out(store.create_project(payload))


@router.put(
    "/projects/{project_id}",
    response_model=ProjectMutationOut,
    dependencies=[Depends(require_writable)],
    summary="Atualizar projeto (merge com o registro salvo)",
)
def update_project(
    project_id: str,
    payload: dict[str, Any] = Body(...),
    store: CatalogStore = Depends(get_catalog_store),
):
    return _mutation_out(store.update_project(project_id, payload))


@router.delete(
    "/projects/{project_id}",
    response_model=ProjectMutationOut,
    dependencies=[Depends(require_writable)],
    summary="Remover projeto",
)
def delete_project(project_id: str, store: CatalogStore = Depends(get_catalog_store)):
    return _mutation_out(store.delete_project(project_id))
