from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Iterable

import structlog
from pydantic import ValidationError as SchemaError

from portfolio.core.errors import InternalError, NotFoundError, ValidationError
from portfolio.domain.filters import ProjectLike
from portfolio.domain.models import CatalogDocument, parse_project, variant_keys

log = structlog.get_logger()

# Documento único em disco, reescrito por inteiro a cada mutação (último a gravar vence).
# Adequado apenas para um operador por vez: não há lock nem controle otimista.


def next_project_id(projects: Iterable[ProjectLike]) -> str:
    ids: list[int] = []
    for p in projects:
        try:
            ids.append(int(str(p.id).strip()))
        except ValueError:
            continue
    return str(max(ids, default=0) + 1)


def _validate_project(data: dict[str, Any]) -> ProjectLike:
    try:
        return parse_project(data)
    except SchemaError as e:
        first = e.errors()[0] if e.errors() else {}
        loc = ".".join(str(x) for x in first.get("loc", ()) if x not in ("image", "video"))
        raise ValidationError(f"invalid_project: {loc or 'body'} {first.get('msg', '')}".strip()) from e


class CatalogStore:
    def __init__(self, path: Path):
        self.path = Path(path)

    def read_document(self) -> CatalogDocument:
        if not self.path.exists():
            return CatalogDocument()
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return CatalogDocument.model_validate(raw)
        except (OSError, ValueError) as e:
            # ValueError cobre JSONDecodeError e erros de schema do pydantic
            log.error("catalog_read_error", path=str(self.path), error=str(e))
            raise InternalError("Failed to load projects") from e

    def write_document(self, doc: CatalogDocument) -> None:
        text = json.dumps(doc.to_json(), indent=2, ensure_ascii=False)
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # grava em arquivo temporário no mesmo diretório e troca atomicamente
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
            with os.fdopen(fd, "w", encoding="utf-8") as out:
                out.write(text)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name:
                Path(tmp_name).unlink(missing_ok=True)
            log.error("catalog_write_error", path=str(self.path), error=str(e))
            raise InternalError("Failed to save projects") from e
        log.info("catalog_written", path=str(self.path), projects=len(doc.projects))

    def list_document(self) -> CatalogDocument:
        return self.read_document()

    def _index_of(self, doc: CatalogDocument, project_id: str) -> int:
        for idx, p in enumerate(doc.projects):
            if p.id == str(project_id):
                return idx
        raise NotFoundError("Project not found")

    def create_project(self, body: dict[str, Any]) -> ProjectLike:
        doc = self.read_document()
        data = dict(body or {})
        if not str(data.get("id") or "").strip():
            data["id"] = next_project_id(doc.projects)
        project = _validate_project(data)
        doc.projects.append(project)
        self.write_document(doc)
        log.info("project_created", project_id=project.id)
        return project

    def update_project(self, project_id: str, body: dict[str, Any]) -> ProjectLike:
        doc = self.read_document()
        idx = self._index_of(doc, project_id)
        previous = doc.projects[idx]
        changes = dict(body or {})
        current = previous.model_dump(mode="json", by_alias=True)
        merged = {**current, **changes, "id": str(project_id)}
        project = _validate_project(merged)
        if type(project) is not type(previous):
            # troca de variante: descarta campos exclusivos da variante anterior
            stale = variant_keys(type(previous)) - set(changes)
            project = _validate_project({k: v for k, v in merged.items() if k not in stale})
        doc.projects[idx] = project
        self.write_document(doc)
        log.info("project_updated", project_id=project.id)
        return project

    def delete_project(self, project_id: str) -> ProjectLike:
        doc = self.read_document()
        idx = self._index_of(doc, project_id)
        removed = doc.projects.pop(idx)
        self.write_document(doc)
        log.info("project_deleted", project_id=removed.id)
        return removed
