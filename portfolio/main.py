from contextlib import asynccontextmanager
import uuid

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio.api.deps import get_image_storage
from portfolio.api.errors import (
    generic_exception_handler,
    http_exception_handler,
    portfolio_exception_handler,
    validation_exception_handler,
)
from portfolio.api.routes.files import router as files_router
from portfolio.api.routes.health import router as health_router
from portfolio.api.routes.projects import router as projects_router
from portfolio.core.config import settings
from portfolio.core.errors import PortfolioError
from portfolio.core.logging import configure_logging

configure_logging(settings.LOG_LEVEL)
log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    get_image_storage().ensure_base_dirs()
    log.info(
        "admin_server_started",
        env=settings.APP_ENV,
        catalog_file=str(settings.CATALOG_FILE),
        images_dir=str(settings.IMAGES_DIR),
        read_only=settings.READ_ONLY,
    )
    yield
    # Shutdown: nothing for now


tags_metadata = [
    {"name": "projects", "description": "CRUD do catálogo de projetos (arquivo JSON)."},
    {"name": "files", "description": "Upload e gestão de imagens locais."},
    {"name": "health", "description": "Healthcheck do servidor admin."},
]

app = FastAPI(
    title="Portfolio Admin API",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def _http_logger(request, call_next):
    # Correlation ID (propaga entre logs e resposta)
    cid = request.headers.get("x-correlation-id") or str(uuid.uuid4())
    request.state.correlation_id = cid
    try:
        log.info(
            "http_request_start",
            method=request.method,
            path=request.url.path,
            content_type=request.headers.get("content-type"),
            content_length=request.headers.get("content-length"),
            correlation_id=cid,
        )
        response = await call_next(request)
        response.headers["X-Correlation-Id"] = cid
        log.info(
            "http_request_end",
            method=request.method,
            path=request.url.path,
            status=getattr(response, "status_code", None),
            correlation_id=cid,
        )
        return response
    except Exception as e:
        response = await generic_exception_handler(request, e)
        response.headers["X-Correlation-Id"] = cid
        return response


app.include_router(projects_router, prefix="/api", tags=["projects"])
app.include_router(files_router, prefix="/api", tags=["files"])
app.include_router(health_router, prefix="/api", tags=["health"])

# Global error handlers (uniform error payloads)
app.add_exception_handler(PortfolioError, portfolio_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)


@app.get("/", include_in_schema=False)
async def root():
    return RedirectResponse(url="/api/health")


# Uploads e diretório público (projects.json) servidos como estáticos, montados por último
settings.IMAGES_DIR.mkdir(parents=True, exist_ok=True)
settings.PUBLIC_DIR.mkdir(parents=True, exist_ok=True)
app.mount(
    "/" + settings.UPLOAD_URL_PREFIX.strip("/"),
    StaticFiles(directory=str(settings.IMAGES_DIR), html=False),
    name="images",
)
app.mount("/", StaticFiles(directory=str(settings.PUBLIC_DIR), html=False), name="public")


def run(host: str | None = None, port: int | None = None, reload: bool = False) -> None:
    uvicorn.run(
        "portfolio.main:app",
        host=host or settings.HOST,
        port=port or settings.PORT,
        reload=reload,
    )


if __name__ == "__main__":
    run()
