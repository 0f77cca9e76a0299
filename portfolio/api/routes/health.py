from datetime import datetime, timezone

from fastapi import APIRouter

from portfolio.api.schemas.projects import HealthOut

router = APIRouter()


@router.get("/health", response_model=HealthOut)
def health():
    return HealthOut(
        status="OK",
        message="Portfolio Admin Server is running",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
