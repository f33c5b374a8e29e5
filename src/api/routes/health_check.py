from datetime import UTC, datetime

from fastapi import APIRouter, Request, status
from pydantic import BaseModel

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    service: str


@router.get("/health", status_code=status.HTTP_200_OK, response_model=HealthResponse)
async def health_check(request: Request):
    return HealthResponse(
        status="OK",
        timestamp=datetime.now(UTC),
        service=request.app.state.config.SERVICE_NAME,
    )
