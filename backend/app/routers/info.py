"""Deployment info page route."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.config import Settings, get_settings
from app.db.dependencies import get_db
from app.schemas.common import ApiResponse
from app.schemas.info import InfoPage
from app.services.info_page import build_info_page, list_pets


router = APIRouter()


@router.get("/info", response_model=ApiResponse[InfoPage])
def get_info_page(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ApiResponse[InfoPage]:
    """Describe this deployment and list the stored pets."""

    return ApiResponse(data=build_info_page(settings, list_pets(db)))
