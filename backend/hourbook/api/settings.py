import logging

from fastapi import APIRouter, Depends

from hourbook.api.deps import get_repository
from hourbook.core.errors import StorageError
from hourbook.repository import PayRepository
from hourbook.schemas.setting import HourlyRateRead, HourlyRateUpsert
from hourbook.schemas.weekly_log import SuccessResponse
from hourbook.services import hours as hours_service

log = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/hourly-rate", response_model=HourlyRateRead)
def read_hourly_rate(repo: PayRepository = Depends(get_repository)):
    try:
        rate = hours_service.get_hourly_rate(repo)
    except StorageError as e:
        raise StorageError("Could not load hourly rate") from e
    return HourlyRateRead(numeric_value=rate)


@router.put("/hourly-rate", response_model=SuccessResponse)
def update_hourly_rate(
    payload: HourlyRateUpsert,
    repo: PayRepository = Depends(get_repository),
):
    try:
        hours_service.set_hourly_rate(repo, payload.numeric_value)
    except StorageError as e:
        raise StorageError("Could not save hourly rate") from e
    return SuccessResponse()
