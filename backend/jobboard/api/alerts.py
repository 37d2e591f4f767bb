"""Saved-search alert trigger for external schedulers."""

import secrets
from typing import Optional

from fastapi import APIRouter, Depends, Header

from jobboard.core.config import settings
from jobboard.dependencies import get_alert_service
from jobboard.domain.exceptions import ForbiddenError, UnauthorizedError
from jobboard.schemas.search import AlertRunSummary
from jobboard.services.alert_service import AlertService

router = APIRouter(prefix="/alerts", tags=["alerts"])


def verify_alert_secret(x_alert_secret: Optional[str] = Header(None)) -> None:
    if not settings.alert_secret:
        raise ForbiddenError("Alert processing is not configured")
    if not x_alert_secret or not secrets.compare_digest(x_alert_secret, settings.alert_secret):
        raise UnauthorizedError("Invalid alert secret")


@router.post(
    "/process",
    response_model=AlertRunSummary,
    dependencies=[Depends(verify_alert_secret)],
)
def process_alerts(service: AlertService = Depends(get_alert_service)) -> AlertRunSummary:
    """Evaluate due saved-search alerts inline (same work as the hourly Celery task)."""
    return service.process()
