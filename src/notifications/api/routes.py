"""FastAPI routes for the Notifications domain."""

from fastapi import APIRouter, Depends, HTTPException
from notifications.api.schemas import NotificationResponse, StatusResponse
from notifications.notification.notification import Notification
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from shared.auth import CurrentUser, authenticate

router = APIRouter(prefix="/api/notifications", tags=["notifications"])

admin_only = authenticate(roles=("admin",))


@router.get("", response_model=StatusResponse)
async def service_status() -> StatusResponse:
    return StatusResponse(message="Notification service is running")


@router.get("/{notification_id}", response_model=NotificationResponse)
async def get_notification(
    notification_id: str, current_user: CurrentUser = Depends(admin_only)
) -> NotificationResponse:
    """Delivery record of one notification."""
    try:
        notification = current_domain.repository_for(Notification).get(notification_id)
    except ObjectNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Notification not found") from exc

    return NotificationResponse(
        notification_id=str(notification.id),
        recipient_id=str(notification.recipient_id),
        recipient_email=notification.recipient_email,
        notification_type=notification.notification_type,
        channel=notification.channel,
        subject=notification.subject,
        status=notification.status,
        source_event_type=notification.source_event_type,
        failure_reason=notification.failure_reason,
        sent_at=notification.sent_at,
        created_at=notification.created_at,
    )
