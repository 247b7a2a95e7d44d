from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from laundry.api.v1.schemas import (
    NotificationSchema,
    NotificationsResponseSchema,
    TimelineResponseSchema,
    TimelineStepSchema,
)
from laundry.application.exceptions import OrderGatewayError, OrderNotFoundError
from laundry.application.use_cases.notifications import NotificationCenter
from laundry.application.use_cases.order_tracking import OrderLifecycleTracker
from laundry.wiring.dependencies import get_notification_center, get_order_tracker

router = APIRouter()


@router.get("/orders/{order_id}/timeline", response_model=TimelineResponseSchema)
async def order_timeline(
    order_id: str,
    tracker: OrderLifecycleTracker = Depends(get_order_tracker),
):
    try:
        timeline = await tracker.timeline_for_order_id(order_id)
    except OrderNotFoundError:
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")
    except OrderGatewayError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return TimelineResponseSchema(
        order_id=timeline.order_id,
        status=timeline.status.value if timeline.status else None,
        steps=[TimelineStepSchema(label=s.label, completed=s.completed) for s in timeline.steps],
        progress_percent=timeline.progress_percent,
        is_terminal=timeline.is_terminal,
        unknown_status=timeline.unknown_status,
    )


@router.get("/notifications", response_model=NotificationsResponseSchema)
def list_notifications(center: NotificationCenter = Depends(get_notification_center)):
    return NotificationsResponseSchema(
        notifications=[
            NotificationSchema(
                notification_id=n.notification_id,
                title=n.title,
                body=n.body,
                created_at=n.created_at,
                is_read=n.is_read,
                order_id=n.order_id,
            )
            for n in center.notifications()
        ],
        unread_count=center.unread_count(),
    )


@router.post("/notifications/read")
def mark_all_read(center: NotificationCenter = Depends(get_notification_center)) -> dict[str, int]:
    return {"marked": center.mark_all_read()}
