"""Leave service — approve / reject a leave request."""

from __future__ import annotations

import logging

from hrdesk.common.exceptions import translate_store_errors
from hrdesk.common.validation import require_fields
from hrdesk.leave.schemas import LeaveStatusResponse, LeaveStatusUpdate
from hrdesk.leave.store import LeaveStore

logger = logging.getLogger(__name__)


class LeaveService:
    """Async leave operations."""

    @staticmethod
    async def update_leave_status(
        store: LeaveStore,
        spreadsheet_id: str,
        body: LeaveStatusUpdate,
    ) -> LeaveStatusResponse:
        """Set status (and optionally payment status / approver) on a leave request.

        Store failures surface their own message to the caller.
        """
        require_fields(body.model_dump(), "id", "status", falsy_is_missing=True)
        leave_id = str(body.id).strip()
        logger.info(
            "Updating leave %s: status=%s paymentStatus=%s approvedBy=%s",
            leave_id, body.status, body.paymentStatus, body.approvedBy,
        )

        with translate_store_errors("Failed to update leave status", passthrough=True):
            await store.update_status(
                spreadsheet_id,
                leave_id,
                body.status,
                payment_status=body.paymentStatus,
                approved_by=body.approvedBy,
            )
        return LeaveStatusResponse(success=True)
