"""Leave router — status updates from the approval screen."""

from fastapi import APIRouter, Depends

from hrdesk.dependencies import get_leave_store, require_spreadsheet_id
from hrdesk.leave.schemas import LeaveStatusResponse, LeaveStatusUpdate
from hrdesk.leave.service import LeaveService
from hrdesk.leave.store import LeaveStore

router = APIRouter(prefix="", tags=["leave"])


# ── PUT /status ─────────────────────────────────────────────────────

@router.put("/status", response_model=LeaveStatusResponse)
async def update_leave_status(
    body: LeaveStatusUpdate,
    spreadsheet_id: str = Depends(require_spreadsheet_id),
    store: LeaveStore = Depends(get_leave_store),
):
    """Approve or reject a leave request."""
    return await LeaveService.update_leave_status(store, spreadsheet_id, body)
