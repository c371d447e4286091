"""Leave Pydantic schemas — status update request / response."""

from typing import Optional, Union

from pydantic import BaseModel


class LeaveStatusUpdate(BaseModel):
    """Body for ``PUT /leaves/status``. ``id`` and ``status`` are required."""

    id: Optional[Union[str, int]] = None
    status: Optional[str] = None
    paymentStatus: Optional[str] = None
    approvedBy: Optional[str] = None


class LeaveStatusResponse(BaseModel):
    success: bool = True
