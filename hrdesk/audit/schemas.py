"""Audit log Pydantic schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class AuditLogResponse(BaseModel):
    """Single audit-trail entry."""

    id: str
    action: str
    entityType: str = ""
    entityId: str = ""
    employeeId: str = ""
    employeeName: str = ""
    performedBy: str = ""
    performedById: str = ""
    details: str = ""
    oldValue: str = ""
    newValue: str = ""
    ipAddress: str = ""
    userAgent: str = ""
    timestamp: Optional[datetime] = None


class AuditLogListResponse(BaseModel):
    logs: list[AuditLogResponse]
    total: int
