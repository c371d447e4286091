"""Attendance Pydantic schemas.

Required fields are declared optional here; presence is checked by the
service so that a missing field produces the 400 contract rather than a
schema error.
"""

from typing import Optional, Union

from pydantic import BaseModel


class MonthlyAttendanceRequest(BaseModel):
    """Body for ``POST /attendance/month``."""

    year: Optional[Union[int, str]] = None
    month: Optional[Union[int, str]] = None


class AttendanceStatusRequest(BaseModel):
    """Body for ``POST /attendance/status``."""

    employeeName: Optional[str] = None
    date: Optional[str] = None

