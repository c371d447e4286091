"""Attendance module — monthly records and daily check-in status."""
