"""HR Desk — attendance, leave, notification and audit API."""
