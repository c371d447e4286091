"""Audit module — read-only audit trail queries."""
