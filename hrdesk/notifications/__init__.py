"""Notifications module — per-user notification inbox."""
