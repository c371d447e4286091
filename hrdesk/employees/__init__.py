"""Employees module — read-only directory lookups used for fan-out notifications."""
