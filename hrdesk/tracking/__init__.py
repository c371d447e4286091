"""Tracking module — location updates from mobile clients."""
