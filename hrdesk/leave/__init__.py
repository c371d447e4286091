"""Leave module — leave request status updates."""
