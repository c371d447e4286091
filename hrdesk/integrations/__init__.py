"""Clients for the managed services that hold HR Desk data."""
