"""Connectors for remote APIs."""
