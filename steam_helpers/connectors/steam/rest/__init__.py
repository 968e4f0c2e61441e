"""Steam REST endpoints."""
