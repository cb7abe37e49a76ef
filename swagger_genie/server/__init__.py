"""HTTP API for editor integrations (FastAPI)."""
