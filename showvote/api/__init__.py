"""HTTP API for Show Vote (FastAPI)."""
