"""HTTP API for tagwise (FastAPI)."""
