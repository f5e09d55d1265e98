"""Interface HTTP de Filmorate (FastAPI)."""
