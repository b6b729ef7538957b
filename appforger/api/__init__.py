"""HTTP API - FastAPI application exposing projects and the forge feed."""
