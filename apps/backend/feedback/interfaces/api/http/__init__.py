"""Adaptador HTTP (FastAPI) de la API de feedback."""
