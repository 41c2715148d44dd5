"""Infraestructura: DB pool, repositorios y publicación de eventos."""
