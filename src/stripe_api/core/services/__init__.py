"""Servicios del Core: ejecución genérica de requests, paginación y fachada cliente."""
