"""Core del binding: contrato de request, codec, decoder, paginación y configuración."""
