"""Interfaces/abstracciones del Core.

- Contratos (Protocol) que implementan los adaptadores concretos: request,
  transporte y proveedor de credenciales.
- El Core depende de estas abstracciones, no de httpx ni de la configuración.
"""
