"""Adaptadores: I/O concreto (httpx), credenciales y recursos de Stripe."""
