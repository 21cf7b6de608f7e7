"""Proveedores de credenciales (secret key)."""

from __future__ import annotations

from dataclasses import dataclass

from stripe_api.core.config import AppSettings
from stripe_api.core.errors import ConfigError


@dataclass(frozen=True)
class StaticCredentials:
    """Key fija; útil en tests y scripts."""

    secret_key: str

    def __post_init__(self) -> None:
        if not self.secret_key:
            raise ConfigError("secret key must not be empty")

    def current_secret_key(self) -> str:
        return self.secret_key

    def __repr__(self) -> str:
        return "StaticCredentials(secret_key='***')"


class SettingsCredentials:
    """Lee `AppSettings.secret_key` (env `STRIPE_API_SECRET_KEY` o `.env`)."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    def current_secret_key(self) -> str:
        secret = self._settings.secret_key
        value = secret.get_secret_value() if secret is not None else ""
        if not value:
            raise ConfigError(
                "No Stripe secret key configured. Set STRIPE_API_SECRET_KEY or run `stripe-api doctor setup-key`."
            )
        return value
