"""Configuration providers."""

from dishka import Scope, provide

from murmur.config import AuthSettings, Settings
from murmur.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings, read once per container from the environment and ``.env``."""

    scope = Scope.APP

    @provide
    def settings(self) -> Settings:
        return Settings()

    @provide
    def auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth
