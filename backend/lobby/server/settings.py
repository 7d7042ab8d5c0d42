"""Lobby server configuration via environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from pydantic_settings.sources.base import PydanticBaseSettingsSource

from pooling.session.registry import DEFAULT_MAX_AGE_SECONDS, DEFAULT_SWEEP_INTERVAL_SECONDS
from shared.validators import StringListEnvSettingsSource, parse_origin_list


class LobbyServerSettings(BaseSettings):
    model_config = {"env_prefix": "LOBBY_"}

    host: str = "127.0.0.1"
    port: int = Field(default=8710, ge=1, le=65535)
    log_dir: str = "backend/logs/lobby"  # empty string disables file logging
    cors_origins: list[str] = []
    game_max_age_seconds: int = Field(default=DEFAULT_MAX_AGE_SECONDS, ge=60)
    sweep_interval_seconds: int = Field(default=DEFAULT_SWEEP_INTERVAL_SECONDS, ge=1)

    @field_validator("cors_origins", mode="before")
    @classmethod
    def validate_cors_origins(cls, v: str | list[str]) -> list[str]:
        return parse_origin_list(v)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, StringListEnvSettingsSource(settings_cls), dotenv_settings, file_secret_settings)
