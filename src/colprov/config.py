"""Unified configuration via Pydantic Settings + YAML defaults."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import SecretStr
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)


_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="COLPROV_",
        env_file=".env",
        extra="ignore",
        yaml_file=_PROJECT_ROOT / "config" / "defaults.yaml",
        yaml_file_encoding="utf-8",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Data store credentials; no defaults, missing values fail at startup
    supabase_url: str
    service_role_key: SecretStr
    request_timeout: float = 30.0

    # Target table
    target_table: str = "재고"
    key_column: str = "id"

    # SQL-executing RPC used for ALTER TABLE
    sql_function: str = "exec_sql"
    sql_argument: str = "query"

    # Body limit
    max_body_size: int = 1_048_576

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # YAML defaults sit below env and .env
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
            YamlConfigSettingsSource(settings_cls),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]
