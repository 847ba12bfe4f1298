from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="UNITGRAPH_", extra="ignore")

    app_name: str = "unitgraph"
    debug: bool = False
    environment: Literal["development", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    host: str = "127.0.0.1"
    port: int = 8000  # 0 picks a free port
    validate_registry: bool = True  # run registry checks when building the default registry


settings = Settings()
