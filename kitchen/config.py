from functools import lru_cache
from typing import Annotated

from fastapi import Request
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode


class Settings(BaseSettings):
    database_url: str = "sqlite:///./data/kitchen.db"
    allow_origins: Annotated[list[str], NoDecode] = ["*"]
    admin_username: str = "admin"
    admin_password: str = "admin123"
    admin_token: str = "kitchen-admin-token"
    require_admin_token: bool = False
    seed_menu: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"

    @field_validator("allow_origins", mode="before")
    @classmethod
    def split_origins(cls, value):
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        if value is None:
            return []
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
