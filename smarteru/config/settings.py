from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    account_api_key: str = Field(default="", description="SmarterU account API key")
    user_api_key: str = Field(default="", description="SmarterU user API key")

    post_url: str = Field(default="https://api.smarteru.com/apiv2/", description="SmarterU API endpoint")
    timeout: Optional[float] = Field(default=None, description="HTTP timeout in seconds")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")

    class Config:
        env_prefix = "SMARTERU_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


_settings_instance = None


def get_settings() -> Settings:
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
