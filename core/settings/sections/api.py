from typing import List

from pydantic_settings import BaseSettings


class ApiSettings(BaseSettings):
    """
    HTTP layer settings.
    Loaded automatically from .env with prefix API_*
    """

    title: str = "Storefront Orders API"
    version: str = "1.0.0"
    prefix: str = "/api/v1"
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "API_",
        "extra": "ignore",
    }
