from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ROOMBOOK_")

    database_url: str = "sqlite+pysqlite:///:memory:"
    notifier: Literal["jsonl", "log"] = "jsonl"
    notification_outbox_path : Path = Path(__file__).resolve().parents[1] / "notification_outbox.jsonl"
    openapi_path : Path = Path(__file__).resolve().parents[1] / "openapi/openapi.yaml"
    log_level: str = "INFO"


settings = Settings()
