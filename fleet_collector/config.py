import os
from functools import lru_cache

from pydantic import BaseModel, Field


class Settings(BaseModel):
    # Collector (HTTP server)
    collector_host: str = Field(
        default="0.0.0.0",
        description="Interface the collector listens on",
    )
    collector_port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="TCP port the collector listens on",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level name for the root logger, e.g. DEBUG or INFO",
    )

    # Agent (reporting side)
    collector_url: str = Field(
        default="http://127.0.0.1:8080",
        description="Base URL of the collector the agent pushes reports to",
    )
    report_interval_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Seconds between two reports pushed by the agent",
    )

    @classmethod
    def from_env(cls) -> "Settings":
        # Nur gesetzte Variablen überschreiben die Defaults
        raw = {
            "collector_host": os.getenv("COLLECTOR_HOST"),
            "collector_port": os.getenv("COLLECTOR_PORT"),
            "log_level": os.getenv("LOG_LEVEL"),
            "collector_url": os.getenv("COLLECTOR_URL"),
            "report_interval_seconds": os.getenv("REPORT_INTERVAL_SECONDS"),
        }
        values = {key: value.strip() for key, value in raw.items() if value and value.strip()}
        if "log_level" in values:
            values["log_level"] = values["log_level"].upper()

        return cls(**values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
