import json
from typing import Annotated, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode


def parse_origins(raw: str) -> list[str]:
    """Split a CORS origin setting given as a JSON list or comma-separated string."""
    raw = raw.strip()
    if raw.startswith("["):
        origins = json.loads(raw)
        if not isinstance(origins, list) or not all(isinstance(o, str) for o in origins):
            raise ValueError("CORS origins JSON must be a list of strings")
        return origins
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    max_upload_size_mb: int = 5
    cors_origins: Annotated[list[str], NoDecode] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"

    # slowapi limit string applied to extraction/upload routes
    rate_limit: str = "30/minute"

    # Per-skill match strength: "random" (85-99 draw) | "similarity" (rapidfuzz ratio)
    match_strength_mode: Literal["random", "similarity"] = "random"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_ignore_empty": True}

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_cors_origins(cls, value):
        if isinstance(value, str):
            return parse_origins(value)
        return value


settings = Settings()
