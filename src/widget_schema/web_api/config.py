"""
Configuration settings for the API.
Environment variables (prefixed ``WIDGET_SCHEMA_``) override defaults.
"""
import os
from dataclasses import dataclass, field
from typing import List

ENV_PREFIX = "WIDGET_SCHEMA_"


@dataclass
class Settings:
    """API Configuration"""

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["*"])

    # Largest document accepted by /validate and /insert, in characters
    MAX_DOCUMENT_CHARS: int = 2_000_000

    def __post_init__(self):
        """Load from environment variables"""
        for key in self.__dataclass_fields__:
            env_value = os.getenv(ENV_PREFIX + key)
            if env_value is None:
                continue
            field_type = self.__dataclass_fields__[key].type
            if field_type == bool:
                setattr(self, key, env_value.lower() in ("true", "1", "yes"))
            elif field_type == int:
                setattr(self, key, int(env_value))
            elif field_type == List[str]:
                setattr(self, key, [v.strip() for v in env_value.split(",") if v.strip()])
            else:
                setattr(self, key, env_value)


# Global settings instance
settings = Settings()
