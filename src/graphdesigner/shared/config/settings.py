"""
Centralized configuration management for Graph Schema Designer.

All settings are loaded from environment variables (prefixed with
``GRAPH_DESIGNER_``) or a local ``.env`` file, with sensible defaults.
"""

from functools import lru_cache
from typing import Optional, Dict, Any
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


VALID_LOG_LEVELS = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
VALID_COLLISION_POLICIES = {'warn', 'error', 'ignore'}


class Settings(BaseSettings):
    """
    Centralized settings for Graph Schema Designer.
    
    Uses Pydantic for validation and type safety.
    """
    
    # === Application Settings ===
    app_name: str = Field(default="Graph Schema Designer", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")
    
    # === Logging Settings ===
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Optional[Path] = Field(default=None, description="Optional log file path")
    
    # === Generation Settings ===
    collision_policy: str = Field(
        default="warn",
        description="How to treat colliding generated names (warn, error, ignore)"
    )
    check_identifiers: bool = Field(
        default=True,
        description="Report generated identifiers that are invalid in the schema grammar"
    )
    
    # === Output Settings ===
    default_output_file: Optional[Path] = Field(
        default=None,
        description="File the CLI writes to when --output is not given"
    )
    
    # === Logging Configuration ===
    @property
    def logging_config(self) -> Dict[str, Any]:
        """Get logging configuration."""
        return {
            'level': 'DEBUG' if self.debug else self.log_level,
            'file': str(self.log_file) if self.log_file else None,
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        }
    
    # === Generation Configuration ===
    @property
    def generation_config(self) -> Dict[str, Any]:
        """Get schema generation configuration."""
        return {
            'collision_policy': self.collision_policy,
            'check_identifiers': self.check_identifiers,
        }
    
    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LOG_LEVELS}")
        return v.upper()
    
    @field_validator('collision_policy')
    @classmethod
    def validate_collision_policy(cls, v):
        if v.lower() not in VALID_COLLISION_POLICIES:
            raise ValueError(f"Collision policy must be one of {VALID_COLLISION_POLICIES}")
        return v.lower()
    
    model_config = {
        "env_prefix": "GRAPH_DESIGNER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    
    Settings are loaded once per process; call ``get_settings.cache_clear()``
    to pick up environment changes.
    """
    return Settings()
