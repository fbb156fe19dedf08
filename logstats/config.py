"""Settings for the log analyzer."""

from typing import Any, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from logstats.core.constants import DEFAULT_ENCODING, DEFAULT_LOG_LEVEL
from logstats.core.errors import ConfigError

class AnalyzerSettings(BaseSettings):
    """Analyzer settings with environment variable support.
    
    These only tune how the batch runs and logs; the log grammar and the
    statistics are fixed.
    """
    
    encoding: str = Field(default=DEFAULT_ENCODING, description="Encoding for reading log files")
    max_workers: Optional[int] = Field(
        default=None,
        gt=0,
        description="Upper bound on concurrently analyzed files, unbounded when unset"
    )
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Diagnostic log level")
    json_logs: bool = Field(default=False, description="Render diagnostic logs as JSON")
    
    model_config = SettingsConfigDict(
        env_prefix="LOGSTATS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
    
    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {value!r}")
        return level

def load_settings(**overrides: Any) -> AnalyzerSettings:
    """Load settings from the environment, applying explicit overrides.
    
    Overrides whose value is None are ignored so unset CLI flags fall back
    to the environment.
    
    Args:
        **overrides: Setting values taking precedence over the environment
        
    Returns:
        Validated settings
        
    Raises:
        ConfigError: If validation fails
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return AnalyzerSettings(**values)
    except ValidationError as e:
        raise ConfigError(
            "Configuration validation failed",
            details={"errors": "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )}
        )
