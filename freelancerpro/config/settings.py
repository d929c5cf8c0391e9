"""
Configuration management for FreelancerPro.
"""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FreelancerProConfig(BaseSettings):
    """Configuration settings for the FreelancerPro data layer."""

    # Storage Configuration
    data_dir: Path = Field(default=Path(".freelancerpro"), alias="FREELANCERPRO_DATA_DIR")
    data_key: str = Field(default="freelancer_app_data", alias="FREELANCERPRO_DATA_KEY")
    session_key: str = Field(default="current_user", alias="FREELANCERPRO_SESSION_KEY")

    # Application Configuration
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    log_format: str = Field(default="standard", alias="LOG_FORMAT")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")

    # Workflow Configuration
    kanban_strict_transitions: bool = Field(
        default=False, alias="KANBAN_STRICT_TRANSITIONS"
    )
    password_hash_method: str = Field(default="scrypt", alias="PASSWORD_HASH_METHOD")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("data_key", "session_key")
    @classmethod
    def validate_storage_key(cls, v):
        """Storage keys become file names, so keep them simple."""
        v = v.strip()
        if not v:
            raise ValueError("Storage key cannot be empty")
        if any(sep in v for sep in ("/", "\\", "..")):
            raise ValueError(f"Storage key must not contain path separators: {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        """Ensure log format is valid."""
        valid_formats = ["standard", "json"]
        if v.lower() not in valid_formats:
            raise ValueError(f"Log format must be one of: {valid_formats}")
        return v.lower()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Ensure environment is valid."""
        valid_envs = ["development", "testing", "production"]
        if v.lower() not in valid_envs:
            raise ValueError(f"Environment must be one of: {valid_envs}")
        return v.lower()

    @field_validator("password_hash_method")
    @classmethod
    def validate_password_hash_method(cls, v):
        """Only accept hash methods werkzeug knows about."""
        method = v.split(":", 1)[0].lower()
        if method not in ("scrypt", "pbkdf2"):
            raise ValueError("Password hash method must be scrypt or pbkdf2")
        return v.lower()

    def data_file_path(self) -> Path:
        """Path of the file holding the aggregate document."""
        return self.data_dir / f"{self.data_key}.json"


def load_config(env_file: Optional[str] = None) -> FreelancerProConfig:
    """Load configuration from environment variables and .env file."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return FreelancerProConfig()


# Global configuration instance
_config: Optional[FreelancerProConfig] = None


def get_config() -> FreelancerProConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(env_file: Optional[str] = None) -> FreelancerProConfig:
    """Reload configuration (useful for testing)."""
    global _config
    _config = load_config(env_file)
    return _config
