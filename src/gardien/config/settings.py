"""
Application settings with environment-based configuration.

Priority (highest to lowest):
1. Environment variables (from .env or system)
2. Environment-specific YAML config file (development.yaml, production.yaml)
3. Default YAML config file (default.yaml)
4. Pydantic defaults
"""

import json
import os
from pathlib import Path
from typing import Dict, List, Optional

import base58
import yaml
from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gardien.domain.exceptions import ConfigurationError
from gardien.domain.value_objects.auth_mode import AdminAuthMode, AuthModeKind
from gardien.domain.value_objects.secret import Secret


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Secrets (admin token, content keys) should come from environment
    variables, not from YAML files.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",
    )

    # Application
    APP_NAME: str = "Gardien"
    APP_VERSION: str = "0.1.0"
    ENV: str = Field(default="development", description="Environment name")
    DEBUG: bool = Field(default=False, description="Debug mode")

    # API Server
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=4000, ge=1024, le=65535)
    API_RELOAD: bool = Field(default=False)

    # CORS Configuration
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins",
    )

    # Solana / Blockchain (from environment - REQUIRED)
    SOLANA_RPC_URL: str = Field(..., description="Solana RPC URL")
    SOLANA_COMMITMENT: str = Field(default="confirmed")
    PROGRAM_ID: str = Field(..., description="Content program ID (base58)")
    LEDGER_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        gt=0,
        description="Ledger account lookup timeout in seconds",
    )

    # Secret store seed (from environment)
    KEYS_JSON: Optional[str] = Field(
        default=None,
        description='JSON object mapping IPID to key: {"<ipid>": "<key>"}',
    )
    IVS_JSON: Optional[str] = Field(
        default=None,
        description='JSON object mapping IPID to IV: {"<ipid>": "<iv>"}',
    )

    # Admin surface authentication
    ADMIN_AUTH_MODE: str = Field(
        default="bearer",
        description="Admin auth mode: 'bearer' or 'disabled'",
    )
    ADMIN_TOKEN: Optional[str] = Field(
        default=None,
        description="Bearer token for admin endpoints",
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    # Observability - Metrics
    METRICS_ENABLED: bool = Field(
        default=True,
        description="Expose Prometheus metrics at /metrics",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"Invalid LOG_LEVEL. Must be one of: {allowed}")
        return v_upper

    @field_validator("SOLANA_COMMITMENT")
    @classmethod
    def validate_commitment(cls, v: str) -> str:
        """Validate Solana commitment level."""
        allowed = ["processed", "confirmed", "finalized"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"Invalid SOLANA_COMMITMENT. Must be one of: {allowed}")
        return v_lower

    @field_validator("PROGRAM_ID")
    @classmethod
    def validate_program_id(cls, v: str) -> str:
        """Validate program ID is a 32-byte base58 key."""
        try:
            raw = base58.b58decode(v)
        except ValueError:
            raise ValueError(f"PROGRAM_ID is not valid base58: {v!r}")
        if len(raw) != 32:
            raise ValueError(f"PROGRAM_ID must decode to 32 bytes, got {len(raw)}")
        return v

    @field_validator("ADMIN_AUTH_MODE")
    @classmethod
    def validate_admin_auth_mode(cls, v: str) -> str:
        """Validate admin auth mode name."""
        allowed = [kind.value for kind in AuthModeKind]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"Invalid ADMIN_AUTH_MODE. Must be one of: {allowed}")
        return v_lower

    @model_validator(mode="after")
    def validate_startup_consistency(self) -> "Settings":
        """Fail fast on ambiguous admin auth or malformed secret seeds."""
        self.admin_auth_mode()
        self.initial_secrets()
        return self

    def admin_auth_mode(self) -> AdminAuthMode:
        """
        Resolve admin authentication mode.

        Raises:
            ConfigurationError: If mode and token disagree
        """
        try:
            return AdminAuthMode(
                kind=AuthModeKind(self.ADMIN_AUTH_MODE),
                token=self.ADMIN_TOKEN or None,
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid admin auth configuration: {e}")

    def initial_secrets(self) -> Dict[str, Secret]:
        """
        Parse KEYS_JSON / IVS_JSON into secrets.

        Returns:
            Mapping of IPID to Secret

        Raises:
            ConfigurationError: If JSON is malformed or key/IV sets differ
        """
        keys = self._parse_json_map("KEYS_JSON", self.KEYS_JSON)
        ivs = self._parse_json_map("IVS_JSON", self.IVS_JSON)

        missing_ivs = sorted(set(keys) - set(ivs))
        if missing_ivs:
            raise ConfigurationError(f"IVS_JSON has no IV for IPIDs: {missing_ivs}")

        orphan_ivs = sorted(set(ivs) - set(keys))
        if orphan_ivs:
            raise ConfigurationError(f"KEYS_JSON has no key for IPIDs: {orphan_ivs}")

        try:
            return {ipid: Secret(key=keys[ipid], iv=ivs[ipid]) for ipid in keys}
        except ValueError as e:
            raise ConfigurationError(f"Invalid secret in KEYS_JSON/IVS_JSON: {e}")

    @staticmethod
    def _parse_json_map(name: str, raw: Optional[str]) -> Dict[str, str]:
        """Parse a JSON object of string values."""
        if not raw:
            return {}

        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Failed to parse {name}: {e}")

        if not isinstance(parsed, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in parsed.items()
        ):
            raise ConfigurationError(f"{name} must be a JSON object of strings")

        return parsed


def load_config(
    config_file: Optional[str] = None,
    env_file: Optional[str] = None,
    env: Optional[str] = None,
) -> Settings:
    """
    Load configuration from YAML files and environment variables.

    Priority: ENV vars > environment-specific YAML > default YAML > defaults

    Args:
        config_file: Optional YAML config filename override
        env_file: Optional .env filename (e.g., ".env.development")
        env: Optional environment name override (e.g., "development", "test")

    Returns:
        Settings instance

    Raises:
        ValidationError: If required fields are missing
    """
    current_file = Path(__file__).resolve()
    project_root = current_file.parent.parent.parent.parent
    config_dir = project_root / "config"

    environment = env or os.getenv("ENV", "production")

    env_map = {
        "production": (".env.production", "production.yaml"),
        "development": (".env.development", "development.yaml"),
        "test": (".env.test", "test.yaml"),
    }

    if env_file is None:
        default_env_file, default_config_file = env_map.get(
            environment, (".env.production", "production.yaml")
        )
        env_file = default_env_file
        if config_file is None:
            config_file = default_config_file

    env_file_path = project_root / env_file
    if env_file_path.exists():
        load_dotenv(env_file_path, override=True)

    default_config_path = config_dir / "default.yaml"
    merged_config = {}

    if default_config_path.exists():
        with open(default_config_path, "r") as f:
            loaded = yaml.safe_load(f)
            if loaded:
                merged_config = loaded

    if config_file:
        env_config_path = config_dir / config_file
        if env_config_path.exists():
            with open(env_config_path, "r") as f:
                loaded = yaml.safe_load(f)
                if loaded:
                    merged_config.update(loaded)

    # Environment variables take precedence over YAML values
    merged_config = {k: v for k, v in merged_config.items() if k not in os.environ}

    return Settings(**merged_config)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or initialize global settings singleton."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def override_settings(new_settings: Settings) -> None:
    """Override global settings (for testing)."""
    global _settings
    _settings = new_settings


def reset_settings() -> None:
    """Reset settings to force re-initialization (for testing)."""
    global _settings
    _settings = None
