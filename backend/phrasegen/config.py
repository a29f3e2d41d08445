"""
Configuration loaded from environment variables
Values may also come from a .env file in the working or project directory
"""

from pydantic_settings import BaseSettings
from functools import lru_cache
from ipaddress import ip_network
from typing import List, Optional
from pathlib import Path

from mnemonic import Mnemonic

from phrasegen.limits import (
    DEFAULT_DRAW_SIZE,
    DEFAULT_LENGTHS,
    MAX_PASSPHRASE_LENGTH as DEFAULT_MAX_PASSPHRASE_LENGTH,
    MNEMONIC_STRENGTHS,
    WORDLIST_SIZE,
)


# Find .env file - could be in current dir, project root, or set via env
def _find_env_file() -> str:
    """Find .env file in current or project root directory"""
    if Path(".env").exists():
        return ".env"
    # Project root (when running from backend/)
    parent_env = Path(__file__).parent.parent.parent / ".env"
    if parent_env.exists():
        return str(parent_env)
    return ".env"


class Settings(BaseSettings):
    """Application settings from environment"""

    # Passphrase batch
    PASSPHRASE_LENGTHS_RAW: str = ",".join(str(length) for length in DEFAULT_LENGTHS)
    MAX_PASSPHRASE_LENGTH: int = DEFAULT_MAX_PASSPHRASE_LENGTH

    # Word source
    MNEMONIC_LANGUAGE: str = "english"
    MNEMONIC_STRENGTH: int = 128    # bits, 128 -> 12 words
    WORD_SOURCE: str = "sample"     # sample, mnemonic
    DRAW_SIZE: int = DEFAULT_DRAW_SIZE
    SHUFFLE_MODE: str = "uniform"   # uniform, comparator
    RANDOM_SEED: Optional[int] = None

    # Logging
    LOG_LEVEL: str = "INFO"

    # Application
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8000
    FRONTEND_URL: str = "http://localhost:3000"
    RATE_LIMIT_PER_MINUTE: int = 60
    RATE_LIMIT_BURST: int = 10
    TRUST_PROXY_HEADERS: bool = True
    TRUSTED_PROXY_CIDRS_RAW: str = "127.0.0.1/32,::1/128,10.0.0.0/8,172.16.0.0/12,192.168.0.0/16"

    @property
    def passphrase_lengths(self) -> List[int]:
        raw = self.PASSPHRASE_LENGTHS_RAW
        if not raw:
            return []
        return [int(item.strip()) for item in str(raw).split(",") if item.strip()]

    @property
    def trusted_proxy_cidrs(self) -> List[str]:
        raw = self.TRUSTED_PROXY_CIDRS_RAW
        if not raw:
            return []
        return [item.strip() for item in str(raw).split(",") if item.strip()]

    class Config:
        env_file = _find_env_file()
        case_sensitive = True


ALLOWED_WORD_SOURCES = ("sample", "mnemonic")
ALLOWED_SHUFFLE_MODES = ("uniform", "comparator")
ALLOWED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_settings(active_settings: Settings) -> None:
    """Validate generator settings, reporting every problem at once."""
    errors = []

    try:
        lengths = active_settings.passphrase_lengths
    except ValueError:
        errors.append("PASSPHRASE_LENGTHS_RAW must be a comma-separated list of integers")
        lengths = []
    else:
        if not lengths:
            errors.append("PASSPHRASE_LENGTHS_RAW must name at least one length")
        if any(length < 1 for length in lengths):
            errors.append("PASSPHRASE_LENGTHS_RAW lengths must be >= 1")
        if len(set(lengths)) != len(lengths):
            errors.append("PASSPHRASE_LENGTHS_RAW must not repeat a length")

    if active_settings.MAX_PASSPHRASE_LENGTH < 1:
        errors.append("MAX_PASSPHRASE_LENGTH must be >= 1")
    elif any(length > active_settings.MAX_PASSPHRASE_LENGTH for length in lengths):
        errors.append("PASSPHRASE_LENGTHS_RAW lengths must not exceed MAX_PASSPHRASE_LENGTH")

    if active_settings.MNEMONIC_LANGUAGE not in Mnemonic.list_languages():
        errors.append(f"MNEMONIC_LANGUAGE '{active_settings.MNEMONIC_LANGUAGE}' is not available")

    if active_settings.MNEMONIC_STRENGTH not in MNEMONIC_STRENGTHS:
        allowed = ", ".join(str(strength) for strength in MNEMONIC_STRENGTHS)
        errors.append(f"MNEMONIC_STRENGTH must be one of: {allowed}")

    if active_settings.WORD_SOURCE not in ALLOWED_WORD_SOURCES:
        allowed = ", ".join(ALLOWED_WORD_SOURCES)
        errors.append(f"WORD_SOURCE must be one of: {allowed}")

    if active_settings.SHUFFLE_MODE not in ALLOWED_SHUFFLE_MODES:
        allowed = ", ".join(ALLOWED_SHUFFLE_MODES)
        errors.append(f"SHUFFLE_MODE must be one of: {allowed}")

    if not 1 <= active_settings.DRAW_SIZE <= WORDLIST_SIZE:
        errors.append(f"DRAW_SIZE must be between 1 and {WORDLIST_SIZE}")

    if active_settings.LOG_LEVEL.upper() not in ALLOWED_LOG_LEVELS:
        allowed = ", ".join(ALLOWED_LOG_LEVELS)
        errors.append(f"LOG_LEVEL must be one of: {allowed}")

    if active_settings.RATE_LIMIT_PER_MINUTE < 1:
        errors.append("RATE_LIMIT_PER_MINUTE must be >= 1")

    if active_settings.RATE_LIMIT_BURST < 1:
        errors.append("RATE_LIMIT_BURST must be >= 1")

    for cidr in active_settings.trusted_proxy_cidrs:
        try:
            ip_network(cidr, strict=False)
        except ValueError:
            errors.append(f"TRUSTED_PROXY_CIDRS_RAW entry '{cidr}' is not a valid network")

    if errors:
        raise ValueError("Invalid phrasegen configuration:\n- " + "\n- ".join(errors))


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()


settings = get_settings()
