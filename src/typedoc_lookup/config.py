"""Configuration and settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="TYPEDOC_LOOKUP_",
        env_file=".env",
        extra="ignore",
    )

    # API model
    docs_path: Path = Field(default_factory=lambda: Path.cwd() / "Hindenburg" / "docs" / "out.json")
    docs_base_url: str = "https://skeldjs.github.io/Hindenburg"

    # Local project repository
    project_repo_url: str = "https://github.com/SkeldJS/Hindenburg"
    project_package: str = "@skeldjs/hindenburg"

    # Vendored dependency (declaration files + companion source maps)
    dependency_repo_url: str = "https://github.com/SkeldJS/SkeldJS"
    vendored_prefix: str = "node_modules/@skeldjs/"
    vendored_root: Path = Field(
        default_factory=lambda: Path.cwd() / "Hindenburg" / "node_modules" / "@skeldjs"
    )
    default_revision: str = "master"

    # Lookup and rendering
    fuzzy_threshold: float = Field(default=0.8, ge=0.0, le=1.0)
    max_union_members: int = 10
    max_listed_members: int = 50

    # Sessions
    max_sessions: int = 256

    debug: bool = False
    profile: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide settings, loaded once from the environment."""
    return Settings()
