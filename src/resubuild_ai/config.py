"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_MODEL = "gemini-2.5-flash"
HIGH_CAPABILITY_MODEL = "gemini-3-pro-preview"


@dataclass(frozen=True)
class LLMConfig:
    default_model: str = DEFAULT_MODEL
    high_capability_model: str = HIGH_CAPABILITY_MODEL
    timeout: int | None = None  # seconds; None keeps the transport default

    def __post_init__(self) -> None:
        if not self.default_model.strip():
            raise ValueError("llm.default_model must not be empty")
        if not self.high_capability_model.strip():
            raise ValueError("llm.high_capability_model must not be empty")
        if self.timeout is not None and self.timeout < 1:
            raise ValueError(f"llm.timeout must be >= 1, got {self.timeout}")


@dataclass(frozen=True)
class JobSearchConfig:
    api_url: str = "https://remotive.com/api/remote-jobs"
    cache_minutes: int = 5
    max_results: int = 50

    def __post_init__(self) -> None:
        if not 0 <= self.cache_minutes <= 1440:
            raise ValueError(f"jobs.cache_minutes must be within 0-1440, got {self.cache_minutes}")
        if not 1 <= self.max_results <= 500:
            raise ValueError(f"jobs.max_results must be within 1-500, got {self.max_results}")


@dataclass(frozen=True)
class SettingsConfig:
    db_path: str = "~/.resubuild/settings.db"

    @property
    def resolved_db_path(self) -> Path:
        return Path(self.db_path).expanduser()


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    jobs: JobSearchConfig = field(default_factory=JobSearchConfig)
    settings: SettingsConfig = field(default_factory=SettingsConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        jobs=JobSearchConfig(**raw.get("jobs", {})),
        settings=SettingsConfig(**raw.get("settings", {})),
    )
