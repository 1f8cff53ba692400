"""Configuration loader for the document intelligence service."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "Document Intelligence"
    version: str = "1.0.0"


class RankingConfig(BaseModel):
    """Keyword extraction and relevance ranking configuration."""

    min_keyword_length: int = 3
    h1_boost: float = 1.5
    summary_boost: float = 1.3
    conclusion_boost: float = 1.2
    top_sections: int = 10


class SynthesisConfig(BaseModel):
    """Excerpt and insight generation configuration."""

    excerpt_sections: int = 5
    sentences_per_section: int = 3
    min_sentence_length: int = 10
    insight_sections: int = 5
    content_preview_chars: int = 100


class DefaultsConfig(BaseModel):
    """Values used when the caller leaves persona or job empty."""

    persona: str = "General User"
    job_to_be_done: str = "Document Analysis"
    language: str = "English"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    ranking: RankingConfig = Field(default_factory=RankingConfig)
    synthesis: SynthesisConfig = Field(default_factory=SynthesisConfig)
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Fully populated AppConfig instance.
    """
    load_dotenv()

    yaml_data: dict = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file, encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

    config = AppConfig(**yaml_data)

    # Override log level from environment
    log_level = os.getenv("DOCINTEL_LOG_LEVEL")
    if log_level:
        config.logging.level = log_level.upper()

    return config
