"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:      str = "mdpage"
    parser_config: str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    output_dir:    str = Field(default="dist", description="Directory for rendered HTML files")
    toc_title:     str = Field(default="On This Page", description="Heading shown above the TOC")
    front_matter_summary: str = Field(default="YAML front matter", description="Label of the collapsed front matter block")
    markdown_extensions: list[str] = Field(
        default_factory=lambda: ["md", "markdown", "mdown"],
        description="File extensions treated as Markdown (without the dot)",
    )

    @field_validator("markdown_extensions", mode="before")
    @classmethod
    def _split_extensions(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, list):
            return [str(v).strip().lstrip(".").lower() for v in value if str(v).strip()]
        return value


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDPAGE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"MDPAGE_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
