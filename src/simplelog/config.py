from __future__ import annotations

from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, field_validator

"""
Config layer
- load_yaml(path) -> dict
- LoggerConfig (Pydantic v2) + validate_config(raw) -> LoggerConfig

Example YAML:
  name: Demo
  path: ./log          # or "NoFileHandler", or omit for <cwd>/log
  console: stderr      # or stdout
"""


# This function loads and parses YAML into a raw dictionary using yaml.safe_load.
def load_yaml(path: str) -> Dict[str, Any]:
    """
    Load and parse YAML into a raw dict using yaml.safe_load.

    Raises:
        FileNotFoundError: if the file does not exist
        yaml.YAMLError: if YAML is malformed/unsafe
        ValueError: if the top-level document is not a mapping
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        # Treat empty file as empty mapping
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Top-level YAML must be a mapping/dict (file: {path})")
    return data


# Pydantic config model for one logger handle
class LoggerConfig(BaseModel):
    name: str
    path: Optional[str] = None
    console: Literal["stderr", "stdout"] = "stderr"

    #This validator checks that the name is a non-empty string.
    @field_validator("name")
    @classmethod
    def _name_non_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must be a non-empty string")
        return v.strip()


#This function validates and normalizes a raw dictionary into a LoggerConfig object using Pydantic's model_validate.
def validate_config(raw: dict[str, Any]) -> LoggerConfig:
    """Validate and normalize raw dict into LoggerConfig."""
    return LoggerConfig.model_validate(raw)


__all__ = ["load_yaml", "LoggerConfig", "validate_config"]
