#!/usr/bin/env python3
"""
opentsdb-canary Configuration Management

Config path resolution:
1. Explicit path (``-c/--config``)
2. Environment variable OPENTSDB_CANARY_CONFIG (``.env`` honored)
3. ./config.yaml
"""

import logging
import os
from pathlib import Path
from typing import List, Literal, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from ..query_config import OpentsdbCanaryMetricSetQueryConfig

logger = logging.getLogger("opentsdb_canary.config")

CONFIG_ENV_VAR = "OPENTSDB_CANARY_CONFIG"
DEFAULT_CONFIG_PATH = "config.yaml"


class MetricConfig(BaseModel):
    name: str = Field(..., min_length=1)
    query: OpentsdbCanaryMetricSetQueryConfig


class AppConfig(BaseModel):
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    metrics: List[MetricConfig] = Field(default_factory=list)

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    def get_metric(self, name: str) -> Optional[MetricConfig]:
        for metric in self.metrics:
            if metric.name == name:
                return metric
        return None


def resolve_config_path(config_path: Optional[str] = None) -> Path:
    """Pick the config file per the resolution order above."""
    if config_path:
        return Path(config_path)

    load_dotenv()
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    return Path(DEFAULT_CONFIG_PATH)


def load_config_from(path) -> AppConfig:
    """Load configuration from YAML file."""
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    config = AppConfig(**data)
    logger.debug(f"Parsed {len(config.metrics)} metrics from {path}")
    return config
