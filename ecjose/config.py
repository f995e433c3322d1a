from __future__ import annotations

import os
from typing import List, Literal, Optional

import yaml
from pydantic import BaseModel, Field

BackendName = Literal["native", "platform", "software"]


class EcJoseConfig(BaseModel):
    """Top-level configuration model."""

    backends: List[BackendName] = Field(
        default_factory=lambda: ["native", "platform", "software"],
        description="Backends to consider, in order of preference",
    )


def load_config(path: Optional[str] = None) -> EcJoseConfig:
    """Load configuration from YAML file.

    Args:
        path: Optional path to config file. Falls back to ECJOSE_CONFIG env
            variable or 'ecjose.yaml' in the current directory.
    """

    config_path = path or os.getenv("ECJOSE_CONFIG", "ecjose.yaml")
    if os.path.exists(config_path):
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        config = EcJoseConfig(**data)
    else:
        config = EcJoseConfig()

    env_backends = os.getenv("ECJOSE_BACKENDS")
    if env_backends:
        names = [name.strip().lower() for name in env_backends.split(",")]
        config = EcJoseConfig(backends=[name for name in names if name])
    return config
