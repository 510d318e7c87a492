from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Any, Dict
from dotenv import load_dotenv

from .config_loader import load_config
from .endpoints.compute import construct_compute_endpoint

logger = logging.getLogger(__name__)

ENDPOINT_ENV = "GCE_COMPUTE_ENDPOINT"
VERSION_ENV = "GCE_API_VERSION"


def build_app(config_path: Path) -> Dict[str, Any]:
    """
    Composition root: load .env and YAML, apply environment overrides and
    resolve the versioned compute endpoint.
    Returns: dict with cfg, paths, endpoint.
    """
    load_dotenv()
    cfg = load_config(config_path)
    config_dir = config_path.resolve().parent

    compute = cfg["compute"]
    env_endpoint = os.getenv(ENDPOINT_ENV)
    if env_endpoint and env_endpoint.strip():
        logger.debug("compute.endpoint overridden by %s", ENDPOINT_ENV)
        compute["endpoint"] = env_endpoint.strip()
    env_version = os.getenv(VERSION_ENV)
    if env_version and env_version.strip():
        logger.debug("compute.api_version overridden by %s", VERSION_ENV)
        compute["api_version"] = env_version.strip().lower()

    # MalformedEndpointError propagates: a bad endpoint is a config bug
    endpoint = construct_compute_endpoint(compute["endpoint"], compute["api_version"])

    return {
        "cfg": cfg,
        "paths": {"config_dir": config_dir},
        "endpoint": endpoint,
    }
