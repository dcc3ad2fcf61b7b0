"""Constants used in the project."""

from __future__ import annotations

import logging
import os
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class RefKind(Enum):
    """Kinds of git references a drop source may point at.

    Args:
        Enum (string): Key used for the reference in the manifest.
    """

    BRANCH = "branch"
    TAG = "tag"
    REV = "rev"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    MANIFEST_FILE_NAME = "Ocean.toml"
    TARBALL_EXTENSION = ".tar.gz"
    API_URL = "https://api.oceanpkg.org"
    API_VERSION_PATH = "/v1/"
    OCEAN_REPO = "https://github.com/oceanpkg/ocean"
    DEFAULT_SCOPE = "core"
    DEFAULT_BRANCH = "master"
    RESERVED_SCOPES = ("core", "ocean", "self")
    LICENSE_OR = " OR "
    LICENSE_AND = " AND "
    LOG_FORMAT = "[%(levelname)s] %(message)s"

    # Environment overrides
    ENV_API_URL = "OCEAN_API_URL"
    ENV_CONFIG = "OCEAN_CONFIG"
    ENV_LOG_LEVEL = "OCEAN_LOG_LEVEL"


def _load_yaml_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load the optional YAML configuration file.

    The path defaults to the value of ``OCEAN_CONFIG``. Missing or malformed
    files yield an empty mapping so callers can always fall back to defaults.

    Args:
        path: Explicit configuration file path.

    Returns:
        Parsed configuration mapping.
    """
    config_path = path or os.environ.get(Constants.ENV_CONFIG)
    if not config_path:
        return {}

    if not os.path.isfile(config_path):
        logger.warning("Config file not found: %s", config_path)
        return {}

    import yaml  # pylint: disable=import-outside-toplevel

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load config %s: %s", config_path, e)
        return {}

    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level is not a mapping", config_path)
        return {}
    return data


def apply_config_overrides(cfg: Optional[Dict[str, Any]] = None) -> None:
    """Apply configuration onto ``Constants``.

    Precedence (highest first): environment, YAML config, built-in defaults.

    Args:
        cfg: Already-loaded configuration; loaded from ``OCEAN_CONFIG`` when None.
    """
    if cfg is None:
        cfg = _load_yaml_config()

    api = cfg.get("api") if isinstance(cfg, dict) else None
    if isinstance(api, dict):
        url = api.get("url")
        if isinstance(url, str) and url.strip():
            Constants.API_URL = url.strip().rstrip("/")
            logger.debug("API URL set from config: %s", Constants.API_URL)

    env_url = os.environ.get(Constants.ENV_API_URL)
    if env_url and env_url.strip():
        Constants.API_URL = env_url.strip().rstrip("/")
        logger.debug("API URL set from %s: %s", Constants.ENV_API_URL, Constants.API_URL)
