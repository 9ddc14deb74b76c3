"""Configuration loading for logic_algebra.

Settings come from a JSON file, then from environment variables, then from
the caller's default. The file is ``config.json`` in the working directory
unless ``LOGIC_ALGEBRA_CONFIG`` names another one. A key path such as
``["engine", "device"]`` maps to the variable ``ENGINE_DEVICE``.

Recognised keys:
    engine.device           torch device used by DenseTensorAlg
    engine.check_membership verify operands of DomainBoolAlg
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

CONFIG_PATH_VARIABLE = "LOGIC_ALGEBRA_CONFIG"
DEFAULT_CONFIG_PATH = "config.json"

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Read the settings file.

    Args:
        config_path: File to read; defaults to ``$LOGIC_ALGEBRA_CONFIG`` or
            ``config.json``

    Returns:
        The parsed object, or ``{}`` when the file is absent, unreadable or
        not a JSON object
    """
    if config_path is None:
        config_path = os.environ.get(CONFIG_PATH_VARIABLE, DEFAULT_CONFIG_PATH)
    path = Path(config_path)
    if not path.is_file():
        return {}

    try:
        data = json.loads(path.read_text())
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return {}

    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level is not an object", path)
        return {}
    return data


def env_key(keys: List[str]) -> str:
    return "_".join(key.upper() for key in keys)


def _lookup(config: Dict[str, Any], keys: List[str]) -> Any:
    node: Any = config
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def get_config_value(
    keys: List[str], default: Any = None, config: Optional[Dict[str, Any]] = None
) -> Any:
    """Nested setting with environment fallback.

    A path that is missing or runs through a non-object counts as unset.
    """
    if config is None:
        config = load_config()

    value = _lookup(config, keys)
    if value is None:
        value = os.environ.get(env_key(keys))
    return default if value is None else value


def get_flag(keys: List[str], default: bool = False, config: Optional[Dict[str, Any]] = None) -> bool:
    """Boolean setting; JSON booleans or strings such as "yes" and "0"."""
    value = get_config_value(keys, default=default, config=config)
    if not isinstance(value, str):
        return bool(value)

    text = value.strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text not in _FALSE_STRINGS:
        logger.warning("Unrecognised value %r for %s, using %s", value, env_key(keys), default)
        return default
    return False
