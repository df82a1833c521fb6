"""Navigation policy configuration.

File: ~/.config/sway-workspace-nav/config.json

    {
        "walk_into_gaps": false,
        "static": false,
        "boundary": "current"
    }

Every key is optional. CLI flags override the file; the file overrides the
defaults.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from ..errors import ConfigLoadError, InvalidPolicyArgument
from ..models.policy import NavigationPolicy


logger = logging.getLogger(__name__)

# Default config file location
CONFIG_PATH = Path.home() / ".config" / "sway-workspace-nav" / "config.json"


def load_policy(path: Optional[Path] = None) -> NavigationPolicy:
    """Load navigation policy from file, falling back to defaults if missing.

    Args:
        path: Optional custom path (defaults to ~/.config/sway-workspace-nav/config.json)

    Returns:
        NavigationPolicy from the file, or the default policy

    Raises:
        ConfigLoadError: If the file exists but is not a valid policy
    """
    config_path = Path(path).expanduser() if path else CONFIG_PATH

    if not config_path.exists():
        logger.debug(f"No config file at {config_path}, using defaults")
        return NavigationPolicy()

    try:
        with open(config_path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigLoadError(str(config_path), f"invalid JSON: {e}")
    except OSError as e:
        raise ConfigLoadError(str(config_path), str(e))

    if not isinstance(data, dict):
        raise ConfigLoadError(str(config_path), "top level must be a JSON object")

    try:
        policy = NavigationPolicy.model_validate(data)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigLoadError(str(config_path), errors)
    except InvalidPolicyArgument as e:
        # Enum parsing in the model raises directly instead of through pydantic
        raise ConfigLoadError(str(config_path), e.message)

    logger.debug(f"Loaded policy from {config_path}: {policy}")
    return policy


def apply_overrides(policy: NavigationPolicy, overrides: Dict[str, Any]) -> NavigationPolicy:
    """Return ``policy`` with every non-None override applied.

    Examples:
        >>> apply_overrides(NavigationPolicy(), {"static_behaviour": True, "walk_into_gaps": None}).static_behaviour
        True
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return policy
    return policy.model_copy(update=changes)
