import os
import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Mapping, Optional

from minigrep.core.config_validator import SettingsValidator, LOG_LEVELS
from minigrep.core.reader import DEFAULT_ENCODING

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV = "MINIGREP_CONFIG_FILE"
LOG_LEVEL_ENV = "MINIGREP_LOG_LEVEL"
DEFAULT_CONFIG_NAME = "minigrep.yaml"
DEFAULT_LOG_LEVEL = "WARNING"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Loads settings from a YAML file and environment variables.
    Returns a dictionary with the settings and status metadata; never raises.
    """
    if environ is None:
        environ = os.environ

    settings_status = {
        "status": "OK",
        "error": None,
        "config_path": None,
        "source": None,
        "data": {}
    }

    # --- 1. Determine Settings File ---
    env_override_file = environ.get(CONFIG_FILE_ENV)
    if env_override_file:
        config_path = Path(env_override_file)
        settings_status["source"] = f"ENV_FILE ({CONFIG_FILE_ENV})"
        if not config_path.exists():
            settings_status["status"] = "ERROR"
            settings_status["error"] = f"Settings file not found: {config_path}"
            return settings_status
    else:
        config_path = Path.cwd() / DEFAULT_CONFIG_NAME
        settings_status["source"] = "CWD"
        if not config_path.exists():
            config_path = None
            settings_status["source"] = "DEFAULT"

    # --- 2. Load File ---
    loaded = {}
    if config_path is not None:
        settings_status["config_path"] = str(config_path)
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            settings_status["status"] = "ERROR"
            settings_status["error"] = str(e)
            return settings_status

    # --- 3. Validation ---
    validation_errors = SettingsValidator.validate(loaded)
    if validation_errors:
        settings_status["status"] = "ERROR"
        settings_status["error"] = "Invalid Settings:\n" + "\n".join(validation_errors)
        # Still attach data for debugging
        settings_status["data"] = loaded
        return settings_status

    # --- 4. ENV Overrides ---
    env_level = environ.get(LOG_LEVEL_ENV)
    if env_level:
        if env_level.upper() not in LOG_LEVELS:
            settings_status["status"] = "ERROR"
            settings_status["error"] = f"{LOG_LEVEL_ENV} must be one of {LOG_LEVELS}, got {env_level!r}"
            settings_status["data"] = loaded
            return settings_status
        loaded.setdefault("logging", {})["level"] = env_level

    settings_status["data"] = loaded
    logger.info("Settings Loaded: source=%s, config_path=%s", settings_status["source"], settings_status["config_path"])
    return settings_status


def get_encoding(settings: Dict[str, Any]) -> str:
    return (settings.get("read") or {}).get("encoding") or DEFAULT_ENCODING


def get_log_level(settings: Dict[str, Any]) -> str:
    return ((settings.get("logging") or {}).get("level") or DEFAULT_LOG_LEVEL).upper()
