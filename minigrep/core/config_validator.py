import codecs
import logging
from typing import Dict, Any, List

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class SettingsValidator:
    """
    Validates settings file structure and types.
    Every section is optional; present sections are checked strictly.
    """

    @staticmethod
    def validate(settings: Dict[str, Any]) -> List[str]:
        errors = []

        if not isinstance(settings, dict):
            errors.append(f"Settings must be a mapping, got {type(settings).__name__}")
            logger.debug(f"Settings Validation Failed: {errors}")
            return errors

        # 1. Read section
        read = settings.get("read", {})
        if not isinstance(read, dict):
            errors.append("'read' must be a dictionary")
        elif "encoding" in read:
            encoding = read["encoding"]
            if not isinstance(encoding, str):
                errors.append(f"Field 'encoding' must be string, got {type(encoding).__name__}")
            else:
                try:
                    codec = codecs.lookup(encoding)
                except LookupError:
                    errors.append(f"Unknown encoding in 'read.encoding': {encoding}")
                else:
                    # rot13, base64, zlib etc. cannot back open()
                    if not getattr(codec, "_is_text_encoding", True):
                        errors.append(f"'read.encoding' is not a text encoding: {encoding}")

        # 2. Logging section
        log_section = settings.get("logging", {})
        if not isinstance(log_section, dict):
            errors.append("'logging' must be a dictionary")
        elif "level" in log_section:
            SettingsValidator._check_level(log_section["level"], "logging.level", errors)

        if errors:
            logger.debug(f"Settings Validation Failed: {errors}")
        else:
            logger.debug("Settings OK: %s", settings)

        return errors

    @staticmethod
    def _check_level(value: Any, key: str, errors: list):
        if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
            errors.append(f"Field '{key}' must be one of {LOG_LEVELS}, got {value!r}")
