"""
Logging configuration for the Neulion client
"""

import logging
import logging.config
import re
from typing import Any, Dict

_CREDENTIAL_PATTERN = re.compile(
    r"(password|authCode)(['\"]?\s*[:=]\s*)(?:(['\"])(.*?)\3|([^'\",\s}]+))", re.IGNORECASE
)


def _mask(match: "re.Match[str]") -> str:
    quote = match.group(3) or ""
    return f"{match.group(1)}{match.group(2)}{quote}***{quote}"


class RedactCredentialsFilter(logging.Filter):
    """Filter that masks passwords and auth tokens in log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _CREDENTIAL_PATTERN.sub(_mask, message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True  # Never drop records, only rewrite them


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration with credential redaction."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "redact_credentials": {
                "()": RedactCredentialsFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
                "filters": ["redact_credentials"]
            }
        },
        "loggers": {
            "neulion": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            },
            "zeep": {
                "handlers": ["default"],
                "level": "WARNING",
                "propagate": False
            },
            "httpx": {
                "handlers": ["default"],
                "level": "WARNING",
                "propagate": False
            }
        },
        "root": {
            "level": "WARNING",
            "handlers": ["default"]
        }
    }


def configure_logging(debug: bool = False) -> None:
    """Apply the logging configuration."""
    logging.config.dictConfig(get_logging_config("DEBUG" if debug else "INFO"))
