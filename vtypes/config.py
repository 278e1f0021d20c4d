import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from vtypes.errors import ConfigError

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from the environment (and a local .env file)."""

    log_level: str = "WARNING"
    ast_meta: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()

        log_level = os.environ.get("VTYPES_LOG_LEVEL", cls.log_level).upper()
        if log_level not in _LEVELS:
            raise ConfigError(
                f"VTYPES_LOG_LEVEL must be one of {', '.join(_LEVELS)}, got {log_level!r}"
            )

        raw_meta = os.environ.get("VTYPES_AST_META", "true").strip().lower()
        if raw_meta in _TRUE:
            ast_meta = True
        elif raw_meta in _FALSE:
            ast_meta = False
        else:
            raise ConfigError(f"VTYPES_AST_META must be a boolean, got {raw_meta!r}")

        return cls(log_level=log_level, ast_meta=ast_meta)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
