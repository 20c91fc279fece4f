import logging

from querystudio.core.config import settings

HANDLER_NAME = "querystudio"


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger from settings. Safe to call more than once."""
    level_name = (level or settings.LOG_LEVEL or "INFO").strip().upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(
            f"Unknown log level '{level_name}'. "
            "Use DEBUG, INFO, WARNING, ERROR or CRITICAL."
        )

    root = logging.getLogger()
    root.setLevel(numeric_level)

    formatter = logging.Formatter(settings.LOG_FORMAT)
    for handler in root.handlers:
        if handler.get_name() == HANDLER_NAME:
            handler.setFormatter(formatter)
            return

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)
    root.addHandler(handler)
