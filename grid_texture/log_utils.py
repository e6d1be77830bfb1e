"""Topic-based logging setup.

Library modules log through ``logging.getLogger("grid_texture.<topic>")`` and
never configure handlers themselves; hosts call :func:`setup_logging` once.
"""

import logging
from typing import Optional

ROOT_LOGGER = "grid_texture"

# Valid logging topics, one per subsystem
TOPICS = {"decode", "layers", "loaders", "render"}


def get_logger(topic: str) -> logging.Logger:
    """Return the logger for ``topic`` (must be one of :data:`TOPICS`)."""
    if topic not in TOPICS:
        raise ValueError(f"Unknown logging topic: {topic}")
    return logging.getLogger(f"{ROOT_LOGGER}.{topic}")


class RichLogFormatter(logging.Formatter):
    """Aligned ``LEVEL:topic   : message`` console output, optionally colored."""

    COLOR_CODES = {
        logging.DEBUG: "\033[38;5;252m",  # Light Grey
        logging.INFO: "\033[38;5;111m",  # Pastel Blue
        logging.WARNING: "\033[38;5;229m",  # Pale Yellow
        logging.ERROR: "\033[38;5;210m",  # Soft Red
        logging.CRITICAL: "\033[38;5;217m",  # Light Magenta
    }

    def __init__(self, use_color: bool = False) -> None:
        super().__init__()
        self.use_color = use_color
        self.bold = "\033[1m" if use_color else ""
        self.reset = "\033[0m" if use_color else ""

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLOR_CODES.get(record.levelno, "") if self.use_color else ""
        level_name = record.levelname[:5]
        topic = record.name.split(".")[-1][:8]
        prefix = (
            f"{color}{level_name:<5}{self.reset}:"
            f"{self.bold}{topic:<8}{self.reset}: "
        )
        s = super().format(record)
        return "\n".join(f"{prefix}{line}" for line in s.split("\n"))


def setup_logging(
    level: int = logging.INFO,
    color_logs: bool = False,
    debug_topics: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Configure the ``grid_texture`` logger tree.

    Arguments:
        level: Level for the root project logger.
        color_logs: Use ANSI colors on the console handler.
        debug_topics: Comma separated topic prefixes to force to DEBUG, or
            ``"all"``.
        log_file: Optional path that also receives uncolored output.
    """
    root_logger = logging.getLogger(ROOT_LOGGER)
    for h in root_logger.handlers[:]:
        root_logger.removeHandler(h)
        h.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(RichLogFormatter(use_color=color_logs))
    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="w")
        except OSError as e:
            root_logger.error("Could not open log file %s: %s", log_file, e)
        else:
            file_handler.setFormatter(RichLogFormatter(use_color=False))
            root_logger.addHandler(file_handler)
            root_logger.info("Logging to file: %s", log_file)

    if debug_topics:
        user_topics = [t.strip() for t in debug_topics.split(",")]
        selected = (
            TOPICS
            if "all" in user_topics
            else {
                full
                for u in user_topics
                for full in TOPICS
                if u and full.startswith(u)
            }
        )
        for topic in selected:
            logging.getLogger(f"{ROOT_LOGGER}.{topic}").setLevel(logging.DEBUG)

    return root_logger
