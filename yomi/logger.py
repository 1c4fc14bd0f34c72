import logging
import sys

logger = logging.getLogger("yomi")
logger.setLevel(logging.INFO)
logger.propagate = False


class _BelowWarningFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def set_verbose(verbose: bool = True) -> None:
    """Let DEBUG records (skipped learning, malformed lines) through to stdout."""
    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)
    stdout_handler.setLevel(level)


def log_to_stderr() -> None:
    """Send every record to stderr, leaving stdout to the program's own output."""
    stdout_handler.setStream(sys.stderr)


stdout_handler = logging.StreamHandler(sys.stdout)
stdout_handler.setLevel(logging.INFO)
stdout_handler.addFilter(_BelowWarningFilter())

stderr_handler = logging.StreamHandler(sys.stderr)
stderr_handler.setLevel(logging.WARNING)  # WARNING and above

formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
stdout_handler.setFormatter(formatter)
stderr_handler.setFormatter(formatter)

if not logger.handlers:
    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)
