# healthscribe/logging_config.py
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once for the process.

    Calling it again only updates the level, so reloads under uvicorn
    don't stack duplicate handlers.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    if any(getattr(h, "_healthscribe", False) for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._healthscribe = True  # type: ignore[attr-defined]
    root.addHandler(handler)

    # httpx logs every request line at INFO; keep provider calls quiet
    logging.getLogger("httpx").setLevel(logging.WARNING)
