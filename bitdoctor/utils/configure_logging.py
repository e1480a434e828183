import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path | None = None, level: str = "INFO") -> None:
    """Configure the bitdoctor logfile.

    Args:
        home: Home directory for ``bitdoctor.log``. If None, derived from environment.
        level: Logging level name
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        from ..api.config.get_home_dir import get_home_dir

        home = get_home_dir()

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "bitdoctor.log"

    root_logger = logging.getLogger("bitdoctor")
    root_logger.setLevel(getattr(logging, level, logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
