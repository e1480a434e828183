import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Loggers are children of ``bitdoctor``; handlers are attached once by
    ``configure_logging`` at application entry.
    """
    return logging.getLogger(f"bitdoctor.{name}")
