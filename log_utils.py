import logging
import typer

from settings import DEBUG, LOG_FILE, LOG_FILE_MODE

# Configure logging
if LOG_FILE:
    logging.basicConfig(
        filename= LOG_FILE,
        filemode= LOG_FILE_MODE,
        level= logging.DEBUG if DEBUG else logging.INFO,
        format='%(asctime)s - %(levelname)s [%(filename)s]: %(message)s',
    )
else:
    logging.getLogger().addHandler(logging.NullHandler())


def log_info(
        msg: str,
        logger: logging.Logger | None = None,
    ) -> None:
    """
    Logs an informational message and prints it to the console.

    Args:
        msg (str): The message to log.
        logger (logging.Logger | None): Optional logger instance. Defaults to root logger.
    """
    if logger is None:
        logger = logging.getLogger()

    logger.info(msg)
    typer.echo(msg)

def log_warning(
        msg: str,
        logger: logging.Logger | None = None,
    ) -> None:
    """
    Logs a warning message and prints it to stderr with a 'WARNING:' prefix.

    Args:
        msg (str): The warning message to log.
        logger (logging.Logger | None): Optional logger instance. Defaults to root logger.
    """
    if logger is None:
        logger = logging.getLogger()

    logger.warning(msg)
    typer.echo(f"WARNING: {msg}", err=True)

def log_error(
        msg: str,
        logger: logging.Logger | None = None,
    ) -> None:
    """
    Logs an error message and prints it to stderr with an 'ERROR:' prefix.

    Args:
        msg (str): The error message to log.
        logger (logging.Logger | None): Optional logger instance. Defaults to root logger.
    """
    if logger is None:
        logger = logging.getLogger()

    logger.error(msg)
    typer.echo(f"ERROR: {msg}", err=True)

