import logging
import sys

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Log:
    """Process-wide logging facade for the assessment run."""

    _logger: logging.Logger = logging.getLogger("ksense_assessment")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level (one of LOG_LEVELS) and attach a single stdout handler."""
        cls._logger.setLevel(log_level)
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def debug(cls, message: str) -> None:
        cls._logger.debug(message)

    @classmethod
    def info(cls, message: str) -> None:
        cls._logger.info(message)

    @classmethod
    def warning(cls, message: str) -> None:
        cls._logger.warning(message)

    @classmethod
    def error(cls, message: str) -> None:
        cls._logger.error(message)
