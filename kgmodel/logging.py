import inspect
import logging
from pprint import pformat
from typing import Any, Optional

from pydantic import BaseModel

LOG_FORMAT = "%(asctime)s - %(pathname)s:%(lineno)d - %(levelname)s - %(message)s"

# Library modules only emit records; applications configure output with setup_logging().
logging.getLogger("kgmodel").addHandler(logging.NullHandler())


class PprintLogger:
    """A logger wrapper that pretty-prints models and containers.

    Strings are passed through untouched so %-style arguments still work:

        logger.debug("projected %s with %d components", entity_id, count)

    Pydantic models are rendered with ``model_dump_json(indent=2)`` and other
    objects with ``pformat``.
    """

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def _format_message(self, msg: Any, pprint: bool = True) -> Any:
        if not pprint or isinstance(msg, str):
            return msg
        if isinstance(msg, BaseModel):
            return msg.model_dump_json(indent=2)
        return pformat(msg, width=120, depth=None)

    def debug(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        self._logger.debug(self._format_message(msg, pprint=pprint), *args, stacklevel=2, **kwargs)

    def info(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        self._logger.info(self._format_message(msg, pprint=pprint), *args, stacklevel=2, **kwargs)

    def warning(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        self._logger.warning(self._format_message(msg, pprint=pprint), *args, stacklevel=2, **kwargs)

    def error(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        self._logger.error(self._format_message(msg, pprint=pprint), *args, stacklevel=2, **kwargs)

    def exception(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        self._logger.exception(self._format_message(msg, pprint=pprint), *args, stacklevel=2, **kwargs)

    def __getattr__(self, name: str) -> Any:
        """Delegate any other attributes to the underlying logger."""
        return getattr(self._logger, name)


def get_logger(name: str) -> PprintLogger:
    """Return a PprintLogger for library code, without touching handlers or level."""
    return PprintLogger(logging.getLogger(name))


def setup_logging(name: Optional[str] = None, level: int = logging.INFO) -> PprintLogger:
    """Return a PprintLogger, named after the calling module unless ``name`` is given.

    A stream handler is attached only the first time a given logger is set up.
    """
    if name is None:
        frame = inspect.currentframe().f_back  # type: ignore[union-attr]
        name = frame.f_globals.get("__name__", "kgmodel")  # type: ignore[union-attr]
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return PprintLogger(logger)
