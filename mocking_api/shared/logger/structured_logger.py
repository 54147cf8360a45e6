import inspect
import logging
import os
from datetime import datetime, timezone
from typing import Optional

import structlog
from colorama import Fore, Style, just_fix_windows_console

just_fix_windows_console()

_CALLER_KEYS = ("module", "function", "file", "lineno", "class")

_METHOD_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "exception": logging.ERROR,
    "critical": logging.CRITICAL,
    "fatal": logging.CRITICAL,
}


def filter_by_level(min_level: int):
    """Processor dropping events below ``min_level`` for one StructuredLogger only."""
    def processor(logger, method_name, event_dict):
        if _METHOD_LEVELS.get(method_name, logging.INFO) < min_level:
            raise structlog.DropEvent
        return event_dict
    return processor


def add_caller_stack(logger, method_name, event_dict):
    """Attach the first frame outside structlog and this module to the event."""
    frame = inspect.currentframe()
    while frame:
        module_name = frame.f_globals.get("__name__")
        if module_name and not module_name.startswith("structlog") and module_name != __name__:
            event_dict["module"] = module_name
            event_dict["function"] = frame.f_code.co_name
            event_dict["file"] = frame.f_code.co_filename
            event_dict["lineno"] = frame.f_lineno
            cls = frame.f_locals.get("self")
            if cls is not None:
                event_dict["class"] = cls.__class__.__name__
            break
        frame = frame.f_back
    return event_dict


class StructuredLogger:
    """
    Structured logger with two streams:

    - console: one colored line per event, ``key=value`` fields appended,
      caller location shown for WARNING and above
    - file: one JSON object per line (skipped when ``log_file`` is empty)

    Handlers live on stdlib loggers keyed by ``name`` (and the log file path for
    the file stream), so building the same logger twice reuses them instead of
    stacking duplicates. The level is applied per instance, never on the shared
    stdlib loggers.
    """

    LEVEL_COLORS = {
        "DEBUG": Fore.CYAN,
        "INFO": Fore.GREEN,
        "WARNING": Fore.YELLOW,
        "ERROR": Fore.RED,
        "CRITICAL": Fore.MAGENTA + Style.BRIGHT,
    }

    def __init__(
        self,
        name: str = "mocking_api",
        log_file: Optional[str] = "app.log",
        level: str = "INFO",
        context: Optional[dict] = None,
    ):
        self.name = name
        self.context = context or {}
        level_no = getattr(logging, level.upper(), logging.INFO)

        # ----------------------------
        # Console logger
        # ----------------------------
        console_logger = logging.getLogger(f"{name}_console")
        if not console_logger.handlers:
            console_logger.setLevel(logging.DEBUG)
            console_logger.propagate = False
            ch = logging.StreamHandler()
            ch.setFormatter(logging.Formatter("%(message)s"))
            console_logger.addHandler(ch)

        self.console_logger = structlog.wrap_logger(
            console_logger,
            processors=[
                filter_by_level(level_no),
                structlog.processors.TimeStamper(fmt="ISO"),
                structlog.stdlib.add_log_level,
                structlog.processors.format_exc_info,
                add_caller_stack,
                self._render_console,
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        ).bind(logger=name, **self.context)

        # ----------------------------
        # File logger (JSON)
        # ----------------------------
        self.file_logger = None
        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)

            file_logger = logging.getLogger(f"{name}_file:{os.path.abspath(log_file)}")
            if not file_logger.handlers:
                file_logger.setLevel(logging.DEBUG)
                file_logger.propagate = False
                fh = logging.FileHandler(log_file, encoding="utf-8")
                fh.setFormatter(logging.Formatter("%(message)s"))
                file_logger.addHandler(fh)

            self.file_logger = structlog.wrap_logger(
                file_logger,
                processors=[
                    filter_by_level(level_no),
                    structlog.processors.TimeStamper(fmt="ISO"),
                    structlog.stdlib.add_log_level,
                    structlog.processors.StackInfoRenderer(),
                    structlog.processors.format_exc_info,
                    add_caller_stack,
                    structlog.processors.UnicodeDecoder(),
                    structlog.processors.JSONRenderer(),
                ],
                wrapper_class=structlog.stdlib.BoundLogger,
                cache_logger_on_first_use=True,
            ).bind(logger=name, **self.context)

    def _render_console(self, logger, method_name, event_dict) -> str:
        ts = event_dict.pop("timestamp", None) or datetime.now(timezone.utc).isoformat()
        level = event_dict.pop("level", method_name).upper()
        msg = event_dict.pop("event", "")
        event_dict.pop("logger", None)
        exception = event_dict.pop("exception", None)
        caller_info = {key: event_dict.pop(key, None) for key in _CALLER_KEYS}

        caller = ""
        if level in ("WARNING", "ERROR", "CRITICAL") and caller_info["module"]:
            caller = f" ({caller_info['module']}.{caller_info['function']}:{caller_info['lineno']})"

        fields = " ".join(f"{key}={value}" for key, value in event_dict.items())
        line = f"{ts} [{self.name}] {level}: {msg}"
        if fields:
            line += f" {fields}"
        line += caller
        if exception:
            line += f"\n{exception}"

        color = self.LEVEL_COLORS.get(level, "")
        return f"{color}{line}{Style.RESET_ALL}"

    def bind(self, **context) -> "StructuredLogger":
        """Return a logger for the same streams with extra fields on every event."""
        bound = object.__new__(StructuredLogger)
        bound.name = self.name
        bound.context = {**self.context, **context}
        bound.console_logger = self.console_logger.bind(**context)
        bound.file_logger = self.file_logger.bind(**context) if self.file_logger else None
        return bound

    def _emit(self, level: str, msg: str, /, **extra):
        getattr(self.console_logger, level)(msg, **extra)
        if self.file_logger is not None:
            getattr(self.file_logger, level)(msg, **extra)

    # ----------------------------
    # Logging methods
    # ----------------------------
    def debug(self, msg: str, /, **extra):
        self._emit("debug", msg, **extra)

    def info(self, msg: str, /, **extra):
        self._emit("info", msg, **extra)

    def warning(self, msg: str, /, **extra):
        self._emit("warning", msg, **extra)

    def error(self, msg: str, /, **extra):
        self._emit("error", msg, **extra)

    def critical(self, msg: str, /, **extra):
        self._emit("critical", msg, **extra)

    def exception(self, msg: str, /, **extra):
        self._emit("exception", msg, **extra)
