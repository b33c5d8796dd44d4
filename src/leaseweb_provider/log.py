"""Logging setup, structured fields and secret masking.

The provider keeps one process-wide ``LogContext``. Once configuration has
been validated the provider stores the resolved connection settings in it as
structured fields and registers the API token as a secret. From then on every
log record, from any logger, has each literal occurrence of a secret replaced
by ``***``: in the message, its arguments, ``extra`` attributes, structured
fields, exception text and stack info.

Masking is applied at three points:

- a log record factory masks the message and exception of each record as it
  is created, so handlers installed later are covered as well
- the records it creates mask their ``extra`` values, which are only attached
  after the factory has run, as soon as a formatter renders them
- ``SecretMaskingFilter`` on the handlers existing at install time adds the
  structured fields and masks again

Example:
    >>> from leaseweb_provider.log import get_log_context
    >>> ctx = get_log_context()
    >>> ctx.mask_value("s3cr3t")
    >>> ctx.mask("token is s3cr3t")
    'token is ***'
"""

import json
import logging
import logging.handlers
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

from leaseweb_provider.config.env import get_env_flag
from leaseweb_provider.telemetry import get_current_trace_id

__all__ = [
    "MASK",
    "LogContext",
    "SecretMaskingFilter",
    "StructuredFormatter",
    "get_log_context",
    "set_field",
    "mask_value",
    "install_masking",
    "reset_log_context",
    "configure_logging",
]

MASK = "***"

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
    | {"message", "asctime", "log_fields", "leaseweb_trace_id"}
)


class LogContext:
    """Structured fields and secrets applied to every log record.

    Fields and secrets are only written while the provider is configured,
    which the host does once and from a single thread. Both are replaced
    wholesale on update so concurrent readers always see a consistent value.
    """

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}
        self._secrets: tuple[str, ...] = ()

    @property
    def fields(self) -> dict[str, Any]:
        return dict(self._fields)

    @property
    def secrets(self) -> tuple[str, ...]:
        return self._secrets

    def set_field(self, key: str, value: Any) -> None:
        self._fields = {**self._fields, key: value}

    def mask_value(self, secret: str) -> None:
        """Register a literal value to redact from all subsequent log output."""
        if not secret or secret in self._secrets:
            return
        # Longest first so a secret containing another one is fully replaced.
        self._secrets = tuple(sorted((*self._secrets, secret), key=len, reverse=True))

    def clear(self) -> None:
        self._fields = {}
        self._secrets = ()

    def mask(self, text: str) -> str:
        for secret in self._secrets:
            text = text.replace(secret, MASK)
        return text

    def mask_object(self, value: Any) -> Any:
        """Mask strings inside arbitrary nested containers."""
        if not self._secrets:
            return value
        if isinstance(value, str):
            return self.mask(value)
        if isinstance(value, dict):
            return {self.mask_object(k): self.mask_object(v) for k, v in value.items()}
        if isinstance(value, list):
            return [self.mask_object(v) for v in value]
        if isinstance(value, tuple):
            return tuple(self.mask_object(v) for v in value)
        # Other objects are masked through their string form.
        text = str(value)
        masked = self.mask(text)
        return masked if masked != text else value

    def annotate(self, record: logging.LogRecord) -> None:
        """Attach the structured fields to ``record``."""
        own_fields = getattr(record, "log_fields", None) or {}
        record.log_fields = {**self._fields, **own_fields}

    def mask_record(self, record: logging.LogRecord) -> None:
        """Redact every secret from ``record`` in place."""
        if not self._secrets:
            return

        try:
            message = record.getMessage()
        except Exception:
            # Leave broken format strings to the handler's error reporting.
            message = None
        if message is not None:
            record.msg = self.mask(message)
            record.args = None

        if record.exc_info and not record.exc_text:
            record.exc_text = logging.Formatter().formatException(record.exc_info)
        if record.exc_text:
            record.exc_text = self.mask(record.exc_text)
        if record.stack_info:
            record.stack_info = self.mask(record.stack_info)
        self.mask_attributes(record)

    def mask_attributes(self, record: logging.LogRecord) -> None:
        """Redact every secret from the structured fields and ``extra`` values."""
        if not self._secrets:
            return
        if getattr(record, "log_fields", None):
            record.log_fields = self.mask_object(record.log_fields)
        for key, value in list(record.__dict__.items()):
            if key not in _RESERVED_ATTRS:
                record.__dict__[key] = self.mask_object(value)


_context = LogContext()
_base_record_factory: Callable[..., logging.LogRecord] | None = None


def get_log_context() -> LogContext:
    """Get the process-wide log context."""
    return _context


def set_field(key: str, value: Any) -> None:
    """Add a structured field to every subsequent log record."""
    _context.set_field(key, value)


def mask_value(secret: str) -> None:
    """Redact ``secret`` from every subsequent log record."""
    _context.mask_value(secret)


class SecretMaskingFilter(logging.Filter):
    """Handler filter applying the log context to each record."""

    def __init__(self, context: LogContext | None = None):
        super().__init__()
        self.context = context or _context

    def filter(self, record: logging.LogRecord) -> bool:
        self.context.annotate(record)
        self.context.mask_record(record)
        return True


class StructuredFormatter(logging.Formatter):
    """Formatter that renders the structured fields of a record.

    Text mode appends ``key=value`` pairs to the regular message; JSON mode
    emits one object per record. The rendered text is masked once more before
    it is returned.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        json_format: bool = False,
        context: LogContext | None = None,
    ):
        super().__init__(fmt, datefmt)
        self.json_format = json_format
        self.context = context or _context

    def format(self, record: logging.LogRecord) -> str:
        fields = getattr(record, "log_fields", None)
        if fields is None:
            fields = self.context.fields
        trace_id = getattr(record, "leaseweb_trace_id", None)

        if self.json_format:
            payload: dict[str, Any] = {
                "timestamp": self.formatTime(record, self.datefmt),
                "level": record.levelname,
                "logger": record.name,
                "message": record.getMessage(),
                **fields,
            }
            if trace_id:
                payload["trace_id"] = trace_id
            if record.exc_info or record.exc_text:
                payload["exception"] = record.exc_text or self.formatException(record.exc_info)
            output = json.dumps(payload, default=str)
        else:
            output = super().format(record)
            if trace_id:
                fields = {**fields, "trace_id": trace_id}
            if fields:
                output += " " + " ".join(f"{key}={value}" for key, value in fields.items())

        return self.context.mask(output)


class MaskingLogRecord(logging.LogRecord):
    """Log record that redacts secrets whenever it is rendered.

    ``extra`` attributes are attached after the record factory has run, so
    they are masked when a formatter first asks for the message.
    """

    def getMessage(self) -> str:
        _context.mask_attributes(self)
        return _context.mask(super().getMessage())


def _install_record_factory() -> None:
    global _base_record_factory
    if _base_record_factory is not None:
        return
    base = logging.getLogRecordFactory()
    # A custom factory keeps its own record type; its extras are left to
    # SecretMaskingFilter.
    record_type = MaskingLogRecord if base is logging.LogRecord else base

    def _masking_record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = record_type(*args, **kwargs)
        record.leaseweb_trace_id = get_current_trace_id()
        _context.mask_record(record)
        return record

    _base_record_factory = base
    logging.setLogRecordFactory(_masking_record_factory)


def _attach_filter(handler: logging.Handler) -> None:
    if not any(isinstance(f, SecretMaskingFilter) for f in handler.filters):
        handler.addFilter(SecretMaskingFilter())


def install_masking(secret: str | None = None) -> None:
    """Activate masking process-wide, optionally registering a secret.

    Installs the masking record factory and attaches a ``SecretMaskingFilter``
    to every handler that already exists. Safe to call more than once.
    """
    if secret:
        _context.mask_value(secret)
    _install_record_factory()

    loggers: list[logging.Logger] = [logging.getLogger()]
    loggers.extend(
        logger
        for logger in logging.root.manager.loggerDict.values()
        if isinstance(logger, logging.Logger)
    )
    for logger in loggers:
        for handler in logger.handlers:
            _attach_filter(handler)


def reset_log_context() -> None:
    """Clear fields and secrets and restore the original record factory."""
    global _base_record_factory
    _context.clear()
    if _base_record_factory is not None:
        logging.setLogRecordFactory(_base_record_factory)
        _base_record_factory = None


def configure_logging(
    debug: bool = False,
    log_file: Path | None = None,
    log_level: str | None = None,
    json_format: bool = False,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> None:
    """Configure logging for all modules.

    Args:
        debug: Whether to enable debug logging (overrides log_level if True)
        log_file: Optional path to log file for persistent logging
        log_level: Log level string ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        json_format: Emit one JSON object per record instead of plain text
        max_bytes: Maximum log file size in bytes before rotation (default: 10MB)
        backup_count: Number of rotated log files to keep (default: 5)
    """
    # Check environment variable if debug flag is not set
    if not debug:
        debug = get_env_flag("LEASEWEB_PROVIDER_DEBUG")

    if debug:
        level = logging.DEBUG
    elif log_level:
        level = getattr(logging, log_level.upper(), logging.WARNING)
    else:
        level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove any existing handlers to avoid duplicate messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    detailed_formatter = StructuredFormatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        json_format=json_format,
    )
    simple_formatter = StructuredFormatter(
        "%(levelname)s:%(name)s:%(message)s", json_format=json_format
    )

    if log_file:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(detailed_formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            # If file logging fails, warn but continue
            print(f"Warning: Failed to setup file logging to {log_file}: {e}", file=sys.stderr)

    # The host runtime owns stdout, so plugin logs go to stderr only.
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(simple_formatter)
    root_logger.addHandler(stream_handler)

    install_masking()
