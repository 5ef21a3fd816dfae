"""
Logging Configuration
JSON output, credential redaction and rotating files for error logs
"""
import json
import logging
import logging.handlers
import re
from datetime import datetime
from typing import Dict, List, Optional, Pattern, Tuple

# Payload keys whose values never reach a log line
REDACTED_KEYS = (
    'password', 'passwd', 'pwd', 'api_key', 'api_secret', 'token',
    'access_token', 'refresh_token', 'secret', 'secret_key',
)


class SensitiveDataFilter(logging.Filter):
    """
    Redacts credentials from log messages and their arguments

    Error logs carry request targets ('/login?password=...') and exception
    messages that may quote request payloads ('{"token": "..."}').

    Example:
        handler.addFilter(SensitiveDataFilter({'card': r'(card=)\\d+'}))
    """

    SENSITIVE_PATTERNS = {
        'query_param': r'((?:password|passwd|pwd|token|access_token|api_key|secret)=)[^&\s]*',
        'auth_header': r'(Authorization:\s+Bearer\s+)[A-Za-z0-9\-_=]+\.[A-Za-z0-9\-_=]+\.?[A-Za-z0-9\-_.+/=]*',
    }

    def __init__(self, additional_patterns: Optional[Dict[str, str]] = None):
        super().__init__()
        rules: List[Tuple[Pattern, str]] = [
            (re.compile(rf'("{re.escape(key)}"\s*:\s*)"[^"]*"', re.IGNORECASE), r'\1"[REDACTED]"')
            for key in REDACTED_KEYS
        ]
        patterns = {**self.SENSITIVE_PATTERNS, **(additional_patterns or {})}
        rules.extend(
            (re.compile(pattern, re.IGNORECASE), r'\1[REDACTED]')
            for pattern in patterns.values()
        )
        self.rules = rules

    def filter(self, record: logging.LogRecord) -> bool:
        """Redact in place; the record is always kept"""
        if isinstance(record.msg, str):
            record.msg = self.redact(record.msg)

        if isinstance(record.args, dict):
            record.args = {key: self._scrub(value) for key, value in record.args.items()}
        elif isinstance(record.args, tuple):
            record.args = tuple(self._scrub(arg) for arg in record.args)

        return True

    def redact(self, text: str) -> str:
        for pattern, replacement in self.rules:
            text = pattern.sub(replacement, text)
        return text

    def _scrub(self, value):
        return self.redact(value) if isinstance(value, str) else value


class JSONFormatter(logging.Formatter):
    """
    One JSON object per line

    Structured fields passed with ``extra=`` (the error handler sends
    error_type, status_code, method and path) become top-level keys.
    """

    RESERVED_ATTRS = frozenset(
        vars(logging.LogRecord('', 0, '', 0, '', (), None))
    ) | {'message', 'asctime'}

    def __init__(self, include_fields: Optional[List[str]] = None):
        """
        Args:
            include_fields: Record attributes to copy even if they are standard ones
        """
        super().__init__()
        self.include_fields = include_fields or []

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'location': f'{record.module}.{record.funcName}:{record.lineno}',
        }

        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)
        if record.stack_info:
            entry['stack'] = record.stack_info

        extras = {
            key: value for key, value in vars(record).items()
            if key not in self.RESERVED_ATTRS or key in self.include_fields
        }
        for key, value in extras.items():
            entry.setdefault(key, value)

        return json.dumps(entry, default=str)


class LoggerConfig:
    """
    Builds configured loggers for the framework's channels
    """

    @staticmethod
    def setup_logger(
        name: str,
        format_type: str = 'json',
        level: Optional[int] = None,
        log_file=None,
        max_bytes: int = None,
        backup_count: int = None,
        filter_sensitive: bool = True,
        additional_sensitive_patterns: Optional[Dict[str, str]] = None,
        console: Optional[bool] = None
    ) -> logging.Logger:
        """
        Configure a logger, replacing any handlers it already has

        Args:
            name: Logger name (usually a channel such as 'error')
            format_type: 'json' or 'text'
            level: Log level (DEBUG in debug mode, else WARNING)
            log_file: Rotating log file; none means console only
            max_bytes: Rotation size
            backup_count: Rotated files to keep
            filter_sensitive: Attach a SensitiveDataFilter to every handler
            additional_sensitive_patterns: Extra redaction patterns (name: regex)
            console: Also log to stderr (defaults to debug mode, or True without a file)

        Example:
            LoggerConfig.setup_logger('error', log_file='logs/error.log')
        """
        from viewkit.defaults import DEFAULT_LOG_BACKUP_COUNT, DEFAULT_LOG_MAX_BYTES
        from viewkit.support import Config

        debug = Config.debug()
        if level is None:
            level = logging.DEBUG if debug else logging.WARNING
        if console is None:
            console = debug or log_file is None

        handlers: List[logging.Handler] = []
        if log_file is not None:
            handlers.append(logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=DEFAULT_LOG_MAX_BYTES if max_bytes is None else max_bytes,
                backupCount=DEFAULT_LOG_BACKUP_COUNT if backup_count is None else backup_count,
                encoding='utf-8'
            ))
        if console:
            handlers.append(logging.StreamHandler())

        if format_type == 'json':
            formatter = JSONFormatter()
        else:
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        redaction = SensitiveDataFilter(additional_sensitive_patterns) if filter_sensitive else None

        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers.clear()
        for handler in handlers:
            handler.setFormatter(formatter)
            if redaction is not None:
                handler.addFilter(redaction)
            logger.addHandler(handler)

        # Handlers above are the only output
        logger.propagate = False

        return logger
