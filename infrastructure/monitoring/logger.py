import logging
import sys
import traceback
from dataclasses import asdict, dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from infrastructure.json_encoding import dumps

SYSTEM_LOGGER_NAME = "comparator"
PROVIDER_LOGGER_NAME = "comparator.providers"


class JSONFormatter(logging.Formatter):
    """
    Custom formatter that outputs structured JSON logs.
    """
    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now().isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info)
            }

        if hasattr(record, "extra_data"):
            log_entry["data"] = record.extra_data

        return dumps(log_entry)


class AppLogger:
    """
    Centralized logging configuration for the application.
    File handlers are only installed when a log directory is configured.
    """
    def __init__(self,
                 console_level: str = "INFO",
                 log_directory: str | None = None,
                 file_level: str = "DEBUG",
                 max_file_size: int = 10 * 1024 * 1024,
                 backup_count: int = 5):
        self.console_level = getattr(logging, console_level.upper())
        self.file_level = getattr(logging, file_level.upper())
        self.log_directory = Path(log_directory) if log_directory else None
        self.max_file_size = max_file_size
        self.backup_count = backup_count

        self._setup_logging()

    def _setup_logging(self) -> None:
        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.setLevel(logging.DEBUG)

        logging.getLogger("httpx").setLevel(logging.WARNING)

        self._setup_console_handler(root_logger)
        if self.log_directory is not None:
            self.log_directory.mkdir(parents=True, exist_ok=True)
            self._setup_file_handler(root_logger, "system", "app.log", self.file_level)
            self._setup_file_handler(root_logger, "errors", "errors.log", logging.WARNING)

    def _setup_console_handler(self, logger: logging.Logger) -> None:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(self.console_level)
        console_format = "%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s"
        console_handler.setFormatter(logging.Formatter(console_format, datefmt="%H:%M:%S"))
        logger.addHandler(console_handler)

    def _setup_file_handler(self, logger: logging.Logger, subdir: str, filename: str, level: int) -> None:
        log_dir = self.log_directory / subdir
        log_dir.mkdir(exist_ok=True)

        file_handler = RotatingFileHandler(
            log_dir / filename,
            maxBytes=self.max_file_size,
            backupCount=self.backup_count,
            encoding="utf-8"
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EventType(Enum):
    PROVIDER_QUERY = "provider_query"
    RATE_SELECTION = "rate_selection"
    USER_REQUEST = "user_request"
    SERVICE_LIFECYCLE = "service_lifecycle"


@dataclass
class LogEvent:
    event_type: EventType
    level: LogLevel
    message: str
    timestamp: datetime
    duration_ms: float | None = None
    request_context: dict[str, Any] | None = None
    provider_context: dict[str, Any] | None = None
    error_context: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        data["event_type"] = self.event_type.value
        data["level"] = self.level.value
        return data


class ProductionLogger:
    def __init__(self):
        self.system_logger = logging.getLogger(SYSTEM_LOGGER_NAME)
        self.provider_logger = logging.getLogger(PROVIDER_LOGGER_NAME)

    def log_event(self, event: LogEvent, exc_info: BaseException | None = None):
        logger = self.provider_logger if event.event_type == EventType.PROVIDER_QUERY else self.system_logger

        level_map = {
            LogLevel.DEBUG: logging.DEBUG,
            LogLevel.INFO: logging.INFO,
            LogLevel.WARNING: logging.WARNING,
            LogLevel.ERROR: logging.ERROR,
            LogLevel.CRITICAL: logging.CRITICAL,
        }
        logger.log(
            level_map.get(event.level, logging.INFO),
            event.message,
            exc_info=exc_info,
            extra={"extra_data": event.to_dict()},
        )

    def log_provider_query(self, provider_name: str, success: bool,
                           rate: Decimal | None = None, error_message: str | None = None,
                           exc_info: BaseException | None = None):
        if exc_info is not None:
            level, outcome = LogLevel.ERROR, "RAISED"
        elif success:
            level, outcome = LogLevel.DEBUG, "SUCCESS"
        else:
            level, outcome = LogLevel.WARNING, "FAILED"

        event = LogEvent(
            event_type=EventType.PROVIDER_QUERY,
            level=level,
            message=f"Provider {provider_name}: {outcome}",
            timestamp=datetime.now(),
            provider_context={
                "provider": provider_name,
                "success": success,
                "rate": rate,
            },
            error_context={"error_message": error_message} if error_message else None
        )
        self.log_event(event, exc_info=exc_info)

    def log_rate_selection(self, source_currency: str, target_currency: str,
                           provider_name: str, rate: Decimal, success: bool,
                           successful_providers: int, failed_providers: int,
                           total_duration_ms: float):
        if success:
            message = f"Best rate {source_currency}->{target_currency}: {rate} from {provider_name}"
        else:
            message = f"All providers failed for {source_currency}->{target_currency}"

        event = LogEvent(
            event_type=EventType.RATE_SELECTION,
            level=LogLevel.INFO if success else LogLevel.WARNING,
            message=f"{message} ({total_duration_ms:.1f}ms)",
            timestamp=datetime.now(),
            duration_ms=total_duration_ms,
            request_context={
                "source_currency": source_currency,
                "target_currency": target_currency,
            },
            provider_context={
                "selected_provider": provider_name,
                "rate": rate,
                "successful_providers": successful_providers,
                "failed_providers": failed_providers,
            },
        )
        self.log_event(event)

    def log_user_request(self, endpoint: str, request_data: dict[str, Any],
                         success: bool, response_time_ms: float,
                         error_message: str | None = None):
        event = LogEvent(
            event_type=EventType.USER_REQUEST,
            level=LogLevel.INFO if success else LogLevel.WARNING,
            message=f"User request to {endpoint}: {'SUCCESS' if success else 'FAILED'}",
            timestamp=datetime.now(),
            duration_ms=response_time_ms,
            request_context={
                "endpoint": endpoint,
                "request_data": request_data,
                "success": success
            },
            error_context={"error_message": error_message} if error_message else None
        )
        self.log_event(event)

    def log_service_lifecycle(self, action: str, details: dict[str, Any] | None = None):
        event = LogEvent(
            event_type=EventType.SERVICE_LIFECYCLE,
            level=LogLevel.INFO,
            message=f"Service {action}",
            timestamp=datetime.now(),
            request_context=details,
        )
        self.log_event(event)


# Global logger instances
app_logger: AppLogger | None = None
production_logger: ProductionLogger | None = None


def configure_logging(console_level: str = "INFO", log_directory: str | None = None) -> AppLogger:
    global app_logger
    app_logger = AppLogger(console_level=console_level, log_directory=log_directory)
    return app_logger


def get_production_logger() -> ProductionLogger:
    global production_logger
    if production_logger is None:
        production_logger = ProductionLogger()
    return production_logger
