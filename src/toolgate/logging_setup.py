import json
import logging
import sys
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
    """
    One JSON object per log record.
    Structured detail goes in via logger.error(..., extra={"extra_data": {...}}).
    """
    def __init__(self, service_name: str):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_object = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "service": self.service_name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }

        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            log_object.update(extra_data)

        if record.exc_info:
            log_object["exception"] = self.formatException(record.exc_info)

        # invalid tool data may hold anything
        return json.dumps(log_object, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", service_name: str = "toolgate"):
    root = logging.getLogger()
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter(service_name))

    root.setLevel(level)
    root.addHandler(handler)

    # quiet
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
