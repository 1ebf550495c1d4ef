"""Logging setup for the Teachify admin commands and health API.

Records are emitted as JSON with a fixed ``service`` field, OpenTelemetry
trace/span ids when a span is active, and any ``user:password@`` part of a
connection string replaced before the record leaves the process.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any, Optional

from pythonjsonlogger import jsonlogger
from opentelemetry import trace

from teachify_admin.config import mask_uri

SERVICE_NAME = "teachify-admin"


class CredentialMaskingFilter(logging.Filter):
    """Rewrites the rendered message so Mongo URIs never carry credentials."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = mask_uri(message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True


class TeachifyJSONFormatter(jsonlogger.JsonFormatter):
    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["service"] = SERVICE_NAME
        log_record["level"] = record.levelname

        ctx = trace.get_current_span().get_span_context()
        if ctx.is_valid:
            log_record["trace_id"] = trace.format_trace_id(ctx.trace_id)
            log_record["span_id"] = trace.format_span_id(ctx.span_id)


def setup_logging(level: str = "INFO", stream: Optional[IO[str]] = None) -> None:
    """
    Route every log record through one JSON handler on `stream` (stdout by
    default). Replaces handlers installed by an earlier call.
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        TeachifyJSONFormatter(
            "%(asctime)s %(name)s %(message)s",
            rename_fields={"asctime": "timestamp"},
        )
    )
    handler.addFilter(CredentialMaskingFilter())

    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)

    logging.getLogger("pymongo").setLevel("WARNING")
    logging.getLogger("httpx").setLevel("WARNING")
