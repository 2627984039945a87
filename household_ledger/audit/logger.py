"""
Audit Logger

DESIGN DECISION: Every ledger mutation and every failed attempt is logged.
This provides:
1. Traceability of what was appended and when the file was rewritten
2. Debugging capability when a load or save fails
3. A record of rejected input without persisting it

The audit logger:
- Is synchronous; the ledger has no background work
- Only logs locally (structlog); the ledger file itself is the persistent record
- Supports correlation IDs to trace the events of one registration
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from uuid import UUID, uuid4

import structlog

from household_ledger.models.ledger import Item, ValidationIssue


_configured = False


def configure_logging(level: int = logging.INFO, json_output: bool = False) -> None:
    """
    Configure structlog on top of the standard logging module.

    Safe to call more than once; only the first call takes effect.

    Args:
        level: Numeric log level (e.g., logging.DEBUG)
        json_output: Render JSON lines instead of the console renderer
    """
    global _configured

    if _configured:
        return

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _configured = True


class AuditLogger:
    """
    Logs ledger-level events for the registration and summary flows.

    Storage modules log their own file-level events; this class covers
    what the user did.
    """

    def __init__(self, logger: Optional[structlog.stdlib.BoundLogger] = None):
        self._logger = logger or structlog.get_logger("household_ledger.audit")

    def log_item_registered(
        self,
        item: Item,
        path: Optional[Path],
        item_count: int,
        correlation_id: UUID,
    ) -> None:
        """Log a successful append + save."""
        self._logger.info(
            "item_registered",
            name=item.name,
            category=str(item.category),
            price=item.price,
            date=item.date.isoformat(),
            path=str(path) if path else None,
            item_count=item_count,
            correlation_id=str(correlation_id),
        )

    def log_validation_failed(
        self,
        issue: ValidationIssue,
        correlation_id: UUID,
    ) -> None:
        """Log rejected input; nothing was persisted."""
        self._logger.warning(
            "validation_failed",
            field=issue.field,
            issue_type=issue.issue_type,
            message=issue.message,
            correlation_id=str(correlation_id),
        )

    def log_storage_failed(
        self,
        error: Exception,
        operation: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a load/save failure before it propagates to the caller."""
        self._logger.error(
            "storage_failed",
            operation=operation,
            error_type=type(error).__name__,
            error=str(error),
            correlation_id=str(correlation_id) if correlation_id else None,
        )

    def log_summary_generated(
        self,
        granularity: str,
        period_count: int,
        item_count: int,
    ) -> None:
        """Log a summary computation."""
        self._logger.info(
            "summary_generated",
            granularity=granularity,
            period_count=period_count,
            item_count=item_count,
        )


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a user action (e.g., one registration).
    """
    return uuid4()
