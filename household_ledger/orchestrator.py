"""
Main Orchestrator for the Household Ledger

This module ties the components together and defines the end-to-end flows:
1. Register (raw input -> parse/validate -> Item -> load -> append -> save)
2. Summary (load -> group by period -> net balances)

DESIGN DECISION: The orchestrator enforces the boundaries:
- Nothing is constructed before the raw input is validated
- Nothing is persisted if validation fails
- Errors propagate as typed exceptions; deciding whether to exit, retry,
  or re-prompt belongs to the front end
"""

from typing import Optional
from uuid import UUID

from household_ledger.audit import AuditLogger, configure_logging, create_correlation_id
from household_ledger.config import LedgerSettings, get_settings
from household_ledger.models.ledger import (
    Item,
    PeriodSummary,
    category_choices,
    category_of,
)
from household_ledger.queries import SummaryExecutor
from household_ledger.services.storage import (
    JsonFileLedgerStorage,
    LedgerStorageInterface,
    StorageError,
)
from household_ledger.validation import (
    InputValidationError,
    parse_category_type,
    parse_date,
    parse_name,
    parse_price,
    parse_register_type,
    validate_register_type,
)


class RegisterFlow:
    """
    Orchestrates registering one income or expense entry.

    Flow:
    1. Parse + validate register type, name, category, price, date
    2. Build the Category and the Item
    3. Load the full ledger (a missing file starts a new one)
    4. Append the item
    5. Save the full ledger back
    """

    def __init__(
        self,
        storage: LedgerStorageInterface,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._storage = storage
        self._audit_logger = audit_logger or AuditLogger()

    @property
    def storage(self) -> LedgerStorageInterface:
        return self._storage

    def category_choices(self, register_type: int) -> list[tuple[int, str]]:
        """
        Menu entries (code, label) for the given register type.

        Raises:
            InputValidationError: If register_type is not 0 or 1
        """
        validate_register_type(register_type)
        return [
            (code, category.kind.label)
            for code, category in enumerate(category_choices(register_type))
        ]

    def register(
        self,
        register_type: str,
        name: str,
        category_type: str,
        price: str,
        date: str,
        correlation_id: Optional[UUID] = None,
    ) -> Item:
        """
        Register one entry from raw user strings.

        Returns:
            The appended Item

        Raises:
            InputValidationError: If any field is invalid (nothing is saved)
            StorageError: If the ledger cannot be loaded or saved
        """
        correlation_id = correlation_id or create_correlation_id()

        try:
            register_code = parse_register_type(register_type)
            item_name = parse_name(name)
            category_code = parse_category_type(register_code, category_type)
            amount = parse_price(price)
            item_date = parse_date(date)
        except InputValidationError as e:
            self._audit_logger.log_validation_failed(e.issue, correlation_id)
            raise

        item = Item(
            name=item_name,
            category=category_of(register_code, category_code),
            price=amount,
            date=item_date,
        )

        try:
            items = self._storage.load_or_create()
            items.append(item)
            self._storage.save(items)
        except StorageError as e:
            self._audit_logger.log_storage_failed(e, "register", correlation_id)
            raise

        self._audit_logger.log_item_registered(
            item=item,
            path=self._storage.path,
            item_count=len(items),
            correlation_id=correlation_id,
        )
        return item


class SummaryFlow:
    """
    Orchestrates period summaries over the stored ledger.

    Reads with load_or_fail: a missing or empty ledger raises.
    """

    def __init__(
        self,
        storage: LedgerStorageInterface,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._executor = SummaryExecutor(storage)
        self._audit_logger = audit_logger or AuditLogger()

    def monthly_report(self) -> list[PeriodSummary]:
        """Net balance per month, oldest first."""
        return self._report("month", self._executor.monthly)

    def yearly_report(self) -> list[PeriodSummary]:
        """Net balance per year, oldest first."""
        return self._report("year", self._executor.yearly)

    def net_balance(self, year: int, month: int) -> int:
        """Net balance of a single month."""
        try:
            return self._executor.for_month(year, month)
        except StorageError as e:
            self._audit_logger.log_storage_failed(e, "summary")
            raise

    def _report(self, granularity: str, compute) -> list[PeriodSummary]:
        try:
            summaries = compute()
        except StorageError as e:
            self._audit_logger.log_storage_failed(e, "summary")
            raise

        self._audit_logger.log_summary_generated(
            granularity=granularity,
            period_count=len(summaries),
            item_count=sum(s.item_count for s in summaries),
        )
        return summaries


def create_app_components(
    settings: Optional[LedgerSettings] = None,
) -> tuple[RegisterFlow, SummaryFlow]:
    """
    Factory function to create all application components.

    Args:
        settings: Settings to use. Defaults to get_settings().

    Returns:
        (register_flow, summary_flow), sharing one JSON file storage
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level_number, settings.log_json)

    storage = JsonFileLedgerStorage(settings.data_file, indent=settings.json_indent)
    audit_logger = AuditLogger()

    return (
        RegisterFlow(storage, audit_logger),
        SummaryFlow(storage, audit_logger),
    )
