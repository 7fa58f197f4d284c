"""openpyxl-backed record store using one workbook as a flat database.

Every logical operation reads the whole workbook, mutates it in memory and
writes it back. Concurrent writers are not coordinated.
"""

import uuid
import zipfile
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from typing import Any

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.worksheet.worksheet import Worksheet

from src.application.errors import RecordNotFoundError, StoreUnavailableError
from src.application.ports.record_store import RecordStorePort
from src.domain.constants import DEFAULT_CONFIG, DEFAULT_CURRENCY
from src.domain.models import Account, ConfigEntry, Transaction, Valuation
from src.infrastructure.logging.logger import get_app_logger
from src.utils.date_utils import coerce_date
from src.utils.decimal_utils import coerce_decimal, is_decimal_like

ACCOUNTS_SHEET = "Accounts"
TRANSACTIONS_SHEET = "Transactions"
VALUATIONS_SHEET = "Valuations"
CONFIG_SHEET = "Configuration"

SHEET_COLUMNS: dict[str, tuple[tuple[str, int], ...]] = {
    ACCOUNTS_SHEET: (
        ("id", 40),
        ("type", 30),
        ("name", 30),
        ("platform", 25),
        ("opened_date", 15),
        ("notes", 40),
    ),
    TRANSACTIONS_SHEET: (
        ("id", 40),
        ("account_id", 40),
        ("date", 15),
        ("kind", 15),
        ("amount", 15),
        ("recurrence", 15),
        ("description", 40),
    ),
    VALUATIONS_SHEET: (
        ("id", 40),
        ("account_id", 40),
        ("date", 15),
        ("value", 15),
        ("notes", 40),
    ),
    CONFIG_SHEET: (
        ("key", 30),
        ("value", 50),
    ),
}

HEADER_FONT = Font(bold=True, color="FFFFFFFF")
HEADER_FILL = PatternFill(
    fill_type="solid",
    start_color="FF2563EB",
    end_color="FF2563EB",
)
HEADER_ALIGNMENT = Alignment(horizontal="center", vertical="center")


def _columns(sheet_name: str) -> tuple[str, ...]:
    return tuple(name for name, _ in SHEET_COLUMNS[sheet_name])


class WorkbookRecordStore(RecordStorePort):
    """Record store persisting every record kind in one ``.xlsx`` file."""

    def __init__(
        self,
        path: Path | str,
        logger=None,
        clock: Callable[[], date] | None = None,
        id_factory: Callable[[], str] | None = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize the store.

        Args:
            path: Location of the workbook; created on first access.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning today's date for defaults.
            id_factory: Optional callable generating record identifiers.
            currency: Currency written to the configuration of a new
                workbook.
        """
        self._path = Path(path)
        self._logger = logger or get_app_logger()
        self._clock = clock or date.today
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))
        self._currency = currency or DEFAULT_CURRENCY

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def reset(self) -> None:
        """Delete the workbook and recreate it with default configuration."""
        try:
            if self._path.exists():
                self._path.unlink()
        except OSError as exc:
            raise StoreUnavailableError(
                f"Cannot remove workbook at {self._path}: {exc}"
            ) from exc
        self._initialize()

    # Accounts

    def list_accounts(self) -> list[Account]:
        workbook = self._load()
        return [
            self._to_account(row)
            for _, row in self._iter_rows(workbook[ACCOUNTS_SHEET])
        ]

    def add_account(self, fields: dict[str, Any]) -> Account:
        account = Account(
            id=self._id_factory(),
            type=str(fields.get("type") or ""),
            name=str(fields.get("name") or ""),
            platform=str(fields.get("platform") or ""),
            opened_date=coerce_date(fields.get("opened_date")) or self._clock(),
            notes=str(fields.get("notes") or ""),
        )
        with self._editing() as workbook:
            workbook[ACCOUNTS_SHEET].append(self._account_cells(account))
        return account

    def update_account(
        self,
        account_id: str,
        updates: dict[str, Any],
    ) -> Account:
        with self._editing() as workbook:
            sheet = workbook[ACCOUNTS_SHEET]
            row_index, row = self._find(sheet, account_id, "account")
            current = self._to_account(row)
            changes: dict[str, Any] = {}
            for key in ("type", "name", "platform"):
                value = updates.get(key)
                if value is not None and str(value).strip():
                    changes[key] = str(value).strip()
            opened_date = coerce_date(updates.get("opened_date"))
            if opened_date is not None:
                changes["opened_date"] = opened_date
            if updates.get("notes") is not None:
                changes["notes"] = str(updates["notes"])
            account = Account(
                id=current.id,
                type=changes.get("type", current.type),
                name=changes.get("name", current.name),
                platform=changes.get("platform", current.platform),
                opened_date=changes.get("opened_date", current.opened_date),
                notes=changes.get("notes", current.notes),
            )
            self._write_row(sheet, row_index, self._account_cells(account))
        return account

    def delete_account(self, account_id: str) -> None:
        with self._editing() as workbook:
            sheet = workbook[ACCOUNTS_SHEET]
            row_index, _ = self._find(sheet, account_id, "account")
            sheet.delete_rows(row_index)
            removed = 0
            for sheet_name in (TRANSACTIONS_SHEET, VALUATIONS_SHEET):
                removed += self._delete_where(
                    workbook[sheet_name],
                    lambda row: row.get("account_id") == account_id,
                )
        self._logger.info(
            f"Removed {removed} records attached to account {account_id}"
        )

    # Transactions

    def list_transactions(
        self,
        account_id: str | None = None,
    ) -> list[Transaction]:
        workbook = self._load()
        transactions = [
            self._to_transaction(row)
            for _, row in self._iter_rows(workbook[TRANSACTIONS_SHEET])
        ]
        if account_id:
            return [
                item for item in transactions if item.account_id == account_id
            ]
        return transactions

    def add_transaction(self, fields: dict[str, Any]) -> Transaction:
        transaction = Transaction(
            id=self._id_factory(),
            account_id=str(fields.get("account_id") or ""),
            date=coerce_date(fields.get("date")) or self._clock(),
            kind=str(fields.get("kind") or ""),
            amount=coerce_decimal(fields.get("amount")),
            recurrence=fields.get("recurrence") or None,
            description=str(fields.get("description") or ""),
        )
        with self._editing() as workbook:
            workbook[TRANSACTIONS_SHEET].append(
                [
                    transaction.id,
                    transaction.account_id,
                    transaction.date.isoformat(),
                    transaction.kind,
                    transaction.amount,
                    transaction.recurrence,
                    transaction.description,
                ]
            )
        return transaction

    def delete_transaction(self, transaction_id: str) -> None:
        with self._editing() as workbook:
            sheet = workbook[TRANSACTIONS_SHEET]
            row_index, _ = self._find(sheet, transaction_id, "transaction")
            sheet.delete_rows(row_index)

    # Valuations

    def list_valuations(
        self,
        account_id: str | None = None,
    ) -> list[Valuation]:
        workbook = self._load()
        valuations = [
            self._to_valuation(row)
            for _, row in self._iter_rows(workbook[VALUATIONS_SHEET])
        ]
        if account_id:
            return [
                item for item in valuations if item.account_id == account_id
            ]
        return valuations

    def add_valuation(self, fields: dict[str, Any]) -> Valuation:
        valuation = Valuation(
            id=self._id_factory(),
            account_id=str(fields.get("account_id") or ""),
            date=coerce_date(fields.get("date")) or self._clock(),
            value=coerce_decimal(fields.get("value")),
            notes=str(fields.get("notes") or ""),
        )
        with self._editing() as workbook:
            workbook[VALUATIONS_SHEET].append(self._valuation_cells(valuation))
        return valuation

    def update_valuation(
        self,
        valuation_id: str,
        updates: dict[str, Any],
    ) -> Valuation:
        with self._editing() as workbook:
            sheet = workbook[VALUATIONS_SHEET]
            row_index, row = self._find(sheet, valuation_id, "valuation")
            current = self._to_valuation(row)
            value = current.value
            if updates.get("value") is not None:
                value = coerce_decimal(updates["value"])
            notes = current.notes
            if updates.get("notes") is not None:
                notes = str(updates["notes"])
            valuation = Valuation(
                id=current.id,
                account_id=current.account_id,
                date=current.date,
                value=value,
                notes=notes,
            )
            self._write_row(sheet, row_index, self._valuation_cells(valuation))
        return valuation

    def delete_valuation(self, valuation_id: str) -> None:
        with self._editing() as workbook:
            sheet = workbook[VALUATIONS_SHEET]
            row_index, _ = self._find(sheet, valuation_id, "valuation")
            sheet.delete_rows(row_index)

    # Configuration

    def get_config(self) -> dict[str, str]:
        workbook = self._load()
        config: dict[str, str] = {}
        for _, row in self._iter_rows(workbook[CONFIG_SHEET]):
            key = row.get("key")
            if key is None:
                continue
            value = row.get("value")
            config[str(key)] = "" if value is None else str(value)
        return config

    def set_config(self, key: str, value: str) -> ConfigEntry:
        entry = ConfigEntry(key=key, value=str(value))
        with self._editing() as workbook:
            sheet = workbook[CONFIG_SHEET]
            for row_index, row in self._iter_rows(sheet):
                if row.get("key") == key:
                    self._write_row(sheet, row_index, [entry.key, entry.value])
                    break
            else:
                sheet.append([entry.key, entry.value])
        return entry

    # Workbook plumbing

    def _initialize(self) -> Workbook:
        workbook = Workbook()
        default_sheet = workbook.active
        if default_sheet is not None:
            workbook.remove(default_sheet)
        for sheet_name in SHEET_COLUMNS:
            self._create_sheet(workbook, sheet_name)
        config_sheet = workbook[CONFIG_SHEET]
        for key, value in DEFAULT_CONFIG:
            if key == "currency":
                value = self._currency
            config_sheet.append([key, value])
        config_sheet.append(["lastUpdate", datetime.now().isoformat()])
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreUnavailableError(
                f"Cannot create data directory {self._path.parent}: {exc}"
            ) from exc
        self._save(workbook)
        self._logger.info(f"Initialized workbook at {self._path}")
        return workbook

    @staticmethod
    def _create_sheet(workbook: Workbook, sheet_name: str) -> Worksheet:
        sheet = workbook.create_sheet(sheet_name)
        columns = SHEET_COLUMNS[sheet_name]
        sheet.append([name for name, _ in columns])
        for index, (_, width) in enumerate(columns, start=1):
            sheet.column_dimensions[get_column_letter(index)].width = width
            cell = sheet.cell(row=1, column=index)
            cell.font = HEADER_FONT
            cell.fill = HEADER_FILL
            cell.alignment = HEADER_ALIGNMENT
        return sheet

    def _load(self) -> Workbook:
        if not self._path.exists():
            return self._initialize()
        try:
            workbook = load_workbook(self._path)
        except (
            OSError,
            InvalidFileException,
            zipfile.BadZipFile,
            KeyError,
        ) as exc:
            raise StoreUnavailableError(
                f"Cannot read workbook at {self._path}: {exc}"
            ) from exc
        for sheet_name in SHEET_COLUMNS:
            if sheet_name not in workbook.sheetnames:
                self._logger.warning(
                    f"Sheet '{sheet_name}' missing in {self._path}; recreating"
                )
                self._create_sheet(workbook, sheet_name)
        return workbook

    def _save(self, workbook: Workbook) -> None:
        try:
            workbook.save(self._path)
        except OSError as exc:
            raise StoreUnavailableError(
                f"Cannot write workbook at {self._path}: {exc}"
            ) from exc

    @contextmanager
    def _editing(self) -> Iterator[Workbook]:
        workbook = self._load()
        yield workbook
        self._save(workbook)

    @staticmethod
    def _iter_rows(sheet: Worksheet) -> Iterator[tuple[int, dict[str, Any]]]:
        columns = _columns(sheet.title)
        for row_index, values in enumerate(
            sheet.iter_rows(
                min_row=2,
                max_col=len(columns),
                values_only=True,
            ),
            start=2,
        ):
            if all(value is None for value in values):
                continue
            yield row_index, dict(zip(columns, values))

    def _find(
        self,
        sheet: Worksheet,
        record_id: str,
        kind: str,
    ) -> tuple[int, dict[str, Any]]:
        for row_index, row in self._iter_rows(sheet):
            if row.get("id") == record_id:
                return row_index, row
        raise RecordNotFoundError(kind, record_id)

    def _delete_where(
        self,
        sheet: Worksheet,
        predicate: Callable[[dict[str, Any]], bool],
    ) -> int:
        matches = [
            row_index
            for row_index, row in self._iter_rows(sheet)
            if predicate(row)
        ]
        for row_index in reversed(matches):
            sheet.delete_rows(row_index)
        return len(matches)

    @staticmethod
    def _write_row(sheet: Worksheet, row_index: int, values: list) -> None:
        for column, value in enumerate(values, start=1):
            sheet.cell(row=row_index, column=column, value=value)

    def _coerce_amount(self, value, field: str, record_id) -> Decimal:
        if value is not None and not is_decimal_like(value):
            self._logger.warning(
                f"Unparseable {field} '{value}' on record {record_id}; using 0"
            )
        return coerce_decimal(value)

    @staticmethod
    def _text(value) -> str:
        return "" if value is None else str(value)

    def _to_account(self, row: dict[str, Any]) -> Account:
        return Account(
            id=self._text(row.get("id")),
            type=self._text(row.get("type")),
            name=self._text(row.get("name")),
            platform=self._text(row.get("platform")),
            opened_date=coerce_date(row.get("opened_date")),
            notes=self._text(row.get("notes")),
        )

    def _to_transaction(self, row: dict[str, Any]) -> Transaction:
        return Transaction(
            id=self._text(row.get("id")),
            account_id=self._text(row.get("account_id")),
            date=coerce_date(row.get("date")),
            kind=self._text(row.get("kind")),
            amount=self._coerce_amount(row.get("amount"), "amount", row.get("id")),
            recurrence=row.get("recurrence") or None,
            description=self._text(row.get("description")),
        )

    def _to_valuation(self, row: dict[str, Any]) -> Valuation:
        return Valuation(
            id=self._text(row.get("id")),
            account_id=self._text(row.get("account_id")),
            date=coerce_date(row.get("date")),
            value=self._coerce_amount(row.get("value"), "value", row.get("id")),
            notes=self._text(row.get("notes")),
        )

    @staticmethod
    def _account_cells(account: Account) -> list:
        return [
            account.id,
            account.type,
            account.name,
            account.platform,
            account.opened_date.isoformat() if account.opened_date else None,
            account.notes,
        ]

    @staticmethod
    def _valuation_cells(valuation: Valuation) -> list:
        return [
            valuation.id,
            valuation.account_id,
            valuation.date.isoformat() if valuation.date else None,
            valuation.value,
            valuation.notes,
        ]


__all__ = [
    "WorkbookRecordStore",
    "SHEET_COLUMNS",
    "ACCOUNTS_SHEET",
    "TRANSACTIONS_SHEET",
    "VALUATIONS_SHEET",
    "CONFIG_SHEET",
]
