import math
import threading
from collections.abc import Mapping
from numbers import Integral, Real

import structlog

from usagestore.exceptions import (
    CustomerNotFoundError,
    DuplicateCustomerError,
    DuplicateYearError,
    InvalidAmountError,
    InvalidMonthError,
    InvalidRecordError,
    MonthNotFoundError,
    RecordStoreError,
    YearNotFoundError,
)
from usagestore.metrics import StoreMetrics
from usagestore.models import CustomerRecord, MonthlyUsage, YearlyUsage

logger = structlog.get_logger()

MONTHS = range(1, 13)


def as_int(value: "object") -> "int | None":
    """
    converts an int or a numeric string into an int. Anything
    else (bools and floats included) gives None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def normalize_month(month: "object") -> "int":
    key = as_int(month)
    if key is None or key not in MONTHS:
        raise InvalidMonthError(month)
    return key


def _is_finite(amount: "Real") -> "bool":
    # integers are always finite, even past float range
    if isinstance(amount, Integral):
        return True
    try:
        return math.isfinite(amount)
    except OverflowError:
        # e.g. a Fraction too large for a float, still finite
        return True


def _validate_amount(amount: "object") -> "None":
    if (
        isinstance(amount, bool)
        or not isinstance(amount, Real)
        or not _is_finite(amount)
        or amount < 0
    ):
        raise InvalidAmountError(amount)


def _parse_months(months: "object") -> "MonthlyUsage":
    if not isinstance(months, Mapping):
        raise InvalidRecordError(
            f"monthly usage must be a mapping, got {type(months).__name__}"
        )
    parsed: "MonthlyUsage" = {}
    for month, amount in months.items():
        key = normalize_month(month)
        _validate_amount(amount)
        if key in parsed:
            raise InvalidRecordError(f"month {key} given more than once")
        parsed[key] = amount
    return parsed


def _parse_record(customer_id: "str", raw: "object") -> "CustomerRecord":
    """
    builds a fresh CustomerRecord from either a CustomerRecord or a
    mapping shaped like {"id": ..., "name": ..., "usages": {...}}.
    Nothing in the result is shared with raw.
    """
    if isinstance(raw, CustomerRecord):
        record_id, name, usages = raw.id, raw.name, raw.usages
    elif isinstance(raw, Mapping):
        record_id = raw.get("id", customer_id)
        name = raw.get("name", "")
        usages = raw.get("usages", {})
    else:
        raise InvalidRecordError(
            f"record for customer {customer_id!r} must be a mapping, "
            f"got {type(raw).__name__}"
        )

    if str(record_id) != customer_id:
        raise InvalidRecordError(
            f"record id {record_id!r} does not match key {customer_id!r}"
        )
    if not isinstance(usages, Mapping):
        raise InvalidRecordError(
            f"usages of customer {customer_id!r} must be a mapping"
        )

    parsed: "YearlyUsage" = {}
    for year, months in usages.items():
        key = as_int(year)
        if key is None:
            raise InvalidRecordError(
                f"year {year!r} of customer {customer_id!r} is not an integer"
            )
        if key in parsed:
            raise InvalidRecordError(
                f"year {key} of customer {customer_id!r} given more than once"
            )
        parsed[key] = _parse_months(months)

    return CustomerRecord(id=customer_id, name=str(name), usages=parsed)


def _copy_record(record: "CustomerRecord") -> "CustomerRecord":
    # amounts are immutable numbers, so copying both dict levels is a deep copy
    return CustomerRecord(
        id=record.id,
        name=record.name,
        usages={year: dict(months) for year, months in record.usages.items()},
    )


class RecordStore:
    """
    RecordStore: Is the thread-safe owner of the nested
    customer -> year -> month usage data.

    Reads never hand out the live structure: snapshot() and
    get_customer_snapshot() return copies the caller may mutate
    freely. The only in-place mutation path is set_usage(), which
    validates the target leaf and never creates customers, years
    or months. Those are created explicitly by add_customer(),
    add_year() or a whole bulk_load().
    """

    def __init__(
        self,
        data: "Mapping[str, object] | None" = None,
        *,
        metrics: "StoreMetrics | None" = None,
    ) -> "None":
        self._lock: "threading.Lock" = threading.Lock()
        self._records: "dict[str, CustomerRecord]" = {}
        self._metrics = metrics
        if data is not None:
            self.bulk_load(data)

    def _rejected(self, operation: "str", error: "RecordStoreError") -> "None":
        logger.warning(
            "usage_write_rejected",
            operation=operation,
            reason=type(error).__name__,
            detail=str(error),
        )
        if self._metrics is not None:
            self._metrics.inc_rejection(operation, error)

    def _written(self, operation: "str") -> "None":
        if self._metrics is not None:
            self._metrics.inc_write(operation)
            self._metrics.set_customers(len(self._records))

    def _find(self, customer_id: "str") -> "CustomerRecord":
        # callers hold the lock
        record = self._records.get(customer_id)
        if record is None:
            raise CustomerNotFoundError(customer_id)
        return record

    def snapshot(self) -> "dict[str, CustomerRecord]":
        """
        returns a deep copy of every customer record, keyed by id.
        """
        with self._lock:
            copies = {cid: _copy_record(r) for cid, r in self._records.items()}
        if self._metrics is not None:
            self._metrics.inc_snapshot("all")
        return copies

    def get_customer_snapshot(self, customer_id: "str") -> "CustomerRecord":
        """
        returns a deep copy of one customer's record. Raises
        CustomerNotFoundError if the id is absent.
        """
        with self._lock:
            record = self._records.get(customer_id)
            copied = _copy_record(record) if record is not None else None
        if copied is None:
            raise CustomerNotFoundError(customer_id)
        if self._metrics is not None:
            self._metrics.inc_snapshot("customer")
        return copied

    def customer_ids(self) -> "list[str]":
        with self._lock:
            return sorted(self._records)

    def set_usage(
        self,
        customer_id: "str",
        year: "int | str",
        month: "int | str",
        amount: "float | int",
    ) -> "None":
        """
        sets a single (customer, year, month) usage amount in place.

        Checks run in order: month range, amount, customer, year,
        month present in the year bucket. A failed check leaves the
        store untouched.
        """
        try:
            month_key = normalize_month(month)
            _validate_amount(amount)
            with self._lock:
                record = self._find(customer_id)
                year_key = as_int(year)
                if year_key is None or year_key not in record.usages:
                    raise YearNotFoundError(customer_id, year)
                monthly = record.usages[year_key]
                if month_key not in monthly:
                    raise MonthNotFoundError(customer_id, year_key, month_key)
                monthly[month_key] = amount
                self._written("set_usage")
        except RecordStoreError as exc:
            self._rejected("set_usage", exc)
            raise

        logger.debug(
            "usage_set",
            customer_id=customer_id,
            year=year_key,
            month=month_key,
            amount=amount,
        )

    def bulk_load(self, data: "Mapping[str, object]") -> "None":
        """
        replaces all records with a validated copy of data. If any
        record or leaf is invalid nothing is replaced.
        """
        try:
            if not isinstance(data, Mapping):
                raise InvalidRecordError(
                    f"data must be a mapping, got {type(data).__name__}"
                )
            records: "dict[str, CustomerRecord]" = {}
            for cid, raw in data.items():
                key = str(cid)
                if key in records:
                    raise InvalidRecordError(
                        f"customer {key!r} given more than once"
                    )
                records[key] = _parse_record(key, raw)
        except RecordStoreError as exc:
            self._rejected("bulk_load", exc)
            raise

        with self._lock:
            self._records = records
            self._written("bulk_load")
        logger.info("bulk_load_complete", customers=len(records))

    def add_customer(self, customer_id: "str", name: "str") -> "None":
        """
        creates a customer with no usage years.
        """
        try:
            with self._lock:
                if customer_id in self._records:
                    raise DuplicateCustomerError(customer_id)
                self._records[customer_id] = CustomerRecord(id=customer_id, name=name)
                self._written("add_customer")
        except RecordStoreError as exc:
            self._rejected("add_customer", exc)
            raise
        logger.info("customer_added", customer_id=customer_id)

    def add_year(
        self,
        customer_id: "str",
        year: "int | str",
        months: "Mapping[int | str, float | int] | None" = None,
    ) -> "None":
        """
        creates a year bucket for an existing customer. Without months
        every month from 1 to 12 starts at 0.
        """
        try:
            year_key = as_int(year)
            if year_key is None:
                raise InvalidRecordError(f"year {year!r} is not an integer")
            if months is None:
                monthly: "MonthlyUsage" = {m: 0 for m in MONTHS}
            else:
                monthly = _parse_months(months)
            with self._lock:
                record = self._find(customer_id)
                if year_key in record.usages:
                    raise DuplicateYearError(customer_id, year_key)
                record.usages[year_key] = monthly
                self._written("add_year")
        except RecordStoreError as exc:
            self._rejected("add_year", exc)
            raise
        logger.info("year_added", customer_id=customer_id, year=year_key)
