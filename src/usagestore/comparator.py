import structlog

from usagestore.exceptions import MonthNotFoundError, YearNotFoundError
from usagestore.models import CustomerRecord, UsageComparison
from usagestore.record_store import RecordStore, as_int, normalize_month

logger = structlog.get_logger()


def _amount(record: "CustomerRecord", year: "int", month: "int") -> "float | int":
    monthly = record.usages.get(year)
    if monthly is None:
        raise YearNotFoundError(record.id, year)
    if month not in monthly:
        raise MonthNotFoundError(record.id, year, month)
    return monthly[month]


class UsageComparator:
    """
    UsageComparator compares a customer's usage for a month with the
    same month of the previous year. It holds no state of its own and
    reads the store only through its snapshot accessors, so missing
    customers, years or months surface as the store's errors instead
    of being treated as zero usage.
    """

    def __init__(self, store: "RecordStore") -> "None":
        self._store = store

    def compare_usage(
        self,
        customer_id: "str",
        later_year: "int | str",
        month: "int | str",
    ) -> "UsageComparison":
        month_key = normalize_month(month)
        record = self._store.get_customer_snapshot(customer_id)
        year_key = as_int(later_year)
        if year_key is None:
            raise YearNotFoundError(customer_id, later_year)
        earlier_year = year_key - 1

        later = _amount(record, year_key, month_key)
        earlier = _amount(record, earlier_year, month_key)

        comparison = UsageComparison(later_amount=later, change=later - earlier)
        logger.debug(
            "usage_compared",
            customer_id=customer_id,
            later_year=year_key,
            month=month_key,
            change=comparison.change,
        )
        return comparison
