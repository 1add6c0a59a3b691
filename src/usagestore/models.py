from dataclasses import dataclass, field

# month (1-12) -> usage amount
MonthlyUsage = dict[int, float | int]
# year -> monthly usage
YearlyUsage = dict[int, MonthlyUsage]


@dataclass(slots=True)
class CustomerRecord:
    """
    CustomerRecord represents one customer and its
    usage history, keyed by year and then month.

    Instances handed out by the RecordStore are copies
    owned by the caller.
    """

    id: "str"
    name: "str"
    usages: "YearlyUsage" = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class UsageComparison:
    """
    UsageComparison holds the usage of a month in a given
    year and its change from the same month a year earlier.
    """

    later_amount: "float | int"
    # may be negative when usage dropped
    change: "float | int"
