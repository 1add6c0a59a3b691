class RecordStoreError(Exception):
    """
    base exception for all record store failures.
    """


class InvalidMonthError(RecordStoreError):
    def __init__(self, month: "object") -> "None":
        self.month = month
        super().__init__(f"month must be an integer in 1..12, got {month!r}")


class InvalidAmountError(RecordStoreError):
    def __init__(self, amount: "object") -> "None":
        self.amount = amount
        super().__init__(
            f"amount must be a finite, non-negative number, got {amount!r}"
        )


class InvalidRecordError(RecordStoreError):
    """
    a customer record passed for loading has the wrong shape.
    """


class NotFoundError(RecordStoreError):
    """
    base for lookups of customers, years or months that are not present.
    """


class CustomerNotFoundError(NotFoundError):
    def __init__(self, customer_id: "str") -> "None":
        self.customer_id = customer_id
        super().__init__(f"customer {customer_id!r} not found")


class YearNotFoundError(NotFoundError):
    def __init__(self, customer_id: "str", year: "int") -> "None":
        self.customer_id = customer_id
        self.year = year
        super().__init__(f"year {year} not found for customer {customer_id!r}")


class MonthNotFoundError(NotFoundError):
    def __init__(self, customer_id: "str", year: "int", month: "int") -> "None":
        self.customer_id = customer_id
        self.year = year
        self.month = month
        super().__init__(
            f"month {month} of year {year} not found for customer {customer_id!r}"
        )


class DuplicateError(RecordStoreError):
    """
    base for attempts to create a customer or year that already exists.
    """


class DuplicateCustomerError(DuplicateError):
    def __init__(self, customer_id: "str") -> "None":
        self.customer_id = customer_id
        super().__init__(f"customer {customer_id!r} already exists")


class DuplicateYearError(DuplicateError):
    def __init__(self, customer_id: "str", year: "int") -> "None":
        self.customer_id = customer_id
        self.year = year
        super().__init__(
            f"year {year} already exists for customer {customer_id!r}"
        )
