import pytest
from prometheus_client import CollectorRegistry

from usagestore.record_store import RecordStore
from usagestore.sample_data import SAMPLE_CUSTOMERS


@pytest.fixture()
def registry() -> "CollectorRegistry":
    """
    fresh Prometheus registry to avoid cross-test state.
    """
    return CollectorRegistry()


@pytest.fixture()
def store() -> "RecordStore":
    """
    fresh store seeded with the sample customers.
    """
    return RecordStore(SAMPLE_CUSTOMERS)
