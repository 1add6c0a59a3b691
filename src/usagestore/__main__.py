import threading

import structlog
from prometheus_client import start_http_server

from usagestore.cli import CompareQuery, parse_args
from usagestore.comparator import UsageComparator
from usagestore.exceptions import RecordStoreError
from usagestore.logging import setup_logging
from usagestore.metrics import StoreMetrics
from usagestore.record_store import RecordStore
from usagestore.sample_data import SAMPLE_CUSTOMERS

logger = structlog.get_logger()


def _parse_listen_address(addr: "str") -> "tuple[str, int]":
    """
    parses listen address in format ':9186' or '0.0.0.0:9186'.
    """
    if addr.startswith(":"):
        return ("0.0.0.0", int(addr[1:]))

    host, port = addr.rsplit(":", 1)
    return (host, int(port))


def _run_query(store: "RecordStore", query: "CompareQuery") -> "bool":
    customer_id, later_year, month = query
    comparator = UsageComparator(store)
    try:
        result = comparator.compare_usage(customer_id, later_year, month)
    except RecordStoreError as exc:
        logger.error("compare_failed", error=type(exc).__name__, detail=str(exc))
        return False

    logger.info(
        "usage_comparison",
        customer_id=customer_id,
        later_year=later_year,
        month=month,
        later_amount=result.later_amount,
        change=result.change,
    )
    return True


def main(argv: "list[str] | None" = None) -> "int":
    config, query = parse_args(argv)
    setup_logging(config.log_level, config.log_format)

    metrics = StoreMetrics()
    # the store is built once here and handed to whatever needs it
    store = RecordStore(
        SAMPLE_CUSTOMERS if config.seed_sample_data else None,
        metrics=metrics,
    )
    logger.info("store_ready", customers=len(store.customer_ids()))

    ok = True
    if query is not None:
        ok = _run_query(store, query)

    if config.metrics_enabled:
        host, port = _parse_listen_address(config.listen_address)
        start_http_server(port, addr=host)
        logger.info("metrics_server_started", host=host, port=port)
        try:
            threading.Event().wait()
        except KeyboardInterrupt:
            logger.info("shutting_down")

    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
