from prometheus_client import REGISTRY, CollectorRegistry, Counter, Gauge


class StoreMetrics:
    """
    tracks record store activity in Prometheus metrics.
     - writes_total: successful mutations, labeled by operation.
     - rejections_total: failed operations, labeled by operation
     and reason (the error class name).
     - snapshots_total: copies handed out, labeled by scope
     (all/customer).
     - customers: number of customers currently held.
    """

    def __init__(self, registry: "CollectorRegistry" = REGISTRY) -> "None":
        self._writes: "Counter" = Counter(
            "usagestore_writes_total",
            "Total successful record store mutations",
            ["operation"],
            registry=registry,
        )
        self._rejections: "Counter" = Counter(
            "usagestore_rejections_total",
            "Total rejected record store operations",
            ["operation", "reason"],
            registry=registry,
        )
        self._snapshots: "Counter" = Counter(
            "usagestore_snapshots_total",
            "Total snapshots handed out by the record store",
            ["scope"],
            registry=registry,
        )
        self._customers: "Gauge" = Gauge(
            "usagestore_customers",
            "Number of customers held by the record store",
            registry=registry,
        )

    def inc_write(self, operation: "str") -> "None":
        self._writes.labels(operation=operation).inc()

    def inc_rejection(self, operation: "str", error: "Exception") -> "None":
        self._rejections.labels(
            operation=operation, reason=type(error).__name__
        ).inc()

    def inc_snapshot(self, scope: "str") -> "None":
        self._snapshots.labels(scope=scope).inc()

    def set_customers(self, count: "int") -> "None":
        self._customers.set(count)
