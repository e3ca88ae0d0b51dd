"""Prometheus metrics for column provisioning."""

from __future__ import annotations

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram


def _safe_counter(name: str, desc: str, registry: CollectorRegistry, labelnames: tuple[str, ...] = ()) -> Counter:
    try:
        return Counter(name, desc, labelnames=labelnames, registry=registry)
    except ValueError:
        return registry._names_to_collectors.get(name + "_total") or registry._names_to_collectors[name]


def _safe_histogram(name: str, desc: str, registry: CollectorRegistry) -> Histogram:
    try:
        return Histogram(name, desc, registry=registry)
    except ValueError:
        return registry._names_to_collectors[name]


class Metrics:
    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        reg = registry or REGISTRY
        self.provision_requests = _safe_counter(
            "colprov_provision_requests", "Add-column requests", reg
        )
        self.provision_failures = _safe_counter(
            "colprov_provision_failures", "Failed add-column requests", reg, labelnames=("reason",)
        )
        self.provision_path = _safe_counter(
            "colprov_provision_path", "Successful provisions per path", reg, labelnames=("path",)
        )
        self.provision_latency = _safe_histogram(
            "colprov_provision_latency_seconds", "Provisioning latency", reg
        )


_metrics: Metrics | None = None


def get_metrics(registry: CollectorRegistry | None = None) -> Metrics:
    global _metrics
    if _metrics is None:
        _metrics = Metrics(registry)
    return _metrics
