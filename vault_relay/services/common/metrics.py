"""Prometheus metrics of the relay, exposed on ``/metrics``.

RED metrics of the HTTP endpoints, labelled by `method` and `path`:

    http_requests_total
        Requests handled by an endpoint.

    http_exceptions_total
        Requests whose handling raised an exception. Since every failure of
        the relay is answered with a 500, this counts invalid requests as
        well as failed ledger calls. Requests for unknown URLs never reach an
        endpoint and are not counted.

    http_requests_latency_seconds
        Time spent handling a request, including waiting for confirmations.

The transactions sent by the relay are counted in
``ledger_transactions_total``, see :mod:`vault_relay.network.client`.
"""
import timeit

from prometheus_client import Counter, Histogram

LABELS = ("method", "path")

HTTP_REQUESTS_TOTAL = Counter(
    "http_requests_total", "Total amount of HTTP Requests made.", labelnames=LABELS
)
HTTP_EXCEPTIONS_TOTAL = Counter(
    "http_exceptions_total", "Total amount of HTTP exceptions.", labelnames=LABELS
)
HTTP_REQUESTS_LATENCY = Histogram(
    "http_requests_latency_seconds", "Duration of HTTP requests processing.", labelnames=LABELS
)


class REDMetricsTracker:
    """Track rate, errors and duration of the requests to a single endpoint.

    Usage::

        with REDMetricsTracker(request.method, "/vault-balance"):
            return get_vault_balance()
    """

    def __init__(self, method: str, path: str):
        self.labels = (method, path)
        self.start = None

    def __enter__(self):
        HTTP_REQUESTS_TOTAL.labels(*self.labels).inc()
        self.start = timeit.default_timer()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            HTTP_EXCEPTIONS_TOTAL.labels(*self.labels).inc()
        elapsed = timeit.default_timer() - self.start
        HTTP_REQUESTS_LATENCY.labels(*self.labels).observe(max(elapsed, 0))
