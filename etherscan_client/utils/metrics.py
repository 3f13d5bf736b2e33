"""
Prometheus metrics for outbound Etherscan calls.

The collectors register on the default registry; expose them with
prometheus_client.start_http_server() or generate_latest() in the host
application.
"""

from prometheus_client import Counter, Histogram

etherscan_requests_total = Counter(
    'etherscan_requests_total',
    'Total number of Etherscan API requests.',
    ['module', 'action', 'outcome']
)

etherscan_request_duration_seconds = Histogram(
    'etherscan_request_duration_seconds',
    'Latency of Etherscan API requests in seconds.',
    ['module', 'action']
)


def record_request(module: str, action: str, outcome: str, duration: float) -> None:
    """Records one finished call; outcome is 'success' or 'network_error'."""
    etherscan_requests_total.labels(module=module, action=action, outcome=outcome).inc()
    etherscan_request_duration_seconds.labels(module=module, action=action).observe(duration)
