from prometheus_client import Counter, Histogram

REQUESTS_TOTAL = Counter(
    "quotescraper_proxy_requests_total",
    "Total proxied page requests attempted",
    ["proxy", "status", "result"],
)

ITEMS_TOTAL = Counter(
    "quotescraper_items_total",
    "Total quote containers processed",
    ["result"],
)

RUNS_TOTAL = Counter(
    "quotescraper_runs_total",
    "Total scrape runs by outcome",
    ["outcome"],
)

REQUEST_LATENCY = Histogram(
    "quotescraper_request_latency_seconds",
    "Latency of proxied page requests",
    ["proxy"],
    buckets=(0.1, 0.25, 0.5, 1, 2, 5, 10),
)


def record_request(proxy: str, status: int, result: str, latency: float) -> None:
    REQUESTS_TOTAL.labels(proxy=proxy, status=str(status), result=result).inc()
    REQUEST_LATENCY.labels(proxy=proxy).observe(latency)


def record_item(result: str) -> None:
    ITEMS_TOTAL.labels(result=result).inc()


def record_run(outcome: str) -> None:
    RUNS_TOTAL.labels(outcome=outcome).inc()
