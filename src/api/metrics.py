from prometheus_client import Counter, Histogram, Gauge, REGISTRY


# we check if they are already registered to avoid errors during hot reloads or test runs
def get_or_create_metric(name, documentation, metric_type, **kwargs):
    try:
        return metric_type(name, documentation, **kwargs)
    except ValueError:
        return REGISTRY._names_to_collectors[name]


REQUESTS_TOTAL = get_or_create_metric(
    "quickadd_requests_total",
    "Total requests",
    Counter,
    labelnames=["endpoint", "status"],
)

REQUEST_LATENCY_SECONDS = get_or_create_metric(
    "quickadd_request_latency_seconds",
    "Request latency",
    Histogram,
    labelnames=["endpoint"],
)

FIELDS_EXTRACTED_TOTAL = get_or_create_metric(
    "quickadd_fields_extracted_total",
    "Structured fields recognised in parsed text",
    Counter,
    labelnames=["field"],
)

PARSE_CONFIDENCE = get_or_create_metric(
    "quickadd_parse_confidence",
    "Confidence of parse results",
    Histogram,
    buckets=(0.5, 0.6, 0.7, 0.8, 0.9, 1.0),
)

TASKS_CREATED_TOTAL = get_or_create_metric(
    "quickadd_tasks_created_total", "Total tasks created from quick add", Counter
)

RECENT_TASKS = get_or_create_metric(
    "quickadd_recent_tasks", "Tasks currently held in memory", Gauge
)
