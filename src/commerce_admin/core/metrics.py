from prometheus_client import Counter

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ["method", "path", "status_code"],
)

RECORD_STORE_OPERATIONS = Counter(
    "record_store_operations_total",
    "Total number of entity store operations",
    ["entity", "operation"],
)

SEEDED_RECORDS = Counter(
    "seeded_records_total",
    "Total number of mock records inserted at startup",
    ["entity"],
)
