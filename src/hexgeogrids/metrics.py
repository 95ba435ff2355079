"""
Prometheus metrics for monitoring the index service.
"""
from prometheus_client import Counter, Histogram

# Request metrics
index_requests_total = Counter(
    'index_requests_total',
    'Total number of index/decode requests received',
    ['endpoint', 'status']
)

# Latency metrics
request_duration_seconds = Histogram(
    'request_duration_seconds',
    'Request latency in seconds',
    ['endpoint']
)

# Business metrics
cells_indexed_total = Counter(
    'cells_indexed_total',
    'Number of lon-lat points snapped to a cell'
)

decode_errors_total = Counter(
    'decode_errors_total',
    'Rejected systems and indices by error type',
    ['error']
)
