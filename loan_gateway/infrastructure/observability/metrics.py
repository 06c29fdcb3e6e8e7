"""Prometheus metrics for monitoring approval rates, rejection reasons and offered loans"""

from prometheus_client import Counter, Histogram

from loan_gateway.domain.models import Decision

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | rejected
)

rejection_reason_counter = Counter(
    "loan_rejection_total",
    "Rejected loan applications by reason",
    ["reason"],
)

approved_amount_histogram = Histogram(
    "loan_approved_amount",
    "Approved loan amounts in EUR",
    buckets=[2000, 3000, 4000, 5000, 6000, 7000, 8000, 9000, 10000],
)

approved_period_histogram = Histogram(
    "loan_approved_period_months",
    "Approved loan periods in months",
    buckets=[12, 18, 24, 36, 48, 60],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(decision: Decision) -> None:
    """Record decision metrics for monitoring approval rates and offer distribution"""
    if decision.approved:
        decision_counter.labels(outcome="approved").inc()
        approved_amount_histogram.observe(decision.loan_amount)
        approved_period_histogram.observe(decision.loan_period)
    else:
        decision_counter.labels(outcome="rejected").inc()
        rejection_reason_counter.labels(reason=decision.reason.value).inc()
