"""
Metrics collection and monitoring utilities.
"""

import time
from typing import Callable
from functools import wraps
from prometheus_client import Counter, Histogram, generate_latest

from .logging import get_logger


class MetricsCollector:
    """Collector for estimation and service-call metrics."""

    def __init__(self):
        self.logger = get_logger(__name__)

        # Estimation metrics
        self.documents_estimated = Counter(
            'memsizer_documents_estimated_total',
            'Total number of documents priced',
            ['collection']
        )

        self.estimation_duration = Histogram(
            'memsizer_estimation_duration_seconds',
            'Collection estimation duration in seconds',
            ['operation']
        )

        self.estimation_counter = Counter(
            'memsizer_estimations_total',
            'Total number of estimation operations',
            ['operation', 'status']
        )

        # Service metrics
        self.service_duration = Histogram(
            'memsizer_service_request_duration_seconds',
            'Indexing service request duration in seconds',
            ['operation']
        )

        # Error metrics
        self.error_counter = Counter(
            'memsizer_errors_total',
            'Total number of errors',
            ['error_type', 'operation']
        )

    def record_documents(self, collection: str, count: int) -> None:
        """Record priced documents for a collection."""
        self.documents_estimated.labels(collection=collection).inc(count)

    def record_estimation(self, operation: str, duration: float, status: str = "success") -> None:
        """Record estimation metrics."""
        self.estimation_duration.labels(operation=operation).observe(duration)
        self.estimation_counter.labels(operation=operation, status=status).inc()

    def record_service_call(self, operation: str, duration: float) -> None:
        """Record an indexing service call."""
        self.service_duration.labels(operation=operation).observe(duration)

    def record_error(self, error_type: str, operation: str) -> None:
        """Record error metrics."""
        self.error_counter.labels(error_type=error_type, operation=operation).inc()

        self.logger.debug("Error recorded", error_type=error_type, operation=operation)

    def get_metrics(self) -> bytes:
        """Get all metrics in Prometheus format."""
        return generate_latest()


# Global metrics collector instance
metrics_collector = MetricsCollector()


def monitor_function(operation: str):
    """Decorator to monitor function execution time and success/failure."""
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                result = func(*args, **kwargs)
                metrics_collector.record_estimation(operation, time.time() - start_time)
                return result
            except Exception as e:
                metrics_collector.record_estimation(operation, time.time() - start_time, status="error")
                metrics_collector.record_error(type(e).__name__, operation)
                raise
        return wrapper
    return decorator


def monitor_service_call(operation: str):
    """Decorator to time calls made to the indexing service."""
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                return func(*args, **kwargs)
            except Exception as e:
                metrics_collector.record_error(type(e).__name__, operation)
                raise
            finally:
                metrics_collector.record_service_call(operation, time.time() - start_time)
        return wrapper
    return decorator


def monitor_coroutine(operation: str):
    """Decorator to monitor coroutine execution time and success/failure."""
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                result = await func(*args, **kwargs)
                metrics_collector.record_estimation(operation, time.time() - start_time)
                return result
            except Exception as e:
                metrics_collector.record_estimation(operation, time.time() - start_time, status="error")
                metrics_collector.record_error(type(e).__name__, operation)
                raise
        return wrapper
    return decorator
