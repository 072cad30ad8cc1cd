"""
Prometheus Metrics für das Data Summary Dashboard

Implementiert Metriken-Sammlung und -Export für Monitoring.
"""

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    Info,
    generate_latest,
    start_http_server,
)

from dashboard import __version__
from dashboard.common.logging_utils import get_logger
from dashboard.core.config import Settings


class PrometheusMetrics:
    """Prometheus Metriken für das Data Summary Dashboard"""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.logger = get_logger("prometheus_metrics")

        # Custom Registry für bessere Kontrolle
        self.registry = CollectorRegistry()

        # API Metriken
        self.api_requests_total = Counter(
            "api_requests_total",
            "Total number of API requests",
            ["method", "endpoint", "status"],
            registry=self.registry,
        )

        self.api_request_duration = Histogram(
            "api_request_duration_seconds",
            "API request duration in seconds",
            ["method", "endpoint"],
            registry=self.registry,
        )

        # Data Collection Metriken
        self.fetch_attempts_total = Counter(
            "fetch_attempts_total",
            "Total number of source fetch attempts",
            ["status"],
            registry=self.registry,
        )

        self.fetch_duration = Histogram(
            "fetch_duration_seconds",
            "Source fetch duration in seconds",
            registry=self.registry,
        )

        # Store Metriken
        self.store_inserts_total = Counter(
            "store_inserts_total",
            "Total number of summary record inserts",
            ["status"],
            registry=self.registry,
        )

        # Application Info
        self.app_info = Info(
            "data_summary_dashboard",
            "Data Summary Dashboard application info",
            registry=self.registry,
        )
        self.app_info.info(
            {
                "version": __version__,
                "environment": self.settings.environment,
                "sources": str(len(self.settings.data_sources)),
            }
        )

    def start_metrics_server(self, port: int = 8008):
        """Startet Prometheus Metrics HTTP Server"""
        try:
            start_http_server(port, registry=self.registry)
            self.logger.info(f"Prometheus metrics server started on port {port}")
        except OSError as e:
            self.logger.error(f"Failed to start metrics server: {e}")
            raise

    def record_api_request(self, method: str, endpoint: str, status: str, duration: float):
        """Zeichnet API Request auf"""
        self.api_requests_total.labels(method=method, endpoint=endpoint, status=status).inc()
        self.api_request_duration.labels(method=method, endpoint=endpoint).observe(duration)

    def record_fetch(self, status: str, duration: float):
        """Zeichnet einen Fetch-Versuch auf"""
        self.fetch_attempts_total.labels(status=status).inc()
        self.fetch_duration.observe(duration)

    def record_insert(self, status: str):
        self.store_inserts_total.labels(status=status).inc()

    def export_metrics(self) -> str:
        """Exportiert Metriken im Prometheus Text-Format"""
        return generate_latest(self.registry).decode("utf-8")
