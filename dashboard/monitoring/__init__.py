"""
Monitoring Package für das Data Summary Dashboard

Enthält Prometheus Metriken für Collection, Store und API.
"""

from .prometheus_metrics import PrometheusMetrics

__all__ = ["PrometheusMetrics"]
