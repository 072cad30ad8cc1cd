"""
Data Collection Orchestrator für das Data Summary Dashboard

Fan-out über alle konfigurierten Quellen, ein Thread pro Quelle, danach Fan-in.
"""

import queue
import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Optional

from dashboard.common.logging_utils import get_logger
from dashboard.data_collection.collectors.base import DataFetcher, FetchError
from dashboard.database.manager import DatabaseManager, StoreError
from dashboard.monitoring.prometheus_metrics import PrometheusMetrics


class DataCollectionOrchestrator:
    """Orchestriert einen Collection-Lauf über alle Quellen"""

    def __init__(
        self,
        db_manager: DatabaseManager,
        fetcher: DataFetcher,
        metrics: Optional[PrometheusMetrics] = None,
    ):
        self.db_manager = db_manager
        self.fetcher = fetcher
        self.metrics = metrics
        self.logger = get_logger("data_collection_orchestrator")

    def collect_all(self, sources: Iterable[str]) -> list[str]:
        """Sammelt alle Quellen parallel und blockiert, bis jede Quelle abgeschlossen ist.

        Per-source failures are logged and skipped, never raised. Returns the
        summaries that came through the result channel, in completion order;
        this is informational only and does not mirror the store's contents.
        """
        unique_sources = list(dict.fromkeys(sources))
        if not unique_sources:
            self.logger.info("No data sources configured; nothing to collect")
            return []

        self.logger.info(f"Starting collection over {len(unique_sources)} sources")
        start_time = time.monotonic()

        # Buffered for one result per source so no unit ever blocks on put()
        results: queue.Queue[str] = queue.Queue(maxsize=len(unique_sources))

        with ThreadPoolExecutor(
            max_workers=len(unique_sources), thread_name_prefix="collect"
        ) as executor:
            futures = {
                executor.submit(self._collect_source, source, results): source
                for source in unique_sources
            }
            wait(futures)

        for future, source in futures.items():
            exc = future.exception()
            if exc is not None:
                self.logger.error(f"Unexpected failure collecting {source}: {exc}", exc_info=exc)

        collected = []
        while True:
            try:
                collected.append(results.get_nowait())
            except queue.Empty:
                break

        for summary in collected:
            self.logger.info(summary)

        self.logger.info(
            f"Collection finished: {len(collected)}/{len(unique_sources)} sources fetched "
            f"in {time.monotonic() - start_time:.2f}s"
        )
        return collected

    def _collect_source(self, source: str, results: queue.Queue[str]) -> None:
        start_time = time.monotonic()
        try:
            result = self.fetcher.fetch(source)
        except FetchError as e:
            self._record_fetch("error", start_time)
            self.logger.error(str(e))
            return
        self._record_fetch("success", start_time)

        try:
            record = self.db_manager.insert_summary(result.summary)
        except StoreError as e:
            self._record_insert("error")
            self.logger.error(f"Error inserting data for {source}: {e}")
        else:
            self._record_insert("success")
            self.logger.debug(f"Stored record {record.id} for {source}")

        results.put_nowait(result.summary)

    def _record_fetch(self, status: str, start_time: float):
        if self.metrics:
            self.metrics.record_fetch(status, time.monotonic() - start_time)

    def _record_insert(self, status: str):
        if self.metrics:
            self.metrics.record_insert(status)
