"""
Data Summary Dashboard - Hauptanwendung

Zentraler Einstiegspunkt: Store öffnen, einmalig sammeln, dann die API starten.
"""

import asyncio
import sys
from typing import Optional

import uvicorn

from dashboard.api.main import create_fastapi_app
from dashboard.common.logging_utils import configure_logging, get_logger
from dashboard.core.config import Settings
from dashboard.data_collection.collectors import DataFetcher, JsonApiFetcher
from dashboard.data_collection.orchestrator import DataCollectionOrchestrator
from dashboard.database.manager import DatabaseManager, InitError
from dashboard.monitoring import PrometheusMetrics


class DashboardPipeline:
    """Hauptklasse: Store -> Collection (einmalig) -> Query Service"""

    def __init__(
        self,
        settings: Settings = None,
        *,
        db_manager: Optional[DatabaseManager] = None,
        fetcher: Optional[DataFetcher] = None,
    ):
        self.settings = settings or Settings()
        self.logger = get_logger("dashboard_pipeline")

        self.db_manager = db_manager or DatabaseManager(self.settings.database_url)
        self.fetcher = fetcher or JsonApiFetcher(timeout=self.settings.fetch_timeout_seconds)
        self.metrics: PrometheusMetrics | None = None
        self.collector: DataCollectionOrchestrator | None = None
        self.fastapi_app = None

    def initialize(self):
        """Initialisiert alle Komponenten; InitError ist fatal"""
        self.logger.info("Initializing Data Summary Dashboard...")

        self.db_manager.initialize()

        if self.settings.enable_metrics:
            self.metrics = PrometheusMetrics(self.settings)
            try:
                self.metrics.start_metrics_server(self.settings.metrics_port)
            except OSError as e:
                # metrics are optional; the query service still has to come up
                self.logger.error(
                    f"Metrics server unavailable on port {self.settings.metrics_port}, "
                    f"continuing without it: {e}"
                )

        self.collector = DataCollectionOrchestrator(self.db_manager, self.fetcher, self.metrics)
        self.fastapi_app = create_fastapi_app(self.settings, self.db_manager, metrics=self.metrics)
        self.logger.info("Data Summary Dashboard initialization completed")

    def run_collection(self) -> list[str]:
        """Einmaliger Collection-Lauf über alle konfigurierten Quellen"""
        results = self.collector.collect_all(self.settings.data_sources)
        self.logger.info(f"Data collection completed: {len(results)} summaries collected")
        return results

    async def run_api_server(self):
        """Startet den API Server und blockiert bis zum Prozessende"""
        config = uvicorn.Config(
            self.fastapi_app,
            host=self.settings.api_host,
            port=self.settings.api_port,
            log_level=self.settings.log_level.lower(),
            access_log=True,
        )
        server = uvicorn.Server(config)

        self.logger.info(
            f"Starting API server on {self.settings.api_host}:{self.settings.api_port}"
        )
        await server.serve()

    async def run(self):
        """Hauptausführung der Pipeline"""
        try:
            self.initialize()

            # Fetch units are threads; keep the event loop free while they run
            await asyncio.to_thread(self.run_collection)

            await self.run_api_server()
        finally:
            self.cleanup()

    def cleanup(self):
        """Räumt alle Ressourcen auf"""
        self.db_manager.close()
        self.logger.info("Resource cleanup completed")


async def main():
    """Haupteinstiegspunkt"""
    settings = Settings()
    configure_logging(
        service="dashboard",
        level=settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file_path,
    )

    try:
        pipeline = DashboardPipeline(settings)
        await pipeline.run()
    except InitError as e:
        get_logger("dashboard_pipeline").error(f"Error initializing database: {e}")
        sys.exit(1)


def cli():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nShutdown requested by user")


if __name__ == "__main__":
    cli()
