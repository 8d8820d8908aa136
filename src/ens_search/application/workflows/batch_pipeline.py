from dataclasses import dataclass
from time import perf_counter

from tqdm import tqdm

from src.config.logger_config import logger
from src.ens_search.application.availability import check_availability
from src.ens_search.application.contracts import BatchSummary, OracleFailurePolicy
from src.ens_search.application.ports import AvailabilityOraclePort, LineSourcePort, NameSinkPort
from src.ens_search.domain.errors import OracleError


@dataclass(frozen=True)
class BatchConfig:
    on_error: OracleFailurePolicy = OracleFailurePolicy.ABORT
    show_progress: bool = False


class BatchPipeline:
    """Stream lines from a source through the availability check into a sink.

    Lines are handled one at a time: each query finishes before the next line
    is read, so output order always matches input order. The source is closed
    when the run ends, whether it completed or failed.
    """

    def __init__(
        self,
        source: LineSourcePort,
        oracle: AvailabilityOraclePort,
        sink: NameSinkPort,
    ) -> None:
        self.source = source
        self.oracle = oracle
        self.sink = sink

    async def run(self, config: BatchConfig) -> BatchSummary:
        started = perf_counter()
        lines_read = 0
        queried_count = 0
        short_circuit_count = 0
        available_count = 0
        failed_count = 0

        logger.info(
            "Batch run started: source={}, on_error={}",
            self.source.label,
            config.on_error.value,
        )

        try:
            for raw in tqdm(
                self.source,
                desc="Checking names",
                unit="name",
                leave=False,
                disable=not config.show_progress,
            ):
                lines_read += 1
                try:
                    result = await check_availability(self.oracle, raw)
                except OracleError as exc:
                    if config.on_error is OracleFailurePolicy.ABORT:
                        logger.error(
                            "Batch run aborted on oracle failure: source={}, line={}, name={}, error={}",
                            self.source.label,
                            lines_read,
                            exc.name,
                            exc,
                        )
                        raise
                    failed_count += 1
                    logger.warning(
                        "Skipping name after oracle failure: source={}, line={}, name={}, error={}",
                        self.source.label,
                        lines_read,
                        exc.name,
                        exc,
                    )
                    continue

                if result.queried:
                    queried_count += 1
                else:
                    short_circuit_count += 1
                if result.available:
                    self.sink.write_name(result.name)
                    available_count += 1
        finally:
            self.source.close()

        summary = BatchSummary(
            source_label=self.source.label,
            lines_read=lines_read,
            queried_count=queried_count,
            short_circuit_count=short_circuit_count,
            available_count=available_count,
            failed_count=failed_count,
            duration_ms=int((perf_counter() - started) * 1000),
        )
        logger.info(
            "Batch run completed: {}",
            summary.to_dict(),
        )
        return summary
