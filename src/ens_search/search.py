import sys
from typing import TextIO

from src.config.logger_config import logger
from src.ens_search.application.contracts import BatchSummary, LookupResult, OracleFailurePolicy
from src.ens_search.application.ports import AvailabilityOraclePort
from src.ens_search.application.use_cases.single_lookup import SingleLookupUseCase
from src.ens_search.application.workflows.batch_pipeline import BatchConfig, BatchPipeline
from src.ens_search.infrastructure.sinks.stream_sink import StreamNameSink
from src.ens_search.infrastructure.sources import open_line_source


async def run_single(
    name: str,
    oracle: AvailabilityOraclePort,
    out: TextIO | None = None,
) -> LookupResult:
    result = await SingleLookupUseCase(oracle=oracle).execute(name)
    stream = out if out is not None else sys.stdout
    stream.write(result.message + "\n")
    stream.flush()
    return result


async def run_batch(
    path: str,
    oracle: AvailabilityOraclePort,
    out: TextIO | None = None,
    on_error: OracleFailurePolicy = OracleFailurePolicy.ABORT,
    show_progress: bool = False,
) -> BatchSummary:
    source = open_line_source(path)
    logger.debug("Batch source ready: path={}, label={}", path, source.label)
    pipeline = BatchPipeline(source=source, oracle=oracle, sink=StreamNameSink(out))
    return await pipeline.run(BatchConfig(on_error=on_error, show_progress=show_progress))
