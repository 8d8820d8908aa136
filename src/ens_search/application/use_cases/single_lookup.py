from src.config.logger_config import logger
from src.ens_search.application.availability import check_availability
from src.ens_search.application.contracts import LookupResult
from src.ens_search.application.ports import AvailabilityOraclePort
from src.ens_search.domain.names import format_eth_name


class SingleLookupUseCase:
    def __init__(self, oracle: AvailabilityOraclePort) -> None:
        self.oracle = oracle

    async def execute(self, name: str) -> LookupResult:
        logger.info("Single lookup started: name={!r}", name)
        result = await check_availability(self.oracle, name)
        verdict = "is available" if result.available else "is not available"
        lookup = LookupResult(
            name=name,
            canonical_name=result.name,
            available=result.available,
            message=f"{format_eth_name(name)} {verdict}",
        )
        logger.info(
            "Single lookup completed: name={!r}, canonical_name={}, available={}, queried={}",
            name,
            result.name,
            result.available,
            result.queried,
        )
        return lookup
