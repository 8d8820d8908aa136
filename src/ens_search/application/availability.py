from src.config.logger_config import logger
from src.ens_search.application.ports import AvailabilityOraclePort
from src.ens_search.domain.entities import AvailabilityResult
from src.ens_search.domain.names import is_queryable, normalize_name


async def check_availability(oracle: AvailabilityOraclePort, raw: str) -> AvailabilityResult:
    """Normalize ``raw``, apply the minimum-length rule, then query the oracle.

    Names below the minimum length are reported unavailable without a query.

    Raises:
        OracleError: if the oracle query fails.
    """
    name = normalize_name(raw)
    if not is_queryable(name):
        logger.debug("Short-circuit unavailable name: name={!r}, raw={!r}", name, raw)
        return AvailabilityResult(name=name, available=False, queried=False)

    available = await oracle.is_available(name)
    logger.debug("Oracle answered: name={}, available={}", name, available)
    return AvailabilityResult(name=name, available=bool(available), queried=True)
