import asyncio
import json
from pathlib import Path
from typing import Any

import aiohttp
from web3 import AsyncHTTPProvider, AsyncWeb3, WebSocketProvider
from web3.exceptions import Web3Exception
from websockets.exceptions import WebSocketException

from src.config.logger_config import logger
from src.config.settings import NodeSettings
from src.ens_search.application.ports import AvailabilityOraclePort
from src.ens_search.domain.errors import OracleError

# ENS ETH registrar controller on mainnet.
CONTROLLER_ADDRESS = "0x283Af0B28c62C092C9727F1Ee09c02CA627EB7F5"
CONTROLLER_ABI_PATH = Path(__file__).with_name("controller_abi.json")

TRANSPORT_ERRORS = (
    Web3Exception,
    WebSocketException,
    aiohttp.ClientError,
    asyncio.TimeoutError,
    OSError,
    ValueError,
)


def load_controller_abi(path: Path = CONTROLLER_ABI_PATH) -> list[dict[str, Any]]:
    return json.loads(path.read_text(encoding="utf-8"))


class ControllerAvailabilityOracle(AvailabilityOraclePort):
    """Availability oracle backed by the controller's ``available(string)`` view.

    Use as an async context manager, or call ``connect()`` / ``close()``.
    """

    def __init__(
        self,
        settings: NodeSettings,
        address: str = CONTROLLER_ADDRESS,
        abi: list[dict[str, Any]] | None = None,
    ) -> None:
        self.settings = settings
        self.address = AsyncWeb3.to_checksum_address(address)
        self.abi = abi if abi is not None else load_controller_abi()
        self._w3: AsyncWeb3 | None = None
        self._session: aiohttp.ClientSession | None = None
        self._contract = None

    async def connect(self, name: str = "") -> None:
        if self._contract is not None:
            return
        uri = self.settings.rpc_uri
        try:
            if self.settings.uses_websocket:
                self._w3 = AsyncWeb3(
                    WebSocketProvider(uri, request_timeout=self.settings.timeout_seconds)
                )
                await self._w3.provider.connect()
            else:
                provider = AsyncHTTPProvider(uri, request_kwargs={"timeout": self.settings.timeout_seconds})
                self._session = aiohttp.ClientSession(
                    timeout=aiohttp.ClientTimeout(total=self.settings.timeout_seconds)
                )
                await provider.cache_async_session(self._session)
                self._w3 = AsyncWeb3(provider)
        except TRANSPORT_ERRORS as exc:
            await self.close()
            raise OracleError(name, f"cannot connect to node {uri}: {exc}") from exc

        self._contract = self._w3.eth.contract(address=self.address, abi=self.abi)
        logger.info(
            "Controller oracle connected: transport={}, address={}",
            "websocket" if self.settings.uses_websocket else "http",
            self.address,
        )

    async def is_available(self, name: str) -> bool:
        if self._contract is None:
            await self.connect(name)
        try:
            available = await self._contract.functions.available(name).call()
        except TRANSPORT_ERRORS as exc:
            raise OracleError(name, f"availability query failed for {name!r}: {exc}") from exc
        return bool(available)

    async def close(self) -> None:
        w3, session = self._w3, self._session
        self._w3 = None
        self._session = None
        self._contract = None
        try:
            if w3 is not None and self.settings.uses_websocket:
                await w3.provider.disconnect()
        finally:
            if session is not None:
                await session.close()

    async def __aenter__(self) -> "ControllerAvailabilityOracle":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


def create_oracle(settings: NodeSettings) -> ControllerAvailabilityOracle:
    return ControllerAvailabilityOracle(settings=settings)
