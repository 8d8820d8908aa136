# Node connection settings, read from the environment (or a local .env file).

import math
import os
from dataclasses import dataclass
from urllib.parse import urlparse

from dotenv import find_dotenv, load_dotenv

from src.ens_search.domain.errors import ConfigError

NODE_RPC_ENV = "ETH_NODE_RPC"
NODE_TIMEOUT_ENV = "ETH_NODE_TIMEOUT"
DEFAULT_TIMEOUT_SECONDS = 30.0

WEBSOCKET_SCHEMES = ("ws", "wss")
HTTP_SCHEMES = ("http", "https")


@dataclass(frozen=True)
class NodeSettings:
    rpc_uri: str
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def uses_websocket(self) -> bool:
        return urlparse(self.rpc_uri).scheme.lower() in WEBSOCKET_SCHEMES


def load_settings(environ=None) -> NodeSettings:
    """Build NodeSettings from the process environment.

    Raises:
        ConfigError: if ETH_NODE_RPC is missing or not a ws/wss/http/https URI,
            or ETH_NODE_TIMEOUT is not a positive number.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    rpc_uri = (environ.get(NODE_RPC_ENV) or "").strip()
    if not rpc_uri:
        raise ConfigError(NODE_RPC_ENV, f"Missing {NODE_RPC_ENV} environment variable")

    scheme = urlparse(rpc_uri).scheme.lower()
    if scheme not in WEBSOCKET_SCHEMES + HTTP_SCHEMES:
        raise ConfigError(
            NODE_RPC_ENV,
            f"{NODE_RPC_ENV} must be a ws://, wss://, http:// or https:// URI, got {rpc_uri!r}",
        )

    raw_timeout = (environ.get(NODE_TIMEOUT_ENV) or "").strip()
    timeout_seconds = DEFAULT_TIMEOUT_SECONDS
    if raw_timeout:
        try:
            timeout_seconds = float(raw_timeout)
        except ValueError:
            raise ConfigError(NODE_TIMEOUT_ENV, f"{NODE_TIMEOUT_ENV} must be a number, got {raw_timeout!r}") from None
        if not math.isfinite(timeout_seconds) or timeout_seconds <= 0:
            raise ConfigError(NODE_TIMEOUT_ENV, f"{NODE_TIMEOUT_ENV} must be a positive finite number, got {raw_timeout!r}")

    return NodeSettings(rpc_uri=rpc_uri, timeout_seconds=timeout_seconds)
