MIN_NAME_LENGTH = 3
ETH_SUFFIX = ".eth"


def normalize_name(raw: str) -> str:
    """Canonical query key: trimmed, lower-cased, alphanumeric characters only."""
    return "".join(ch for ch in raw.strip().lower() if ch.isalnum())


def is_queryable(name: str) -> bool:
    # Names shorter than the minimum are reserved by the registry.
    return len(name) >= MIN_NAME_LENGTH


def format_eth_name(name: str) -> str:
    return f"{name}{ETH_SUFFIX}"
