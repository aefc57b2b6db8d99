"""
Hexun quotelist URL construction.

Pure functions of the security identifier; market-specific strings come from
the MARKET_PROFILES registry.
"""

from tstock.ingestion.config.value_objects import HexunConfig
from tstock.shared.models.securities import SecurityIdentifier

from .markets import profile_for

DEFAULT_CONFIG = HexunConfig()


def code_string(identifier: SecurityIdentifier) -> str:
    """Provider code, e.g. ``szse000001`` or ``HKEX00700``."""
    return profile_for(identifier.market).code_prefix + identifier.code


def region(identifier: SecurityIdentifier) -> str:
    return profile_for(identifier.market).region


def host_prefix(identifier: SecurityIdentifier) -> str:
    return profile_for(identifier.market).host_prefix


def build_url(
    identifier: SecurityIdentifier, config: HexunConfig = DEFAULT_CONFIG
) -> str:
    """
    Compose the quotelist URL for one security.

    The column list is sent verbatim (commas unescaped), as Hexun expects.
    """
    base_url = (
        f"http://{host_prefix(identifier)}.{config.base_host}"
        f"/{region(identifier)}/quotelist"
    )
    return (
        f"{base_url}?code={code_string(identifier)}"
        f"&column={config.column}&callback={config.callback}"
    )
