"""
Observability for the quote pipeline: structlog configuration and
layer-aware logger factories. Every fetch outcome, including the ones that
collapse to "no data" in the table, is logged with its failure reason.
"""

from .logging import (
    get_cli_logger,
    get_ingestion_logger,
    get_logger,
    setup_logging,
)

__all__ = [
    # Setup
    "setup_logging",
    # Base
    "get_logger",
    # Layer-specific
    "get_ingestion_logger",
    "get_cli_logger",
]
