"""
Monitoring and observability infrastructure.
"""

from gardien.infrastructure.monitoring import metrics
from gardien.infrastructure.monitoring.logger import (
    get_logger,
    get_request_id,
    set_request_id,
    setup_logging,
)

__all__ = [
    "metrics",
    "get_logger",
    "get_request_id",
    "set_request_id",
    "setup_logging",
]
