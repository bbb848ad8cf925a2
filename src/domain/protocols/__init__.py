"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance
(PEP 544 structural subtyping).

Usage:
    from src.domain.protocols import LoggerProtocol, MetricsProtocol
"""

from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.metrics_protocol import MetricsProtocol

__all__ = [
    "LoggerProtocol",
    "MetricsProtocol",
]
