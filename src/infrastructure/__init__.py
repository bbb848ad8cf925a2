"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- logging/: structlog console adapter (LoggerProtocol)
- metrics/: prometheus-client adapter (MetricsProtocol)
"""
