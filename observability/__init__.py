"""
Observability package.

Provides logging, monitoring, and distributed tracing via Logfire.
"""
from observability.logfire_config import LogfireConfig

__all__ = ["LogfireConfig"]
