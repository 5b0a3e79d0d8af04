"""
Core gateway infrastructure.

- BaseGatewayStep: Abstract base class for the AI operations
- extract_json_payload / parse_json_payload: response cleaning

Data models are in gateway.models.core
Custom exceptions are in gateway.core.exceptions
"""

from gateway.core.base import BaseGatewayStep
from gateway.core.json_extraction import extract_json_payload, parse_json_payload

__all__ = [
    "BaseGatewayStep",
    "extract_json_payload",
    "parse_json_payload",
]
