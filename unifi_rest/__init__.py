"""
Typed client for the UniFi controller REST API.

This package provides a Python interface to legacy and UniFi OS controllers,
resolving API paths for either firmware generation and decoding the
controller's loosely typed JSON into dataclasses built on FlexInt and FlexBool.
"""

from .api_client import UnifiController
from .config import Config, Settings
from .flex import FlexBool, FlexInt
from .logging import discard_logs, logger_sink
from .paths import resolve_path, site_path
from .models import (
    ServerStatus,
    Site,
    Client,
    Device,
    Devices,
    LLDPEntry,
    Event,
    IDS,
    Alarm,
    Anomaly,
    DPIData,
    DPITable,
    Network,
)
from .exceptions import (
    UnifiControllerError,
    UnifiAuthenticationError,
    UnifiAPIError,
    UnifiDataError,
    UnifiDecodeError,
)

__version__ = "0.1.0"

__all__ = [
    "UnifiController",
    "Config",
    "Settings",
    "FlexBool",
    "FlexInt",
    "discard_logs",
    "logger_sink",
    "resolve_path",
    "site_path",
    "ServerStatus",
    "Site",
    "Client",
    "Device",
    "Devices",
    "LLDPEntry",
    "Event",
    "IDS",
    "Alarm",
    "Anomaly",
    "DPIData",
    "DPITable",
    "Network",
    "UnifiControllerError",
    "UnifiAuthenticationError",
    "UnifiAPIError",
    "UnifiDataError",
    "UnifiDecodeError",
]
