"""
Data models for UniFi controller API responses.

.. warning::
    The dataclasses defined in this module represent commonly observed fields in the
    UniFi Controller's **undocumented** private API responses. The actual data returned
    varies with controller version, device model and firmware.

    Fields the controller encodes inconsistently are typed :class:`~unifi_rest.flex.FlexInt`
    or :class:`~unifi_rest.flex.FlexBool`, so ``"5"``, ``5`` and ``null`` all decode to a
    number and ``true``, ``"1"`` and ``"enabled"`` all decode to True.

    Missing fields keep their default (``None`` or an empty Flex value). Undocumented
    fields are captured in the ``_extra_fields`` dictionary attribute on each instance.
"""

from .server import ServerStatus
from .device import Device, Devices, LLDPEntry
from .site import Site
from .client import Client
from .event import Event
from .ids import IDS
from .alarm import Alarm
from .anomaly import Anomaly
from .dpi import DPIData, DPITable
from .network import Network

__all__ = [
    "ServerStatus",
    "Device",
    "Devices",
    "LLDPEntry",
    "Site",
    "Client",
    "Event",
    "IDS",
    "Alarm",
    "Anomaly",
    "DPIData",
    "DPITable",
    "Network",
]
