"""
Models for UniFi devices and related objects.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..flex import FlexBool, FlexInt
from ..utils import decode_model


# Device ``type`` values and the Devices list each one lands in.
DEVICE_TYPE_GROUPS = {
    "uap": "uaps",
    "ugw": "usgs",
    "usg": "usgs",
    "usw": "usws",
    "udm": "udms",
}


@dataclass
class LLDPEntry:
    """
    LLDP (Link Layer Discovery Protocol) information entry for a device port.

    Contains information about connected neighbors discovered via LLDP.
    """
    chassis_descr: Optional[str] = None
    chassis_id: Optional[str] = None
    chassis_id_subtype: Optional[str] = None
    local_port_idx: FlexInt = field(default_factory=FlexInt)
    local_port_name: Optional[str] = None
    port_descr: Optional[str] = None
    port_id: Optional[str] = None
    is_wired: FlexBool = field(default_factory=FlexBool)

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class Device:
    """
    Represents a UniFi network device.

    This class models a device managed by a UniFi controller: an access point (uap),
    security gateway (ugw/usg), switch (usw) or dream machine (udm).
    """
    # Basic device identification
    mac: Optional[str] = None
    name: Optional[str] = None
    ip: Optional[str] = None
    model: Optional[str] = None
    type: Optional[str] = None
    serial: Optional[str] = None

    # UniFi controller identification
    _id: Optional[str] = None
    device_id: Optional[str] = None
    site_id: Optional[str] = None
    site_name: Optional[str] = None

    # Status information
    version: Optional[str] = None
    adopted: FlexBool = field(default_factory=FlexBool)
    state: FlexInt = field(default_factory=FlexInt)
    uptime: FlexInt = field(default_factory=FlexInt)
    last_seen: FlexInt = field(default_factory=FlexInt)
    upgradable: FlexBool = field(default_factory=FlexBool)
    upgrade_to_firmware: Optional[str] = None
    locating: FlexBool = field(default_factory=FlexBool)
    overheating: FlexBool = field(default_factory=FlexBool)
    general_temperature: FlexInt = field(default_factory=FlexInt)

    # Network information
    inform_ip: Optional[str] = None
    inform_url: Optional[str] = None
    gateway_mac: Optional[str] = None
    uplink: Optional[Dict[str, Any]] = None

    # Statistics
    num_sta: FlexInt = field(default_factory=FlexInt)
    user_num_sta: FlexInt = field(default_factory=FlexInt, metadata={"unifi_api_field": "user-num_sta"})
    guest_num_sta: FlexInt = field(default_factory=FlexInt, metadata={"unifi_api_field": "guest-num_sta"})
    bytes: FlexInt = field(default_factory=FlexInt)
    rx_bytes: FlexInt = field(default_factory=FlexInt)
    tx_bytes: FlexInt = field(default_factory=FlexInt)
    rx_bytes_r: FlexInt = field(default_factory=FlexInt, metadata={"unifi_api_field": "rx_bytes-r"})
    tx_bytes_r: FlexInt = field(default_factory=FlexInt, metadata={"unifi_api_field": "tx_bytes-r"})
    system_stats: Optional[Dict[str, Any]] = field(default=None, metadata={"unifi_api_field": "system-stats"})

    # Table data
    port_table: Optional[List[Dict[str, Any]]] = None
    radio_table: Optional[List[Dict[str, Any]]] = None
    radio_table_stats: Optional[List[Dict[str, Any]]] = None
    vap_table: Optional[List[Dict[str, Any]]] = None
    lldp_table: List[Any] = field(default_factory=list, repr=False)

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self):
        # LLDP neighbours arrive as plain objects; decode them with the same tolerant rules.
        self.lldp_table = [
            decode_model(entry, LLDPEntry) if isinstance(entry, dict) else entry
            for entry in self.lldp_table or []
        ]


@dataclass
class Devices:
    """
    All devices from a controller, grouped by kind.

    Contains access points, security gateways, switches and dream machines.
    """
    uaps: List[Device] = field(default_factory=list)
    usgs: List[Device] = field(default_factory=list)
    usws: List[Device] = field(default_factory=list)
    udms: List[Device] = field(default_factory=list)

    def add(self, device: Device) -> bool:
        """
        File a device under the list matching its ``type``.

        Returns:
            False if the type is unknown and the device was not added.
        """
        group = DEVICE_TYPE_GROUPS.get((device.type or "").lower())
        if group is None:
            return False

        getattr(self, group).append(device)
        return True

    def all(self) -> List[Device]:
        """Every device, in uap, usg, usw, udm order."""
        return self.uaps + self.usgs + self.usws + self.udms

    def __len__(self) -> int:
        return len(self.uaps) + len(self.usgs) + len(self.usws) + len(self.udms)
