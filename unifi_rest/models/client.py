from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..flex import FlexBool, FlexInt


@dataclass
class Client:
    """Represents a client (user device) connected to the UniFi network, from /api/s/<site_name>/stat/sta.

    Attributes:
        _id: Unique identifier for the client.
        mac: MAC address of the client.
        site_id: Identifier for the site the client is connected to.
        site_name: Short name of the site, filled in by the client library.
        oui: Organizationally Unique Identifier.
        first_seen: Timestamp of when the client was first seen.
        last_seen: Timestamp of when the client was last seen.
        ip: IP address assigned to the client.
        is_guest: Indicates if the client is a guest.
        is_wired: Indicates if the client is connected via wired connection.
        hostname: Hostname of the client.
        name: Name of the client.
        noted: Indicates if the client has been noted.
        note: Additional notes about the client.
        network: Name of the network the client is on.
        network_id: Identifier for the network.
        ap_mac: MAC of the access point a wireless client is associated with.
        sw_mac: MAC of the switch a wired client is plugged into.
        sw_port: Switch port of a wired client.
    """
    mac: Optional[str] = None
    _id: Optional[str] = None
    site_id: Optional[str] = None
    site_name: Optional[str] = None
    oui: Optional[str] = None
    first_seen: FlexInt = field(default_factory=FlexInt)
    last_seen: FlexInt = field(default_factory=FlexInt)
    ip: Optional[str] = None
    is_guest: FlexBool = field(default_factory=FlexBool)
    is_wired: FlexBool = field(default_factory=FlexBool)
    hostname: Optional[str] = None
    name: Optional[str] = None
    noted: FlexBool = field(default_factory=FlexBool)
    note: Optional[str] = None
    usergroup_id: Optional[str] = None
    network: Optional[str] = None
    network_id: Optional[str] = None
    fixed_ip: Optional[str] = None
    use_fixedip: FlexBool = field(default_factory=FlexBool)
    authorized: FlexBool = field(default_factory=FlexBool)

    # Wireless association
    essid: Optional[str] = None
    bssid: Optional[str] = None
    ap_mac: Optional[str] = None
    radio: Optional[str] = None
    radio_proto: Optional[str] = None
    channel: FlexInt = field(default_factory=FlexInt)
    rssi: FlexInt = field(default_factory=FlexInt)
    signal: FlexInt = field(default_factory=FlexInt)
    noise: FlexInt = field(default_factory=FlexInt)

    # Wired attachment
    sw_mac: Optional[str] = None
    sw_port: FlexInt = field(default_factory=FlexInt)
    vlan: FlexInt = field(default_factory=FlexInt)

    # Counters
    uptime: FlexInt = field(default_factory=FlexInt)
    rx_bytes: FlexInt = field(default_factory=FlexInt)
    tx_bytes: FlexInt = field(default_factory=FlexInt)
    rx_packets: FlexInt = field(default_factory=FlexInt)
    tx_packets: FlexInt = field(default_factory=FlexInt)
    rx_bytes_r: FlexInt = field(default_factory=FlexInt, metadata={"unifi_api_field": "rx_bytes-r"})
    tx_bytes_r: FlexInt = field(default_factory=FlexInt, metadata={"unifi_api_field": "tx_bytes-r"})
    wired_rx_bytes: FlexInt = field(default_factory=FlexInt, metadata={"unifi_api_field": "wired-rx_bytes"})
    wired_tx_bytes: FlexInt = field(default_factory=FlexInt, metadata={"unifi_api_field": "wired-tx_bytes"})

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)
