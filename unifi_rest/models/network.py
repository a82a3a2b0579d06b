from dataclasses import dataclass, field
from typing import Optional, Dict, Any

from ..flex import FlexBool, FlexInt


@dataclass
class Network:
    """Represents a network configuration (LAN, VLAN, WAN, VPN) from /api/s/<site_name>/rest/networkconf."""

    _id: Optional[str] = None
    name: Optional[str] = None
    site_id: Optional[str] = None
    site_name: Optional[str] = None
    enabled: FlexBool = field(default_factory=FlexBool)
    purpose: Optional[str] = None  # e.g., 'corporate', 'vlan-only', 'guest', 'wan'

    is_nat: FlexBool = field(default_factory=FlexBool)
    vlan_enabled: FlexBool = field(default_factory=FlexBool)
    vlan: FlexInt = field(default_factory=FlexInt)  # string on some firmware
    networkgroup: Optional[str] = None  # e.g., 'LAN', 'WAN', 'VPN'
    igmp_snooping: FlexBool = field(default_factory=FlexBool)

    # Corporate network specific fields
    ip_subnet: Optional[str] = None
    domain_name: Optional[str] = None
    dhcpd_enabled: FlexBool = field(default_factory=FlexBool)
    dhcpd_start: Optional[str] = None
    dhcpd_stop: Optional[str] = None
    dhcpd_leasetime: FlexInt = field(default_factory=FlexInt)  # Seconds
    dhcpd_dns_enabled: FlexBool = field(default_factory=FlexBool)
    dhcpd_dns_1: Optional[str] = None
    dhcpd_dns_2: Optional[str] = None
    dhcp_relay_enabled: FlexBool = field(default_factory=FlexBool)

    # WAN networks
    wan_type: Optional[str] = None
    wan_ip: Optional[str] = None
    wan_gateway: Optional[str] = None

    attr_hidden_id: Optional[str] = None
    attr_no_delete: FlexBool = field(default_factory=FlexBool)

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)
