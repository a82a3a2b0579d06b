from dataclasses import dataclass, field
from typing import Optional, Dict, Any

from ..flex import FlexBool, FlexInt


@dataclass
class IDS:
    """
    An Intrusion Detection/Prevention event from /api/s/<site_name>/stat/ips/event.

    Requires a gateway with IDS/IPS enabled.
    """
    _id: Optional[str] = None
    key: Optional[str] = None
    msg: Optional[str] = None
    site_id: Optional[str] = None
    site_name: Optional[str] = None
    archived: FlexBool = field(default_factory=FlexBool)
    time: FlexInt = field(default_factory=FlexInt)
    timestamp: FlexInt = field(default_factory=FlexInt)
    datetime: Optional[str] = None
    event_type: Optional[str] = None
    catname: Optional[str] = None

    # Flow
    proto: Optional[str] = None
    app_proto: Optional[str] = None
    src_ip: Optional[str] = None
    src_mac: Optional[str] = None
    src_port: FlexInt = field(default_factory=FlexInt)
    dest_ip: Optional[str] = None
    dst_mac: Optional[str] = None
    dest_port: FlexInt = field(default_factory=FlexInt)
    in_iface: Optional[str] = None
    host: Optional[str] = None

    # Matching rule
    inner_alert_action: Optional[str] = None
    inner_alert_category: Optional[str] = None
    inner_alert_signature: Optional[str] = None
    inner_alert_signature_id: FlexInt = field(default_factory=FlexInt)
    inner_alert_severity: FlexInt = field(default_factory=FlexInt)
    inner_alert_gid: FlexInt = field(default_factory=FlexInt)
    inner_alert_rev: FlexInt = field(default_factory=FlexInt)

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)
