from dataclasses import dataclass, field
from typing import Optional, Dict, Any

from ..flex import FlexBool, FlexInt


@dataclass
class Event:
    """Represents a single event entry from /api/s/<site_name>/stat/event."""
    _id: Optional[str] = None
    key: Optional[str] = None
    time: FlexInt = field(default_factory=FlexInt)
    datetime: Optional[str] = None
    msg: Optional[str] = None
    site_id: Optional[str] = None
    site_name: Optional[str] = None
    subsystem: Optional[str] = None
    is_admin: FlexBool = field(default_factory=FlexBool)
    admin: Optional[str] = None
    ip: Optional[str] = None
    is_negative: FlexBool = field(default_factory=FlexBool)

    # Client and access point events
    user: Optional[str] = None
    guest: Optional[str] = None
    hostname: Optional[str] = None
    ap: Optional[str] = None
    ap_name: Optional[str] = None
    ssid: Optional[str] = None
    channel: FlexInt = field(default_factory=FlexInt)
    duration: FlexInt = field(default_factory=FlexInt)
    bytes: FlexInt = field(default_factory=FlexInt)

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)
