from dataclasses import dataclass, field
from typing import Optional, Dict, Any

from ..flex import FlexBool, FlexInt


@dataclass
class Alarm:
    """Represents a single alarm entry from /api/s/<site_name>/list/alarm."""
    _id: Optional[str] = None
    key: Optional[str] = None
    time: FlexInt = field(default_factory=FlexInt)
    datetime: Optional[str] = None
    msg: Optional[str] = None
    site_id: Optional[str] = None
    site_name: Optional[str] = None
    archived: FlexBool = field(default_factory=FlexBool)
    subsystem: Optional[str] = None
    is_negative: FlexBool = field(default_factory=FlexBool)

    # Threat alarms raised by the gateway carry the IDS fields as well
    src_ip: Optional[str] = None
    dest_ip: Optional[str] = None
    catname: Optional[str] = None
    inner_alert_signature: Optional[str] = None
    inner_alert_severity: FlexInt = field(default_factory=FlexInt)

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)
