from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..flex import FlexInt
from ..utils import decode_model


@dataclass
class DPIData:
    """Traffic counters for one application or category."""
    app: FlexInt = field(default_factory=FlexInt)
    cat: FlexInt = field(default_factory=FlexInt)
    rx_bytes: FlexInt = field(default_factory=FlexInt)
    rx_packets: FlexInt = field(default_factory=FlexInt)
    tx_bytes: FlexInt = field(default_factory=FlexInt)
    tx_packets: FlexInt = field(default_factory=FlexInt)
    known_clients: FlexInt = field(default_factory=FlexInt)
    clients: Optional[List[Dict[str, Any]]] = None

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class DPITable:
    """
    Deep Packet Inspection statistics for a site (/stat/sitedpi) or one
    client (/stat/stadpi, with ``mac`` set).
    """
    mac: Optional[str] = None
    name: Optional[str] = None
    site_name: Optional[str] = None
    by_app: List[Any] = field(default_factory=list)
    by_cat: List[Any] = field(default_factory=list)
    last_updated: FlexInt = field(default_factory=FlexInt)

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self):
        self.by_app = [
            decode_model(entry, DPIData) if isinstance(entry, dict) else entry
            for entry in self.by_app or []
        ]
        self.by_cat = [
            decode_model(entry, DPIData) if isinstance(entry, dict) else entry
            for entry in self.by_cat or []
        ]
