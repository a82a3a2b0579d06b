"""
Models for UniFi sites.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..flex import FlexBool, FlexInt


@dataclass
class Site:
    """
    Represents a UniFi site.

    A site in UniFi represents a logical grouping of devices and network segments,
    typically representing a physical location or organization. ``name`` is the
    short name used in site-scoped API paths; ``desc`` is the display name.
    """
    name: Optional[str] = None
    desc: Optional[str] = None
    health: Optional[List[Dict[str, Any]]] = None

    _id: Optional[str] = None
    anonymous_id: Optional[str] = None
    attr_hidden_id: Optional[str] = None
    attr_no_delete: FlexBool = field(default_factory=FlexBool)
    num_new_alarms: FlexInt = field(default_factory=FlexInt)
    role: Optional[str] = None

    # The site list does not name its own site; set to ``name`` on decode.
    site_name: Optional[str] = None

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self):
        if not self.site_name:
            self.site_name = self.name

    def get_subsystem(self, subsystem_name: str) -> Optional[Dict[str, Any]]:
        """
        Get health data for a specific subsystem by name.

        Args:
            subsystem_name: Name of the subsystem to retrieve (wlan, lan, wan, www, vpn).

        Returns:
            Subsystem data dictionary if found, None otherwise
        """
        if not self.health:
            return None

        for subsystem_data in self.health:
            if isinstance(subsystem_data, dict) and subsystem_data.get('subsystem') == subsystem_name:
                return subsystem_data
        return None
