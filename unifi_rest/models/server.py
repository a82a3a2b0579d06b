from dataclasses import dataclass, field
from typing import Any, Dict

from ..flex import FlexBool


@dataclass
class ServerStatus:
    """The ``meta`` object of the controller's /status endpoint."""
    up: FlexBool = field(default_factory=FlexBool)
    server_version: str = ""
    uuid: str = ""

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)
