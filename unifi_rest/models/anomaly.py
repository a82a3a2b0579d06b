from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..exceptions import UnifiDataError
from ..flex import FlexInt
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass
class Anomaly:
    """
    One anomaly occurrence from /api/s/<site_name>/stat/anomalies.

    The controller reports each anomaly once per device with a list of
    millisecond timestamps; :meth:`from_api` expands that into one
    Anomaly per timestamp.
    """
    datetime: datetime
    anomaly: str
    device_mac: Optional[str] = None
    site_name: Optional[str] = None

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_api(cls, data: Dict[str, Any], site_name: Optional[str] = None) -> List["Anomaly"]:
        """
        Expand one anomaly record into its occurrences.

        Timestamps outside the representable date range are dropped.
        """
        if not isinstance(data, dict):
            raise UnifiDataError(f"Cannot decode {type(data).__name__} into Anomaly")

        timestamps = data.get("timestamps") or []
        if not isinstance(timestamps, list):
            raise UnifiDataError("Anomaly timestamps must be a list")

        extra_fields = {
            k: v for k, v in data.items() if k not in ("anomaly", "mac", "timestamps")
        }
        occurrences = []
        for stamp in timestamps:
            millis = FlexInt.from_value(stamp).val
            try:
                moment = datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
            except (OverflowError, OSError, ValueError):
                logger.debug(f"Skipping out-of-range anomaly timestamp: {stamp!r}")
                continue

            occurrences.append(
                cls(
                    datetime=moment,
                    anomaly=str(data.get("anomaly", "")),
                    device_mac=data.get("mac"),
                    site_name=site_name,
                    _extra_fields=extra_fields,
                )
            )

        return occurrences
