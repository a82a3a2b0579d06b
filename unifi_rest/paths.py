"""
UniFi controller API paths.

The ``%s`` in each site-scoped path must be replaced with a site name,
see :func:`site_path`.
"""

# Controller version probe.
API_STATUS_PATH = "/status"
# Legacy controller login.
API_LOGIN_PATH = "/api/login"
# UniFi OS login (UDM, UDR, Cloud Key Gen2 5.12.55+).
API_LOGIN_PATH_NEW = "/api/auth/login"
API_SITE_LIST = "/api/stat/sites"
API_EVENT_PATH = "/api/s/%s/stat/event"
# Intrusion Detection/Prevention System events.
API_EVENT_PATH_IDS = "/api/s/%s/stat/ips/event"
API_EVENT_PATH_ALARMS = "/api/s/%s/list/alarm"
API_ANOMALIES_PATH = "/api/s/%s/stat/anomalies"
API_SITE_DPI = "/api/s/%s/stat/sitedpi"
API_CLIENT_DPI = "/api/s/%s/stat/stadpi"
API_CLIENT_PATH = "/api/s/%s/stat/sta"
API_NETWORK_PATH = "/api/s/%s/rest/networkconf"
API_DEVICE_PATH = "/api/s/%s/stat/device"
# Prepended to every UniFi OS path except login.
API_PREFIX_NEW = "/proxy/network"


def resolve_path(path: str, is_new: bool) -> str:
    """
    Return the concrete API path for the controller's firmware generation.

    Legacy controllers use ``path`` as-is. UniFi OS controllers log in at
    :data:`API_LOGIN_PATH_NEW` and serve everything else under
    :data:`API_PREFIX_NEW`. Already-resolved paths pass through unchanged.

    Args:
        path: A logical API path, before or after site substitution.
        is_new: True for UniFi OS (new-style) firmware.

    Returns:
        The path to request.
    """
    if not is_new:
        return path

    if path == API_LOGIN_PATH:
        return API_LOGIN_PATH_NEW

    if not path.startswith(API_PREFIX_NEW) and path != API_LOGIN_PATH_NEW:
        return API_PREFIX_NEW + path

    return path


def site_path(template: str, site_name: str) -> str:
    """Fill the site placeholder of a site-scoped path template."""
    return template % site_name
