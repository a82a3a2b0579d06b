import json
import time
import base64
import binascii
from datetime import datetime, timedelta

import requests
import urllib3

from typing import List, Dict, Any, Optional, Union

from .config import Config
from .models.server import ServerStatus
from .models.site import Site
from .models.device import Device, Devices
from .models.client import Client
from .models.event import Event
from .models.ids import IDS
from .models.alarm import Alarm
from .models.anomaly import Anomaly
from .models.dpi import DPITable
from .models.network import Network
from .logging import get_logger, log_api_response
from .paths import (
    API_ANOMALIES_PATH,
    API_CLIENT_DPI,
    API_CLIENT_PATH,
    API_DEVICE_PATH,
    API_EVENT_PATH,
    API_EVENT_PATH_ALARMS,
    API_EVENT_PATH_IDS,
    API_LOGIN_PATH,
    API_NETWORK_PATH,
    API_SITE_DPI,
    API_SITE_LIST,
    API_STATUS_PATH,
    resolve_path,
    site_path,
)
from .utils import decode_model, decode_models
from .exceptions import (
    UnifiAuthenticationError,
    UnifiAPIError,
    UnifiDataError,
)

logger = get_logger(__name__)

CSRF_HEADER = "X-CSRF-Token"

Params = Union[str, Dict[str, Any], None]


def _to_millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


class UnifiController:
    """
    An authenticated session to a UniFi controller.

    The handle owns an HTTP session (``session``), the caller's configuration
    (``config``), the cached ``/status`` record (``server``) and the CSRF token
    (``csrf``) UniFi OS hands out at login. Use :meth:`connect` to build one
    that is logged in and ready for requests.

    Note:
        This client interacts with the UniFi Controller's **undocumented** private API.
        Response structures and endpoint behavior may change without notice between
        controller versions. Check the ``_extra_fields`` attribute on returned dataclass
        objects for unexpected data.
    """

    def __init__(self, config: Config, session: Optional[requests.Session] = None):
        """
        Initialize the client without touching the network.

        Args:
            config: Credentials, controller URL, TLS and firmware flags, log sinks.
            session: Optional pre-built HTTP session. A new one is created when omitted.
        """
        logger.debug(
            f"Initializing UnifiController with URL: {config.url}, new: {config.new}"
        )
        self.config = config
        self.session = session if session is not None else requests.Session()
        self.session.verify = config.verify_ssl
        self.server: Optional[ServerStatus] = None
        self.csrf = ""

        if not config.verify_ssl:
            logger.warning(
                "SSL certificate verification is disabled. This is not recommended for production use."
            )
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    @classmethod
    def connect(cls, config: Config, session: Optional[requests.Session] = None) -> "UnifiController":
        """
        Build a client, detect the firmware generation, log in and fetch the server status.

        Raises:
            UnifiAPIError: If the controller cannot be reached.
            UnifiAuthenticationError: If the credentials are rejected.
            UnifiDataError: If the status response cannot be decoded.
        """
        controller = cls(config, session=session)
        controller.check_new_style_api()
        controller.login()
        controller.get_server_data()
        return controller

    def close(self) -> None:
        """Release the HTTP session."""
        self.session.close()

    def __enter__(self) -> "UnifiController":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # Configuration and status accessors.

    @property
    def url(self) -> str:
        return self.config.url

    @property
    def user(self) -> str:
        return self.config.user

    @property
    def verify_ssl(self) -> bool:
        return self.config.verify_ssl

    @property
    def new(self) -> bool:
        """True when the controller runs UniFi OS firmware."""
        return self.config.new

    @property
    def up(self) -> bool:
        return self.server is not None and self.server.up.val

    @property
    def server_version(self) -> str:
        return self.server.server_version if self.server is not None else ""

    @property
    def uuid(self) -> str:
        return self.server.uuid if self.server is not None else ""

    def path(self, api_path: str) -> str:
        """Return the concrete path for ``api_path`` on this controller's firmware."""
        return resolve_path(api_path, self.config.new)

    def check_new_style_api(self) -> bool:
        """
        Detect UniFi OS firmware and set ``config.new`` accordingly.

        UniFi OS answers the bare base URL with 200; legacy controllers redirect
        to their login page.

        Returns:
            The detected firmware flag.

        Raises:
            UnifiAPIError: If the controller cannot be reached.
        """
        uri = f"{self.config.url}/"
        logger.debug(f"Probing {uri} for a UniFi OS controller")
        try:
            response = self.session.get(
                uri,
                allow_redirects=False,
                verify=self.config.verify_ssl,
                timeout=self.config.timeout,
            )
        except requests.exceptions.RequestException as e:
            error_msg = f"Controller probe at {uri} failed: {e}"
            logger.error(error_msg)
            self.config.error_log("%s", error_msg)
            raise UnifiAPIError(error_msg) from e

        if response.status_code == 200:
            self.config.new = True
            self.config.debug_log("Using UniFi OS API paths for %s", self.config.url)

        return self.config.new

    def login(self) -> None:
        """
        Authenticate with the controller.

        UniFi OS controllers use /api/auth/login; legacy controllers use
        /api/login. The session cookie lands in ``session``; the CSRF token,
        when the controller sends one, lands in ``csrf``.

        Raises:
            UnifiAuthenticationError: If authentication fails.
        """
        start = time.monotonic()
        payload = {"username": self.config.user, "password": self.config.password}
        request = self.uni_req(API_LOGIN_PATH, payload)

        logger.debug(
            f"Attempting authentication with username: {self.config.user}")
        try:
            response = self.session.send(
                request, verify=self.config.verify_ssl, timeout=self.config.timeout
            )
        except requests.exceptions.RequestException as e:
            error_msg = f"Authentication failed: {e}"
            logger.error(error_msg)
            self.config.error_log("%s", error_msg)
            raise UnifiAuthenticationError(error_msg) from e

        if response.status_code != 200:
            error_msg = (
                f"Authentication failed (user: {self.config.user}): "
                f"{request.url} (status: {response.status_code})"
            )
            logger.warning(error_msg)
            self.config.error_log("%s", error_msg)
            raise UnifiAuthenticationError(error_msg)

        self._update_csrf(response)
        if not self.csrf:
            self.csrf = self._extract_csrf_token() or ""

        logger.info("Successfully connected to Unifi controller.")
        self.config.debug_log(
            "Logged into %s in %.3fs", self.config.url, time.monotonic() - start
        )

    def get_server_data(self) -> ServerStatus:
        """
        Fetch the controller's /status record and cache it on the handle.

        Returns:
            The refreshed status.

        Raises:
            UnifiAPIError: If the request fails.
            UnifiDataError: If the response cannot be decoded.
        """
        body = self.get_json(API_STATUS_PATH)
        raw_data = self._parse_body(body, API_STATUS_PATH)

        meta = raw_data.get("meta")
        if not isinstance(meta, dict):
            error_msg = f"Unexpected API response format for {API_STATUS_PATH}: missing meta"
            logger.warning(error_msg)
            raise UnifiDataError(error_msg)

        self.server = decode_model(meta, ServerStatus)
        logger.debug(
            f"Controller {self.server.uuid} runs version {self.server.server_version}"
        )
        return self.server

    def uni_req(self, api_path: str, params: Params = None) -> requests.PreparedRequest:
        """
        Build a request for an API path.

        Without params the request is a GET; with params it is a POST carrying
        them as a JSON body. The path is resolved for the controller's firmware
        and the CSRF token is attached once known.

        Args:
            api_path: Logical API path, with any site already substituted.
            params: JSON body as a string or dictionary.

        Returns:
            A prepared request bound to this session's cookies.
        """
        url = self.config.url + self.path(api_path)
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json; charset=utf-8",
        }
        if self.csrf:
            headers[CSRF_HEADER] = self.csrf

        if params is None or params == "":
            request = requests.Request("GET", url, headers=headers)
        else:
            body = params if isinstance(params, str) else json.dumps(params)
            request = requests.Request("POST", url, headers=headers, data=body)

        return self.session.prepare_request(request)

    def get_json(self, api_path: str, params: Params = None) -> bytes:
        """
        Send a request and return the raw response body.

        A 401 triggers one re-login and retry when ``config.auth_retry`` is set.

        Raises:
            UnifiAPIError: For transport failures and non-200 responses.
            UnifiAuthenticationError: If re-authentication fails.
        """
        response = self._send(api_path, params)

        if response.status_code == 401 and self.config.auth_retry:
            logger.warning(
                f"Received 401 Unauthorized for {api_path}. Attempting re-authentication..."
            )
            self.login()
            response = self._send(api_path, params)

        if response.status_code != 200:
            error_msg = (
                f"invalid status code from server {response.status_code} "
                f"{response.reason}: {response.url}"
            )
            logger.error(error_msg)
            self.config.error_log("%s", error_msg)
            raise UnifiAPIError(error_msg)

        return response.content

    def get_data(self, api_path: str, params: Params = None) -> List[Any]:
        """
        Send a request and return the ``data`` list of the response envelope.

        Raises:
            UnifiAPIError: If the request fails or the controller reports an error.
            UnifiDataError: If the response cannot be parsed or lacks ``data``.
        """
        body = self.get_json(api_path, params)
        raw_data = self._parse_body(body, api_path)

        meta = raw_data.get("meta")
        if isinstance(meta, dict) and meta.get("rc") == "error":
            error_msg = f"API request to {api_path} failed: {meta.get('msg', 'unknown error')}"
            logger.error(error_msg)
            raise UnifiAPIError(error_msg)

        if "data" not in raw_data:
            error_msg = f"Unexpected API response format for {api_path}"
            logger.warning(error_msg)
            raise UnifiDataError(error_msg)

        raw_results = raw_data["data"]
        if raw_results is None:
            return []
        if not isinstance(raw_results, list):
            raise UnifiDataError(f"Unexpected data type for {api_path}: {type(raw_results).__name__}")

        return raw_results

    def _send(self, api_path: str, params: Params) -> requests.Response:
        request = self.uni_req(api_path, params)
        self.config.debug_log("Requesting %s, with params: %s", request.url, params if params is not None else "")

        try:
            response = self.session.send(
                request, verify=self.config.verify_ssl, timeout=self.config.timeout
            )
        except requests.exceptions.RequestException as e:
            error_msg = f"API {request.method} request to {request.url} failed: {e}"
            logger.error(error_msg)
            self.config.error_log("%s", error_msg)
            raise UnifiAPIError(error_msg) from e

        self._update_csrf(response)
        log_api_response(logger, request.url, response.content, response.status_code)
        return response

    def _parse_body(self, body: bytes, api_path: str) -> Dict[str, Any]:
        try:
            raw_data = json.loads(body)
        except ValueError as e:
            error_msg = f"Failed to parse API response from {api_path}: {e}"
            logger.error(error_msg)
            raise UnifiDataError(error_msg) from e

        if not isinstance(raw_data, dict):
            error_msg = f"Unexpected API response format for {api_path}"
            logger.warning(error_msg)
            raise UnifiDataError(error_msg)

        return raw_data

    def _update_csrf(self, response: requests.Response) -> None:
        token = response.headers.get(CSRF_HEADER)
        if token:
            self.csrf = token

    def _extract_csrf_token(self) -> Optional[str]:
        """Extracts the CSRF token from the UniFi OS TOKEN cookie if available."""
        unifi_cookie = self.session.cookies.get("TOKEN")
        if not unifi_cookie:
            logger.debug("UniFi OS 'TOKEN' cookie not found in session.")
            return None

        parts = unifi_cookie.split('.')
        if len(parts) != 3:
            logger.warning("Invalid JWT structure found in TOKEN cookie.")
            return None

        try:
            payload_b64 = parts[1]
            payload_b64 += '=' * (-len(payload_b64) % 4)
            payload_json = base64.urlsafe_b64decode(
                payload_b64).decode('utf-8')
            payload_data = json.loads(payload_json)
        except (binascii.Error, json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Error decoding JWT payload from TOKEN cookie: {e}")
            return None

        csrf_token = payload_data.get('csrfToken') if isinstance(payload_data, dict) else None
        if csrf_token:
            logger.debug("Extracted CSRF token from cookie.")
        return csrf_token

    # Listing endpoints.

    def get_sites(self) -> List[Site]:
        """
        Get every site on the controller from /api/stat/sites.

        Returns:
            List of Site records. Site health arrives raw in ``health``.
            Records without a short name are skipped.

        Raises:
            UnifiAPIError: If the API request fails.
            UnifiDataError: If the API response cannot be parsed.
            UnifiDecodeError: If a numeric field has the wrong JSON kind.
        """
        raw_results = self.get_data(API_SITE_LIST)
        sites = []
        for site in decode_models(raw_results, Site):
            # Site-scoped paths need the short name.
            if not site.name:
                self.config.debug_log("site without a name - skipping: %s", site._id)
                continue
            sites.append(site)

        self.config.debug_log("Found %d site(s): %s", len(sites), ",".join(s.name for s in sites))
        return sites

    def get_clients(self, sites: List[Site]) -> List[Client]:
        """
        Get the active clients (stations) of each site from /api/s/{site}/stat/sta.

        Args:
            sites: Sites to poll, usually from :meth:`get_sites`.

        Returns:
            Clients of all sites, each with ``site_name`` set.
        """
        clients: List[Client] = []
        for site in sites:
            self.config.debug_log("Polling Controller, retrieving UniFi Clients, site %s", site.name)
            raw_results = self.get_data(site_path(API_CLIENT_PATH, site.name))
            clients.extend(decode_models(raw_results, Client, site_name=site.name))

        return clients

    def get_devices(self, sites: List[Site]) -> Devices:
        """
        Get the devices of each site from /api/s/{site}/stat/device, grouped by kind.

        Devices with a ``type`` outside uap, ugw/usg, usw and udm are reported
        to the debug sink and skipped.
        """
        devices = Devices()
        for site in sites:
            self.config.debug_log("Polling Controller, retrieving UniFi Devices, site %s", site.name)
            raw_results = self.get_data(site_path(API_DEVICE_PATH, site.name))
            for device in decode_models(raw_results, Device, site_name=site.name):
                if not devices.add(device):
                    self.config.debug_log(
                        "unknown asset type - %s - skipping: %s", device.type, device.mac
                    )

        return devices

    def get_events(self, sites: List[Site], hours: int = 1) -> List[Event]:
        """
        Get the event log of each site from /api/s/{site}/stat/event.

        Args:
            sites: Sites to poll.
            hours: Look back duration in hours.

        Note:
            The API uses a POST request for this endpoint, even though it's fetching data.
        """
        payload = {"_limit": 50000, "within": hours, "_sort": "-time"}
        events: List[Event] = []
        for site in sites:
            self.config.debug_log("Polling Controller, retrieving UniFi Events, site %s", site.name)
            raw_results = self.get_data(site_path(API_EVENT_PATH, site.name), payload)
            events.extend(decode_models(raw_results, Event, site_name=site.name))

        return events

    def get_ids(
        self,
        sites: List[Site],
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[IDS]:
        """
        Get Intrusion Detection/Prevention events of each site.

        Defaults to the past hour when no range is given.

        Args:
            sites: Sites to poll.
            start: Start of the time range.
            end: End of the time range. Defaults to now.
        """
        if end is None:
            end = datetime.now()
        if start is None:
            start = end - timedelta(hours=1)

        payload = {"start": _to_millis(start), "end": _to_millis(end), "_limit": 10000}
        ids_events: List[IDS] = []
        for site in sites:
            self.config.debug_log("Polling Controller for IDS/IPS Data, site %s", site.name)
            raw_results = self.get_data(site_path(API_EVENT_PATH_IDS, site.name), payload)
            ids_events.extend(decode_models(raw_results, IDS, site_name=site.name))

        return ids_events

    def get_alarms(self, sites: List[Site], archived: Optional[bool] = None) -> List[Alarm]:
        """
        Get the alarms of each site from /api/s/{site}/list/alarm.

        Args:
            sites: Sites to poll.
            archived: None for all alarms, False for active ones, True for archived ones.
        """
        payload = None if archived is None else {"archived": archived}
        alarms: List[Alarm] = []
        for site in sites:
            self.config.debug_log("Polling Controller for Alarms, site %s", site.name)
            raw_results = self.get_data(site_path(API_EVENT_PATH_ALARMS, site.name), payload)
            alarms.extend(decode_models(raw_results, Alarm, site_name=site.name))

        return alarms

    def get_anomalies(
        self,
        sites: List[Site],
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[Anomaly]:
        """
        Get the anomalies of each site from /api/s/{site}/stat/anomalies.

        Args:
            sites: Sites to poll.
            start: Optional start of an hourly-scaled range.
            end: Optional end of the range; only used together with ``start``.

        Returns:
            One Anomaly per reported occurrence.
        """
        anomalies: List[Anomaly] = []
        for site in sites:
            api_path = site_path(API_ANOMALIES_PATH, site.name)
            if start is not None:
                api_path += f"?scale=hourly&start={_to_millis(start)}"
                if end is not None:
                    api_path += f"&end={_to_millis(end)}"

            self.config.debug_log("Polling Controller for Anomalies, site %s", site.name)
            for item in self.get_data(api_path):
                anomalies.extend(Anomaly.from_api(item, site_name=site.name))

        return anomalies

    def get_site_dpi(self, sites: List[Site]) -> List[DPITable]:
        """Get per-application Deep Packet Inspection totals of each site."""
        return self._get_dpi(sites, API_SITE_DPI)

    def get_client_dpi(self, sites: List[Site]) -> List[DPITable]:
        """Get per-application Deep Packet Inspection totals of each client."""
        return self._get_dpi(sites, API_CLIENT_DPI)

    def _get_dpi(self, sites: List[Site], template: str) -> List[DPITable]:
        tables: List[DPITable] = []
        for site in sites:
            self.config.debug_log("Polling Controller, retrieving DPI data, site %s", site.name)
            raw_results = self.get_data(site_path(template, site.name), {"type": "by_app"})
            tables.extend(decode_models(raw_results, DPITable, site_name=site.name))

        return tables

    def get_networks(self, sites: List[Site]) -> List[Network]:
        """Get the network configurations (LANs, VLANs, WANs) of each site."""
        networks: List[Network] = []
        for site in sites:
            self.config.debug_log("Polling Controller for Networks, site %s", site.name)
            raw_results = self.get_data(site_path(API_NETWORK_PATH, site.name))
            networks.extend(decode_models(raw_results, Network, site_name=site.name))

        return networks
