"""
Configuration for connecting to a UniFi controller.

:class:`Config` is what the client consumes. :class:`Settings` loads the
same values from ``UNIFI_*`` environment variables (or a ``.env`` file)
for applications that keep credentials out of code.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import Logger, discard_logs

DEFAULT_TIMEOUT = 60


@dataclass
class Config:
    """
    Data passed into the client: credentials, controller location and log sinks.

    Attributes:
        user: Controller username. Must be a local account, not a cloud account.
        password: Controller password.
        url: Base URL of the controller, e.g. ``https://127.0.0.1:8443``.
        verify_ssl: Whether to verify the controller's TLS certificate.
        new: True for UniFi OS firmware, which moves the API under
             ``/proxy/network``. Set by ``check_new_style_api``.
        error_log: Printf-style sink for error messages.
        debug_log: Printf-style sink for debug messages.
        timeout: HTTP timeout in seconds.
        auth_retry: Log in again once when a request is answered with 401.
    """
    user: str
    password: str
    url: str
    verify_ssl: bool = True
    new: bool = False
    error_log: Optional[Logger] = discard_logs
    debug_log: Optional[Logger] = discard_logs
    timeout: float = DEFAULT_TIMEOUT
    auth_retry: bool = True

    def __post_init__(self):
        if not self.url:
            raise ValueError("url must not be empty")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

        self.url = self.url.rstrip("/")

        # Sinks are called unconditionally.
        if self.error_log is None:
            self.error_log = discard_logs
        if self.debug_log is None:
            self.debug_log = discard_logs


class Settings(BaseSettings):
    """Controller settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="UNIFI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    USER: str = ""
    PASS: str = ""
    URL: str = "https://127.0.0.1:8443"
    VERIFY_SSL: bool = True
    NEW: bool = False
    TIMEOUT: float = DEFAULT_TIMEOUT

    def to_config(
        self,
        error_log: Optional[Logger] = None,
        debug_log: Optional[Logger] = None,
    ) -> Config:
        """Build a client Config from these settings and optional log sinks."""
        return Config(
            user=self.USER,
            password=self.PASS,
            url=self.URL,
            verify_ssl=self.VERIFY_SSL,
            new=self.NEW,
            error_log=error_log,
            debug_log=debug_log,
            timeout=self.TIMEOUT,
        )
