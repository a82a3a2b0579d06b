"""Pytest configuration and fixtures for unifi_rest tests."""

import base64
import json
from typing import Any, Dict, Optional, Union

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from unifi_rest import Config, UnifiController

BASE_URL = "https://unifi.example:8443"


def make_response(
    body: Union[Dict[str, Any], bytes, None] = None,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
    url: str = BASE_URL,
) -> requests.Response:
    """Build a requests.Response without a network round trip."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = "OK" if status_code == 200 else "Error"
    response.url = url
    response.encoding = "utf-8"
    response.headers = CaseInsensitiveDict(headers or {})
    if body is None:
        body = {"meta": {"rc": "ok"}, "data": []}
    response._content = body if isinstance(body, bytes) else json.dumps(body).encode()
    return response


def envelope(data: Any, rc: str = "ok") -> Dict[str, Any]:
    """Wrap records the way the controller does."""
    return {"meta": {"rc": rc}, "data": data}


def create_test_jwt(payload: Dict[str, Any]) -> str:
    """Create an unsigned JWT carrying the given payload."""
    header = {"alg": "HS256", "typ": "JWT"}
    header_encoded = (
        base64.urlsafe_b64encode(json.dumps(header).encode()).decode().rstrip("=")
    )
    payload_encoded = (
        base64.urlsafe_b64encode(json.dumps(payload).encode()).decode().rstrip("=")
    )
    return f"{header_encoded}.{payload_encoded}.signature"


@pytest.fixture
def config() -> Config:
    """Fixture providing a legacy controller configuration."""
    return Config(user="admin", password="secret", url=BASE_URL)


@pytest.fixture
def new_config() -> Config:
    """Fixture providing a UniFi OS controller configuration."""
    return Config(user="admin", password="secret", url=BASE_URL, new=True)


@pytest.fixture
def controller(config: Config) -> UnifiController:
    """Fixture providing a legacy controller on a real, offline session."""
    return UnifiController(config, session=requests.Session())


@pytest.fixture
def new_controller(new_config: Config) -> UnifiController:
    """Fixture providing a UniFi OS controller on a real, offline session."""
    return UnifiController(new_config, session=requests.Session())
