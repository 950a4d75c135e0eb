"""
IPX Client Configuration
========================
Configuration for the IPX SMS gateway connection.
"""

import os
from dataclasses import dataclass, field


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class IPXConfig:
    """Configuration for the IPX SOAP gateway connection."""
    username: str = field(default_factory=lambda: os.environ.get("IPX_USERNAME", ""))
    password: str = field(default_factory=lambda: os.environ.get("IPX_PASSWORD", ""))
    wsdl_url: str = field(default_factory=lambda: os.environ.get(
        "IPX_WSDL_URL", "https://europe.ipx.com/api/services2/SmsApi52?wsdl"
    ))
    # Timeouts are in milliseconds
    connect_timeout: int = field(default_factory=lambda: int(os.environ.get("IPX_CONNECT_TIMEOUT_MS", "30000")))
    timeout: int = field(default_factory=lambda: int(os.environ.get("IPX_TIMEOUT_MS", "30000")))
    connect_attempts: int = field(default_factory=lambda: int(os.environ.get("IPX_CONNECT_ATTEMPTS", "1")))
    verify_certificate: bool = field(default_factory=lambda: _env_bool("IPX_VERIFY_CERTIFICATE", "true"))
    cache_wsdl: bool = field(default_factory=lambda: _env_bool("IPX_CACHE_WSDL", "true"))
    http_method: str = field(default_factory=lambda: os.environ.get("IPX_HTTP_METHOD", "post"))
    tariff_class: str = field(default_factory=lambda: os.environ.get("IPX_TARIFF_CLASS", "SEK0"))
