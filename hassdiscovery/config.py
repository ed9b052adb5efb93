"""MQTT connection settings."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_PORT = 1883
DEFAULT_CLIENT_ID = "hass-crds-controller"

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


def _parse_port(text: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid MQTT_PORT: invalid syntax: {text!r}")
    port = int(text)
    if not _INT_MIN <= port <= _INT_MAX:
        raise ValueError(f"invalid MQTT_PORT: value out of range: {text!r}")
    return port


@dataclass
class MQTTConfig:
    """Broker address, credentials and transport options."""

    broker: str
    port: int = DEFAULT_PORT
    client_id: str = DEFAULT_CLIENT_ID
    username: str = ""
    password: str = ""
    use_tls: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> MQTTConfig:
        """Read the configuration from MQTT_* environment variables."""
        env = os.environ if environ is None else environ

        broker = env.get("MQTT_BROKER", "")
        if not broker:
            raise ValueError("MQTT_BROKER environment variable is required")

        port_text = env.get("MQTT_PORT", "")
        port = _parse_port(port_text) if port_text else DEFAULT_PORT

        return cls(
            broker=broker,
            port=port,
            client_id=env.get("MQTT_CLIENT_ID", "") or DEFAULT_CLIENT_ID,
            username=env.get("MQTT_USERNAME", ""),
            password=env.get("MQTT_PASSWORD", ""),
            use_tls=env.get("MQTT_USE_TLS", "") in ("true", "1"),
        )

    def broker_url(self) -> str:
        """Return ``tcp://host:port`` or ``ssl://host:port``."""
        scheme = "ssl" if self.use_tls else "tcp"
        return f"{scheme}://{self.broker}:{self.port}"