"""MQTT clients used to publish discovery messages."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import paho.mqtt.client as paho_mqtt

from hassdiscovery.config import MQTTConfig

DEFAULT_KEEP_ALIVE = 30.0
DEFAULT_CONNECT_TIMEOUT = 30.0
DEFAULT_WRITE_TIMEOUT = 10.0
DEFAULT_MAX_RECONNECT_INTERVAL = 300.0
DEFAULT_RECONNECT_WAIT_TIMEOUT = 30.0

_MIN_RECONNECT_INTERVAL = 1
_RECONNECT_POLL_INTERVAL = 0.5
_CONNECT_POLL_INTERVAL = 0.05

_log = logging.getLogger("hassdiscovery.mqtt_client")


class MQTTError(Exception):
    """Raised when an MQTT operation cannot be completed."""


@dataclass(frozen=True)
class PublishedMessage:
    """A message recorded by :class:`MockClient`."""

    topic: str
    payload: bytes
    qos: int
    retain: bool


def _as_bytes(payload: bytes | bytearray | str) -> bytes:
    if isinstance(payload, str):
        return payload.encode("utf-8")
    return bytes(payload)


def _default_client_factory(client_id: str) -> Any:
    if hasattr(paho_mqtt, "CallbackAPIVersion"):
        return paho_mqtt.Client(
            paho_mqtt.CallbackAPIVersion.VERSION2,
            client_id=client_id,
            clean_session=True,
        )
    return paho_mqtt.Client(client_id=client_id, clean_session=True)


class PahoClient:
    """Publishes to a broker, reconnecting automatically when the link drops."""

    def __init__(
        self,
        config: MQTTConfig,
        logger: logging.Logger | None = None,
        client_factory: Callable[[str], Any] | None = None,
    ) -> None:
        self.config = config
        self._log = logger or _log
        self._client_factory = client_factory or _default_client_factory
        self._client: Any = None
        self._disconnecting = False
        self._lock = threading.Lock()

    def _on_connect(self, *_args: Any) -> None:
        self._log.info("MQTT connected (broker=%s)", self.config.broker_url())

    def _on_disconnect(self, *_args: Any) -> None:
        if not self._disconnecting:
            self._log.error(
                "MQTT connection lost, will auto-reconnect (broker=%s)",
                self.config.broker_url(),
            )

    def connect(self, timeout: float | None = DEFAULT_CONNECT_TIMEOUT) -> None:
        """Open the connection, waiting up to ``timeout`` seconds for it."""
        url = self.config.broker_url()
        with self._lock:
            self._disconnecting = False
            if self._client is not None:
                self._client.loop_stop()

            client = self._client_factory(self.config.client_id)
            if self.config.username:
                client.username_pw_set(self.config.username, self.config.password)
            if self.config.use_tls:
                client.tls_set()
            client.reconnect_delay_set(
                min_delay=_MIN_RECONNECT_INTERVAL,
                max_delay=int(DEFAULT_MAX_RECONNECT_INTERVAL),
            )
            client.on_connect = self._on_connect
            client.on_disconnect = self._on_disconnect
            self._client = client

            try:
                client.connect_async(
                    self.config.broker,
                    self.config.port,
                    keepalive=int(DEFAULT_KEEP_ALIVE),
                )
            except (OSError, ValueError) as exc:
                raise MQTTError(f"failed to connect to MQTT broker: {exc}") from exc
            client.loop_start()

        deadline = None if timeout is None else time.monotonic() + timeout
        while not client.is_connected():
            if deadline is not None and time.monotonic() >= deadline:
                raise MQTTError(
                    f"failed to connect to MQTT broker {url}: timed out after {timeout:g}s"
                )
            time.sleep(_CONNECT_POLL_INTERVAL)

        self._log.info("MQTT client connected (broker=%s)", url)

    def disconnect(self) -> None:
        """Close the connection and stop reconnecting."""
        with self._lock:
            self._disconnecting = True
            client = self._client
            if client is not None and client.is_connected():
                client.disconnect()
                client.loop_stop()
                self._log.info("MQTT client disconnected")

    def publish(
        self,
        topic: str,
        payload: bytes | bytearray | str,
        qos: int = 0,
        retain: bool = False,
        timeout: float | None = None,
    ) -> None:
        """Send a message, waiting for a reconnection first if needed."""
        self.wait_for_connection(timeout)

        with self._lock:
            client = self._client

        info = client.publish(topic, _as_bytes(payload), qos=qos, retain=retain)
        if info.rc != paho_mqtt.MQTT_ERR_SUCCESS:
            raise MQTTError(
                f"failed to publish to {topic}: {paho_mqtt.error_string(info.rc)}"
            )

        write_timeout = DEFAULT_WRITE_TIMEOUT if timeout is None else timeout
        try:
            info.wait_for_publish(write_timeout)
        except (RuntimeError, ValueError) as exc:
            raise MQTTError(f"failed to publish to {topic}: {exc}") from exc
        if not info.is_published():
            raise MQTTError(f"failed to publish to {topic}: timed out")

        self._log.debug(
            "Published MQTT message (topic=%s, retain=%s, qos=%s)", topic, retain, qos
        )

    def wait_for_connection(self, timeout: float | None = None) -> None:
        """Return once connected; raise if not reconnected in time."""
        with self._lock:
            client = self._client
            disconnecting = self._disconnecting

        if client is None:
            raise MQTTError("MQTT client not initialized")
        if disconnecting:
            raise MQTTError("MQTT client is disconnecting")
        if client.is_connected():
            return

        self._log.info("Waiting for MQTT reconnection before publish")

        limit = DEFAULT_RECONNECT_WAIT_TIMEOUT
        if timeout is not None:
            limit = min(limit, timeout)
        deadline = time.monotonic() + limit

        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise MQTTError(
                    f"timeout waiting for MQTT reconnection after {limit:g}s"
                )
            time.sleep(min(_RECONNECT_POLL_INTERVAL, remaining))

            with self._lock:
                connected = self._client is not None and self._client.is_connected()
                disconnecting = self._disconnecting

            if disconnecting:
                raise MQTTError("MQTT client is disconnecting")
            if connected:
                self._log.info("MQTT reconnected, proceeding with publish")
                return

    def is_connected(self) -> bool:
        """Report whether the broker link is up."""
        with self._lock:
            return self._client is not None and self._client.is_connected()


class MockClient:
    """In-memory client that records what is published."""

    def __init__(self) -> None:
        self.publish_error: Exception | None = None
        self.connect_error: Exception | None = None
        self._connected = False
        self._messages: list[PublishedMessage] = []
        self._lock = threading.Lock()

    def connect(self, timeout: float | None = None) -> None:
        with self._lock:
            if self.connect_error is not None:
                raise self.connect_error
            self._connected = True

    def disconnect(self) -> None:
        with self._lock:
            self._connected = False

    def publish(
        self,
        topic: str,
        payload: bytes | bytearray | str,
        qos: int = 0,
        retain: bool = False,
        timeout: float | None = None,
    ) -> None:
        with self._lock:
            if self.publish_error is not None:
                raise self.publish_error
            self._messages.append(
                PublishedMessage(topic, _as_bytes(payload), qos, retain)
            )

    def is_connected(self) -> bool:
        with self._lock:
            return self._connected

    def wait_for_connection(self, timeout: float | None = None) -> None:
        with self._lock:
            if self.connect_error is not None:
                raise self.connect_error
            if not self._connected:
                raise MQTTError("mock client not connected")

    def published_messages(self) -> list[PublishedMessage]:
        """Return a copy of the recorded messages."""
        with self._lock:
            return list(self._messages)

    def clear_messages(self) -> None:
        """Forget the recorded messages."""
        with self._lock:
            self._messages.clear()