"""Builder for Home Assistant MQTT discovery payloads."""

from __future__ import annotations

import json
from typing import Any

_JSON_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def camel_to_snake(s: str) -> str:
    """Convert a camelCase name to snake_case."""
    parts = []
    for position, char in enumerate(s):
        if char.isupper():
            if position > 0:
                parts.append("_")
            parts.append(char.lower())
        else:
            parts.append(char)
    return "".join(parts)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


class PayloadBuilder:
    """Collects discovery fields and renders them as JSON."""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def set(self, key: str, value: Any) -> PayloadBuilder:
        """Add a field under its snake_case name, skipping unset values."""
        if _is_blank(value):
            return self
        self._data[camel_to_snake(key)] = value
        return self

    def set_raw(self, key: str, value: Any) -> PayloadBuilder:
        """Add a field under the key exactly as given."""
        if value is None:
            return self
        self._data[key] = value
        return self

    def set_device(self, device: dict[str, Any] | None) -> PayloadBuilder:
        """Add the device block if it holds anything."""
        if device:
            self._data["device"] = device
        return self

    def set_availability(
        self, availability: list[dict[str, Any]] | None
    ) -> PayloadBuilder:
        """Add the availability list if it holds anything."""
        if availability:
            self._data["availability"] = availability
        return self

    def build(self) -> bytes:
        """Render the payload as compact JSON with sorted keys."""
        text = json.dumps(
            self._data,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
        for char, escape in _JSON_HTML_ESCAPES.items():
            text = text.replace(char, escape)
        return text.encode("utf-8")

    def build_map(self) -> dict[str, Any]:
        """Return a shallow copy of the collected fields."""
        return dict(self._data)


def device_block_to_map(
    name: str = "",
    identifiers: list[str] | None = None,
    connections: list[list[str]] | None = None,
    manufacturer: str = "",
    model: str = "",
    model_id: str = "",
    serial_number: str = "",
    hw_version: str = "",
    sw_version: str = "",
    suggested_area: str = "",
    configuration_url: str = "",
    via_device: str = "",
) -> dict[str, Any]:
    """Build the device block, leaving out empty fields."""
    fields: list[tuple[str, Any]] = [
        ("name", name),
        ("identifiers", identifiers),
        ("connections", connections),
        ("manufacturer", manufacturer),
        ("model", model),
        ("model_id", model_id),
        ("serial_number", serial_number),
        ("hw_version", hw_version),
        ("sw_version", sw_version),
        ("suggested_area", suggested_area),
        ("configuration_url", configuration_url),
        ("via_device", via_device),
    ]
    return {key: value for key, value in fields if value}


def availability_to_map(
    topic: str,
    payload_available: str = "",
    payload_not_available: str = "",
    value_template: str = "",
) -> dict[str, Any]:
    """Build one availability entry; the topic is always present."""
    avail: dict[str, Any] = {"topic": topic}
    optional = [
        ("payload_available", payload_available),
        ("payload_not_available", payload_not_available),
        ("value_template", value_template),
    ]
    avail.update((key, value) for key, value in optional if value)
    return avail