"""Discovery topics and unique identifiers for Home Assistant entities."""

from __future__ import annotations

import re

DEFAULT_DISCOVERY_PREFIX = "homeassistant"

_KIND_PREFIX = "MQTT"

# Kinds whose component name follows directly from the kind itself.
_REGULAR_KINDS = (
    "Button",
    "Switch",
    "Sensor",
    "BinarySensor",
    "Number",
    "Select",
    "Text",
    "Scene",
    "Tag",
    "Light",
    "Cover",
    "Lock",
    "Valve",
    "Fan",
    "Siren",
    "Camera",
    "Image",
    "Notify",
    "Update",
    "Climate",
    "Humidifier",
    "WaterHeater",
    "Vacuum",
    "LawnMower",
    "AlarmControlPanel",
    "DeviceTracker",
    "Event",
)

# Kinds whose component name cannot be derived from the kind.
_IRREGULAR_COMPONENTS = {
    "DeviceTrigger": "device_automation",
}

_WORD_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _component_for(suffix: str) -> str:
    return _WORD_BOUNDARY.sub("_", suffix).lower()


COMPONENT_MAPPING: dict[str, str] = {
    **{_KIND_PREFIX + suffix: _component_for(suffix) for suffix in _REGULAR_KINDS},
    **{_KIND_PREFIX + suffix: component for suffix, component in _IRREGULAR_COMPONENTS.items()},
}


def discovery_topic(kind: str, namespace: str, name: str) -> str:
    """Return the discovery topic under the default prefix."""
    return discovery_topic_with_prefix(DEFAULT_DISCOVERY_PREFIX, kind, namespace, name)


def discovery_topic_with_prefix(prefix: str, kind: str, namespace: str, name: str) -> str:
    """Return ``<prefix>/<component>/<namespace>/<name>/config``.

    Unknown kinds fall back to the kind, lower-cased, without its ``MQTT`` prefix.
    """
    component = COMPONENT_MAPPING.get(kind) or kind.removeprefix(_KIND_PREFIX).lower()
    return "/".join((prefix, component, namespace, name, "config"))


def _compose_id(namespace: str, name: str) -> str:
    return "-".join((namespace, name))


def unique_id(namespace: str, name: str) -> str:
    """Return ``<namespace>-<name>``."""
    return _compose_id(namespace, name)


def unique_id_with_override(unique_id: str, namespace: str, name: str) -> str:
    """Return ``unique_id`` if it is non-empty, otherwise ``<namespace>-<name>``."""
    return unique_id or _compose_id(namespace, name)