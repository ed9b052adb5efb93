"""Home Assistant MQTT discovery payloads, topics and publishing."""

__version__ = "0.1.0"