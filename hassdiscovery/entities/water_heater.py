"""Discovery payload for MQTT water heater entities."""

from __future__ import annotations

from dataclasses import dataclass, field

from hassdiscovery.payload import PayloadBuilder

KIND = "MQTTWaterHeater"


@dataclass
class WaterHeaterSpec:
    """Settings of a water heater entity."""

    name: str = ""
    temperature_command_topic: str = ""
    temperature_state_topic: str = ""
    temperature_command_template: str = ""
    temperature_state_template: str = ""
    current_temperature_topic: str = ""
    current_temperature_template: str = ""
    mode_command_topic: str = ""
    mode_state_topic: str = ""
    mode_command_template: str = ""
    mode_state_template: str = ""
    modes: list[str] = field(default_factory=list)
    power_command_topic: str = ""
    payload_on: str = ""
    payload_off: str = ""
    min_temp: float | None = None
    max_temp: float | None = None
    temperature_unit: str = ""
    precision: float | None = None
    optimistic: bool | None = None
    icon: str = ""
    entity_category: str = ""
    enabled_by_default: bool | None = None
    object_id: str = ""
    qos: int | None = None
    retain: bool | None = None
    encoding: str = ""
    json_attributes_topic: str = ""
    json_attributes_template: str = ""


def build_water_heater_payload(spec: WaterHeaterSpec) -> PayloadBuilder:
    """Return a builder holding the water heater's discovery fields."""
    builder = PayloadBuilder()
    builder.set("name", spec.name)
    builder.set("temperatureCommandTopic", spec.temperature_command_topic)
    builder.set("temperatureStateTopic", spec.temperature_state_topic)
    builder.set("temperatureCommandTemplate", spec.temperature_command_template)
    builder.set("temperatureStateTemplate", spec.temperature_state_template)
    builder.set("currentTemperatureTopic", spec.current_temperature_topic)
    builder.set("currentTemperatureTemplate", spec.current_temperature_template)
    builder.set("modeCommandTopic", spec.mode_command_topic)
    builder.set("modeStateTopic", spec.mode_state_topic)
    builder.set("modeCommandTemplate", spec.mode_command_template)
    builder.set("modeStateTemplate", spec.mode_state_template)
    builder.set("modes", spec.modes)
    builder.set("powerCommandTopic", spec.power_command_topic)
    builder.set("payloadOn", spec.payload_on)
    builder.set("payloadOff", spec.payload_off)
    builder.set("minTemp", spec.min_temp)
    builder.set("maxTemp", spec.max_temp)
    builder.set("temperatureUnit", spec.temperature_unit)
    builder.set("precision", spec.precision)
    builder.set("optimistic", spec.optimistic)
    builder.set("icon", spec.icon)
    builder.set("entityCategory", spec.entity_category)
    builder.set("enabledByDefault", spec.enabled_by_default)
    builder.set("objectId", spec.object_id)
    builder.set("qos", spec.qos)
    builder.set("retain", spec.retain)
    builder.set("encoding", spec.encoding)
    builder.set("jsonAttributesTopic", spec.json_attributes_topic)
    builder.set("jsonAttributesTemplate", spec.json_attributes_template)
    return builder