"""Discovery payload for MQTT valve entities."""

from __future__ import annotations

from dataclasses import dataclass

from hassdiscovery.payload import PayloadBuilder

KIND = "MQTTValve"


@dataclass
class ValveSpec:
    """Settings of a valve entity."""

    name: str = ""
    command_topic: str = ""
    state_topic: str = ""
    command_template: str = ""
    value_template: str = ""
    position_topic: str = ""
    set_position_topic: str = ""
    set_position_template: str = ""
    position_template: str = ""
    payload_open: str = ""
    payload_close: str = ""
    payload_stop: str = ""
    state_open: str = ""
    state_closed: str = ""
    state_opening: str = ""
    state_closing: str = ""
    device_class: str = ""
    reports_position: bool | None = None
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


def build_valve_payload(spec: ValveSpec) -> PayloadBuilder:
    """Return a builder holding the valve's discovery fields."""
    builder = PayloadBuilder()
    builder.set("name", spec.name)
    builder.set("commandTopic", spec.command_topic)
    builder.set("stateTopic", spec.state_topic)
    builder.set("commandTemplate", spec.command_template)
    builder.set("valueTemplate", spec.value_template)
    builder.set("positionTopic", spec.position_topic)
    builder.set("setPositionTopic", spec.set_position_topic)
    builder.set("setPositionTemplate", spec.set_position_template)
    builder.set("positionTemplate", spec.position_template)
    builder.set("payloadOpen", spec.payload_open)
    builder.set("payloadClose", spec.payload_close)
    builder.set("payloadStop", spec.payload_stop)
    builder.set("stateOpen", spec.state_open)
    builder.set("stateClosed", spec.state_closed)
    builder.set("stateOpening", spec.state_opening)
    builder.set("stateClosing", spec.state_closing)
    builder.set("deviceClass", spec.device_class)
    builder.set("reportsPosition", spec.reports_position)
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