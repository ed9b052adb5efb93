"""Discovery payload for MQTT vacuum entities."""

from __future__ import annotations

from dataclasses import dataclass, field

from hassdiscovery.payload import PayloadBuilder

KIND = "MQTTVacuum"


@dataclass
class VacuumSpec:
    """Settings of a robot vacuum entity."""

    name: str = ""
    command_topic: str = ""
    state_topic: str = ""
    send_command_topic: str = ""
    set_fan_speed_topic: str = ""
    fan_speed_list: list[str] = field(default_factory=list)
    payload_start: str = ""
    payload_stop: str = ""
    payload_pause: str = ""
    payload_return_to_base: str = ""
    payload_clean_spot: str = ""
    payload_locate: str = ""
    supported_features: list[str] = field(default_factory=list)
    schema: str = ""
    icon: str = ""
    entity_category: str = ""
    enabled_by_default: bool | None = None
    object_id: str = ""
    qos: int | None = None
    retain: bool | None = None
    encoding: str = ""
    json_attributes_topic: str = ""
    json_attributes_template: str = ""


def build_vacuum_payload(spec: VacuumSpec) -> PayloadBuilder:
    """Return a builder holding the vacuum's discovery fields."""
    builder = PayloadBuilder()
    builder.set("name", spec.name)
    builder.set("commandTopic", spec.command_topic)
    builder.set("stateTopic", spec.state_topic)
    builder.set("sendCommandTopic", spec.send_command_topic)
    builder.set("setFanSpeedTopic", spec.set_fan_speed_topic)
    builder.set("fanSpeedList", spec.fan_speed_list)
    builder.set("payloadStart", spec.payload_start)
    builder.set("payloadStop", spec.payload_stop)
    builder.set("payloadPause", spec.payload_pause)
    builder.set("payloadReturnToBase", spec.payload_return_to_base)
    builder.set("payloadCleanSpot", spec.payload_clean_spot)
    builder.set("payloadLocate", spec.payload_locate)
    builder.set("supportedFeatures", spec.supported_features)
    builder.set("schema", spec.schema)
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