"""Discovery payload for MQTT text entities."""

from __future__ import annotations

from dataclasses import dataclass

from hassdiscovery.payload import PayloadBuilder

KIND = "MQTTText"


@dataclass
class TextSpec:
    """Settings of a text input entity."""

    command_topic: str = ""
    name: str = ""
    command_template: str = ""
    state_topic: str = ""
    value_template: str = ""
    min: int | None = None
    max: int | None = None
    pattern: str = ""
    mode: str = ""
    icon: str = ""
    entity_category: str = ""
    enabled_by_default: bool | None = None
    object_id: str = ""
    qos: int | None = None
    retain: bool | None = None
    encoding: str = ""
    json_attributes_topic: str = ""
    json_attributes_template: str = ""


def build_text_payload(spec: TextSpec) -> PayloadBuilder:
    """Return a builder holding the text entity's discovery fields."""
    builder = PayloadBuilder()
    builder.set("commandTopic", spec.command_topic)
    builder.set("name", spec.name)
    builder.set("commandTemplate", spec.command_template)
    builder.set("stateTopic", spec.state_topic)
    builder.set("valueTemplate", spec.value_template)
    builder.set("min", spec.min)
    builder.set("max", spec.max)
    builder.set("pattern", spec.pattern)
    builder.set("mode", spec.mode)
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