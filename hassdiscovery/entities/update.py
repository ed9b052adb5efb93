"""Discovery payload for MQTT update entities."""

from __future__ import annotations

from dataclasses import dataclass

from hassdiscovery.payload import PayloadBuilder

KIND = "MQTTUpdate"


@dataclass
class UpdateSpec:
    """Settings of a firmware or software update entity."""

    state_topic: str = ""
    name: str = ""
    value_template: str = ""
    command_topic: str = ""
    payload_install: str = ""
    latest_version_topic: str = ""
    latest_version_template: str = ""
    device_class: str = ""
    entity_picture: str = ""
    release_url: str = ""
    release_summary: str = ""
    title: str = ""
    icon: str = ""
    entity_category: str = ""
    enabled_by_default: bool | None = None
    object_id: str = ""
    qos: int | None = None
    retain: bool | None = None
    encoding: str = ""
    json_attributes_topic: str = ""
    json_attributes_template: str = ""


def build_update_payload(spec: UpdateSpec) -> PayloadBuilder:
    """Return a builder holding the update entity's discovery fields."""
    builder = PayloadBuilder()
    builder.set("stateTopic", spec.state_topic)
    builder.set("name", spec.name)
    builder.set("valueTemplate", spec.value_template)
    builder.set("commandTopic", spec.command_topic)
    builder.set("payloadInstall", spec.payload_install)
    builder.set("latestVersionTopic", spec.latest_version_topic)
    builder.set("latestVersionTemplate", spec.latest_version_template)
    builder.set("deviceClass", spec.device_class)
    builder.set("entityPicture", spec.entity_picture)
    builder.set("releaseUrl", spec.release_url)
    builder.set("releaseSummary", spec.release_summary)
    builder.set("title", spec.title)
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