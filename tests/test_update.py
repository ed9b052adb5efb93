import json

from hassdiscovery.entities.update import KIND, UpdateSpec, build_update_payload
from hassdiscovery.payload import camel_to_snake
from hassdiscovery.topic import discovery_topic


def test_empty_spec_gives_empty_payload():
    assert build_update_payload(UpdateSpec()).build_map() == {}


def test_example_firmware_update():
    spec = UpdateSpec(
        name="E2E Firmware Update",
        state_topic="e2e/update/firmware/state",
        command_topic="e2e/update/firmware/install",
        device_class="firmware",
    )
    assert build_update_payload(spec).build_map() == {
        "name": "E2E Firmware Update",
        "state_topic": "e2e/update/firmware/state",
        "command_topic": "e2e/update/firmware/install",
        "device_class": "firmware",
    }


def test_every_field_is_mapped_to_snake_case():
    fields = {
        "stateTopic": "state/topic",
        "name": "Updater",
        "valueTemplate": "{{ value_json.installed }}",
        "commandTopic": "cmd/topic",
        "payloadInstall": "INSTALL",
        "latestVersionTopic": "latest/topic",
        "latestVersionTemplate": "{{ value_json.latest }}",
        "deviceClass": "firmware",
        "entityPicture": "https://example.com/pic.png",
        "releaseUrl": "https://example.com/release",
        "releaseSummary": "Fixes",
        "title": "Firmware",
        "icon": "mdi:update",
        "entityCategory": "diagnostic",
        "enabledByDefault": False,
        "objectId": "obj",
        "qos": 2,
        "retain": True,
        "encoding": "utf-8",
        "jsonAttributesTopic": "attr/topic",
        "jsonAttributesTemplate": "{{ value_json }}",
    }
    spec = UpdateSpec(**{camel_to_snake(key): value for key, value in fields.items()})
    result = build_update_payload(spec).build_map()
    assert result == {camel_to_snake(key): value for key, value in fields.items()}


def test_unset_optionals_are_left_out():
    result = build_update_payload(UpdateSpec(title="T", qos=None)).build_map()
    assert result == {"title": "T"}


def test_json_round_trip():
    builder = build_update_payload(
        UpdateSpec(name="Up", release_summary="<b>notes</b>", retain=False)
    )
    assert json.loads(builder.build()) == builder.build_map()


def test_discovery_topic_for_kind():
    assert (
        discovery_topic(KIND, "hass-crds-e2e", "test-update")
        == "homeassistant/update/hass-crds-e2e/test-update/config"
    )