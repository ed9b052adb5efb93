import json

from hassdiscovery.entities.text import KIND, TextSpec, build_text_payload
from hassdiscovery.payload import camel_to_snake
from hassdiscovery.topic import discovery_topic


def test_empty_spec_gives_empty_payload():
    assert build_text_payload(TextSpec()).build_map() == {}


def test_example_text_input():
    spec = TextSpec(
        name="E2E Text Input",
        command_topic="e2e/text/input/set",
        state_topic="e2e/text/input/state",
        min=1,
        max=100,
        mode="text",
    )
    assert build_text_payload(spec).build_map() == {
        "name": "E2E Text Input",
        "command_topic": "e2e/text/input/set",
        "state_topic": "e2e/text/input/state",
        "min": 1,
        "max": 100,
        "mode": "text",
    }


def test_every_field_is_mapped_to_snake_case():
    fields = {
        "commandTopic": "cmd/topic",
        "name": "Name",
        "commandTemplate": "{{ value }}",
        "stateTopic": "state/topic",
        "valueTemplate": "{{ value_json.v }}",
        "min": 2,
        "max": 50,
        "pattern": "[a-z]+",
        "mode": "password",
        "icon": "mdi:text",
        "entityCategory": "config",
        "enabledByDefault": True,
        "objectId": "obj",
        "qos": 1,
        "retain": True,
        "encoding": "utf-8",
        "jsonAttributesTopic": "attr/topic",
        "jsonAttributesTemplate": "{{ value_json }}",
    }
    spec = TextSpec(**{camel_to_snake(key): value for key, value in fields.items()})
    result = build_text_payload(spec).build_map()
    assert result == {camel_to_snake(key): value for key, value in fields.items()}


def test_zero_and_false_values_are_kept():
    spec = TextSpec(min=0, retain=False, enabled_by_default=False, qos=0)
    assert build_text_payload(spec).build_map() == {
        "min": 0,
        "retain": False,
        "enabled_by_default": False,
        "qos": 0,
    }


def test_json_round_trip():
    builder = build_text_payload(
        TextSpec(name="Box", command_topic="a/b", max=10, retain=True)
    )
    assert json.loads(builder.build()) == builder.build_map()


def test_discovery_topic_for_kind():
    assert (
        discovery_topic(KIND, "hass-crds-e2e", "test-text")
        == "homeassistant/text/hass-crds-e2e/test-text/config"
    )