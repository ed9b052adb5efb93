import json

import pytest

from hassdiscovery.entities.valve import KIND, ValveSpec, build_valve_payload
from hassdiscovery.payload import camel_to_snake
from hassdiscovery.topic import discovery_topic

FIELDS = [
    ("name", "name", "Water Valve"),
    ("commandTopic", "command_topic", "home/valve/water/set"),
    ("stateTopic", "state_topic", "home/valve/water/state"),
    ("commandTemplate", "command_template", "{{ value }}"),
    ("valueTemplate", "value_template", "{{ value_json.state }}"),
    ("positionTopic", "position_topic", "home/valve/water/position"),
    ("setPositionTopic", "set_position_topic", "home/valve/water/position/set"),
    ("setPositionTemplate", "set_position_template", "{{ position }}"),
    ("positionTemplate", "position_template", "{{ value_json.position }}"),
    ("payloadOpen", "payload_open", "OPEN"),
    ("payloadClose", "payload_close", "CLOSE"),
    ("payloadStop", "payload_stop", "STOP"),
    ("stateOpen", "state_open", "opened"),
    ("stateClosed", "state_closed", "shut"),
    ("stateOpening", "state_opening", "going-open"),
    ("stateClosing", "state_closing", "going-shut"),
    ("deviceClass", "device_class", "water"),
    ("reportsPosition", "reports_position", True),
    ("optimistic", "optimistic", False),
    ("icon", "icon", "mdi:valve"),
    ("entityCategory", "entity_category", "config"),
    ("enabledByDefault", "enabled_by_default", True),
    ("objectId", "object_id", "water_valve"),
    ("qos", "qos", 1),
    ("retain", "retain", True),
    ("encoding", "encoding", "utf-8"),
    ("jsonAttributesTopic", "json_attributes_topic", "home/valve/water/attrs"),
    ("jsonAttributesTemplate", "json_attributes_template", "{{ value_json | tojson }}"),
]


def _full_spec():
    return ValveSpec(**{attr: value for _, attr, value in FIELDS})


def test_empty_spec_gives_empty_payload():
    assert build_valve_payload(ValveSpec()).build_map() == {}


def test_minimal_spec():
    spec = ValveSpec(
        name="E2E Water Valve",
        command_topic="e2e/valve/water/set",
        state_topic="e2e/valve/water/state",
        device_class="water",
    )
    data = build_valve_payload(spec).build_map()
    assert data["name"] == "E2E Water Valve"
    assert data["command_topic"] == "e2e/valve/water/set"
    assert data["device_class"] == "water"
    assert len(data) == 4


def test_full_spec_maps_every_field():
    data = build_valve_payload(_full_spec()).build_map()
    expected = {camel_to_snake(key): value for key, _, value in FIELDS}
    assert data == expected
    assert len(data) == len(FIELDS)


@pytest.mark.parametrize("key,attr,value", FIELDS)
def test_each_field_alone(key, attr, value):
    data = build_valve_payload(ValveSpec(**{attr: value})).build_map()
    assert data == {camel_to_snake(key): value}


def test_false_and_zero_are_kept():
    spec = ValveSpec(optimistic=False, retain=False, qos=0)
    data = build_valve_payload(spec).build_map()
    assert data["optimistic"] is False
    assert data["retain"] is False
    assert data["qos"] == 0


def test_build_round_trips_through_json():
    builder = build_valve_payload(_full_spec())
    assert json.loads(builder.build()) == builder.build_map()


def test_discovery_topic_for_kind():
    assert discovery_topic(KIND, "ns", "main") == "homeassistant/valve/ns/main/config"