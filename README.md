# hassdiscovery

Build Home Assistant MQTT discovery payloads and publish them to a broker.

## Installation

```
pip install .
```

## Building a payload

`hassdiscovery.payload.PayloadBuilder` collects discovery fields.

- `set(key, value)` stores the value under the key converted from camelCase
  to snake_case (`camel_to_snake`). `None`, `""` and empty lists are left out.
- `set_raw(key, value)` stores the value under the key as given, leaving out
  only `None`.
- `set_device(device)` and `set_availability(availability)` add the `device`
  block and the `availability` list when they are not empty.
- `build()` returns the payload as compact UTF-8 JSON bytes with sorted keys;
  `build_map()` returns a copy of the fields as a dict.

`device_block_to_map(...)` builds a device block from its fields, leaving out
empty ones, and `availability_to_map(topic, ...)` builds one availability
entry, which always holds the topic.

```python
from hassdiscovery.payload import PayloadBuilder, availability_to_map, device_block_to_map

builder = PayloadBuilder()
builder.set("commandTopic", "home/button/cmd")
builder.set("name", "Test Button")
builder.set_device(device_block_to_map(
    name="My Device",
    identifiers=["device-001"],
    manufacturer="ACME",
    model="Widget",
    suggested_area="Living Room",
))
builder.set_availability([availability_to_map("home/device/avail", "online", "offline")])
print(builder.build())
```

## Topics and identifiers

`hassdiscovery.topic` maps kinds such as `MQTTSensor` or `MQTTWaterHeater`
to Home Assistant components (`COMPONENT_MAPPING`) and builds topics of the
form `<prefix>/<component>/<namespace>/<name>/config`. A kind that is not in
the mapping falls back to its lower-cased name without the `MQTT` prefix.

```python
from hassdiscovery.topic import discovery_topic, discovery_topic_with_prefix, unique_id

discovery_topic("MQTTSensor", "home", "kitchen-temp")
# 'homeassistant/sensor/home/kitchen-temp/config'
discovery_topic_with_prefix("ha", "MQTTDeviceTrigger", "home", "remote")
# 'ha/device_automation/home/remote/config'
unique_id("home", "kitchen-temp")
# 'home-kitchen-temp'
```

`unique_id_with_override(unique_id, namespace, name)` returns the given
identifier when it is not empty and `<namespace>-<name>` otherwise.

## Entity payloads

`hassdiscovery.entities` holds a spec dataclass and a builder function for
each of these entity types:

| Module | Spec | Builder |
| --- | --- | --- |
| `entities.text` | `TextSpec` | `build_text_payload` |
| `entities.update` | `UpdateSpec` | `build_update_payload` |
| `entities.vacuum` | `VacuumSpec` | `build_vacuum_payload` |
| `entities.valve` | `ValveSpec` | `build_valve_payload` |
| `entities.water_heater` | `WaterHeaterSpec` | `build_water_heater_payload` |

Each builder returns a `PayloadBuilder` holding the spec's fields that are set.

```python
from hassdiscovery.entities.valve import ValveSpec, build_valve_payload

payload = build_valve_payload(ValveSpec(
    name="Water Valve",
    command_topic="home/valve/water/set",
    state_topic="home/valve/water/state",
    device_class="water",
)).build()
```

## Publishing

`MQTTConfig.from_env()` reads `MQTT_BROKER` (required), `MQTT_PORT`
(default 1883), `MQTT_CLIENT_ID` (default `hass-crds-controller`),
`MQTT_USERNAME`, `MQTT_PASSWORD` and `MQTT_USE_TLS` (`true` or `1`). It
raises `ValueError` when the broker is missing or the port is not an
integer. `broker_url()` returns `tcp://host:port` or `ssl://host:port`.

`PahoClient` connects with automatic reconnection. `publish` first waits
for the connection to come back (at most 30 seconds), and raises
`MQTTError` when it cannot connect or publish in time.

```python
from hassdiscovery.config import MQTTConfig
from hassdiscovery.client import PahoClient

client = PahoClient(MQTTConfig.from_env())
client.connect()
client.publish("homeassistant/valve/home/water/config", payload, qos=1, retain=True)
client.disconnect()
```

`MockClient` offers the same methods and records what is published
(`published_messages()`, `clear_messages()`). Set its `connect_error` or
`publish_error` attribute to an exception to have the matching calls raise it.

## What the package does not do

The package builds payloads and topics and publishes them when asked. It has
no command-line program, does not watch any store of resources, does not
republish on a schedule and does not clear retained discovery messages by
itself; the calling code decides what to publish and when.

## Running the tests

```
pip install .[test]
pytest
```