"""Discovery specs and payload builders for text, update, vacuum, valve and water heater entities."""