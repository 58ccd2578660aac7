"""Frontera hexadecimal y flujo de demostración sobre `iot_crypto`."""
