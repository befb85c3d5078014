#!/usr/bin/env python3
"""Soil sensor uplink example for tnvframe.

This example demonstrates:
1. Planning a payload against a LoRaWAN size limit
2. Encoding readings from several sensors as TNV records
3. Printing TTN decoder snippets while encoding
4. Detecting readings that didn't fit
"""

from __future__ import annotations

import sys

from tnvframe import FrameBuffer, FrameConfig, StreamSink, ValueType, payload_size

# (sensor number, temperature in 0.1 degC, humidity in 0.01 %RH, VWC in 0.1 %)
SENSORS = [
    (0, 215, 4521, 312),
    (1, -35, 3890, 287),
    (2, 198, 5012, 356),
    (3, 176, 4977, 341),
    (4, 181, 4702, 330),
]

FIRMWARE_VERSION = 2

# EU868 DR0 limits application payloads to 51 bytes
DR0_CAPACITY = 51


def main() -> None:
    """Run the soil sensor example."""
    print("=" * 60)
    print("tnvframe Soil Sensor Example")
    print("=" * 60)
    print()

    # Plan the payload
    print("1. Planning payload size...")
    tags = [ValueType.VERSION]
    for _ in SENSORS:
        tags += [
            ValueType.SOIL_TEMPERATURE,
            ValueType.SOIL_HUMIDITY,
            ValueType.VOLUMETRIC_WATER_CONTENT,
        ]
    needed = payload_size(tags)
    print(f"   {len(tags)} records need {needed} bytes (limit {DR0_CAPACITY})")
    print()

    # Encode, printing a decoder snippet for every record
    print("2. Encoding with decoder snippets...")
    config = FrameConfig(capacity=DR0_CAPACITY, emit_decoder_text=True)
    frame = FrameBuffer(config, sink=StreamSink(sys.stdout))
    frame.append_tnv(ValueType.VERSION, 0, FIRMWARE_VERSION)

    dropped = []
    for number, temperature, humidity, vwc in SENSORS:
        for tag, value in (
            (ValueType.SOIL_TEMPERATURE, temperature),
            (ValueType.SOIL_HUMIDITY, humidity),
            (ValueType.VOLUMETRIC_WATER_CONTENT, vwc),
        ):
            if not frame.append_tnv(tag, number, value):
                dropped.append(f"{tag.name}[{number}]")
    print()

    # Results
    print("3. Payload...")
    print(f"   Size: {frame.size()} / {frame.capacity} bytes")
    print(f"   Hex:  {frame.hex()}")
    if dropped:
        print(f"   Dropped: {', '.join(dropped)}")
    print()


if __name__ == "__main__":
    main()
