from __future__ import annotations
from polycal.core.engine import ConverterRegistry
from polycal.core.types import Calendar
from polycal.engines.factory import make_converter

def build_registry() -> ConverterRegistry:
    converters = {}
    for cal in Calendar:
        converters[cal] = make_converter(cal)
    return ConverterRegistry(converters)
