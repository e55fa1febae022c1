"""Fuzz testing infrastructure for calday.

This package contains:
- test_dates_property: format/parse totality and round-trip properties
- test_cache_state_machine: LayoutCache checked against an ordered-dict model
- test_engine_concurrent: shared engine under concurrent format/parse load

Run with: pytest -m fuzz

Python 3.13+.
"""
