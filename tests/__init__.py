"""
Test suite for velentr-core

Contains:
- tests/unit/          : Unit and property tests for the fixed-point family,
                         bounds helpers and serialization contracts
"""
