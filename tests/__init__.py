"""
Test suite for bigint-unboxed

Contains:
- tests/unit/          : Unit tests for the limb engine, hybrid layer, backends and contracts
"""
