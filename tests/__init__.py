"""
Test suite for decimal-units.

- Unit tests for quantities, units and their supporting layers
- Shared fixtures in conftest.py
"""
