"""
Shared utilities for decimal-units.

- Decimal coercion and the arithmetic context
- Logging utilities
"""
