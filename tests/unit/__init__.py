"""
Unit tests that mirror the source code structure.

Each test module corresponds to a source module and tests its public
interface in isolation.
"""
