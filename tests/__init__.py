"""
Test suite for exact Newton secret recovery

Contains:
- tests/unit/          : Unit tests for math core, contracts, reconstruction and CLI
"""
