"""
Test suite for numerals

Contains:
- tests/unit/          : Unit tests for the encoder, value object and contracts
"""
