"""
Test suite for numsys

Contains:
- tests/unit/          : Unit tests for the alphabet, safeguards, parser,
                         formatter and conversion facade
"""
