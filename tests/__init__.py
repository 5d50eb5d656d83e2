"""
Test suite for the counterweight fill calculator

Contains:
- tests/unit/          : Unit tests for individual modules
"""
