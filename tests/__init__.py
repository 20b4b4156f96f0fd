"""
Test suite for the booking pricing & settlement core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
