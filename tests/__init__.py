#!/usr/bin/env python3
"""
Test suite for Career Pilot.

All tests run offline; LLM calls are replaced by mocks from tests/mocks.

    # Run all tests
    python -m pytest tests/ -v

    # Using unittest
    python -m unittest discover tests -v
"""
