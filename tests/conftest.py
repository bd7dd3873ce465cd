"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For builders and mock services, see tests/mocks/agent_mocks.py
"""

import pytest

from tests.mocks.agent_mocks import make_analysis, make_job


@pytest.fixture
def job():
    return make_job()


@pytest.fixture
def analysis():
    return make_analysis()


@pytest.fixture
def scored_jobs():
    """Three leads with distinct scores, one without a score."""
    return [
        make_job("a", title="Backend Engineer", company="Stripe", location="Remote", match_score=90),
        make_job("b", title="Data Engineer", company="Shopify", location="Toronto, Canada", match_score=40),
        make_job("c", title="Platform Engineer", company="Gitlab", location="Remote (US)", match_score=None),
    ]
