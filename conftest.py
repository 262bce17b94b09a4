import pytest

from pricing.config import reset_policy


@pytest.fixture(autouse=True)
def fresh_policy():
    """Every test starts from a policy rebuilt from current settings"""
    reset_policy()
    yield
    reset_policy()
