"""Tests for jurisdiction normalization, tax membership and the signup gate."""

import dataclasses
from decimal import Decimal

import pytest

from pricing.policy import JurisdictionPolicy, normalize_jurisdiction


@pytest.mark.parametrize(
    "value,expected",
    [
        ("NS", "NS"),
        ("ns", "NS"),
        ("  NS  ", "NS"),
        ("\tOn\n", "ON"),
        ("", None),
        ("   ", None),
        (None, None),
    ],
)
def test_normalize_jurisdiction(value, expected):
    assert normalize_jurisdiction(value) == expected


def test_defaults():
    policy = JurisdictionPolicy()
    assert policy.taxable_jurisdictions == frozenset({'NS'})
    assert policy.tax_rate == Decimal('0.15')
    assert policy.allowed_jurisdiction == 'NS'
    assert policy.gate_enabled is False


def test_construction_normalizes_codes():
    policy = JurisdictionPolicy(
        taxable_jurisdictions={' ns ', 'on', ''},
        tax_rate=0.13,
        allowed_jurisdiction=' on ',
    )
    assert policy.taxable_jurisdictions == frozenset({'NS', 'ON'})
    assert policy.tax_rate == Decimal('0.13')
    assert policy.allowed_jurisdiction == 'ON'


def test_policy_is_immutable():
    policy = JurisdictionPolicy()
    with pytest.raises(dataclasses.FrozenInstanceError):
        policy.tax_rate = Decimal('0.5')


@pytest.mark.parametrize("province", ["NS", "ns", "  NS  "])
def test_taxable(province):
    assert JurisdictionPolicy().is_taxable(province) is True


@pytest.mark.parametrize("province", ["ON", "BC", "", None, "N S"])
def test_not_taxable(province):
    assert JurisdictionPolicy().is_taxable(province) is False


@pytest.mark.parametrize("province", ["NS", "ns", "  NS  "])
def test_allowed_for_signup(province):
    assert JurisdictionPolicy(allowed_jurisdiction='NS').is_allowed_for_signup(province) is True


@pytest.mark.parametrize("province", ["ON", "BC", "", None])
def test_not_allowed_for_signup(province):
    assert JurisdictionPolicy(allowed_jurisdiction='NS').is_allowed_for_signup(province) is False


def test_allowed_province_is_configurable():
    policy = JurisdictionPolicy(allowed_jurisdiction='ON')
    assert policy.is_allowed_for_signup('on') is True
    assert policy.is_allowed_for_signup('NS') is False


def test_disabled_gate_admits_everyone():
    policy = JurisdictionPolicy(gate_enabled=False)
    assert policy.admits_signup('ON') is True
    assert policy.admits_signup(None) is True


def test_enabled_gate_admits_only_allowed_province():
    policy = JurisdictionPolicy(gate_enabled=True, allowed_jurisdiction='NS')
    assert policy.admits_signup(' ns ') is True
    assert policy.admits_signup('ON') is False
    assert policy.admits_signup('') is False
