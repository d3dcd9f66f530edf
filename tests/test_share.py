"""Share-token encoding."""

import base64
import json

import pytest

from app.calculator.fields import DEFAULT_INPUTS
from app.calculator.schemas import CalculatorInput
from app.calculator.share import decode_share_token, encode_share_token


def _legacy_token(payload) -> str:
    # standard base64 with padding, as older links were produced
    return base64.b64encode(json.dumps(payload).encode("utf-8")).decode("ascii")


def test_round_trip_defaults():
    assert decode_share_token(encode_share_token(DEFAULT_INPUTS)) == DEFAULT_INPUTS


@pytest.mark.parametrize("values", [
    dict(projects_per_year=1, avg_budget_per_project=1000, avg_cost_overrun_pct=0,
         avg_schedule_slip_weeks=0, cost_per_week_of_delay=0, prob_major_issue_pct=0,
         avg_cost_per_major_issue=0, engagement_cost=0),
    dict(projects_per_year=10000, avg_budget_per_project=1e9, avg_cost_overrun_pct=500,
         avg_schedule_slip_weeks=520, cost_per_week_of_delay=1e8, prob_major_issue_pct=100,
         avg_cost_per_major_issue=1e8, engagement_cost=1e7),
    dict(projects_per_year=7.25, avg_budget_per_project=123456.789, avg_cost_overrun_pct=0.1,
         avg_schedule_slip_weeks=3.3, cost_per_week_of_delay=0.01, prob_major_issue_pct=33.333,
         avg_cost_per_major_issue=1 / 3, engagement_cost=4999.99),
])
def test_round_trip_extremes(values):
    inputs = CalculatorInput(**values)
    assert decode_share_token(encode_share_token(inputs)) == inputs


def test_token_is_url_safe_and_deterministic():
    token = encode_share_token(DEFAULT_INPUTS)
    assert token == encode_share_token(CalculatorInput(**DEFAULT_INPUTS.model_dump()))
    assert not set(token) & set("+/= ")


def test_token_carries_camel_case_keys():
    token = encode_share_token(DEFAULT_INPUTS)
    padded = token + "=" * (-len(token) % 4)
    payload = json.loads(base64.urlsafe_b64decode(padded))
    assert payload["projectsPerYear"] == 10
    assert list(payload) == sorted(payload)


def test_key_order_does_not_matter(sample_inputs):
    reordered = dict(reversed(list(sample_inputs.items())))
    assert decode_share_token(_legacy_token(reordered)) == DEFAULT_INPUTS


def test_legacy_standard_base64_token(sample_inputs):
    assert decode_share_token(_legacy_token(sample_inputs)) == DEFAULT_INPUTS


@pytest.mark.parametrize("token", [
    "invalid-string",
    "",
    "   ",
    "%%%not base64%%%",
    base64.b64encode(b"not-json").decode(),
    base64.b64encode(b"\xff\xfe\xfd").decode(),
    base64.b64encode(b"[1, 2, 3]").decode(),
    base64.b64encode(b'"just a string"').decode(),
])
def test_garbage_returns_none(token):
    assert decode_share_token(token) is None


def test_non_string_returns_none():
    assert decode_share_token(None) is None
    assert decode_share_token(12345) is None


def test_out_of_range_payload_returns_none(sample_inputs):
    assert decode_share_token(_legacy_token({**sample_inputs, "projectsPerYear": -1})) is None


def test_missing_field_returns_none(sample_inputs):
    partial = dict(sample_inputs)
    del partial["engagementCost"]
    assert decode_share_token(_legacy_token(partial)) is None


def test_string_numbers_are_rejected(sample_inputs):
    assert decode_share_token(_legacy_token({**sample_inputs, "projectsPerYear": "10"})) is None


def test_integer_beyond_float_range_returns_none(sample_inputs):
    body = json.dumps(sample_inputs).replace('"projectsPerYear": 10', '"projectsPerYear": 1' + "0" * 400)
    token = base64.b64encode(body.encode("utf-8")).decode("ascii")
    assert decode_share_token(token) is None
