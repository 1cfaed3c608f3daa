"""Tests for elementary rule tables and neighborhood encoding.

Covers the full rule-110 truth table, code packing, and Wolfram-number
rule parameters.
"""

import pytest
import numpy as np
from src.rule110.errors import ConfigurationError
from src.rule110.rules import (
    RULE_110_TABLE, RuleParams, apply_rule, decode_neighborhood, encode_neighborhood
)


class TestRule110Table:
    """Rule 110 truth table must be total over {0,1}^3."""

    @pytest.mark.parametrize("neighborhood,expected", [
        ((1, 1, 1), 0),
        ((1, 1, 0), 1),
        ((1, 0, 1), 1),
        ((1, 0, 0), 0),
        ((0, 1, 1), 1),
        ((0, 1, 0), 1),
        ((0, 0, 1), 1),
        ((0, 0, 0), 0),
    ])
    def test_table_entries(self, neighborhood, expected):
        """Each neighborhood maps to the documented value."""
        assert RULE_110_TABLE[neighborhood] == expected
        assert apply_rule(*neighborhood) == expected

    def test_table_is_total(self):
        """All 8 neighborhoods are mapped, each to 0 or 1."""
        assert len(RULE_110_TABLE) == 8
        for code in range(8):
            assert RULE_110_TABLE[decode_neighborhood(code)] in (0, 1)

    def test_zero_one_one_is_not_dropped(self):
        """(0,1,1) is a live mapping, not a fall-through."""
        assert apply_rule(0, 1, 1) == 1


class TestNeighborhoodEncoding:
    """Pattern codes pack left/center/right as binary digits."""

    def test_encode_values(self):
        assert encode_neighborhood(0, 0, 0) == 0
        assert encode_neighborhood(0, 0, 1) == 1
        assert encode_neighborhood(0, 1, 1) == 3
        assert encode_neighborhood(1, 0, 0) == 4
        assert encode_neighborhood(1, 1, 1) == 7

    def test_decode_inverts_encode(self):
        for code in range(8):
            assert encode_neighborhood(*decode_neighborhood(code)) == code

    @pytest.mark.parametrize("code", [-1, 8, 100])
    def test_decode_rejects_out_of_range(self, code):
        with pytest.raises(ValueError, match="0..7"):
            decode_neighborhood(code)


class TestRuleParams:
    """Rule parameters derived from a Wolfram code."""

    def test_default_is_rule_110(self):
        params = RuleParams()
        assert params.number == 110
        assert params == RuleParams.rule110()

    def test_rule_110_matches_table(self):
        """Bitwise lookup reproduces the explicit table exactly."""
        assert RuleParams.rule110().as_table() == RULE_110_TABLE

    def test_lookup_array(self):
        params = RuleParams.rule110()
        assert params.lookup.dtype == np.uint8
        assert params.lookup.tolist() == [0, 1, 1, 1, 0, 1, 1, 0]

    def test_update_cell(self):
        params = RuleParams.rule110()
        for neighborhood, expected in RULE_110_TABLE.items():
            assert params.update_cell(*neighborhood) == expected

    def test_other_rules(self):
        """Rule 30 and rule 0 follow the same bit convention."""
        rule30 = RuleParams(30)
        assert rule30.update_cell(1, 0, 0) == 1
        assert rule30.update_cell(1, 1, 1) == 0
        assert RuleParams(0).lookup.sum() == 0
        assert RuleParams(255).lookup.sum() == 8

    @pytest.mark.parametrize("number", [-1, 256, 1000])
    def test_out_of_range_rule_rejected(self, number):
        with pytest.raises(ConfigurationError, match="0..255"):
            RuleParams(number)

    @pytest.mark.parametrize("number", [110.0, "110", True])
    def test_non_integer_rule_rejected(self, number):
        with pytest.raises(ConfigurationError, match="must be an integer"):
            RuleParams(number)

    def test_repr(self):
        assert repr(RuleParams(90)) == "RuleParams(number=90)"
