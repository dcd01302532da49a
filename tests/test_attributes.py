"""Tests for attribute merging and serialization."""

from __future__ import annotations

from decimal import Decimal

from markupsafe import Markup

from model_input.attributes import RESERVED_ATTRIBUTES, merge_attributes, render_attributes
from model_input.column import ColumnSchema
from model_input.rules import derive_rules


class TestMergeAttributes:
    def test_empty_override_is_identity(self):
        derived = derive_rules(ColumnSchema(type="string", length=50, notnull=True))
        assert merge_attributes(derived, {}) == derived
        assert merge_attributes(derived, None) == derived

    def test_caller_wins(self):
        merged = merge_attributes({"disabled": False, "maxlength": 50}, {"disabled": True})
        assert merged["disabled"] is True
        assert merged["maxlength"] == 50

    def test_new_keys_appended(self):
        merged = merge_attributes({"required": True}, {"data-role": "primary"})
        assert list(merged) == ["required", "data-role"]

    def test_reserved_keys_removed(self):
        merged = merge_attributes(
            {"required": True},
            {"id": "x", "name": "y", "type": "email", "class": "big", "placeholder": "you@example.com"},
        )
        assert not RESERVED_ATTRIBUTES & merged.keys()
        assert merged["placeholder"] == "you@example.com"

    def test_inputs_not_mutated(self):
        derived = {"required": False}
        overrides = {"required": True}
        merge_attributes(derived, overrides)
        assert derived == {"required": False}


class TestRenderAttributes:
    def test_only_non_null_values_emitted(self):
        html = render_attributes({"maxlength": 50, "pattern": None, "disabled": False, "required": True})
        assert html == Markup(' maxlength="50" required')

    def test_empty(self):
        assert render_attributes({}) == Markup("")
        assert render_attributes({"min": None, "autofocus": False}) == Markup("")

    def test_boolean_true_is_presence_only(self):
        html = render_attributes({"disabled": True, "multiple": True})
        assert html == Markup(" disabled multiple")
        assert "true" not in html.lower()

    def test_zero_is_emitted(self):
        assert render_attributes({"minlength": 0}) == Markup(' minlength="0"')

    def test_values_escaped(self):
        html = render_attributes({"placeholder": '"><script>alert(1)</script>'})
        assert "<script>" not in html
        assert html == Markup(' placeholder="&#34;&gt;&lt;script&gt;alert(1)&lt;/script&gt;"')

    def test_decimal_step_fixed_notation(self):
        assert render_attributes({"step": Decimal("1e-8")}) == Markup(' step="0.00000001"')
        assert render_attributes({"step": Decimal(1)}) == Markup(' step="1"')

    def test_reserved_keys_skipped(self):
        assert render_attributes({"id": "x", "class": "y", "required": True}) == Markup(" required")
