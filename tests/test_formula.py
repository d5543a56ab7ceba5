"""Tests for sinewave/formula.py and sinewave/notes.py."""

import math

import pytest
from PyQt6.QtCore import Qt

from params import Field, WaveParams
from sinewave.formula import format_formula, formula_html, render_formula
from sinewave.notes import IDLE_NOTE, OBSERVATION_NOTES, observation_note


class FakeLabel:
    """Records what a QLabel would have been given."""

    def __init__(self):
        self.text = None
        self.text_format = None

    def setText(self, text):
        self.text = text

    def setTextFormat(self, fmt):
        self.text_format = fmt


class TestFormatFormula:
    """Sign handling and zero-term omission."""

    def test_defaults(self):
        assert format_formula(WaveParams()) == "y = 1.0 sin(1.0x)"

    def test_positive_phase_negative_offset(self):
        text = format_formula(WaveParams(2.0, 1.0, math.pi, -3.0))
        assert "+ 1.0π" in text
        assert "- 3.0" in text
        assert text == "y = 2.0 sin(1.0x + 1.0π) - 3.0"

    def test_negative_phase_positive_offset(self):
        text = format_formula(WaveParams(1.0, 2.0, -math.pi / 2, 0.5))
        assert text == "y = 1.0 sin(2.0x - 0.5π) + 0.5"

    def test_negative_amplitude_kept_inline(self):
        assert format_formula(WaveParams(amplitude=-1.5)) == "y = -1.5 sin(1.0x)"

    def test_tiny_nonzero_terms_are_kept(self):
        """Only exact zeros are omitted."""
        text = format_formula(WaveParams(1.0, 1.0, 1e-9, 1e-9))
        assert "π" in text
        assert text.endswith("+ 0.0")

    def test_no_signed_zero(self):
        """Small negatives print as 0.0, not -0.0."""
        text = format_formula(WaveParams(-0.04, -0.01, -1e-12, 0.0))
        assert "-0.0" not in text
        assert text.startswith("y = 0.0 sin(0.0x")

    def test_zero_frequency(self):
        assert format_formula(WaveParams(frequency=0.0)) == "y = 1.0 sin(0.0x)"


class TestFormulaHtml:

    def test_variables_italic(self):
        rich = formula_html("y = 1.0 sin(1.0x)")
        assert "<i>y</i>" in rich
        assert "<i>x</i>" in rich
        assert "sin" in rich

    def test_escapes_markup(self):
        assert "<b>" not in formula_html("<b>")


class TestRenderFormula:
    """Typesetting with plain-text fallback."""

    def test_rich_text(self):
        label = FakeLabel()
        text = render_formula(label, WaveParams())
        assert text == "y = 1.0 sin(1.0x)"
        assert label.text_format == Qt.TextFormat.RichText
        assert "<i>x</i>" in label.text

    def test_falls_back_to_plain_text(self):
        def broken(_text):
            raise RuntimeError("typesetter unavailable")

        label = FakeLabel()
        text = render_formula(label, WaveParams(2.0, 1.0, math.pi, -3.0),
                              typesetter=broken)
        assert label.text == text == "y = 2.0 sin(1.0x + 1.0π) - 3.0"
        assert label.text_format == Qt.TextFormat.PlainText

    def test_missing_target_is_skipped(self):
        assert render_formula(None, WaveParams()) is None


class TestObservationNotes:

    def test_one_note_per_field(self):
        assert set(OBSERVATION_NOTES) == set(Field)

    @pytest.mark.parametrize("field", list(Field))
    def test_note_lookup(self, field):
        assert observation_note(field) == OBSERVATION_NOTES[field]

    def test_idle_prompt(self):
        assert observation_note(None) == IDLE_NOTE
