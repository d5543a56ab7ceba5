"""Formula text for the current parameters.

format_formula() builds the plain equation string; formula_html() typesets
it as Qt rich text. render_formula() falls back to the plain string if
typesetting fails.
"""

from __future__ import annotations

import html
import logging
import math
import re

from PyQt6.QtCore import Qt

logger = logging.getLogger(__name__)

FORMULA_STYLE = "font-size: 18px; color: #e2e8f0;"

_VARIABLE_RE = re.compile(r"\b([xy])\b|(?<=\d)(x)")


def _fixed(value: float) -> str:
    """One-decimal text with no signed zero ("-0.0" becomes "0.0")."""
    return f"{round(value, 1) + 0.0:.1f}"


def _signed_term(value: float, suffix: str = "") -> str:
    """' + v' or ' - |v|', or '' when value is exactly zero."""
    if value == 0:
        return ""
    sign = "+" if value > 0 else "-"
    return f" {sign} {_fixed(abs(value))}{suffix}"


def format_formula(params) -> str:
    """Equation string, e.g. 'y = 2.0 sin(1.0x + 1.0π) - 3.0'.

    Phase is written as a multiple of pi. Zero phase and zero offset
    terms are left out.
    """
    amp, freq, phase, offset = params
    phase_term = _signed_term(phase / math.pi, "π")
    offset_term = _signed_term(offset)
    return f"y = {_fixed(amp)} sin({_fixed(freq)}x{phase_term}){offset_term}"


def formula_html(text: str) -> str:
    """Typeset a formula string as rich text with italic variables."""
    escaped = html.escape(text)
    body = _VARIABLE_RE.sub(lambda m: f"<i>{m.group(1) or m.group(2)}</i>", escaped)
    body = body.replace("sin", "<span style='font-style: normal;'>sin</span>")
    return f"<span style=\"{FORMULA_STYLE}\">{body}</span>"


def render_formula(target, params, typesetter=formula_html) -> str | None:
    """Show the formula for params on target (a QLabel or similar).

    Returns the plain formula string, or None when there is no target.
    """
    if target is None:
        return None
    text = format_formula(params)
    try:
        rich = typesetter(text)
        target.setTextFormat(Qt.TextFormat.RichText)
        target.setText(rich)
    except Exception:
        logger.warning("Formula typesetting failed; showing plain text",
                       exc_info=True)
        target.setTextFormat(Qt.TextFormat.PlainText)
        target.setText(text)
    return text
