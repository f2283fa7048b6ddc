"""Prompt Builder — renders the per-endpoint template for one invocation.

Invariants:
    - Pure: same (function, locale, fields) always yields the same prompt
    - Absent or non-string optional context substitutes as "" (labels may appear with no content)
    - Field values are inserted verbatim; braces inside values are not re-expanded

Design Decisions:
    - One template module per locale (prompts_en, prompts_pl) with identical keys
    - str.format over f-strings: templates stay data, rendering stays here
"""

from collections.abc import Mapping

from firmbox.core import prompts_en, prompts_pl
from firmbox.core.domain_types import FunctionName, Locale, RequestField

_TEMPLATES: dict[Locale, dict[FunctionName, str]] = {
    Locale.EN: prompts_en.TEMPLATES,
    Locale.PL: prompts_pl.TEMPLATES,
}

# template placeholder -> payload field
_PLACEHOLDERS: dict[str, RequestField] = {
    "business_idea": RequestField.BUSINESS_IDEA,
    "company_name": RequestField.COMPANY_NAME,
    "competitor_analysis": RequestField.COMPETITOR_ANALYSIS,
    "business_plan": RequestField.BUSINESS_PLAN,
}


def _text(value: object) -> str:
    return value if isinstance(value, str) else ""


def render_prompt(
    function: FunctionName,
    locale: Locale,
    fields: Mapping[str, object],
) -> str:
    """Build the prompt for function from the payload fields."""
    try:
        template = _TEMPLATES[locale][function]
    except KeyError:
        raise ValueError(f"No prompt template for {function.value} ({locale.value})")
    values = {
        name: _text(fields.get(field.value))
        for name, field in _PLACEHOLDERS.items()
    }
    return template.format(**values)
