"""
Rule Catalog — Ordered registry of all accessibility heuristics.

Registration order is part of the output contract: issues on the same
line are emitted in this order. New rules are added here only; the
scanner never needs to change.
"""

from __future__ import annotations

from accesswai.core.rules import (
    button_without_text,
    color_contrast,
    empty_alt_text,
    heading_hierarchy,
    missing_alt_text,
    missing_form_label,
    missing_landmark,
    missing_lang,
    non_descriptive_link,
    non_semantic_interactive,
)
from accesswai.errors import UnknownRuleError
from accesswai.models.rule_models import Rule
from accesswai.models.scan_models import RuleDetail, RuleInfo

RULE_CATALOG: tuple[Rule, ...] = (
    missing_alt_text.RULE,
    empty_alt_text.RULE,
    button_without_text.RULE,
    missing_form_label.RULE,
    color_contrast.RULE,
    heading_hierarchy.RULE,
    missing_lang.RULE,
    non_semantic_interactive.RULE,
    non_descriptive_link.RULE,
    missing_landmark.RULE,
)

_RULES_BY_ID: dict[str, Rule] = {rule.rule_id: rule for rule in RULE_CATALOG}


def get_rule(rule_id: str) -> Rule:
    """Look up a registered rule by id."""
    try:
        return _RULES_BY_ID[rule_id]
    except KeyError:
        raise UnknownRuleError(f"Unknown rule: {rule_id}") from None


def list_rules() -> list[RuleInfo]:
    """Public metadata for every rule, in registration order."""
    return [
        RuleInfo(
            id=rule.rule_id,
            type=rule.type,
            severity=rule.severity,
            context_window=rule.context_window,
        )
        for rule in RULE_CATALOG
    ]


def describe_rule(rule_id: str) -> RuleDetail:
    """Metadata and message templates for one rule."""
    rule = get_rule(rule_id)
    return RuleDetail(
        id=rule.rule_id,
        type=rule.type,
        severity=rule.severity,
        context_window=rule.context_window,
        description_template=rule.description_template,
        suggestion_template=rule.suggestion_template,
    )
