"""
Tests for the rule catalog — verify each heuristic fires (and stays quiet) correctly.
"""

import pytest

from accesswai.core.rule_catalog import RULE_CATALOG, describe_rule, get_rule, list_rules
from accesswai.core.rules import heading_hierarchy, missing_form_label
from accesswai.errors import UnknownRuleError
from accesswai.models.rule_models import LineContext, Severity


def _fires(rule_id, line, index=0):
    rule = get_rule(rule_id)
    ctx = LineContext(line=line, index=index, window=(line,))
    return rule.matcher(ctx) is not None


def test_catalog_order_and_size():
    assert [r.rule_id for r in RULE_CATALOG] == [
        "missing_alt_text",
        "empty_alt_text",
        "button_without_text",
        "missing_form_label",
        "color_contrast",
        "heading_hierarchy",
        "missing_lang",
        "non_semantic_interactive",
        "non_descriptive_link",
        "missing_landmark",
    ]


def test_catalog_severities():
    severities = {r.type: r.severity for r in RULE_CATALOG}
    assert severities == {
        "Missing Alt Text": Severity.CRITICAL,
        "Empty Alt Text": Severity.MEDIUM,
        "Button Without Text": Severity.HIGH,
        "Missing Form Label": Severity.HIGH,
        "Potential Color Contrast Issue": Severity.MEDIUM,
        "Heading Hierarchy": Severity.LOW,
        "Missing Language Attribute": Severity.HIGH,
        "Non-Semantic Interactive Element": Severity.HIGH,
        "Non-Descriptive Link Text": Severity.MEDIUM,
        "Missing ARIA Landmark": Severity.LOW,
    }


def test_only_label_rule_needs_context():
    windows = {r.rule_id: r.context_window for r in RULE_CATALOG}
    assert windows.pop("missing_form_label") == 2
    assert set(windows.values()) == {0}


def test_unknown_rule_lookup():
    with pytest.raises(UnknownRuleError):
        get_rule("no_such_rule")


def test_describe_rule_includes_templates():
    detail = describe_rule("heading_hierarchy")
    assert detail.id == "heading_hierarchy"
    assert detail.severity == Severity.LOW
    assert "{level}" in detail.description_template
    with pytest.raises(UnknownRuleError):
        describe_rule("no_such_rule")


def test_list_rules_metadata():
    infos = list_rules()
    assert len(infos) == len(RULE_CATALOG)
    assert infos[3].id == "missing_form_label"
    assert infos[3].context_window == 2


@pytest.mark.parametrize(
    "rule_id, line, expected",
    [
        ("missing_alt_text", '<img src="x.png">', True),
        ("missing_alt_text", '<IMG SRC="x.png">', True),
        ("missing_alt_text", '<img src="x.png" alt="Chart of sales">', False),
        ("missing_alt_text", '<img alt="" src="x.png">', False),
        ("empty_alt_text", '<img alt="" src="spacer.gif">', True),
        ("empty_alt_text", '<img alt="" class="decorative" src="spacer.gif">', False),
        ("empty_alt_text", '<img alt="" class="Decorative" src="spacer.gif">', False),
        ("empty_alt_text", '<img src="spacer.gif" alt="">', False),
        ("button_without_text", "<button></button>", True),
        ("button_without_text", '<button class="close">   </button>', True),
        ("button_without_text", '<button class="icon"><i class="fa fa-times"></i></button>', True),
        ("button_without_text", "<button>Save</button>", False),
        ("color_contrast", '<p style="color: #333">Text</p>', True),
        ("color_contrast", "<p style='color:#a1b2c3'>Text</p>", True),
        ("color_contrast", '<p style="color: red">Text</p>', False),
        ("color_contrast", '<p class="muted">Text</p>', False),
        ("missing_lang", "<html>", True),
        ("missing_lang", '<HTML class="no-js">', True),
        ("missing_lang", '<html lang="en">', False),
        ("missing_lang", "</html>", False),
        ("non_semantic_interactive", '<div onclick="openMenu()">Menu</div>', True),
        ("non_semantic_interactive", "<div onClick={toggle}>Menu</div>", True),
        ("non_semantic_interactive", '<div onClick={toggle} role="button">Menu</div>', False),
        ("non_semantic_interactive", "<button onClick={toggle}>Menu</button>", False),
        ("non_descriptive_link", '<a href="/docs">click here</a>', True),
        ("non_descriptive_link", '<a href="/docs"> Read More </a>', True),
        ("non_descriptive_link", '<a href="/docs">here</a>', True),
        ("non_descriptive_link", '<a href="/docs">more</a>', True),
        ("non_descriptive_link", '<a href="/docs">Learn more</a>', False),
        ("non_descriptive_link", '<a href="/pricing">See pricing plans</a>', False),
        ("missing_landmark", '<div className="site-header">', True),
        ("missing_landmark", "<div className='main-content'>", True),
        ("missing_landmark", '<div className="site-header" role="banner">', False),
        ("missing_landmark", '<div className="card">', False),
        ("missing_landmark", '<header className="site-header">', False),
    ],
)
def test_single_line_rules(rule_id, line, expected):
    assert _fires(rule_id, line) is expected


def test_form_label_requires_missing_label_in_window():
    line = '<input type="text" name="q">'
    rule = missing_form_label.RULE
    alone = LineContext(line=line, index=0, window=(line,))
    labelled = LineContext(line=line, index=2, window=("<label>Search</label>", "", line))
    assert rule.matcher(alone) == {}
    assert rule.matcher(labelled) is None


@pytest.mark.parametrize(
    "line",
    [
        '<input type="text" aria-label="Search">',
        '<input type="text" aria-labelledby="search-label">',
        '<input type="hidden" name="csrf">',
        "<input type=submit value=Go>",
        "<input type='button' value='Go'>",
    ],
)
def test_form_label_exemptions(line):
    ctx = LineContext(line=line, index=0, window=(line,))
    assert missing_form_label.check(ctx) is None


def test_heading_rule_reports_level():
    ctx = LineContext(line="<h4>Details</h4>", index=3, window=("<h4>Details</h4>",))
    assert heading_hierarchy.check(ctx) == {"level": 4}
    description, _ = heading_hierarchy.RULE.render({"level": 4})
    assert description == "H4 used early in document - verify proper heading hierarchy"


def test_heading_rule_cutoff():
    line = "<h3>Late section</h3>"
    last_early = heading_hierarchy.HEADING_CUTOFF_LINES - 1
    assert heading_hierarchy.HEADING_CUTOFF_LINES == 50
    assert _fires("heading_hierarchy", line, index=last_early)
    assert not _fires("heading_hierarchy", line, index=last_early + 1)


@pytest.mark.parametrize("line", ["<h1>Title</h1>", "<h2>Section</h2>", "<header>", "<hr>"])
def test_heading_rule_ignores_top_levels(line):
    assert not _fires("heading_hierarchy", line)


def test_window_clipped_at_file_edges():
    rule = missing_form_label.RULE
    lines = ["a", "b", "c", "d", "e", "f"]
    assert rule.window_for(lines, 0) == ("a", "b", "c")
    assert rule.window_for(lines, 3) == ("b", "c", "d", "e", "f")
    assert rule.window_for(lines, 5) == ("d", "e", "f")
    assert get_rule("missing_alt_text").window_for(lines, 2) == ("c",)
