import pytest
import sys
import os

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from quote_configurator.engine import is_visible, visible_options, visible_questions
from quote_configurator.engine.models import Question, VisibilityConfig, VisibilityRule


def single(operator, value=None, key="note", **extra):
    rule = {"questionKey": key, "operator": operator}
    if value is not None:
        rule["value"] = value
    return {"rules": [rule], "logic": "all", **extra}


# ==========================================================================
# No rules
# ==========================================================================

@pytest.mark.parametrize("config", [
    None,
    {"rules": [], "logic": "all"},
    {"rules": [], "logic": "any", "action": "hide"},
    VisibilityConfig(rules=[], action="hide"),
])
@pytest.mark.parametrize("answers", [{}, {"material": "hout"}, {"note": ""}])
def test_no_rules_always_visible(config, answers):
    assert is_visible(config, answers) is True


# ==========================================================================
# equals / not_equals
# ==========================================================================

def test_equals_matches_exact_string():
    config = single("equals", "hout", key="material")
    assert is_visible(config, {"material": "hout"}) is True
    assert is_visible(config, {"material": "metaal"}) is False


def test_not_equals_matches_when_different():
    config = single("not_equals", "hout", key="material")
    assert is_visible(config, {"material": "metaal"}) is True
    assert is_visible(config, {"material": "hout"}) is False


def test_equals_coerces_number_answer():
    assert is_visible(single("equals", "5", key="count"), {"count": 5}) is True
    assert is_visible(single("equals", "5", key="count"), {"count": 5.0}) is True
    assert is_visible(single("equals", "5", key="count"), {"count": 6}) is False


def test_equals_array_answer_is_unequal():
    assert is_visible(single("equals", "a"), {"note": ["a"]}) is False
    assert is_visible(single("not_equals", "a"), {"note": ["a"]}) is True


@pytest.mark.parametrize("answers", [
    {}, {"note": "x"}, {"note": "y"}, {"note": 3}, {"note": ["x"]}, {"note": None},
])
def test_equals_and_not_equals_are_complements(answers):
    eq = is_visible(single("equals", "x"), answers)
    neq = is_visible(single("not_equals", "x"), answers)
    assert eq != neq


def test_equals_absent_answer():
    assert is_visible(single("equals", "x"), {}) is False
    assert is_visible(single("not_equals", "x"), {}) is True


# ==========================================================================
# includes / not_includes
# ==========================================================================

def test_includes_array_membership():
    config = single("includes", "wifi", key="features")
    assert is_visible(config, {"features": ["wifi", "bluetooth"]}) is True
    assert is_visible(config, {"features": ["bluetooth"]}) is False


def test_includes_string_answer_as_single_value():
    config = single("includes", "red", key="color")
    assert is_visible(config, {"color": "red"}) is True
    assert is_visible(config, {"color": "blue"}) is False


def test_not_includes():
    config = single("not_includes", "wifi", key="features")
    assert is_visible(config, {"features": ["bluetooth"]}) is True
    assert is_visible(config, {"features": ["wifi", "bluetooth"]}) is False


def test_includes_absent_answer():
    assert is_visible(single("includes", "wifi"), {}) is False
    assert is_visible(single("not_includes", "wifi"), {}) is True


# ==========================================================================
# is_empty / is_not_empty
# ==========================================================================

def test_is_empty_values():
    config = single("is_empty")
    assert is_visible(config, {}) is True
    assert is_visible(config, {"note": None}) is True
    assert is_visible(config, {"note": ""}) is True
    assert is_visible(config, {"note": []}) is True
    assert is_visible(config, {"note": "filled"}) is False
    assert is_visible(config, {"note": 0}) is False
    assert is_visible(config, {"note": False}) is False


@pytest.mark.parametrize("answers", [
    {}, {"note": None}, {"note": ""}, {"note": []}, {"note": "x"}, {"note": 0}, {"note": ["a"]},
])
def test_is_empty_and_is_not_empty_are_complements(answers):
    assert is_visible(single("is_empty"), answers) != is_visible(single("is_not_empty"), answers)


def test_is_not_empty_values():
    config = single("is_not_empty")
    assert is_visible(config, {"note": "hello"}) is True
    assert is_visible(config, {"note": 42}) is True
    assert is_visible(config, {"note": ["a"]}) is True
    assert is_visible(config, {}) is False
    assert is_visible(config, {"note": ""}) is False


# ==========================================================================
# greater_than / less_than
# ==========================================================================

def test_greater_than():
    config = single("greater_than", 3, key="width")
    assert is_visible(config, {"width": 4}) is True
    assert is_visible(config, {"width": 3}) is False
    assert is_visible(config, {"width": 2}) is False


def test_less_than():
    config = single("less_than", 10, key="height")
    assert is_visible(config, {"height": 9}) is True
    assert is_visible(config, {"height": 10}) is False
    assert is_visible(config, {"height": 11}) is False


def test_numeric_string_threshold():
    assert is_visible(single("greater_than", "2.5", key="width"), {"width": 3}) is True


@pytest.mark.parametrize("answers", [{}, {"width": "wide"}, {"width": "4"}, {"width": True}, {"width": [5]}])
def test_comparisons_false_for_non_numbers(answers):
    assert is_visible(single("greater_than", 3, key="width"), answers) is False
    assert is_visible(single("less_than", 3, key="width"), answers) is False


def test_unknown_operator_fails_rule():
    assert is_visible(single("matches_regex", "x"), {"note": "x"}) is False


# ==========================================================================
# Logic modes and actions
# ==========================================================================

TWO_RULES = [
    {"questionKey": "material", "operator": "equals", "value": "hout"},
    {"questionKey": "width", "operator": "greater_than", "value": 2},
]


@pytest.mark.parametrize("answers,all_expected,any_expected", [
    ({"material": "hout", "width": 3}, True, True),
    ({"material": "hout", "width": 1}, False, True),
    ({"material": "metaal", "width": 3}, False, True),
    ({"material": "metaal", "width": 1}, False, False),
])
def test_all_and_any_logic(answers, all_expected, any_expected):
    assert is_visible({"rules": TWO_RULES, "logic": "all"}, answers) is all_expected
    assert is_visible({"rules": TWO_RULES, "logic": "any"}, answers) is any_expected


@pytest.mark.parametrize("logic", ["all", "any"])
@pytest.mark.parametrize("answers", [
    {"material": "hout", "width": 3}, {"material": "hout"}, {"width": 5}, {},
])
def test_hide_is_negation_of_show(logic, answers):
    show = is_visible({"rules": TWO_RULES, "logic": logic, "action": "show"}, answers)
    hide = is_visible({"rules": TWO_RULES, "logic": logic, "action": "hide"}, answers)
    assert hide is (not show)


def test_action_defaults_to_show():
    config = {"rules": [TWO_RULES[0]], "logic": "all"}
    assert is_visible(config, {"material": "hout"}) is True
    assert is_visible(config, {"material": "metaal"}) is False


def test_hide_scenario():
    config = {
        "rules": [{"questionKey": "material", "operator": "equals", "value": "hout"}],
        "logic": "all",
        "action": "hide",
    }
    assert is_visible(config, {"material": "hout"}) is False
    assert is_visible(config, {"material": "metaal"}) is True


def test_hide_with_any_logic():
    config = {
        "rules": [
            {"questionKey": "material", "operator": "equals", "value": "hout"},
            {"questionKey": "material", "operator": "equals", "value": "metaal"},
        ],
        "logic": "any",
        "action": "hide",
    }
    assert is_visible(config, {"material": "hout"}) is False
    assert is_visible(config, {"material": "metaal"}) is False
    assert is_visible(config, {"material": "glas"}) is True


def test_accepts_dataclass_config():
    config = VisibilityConfig(
        rules=[VisibilityRule(question_key="material", operator="equals", value="hout")],
    )
    assert is_visible(config, {"material": "hout"}) is True


def test_answers_not_mutated():
    answers = {"features": ["wifi"], "material": "hout"}
    snapshot = {"features": ["wifi"], "material": "hout"}
    is_visible({"rules": TWO_RULES, "logic": "any"}, answers)
    assert answers == snapshot


# ==========================================================================
# Question and option filtering
# ==========================================================================

def test_visible_questions_keeps_order():
    questions = [
        Question.from_dict({"question_key": "material", "label": "Materiaal", "type": "single-select"}),
        Question.from_dict({
            "question_key": "finish",
            "label": "Afwerking",
            "type": "single-select",
            "visibility_rules": {
                "rules": [{"questionKey": "material", "operator": "equals", "value": "hout"}],
                "logic": "all",
            },
        }),
        Question.from_dict({"question_key": "width", "label": "Breedte", "type": "number"}),
    ]
    keys = [q.question_key for q in visible_questions(questions, {"material": "hout"})]
    assert keys == ["material", "finish", "width"]

    keys = [q.question_key for q in visible_questions(questions, {"material": "metaal"})]
    assert keys == ["material", "width"]


def test_visible_options():
    question = Question.from_dict({
        "question_key": "roof",
        "label": "Dak",
        "type": "single-select",
        "options": [
            {"value": "flat", "label": "Plat dak"},
            {
                "value": "tiles",
                "label": "Dakpannen",
                "visibility_rules": {
                    "rules": [{"questionKey": "width", "operator": "less_than", "value": 6}],
                    "logic": "all",
                    "action": "show",
                },
            },
        ],
    })
    assert [o.value for o in visible_options(question, {"width": 4})] == ["flat", "tiles"]
    assert [o.value for o in visible_options(question, {"width": 8})] == ["flat"]
