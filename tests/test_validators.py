"""Tests for the line validators and their registry."""

import pytest

from buddybot.plugin_system import Finding, Severity
from buddybot.validators import BaseLineValidator, get_all_validators, get_validator
from buddybot.validators.registry import ValidatorRegistry
from buddybot.validators.style import (
    LineLengthValidator,
    MixedIndentValidator,
    TabIndentValidator,
    TodoNoteValidator,
    TrailingWhitespaceValidator,
)
from buddybot.validators.syntax import (
    MissingColonValidator,
    TryWithoutExceptValidator,
    UnclosedPrintValidator,
    UndefinedVariableValidator,
    UnmatchedQuotesValidator,
)


def messages(validator, line, lines=None, line_number=1):
    lines = lines if lines is not None else [line]
    return [f.message for f in validator.check_line(line_number, line, lines)]


def test_builtin_rules_registered_in_check_order():
    rule_ids = list(get_all_validators())

    assert rule_ids[:10] == [
        "PRINT-UNCLOSED",
        "MISSING-COLON",
        "TRY-WITHOUT-EXCEPT",
        "UNMATCHED-QUOTES",
        "UNDEFINED-VARIABLE",
        "LINE-TOO-LONG",
        "TRAILING-WHITESPACE",
        "TODO-NOTE",
        "TAB-INDENT",
        "MIXED-INDENT",
    ]


def test_get_validator():
    assert get_validator("MISSING-COLON") is MissingColonValidator
    assert get_validator("NONEXISTENT-RULE") is None


def test_registry_rejects_non_validators():
    registry = ValidatorRegistry()
    with pytest.raises(ValueError):
        registry.register_validator(dict)


def test_syntax_validators_are_blocking():
    for validator_class in (
        UnclosedPrintValidator,
        MissingColonValidator,
        TryWithoutExceptValidator,
        UnmatchedQuotesValidator,
        UndefinedVariableValidator,
    ):
        assert validator_class.default_severity == Severity.BLOCK


def test_unclosed_print():
    validator = UnclosedPrintValidator()
    assert messages(validator, "print(x") == ["Missing closing parenthesis in print statement"]
    assert messages(validator, "print(x)") == []


@pytest.mark.parametrize(
    "line,construct",
    [
        ("if x > 1", "if statement"),
        ("def foo(", "function definition"),
        ("for x in items", "for loop"),
        ("while running", "while loop"),
    ],
)
def test_missing_colon(line, construct):
    assert messages(MissingColonValidator(), line) == [f"Missing colon after {construct}"]


def test_missing_colon_ignores_lines_with_colon_anywhere():
    assert messages(MissingColonValidator(), "if x: y") == []
    assert messages(MissingColonValidator(), "x = {'if ': 1}") == []


def test_missing_colon_reports_each_construct():
    found = messages(MissingColonValidator(), "for x in y if z")
    assert found == ["Missing colon after if statement", "Missing colon after for loop"]


def test_try_without_except_until_eof():
    lines = ["try:", "    pass", ""]
    assert messages(TryWithoutExceptValidator(), lines[0], lines) == ["try block without matching except"]


def test_try_with_except():
    lines = ["try:", "    pass", "except ValueError:", "    pass"]
    assert messages(TryWithoutExceptValidator(), lines[0], lines) == []


def test_try_search_stops_at_def():
    lines = ["try:", "    pass", "def later():", "    pass", "except Exception:"]
    assert messages(TryWithoutExceptValidator(), lines[0], lines) == ["try block without matching except"]


def test_unmatched_quotes():
    validator = UnmatchedQuotesValidator()
    assert messages(validator, "x = 'abc") == ["Unmatched quotes"]
    assert messages(validator, 'x = "abc') == ["Unmatched quotes"]
    assert messages(validator, "x = 'abc'") == []


def test_undefined_variable_heuristic():
    validator = UndefinedVariableValidator()
    assert messages(validator, "total = undefined + 1") == ["Possible undefined variable usage"]
    assert messages(validator, "total = undefined") == []


def test_line_length():
    assert messages(LineLengthValidator(), "a" * 130) == ["Line exceeds 120 characters"]
    assert messages(LineLengthValidator(), "a" * 120) == []


def test_line_length_configurable():
    validator = LineLengthValidator(config={"max_line_length": 10})
    assert messages(validator, "a" * 11) == ["Line exceeds 10 characters"]


def test_trailing_whitespace():
    validator = TrailingWhitespaceValidator()
    assert messages(validator, "x = 1   ") == ["Trailing whitespace"]
    assert messages(validator, "    ") == []


def test_todo_note_reports_first_marker():
    validator = TodoNoteValidator()
    assert messages(validator, "# TODO fix this") == ["Contains TODO note"]
    assert messages(validator, "# FIXME and TODO") == ["Contains FIXME note"]
    assert messages(validator, "# TODOS are words") == []
    assert messages(validator, "# caféTODO later") == ["Contains TODO note"]


def test_tab_and_mixed_indentation():
    assert messages(TabIndentValidator(), "\tx = 1") == ["Uses tab indentation (prefer spaces)"]
    assert messages(MixedIndentValidator(), "\tx = 1") == []
    assert messages(MixedIndentValidator(), "\t x = 1") == ["Mixed indentation (tabs and spaces)"]
    assert messages(MixedIndentValidator(), "  \tx = 1") == ["Mixed indentation (tabs and spaces)"]
    assert messages(TabIndentValidator(), "  \tx = 1") == []


def test_custom_validator_finding():
    class ShoutValidator(BaseLineValidator):
        rule_id = "SHOUT"

        def check_line(self, line_number, line, lines):
            if line.isupper():
                yield self.create_finding("Stop shouting", line_number)

    findings = list(ShoutValidator().check_line(3, "HELLO", ["", "", "HELLO"]))

    assert findings == [Finding(rule_id="SHOUT", message="Stop shouting", line=3, severity=Severity.WARN)]
    assert findings[0].describe() == "Line 3: Stop shouting"


def test_severity_ordering():
    assert Severity.OFF < Severity.INFO
    assert Severity.INFO < Severity.WARN
    assert Severity.WARN < Severity.BLOCK


def test_line_length_rejects_non_integer_limit(caplog):
    validator = LineLengthValidator(config={"max_line_length": "wide"})

    assert validator.max_line_length == 120
    assert "Invalid max_line_length" in caplog.text
    assert messages(validator, "x" * 121) == ["Line exceeds 120 characters"]
