"""
Syntax smell validators.

These are string-contains heuristics, not a parser. They catch the handful of
mistakes a beginner makes most often and nothing more; a clean result here
says nothing about whether the file actually compiles.

buddybot/src/buddybot/validators/syntax.py
"""

from typing import Iterator, List

from ..plugin_system import BaseLineValidator, Finding, Severity

__all__ = [
    "UnclosedPrintValidator",
    "MissingColonValidator",
    "TryWithoutExceptValidator",
    "UnmatchedQuotesValidator",
    "UndefinedVariableValidator",
]


class UnclosedPrintValidator(BaseLineValidator):
    """Flags ``print(`` with no closing parenthesis on the same line."""

    rule_id = "PRINT-UNCLOSED"
    name = "Unclosed Print"
    description = "print( call without a closing parenthesis"
    default_severity = Severity.BLOCK

    def check_line(self, line_number: int, line: str, lines: List[str]) -> Iterator[Finding]:
        if "print(" in line and ")" not in line:
            yield self.create_finding("Missing closing parenthesis in print statement", line_number)


class MissingColonValidator(BaseLineValidator):
    """Flags block statements that lack a colon anywhere on the line."""

    rule_id = "MISSING-COLON"
    name = "Missing Colon"
    description = "if/def/for/while line without a colon"
    default_severity = Severity.BLOCK

    # keyword token -> construct name used in the message
    CONSTRUCTS = (
        ("if ", "if statement"),
        ("def ", "function definition"),
        ("for ", "for loop"),
        ("while ", "while loop"),
    )

    def check_line(self, line_number: int, line: str, lines: List[str]) -> Iterator[Finding]:
        if ":" in line or not line.strip():
            return
        for token, construct in self.CONSTRUCTS:
            if token in line:
                yield self.create_finding(f"Missing colon after {construct}", line_number)


class TryWithoutExceptValidator(BaseLineValidator):
    """Flags ``try:`` with no ``except`` before the next def/class."""

    rule_id = "TRY-WITHOUT-EXCEPT"
    name = "Try Without Except"
    description = "try block with no matching except"
    default_severity = Severity.BLOCK

    def check_line(self, line_number: int, line: str, lines: List[str]) -> Iterator[Finding]:
        if "try:" in line and not self._has_matching_except(lines, line_number - 1):
            yield self.create_finding("try block without matching except", line_number)

    @staticmethod
    def _has_matching_except(lines: List[str], try_index: int) -> bool:
        for following in lines[try_index + 1 :]:
            stripped = following.strip()
            if stripped.startswith("except"):
                return True
            if stripped.startswith("def ") or stripped.startswith("class "):
                break
        return False


class UnmatchedQuotesValidator(BaseLineValidator):
    """Flags an odd number of single or double quote characters."""

    rule_id = "UNMATCHED-QUOTES"
    name = "Unmatched Quotes"
    description = "odd number of quote characters on a line"
    default_severity = Severity.BLOCK

    def check_line(self, line_number: int, line: str, lines: List[str]) -> Iterator[Finding]:
        if line.count("'") % 2 or line.count('"') % 2:
            yield self.create_finding("Unmatched quotes", line_number)


class UndefinedVariableValidator(BaseLineValidator):
    """Crude guess at arithmetic on an undefined name.

    Only fires when the literal word ``undefined`` shows up in an assignment
    that also contains ``+``. Known to be weak; kept for compatibility.
    """

    rule_id = "UNDEFINED-VARIABLE"
    name = "Undefined Variable"
    description = "assignment using something called 'undefined'"
    default_severity = Severity.BLOCK

    def check_line(self, line_number: int, line: str, lines: List[str]) -> Iterator[Finding]:
        if "=" in line and "+" in line and "undefined" in line:
            yield self.create_finding("Possible undefined variable usage", line_number)


def get_validators():
    """Return list of validators provided by this module, in check order."""
    return [
        UnclosedPrintValidator,
        MissingColonValidator,
        TryWithoutExceptValidator,
        UnmatchedQuotesValidator,
        UndefinedVariableValidator,
    ]
