import logging
from dataclasses import dataclass
from typing import Callable

from bytestream_core.errors import MultiError, RuleViolation
from bytestream_core.settings import MAX_LINE_RUNES, MIN_LINE_SPACES

logger = logging.getLogger("bytestream")


@dataclass(frozen=True)
class Rule:
    name: str
    message: str
    is_violated: Callable[[str], bool]

    def check(self, text: str) -> RuleViolation | None:
        if self.is_violated(text):
            return RuleViolation(self.name, self.message)
        return None


class Validator:
    """Applies every rule to the input, in order, and reports all violations at once."""

    rules: tuple[Rule, ...]

    def __init__(self, rules: list[Rule] | tuple[Rule, ...]):
        self.rules = tuple(rules)

    def validate(self, text: str) -> MultiError | None:
        violations: list[RuleViolation] = []
        for rule in self.rules:
            violation = rule.check(text)
            if violation is not None:
                logger.debug(f"rule '{rule.name}' violated by {text!r}")
                violations.append(violation)
        return MultiError.collect(violations)


# ---------------------------------------------------------------------------- #
#                                  Line Rules                                  #
# ---------------------------------------------------------------------------- #


def _is_too_long(text: str) -> bool:
    return len(text) >= MAX_LINE_RUNES


def _has_digits(text: str) -> bool:
    return any("0" <= ch <= "9" for ch in text)


def _lacks_spaces(text: str) -> bool:
    return text.count(" ") < MIN_LINE_SPACES


LINE_RULES = (
    Rule("length", "Line is too long", _is_too_long),
    Rule("digits", "found numbers", _has_digits),
    Rule("spacing", f"no {MIN_LINE_SPACES} spaces", _lacks_spaces),
)

LINE_VALIDATOR = Validator(LINE_RULES)


def check_line(text: str) -> MultiError | None:
    return LINE_VALIDATOR.validate(text)
