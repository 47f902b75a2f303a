import copy
import pickle

import pytest

from bytestream_core.errors import MultiError, RuleViolation
from bytestream_core.validation import LINE_RULES, Rule, Validator, check_line


def test_valid_line_is_no_error():
    assert check_line("a b c") is None
    assert check_line("exactly nineteen c ") is None


def test_all_violations_in_rule_order():
    err = check_line("line1-is-much-too-long-for-us")
    assert isinstance(err, MultiError)
    assert err.messages == ["Line is too long", "found numbers", "no 2 spaces"]
    assert str(err) == "Line is too long;found numbers;no 2 spaces"
    assert err.describe() == str(err)
    assert [v.rule for v in err] == ["length", "digits", "spacing"]


def test_single_violation():
    err = check_line("a b 7")
    assert err is not None
    assert len(err) == 1
    assert str(err) == "found numbers"


def test_length_counts_characters_not_bytes():
    # 19 characters, more than 20 bytes when utf-8 encoded
    line = "é" * 3 + " " + "é" * 3 + " " + "é" * 11
    assert len(line) == 19
    assert len(line.encode("utf-8")) > 20
    assert check_line(line) is None
    assert str(check_line(line + "é")) == "Line is too long"


def test_only_ascii_digits_count():
    assert check_line("a b ٣") is None


def test_no_short_circuit():
    calls = []

    def recording(name, result):
        def predicate(text):
            calls.append(name)
            return result

        return Rule(name, f"{name} failed", predicate)

    validator = Validator([recording("a", True), recording("b", False), recording("c", True)])
    err = validator.validate("anything")

    assert calls == ["a", "b", "c"]
    assert str(err) == "a failed;c failed"


def test_validator_without_rules_always_passes():
    assert Validator([]).validate("") is None


def test_default_rule_order():
    assert [rule.name for rule in LINE_RULES] == ["length", "digits", "spacing"]


def test_multi_error_cannot_be_empty():
    with pytest.raises(ValueError):
        MultiError([])
    assert MultiError.collect([]) is None
    assert MultiError.collect(iter([])) is None


def test_multi_error_is_immutable_and_raisable():
    violation = RuleViolation("x", "broken")
    err = MultiError([violation, ValueError("other")])
    assert err.reasons[0] is violation
    assert err.messages == ["broken", "other"]
    with pytest.raises(AttributeError):
        err.reasons = ()
    with pytest.raises(MultiError, match="broken;other"):
        raise err


@pytest.mark.parametrize("clone", [copy.copy, copy.deepcopy, lambda e: pickle.loads(pickle.dumps(e))])
def test_multi_error_survives_copy_and_pickle(clone):
    err = check_line("line1-is-much-too-long-for-us")
    cloned = clone(err)

    assert isinstance(cloned, MultiError)
    assert str(cloned) == "Line is too long;found numbers;no 2 spaces"
    assert [v.rule for v in cloned] == ["length", "digits", "spacing"]
    assert all(isinstance(v, RuleViolation) for v in cloned)


def test_rule_violation_survives_pickle():
    violation = pickle.loads(pickle.dumps(RuleViolation("digits", "found numbers")))
    assert violation.rule == "digits"
    assert violation.message == "found numbers"
    assert str(violation) == "found numbers"
