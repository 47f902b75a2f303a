from bytestream_core.validation import check_line
from bytestream_utils.report import CheckOutcome, CheckReportRenderer


def test_check_report():
    lines = ["a b c", "line1-is-much-too-long-for-us", "a b 7"]
    outcomes = [CheckOutcome(line, check_line(line)) for line in lines]

    report = CheckReportRenderer().render(outcomes)

    assert report == (
        "[PASS] a b c\n"
        "[FAIL] line1-is-much-too-long-for-us\n"
        "    - Line is too long\n"
        "    - found numbers\n"
        "    - no 2 spaces\n"
        "[FAIL] a b 7\n"
        "    - found numbers\n"
        "passed: 1/3\n"
    )


def test_empty_check_report():
    assert CheckReportRenderer().render([]) == "passed: 0/0\n"


def test_outcome_passed():
    assert CheckOutcome("a b c").passed
    assert not CheckOutcome("x", check_line("x")).passed
