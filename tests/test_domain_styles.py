"""
Domain Style Test Suite

End-to-end classification of raw domain names through the detector,
covering every style, the priority between them and both failure kinds.
"""

import pytest

from domainstyle import DomainStyleDetector
from domainstyle.types import DomainFormatError, ErrorKind, NoStyleMatchedError, NumericPolicy, StyleConfig, StyleKind

# (raw name, (success, style id or error kind, count))
DOMAIN_STYLE_TEST_CASES = [
    # Numbers
    ("111.com", (True, "pure_number", 3)),
    ("163.com", (True, "pure_number", 3)),
    ("8888.com.cn", (True, "pure_number", 4)),
    # Initial consonants
    ("jmkj.com", (True, "pure_initial_consonant", 4)),
    ("qq.com", (True, "pure_initial_consonant", 2)),
    ("jd.com", (True, "pure_initial_consonant", 2)),
    ("zhsh.cn", (True, "pure_initial_consonant", 4)),
    # Full pinyin
    ("xian.com", (True, "full_pinyin", 1)),
    ("xianguang.com", (True, "full_pinyin", 2)),
    ("baidu.com", (True, "full_pinyin", 2)),
    ("taobao.com", (True, "full_pinyin", 2)),
    ("weixin.qq.com", (True, "full_pinyin", 2)),
    ("a.com", (True, "full_pinyin", 1)),
    ("zhongguoren.cn", (True, "full_pinyin", 3)),
    # Letters
    ("jmkjabc.com", (True, "pure_letter", 7)),
    ("google.com", (True, "pure_letter", 6)),
    ("abc.com.cn", (True, "pure_letter", 3)),
    ("XIAN.com", (True, "pure_letter", 4)),
    # Mixed
    ("a1a2.com", (True, "mixed_alphanumeric", 4)),
    ("5i5j.com", (True, "mixed_alphanumeric", 4)),
    ("xian-guang.com", (True, "mixed_alphanumeric", 10)),
    ("1e3.com", (True, "mixed_alphanumeric", 3)),
    ("中国.com", (True, "mixed_alphanumeric", 2)),
    # Failures
    ("!!!.com", (False, "no_style_matched", None)),
    ("a_b.com", (False, "no_style_matched", None)),
    # An empty label reduces to nothing under consonant stripping
    (".com", (True, "pure_initial_consonant", 0)),
    ("", (False, "invalid_format", None)),
    ("baidu", (False, "invalid_format", None)),
]


def _signature(result):
    if result.success:
        return True, result.style.style_id, result.style.count
    return False, result.error_kind.value, None


def test_domain_styles(detector):
    passed = 0
    failed = 0

    for raw, expected in DOMAIN_STYLE_TEST_CASES:
        result = detector.analyze(raw)
        actual = _signature(result)
        if actual == expected:
            passed += 1
        else:
            failed += 1
            print(f"FAILED: '{raw}': expected {expected}, got {actual}")

    assert failed == 0, f"Domain style tests: {failed} failures out of {len(DOMAIN_STYLE_TEST_CASES)} tests"
    print(f"Domain style tests: {passed} passed, {failed} failed")


def test_digit_labels_are_always_numbers(detector):
    for label in ("0", "1", "42", "007", "20240723", "9" * 63):
        style = detector.classify(f"{label}.com")
        assert style.kind is StyleKind.PURE_NUMBER
        assert style.count == len(label)


def test_classification_is_idempotent(detector):
    for raw, _ in DOMAIN_STYLE_TEST_CASES:
        assert detector.analyze(raw) == detector.analyze(raw)


def test_classify_raises(detector):
    with pytest.raises(DomainFormatError):
        detector.classify("")
    with pytest.raises(DomainFormatError):
        detector.classify("baidu")
    with pytest.raises(NoStyleMatchedError):
        detector.classify("!!!.com")


def test_failed_result_fields(detector):
    result = detector.analyze("")
    assert result.success is False
    assert result.style is None
    assert result.error_kind is ErrorKind.INVALID_FORMAT
    assert result.error_reason == "empty"
    assert result.domain == ""

    result = detector.analyze("!!!.com")
    assert result.error_kind is ErrorKind.NO_STYLE_MATCHED
    assert result.domain == "!!!.com"


def test_pinyin_result_carries_minimal_segmentation(detector):
    result = detector.analyze("xianguang.com")
    assert result.style.syllables == ("xian", "guang")
    assert result.reading == ()


def test_han_labels_carry_reading(detector):
    result = detector.analyze("中国.com")
    assert result.style.kind is StyleKind.MIXED_ALPHANUMERIC
    assert result.reading == ("zhong", "guo")

    result = detector.analyze("a中1.cn")
    assert result.reading == ("zhong",)


def test_numeric_string_policy():
    detector = DomainStyleDetector(config=StyleConfig(numeric_policy=NumericPolicy.NUMERIC_STRING))
    assert detector.classify("1e3.com").kind is StyleKind.PURE_NUMBER
    assert detector.classify("-15.com").kind is StyleKind.PURE_NUMBER
    assert detector.classify("a1a2.com").kind is StyleKind.MIXED_ALPHANUMERIC


def test_case_folding():
    detector = DomainStyleDetector(config=StyleConfig(fold_case=True))
    assert detector.classify("XiAn.com").kind is StyleKind.FULL_PINYIN
    assert detector.classify("JMKJ.com").kind is StyleKind.PURE_INITIAL_CONSONANT
    # Count is still taken from the label as written
    assert detector.classify("JMKJ.com").count == 4


def test_analyze_batch_preserves_order(detector):
    names = ["111.com", "xian.com", "!!!.com", "a1a2.com"]
    results = detector.analyze_batch(names)
    assert [r.domain for r in results] == names
    assert [r.success for r in results] == [True, True, False, True]
