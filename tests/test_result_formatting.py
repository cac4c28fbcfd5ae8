"""
Result Formatting Test Suite

Tests the localized response record and one-line message for successes and
for each failure reason.
"""

import json

import pytest

from domainstyle.syllables_data import STYLE_LABELS
from domainstyle.types import StyleKind

ZH_PREFIX = "域名品相分析结果："
EN_PREFIX = "Domain style analysis: "


def test_zh_record(detector):
    record = detector.to_record(detector.analyze("jmkj.com"))
    assert record == {
        "品相": "纯声母品相",
        "字数": 4,
        "域名": "jmkj.com",
        "style_id": "pure_initial_consonant",
    }


def test_zh_record_for_pinyin(detector):
    record = detector.to_record(detector.analyze("xianguang.com"))
    assert record["品相"] == "纯拼音品相"
    assert record["字数"] == 2
    assert record["syllables"] == ["xian", "guang"]


def test_en_record(en_detector):
    record = en_detector.to_record(en_detector.analyze("中国.com"))
    assert record == {
        "style": "mixed alphanumeric",
        "count": 2,
        "domain": "中国.com",
        "style_id": "mixed_alphanumeric",
        "reading": ["zhong", "guo"],
    }


def test_zh_message_keeps_non_ascii(detector):
    message = detector.format_result(detector.analyze("111.com"))
    assert message.startswith(ZH_PREFIX)
    assert "纯数字品相" in message
    payload = json.loads(message[len(ZH_PREFIX) :])
    assert payload["字数"] == 3
    assert payload["域名"] == "111.com"


def test_en_message(en_detector):
    message = en_detector.format_result(en_detector.analyze("a1a2.com"))
    assert message.startswith(EN_PREFIX)
    payload = json.loads(message[len(EN_PREFIX) :])
    assert payload["style"] == "mixed alphanumeric"
    assert payload["count"] == 4


def test_failure_messages(detector, en_detector):
    assert detector.format_result(detector.analyze("")) == "域名不能为空"
    assert detector.format_result(detector.analyze("baidu")) == "域名格式错误"
    assert detector.format_result(detector.analyze("!!!.com")) == "未知品相"
    assert en_detector.format_result(en_detector.analyze("!!!.com")) == "unrecognized domain style"


def test_record_requires_success(detector):
    with pytest.raises(ValueError, match="failed classification"):
        detector.to_record(detector.analyze("!!!.com"))


def test_every_style_has_a_label_in_every_locale():
    for labels in STYLE_LABELS.values():
        assert set(labels) == {kind.value for kind in StyleKind}
