# tests/common/test_types.py
"""
l10n_dynamic_font.common.typesモジュールの単体テスト。
TextStyleのシリアライズ名と逆引きを検証します。
"""
import pytest

from l10n_dynamic_font.common.types import NativeStyle, TextStyle

# @intent:test_suite テキストスタイルの列挙と名前変換の検証。

class TestTextStyle:
    def test_has_thirteen_styles(self):
        assert len(TextStyle) == 13
        assert len(NativeStyle) == 13

    @pytest.mark.parametrize("name, style", [
        ("largeTitle", TextStyle.LARGE_TITLE),
        ("title", TextStyle.TITLE),
        ("title2", TextStyle.TITLE2),
        ("caption2", TextStyle.CAPTION2),
        ("subheadline", TextStyle.SUBHEADLINE),
        ("extraLargeTitle", TextStyle.EXTRA_LARGE_TITLE),
        ("extraLargeTitle2", TextStyle.EXTRA_LARGE_TITLE2),
    ])
    def test_from_name(self, name, style):
        assert TextStyle.from_name(name) is style
        assert style.serialized_name == name

    # @intent:test_case_unknown_name Enumのメンバー名や未知の名前では逆引きできないことを検証します。
    def test_from_name_unknown(self):
        assert TextStyle.from_name("LARGE_TITLE") is None
        assert TextStyle.from_name("Title") is None
        assert TextStyle.from_name("extraLargetTitle2") is None
        assert TextStyle.from_name("") is None
