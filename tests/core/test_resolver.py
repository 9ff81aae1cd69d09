# tests/core/test_resolver.py
"""
l10n_dynamic_font.core.resolverモジュールの単体テスト。
言語コード、テーブル、スタイルごとの退避経路と、ローカライズフォントのサイズ決定を検証します。
"""
import logging
from typing import Optional
from unittest.mock import patch

import pytest

from l10n_dynamic_font.common.types import NativeStyle, TextStyle
from l10n_dynamic_font.core.platform import AbstractPlatform, PlatformCapabilities, PlatformKind
from l10n_dynamic_font.core.resolver import FontResolver, ResolutionCause
from l10n_dynamic_font.loader.loader import LocalizedFontsLoader, ResourceBundle

MOCK_DATA = '{"title":{"en":"enFont", "zh":"zhFont"}, "body":{"zh":"zhBody"}}'


# ダミーのプラットフォーム。フォントハンドルとしてタプルを返す
class FakePlatform(AbstractPlatform):
    def __init__(self, language_code: Optional[str] = "en", capabilities: Optional[PlatformCapabilities] = None):
        self.language_code = language_code
        self._capabilities = capabilities or PlatformCapabilities(PlatformKind.IOS, (17, 0))

    @property
    def capabilities(self) -> PlatformCapabilities:
        return self._capabilities

    def current_language_code(self) -> Optional[str]:
        return self.language_code

    def preferred_point_size(self, native_style: NativeStyle) -> float:
        return {NativeStyle.TITLE1: 28.0, NativeStyle.BODY: 17.0}.get(native_style, 10.0)

    def builtin_font(self, native_style):
        return ("builtin-native", native_style)

    def scalable_builtin_font(self, style):
        return ("builtin", style)

    def make_custom_font(self, name, size, relative_to):
        return ("custom", name, size, relative_to)

    def system_font(self, size):
        return ("system", size)


@pytest.fixture
def bundle_dir(tmp_path):
    (tmp_path / "DynamicLocalizedFonts.json").write_text(MOCK_DATA, encoding="utf-8")
    return tmp_path


def make_resolver(directory, platform, info_dictionary=None, cache_table=False):
    loader = LocalizedFontsLoader(ResourceBundle(directory, info_dictionary=info_dictionary or {}))
    return FontResolver(platform, loader, cache_table=cache_table)

# @intent:test_suite フォント解決アルゴリズムの検証。

class TestResolve:
    # @intent:test_case_localized 設定されたフォント名で、組み込みスタイルと同じサイズのフォントが生成されることを検証します。
    def test_localized_font_is_sized_like_builtin(self, bundle_dir):
        resolver = make_resolver(bundle_dir, FakePlatform("en"))
        resolution = resolver.resolve(TextStyle.TITLE)

        assert resolution.cause is ResolutionCause.LOCALIZED
        assert resolution.is_localized
        assert resolution.font_name == "enFont"
        assert resolution.font == ("custom", "enFont", 28.0, TextStyle.TITLE)

    def test_other_language(self, bundle_dir):
        resolver = make_resolver(bundle_dir, FakePlatform("zh"))
        assert resolver.localized_title == ("custom", "zhFont", 28.0, TextStyle.TITLE)
        assert resolver.localized_body == ("custom", "zhBody", 17.0, TextStyle.BODY)

    def test_fixed_size_without_relative_scaling(self, bundle_dir):
        platform = FakePlatform("en", PlatformCapabilities(PlatformKind.IOS, (13, 0)))
        resolver = make_resolver(bundle_dir, platform)
        assert resolver.resolve_font(TextStyle.TITLE) == ("custom", "enFont", 28.0, None)

    def test_no_language_code(self, bundle_dir):
        resolver = make_resolver(bundle_dir, FakePlatform(None))
        with patch.object(LocalizedFontsLoader, "load") as load:
            resolution = resolver.resolve(TextStyle.TITLE)
            load.assert_not_called()

        assert resolution.cause is ResolutionCause.NO_LANGUAGE_CODE
        assert resolution.font == ("builtin", TextStyle.TITLE)
        assert resolution.language_code is None

    # @intent:test_case_scenario_b リソースがどこにも無い場合、全スタイルで組み込みフォントが返ることを検証します。
    def test_no_table(self, tmp_path):
        resolver = make_resolver(tmp_path, FakePlatform("en"))
        for style in TextStyle:
            resolution = resolver.resolve(style)
            assert resolution.cause is ResolutionCause.NO_TABLE
            assert resolution.font_name is None
            assert resolution.font[0] == "builtin"

    # @intent:test_case_scenario_c テーブルはあるが言語が未設定の場合、原因が区別されることを検証します。
    def test_language_not_configured(self, bundle_dir):
        resolver = make_resolver(bundle_dir, FakePlatform("jp"))
        for style in TextStyle:
            resolution = resolver.resolve(style)
            assert resolution.cause is ResolutionCause.STYLE_UNSUPPORTED_FOR_LOCALE
            assert resolution.font[0] == "builtin"

    def test_deeply_nested_resource_does_not_raise(self, tmp_path):
        (tmp_path / "DynamicLocalizedFonts.json").write_text("[" * 200000 + "]" * 200000, encoding="utf-8")
        resolver = make_resolver(tmp_path, FakePlatform("en"))

        resolution = resolver.resolve(TextStyle.TITLE)
        assert resolution.cause is ResolutionCause.NO_TABLE
        assert resolver.localized_body == ("builtin", TextStyle.BODY)

    def test_style_not_configured(self, bundle_dir):
        resolver = make_resolver(bundle_dir, FakePlatform("en"))
        resolution = resolver.resolve(TextStyle.CAPTION)
        assert resolution.cause is ResolutionCause.STYLE_UNSUPPORTED_FOR_LOCALE
        assert resolver.localized_caption == ("builtin", TextStyle.CAPTION)

    def test_builtin_fallback_uses_versioned_style_rule(self, tmp_path):
        platform = FakePlatform("en", PlatformCapabilities(PlatformKind.IOS, (13, 0)))
        resolver = make_resolver(tmp_path, platform)
        assert resolver.localized_title2 == ("builtin", TextStyle.TITLE)
        assert resolver.localized_caption2 == ("builtin", TextStyle.CAPTION)
        assert resolver.localized_extra_large_title == ("builtin", TextStyle.LARGE_TITLE)

    def test_info_dictionary_source(self, tmp_path):
        resolver = make_resolver(
            tmp_path,
            FakePlatform("zh"),
            info_dictionary={"DynamicLocalizedFonts": {"headline": {"zh": "zhHeadline"}}},
        )
        assert resolver.localized_headline == ("custom", "zhHeadline", 10.0, TextStyle.HEADLINE)

    def test_diagnostics_distinguish_causes(self, bundle_dir, tmp_path, caplog):
        caplog.set_level(logging.DEBUG, logger="l10n_dynamic_font.core.resolver")
        make_resolver(bundle_dir, FakePlatform(None)).resolve(TextStyle.TITLE)
        make_resolver(bundle_dir / "missing", FakePlatform("en")).resolve(TextStyle.TITLE)
        make_resolver(bundle_dir, FakePlatform("jp")).resolve(TextStyle.TITLE)

        messages = [record.getMessage() for record in caplog.records]
        assert len(messages) == 3
        assert "No locale information" in messages[0]
        assert "No localized font table" in messages[1]
        assert "not supported yet" in messages[2]

    def test_all_accessors_return_fonts(self, bundle_dir):
        resolver = make_resolver(bundle_dir, FakePlatform("en"))
        accessors = [
            "localized_large_title", "localized_title", "localized_title2", "localized_title3",
            "localized_body", "localized_callout", "localized_caption", "localized_caption2",
            "localized_headline", "localized_subheadline", "localized_footnote",
            "localized_extra_large_title", "localized_extra_large_title2",
        ]
        for name in accessors:
            assert getattr(resolver, name) is not None


class TestReload:
    # @intent:test_case_idempotence 変更の無いリソースとロケールでは、何度解決しても同じ結果になることを検証します。
    def test_idempotent(self, bundle_dir):
        resolver = make_resolver(bundle_dir, FakePlatform("en"))
        results = {resolver.resolve(TextStyle.TITLE).font_name for _ in range(5)}
        assert results == {"enFont"}

    def test_reloads_on_every_call_by_default(self, bundle_dir):
        resolver = make_resolver(bundle_dir, FakePlatform("en"))
        assert resolver.resolve(TextStyle.TITLE).font_name == "enFont"

        (bundle_dir / "DynamicLocalizedFonts.json").write_text('{"title":{"en":"newFont"}}', encoding="utf-8")
        assert resolver.resolve(TextStyle.TITLE).font_name == "newFont"

    def test_cache_table(self, bundle_dir):
        resolver = make_resolver(bundle_dir, FakePlatform("en"), cache_table=True)
        assert resolver.resolve(TextStyle.TITLE).font_name == "enFont"

        (bundle_dir / "DynamicLocalizedFonts.json").write_text('{"title":{"en":"newFont"}}', encoding="utf-8")
        assert resolver.resolve(TextStyle.TITLE).font_name == "enFont"

        resolver.invalidate()
        assert resolver.resolve(TextStyle.TITLE).font_name == "newFont"

    def test_cache_does_not_keep_missing_table(self, tmp_path):
        resolver = make_resolver(tmp_path, FakePlatform("en"), cache_table=True)
        assert resolver.resolve(TextStyle.TITLE).cause is ResolutionCause.NO_TABLE

        (tmp_path / "DynamicLocalizedFonts.json").write_text(MOCK_DATA, encoding="utf-8")
        assert resolver.resolve(TextStyle.TITLE).cause is ResolutionCause.LOCALIZED


class TestLocalizedFont:
    def test_configured_language(self, tmp_path):
        resolver = make_resolver(tmp_path, FakePlatform("zh"), info_dictionary={"LocalizedFonts": {"zh": "zhFont"}})
        assert resolver.localized_font(14) == ("custom", "zhFont", 14, None)

    def test_unconfigured_language(self, tmp_path):
        resolver = make_resolver(tmp_path, FakePlatform("en"), info_dictionary={"LocalizedFonts": {"zh": "zhFont"}})
        assert resolver.localized_font(14) == ("system", 14)

    def test_no_language_code(self, tmp_path):
        resolver = make_resolver(tmp_path, FakePlatform(None), info_dictionary={"LocalizedFonts": {"zh": "zhFont"}})
        assert resolver.localized_font(20) == ("system", 20)

    def test_ignores_style_table(self, bundle_dir):
        resolver = make_resolver(bundle_dir, FakePlatform("en"))
        assert resolver.localized_font(12) == ("system", 12)
