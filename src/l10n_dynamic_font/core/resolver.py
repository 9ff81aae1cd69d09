# l10n_dynamic_font/core/resolver.py
"""
Core Layer (フォント解決)

このモジュールは、要求されたTextStyleと現在のロケールの言語コードから、
使用すべきフォントを解決する機能を提供します。
ローカライズフォントが見つからない場合は、常にプラットフォームの組み込みフォントに退避し、
呼び出し元に例外を伝播させることはありません。
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from l10n_dynamic_font.common.types import TextStyle
from l10n_dynamic_font.config.models import LocalizedFontTable
from l10n_dynamic_font.core.platform import AbstractPlatform
from l10n_dynamic_font.core.style_mapping import builtin_text_style, mapped_style
from l10n_dynamic_font.loader.loader import LocalizedFontsLoader

logger = logging.getLogger(__name__)


# @intent:data_structure 解決結果の原因。組み込みフォントへの退避理由を区別します。
class ResolutionCause(Enum):
    LOCALIZED = "localized"
    NO_LANGUAGE_CODE = "no_language_code"
    NO_TABLE = "no_table"
    STYLE_UNSUPPORTED_FOR_LOCALE = "style_unsupported_for_locale"


@dataclass(frozen=True)
class Resolution:
    style: TextStyle
    language_code: Optional[str]
    font_name: Optional[str]
    cause: ResolutionCause
    font: Any

    @property
    def is_localized(self) -> bool:
        return self.cause is ResolutionCause.LOCALIZED


# @intent:responsibility TextStyleと現在の言語コードからフォントハンドルを解決します。
class FontResolver:
    """
    ローカライズフォントの解決器。
    解決の優先順位:
      1. ロケールから言語コードを取得（取得できなければ組み込みフォント）
      2. ローダーでテーブルを読み込む（失敗すれば組み込みフォント）
      3. table[style][language] を引く（無ければ組み込みフォント）
      4. 見つかったフォント名で、組み込みスタイルと同じポイントサイズのカスタムフォントを生成
    """
    # @intent:pre-condition `platform`と`loader`は有効なオブジェクトである必要があります。
    def __init__(self, platform: AbstractPlatform, loader: LocalizedFontsLoader, cache_table: bool = False):
        self._platform = platform
        self._loader = loader
        self._cache_table = cache_table
        self._cached_table: Optional[LocalizedFontTable] = None
        # @intent:rationale cache_table=Falseの場合、解決のたびにリソースを読み直す。
        #                  Trueの場合は最初に読み込めたテーブルをinvalidate()まで保持する。

    @property
    def platform(self) -> AbstractPlatform:
        return self._platform

    def invalidate(self) -> None:
        """
        キャッシュされたテーブルを破棄します。
        """
        self._cached_table = None

    def _load_table(self) -> Optional[LocalizedFontTable]:
        if self._cached_table is not None:
            return self._cached_table
        table = self._loader.load()
        if self._cache_table and table is not None:
            self._cached_table = table
        return table

    def _builtin(self, style: TextStyle, language_code: Optional[str], cause: ResolutionCause) -> Resolution:
        font = self._platform.scalable_builtin_font(builtin_text_style(style, self._platform.capabilities))
        return Resolution(style=style, language_code=language_code, font_name=None, cause=cause, font=font)

    # @intent:responsibility スタイルを解決し、フォントと解決理由を返します。
    def resolve(self, style: TextStyle) -> Resolution:
        language_code = self._platform.current_language_code()
        if language_code is None:
            logger.debug("No locale information; using built-in font for '%s'", style.value)
            return self._builtin(style, None, ResolutionCause.NO_LANGUAGE_CODE)

        table = self._load_table()
        if table is None:
            logger.debug("No localized font table for language '%s'; using built-in font for '%s'",
                         language_code, style.value)
            return self._builtin(style, language_code, ResolutionCause.NO_TABLE)

        font_name = table.lookup(style, language_code)
        if font_name is None:
            logger.debug("Language '%s' is not supported yet for style '%s'", language_code, style.value)
            return self._builtin(style, language_code, ResolutionCause.STYLE_UNSUPPORTED_FOR_LOCALE)

        capabilities = self._platform.capabilities
        size = self._platform.preferred_point_size(mapped_style(style, capabilities))
        relative_to = style if capabilities.supports_relative_scaling else None
        font = self._platform.make_custom_font(font_name, size, relative_to)
        return Resolution(
            style=style,
            language_code=language_code,
            font_name=font_name,
            cause=ResolutionCause.LOCALIZED,
            font=font,
        )

    def resolve_font(self, style: TextStyle) -> Any:
        return self.resolve(style).font

    # @intent:responsibility スタイルを考慮せず、言語コードのみで指定サイズのフォントを返します。
    def localized_font(self, size: float) -> Any:
        """
        LocalizedFonts設定から現在の言語のフォント名を探し、見つかればそのフォントを、
        見つからなければ指定サイズのシステムフォントを返します。
        """
        language_code = self._platform.current_language_code()
        if language_code is None:
            return self._platform.system_font(size)
        fonts = self._loader.load_language_fonts()
        if fonts is not None and language_code in fonts:
            return self._platform.custom_font(fonts[language_code], size)
        logger.debug("No localized font for language code: %s", language_code)
        return self._platform.system_font(size)

    @property
    def localized_large_title(self) -> Any:
        return self.resolve_font(TextStyle.LARGE_TITLE)

    @property
    def localized_title(self) -> Any:
        return self.resolve_font(TextStyle.TITLE)

    @property
    def localized_title2(self) -> Any:
        return self.resolve_font(TextStyle.TITLE2)

    @property
    def localized_title3(self) -> Any:
        return self.resolve_font(TextStyle.TITLE3)

    @property
    def localized_body(self) -> Any:
        return self.resolve_font(TextStyle.BODY)

    @property
    def localized_callout(self) -> Any:
        return self.resolve_font(TextStyle.CALLOUT)

    @property
    def localized_caption(self) -> Any:
        return self.resolve_font(TextStyle.CAPTION)

    @property
    def localized_caption2(self) -> Any:
        return self.resolve_font(TextStyle.CAPTION2)

    @property
    def localized_headline(self) -> Any:
        return self.resolve_font(TextStyle.HEADLINE)

    @property
    def localized_subheadline(self) -> Any:
        return self.resolve_font(TextStyle.SUBHEADLINE)

    @property
    def localized_footnote(self) -> Any:
        return self.resolve_font(TextStyle.FOOTNOTE)

    @property
    def localized_extra_large_title(self) -> Any:
        return self.resolve_font(TextStyle.EXTRA_LARGE_TITLE)

    @property
    def localized_extra_large_title2(self) -> Any:
        return self.resolve_font(TextStyle.EXTRA_LARGE_TITLE2)
