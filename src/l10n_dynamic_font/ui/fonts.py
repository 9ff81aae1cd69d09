"""
UIフォント管理モジュール。

Qt（PySide6）を用いて、フォント解決が依存するプラットフォーム協調者（ロケール、推奨ポイントサイズ、
組み込みフォント、カスタムフォント）を実装します。
"""
from dataclasses import dataclass, replace
from typing import Dict, Optional, Union

from PySide6.QtCore import QLocale
from PySide6.QtGui import QFont, QFontDatabase

from l10n_dynamic_font.common.types import NativeStyle, TextStyle
from l10n_dynamic_font.core.platform import AbstractPlatform, PlatformCapabilities
from l10n_dynamic_font.core.style_mapping import mapped_style

# コンテンツサイズ「標準」時のポイントサイズ
BASE_POINT_SIZES: Dict[NativeStyle, float] = {
    NativeStyle.LARGE_TITLE: 34.0,
    NativeStyle.TITLE1: 28.0,
    NativeStyle.TITLE2: 22.0,
    NativeStyle.TITLE3: 20.0,
    NativeStyle.HEADLINE: 17.0,
    NativeStyle.BODY: 17.0,
    NativeStyle.CALLOUT: 16.0,
    NativeStyle.SUBHEADLINE: 15.0,
    NativeStyle.FOOTNOTE: 13.0,
    NativeStyle.CAPTION1: 12.0,
    NativeStyle.CAPTION2: 11.0,
    NativeStyle.EXTRA_LARGE_TITLE: 48.0,
    NativeStyle.EXTRA_LARGE_TITLE2: 40.0,
}

NORMAL_WEIGHT = 400
SEMIBOLD_WEIGHT = 600

STYLE_WEIGHTS: Dict[NativeStyle, int] = {
    NativeStyle.HEADLINE: SEMIBOLD_WEIGHT,
}


# @intent:data_structure 描画に使用できるフォントハンドル。ファミリー名、サイズ、および任意のスタイル追従を保持します。
@dataclass(frozen=True)
class FontHandle:
    family: str
    point_size: float
    weight: int = NORMAL_WEIGHT
    relative_to: Optional[TextStyle] = None  # Noneでない場合、コンテンツサイズの変更に追従する
    builtin: bool = False

    # @intent:responsibility コンテンツサイズの倍率を適用した後のポイントサイズを返します。
    def scaled(self, content_scale: float) -> float:
        if self.relative_to is None:
            return self.point_size
        return self.point_size * content_scale

    # @intent:responsibility このハンドルに対応するQFontオブジェクトを生成します。
    def to_qfont(self, content_scale: float = 1.0) -> QFont:
        font = QFont(self.family)
        font.setPointSizeF(self.scaled(content_scale))
        font.setWeight(QFont.Weight(self.weight))
        return font


# @intent:responsibility 現在のシステムで使用される標準（非ローカライズ）フォントのファミリー名を返します。
def get_system_font_family() -> str:
    """
    QtのシステムデフォルトのGeneralFontのファミリー名を返します。
    QGuiApplicationが初期化されている必要があります。
    """
    return QFontDatabase.systemFont(QFontDatabase.SystemFont.GeneralFont).family()


# @intent:responsibility QLocaleから言語コード（ISO 639）を取り出します。取得できない場合はNone。
def language_code_of(locale: QLocale) -> Optional[str]:
    if locale.language() in (QLocale.Language.C, QLocale.Language.AnyLanguage):
        return None
    code = QLocale.languageToCode(locale.language())
    return code or None


# @intent:responsibility Qtを用いてAbstractPlatformを実装します。
class QtPlatform(AbstractPlatform):
    """
    PySide6によるプラットフォーム実装。
    content_scale はダイナミックタイプ（アクセシビリティのテキストサイズ）の倍率を表します。
    """
    def __init__(
        self,
        capabilities: Optional[PlatformCapabilities] = None,
        content_scale: float = 1.0,
        locale: Optional[Union[QLocale, str]] = None,
        system_family: Optional[str] = None,
    ):
        self._capabilities = capabilities or PlatformCapabilities.current()
        self.content_scale = content_scale
        if isinstance(locale, str):
            locale = QLocale(locale)
        self._locale = locale
        self._system_family = system_family

    @property
    def capabilities(self) -> PlatformCapabilities:
        return self._capabilities

    @property
    def system_family(self) -> str:
        if self._system_family is None:
            self._system_family = get_system_font_family()
        return self._system_family

    def current_language_code(self) -> Optional[str]:
        locale = self._locale if self._locale is not None else QLocale.system()
        return language_code_of(locale)

    def preferred_point_size(self, native_style: NativeStyle) -> float:
        base = BASE_POINT_SIZES.get(native_style, BASE_POINT_SIZES[NativeStyle.BODY])
        return base * self.content_scale

    def builtin_font(self, native_style: NativeStyle) -> FontHandle:
        return FontHandle(
            family=self.system_family,
            point_size=self.preferred_point_size(native_style),
            weight=STYLE_WEIGHTS.get(native_style, NORMAL_WEIGHT),
            builtin=True,
        )

    # @intent:rationale 組み込みフォントは常にスタイルに追従するため、relative_toを設定します。
    def scalable_builtin_font(self, style: TextStyle) -> FontHandle:
        native_style = mapped_style(style, self._capabilities)
        return replace(self.builtin_font(native_style), relative_to=style)

    def make_custom_font(self, name: str, size: float, relative_to: Optional[TextStyle]) -> FontHandle:
        return FontHandle(family=name, point_size=size, relative_to=relative_to)

    def system_font(self, size: float) -> FontHandle:
        return FontHandle(family=self.system_family, point_size=size, builtin=True)
