# l10n_dynamic_font/core/style_mapping.py
"""
Core Layer (スタイル対応付け)

抽象的なTextStyleを、プラットフォームの能力に応じてネイティブスタイル、
および組み込みフォント用のTextStyleへ変換する純粋関数を提供します。
"""
from typing import Dict

from l10n_dynamic_font.common.types import NativeStyle, TextStyle
from l10n_dynamic_font.core.platform import PlatformCapabilities, PlatformKind

# 常に1:1で対応するスタイル
_DIRECT_NATIVE_STYLES: Dict[TextStyle, NativeStyle] = {
    TextStyle.TITLE: NativeStyle.TITLE1,
    TextStyle.TITLE2: NativeStyle.TITLE2,
    TextStyle.TITLE3: NativeStyle.TITLE3,
    TextStyle.BODY: NativeStyle.BODY,
    TextStyle.CALLOUT: NativeStyle.CALLOUT,
    TextStyle.CAPTION: NativeStyle.CAPTION1,
    TextStyle.CAPTION2: NativeStyle.CAPTION2,
    TextStyle.HEADLINE: NativeStyle.HEADLINE,
    TextStyle.SUBHEADLINE: NativeStyle.SUBHEADLINE,
    TextStyle.FOOTNOTE: NativeStyle.FOOTNOTE,
}

_EXTRA_LARGE_NATIVE_STYLES: Dict[TextStyle, NativeStyle] = {
    TextStyle.EXTRA_LARGE_TITLE: NativeStyle.EXTRA_LARGE_TITLE,
    TextStyle.EXTRA_LARGE_TITLE2: NativeStyle.EXTRA_LARGE_TITLE2,
}

# バージョン付きスタイルが使えない場合の退避先
_VERSIONED_FALLBACKS: Dict[TextStyle, TextStyle] = {
    TextStyle.TITLE2: TextStyle.TITLE,
    TextStyle.TITLE3: TextStyle.TITLE,
    TextStyle.CAPTION2: TextStyle.CAPTION,
}

_ALWAYS_AVAILABLE = frozenset({
    TextStyle.TITLE,
    TextStyle.LARGE_TITLE,
    TextStyle.BODY,
    TextStyle.CALLOUT,
    TextStyle.CAPTION,
    TextStyle.HEADLINE,
    TextStyle.SUBHEADLINE,
    TextStyle.FOOTNOTE,
})


# @intent:responsibility TextStyleを、推奨ポイントサイズの問い合わせに使うネイティブスタイルへ変換します。
def mapped_style(style: TextStyle, capabilities: PlatformCapabilities) -> NativeStyle:
    """
    largeTitleはtvOSでのみバージョンに応じてextraLargeTitleまたはtitle1になります。
    extraLargeTitle/extraLargeTitle2はサポートするプラットフォームでのみそのまま対応し、それ以外ではlargeTitleに退避します。
    未知の値はbodyになります。
    """
    direct = _DIRECT_NATIVE_STYLES.get(style)
    if direct is not None:
        return direct

    if style is TextStyle.LARGE_TITLE:
        if capabilities.kind is PlatformKind.TVOS:
            if capabilities.supports_tv_extra_large_title:
                return NativeStyle.EXTRA_LARGE_TITLE
            return NativeStyle.TITLE1
        return NativeStyle.LARGE_TITLE

    extra_large = _EXTRA_LARGE_NATIVE_STYLES.get(style)
    if extra_large is not None:
        if capabilities.supports_extra_large_titles:
            return extra_large
        return NativeStyle.LARGE_TITLE

    return NativeStyle.BODY


# @intent:responsibility ローカライズフォントが無い場合に返す組み込みフォントのTextStyleを決定します。
def builtin_text_style(style: TextStyle, capabilities: PlatformCapabilities) -> TextStyle:
    if style in _ALWAYS_AVAILABLE:
        return style

    fallback = _VERSIONED_FALLBACKS.get(style)
    if fallback is not None:
        return style if capabilities.supports_versioned_styles else fallback

    if style in _EXTRA_LARGE_NATIVE_STYLES:
        return style if capabilities.supports_extra_large_titles else TextStyle.LARGE_TITLE

    return TextStyle.BODY
