"""
共通の型定義を提供するモジュール。
抽象的なテキストスタイル、プラットフォーム固有のスタイル、および設定ファイルで使用される型エイリアスを定義します。
"""
from enum import Enum
from typing import Dict, Optional

# @intent:data_structure 言語コードとフォント識別子（PostScript名/ファミリー名）をマッピングする辞書の型エイリアス。
# Loader, Resolverなど複数のレイヤーで共通して使用されます。
LanguageFontMap = Dict[str, str]


# @intent:responsibility UIテキストの抽象的な役割（タイポグラフィ上のロール）を列挙します。
class TextStyle(Enum):
    """
    プラットフォームのフォントAPIに依存しないテキストの役割。
    各メンバーの値は設定ファイル（JSON）のキーとして使用される、明示的で安定したシリアライズ名です。
    """
    LARGE_TITLE = "largeTitle"
    TITLE = "title"
    TITLE2 = "title2"
    TITLE3 = "title3"
    BODY = "body"
    CALLOUT = "callout"
    CAPTION = "caption"
    CAPTION2 = "caption2"
    HEADLINE = "headline"
    SUBHEADLINE = "subheadline"
    FOOTNOTE = "footnote"
    EXTRA_LARGE_TITLE = "extraLargeTitle"
    EXTRA_LARGE_TITLE2 = "extraLargeTitle2"

    # @intent:responsibility 設定ファイル上の名前からTextStyleを逆引きします。
    # @intent:rationale Enumの自動的な文字列化に頼らず、値（シリアライズ名）のみで照合することで、
    #                  内部の命名変更が設定ファイルの互換性に影響しないようにします。
    @classmethod
    def from_name(cls, name: str) -> Optional["TextStyle"]:
        """
        シリアライズ名に一致するTextStyleを返します。一致しない場合はNoneを返します。
        """
        return _STYLES_BY_NAME.get(name)

    @property
    def serialized_name(self) -> str:
        return self.value


_STYLES_BY_NAME: Dict[str, TextStyle] = {style.value: style for style in TextStyle}


# @intent:responsibility プラットフォーム固有のテキストスタイル（ネイティブスタイル）を列挙します。
class NativeStyle(Enum):
    """
    プラットフォームが提供するテキストの役割。
    推奨ポイントサイズの問い合わせと、ローカライズされていない組み込みフォントの選択に使用されます。
    """
    LARGE_TITLE = "largeTitle"
    TITLE1 = "title1"
    TITLE2 = "title2"
    TITLE3 = "title3"
    HEADLINE = "headline"
    SUBHEADLINE = "subheadline"
    BODY = "body"
    CALLOUT = "callout"
    FOOTNOTE = "footnote"
    CAPTION1 = "caption1"
    CAPTION2 = "caption2"
    EXTRA_LARGE_TITLE = "extraLargeTitle"
    EXTRA_LARGE_TITLE2 = "extraLargeTitle2"
