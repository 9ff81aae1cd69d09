from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple, Union

from l10n_dynamic_font.common.types import LanguageFontMap, TextStyle

StyleKey = Union[TextStyle, str]


# @intent:responsibility テキストスタイルごと、言語コードごとのフォント識別子を保持する読み取り専用のテーブルです。
class LocalizedFontTable:
    """
    スタイル名 -> {言語コード -> フォント識別子} の入れ子マッピング。
    テーブルに存在しないスタイルは「未設定」を意味し、存在するが空のスタイルとは区別されます。
    構築後は変更できません。
    """
    def __init__(self, fonts: Optional[Mapping[str, Mapping[str, str]]] = None):
        entries = {
            style_name: MappingProxyType(dict(languages))
            for style_name, languages in (fonts or {}).items()
        }
        self._fonts: Mapping[str, Mapping[str, str]] = MappingProxyType(entries)

    @staticmethod
    def _key(style: StyleKey) -> str:
        return style.value if isinstance(style, TextStyle) else style

    # @intent:responsibility (style, language) に対応するフォント識別子を返します。
    def lookup(self, style: StyleKey, language: str) -> Optional[str]:
        languages = self._fonts.get(self._key(style))
        if languages is None:
            return None
        return languages.get(language)

    def __getitem__(self, key: Tuple[StyleKey, str]) -> Optional[str]:
        style, language = key
        return self.lookup(style, language)

    def has_style(self, style: StyleKey) -> bool:
        return self._key(style) in self._fonts

    def languages(self, style: StyleKey) -> List[str]:
        return list(self._fonts.get(self._key(style), {}).keys())

    @property
    def styles(self) -> List[str]:
        return list(self._fonts.keys())

    def as_dict(self) -> Dict[str, LanguageFontMap]:
        return {name: dict(languages) for name, languages in self._fonts.items()}

    def __len__(self) -> int:
        return len(self._fonts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalizedFontTable):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        return f"LocalizedFontTable({self.as_dict()!r})"


@dataclass
class PlatformSettings:
    kind: str = "desktop"
    version: str = "0"


@dataclass
class ResolverSettings:
    bundle_path: str = "."
    resource_name: str = "DynamicLocalizedFonts"
    resource_extension: str = "json"
    info_key: str = "DynamicLocalizedFonts"
    language_fonts_key: str = "LocalizedFonts"
    cache_table: bool = False  # Trueの場合、最初に読み込んだテーブルをResolverの生存期間中保持する
    content_scale: float = 1.0
    language: Optional[str] = None  # ロケールの上書き (例: "zh_CN")。Noneの場合はシステムロケール
    platform: PlatformSettings = field(default_factory=PlatformSettings)
