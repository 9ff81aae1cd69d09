# l10n_dynamic_font/core/platform.py
"""
Core Layer (プラットフォーム抽象)

このモジュールは、フォント解決が依存するプラットフォームの能力（OS種別とバージョン）と、
ロケール・推奨ポイントサイズ・フォント生成といった外部協調者のインターフェースを定義します。
コンパイル時の条件分岐の代わりに、能力を明示的な値として受け渡すことで全ての分岐を単体テスト可能にします。
"""
import platform as _platform_module
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional, Tuple

from l10n_dynamic_font.common.types import NativeStyle, TextStyle


class PlatformKind(Enum):
    IOS = "iOS"
    MACOS = "macOS"
    TVOS = "tvOS"
    WATCHOS = "watchOS"
    VISIONOS = "visionOS"
    DESKTOP = "desktop"  # 汎用のQtデスクトップ環境。常に最新の能力を持つものとして扱う

    @classmethod
    def from_name(cls, name: str) -> "PlatformKind":
        lowered = name.strip().lower()
        for kind in cls:
            if kind.value.lower() == lowered:
                return kind
        raise ValueError(f"Unknown platform kind: {name}")


# バージョン付きスタイル (title2, title3, caption2) と相対スケーリングが利用可能になる最小バージョン
_VERSIONED_STYLE_MINIMUM: Dict[PlatformKind, Tuple[int, ...]] = {
    PlatformKind.IOS: (14, 0),
    PlatformKind.MACOS: (11, 0),
    PlatformKind.TVOS: (14, 0),
    PlatformKind.WATCHOS: (7, 0),
    PlatformKind.VISIONOS: (1, 0),
    PlatformKind.DESKTOP: (0,),
}

_EXTRA_LARGE_TITLE_MINIMUM: Dict[PlatformKind, Tuple[int, ...]] = {
    PlatformKind.VISIONOS: (1, 0),
}

_TV_EXTRA_LARGE_TITLE_MINIMUM: Tuple[int, ...] = (17, 0)


# @intent:responsibility 実行中プラットフォームの種別とOSバージョンを保持し、機能の可用性を判定します。
@dataclass(frozen=True)
class PlatformCapabilities:
    kind: PlatformKind = PlatformKind.DESKTOP
    version: Tuple[int, ...] = (0,)

    @classmethod
    def from_string(cls, kind: str, version: str) -> "PlatformCapabilities":
        """
        "iOS", "17.0" のような文字列から能力を生成します。
        """
        return cls(kind=PlatformKind.from_name(kind), version=parse_version(version))

    # @intent:responsibility 現在のPythonプロセスが動作しているプラットフォームの能力を推定します。
    @classmethod
    def current(cls) -> "PlatformCapabilities":
        mac_version = _platform_module.mac_ver()[0]
        if mac_version:
            return cls(kind=PlatformKind.MACOS, version=parse_version(mac_version))
        return cls(kind=PlatformKind.DESKTOP, version=(0,))

    def _at_least(self, minimum: Optional[Tuple[int, ...]]) -> bool:
        if minimum is None:
            return False
        return self.version >= minimum

    @property
    def supports_versioned_styles(self) -> bool:
        return self._at_least(_VERSIONED_STYLE_MINIMUM.get(self.kind))

    @property
    def supports_relative_scaling(self) -> bool:
        return self._at_least(_VERSIONED_STYLE_MINIMUM.get(self.kind))

    @property
    def supports_extra_large_titles(self) -> bool:
        return self._at_least(_EXTRA_LARGE_TITLE_MINIMUM.get(self.kind))

    @property
    def supports_tv_extra_large_title(self) -> bool:
        return self.kind is PlatformKind.TVOS and self._at_least(_TV_EXTRA_LARGE_TITLE_MINIMUM)

    # @intent:responsibility このプラットフォームで利用可能なネイティブスタイルの集合を返します。
    @property
    def native_styles(self) -> FrozenSet[NativeStyle]:
        styles = {
            NativeStyle.LARGE_TITLE,
            NativeStyle.TITLE1,
            NativeStyle.TITLE2,
            NativeStyle.TITLE3,
            NativeStyle.HEADLINE,
            NativeStyle.SUBHEADLINE,
            NativeStyle.BODY,
            NativeStyle.CALLOUT,
            NativeStyle.FOOTNOTE,
            NativeStyle.CAPTION1,
            NativeStyle.CAPTION2,
        }
        if self.supports_extra_large_titles:
            styles.update({NativeStyle.EXTRA_LARGE_TITLE, NativeStyle.EXTRA_LARGE_TITLE2})
        elif self.supports_tv_extra_large_title:
            styles.add(NativeStyle.EXTRA_LARGE_TITLE)
        return frozenset(styles)


def parse_version(value: Any) -> Tuple[int, ...]:
    if isinstance(value, (int, float)):
        value = str(value)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid version format: {value}")
    try:
        return tuple(int(part) for part in value.strip().split("."))
    except ValueError:
        raise ValueError(f"Invalid version format: {value}")


# @intent:responsibility フォント解決に必要なプラットフォーム協調者のインターフェースを定義します。
class AbstractPlatform(ABC):
    """
    ロケール、推奨ポイントサイズ、組み込みフォントおよびカスタムフォントの生成を提供する抽象クラス。
    返されるフォントハンドルの型は実装に委ねられます（Resolverからは不透明なオブジェクト）。
    """
    @property
    @abstractmethod
    def capabilities(self) -> PlatformCapabilities:
        pass

    # @intent:responsibility 現在のロケールの言語コード（"en", "zh" など）を返します。取得できない場合はNone。
    @abstractmethod
    def current_language_code(self) -> Optional[str]:
        pass

    @abstractmethod
    def preferred_point_size(self, native_style: NativeStyle) -> float:
        pass

    @abstractmethod
    def builtin_font(self, native_style: NativeStyle) -> Any:
        pass

    # @intent:responsibility ローカライズされていない、スタイルに追従する組み込みフォントを返します。
    @abstractmethod
    def scalable_builtin_font(self, style: TextStyle) -> Any:
        pass

    # @intent:responsibility 名前とサイズを指定してカスタムフォントを生成します。
    # @intent:pre-condition `relative_to`がNoneでない場合、フォントはそのスタイルのダイナミックタイプ変更に追従します。
    @abstractmethod
    def make_custom_font(self, name: str, size: float, relative_to: Optional[TextStyle]) -> Any:
        pass

    @abstractmethod
    def system_font(self, size: float) -> Any:
        pass

    def custom_font(self, name: str, size: float) -> Any:
        return self.make_custom_font(name, size, None)
