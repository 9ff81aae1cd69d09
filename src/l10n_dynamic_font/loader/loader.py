# l10n_dynamic_font/loader/loader.py
"""
Loader Layer

バンドルされたリソース（DynamicLocalizedFonts.json）またはアプリケーションのメタデータ辞書から
ローカライズフォントの設定を読み込み、LocalizedFontTableを構築する機能を提供します。
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from l10n_dynamic_font.common.types import LanguageFontMap, TextStyle
from l10n_dynamic_font.config.models import LocalizedFontTable

logger = logging.getLogger(__name__)

INFO_DICTIONARY_FILENAME = "Info.yaml"


# @intent:responsibility Info.yaml用のYAMLローダー。真偽値の暗黙変換を行わず、"no" や "on" などの言語コードを文字列のまま保持します。
class InfoDictionaryLoader(yaml.SafeLoader):
    pass


InfoDictionaryLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:bool"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


# @intent:responsibility アプリケーションバンドル（リソースディレクトリとメタデータ辞書）を表します。
class ResourceBundle:
    """
    リソースファイルを格納するディレクトリと、アプリケーションのメタデータ辞書をまとめたもの。
    メタデータ辞書が明示的に与えられない場合は、ディレクトリ内の Info.yaml を読み込みます。
    """
    def __init__(self, directory: Union[str, Path], info_dictionary: Optional[Dict[str, Any]] = None):
        self.directory = Path(directory)
        self._info_dictionary = info_dictionary

    # @intent:responsibility 名前と拡張子に対応するリソースのパスを返します。存在しなければNone。
    def path_for_resource(self, name: str, extension: str) -> Optional[Path]:
        path = self.directory / f"{name}.{extension}"
        if path.is_file():
            return path
        return None

    @property
    def info_dictionary(self) -> Dict[str, Any]:
        if self._info_dictionary is not None:
            return self._info_dictionary
        path = self.directory / INFO_DICTIONARY_FILENAME
        if not path.is_file():
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.load(f, Loader=InfoDictionaryLoader)
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Could not read info dictionary %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            return {}
        return data


# @intent:responsibility 文字列キーから文字列値への辞書であるかを判定します。
def _as_language_font_map(value: Any) -> Optional[LanguageFontMap]:
    if not isinstance(value, dict):
        return None
    for language, font_name in value.items():
        if not isinstance(language, str) or not isinstance(font_name, str):
            return None
    return dict(value)


# @intent:responsibility ローカライズフォント設定を読み込み、LocalizedFontTableを構築します。
class LocalizedFontsLoader:
    """
    ローカライズフォント設定のローダー。
    JSONリソースを優先し、存在しないか読み込めない場合はメタデータ辞書のキーを使用します。
    キャッシュは行わず、load()を呼ぶたびにリソースを読み直します。
    """
    def __init__(
        self,
        bundle: ResourceBundle,
        resource_name: str = "DynamicLocalizedFonts",
        resource_extension: str = "json",
        info_key: str = "DynamicLocalizedFonts",
        language_fonts_key: str = "LocalizedFonts",
    ):
        self.bundle = bundle
        self.resource_name = resource_name
        self.resource_extension = resource_extension
        self.info_key = info_key
        self.language_fonts_key = language_fonts_key

    # @intent:responsibility JSONドキュメントをデコードします。認識できないキーは無視し、不正な値を持つキーは個別に除外します。
    # @intent:pre-condition ドキュメントのトップレベルはJSONオブジェクトである必要があります。
    def decode(self, data: Union[bytes, str]) -> LocalizedFontTable:
        """
        JSONのバイト列（または文字列）からテーブルを構築します。
        トップレベルがオブジェクトでない場合、またはJSONとして不正な場合はValueErrorを送出します。
        """
        if isinstance(data, bytes):
            data = data.decode("utf-8-sig")
        document = json.loads(data)
        if not isinstance(document, dict):
            raise ValueError(f"Top-level JSON value must be an object, got {type(document).__name__}")
        return self._collect(document)

    # @intent:responsibility 型付けされていない値から、キーごとにテーブルを構築します。
    def from_dictionary(self, value: Any) -> Optional[LocalizedFontTable]:
        """
        値が文字列キーの辞書である場合に限りテーブルを返します。それ以外はNoneを返します。
        """
        if not isinstance(value, dict):
            return None
        if not all(isinstance(key, str) for key in value):
            return None
        return self._collect(value)

    def _collect(self, document: Dict[str, Any]) -> LocalizedFontTable:
        fonts: Dict[str, LanguageFontMap] = {}
        for style in TextStyle:
            if style.serialized_name not in document:
                continue
            languages = _as_language_font_map(document[style.serialized_name])
            if languages is None:
                logger.debug("Ignoring malformed localized fonts for style '%s'", style.serialized_name)
                continue
            fonts[style.serialized_name] = languages
        return LocalizedFontTable(fonts)

    def _load_resource(self) -> Optional[LocalizedFontTable]:
        path = self.bundle.path_for_resource(self.resource_name, self.resource_extension)
        if path is None:
            return None
        try:
            data = path.read_bytes()
            return self.decode(data)
        except (OSError, UnicodeDecodeError, ValueError, RecursionError) as e:
            # json.JSONDecodeErrorはValueErrorのサブクラス
            logger.debug("Could not decode %s: %s", path, e)
            return None

    # @intent:responsibility リソースを読み込み、テーブルを返します。どちらのソースからも得られなければNone。
    def load(self) -> Optional[LocalizedFontTable]:
        table = self._load_resource()
        if table is not None:
            return table
        return self.from_dictionary(self.bundle.info_dictionary.get(self.info_key))

    # @intent:responsibility 言語コードのみをキーとする粗いフォント設定（LocalizedFonts）を読み込みます。
    def load_language_fonts(self) -> Optional[LanguageFontMap]:
        return _as_language_font_map(self.bundle.info_dictionary.get(self.language_fonts_key))
