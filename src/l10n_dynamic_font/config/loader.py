import yaml
from typing import Dict, Any, Optional
from .models import ResolverSettings, PlatformSettings
from l10n_dynamic_font.core.platform import PlatformKind, parse_version

class ConfigLoader:
    def load_from_file(self, path: str) -> ResolverSettings:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
        return self._parse_config(data or {})

    def _parse_config(self, data: Dict[str, Any]) -> ResolverSettings:
        if not isinstance(data, dict):
            raise ValueError(f"Invalid settings format: {data}")
        defaults = ResolverSettings()

        # Parse Platform
        platform_data = data.get("platform", {}) or {}
        if not isinstance(platform_data, dict):
            raise ValueError(f"Invalid platform settings: {platform_data}")
        kind = str(platform_data.get("kind", defaults.platform.kind))
        PlatformKind.from_name(kind)
        version = str(platform_data.get("version", defaults.platform.version))
        parse_version(version)

        return ResolverSettings(
            bundle_path=str(data.get("bundle_path", defaults.bundle_path)),
            resource_name=data.get("resource_name", defaults.resource_name),
            resource_extension=data.get("resource_extension", defaults.resource_extension),
            info_key=data.get("info_key", defaults.info_key),
            language_fonts_key=data.get("language_fonts_key", defaults.language_fonts_key),
            cache_table=bool(data.get("cache_table", defaults.cache_table)),
            content_scale=self._parse_scale(data.get("content_scale", defaults.content_scale)),
            language=self._parse_language(data.get("language")),
            platform=PlatformSettings(kind=kind, version=version),
        )

    def _parse_scale(self, value: Any) -> float:
        if isinstance(value, bool):
            raise ValueError(f"Invalid content scale: {value}")
        if isinstance(value, (int, float)):
            scale = float(value)
        elif isinstance(value, str):
            try:
                scale = float(value)
            except ValueError:
                raise ValueError(f"Invalid content scale: {value}")
        else:
            raise ValueError(f"Invalid content scale: {value}")
        if scale <= 0:
            raise ValueError(f"Content scale must be positive: {value}")
        return scale

    def _parse_language(self, value: Any) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, str) and value.strip():
            return value.strip()
        raise ValueError(f"Invalid language: {value}")
