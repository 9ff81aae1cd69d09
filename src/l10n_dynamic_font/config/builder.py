from typing import Optional
from l10n_dynamic_font.core.platform import AbstractPlatform, PlatformCapabilities
from l10n_dynamic_font.core.resolver import FontResolver
from l10n_dynamic_font.loader.loader import ResourceBundle, LocalizedFontsLoader
from .models import ResolverSettings

# @intent:responsibility 設定（Settings）に基づいて、Bundle、Loader、Platformを生成・接続し、FontResolverを組み立てます。
class ResolverBuilder:
    def build_resolver(self, settings: ResolverSettings, platform: Optional[AbstractPlatform] = None) -> FontResolver:
        bundle = ResourceBundle(settings.bundle_path)
        loader = self.build_loader(settings, bundle)

        if platform is None:
            from l10n_dynamic_font.ui.fonts import QtPlatform
            capabilities = PlatformCapabilities.from_string(settings.platform.kind, settings.platform.version)
            platform = QtPlatform(
                capabilities=capabilities,
                content_scale=settings.content_scale,
                locale=settings.language,
            )

        return FontResolver(platform, loader, cache_table=settings.cache_table)

    # @intent:responsibility Settingsで指定されたリソース名・キーを持つLoaderを生成します。
    def build_loader(self, settings: ResolverSettings, bundle: ResourceBundle) -> LocalizedFontsLoader:
        return LocalizedFontsLoader(
            bundle,
            resource_name=settings.resource_name,
            resource_extension=settings.resource_extension,
            info_key=settings.info_key,
            language_fonts_key=settings.language_fonts_key,
        )
