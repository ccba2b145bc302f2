"""Static asset locations under the deployment base prefix."""

from dataclasses import dataclass, field

from invitation.constants import AUDIO_ASSET, IMAGE_ASSETS


def asset_url(base: str, name: str) -> str:
    """
    Resolve an asset name against the base prefix.

    The base is an opaque prefix and is prepended as-is, so a directory
    base needs its trailing slash (``"/static/"``).
    """
    return f"{base}{name}"


@dataclass(frozen=True)
class AssetManifest:
    """Assets the page references."""

    audio: str = AUDIO_ASSET
    images: tuple[str, ...] = field(default=IMAGE_ASSETS)

    def urls(self, base: str) -> dict:
        """Resolved URLs keyed by category."""
        return {
            "audio": asset_url(base, self.audio),
            "images": [asset_url(base, image) for image in self.images],
        }
