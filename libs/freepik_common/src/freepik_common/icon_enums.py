"""
freepik_common.icon_enums - Enumerated request vocabularies of the icon API.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class DownloadFormat(str, Enum):
    """Formats accepted by the stock icon download endpoint."""

    SVG = "svg"
    PNG = "png"
    GIF = "gif"
    MP4 = "mp4"
    AEP = "aep"
    JSON = "json"
    PSD = "psd"
    EPS = "eps"


class PngSize(IntEnum):
    """Pixel sizes available when downloading an icon as PNG."""

    PX_512 = 512
    PX_256 = 256
    PX_128 = 128
    PX_64 = 64
    PX_32 = 32
    PX_24 = 24
    PX_16 = 16


class SortOrder(str, Enum):
    """Sort orders for icon search."""

    RELEVANCE = "relevance"
    RECENT = "recent"


class IconStyle(str, Enum):
    """Visual styles for AI generated icons."""

    SOLID = "solid"
    OUTLINE = "outline"
    COLOR = "color"
    FLAT = "flat"
    STICKER = "sticker"


class GenerationFormat(str, Enum):
    """Output formats for AI generated icons."""

    PNG = "png"
    SVG = "svg"
