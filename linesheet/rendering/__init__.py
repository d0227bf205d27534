"""
Rendering modules.

Modules:
    html_renderer - Page descriptors -> standalone HTML document
"""

from .html_renderer import PLACEHOLDER_IMAGE_URL, LineSheetRenderer

__all__ = [
    'LineSheetRenderer',
    'PLACEHOLDER_IMAGE_URL',
]
