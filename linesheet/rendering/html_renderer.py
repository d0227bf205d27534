"""
Line Sheet HTML Renderer

Turns assembled page descriptors into a standalone HTML document.
Pages are rendered in the order given and keep the page numbers the
assembler assigned. Styling lives in an external stylesheet.
"""

import logging
from datetime import date
from html import escape
from typing import Any, Dict, List, Optional, Sequence

from ..common.formatting import format_price
from ..models import CatalogSummary, CategoryPage, CoverPage, PageDescriptor, Product, TOCHeading, TOCItem, TOCPage

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE_URL = "images/no-image.svg"
DEFAULT_STYLESHEET = "styles/themes/linesheet-document.css"


class LineSheetRenderer:
    """
    Renders line sheet pages to HTML.

    Usage:
        renderer = LineSheetRenderer(branding=load_branding())
        html = renderer.render_document(document.pages, document.organized.summary)
    """

    def __init__(
        self,
        branding: Optional[Dict[str, Any]] = None,
        stylesheet: str = DEFAULT_STYLESHEET,
        generated_on: Optional[date] = None,
    ):
        """
        Initialize the renderer.

        Args:
            branding: Cover page copy (see config_loader.load_branding); an optional
                placeholder_image replaces PLACEHOLDER_IMAGE_URL on cards without photos
            stylesheet: Stylesheet href linked from the document head
            generated_on: Date printed on the cover (omitted when None)
        """
        self.branding = branding or {}
        self.stylesheet = stylesheet
        self.generated_on = generated_on

    def render_document(self, pages: Sequence[PageDescriptor], summary: CatalogSummary) -> str:
        """Render all pages into a complete HTML document."""
        body = "".join(self.render_page(page, summary) for page in pages)
        title = escape(self.branding.get('document_title', 'Line Sheet'))
        logger.debug("Rendered %d page(s)", len(pages))
        return (
            '<!DOCTYPE html>\n'
            '<html lang="en">\n'
            '<head>\n'
            '<meta charset="UTF-8">\n'
            f'<title>{title}</title>\n'
            f'<link rel="stylesheet" href="{escape(self.stylesheet)}">\n'
            '</head>\n'
            '<body class="linesheet-document">\n'
            f'<div class="linesheet-preview-content">{body}</div>\n'
            '</body>\n'
            '</html>\n'
        )

    def render_page(self, page: PageDescriptor, summary: CatalogSummary) -> str:
        if isinstance(page, CoverPage):
            return self.render_cover(page, summary)
        if isinstance(page, TOCPage):
            return self.render_toc_page(page)
        if isinstance(page, CategoryPage):
            return self.render_category_page(page)
        raise TypeError(f"Unknown page descriptor: {page!r}")

    def render_cover(self, page: CoverPage, summary: CatalogSummary) -> str:
        b = self.branding
        statement = "".join(f"<p>{escape(p)}</p>" for p in b.get('statement', []))
        instructions = "".join(f"<li>{escape(i)}</li>" for i in b.get('ordering_instructions', []))
        contact = "".join(
            f"<p><strong>{escape(str(label))}:</strong> {escape(str(value))}</p>"
            for label, value in (b.get('contact') or {}).items()
        )
        generated = ""
        if self.generated_on is not None:
            generated = f'<p class="cover-date">{self.generated_on.strftime("%B %d, %Y")}</p>'

        return (
            f'<div class="cover-page" data-page="{page.page_number}">'
            '<div class="cover-content">'
            f'<h1 class="brand-name">{escape(b.get("brand_name", "Line Sheet"))}</h1>'
            f'<p class="brand-tagline">{escape(b.get("tagline", ""))}</p>'
            f'<div class="brand-statement">{statement}</div>'
            '<div class="contact-section"><div class="ordering-instructions">'
            f'<h3>Partnership Guidelines</h3><ol>{instructions}</ol>'
            '</div></div>'
            f'<div class="artist-info">{contact}</div>'
            f'<p class="catalog-summary">{summary.total_products} products across '
            f'{summary.total_categories} categories</p>'
            f'{generated}'
            '</div>'
            '</div>'
        )

    def render_toc_page(self, page: TOCPage) -> str:
        return (
            f'<div class="category-section" data-category="table-of-contents" '
            f'data-section-page="{page.index}">'
            '<div class="catalog-header">'
            f'<h2 class="category-title">{page.title}, page {page.index}</h2>'
            '</div>'
            f'<div class="toc-body"><div class="toc-content">{self.render_toc_items(page.items)}</div></div>'
            f'{self._footer(page.page_number)}'
            '</div>'
        )

    def render_toc_items(self, items: Sequence[TOCItem]) -> str:
        """
        Render TOC items, wrapping each category's rows in a toc-products block.

        A page that opens on product rows continues the previous page's
        category, so the rows get a wrapper without a repeated heading.
        """
        parts: List[str] = []
        wrapper_open = False

        for item in items:
            if isinstance(item, TOCHeading):
                if wrapper_open:
                    parts.append('</div>')
                parts.append(
                    '<div class="toc-category">'
                    f'<h3 class="category-name">{escape(item.display_name)}</h3>'
                    f'<span class="category-page">Page {item.page}</span>'
                    '</div>'
                    '<div class="toc-products">'
                )
                wrapper_open = True
            else:
                if not wrapper_open:
                    parts.append('<div class="toc-products toc-continued">')
                    wrapper_open = True
                parts.append(
                    '<div class="toc-product-row">'
                    f'<span class="product-sku">{escape(item.sku)}</span>'
                    f'<span class="product-name">{escape(item.name)}</span>'
                    f'<span class="product-material">{escape(item.material)}</span>'
                    f'<span class="product-price">{format_price(item.price)}</span>'
                    '</div>'
                )

        if wrapper_open:
            parts.append('</div>')
        return "".join(parts)

    def render_category_page(self, page: CategoryPage) -> str:
        cards = "".join(self.render_product_card(product) for product in page.products)
        return (
            f'<div class="category-section" data-category="{escape(page.category)}" '
            f'data-section-page="{page.section_index}">'
            '<div class="catalog-header">'
            f'<h2 class="category-title">{escape(page.display_name)}, page {page.section_index}</h2>'
            '</div>'
            f'<div class="catalog-body"><div class="product-grid">{cards}</div></div>'
            f'{self._footer(page.page_number)}'
            '</div>'
        )

    def render_product_card(self, product: Product) -> str:
        image = product.primary_image
        image_url = image.url if image else self.branding.get('placeholder_image', PLACEHOLDER_IMAGE_URL)
        image_alt = (image.alt_text if image and image.alt_text else f"{product.name} product image")
        material = f'<p class="product-material">{escape(product.material)}</p>' if product.material else ''

        return (
            f'<div class="linesheet-product-card" data-sku="{escape(product.code)}">'
            '<div class="product-image-container">'
            f'<img src="{escape(image_url)}" alt="{escape(image_alt)}" class="product-image" loading="lazy" />'
            '</div>'
            '<div class="product-info">'
            '<div class="product-details">'
            f'<p class="product-code">{escape(product.code)}</p>'
            f'<h4 class="product-name">{escape(product.name or "Unnamed Product")}</h4>'
            f'{material}'
            '</div>'
            f'<div class="product-price">{format_price(product.wholesale_price)}</div>'
            '</div>'
            '</div>'
        )

    @staticmethod
    def _footer(page_number: int) -> str:
        return f'<div class="catalog-footer"><p class="page-number">{page_number}</p></div>'
