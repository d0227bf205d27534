"""Tests for linesheet/layout/assembler.py"""

from dataclasses import replace

import pytest

from linesheet.layout import ConsistencyError, assemble, organize, plan
from linesheet.models import CategoryGroup, CategoryPage, CoverPage, TOCPage, TOCProductRow


def _group(product_factory, name, count):
    return CategoryGroup(name, products=[
        product_factory(f"{name[:1]}-{i:03d}", category=name) for i in range(count)
    ])


class TestAssembleStructure:
    def test_single_category(self, five_rings):
        categories = organize(five_rings).categories
        pages = assemble(categories, plan(categories))

        assert [type(p) for p in pages] == [CoverPage, TOCPage, CategoryPage, CategoryPage]
        assert [p.page_number for p in pages] == [1, 2, 3, 4]
        assert [len(p.products) for p in pages[2:]] == [4, 1]
        assert [p.section_index for p in pages[2:]] == [1, 2]

    def test_empty_catalog_is_cover_only(self):
        pages = assemble((), plan(()))
        assert pages == (CoverPage(page_number=1),)

    def test_category_pages_follow_input_order(self, product_factory):
        categories = [_group(product_factory, "Rings", 5), _group(product_factory, "Necklaces", 3)]
        pages = assemble(categories, plan(categories))
        category_pages = [p for p in pages if isinstance(p, CategoryPage)]
        assert [(p.category, p.section_index) for p in category_pages] == [
            ("Rings", 1), ("Rings", 2), ("Necklaces", 1)]

    def test_category_page_products_in_code_order(self, five_rings):
        categories = organize(five_rings).categories
        pages = assemble(categories, plan(categories))
        codes = [p.code for page in pages[2:] for p in page.products]
        assert codes == ["R-01", "R-02", "R-03", "R-04", "R-05"]

    def test_page_products_are_immutable_snapshots(self, product_factory):
        group = _group(product_factory, "Rings", 2)
        pages = assemble([group], plan([group]))
        assert isinstance(pages[-1].products, tuple)
        group.add(product_factory("R-999"))
        assert len(pages[-1].products) == 2

    def test_page_numbers_contiguous(self, product_factory):
        categories = [_group(product_factory, name, n)
                      for name, n in [("Rings", 30), ("Necklaces", 7), ("Earrings", 1), ("Bracelets", 12)]]
        page_map = plan(categories)
        pages = assemble(categories, page_map)
        expected = 1 + page_map.toc_page_count + sum(-(-len(g) // 4) for g in categories)
        assert [p.page_number for p in pages] == list(range(1, expected + 1))

    def test_density_bounds(self, product_factory):
        categories = [_group(product_factory, "Rings", 33), _group(product_factory, "Necklaces", 17)]
        pages = assemble(categories, plan(categories))
        assert all(len(p.items) <= 25 for p in pages if isinstance(p, TOCPage))
        assert all(len(p.products) <= 4 for p in pages if isinstance(p, CategoryPage))


class TestTocPages:
    def test_continuation_titles(self, product_factory):
        group = _group(product_factory, "Rings", 30)
        toc_pages = [p for p in assemble([group], plan([group])) if isinstance(p, TOCPage)]
        assert [p.title for p in toc_pages] == ["Table of Contents", "Table of Contents (continued)"]
        assert [p.index for p in toc_pages] == [1, 2]
        assert [p.page_number for p in toc_pages] == [2, 3]

    def test_continuation_starts_mid_category(self, product_factory):
        group = _group(product_factory, "Rings", 30)
        toc_pages = [p for p in assemble([group], plan([group])) if isinstance(p, TOCPage)]
        assert not toc_pages[0].starts_mid_category
        assert toc_pages[1].starts_mid_category
        assert all(isinstance(item, TOCProductRow) for item in toc_pages[1].items)

    def test_toc_completeness(self, mixed_catalog):
        categories = organize(mixed_catalog).categories
        pages = assemble(categories, plan(categories))
        items = [item for p in pages if isinstance(p, TOCPage) for item in p.items]
        headings = [i.category for i in items if i.kind == "category"]
        rows = [i.sku for i in items if i.kind == "product"]
        assert headings == [g.name for g in categories]
        assert rows == [p.code for g in categories for p in g.products]


class TestConsistency:
    def test_missing_category_in_page_map(self, product_factory):
        rings = _group(product_factory, "Rings", 3)
        necklaces = _group(product_factory, "Necklaces", 2)
        with pytest.raises(ConsistencyError, match="missing"):
            assemble([rings, necklaces], plan([rings]))

    def test_extra_category_in_page_map(self, product_factory):
        rings = _group(product_factory, "Rings", 3)
        necklaces = _group(product_factory, "Necklaces", 2)
        with pytest.raises(ConsistencyError, match="unexpected"):
            assemble([rings], plan([rings, necklaces]))

    def test_reordered_categories(self, product_factory):
        rings = _group(product_factory, "Rings", 3)
        necklaces = _group(product_factory, "Necklaces", 2)
        with pytest.raises(ConsistencyError, match="order"):
            assemble([necklaces, rings], plan([rings, necklaces]))

    def test_membership_changed_after_planning(self, product_factory):
        rings = _group(product_factory, "Rings", 4)
        page_map = plan([rings])
        rings.add(product_factory("R-999"))
        with pytest.raises(ConsistencyError, match="reserves"):
            assemble([rings], page_map)

    def test_product_added_without_changing_page_count(self, product_factory):
        rings = _group(product_factory, "Rings", 5)
        page_map = plan([rings])
        rings.add(product_factory("R-999"))
        assert page_map.placement_for("Rings").page_count == 2
        with pytest.raises(ConsistencyError, match="Table of contents"):
            assemble([rings], page_map)

    def test_product_swapped_after_planning(self, product_factory):
        rings = _group(product_factory, "Rings", 3)
        page_map = plan([rings])
        swapped = CategoryGroup("Rings", products=[
            product_factory(code, category="Rings") for code in ("R-000", "R-001", "R-777")
        ])
        with pytest.raises(ConsistencyError, match="rows"):
            assemble([swapped], page_map)

    def test_tampered_total_pages(self, five_rings):
        categories = organize(five_rings).categories
        page_map = replace(plan(categories), total_pages=9)
        with pytest.raises(ConsistencyError, match="expects"):
            assemble(categories, page_map)

    def test_duplicate_category_names(self, product_factory):
        rings = _group(product_factory, "Rings", 1)
        with pytest.raises(ConsistencyError, match="Duplicate"):
            assemble([rings, rings], plan([rings]))
