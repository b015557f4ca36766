"""Unit tests for row/cell selector resolution."""

import pytest
from lxml import html

from tableish.exceptions import InvalidSelector
from tableish.extraction.selectors import (
    ByFunction,
    ByQuery,
    as_selector,
    looks_like_xpath,
    resolve_cells,
    resolve_rows,
)


@pytest.fixture
def tools_doc(tools_html):
    return html.document_fromstring(tools_html)


class TestAsSelector:
    """Tests for selector normalization."""

    def test_string_becomes_query(self):
        selector = as_selector("table tr")
        assert isinstance(selector, ByQuery)
        assert selector.expression == "table tr"
        assert selector.xpath is False

    def test_xpath_string_becomes_xpath_query(self):
        selector = as_selector("//table/tr")
        assert isinstance(selector, ByQuery)
        assert selector.xpath is True

    def test_xpath_detection_can_be_disabled(self):
        with pytest.raises(InvalidSelector):
            # "//table" is not valid CSS
            as_selector("//table", detect_xpath=False)

    def test_callable_becomes_function(self):
        fn = lambda doc: []
        selector = as_selector(fn)
        assert isinstance(selector, ByFunction)
        assert selector.function is fn

    def test_existing_selector_is_returned_unchanged(self):
        query = ByQuery("td")
        assert as_selector(query) is query

    @pytest.mark.parametrize("value", [None, 42, b"td", ["td"], {"css": "td"}])
    def test_unsupported_shapes_raise(self, value):
        with pytest.raises(InvalidSelector):
            as_selector(value)

    def test_error_names_role(self):
        with pytest.raises(InvalidSelector) as exc_info:
            as_selector(None, role="column")

        error = exc_info.value
        assert error.role == "column"
        assert error.code == "INVALID_SELECTOR"
        assert error.details == {"role": "column"}
        assert "column selector" in error.message

    def test_error_records_type(self):
        with pytest.raises(InvalidSelector) as exc_info:
            as_selector(3.5, role="row")
        assert exc_info.value.details["type"] == "float"

    def test_invalid_css_raises_on_construction(self):
        with pytest.raises(InvalidSelector, match="CSS"):
            ByQuery("td[[")

    def test_invalid_xpath_raises_on_construction(self):
        with pytest.raises(InvalidSelector, match="XPath"):
            ByQuery("//td[", xpath=True)

    def test_invalid_query_error_names_role(self):
        with pytest.raises(InvalidSelector) as exc_info:
            as_selector("td[[", role="column")

        error = exc_info.value
        assert error.role == "column"
        assert error.details == {"role": "column", "type": "str"}

    def test_existing_selector_gets_role(self):
        selector = as_selector(ByFunction(lambda row: []), role="row")
        assert selector.role == "row"
        assert as_selector(selector, role="column").role == "row"


class TestLooksLikeXPath:
    """Tests for XPath detection."""

    @pytest.mark.parametrize("expression", ["//tr", "/html/body", "./td", "../tr", ".//td", "(//td)[1]"])
    def test_xpath_paths(self, expression):
        assert looks_like_xpath(expression)

    @pytest.mark.parametrize("expression", ["tr", "table#tools tr", "td,th", "dl > dt", ".cell"])
    def test_css_selectors(self, expression):
        assert not looks_like_xpath(expression)


class TestResolveRows:
    """Tests for row resolution."""

    def test_css_rows_in_document_order(self, tools_doc):
        rows = resolve_rows(tools_doc, as_selector("table#tools tr"))
        assert len(rows) == 3
        assert [row.tag for row in rows] == ["tr", "tr", "tr"]
        assert rows[1].text_content().split() == ["webrat", "bryan"]

    def test_xpath_rows(self, tools_doc):
        rows = resolve_rows(tools_doc, as_selector("//table[@id='tools']//tr[td]"))
        assert len(rows) == 2

    def test_no_match_returns_empty_list(self, tools_doc):
        assert resolve_rows(tools_doc, as_selector("table#missing tr")) == []

    def test_function_rows(self, tools_doc):
        selector = as_selector(lambda doc: doc.cssselect("tr")[:1])
        rows = resolve_rows(tools_doc, selector)
        assert len(rows) == 1

    def test_function_returning_generator_is_materialised(self, tools_doc):
        selector = as_selector(lambda doc: (tr for tr in doc.iter("tr")))
        assert len(resolve_rows(tools_doc, selector)) == 3

    def test_function_returning_non_sequence_raises(self, tools_doc):
        with pytest.raises(InvalidSelector) as exc_info:
            resolve_rows(tools_doc, as_selector(lambda doc: 7, role="row"))
        assert exc_info.value.details == {"role": "row", "type": "int"}

    def test_function_returning_string_raises(self, tools_doc):
        with pytest.raises(InvalidSelector):
            resolve_rows(tools_doc, as_selector(lambda doc: "tr"))


class TestResolveCells:
    """Tests for cell resolution within a row."""

    def test_group_selector_keeps_document_order(self):
        doc = html.document_fromstring("<table><tr><td>a</td><th>b</th><td>c</td></tr></table>")
        row = doc.cssselect("tr")[0]
        cells = resolve_cells(row, as_selector("td,th"))
        assert [cell.text for cell in cells] == ["a", "b", "c"]

    def test_cells_are_scoped_to_the_row(self, tools_doc):
        rows = resolve_rows(tools_doc, as_selector("table#tools tr"))
        cells = resolve_cells(rows[2], as_selector("td"))
        assert [cell.text for cell in cells] == ["cucumber", "aslak"]

    def test_relative_xpath_cells(self, tools_doc):
        rows = resolve_rows(tools_doc, as_selector("table#tools tr"))
        cells = resolve_cells(rows[0], as_selector("./th"))
        assert [cell.text for cell in cells] == ["tool", "dude"]

    def test_xpath_text_results(self, tools_doc):
        rows = resolve_rows(tools_doc, as_selector("table#tools tr"))
        cells = resolve_cells(rows[1], as_selector("./td/text()"))
        assert cells == ["webrat", "bryan"]

    def test_xpath_scalar_result_is_wrapped(self, tools_doc):
        rows = resolve_rows(tools_doc, as_selector("table#tools tr"))
        assert resolve_cells(rows[1], as_selector("count(./td)")) == [2.0]

    def test_function_cells(self, tools_dl_html):
        doc = html.document_fromstring(tools_dl_html)
        dts = resolve_rows(doc, as_selector("dl#tools dt"))
        cells = resolve_cells(dts[0], as_selector(lambda dt: [dt, dt.getnext()]))
        assert [cell.tag for cell in cells] == ["dt", "dd"]
