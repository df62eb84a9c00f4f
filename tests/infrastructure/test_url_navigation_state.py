"""Tests for the URL-backed navigation adapter."""

from storefront.infrastructure.navigation.url_navigation_state import UrlNavigationState


class TestQueryParameters:

    def test_get_absent(self):
        assert UrlNavigationState("/products").get("type") is None

    def test_get_decodes_percent_encoding(self):
        nav = UrlNavigationState("/products?type=%D0%A7%D0%B0%D1%88%D0%B8")
        assert nav.get("type") == "Чаши"

    def test_get_blank_value(self):
        assert UrlNavigationState("/products?type=").get("type") == ""

    def test_set_encodes_value(self):
        nav = UrlNavigationState("/products")
        nav.set("type", "Чаши и Тениски")
        assert nav.url == "/products?type=%D0%A7%D0%B0%D1%88%D0%B8%20%D0%B8%20%D0%A2%D0%B5%D0%BD%D0%B8%D1%81%D0%BA%D0%B8"
        assert nav.get("type") == "Чаши и Тениски"

    def test_set_none_removes_param(self):
        nav = UrlNavigationState("/products?type=A")
        nav.set("type", None)
        assert nav.url == "/products"

    def test_set_keeps_other_params(self):
        nav = UrlNavigationState("/products?page=2&type=A")
        nav.set("type", "B")
        assert nav.get("page") == "2"
        assert nav.get("type") == "B"


class TestHistory:

    def test_set_pushes_history(self):
        nav = UrlNavigationState("/products")
        nav.set("type", "A")
        assert nav.can_go_back
        nav.back()
        assert nav.url == "/products"

    def test_back_at_start_is_noop(self):
        nav = UrlNavigationState("/products")
        nav.back()
        assert nav.url == "/products"

    def test_notifies_only_on_change(self):
        nav = UrlNavigationState("/products")
        urls = []
        nav.subscribe(lambda n: urls.append(n.url))
        nav.set("type", "A")
        nav.set("type", "A")
        nav.navigate("/products?type=A")
        nav.back()
        assert urls == ["/products?type=A", "/products"]
