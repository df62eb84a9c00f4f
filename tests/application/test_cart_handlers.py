"""Integration tests for the cart use cases.

Uses in-memory fake repositories; no file I/O.
"""

import pytest

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.cart_store import CartStore
from storefront.application.personalize_item import PersonalizeItemHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeCartRepository, FakeProductRepository


def _setup() -> tuple[CartStore, FakeProductRepository, FakeCartRepository]:
    """Store persisted to a fake repository, plus a small catalog."""
    products = FakeProductRepository([
        Product(id="mug", name="Чаша", price=Money(250), image_url="mug.jpg"),
        Product(id="tee", name="Тениска", price=Money(100)),
        Product(id="sample", name="Мостра"),
    ])
    cart_repo = FakeCartRepository()
    store = CartStore(cart_repo.load())
    store.subscribe(lambda s: cart_repo.save(s.items))
    return store, products, cart_repo


class TestAddToCart:

    def test_adds_product_as_line(self):
        store, products, cart_repo = _setup()
        item = AddToCartHandler(products, store).handle("mug", 2)
        assert item.quantity.value == 2
        assert item.image_url == "mug.jpg"
        assert cart_repo.load() == list(store.items)

    def test_adding_again_merges(self):
        store, products, _ = _setup()
        handler = AddToCartHandler(products, store)
        handler.handle("mug")
        item = handler.handle("mug", 3)
        assert item.quantity.value == 4
        assert len(store.items) == 1

    def test_product_without_price_is_free(self):
        store, products, _ = _setup()
        item = AddToCartHandler(products, store).handle("sample")
        assert item.price == Money(0)

    def test_unknown_product_rejected(self):
        store, products, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            AddToCartHandler(products, store).handle("nope")
        assert store.items == ()

    def test_non_positive_quantity_rejected(self):
        store, products, _ = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            AddToCartHandler(products, store).handle("mug", 0)


class TestRemoveFromCart:

    def test_returns_remaining_quantity(self):
        store, products, _ = _setup()
        AddToCartHandler(products, store).handle("mug", 2)
        handler = RemoveFromCartHandler(store)
        assert handler.handle("mug") == 1
        assert handler.handle("mug") == 0
        assert store.is_empty

    def test_absent_product_is_noop(self):
        store, _, cart_repo = _setup()
        assert RemoveFromCartHandler(store).handle("mug") == 0
        assert cart_repo.save_count == 0


class TestPersonalizeItem:

    def test_writes_store_once(self):
        store, products, cart_repo = _setup()
        AddToCartHandler(products, store).handle("mug")
        saves_before = cart_repo.save_count

        item = PersonalizeItemHandler(store).handle(0, "Иван")

        assert item.child_name == "Иван"
        assert cart_repo.save_count == saves_before + 1
        assert cart_repo.load()[0].child_name == "Иван"

    def test_clearing_name(self):
        store, products, _ = _setup()
        AddToCartHandler(products, store).handle("mug")
        PersonalizeItemHandler(store).handle(0, "Иван")
        item = PersonalizeItemHandler(store).handle(0, None)
        assert item.child_name is None

    def test_editor_released_after_use(self):
        store, products, _ = _setup()
        AddToCartHandler(products, store).handle("mug")
        before = store.subscriber_count
        PersonalizeItemHandler(store).handle(0, "Иван")
        assert store.subscriber_count == before

    def test_missing_line_rejected(self):
        store, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Cart line #0 not found"):
            PersonalizeItemHandler(store).handle(0, "Иван")


class TestShowCart:

    def test_formats_lines_and_total(self):
        store, products, _ = _setup()
        add = AddToCartHandler(products, store)
        add.handle("mug", 2)
        add.handle("tee", 3)
        PersonalizeItemHandler(store).handle(1, "Ана")

        dto = ShowCartHandler(store).handle()

        assert dto.total == "8.00 €"
        assert dto.item_count == 5
        assert [line.index for line in dto.items] == [0, 1]
        assert dto.items[0].unit_price == "2.50 €"
        assert dto.items[0].line_total == "5.00 €"
        assert dto.items[1].child_name == "Ана"

    def test_empty_cart(self):
        store, _, _ = _setup()
        dto = ShowCartHandler(store).handle()
        assert dto.items == []
        assert dto.total == "0.00 €"

    def test_priceless_product_with_configured_currency(self):
        products = FakeProductRepository([
            Product(id="mug", name="Чаша", price=Money(1500, "EUR")),
            Product(id="voucher", name="Ваучер"),
        ])
        store = CartStore(currency="BGN")
        add = AddToCartHandler(products, store, currency="BGN")
        add.handle("mug")
        add.handle("voucher")

        dto = ShowCartHandler(store).handle()

        assert dto.total == "15.00 €"
        assert dto.items[1].unit_price == "0.00 лв."

    def test_empty_cart_in_configured_currency(self):
        dto = ShowCartHandler(CartStore(currency="USD")).handle()
        assert dto.total == "0.00 $"
