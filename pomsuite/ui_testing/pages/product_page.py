"""
================================================================================
Product Page Object
================================================================================

Example e-commerce page: search, product details, cart.

NOTE:
  Locators target a generic storefront layout; adjust them per application.

================================================================================
"""

from __future__ import annotations

import allure

from pomsuite.ui_testing.framework.locators import By, Locator
from pomsuite.ui_testing.framework.page_base import BasePage


class ProductPage(BasePage):
    """Product search and cart page object."""

    SEARCH_BOX = Locator(By.ID, "search-box", name="product.search_box")
    SEARCH_BUTTON = Locator(By.ID, "search-button", name="product.search_button")
    PRODUCT_TITLE = Locator(By.CLASS_NAME, "product-title", name="product.title")
    ADD_TO_CART = Locator(By.ID, "add-to-cart", name="product.add_to_cart")
    PRODUCT_PRICE = Locator(By.CLASS_NAME, "price", name="product.price")
    CART_ICON = Locator(By.ID, "cart-icon", name="product.cart_icon")
    CART_COUNT = Locator(By.CLASS_NAME, "cart-count", name="product.cart_count")

    @staticmethod
    def product_result(product_name: str) -> Locator:
        """Search result entry whose text contains `product_name`."""
        return Locator(
            By.XPATH,
            f"//div[contains(text(),'{product_name}')]",
            name=f"product.result[{product_name}]",
        )

    @allure.step("Search product: {product_name}")
    def search_product(self, product_name: str) -> None:
        self.type_text(self.SEARCH_BOX, product_name)
        self.click(self.SEARCH_BUTTON)

    def get_product_title(self) -> str:
        return self.text_of(self.PRODUCT_TITLE)

    def get_product_price(self) -> str:
        return self.text_of(self.PRODUCT_PRICE)

    @allure.step("Add to cart")
    def add_to_cart(self) -> None:
        self.click(self.ADD_TO_CART)

    def get_cart_count(self) -> str:
        return self.text_of(self.CART_COUNT)

    @allure.step("Open cart")
    def go_to_cart(self) -> None:
        self.click(self.CART_ICON)

    @allure.step("Select product: {product_name}")
    def select_product(self, product_name: str) -> None:
        self.click(self.product_result(product_name))

    def is_product_displayed(self) -> bool:
        return self.is_displayed(self.PRODUCT_TITLE)
