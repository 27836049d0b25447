from decimal import Decimal

from playwright.sync_api import Page

from config.locators import PRODUCTS_LOCATORS
from config.pages import URLS, ENV
from pages.base_page import BasePage
from pages.product_card import ProductCard
from utils.common_utils import parse_money
from utils.exceptions import ItemNotFoundError, IndexOutOfRangeError


class ProductsPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.product_items = page.locator(PRODUCTS_LOCATORS["product_item"])  # 商品列表
        self.sort_dropdown = page.locator(PRODUCTS_LOCATORS["product_sort"])  # 排序下拉框
        self.cart_button = page.locator(PRODUCTS_LOCATORS["cart_button"])  # 购物车icon
        self.cart_badge = page.locator(PRODUCTS_LOCATORS["cart_badge"])  # 购物车角标

    # ================= 页面行为 =================
    def open(self, url: str = URLS[ENV]["inventory"]):
        super().open(url)
        self.wait_visible(self.product_items.first)

    def sort_products(self, option: str):
        """option 为下拉框 value：az / za / lohi / hilo，非法值由 playwright 报错"""
        self.sort_dropdown.select_option(option)

    def go_to_cart(self):
        self.click(self.cart_button)

    def add_product_to_cart(self, name: str):
        product = self.find_product_by_name(name)
        if product is None:
            raise ItemNotFoundError(name, "商品列表")
        product.add_to_cart()

    def remove_product_from_cart(self, name: str):
        product = self.find_product_by_name(name)
        if product is None:
            raise ItemNotFoundError(name, "商品列表")
        product.remove_from_cart()

    # ================= 数据获取 =================
    def get_product_cards(self) -> list[ProductCard]:
        """当前页面所有商品卡片，每次重新获取"""
        return self.get_list_of_components(PRODUCTS_LOCATORS["product_item"], ProductCard)

    def find_product_by_name(self, name: str) -> ProductCard | None:
        """找不到返回 None，不报错"""
        for product in self.get_product_cards():
            if product.get_name() == name.strip():
                return product
        return None

    def get_product_by_index(self, index: int) -> ProductCard:
        products = self.get_product_cards()
        if index < 0 or index >= len(products):
            raise IndexOutOfRangeError(index, len(products))
        return products[index]

    def get_cart_count(self) -> int:
        # 购物车为空时角标不存在
        if self.get_count(self.cart_badge) == 0:
            return 0
        return int(self.text(self.cart_badge))

    def get_product_names(self) -> list[str]:
        return [p.get_name() for p in self.get_product_cards()]

    def get_product_prices(self) -> list[Decimal]:
        return [parse_money(p.get_price()) for p in self.get_product_cards()]
