from playwright.sync_api import Page, Locator

from config.locators import CART_ITEM_LOCATORS
from pages.base_component import BaseComponent


class CartItem(BaseComponent):
    """购物车页面的一行商品"""

    def __init__(self, root: Locator, page: Page):
        super().__init__(root, page)
        self.name_element = self.locator(CART_ITEM_LOCATORS["name"])
        self.price_element = self.locator(CART_ITEM_LOCATORS["price"])
        self.description_element = self.locator(CART_ITEM_LOCATORS["desc"])
        self.quantity_element = self.locator(CART_ITEM_LOCATORS["quantity"])
        self.remove_button = self.locator(CART_ITEM_LOCATORS["remove_button"])
        self.link_element = self.locator(CART_ITEM_LOCATORS["link"])

    def get_name(self) -> str:
        return self.text_of(self.name_element)

    def get_price(self) -> str:
        return self.text_of(self.price_element)

    def get_description(self) -> str:
        return self.text_of(self.description_element)

    def get_quantity(self) -> int:
        text = self.text_of(self.quantity_element)
        return int(text) if text else 0

    def remove(self):
        # 不等待：行消失由调用方重新枚举购物车确认
        self.remove_button.click()

    def open_details(self):
        self.link_element.click()
