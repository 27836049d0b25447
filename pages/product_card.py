from playwright.sync_api import Page, Locator

from config.locators import PRODUCT_CARD_LOCATORS
from pages.base_component import BaseComponent
from utils.common_utils import wait_for_state
from utils.logger import get_logger

logger = get_logger("product_card")


class ProductCard(BaseComponent):
    """商品列表页的单个商品卡片"""

    def __init__(self, root: Locator, page: Page):
        super().__init__(root, page)
        self.name_element = self.locator(PRODUCT_CARD_LOCATORS["name"])  # 商品名称
        self.price_element = self.locator(PRODUCT_CARD_LOCATORS["price"])  # 商品价格
        self.description_element = self.locator(PRODUCT_CARD_LOCATORS["desc"])  # 商品描述
        self.link_element = self.locator(PRODUCT_CARD_LOCATORS["link"])  # 商品详情链接
        self.image_element = self.locator(PRODUCT_CARD_LOCATORS["img"])  # 商品图片
        self.add_to_cart_button = self.locator(PRODUCT_CARD_LOCATORS["add_button"])  # Add to cart
        self.remove_button = self.locator(PRODUCT_CARD_LOCATORS["remove_button"])  # Remove

    # ================= 数据获取 =================
    def get_name(self) -> str:
        return self.text_of(self.name_element)

    def get_price(self) -> str:
        return self.text_of(self.price_element)

    def get_description(self) -> str:
        return self.text_of(self.description_element)

    def get_link(self) -> str:
        return self.link_element.get_attribute("href") or ""

    def get_image_src(self) -> str:
        return self.image_element.get_attribute("src") or ""

    def is_added_to_cart(self) -> bool:
        # Remove按钮可见即已加购
        return self.remove_button.is_visible()

    # ================= 页面行为 =================
    def add_to_cart(self):
        """点击加购，等 Remove 按钮出现才算完成"""
        name = self.get_name()
        self.add_to_cart_button.click()
        wait_for_state(self.remove_button, "visible")
        logger.info("商品已加购：%s", name)

    def remove_from_cart(self):
        """点击移除，等 Add to cart 按钮重新出现才算完成"""
        name = self.get_name()
        self.remove_button.click()
        wait_for_state(self.add_to_cart_button, "visible")
        logger.info("商品已移出购物车：%s", name)

    def open_details(self):
        self.name_element.click()
