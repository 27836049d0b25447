from decimal import Decimal, ROUND_HALF_UP

from playwright.sync_api import Page

from config.locators import CART_LOCATORS
from config.pages import URLS, ENV
from pages.base_page import BasePage
from pages.cart_item import CartItem
from utils.common_utils import parse_money
from utils.exceptions import ItemNotFoundError, IndexOutOfRangeError
from utils.logger import get_logger

logger = get_logger("cart_page")


class ShoppingCartPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.title = page.locator(CART_LOCATORS["title"])  # 页面标题
        self.checkout_button = page.locator(CART_LOCATORS["checkout_button"])  # 结算按钮
        self.continue_shopping_button = page.locator(CART_LOCATORS["continue"])  # continue-shopping按钮

    # ================= 页面行为 =================
    def open(self, url: str = URLS[ENV]["cart"]):
        super().open(url)
        self.wait_visible(self.title)

    def remove_item(self, name: str):
        item = self.find_item_by_name(name)
        if item is None:
            raise ItemNotFoundError(name, "购物车")
        item.remove()
        logger.info("购物车删除商品：%s", name)

    def checkout(self):
        self.click(self.checkout_button)

    def continue_shopping(self):
        self.click(self.continue_shopping_button)

    # ================= 数据获取 =================
    def get_cart_items(self) -> list[CartItem]:
        """当前购物车所有商品行，每次重新获取"""
        return self.get_list_of_components(CART_LOCATORS["cart_item"], CartItem)

    def find_item_by_name(self, name: str) -> CartItem | None:
        for item in self.get_cart_items():
            if item.get_name() == name.strip():
                return item
        return None

    def get_item_by_index(self, index: int) -> CartItem:
        items = self.get_cart_items()
        if index < 0 or index >= len(items):
            raise IndexOutOfRangeError(index, len(items))
        return items[index]

    def get_item_count(self) -> int:
        return len(self.get_cart_items())

    # ================= 手动计算 =================
    def get_total_price(self) -> Decimal:
        """购物车商品价格合计，保留2位小数（四舍五入）"""
        # 显式指定 sum 初始值="0"
        total = sum((parse_money(item.get_price()) for item in self.get_cart_items()), Decimal("0"))
        return total.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
