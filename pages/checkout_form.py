from decimal import Decimal

from playwright.sync_api import Page

from config.locators import CHECKOUT_LOCATORS
from config.pages import URLS, ENV
from pages.base_page import BasePage
from utils.common_utils import parse_money, wait_for_state
from utils.logger import get_logger

logger = get_logger("checkout_form")


class CheckoutForm(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        #  step one 收货人信息
        self.first_name_input = page.locator(CHECKOUT_LOCATORS["firstName_input"])  # firstName输入框
        self.last_name_input = page.locator(CHECKOUT_LOCATORS["lastName_input"])  # lastName输入框
        self.zip_code_input = page.locator(CHECKOUT_LOCATORS["postalCode_input"])  # postalCode输入框
        self.error_message = page.locator(CHECKOUT_LOCATORS["error_msg"])  # 收货人未填写点击下一步错误提示文案
        self.cancel_button = page.locator(CHECKOUT_LOCATORS["cancel_button"])  # 取消按钮
        self.continue_button = page.locator(CHECKOUT_LOCATORS["continue_button"])  # 继续按钮

        #  step two 订单价格
        self.summary_subtotal = page.locator(CHECKOUT_LOCATORS["products_price"])  # 商品总价格
        self.summary_tax = page.locator(CHECKOUT_LOCATORS["tax_price"])  # 税费
        self.summary_total = page.locator(CHECKOUT_LOCATORS["order_price"])  # 订单价格
        self.finish_button = page.locator(CHECKOUT_LOCATORS["finish_button"])  # 完成按钮

        #  complete 完成页面
        self.pony_express_image = page.locator(CHECKOUT_LOCATORS["pony_express"])
        self.complete_header = page.locator(CHECKOUT_LOCATORS["complete_header"])
        self.complete_text = page.locator(CHECKOUT_LOCATORS["complete_text"])
        self.back_to_products_button = page.locator(CHECKOUT_LOCATORS["back_to_products"])

    # ========== 页面行为 ==========
    def goto(self, url: str = URLS[ENV]["checkout_step_one"]):
        self.open(url)

    def fill_customer_info(self, first_name: str, last_name: str, zip_code: str):
        self.fill(self.first_name_input, first_name)
        self.fill(self.last_name_input, last_name)
        self.fill(self.zip_code_input, zip_code)

    def continue_checkout(self):
        self.click(self.continue_button)

    def finish_order(self):
        """点击finish，完成页面标题出现才算下单完成"""
        self.click(self.finish_button)
        wait_for_state(self.complete_header, "visible")
        logger.info("订单已提交")

    def cancel_checkout(self):
        self.click(self.cancel_button)

    def return_to_products(self):
        self.click(self.back_to_products_button)

    # ================= 数据获取 =================
    def get_error_message(self) -> str:
        return self.text(self.error_message)

    def get_subtotal(self) -> Decimal:
        return parse_money(self.text(self.summary_subtotal))

    def get_tax(self) -> Decimal:
        return parse_money(self.text(self.summary_tax))

    def get_total(self) -> Decimal:
        return parse_money(self.text(self.summary_total))

    def get_complete_header(self) -> str:
        return self.text(self.complete_header)

    def get_complete_text(self) -> str:
        return self.text(self.complete_text)
