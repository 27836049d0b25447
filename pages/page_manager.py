from playwright.sync_api import Page

from pages.cart_page import ShoppingCartPage
from pages.checkout_form import CheckoutForm
from pages.login_page import LoginPage
from pages.products_page import ProductsPage


class PageManager:
    """
    所有页面对象的统一入口，绑定同一个 page
    构造时一次性创建，之后不再替换
    """

    def __init__(self, page: Page):
        self.page = page
        self.login_page = LoginPage(page)
        self.products_page = ProductsPage(page)
        self.cart_page = ShoppingCartPage(page)
        self.checkout_form = CheckoutForm(page)
