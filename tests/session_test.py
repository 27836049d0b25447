import pytest

from config.pages import URLS, ENV
from data.products_data import FIRST_PRODUCT
from pages.page_manager import PageManager
from utils.exceptions import WaitTimeoutError, LocatorResolutionFailure
from utils.session import authenticated_session


@pytest.mark.ui
class TestSession:

    def test_sessions_are_isolated(self, browser):
        """两个 session 各自登录，第一个的购物车不会带到第二个"""
        with authenticated_session(browser) as first_page:
            first = PageManager(first_page)
            first.products_page.add_product_to_cart(FIRST_PRODUCT["name"])
            assert first.products_page.get_cart_count() == 1
            first_context = first_page.context

        with authenticated_session(browser) as second_page:
            assert second_page.context is not first_context
            second = PageManager(second_page)
            assert second.products_page.get_cart_count() == 0
            assert not second.products_page.find_product_by_name(FIRST_PRODUCT["name"]).is_added_to_cart()

    def test_new_context_starts_logged_out(self, page):
        """未登录 context 访问商品列表会停留在登录页"""
        pages = PageManager(page)
        page.goto(URLS[ENV]["inventory"])
        pages.login_page.wait_visible(pages.login_page.username_input)
        assert pages.products_page.sort_dropdown.count() == 0

    def test_login_failure_aborts_session(self, browser):
        """登录失败时排序下拉框不出现，抛 WaitTimeoutError 且 context 被关闭"""
        contexts_before = len(browser.contexts)
        with pytest.raises(WaitTimeoutError):
            with authenticated_session(browser, "locked_out_user", "secret_sauce"):
                pytest.fail("登录失败不应进入 session")
        assert len(browser.contexts) == contexts_before

    def test_page_unusable_after_session_closed(self, browser):
        with authenticated_session(browser) as page:
            pages = PageManager(page)
        with pytest.raises(LocatorResolutionFailure):
            pages.products_page.get_product_cards()
