from contextlib import contextmanager
from typing import Iterator

from playwright.sync_api import Browser, Page

from config.settings import DEFAULT_TIMEOUT
from data.login_data import STANDARD_USER
from pages.page_manager import PageManager
from utils.common_utils import wait_for_state
from utils.logger import get_logger

logger = get_logger("session")


@contextmanager
def authenticated_session(browser: Browser,
                          username: str = STANDARD_USER["username"],
                          password: str = STANDARD_USER["password"]) -> Iterator[Page]:
    """
    新建一个干净的 context（cookie/storage 全新）并登录，yield 登录后的 page
    - 登录成功的标志：商品排序下拉框可见，超时抛 WaitTimeoutError
    - 退出时无论成功失败都关闭 context
    """
    context = browser.new_context()
    context.set_default_timeout(DEFAULT_TIMEOUT)
    logger.info("新建浏览器 context，用户：%s", username)
    try:
        page = context.new_page()
        pages = PageManager(page)
        pages.login_page.open()
        pages.login_page.login(username, password)
        wait_for_state(pages.products_page.sort_dropdown, "visible")
        logger.info("登录成功：%s", page.url)

        yield page
    finally:
        context.close()
        logger.info("context 已关闭")
