import re
from typing import Callable, TypeVar

from playwright.sync_api import Page, Locator, expect

from utils.common_utils import wait_for_state

T = TypeVar("T")


class BasePage:
    """整个页面的封装：导航 + 在整个页面范围内枚举组件"""

    def __init__(self, page: Page):
        self.page = page

    # ========= 基础动作 =========
    def open(self, url: str):
        self.page.goto(url)

    def click(self, locator: Locator):
        locator.scroll_into_view_if_needed()
        locator.click()

    def fill(self, locator: Locator, value: str):
        locator.fill(value)

    def text(self, locator: Locator) -> str:
        # 没有文本时返回空字符串，不返回None
        return (locator.text_content() or "").strip()

    def get_count(self, locator: Locator) -> int:
        return locator.count()

    # ========= 组件 =========
    def get_list_of_components(self, selector: str, factory: Callable[[Locator, Page], T]) -> list[T]:
        """
        按 selector 在整个页面查找，每个匹配节点生成一个组件
        :param selector: CSS / XPath
        :param factory: 组件构造函数 (root, page) -> 组件，组件类本身即可
        每次调用都重新查找，不缓存：DOM变化（加购/删除）之后必须重新获取
        """
        return [factory(locator, self.page) for locator in self.page.locator(selector).all()]

    # ========= 等待 =========
    def wait_visible(self, locator: Locator, timeout: float | None = None):
        wait_for_state(locator, "visible", timeout)

    def wait_hidden(self, locator: Locator, timeout: float | None = None):
        wait_for_state(locator, "hidden", timeout)

    def wait_url(self, pattern: str):
        expect(self.page).to_have_url(re.compile(pattern))
