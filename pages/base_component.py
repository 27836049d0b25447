from typing import Callable, TypeVar

from playwright.sync_api import Page, Locator

from utils.common_utils import wait_for_state

T = TypeVar("T")


class BaseComponent:
    """
    页面中某一块 DOM 子树的封装（商品卡片、购物车商品行…）
    - root: 组件根节点 locator，所有子元素都相对 root 查找
    - page: 所属页面，需要在整个页面范围查找时使用
    组件之间只有“范围”关系，没有持有关系
    """

    def __init__(self, root: Locator, page: Page):
        self.root = root
        self.page = page

    def locator(self, selector: str) -> Locator:
        """在 root 范围内查找子元素"""
        return self.root.locator(selector)

    # ========= 状态查询（每次都重新查询，不缓存）=========
    def is_visible(self) -> bool:
        return self.root.is_visible()

    def is_enabled(self) -> bool:
        return self.root.is_enabled()

    # ========= 等待 =========
    def wait_for_visible(self, timeout: float | None = None):
        """超时抛 WaitTimeoutError；timeout 单位毫秒，None 为默认超时"""
        wait_for_state(self.root, "visible", timeout)

    def wait_for_hidden(self, timeout: float | None = None):
        wait_for_state(self.root, "hidden", timeout)

    # ========= 子组件 =========
    def get_components(self, selector: str, factory: Callable[[Locator, Page], T]) -> list[T]:
        """
        root 下所有匹配 selector 的节点，按文档顺序每个生成一个组件
        每次调用重新枚举
        """
        return [factory(locator, self.page) for locator in self.root.locator(selector).all()]

    # ========= 基础动作 =========
    def scroll_into_view(self):
        self.root.scroll_into_view_if_needed()

    def click(self, force: bool = False, timeout: float | None = None):
        self.root.click(force=force, timeout=timeout)

    def get_text(self) -> str:
        return (self.root.text_content() or "").strip()

    def text_of(self, locator: Locator) -> str:
        """子元素文本，去空白，空文本返回 ''"""
        return (locator.text_content() or "").strip()
