"""page object 层的错误类型

LocatorResolutionFailure 就是 playwright 自己的 Error，原样向上抛，不做包装
"""
from playwright.sync_api import Error as LocatorResolutionFailure


class PageObjectError(Exception):
    pass


class WaitTimeoutError(PageObjectError, TimeoutError):
    """元素在超时时间内没有达到目标状态"""

    def __init__(self, state: str, timeout: float | None):
        self.state = state
        self.timeout = timeout
        bound = f"{timeout}ms" if timeout is not None else "default timeout"
        super().__init__(f"元素未在 {bound} 内变为 {state}")


class ItemNotFoundError(PageObjectError, LookupError):
    """按名称查找商品/购物车商品没有匹配"""

    def __init__(self, name: str, where: str):
        self.name = name
        self.where = where
        super().__init__(f"{where}中不存在商品：{name!r}")


class IndexOutOfRangeError(PageObjectError, IndexError):

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"下标 {index} 越界，当前共 {size} 个")


__all__ = [
    "PageObjectError",
    "WaitTimeoutError",
    "ItemNotFoundError",
    "IndexOutOfRangeError",
    "LocatorResolutionFailure",
]
