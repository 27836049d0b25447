from decimal import Decimal
import re

from playwright.sync_api import Locator, TimeoutError as PlaywrightTimeoutError

from utils.exceptions import WaitTimeoutError

"""字符串中获取价格、等待元素状态"""


def parse_money(text: str) -> Decimal:
    """
        从 '$29.99' 或 'Item total: $1,039.98' 提取 Decimal('1039.98')，千分位逗号去掉
        """
    match = re.search(r"\$([\d,.]+)", text)
    assert match, f"无法从文本中解析金额：{text}"
    return Decimal(match.group(1).replace(",", ""))


def wait_for_state(locator: Locator, state: str, timeout: float | None = None):
    """等待 locator 达到 visible / hidden / attached / detached 状态
    timeout为None时使用 context 的默认超时时间
    超时抛出 WaitTimeoutError，携带目标状态和超时时间
    """
    try:
        locator.wait_for(state=state, timeout=timeout)
    except PlaywrightTimeoutError as e:
        raise WaitTimeoutError(state, timeout) from e
