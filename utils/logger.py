import logging

from config.settings import LOG_LEVEL

_ROOT = "shop_ui"

logging.getLogger(_ROOT).setLevel(LOG_LEVEL)


def get_logger(name: str | None = None) -> logging.Logger:
    """获取 shop_ui 命名空间下的 logger
    不挂 handler，输出交给 pytest 的 log_cli（配置见 pyproject.toml）
    """
    root = logging.getLogger(_ROOT)
    return root.getChild(name) if name else root
