import os

"""浏览器运行配置，全部可以用环境变量覆盖"""

BROWSER = os.getenv("BROWSER", "chromium")  # chromium / firefox / webkit

# CI 环境强制无头模式
HEADLESS = bool(os.getenv("CI")) or os.getenv("HEADLESS", "1") != "0"

DEFAULT_TIMEOUT = int(os.getenv("DEFAULT_TIMEOUT", "10000"))  # 毫秒，作用于每个新 context

SLOW_MO = int(os.getenv("SLOW_MO", "0"))  # 调试时放慢每步操作，毫秒

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
