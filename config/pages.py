import os

"""被测站点地址，ENV 环境变量切换环境"""

ENV = os.getenv("ENV", "prod")

URLS = {
    "prod": {
        "login": "https://www.saucedemo.com/",
        "inventory": "https://www.saucedemo.com/inventory.html",
        "cart": "https://www.saucedemo.com/cart.html",
        "checkout_step_one": "https://www.saucedemo.com/checkout-step-one.html",
        "checkout_step_two": "https://www.saucedemo.com/checkout-step-two.html",
        "checkout_complete": "https://www.saucedemo.com/checkout-complete.html",
    },
}

if ENV not in URLS:
    raise RuntimeError(f"‼️未知的测试环境 ENV={ENV}，可选：{list(URLS)}")
