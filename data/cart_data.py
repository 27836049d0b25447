from decimal import Decimal

"""购物车测试数据"""

CART_PRODUCTS = ["Sauce Labs Backpack", "Sauce Labs Bike Light"]  # $29.99 + $9.99

CART_TOTAL_PRICE = Decimal("39.98")
