"""商品列表测试数据"""

PRODUCT_COUNT = 6  # 商品列表商品数量

FIRST_PRODUCT = {
    "name": "Sauce Labs Backpack",
    "price": "$29.99",
    "desc": "carry.allTheThings() with the sleek, streamlined Sly Pack that melds "
            "uncompromising style with unequaled laptop and tablet protection."
}

SECOND_PRODUCT_NAME = "Sauce Labs Bike Light"  # 价格 $9.99

NONEXISTENT_PRODUCT_NAME = "Sauce Labs Time Machine"

# 排序下拉框 option value
PRODUCT_SORT = {
    "name_asc": "az",
    "name_desc": "za",
    "price_asc": "lohi",
    "price_desc": "hilo"
}
