from decimal import Decimal


class CartAssert:

    @staticmethod
    def cart_badge_count(actual: int, expect: int):
        """购物车图标显示数字"""
        assert actual == expect, f"购物车角标显示的加购商品数量错误：{actual}!={expect}"

    @staticmethod
    def item_count(actual: int, expect: int):
        assert actual == expect, f"购物车页面商品数量错误：{actual}!={expect}"

    @staticmethod
    def item_detail(actual: dict, expect: dict):
        """购物车商品与商品列表页信息一致"""
        for key, value in expect.items():
            assert actual[key] == value, f"购物车商品{key}不一致：{actual[key]}!={value}"

    @staticmethod
    def item_names(actual: list[str], expect: list[str]):
        assert sorted(actual) == sorted(expect), f"购物车商品不符合预期：{actual}!={expect}"

    @staticmethod
    def total_price(actual: Decimal, expect: Decimal):
        assert actual == expect, f"购物车商品合计错误：{actual}!={expect}"
