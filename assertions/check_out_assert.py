from decimal import Decimal


class CheckOutAssert:

    @staticmethod
    def tips_message(actual_msg: str, expect_msg: str):
        assert expect_msg in actual_msg, f"预期提示信息：{expect_msg}，不存在于{actual_msg}"

    @staticmethod
    def text_equal(actual: str, expect: str):
        assert actual == expect, f"页面文案错误：{actual!r}!={expect!r}"

    @staticmethod
    def price_equal(expect: Decimal, actual: Decimal):
        assert expect == actual, f"预期价格：{expect}!={actual}"

    @staticmethod
    def order_price(item_price: Decimal, tax: Decimal, order_price: Decimal):
        """商品总价 + 税 = 订单总价"""
        expect = item_price + tax
        assert order_price == expect, f"实际总金额{order_price}!=预期总金额{expect}"
