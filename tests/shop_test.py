import allure
import pytest

from data.checkout_data import CONTAINER_INFO, FINISH_PAGE_MESSAGE, FINISH_PAGE_TEXT
from data.products_data import PRODUCT_COUNT, FIRST_PRODUCT


@allure.feature("Shop")
@pytest.mark.ui
@pytest.mark.need_login
class TestShop:

    @allure.story("下单一件商品")
    def test_order_backpack(self, pages):
        products_page = pages.products_page

        with allure.step("验证商品列表商品数量"):
            assert len(products_page.get_product_cards()) == PRODUCT_COUNT

        with allure.step("验证第一个商品名称、描述、价格"):
            product = products_page.get_product_cards()[0]
            assert product.get_name() == FIRST_PRODUCT["name"]
            assert product.get_description() == FIRST_PRODUCT["desc"]
            assert product.get_price() == FIRST_PRODUCT["price"]

        with allure.step("加购第一个商品，验证购物车角标"):
            product = products_page.get_product_cards()[0]
            assert product.is_added_to_cart() is False
            product.add_to_cart()
            assert product.is_added_to_cart() is True
            assert products_page.cart_badge.is_visible()
            assert products_page.text(products_page.cart_badge) == "1"

        with allure.step("移除商品，验证角标消失"):
            product = products_page.get_product_cards()[0]
            product.remove_from_cart()
            assert product.is_added_to_cart() is False
            products_page.wait_hidden(products_page.cart_badge)

        with allure.step("重新加购并进入购物车"):
            products_page.get_product_cards()[0].add_to_cart()
            products_page.go_to_cart()
            pages.cart_page.wait_visible(pages.cart_page.checkout_button)

        with allure.step("验证购物车商品信息"):
            cart_items = pages.cart_page.get_cart_items()
            assert len(cart_items) == 1
            cart_item = cart_items[0]
            assert cart_item.get_name() == FIRST_PRODUCT["name"]
            assert cart_item.get_description() == FIRST_PRODUCT["desc"]
            assert cart_item.get_price() == FIRST_PRODUCT["price"]
            assert cart_item.get_quantity() == 1

        with allure.step("进入结算页面"):
            pages.cart_page.checkout()
            pages.checkout_form.wait_visible(pages.checkout_form.first_name_input)

        with allure.step("填写收货人信息并继续"):
            pages.checkout_form.fill_customer_info(CONTAINER_INFO["first_name"], CONTAINER_INFO["last_name"],
                                                   CONTAINER_INFO["postal"])
            pages.checkout_form.continue_checkout()

        with allure.step("提交订单并验证完成页面"):
            pages.checkout_form.finish_order()
            pages.checkout_form.wait_visible(pages.checkout_form.pony_express_image)
            assert pages.checkout_form.get_complete_header() == FINISH_PAGE_MESSAGE
            assert pages.checkout_form.get_complete_text() == FINISH_PAGE_TEXT
            assert pages.checkout_form.back_to_products_button.is_visible()

        with allure.step("返回商品列表"):
            pages.checkout_form.return_to_products()
            products_page.wait_visible(products_page.sort_dropdown)
