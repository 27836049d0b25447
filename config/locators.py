LOGIN_LOCATORS = {
    "username_input": "[data-test='username']",  # 用户名
    "password_input": "[data-test='password']",  # 用户密码
    "login_button": "[data-test='login-button']",  # 登录按钮
    "error_msg": "[data-test='error']",  # 登录错误提示信息
}

PRODUCTS_LOCATORS = {
    "product_item": "[data-test='inventory-item']",  # 单商品卡片（每个商品一个）
    "product_sort": "[data-test='product-sort-container']",  # 商品排序下拉框，登录成功的标志
    "cart_button": "[data-test='shopping-cart-link']",  # 购物车icon
    "cart_badge": "[data-test='shopping-cart-badge']",  # 购物车显示商品数量
}

# 以下选择器都相对于单商品卡片的根节点
PRODUCT_CARD_LOCATORS = {
    "name": "[data-test='inventory-item-name']",  # 商品名称
    "price": "[data-test='inventory-item-price']",  # 商品价格
    "desc": "[data-test='inventory-item-desc']",  # 商品描述
    "link": ".inventory_item_label a",  # 商品详情链接
    "img": ".inventory_item_img img",  # 商品图片
    "add_button": "[data-test^='add-to-cart']",  # Add to cart 按钮
    "remove_button": "[data-test^='remove']",  # 加购后按钮文字变为“Remove”
}

CART_LOCATORS = {
    "title": "[data-test='title']",  # 页面标题 Your Cart
    "cart_item": "[data-test='inventory-item']",  # 购物车商品行
    "checkout_button": "[data-test='checkout']",  # 结算按钮
    "continue": "[data-test='continue-shopping']",  # 继续购物按钮
}

# 以下选择器都相对于购物车商品行的根节点
CART_ITEM_LOCATORS = {
    "name": "[data-test='inventory-item-name']",
    "price": "[data-test='inventory-item-price']",
    "desc": "[data-test='inventory-item-desc']",
    "quantity": "[data-test='item-quantity']",  # 商品数量
    "remove_button": "[data-test^='remove']",
    "link": "a[data-test$='title-link']",
}

CHECKOUT_LOCATORS = {
    # --------checkout-step-one.html---------
    "firstName_input": "[data-test='firstName']",  # firstName输入框
    "lastName_input": "[data-test='lastName']",  # lastName输入框
    "postalCode_input": "[data-test='postalCode']",  # postalCode输入框
    "error_msg": "[data-test='error']",  # 未填写收货人信息提交错误提示msg Error: First Name is required
    "cancel_button": "[data-test='cancel']",  # 取消按钮（step one/two 共用）
    "continue_button": "[data-test='continue']",  # 继续按钮

    # --------checkout-step-two.html---------
    "products_price": "[data-test='subtotal-label']",  # 商品价格
    "tax_price": "[data-test='tax-label']",  # 税费
    "order_price": "[data-test='total-label']",  # 订单价格
    "finish_button": "[data-test='finish']",  # 完成按钮

    # --------checkout-complete.html---------
    "pony_express": "[data-test='pony-express']",  # 完成页面图片
    "complete_header": "[data-test='complete-header']",  # 完成页面提示信息
    "complete_text": "[data-test='complete-text']",
    "back_to_products": "[data-test='back-to-products']",  # 返回商品列表
}
