"""checkout测试数据"""

CONTAINER_INFO = {"first_name": "John", "last_name": "Doe", "postal": "12345"}

CONTAINER_EMPTY_ERROR_MSG = "Error: First Name is required"

FINISH_PAGE_MESSAGE = "Thank you for your order!"

FINISH_PAGE_TEXT = "Your order has been dispatched, and will arrive just as fast as the pony can get there!"
