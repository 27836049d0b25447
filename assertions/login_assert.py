class LoginAssert:

    @staticmethod
    def error_message(actual_msg: str, expect_msg: str):
        assert expect_msg in actual_msg, f"登录错误期望提示信息：{expect_msg}，登录错误实际提示信息：{actual_msg}"

    @staticmethod
    def no_error(error_count: int):
        assert error_count == 0, "未提交登录表单却出现了错误提示"
