import json
import shutil
from pathlib import Path

import allure
import pytest
from playwright.sync_api import sync_playwright

from config.settings import BROWSER, HEADLESS, DEFAULT_TIMEOUT, SLOW_MO
from pages.page_manager import PageManager
from utils.logger import get_logger
from utils.session import authenticated_session

logger = get_logger("conftest")

ARTIFACTS_DIR = Path("artifacts")


# ================== Session Fixtures ==================
@pytest.fixture(scope="session")
def playwright_instance():
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance):
    """浏览器只启动一次，context 每个用例单独创建"""
    browser = getattr(playwright_instance, BROWSER).launch(headless=HEADLESS, slow_mo=SLOW_MO)
    logger.info("浏览器已启动：%s headless=%s", BROWSER, HEADLESS)
    yield browser
    browser.close()


@pytest.fixture(scope="session", autouse=True)
def clean_artifacts():
    """测试session启动前，清空上一次的失败证据"""
    if ARTIFACTS_DIR.exists():
        shutil.rmtree(ARTIFACTS_DIR)  # 删除目录及其包含的所有文件和子目录。
    ARTIFACTS_DIR.mkdir()


# ================== Function Fixtures ==================
@pytest.fixture(scope="function")
def context(browser):
    """每个测试方法一个全新 context（未登录）"""
    context = browser.new_context()
    context.set_default_timeout(DEFAULT_TIMEOUT)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context):
    """每个测试方法一个新 page（未登录）"""
    page = context.new_page()
    _collect_console_errors(page)
    yield page
    page.close()


@pytest.fixture(scope="function")
def authenticated_page(browser):
    """
    每个测试方法一个全新 context 并登录 standard_user
    - 登录未确认（排序下拉框不可见）fixture 直接报错，用例不会执行
    - 用例结束（无论成败）关闭 context
    """
    with authenticated_session(browser) as page:
        _collect_console_errors(page)
        yield page


@pytest.fixture(scope="function")
def pages(authenticated_page):
    """绑定已登录 page 的 PageManager"""
    return PageManager(authenticated_page)


def _collect_console_errors(page):
    console_error = []  # 这是内存中的list，所有console.error都会被收集

    # 捕获console errors, page.on("console")是浏览器级别监听,不会因为跳转丢失
    page.on(
        "console",
        lambda msg: console_error.append({
            "type": msg.type,
            "text": msg.text,
            "location": str(msg.location)
        }) if msg.type == "error" else None
    )
    page._console_errors = console_error  # 挂到page上，方便hook里取


# ================== Pytest Hook：失败处理 ==================
@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    测试失败时自动保存并 attach 到 allure：
    - 截图
    - URL
    - Console errors
    """
    outcome = yield
    rep = outcome.get_result()

    # 只处理 call 阶段失败
    if rep.when != "call" or not rep.failed:
        return

    funcargs = getattr(item, "funcargs", {})
    page = funcargs.get("authenticated_page") or funcargs.get("page")
    if page is None or page.is_closed():
        return

    # 构建artifacts 目录,保存错误证据
    module_name = item.module.__name__.split(".")[-1]
    class_name = item.cls.__name__ if item.cls else "no_class"
    base_dir = ARTIFACTS_DIR / module_name / class_name / item.name
    base_dir.mkdir(parents=True, exist_ok=True)

    screenshot = base_dir / "failure.png"
    page.screenshot(path=screenshot, full_page=True)  # 生成失败用例截图
    (base_dir / "url.txt").write_text(page.url, encoding="utf-8")  # 生成失败用例URL文件
    console_errors = json.dumps(getattr(page, "_console_errors", []), indent=2, ensure_ascii=False)
    (base_dir / "console_errors.json").write_text(console_errors, encoding="utf-8")
    logger.error("用例失败：%s，url=%s，证据目录：%s", item.nodeid, page.url, base_dir)

    allure.attach.file(screenshot, name="Failure-Screenshot", attachment_type=allure.attachment_type.PNG)
    allure.attach(page.url, name="Page-Url", attachment_type=allure.attachment_type.TEXT)
    allure.attach(console_errors, name="Console-Errors", attachment_type=allure.attachment_type.JSON)
