import asyncio
from unittest.mock import Mock, patch

import requests

from modules.tool_usage.image_tool import ImageLoadState, ImageTool

URL = "https://images.example.com/paris.jpg"


def ok_response(body: bytes) -> Mock:
    response = Mock()
    response.content = body
    response.raise_for_status = Mock()
    return response


def test_fetch_success():
    tool = ImageTool(timeout=3)
    with patch("modules.tool_usage.image_tool.requests.get", return_value=ok_response(b"jpeg")) as get:
        result = tool.fetch(URL)

    get.assert_called_once_with(URL, timeout=3)
    assert result.state == ImageLoadState.SUCCESS
    assert result.data == b"jpeg"
    assert tool.result_for(URL) is result

def test_fetch_http_error_is_failure():
    response = ok_response(b"")
    response.raise_for_status.side_effect = requests.HTTPError("404 Not Found")
    tool = ImageTool()
    with patch("modules.tool_usage.image_tool.requests.get", return_value=response):
        result = tool.fetch(URL)

    assert result.state == ImageLoadState.FAILURE
    assert result.data is None
    assert "404" in result.error

def test_fetch_network_error_is_failure():
    tool = ImageTool()
    with patch("modules.tool_usage.image_tool.requests.get", side_effect=requests.ConnectionError("offline")):
        result = tool.fetch(URL)
    assert result.state == ImageLoadState.FAILURE

def test_fetch_uses_session_when_given():
    session = Mock()
    session.get.return_value = ok_response(b"png")
    result = ImageTool(session=session).fetch(URL)
    assert result.data == b"png"
    session.get.assert_called_once()

def test_unknown_url_has_no_result():
    assert ImageTool().result_for(URL) is None

def test_load_reports_pending_then_success():
    tool = ImageTool()
    seen = []

    def slow_fetch(url):
        seen.append(tool.result_for(url).state)
        return ok_response(b"jpeg")

    with patch("modules.tool_usage.image_tool.requests.get", side_effect=lambda url, timeout: slow_fetch(url)):
        result = asyncio.run(tool.load(URL))

    assert seen == [ImageLoadState.PENDING]
    assert result.state == ImageLoadState.SUCCESS
    assert tool.result_for(URL).state == ImageLoadState.SUCCESS
