"""
httpx 响应适配

把 httpx.Response 包装成 Result 需要的 Response 接口。
请求由调用方发送 (签名、重试、超时都不在这里处理)，这里只负责：
- 读取完整响应体
- 非预期状态码解析为 CognitoError
- 返回 JSON object
"""

import json
import logging

from httpx import Response

from .models import CognitoError

logger = logging.getLogger(__name__)


class CognitoClientError(Exception):
    """传输层错误 (非预期状态码、响应体不是 JSON object)"""
    def __init__(self, message: str, error: CognitoError | None = None):
        super().__init__(message)
        self.error = error


class HttpResponse:
    """
    httpx.Response → Response

    Args:
        resp: httpx 响应 (可以是 stream=True 的未读取响应)
        expected_codes: 期望的状态码列表，默认 [200]
    """

    def __init__(self, resp: Response, expected_codes: list[int] | None = None):
        self.resp = resp
        self.expected_codes = expected_codes or [200]
        self._data: dict | None = None

    @property
    def request_id(self) -> str | None:
        return self.resp.headers.get("x-amzn-requestid")

    def to_dict(self) -> dict:
        """
        返回完整响应树

        Raises:
            CognitoClientError: 状态码不符合预期或响应体格式错误
        """
        if self._data is None:
            self._data = self._handle_response()
        return self._data

    def _handle_response(self) -> dict:
        resp = self.resp
        resp.read()

        if resp.status_code in self.expected_codes:
            if not resp.content:
                return {}
            try:
                data = resp.json()
            except json.JSONDecodeError as e:
                raise CognitoClientError(f"响应体不是合法 JSON: {e}") from e
            if not isinstance(data, dict):
                raise CognitoClientError(f"响应体应为 JSON object，实际为 {type(data).__name__}")
            return data

        # 解析错误
        try:
            error_data = resp.json()
        except json.JSONDecodeError:
            error_data = None

        if isinstance(error_data, dict):
            error = CognitoError.from_dict(error_data, resp.status_code, self.request_id)
        else:
            error = CognitoError(status=resp.status_code, detail=resp.text or None, request_id=self.request_id)

        logger.debug("Cognito error response: %s", error)
        raise CognitoClientError(str(error), error)
