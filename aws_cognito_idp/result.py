"""
延迟解析的结果基类

Result 在构造时只保存 Response，不读取。第一次访问任意字段时：
1. 调用 response.to_dict() 取完整响应树 (可能阻塞等待传输完成)
2. 调用 _populate_result() 解析为强类型字段
之后的访问直接返回缓存的字段。

解析失败 (传输错误或 CognitoDecodeError) 直接抛给调用方，
对象保持未解析状态，下一次访问会重新尝试。
"""

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Response(Protocol):
    """传输层提供的响应: 返回完整的 JSON 树"""

    def to_dict(self) -> Mapping[str, Any]: ...


class Result(ABC):
    """
    结果基类

    子类实现 _populate_result(data)，返回 {属性名: 值}；
    所有字段一次性赋值，不会出现部分解析的对象。
    """

    def __init__(self, response: Response):
        self._response = response
        self._initialized = False
        self._lock = threading.Lock()

    @property
    def is_populated(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        """确保已解析 (幂等)"""
        if self._initialized:
            return
        with self._lock:
            if self._initialized:
                return
            data = self._response.to_dict()
            fields = self._populate_result(data)
            for name, value in fields.items():
                setattr(self, name, value)
            self._initialized = True
            logger.debug("%s populated (%d fields)", type(self).__name__, len(fields))

    def resolve(self) -> bool:
        """
        立即解析

        Returns:
            True (失败时抛出异常)
        """
        self.initialize()
        return True

    @abstractmethod
    def _populate_result(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """解析响应树，返回 {属性名: 值}"""

    def __repr__(self) -> str:
        state = "populated" if self._initialized else "pending"
        return f"<{type(self).__name__} {state}>"
