"""测试替身和公共 fixture"""

from dataclasses import dataclass, field
from typing import Any

import pytest


@dataclass
class FakeResponse:
    """记录 to_dict() 调用次数的 Response"""
    data: dict[str, Any] = field(default_factory=dict)
    error: Exception | None = None
    calls: int = 0

    def to_dict(self) -> dict[str, Any]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.data


@pytest.fixture
def make_response():
    def _make(data: dict[str, Any] | None = None, error: Exception | None = None) -> FakeResponse:
        return FakeResponse(data=data or {}, error=error)
    return _make


@pytest.fixture
def get_user_payload() -> dict[str, Any]:
    return {
        "Username": "alice",
        "UserAttributes": [
            {"Name": "sub", "Value": "8f2b6c1e-0000-4000-8000-000000000001"},
            {"Name": "email", "Value": "alice@example.com"},
            {"Name": "email_verified", "Value": "true"},
        ],
        "UserCreateDate": 1700000000.123456,
        "UserLastModifiedDate": 1700003600,
        "Enabled": True,
        "UserStatus": "CONFIRMED",
        "MFAOptions": [{"DeliveryMedium": "SMS", "AttributeName": "phone_number"}],
        "PreferredMfaSetting": "SOFTWARE_TOKEN_MFA",
        "UserMFASettingList": ["SMS_MFA", "SOFTWARE_TOKEN_MFA"],
    }
