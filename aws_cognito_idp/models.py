"""
Cognito Identity Provider 数据模型

字段命名对应 Cognito API 文档：
https://docs.aws.amazon.com/cognito-user-identity-pools/latest/APIReference/

约定:
- Wire 字段为 PascalCase (DeviceKey)，Python 属性为 snake_case (device_key)
- 值对象不可变 (frozen)，按值比较
- 缺失的可选字段为 None；缺失的必填字段抛 CognitoDecodeError
- from_dict 不做类型转换，转换由 responses 中的解析步骤完成
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Self


class CognitoDecodeError(ValueError):
    """响应解析错误 (必填字段缺失或类型不兼容)"""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


def _create(cls, input: Any):
    if isinstance(input, cls):
        return input
    if isinstance(input, Mapping):
        return cls.from_dict(input)
    raise TypeError(f"{cls.__name__}.create() 需要 dict 或 {cls.__name__}，实际为 {type(input).__name__}")


# ============ 用户属性 ============

@dataclass(frozen=True)
class AttributeType:
    """
    用户属性 (UserAttributes 中的单项)

    - Name: 必填
    - Value: 可选
    """
    name: str
    value: str | None = None

    def to_dict(self) -> dict:
        d = {"Name": self.name}
        if self.value is not None:
            d["Value"] = self.value
        return d

    @classmethod
    def from_dict(cls, data: Mapping) -> Self:
        if data.get("Name") is None:
            raise CognitoDecodeError("AttributeType: 缺少必填字段 Name", field="Name")
        return cls(name=data["Name"], value=data.get("Value"))

    @classmethod
    def create(cls, input: "Mapping | AttributeType") -> Self:
        return _create(cls, input)


@dataclass(frozen=True)
class MFAOptionType:
    """
    MFA 选项 (MFAOptions 中的单项)

    已被 UserMFASettingList 取代，只描述 SMS MFA 配置。
    """
    delivery_medium: str | None = None
    attribute_name: str | None = None

    def to_dict(self) -> dict:
        d = {}
        if self.delivery_medium is not None:
            d["DeliveryMedium"] = self.delivery_medium
        if self.attribute_name is not None:
            d["AttributeName"] = self.attribute_name
        return d

    @classmethod
    def from_dict(cls, data: Mapping) -> Self:
        return cls(
            delivery_medium=data.get("DeliveryMedium"),
            attribute_name=data.get("AttributeName"),
        )

    @classmethod
    def create(cls, input: "Mapping | MFAOptionType") -> Self:
        return _create(cls, input)


# ============ 认证结果 ============

@dataclass(frozen=True)
class NewDeviceMetadataType:
    """新设备元数据 (DeviceKey, DeviceGroupKey)"""
    device_key: str | None = None
    device_group_key: str | None = None

    def to_dict(self) -> dict:
        d = {}
        if self.device_key is not None:
            d["DeviceKey"] = self.device_key
        if self.device_group_key is not None:
            d["DeviceGroupKey"] = self.device_group_key
        return d

    @classmethod
    def from_dict(cls, data: Mapping) -> Self:
        return cls(
            device_key=data.get("DeviceKey"),
            device_group_key=data.get("DeviceGroupKey"),
        )

    @classmethod
    def create(cls, input: "Mapping | NewDeviceMetadataType") -> Self:
        """
        规范化为实例

        已经是实例则原样返回 (同一个对象)，dict 则构建新实例。
        """
        return _create(cls, input)


@dataclass(frozen=True)
class AuthenticationResultType:
    """
    认证结果 (AuthenticationResult)

    只有在不需要继续挑战时才返回；否则响应中是
    ChallengeName / ChallengeParameters / Session。
    """
    access_token: str | None = None
    expires_in: int | None = None
    token_type: str | None = None
    refresh_token: str | None = None
    id_token: str | None = None
    new_device_metadata: NewDeviceMetadataType | None = None

    def to_dict(self) -> dict:
        d: dict = {}
        if self.access_token is not None:
            d["AccessToken"] = self.access_token
        if self.expires_in is not None:
            d["ExpiresIn"] = self.expires_in
        if self.token_type is not None:
            d["TokenType"] = self.token_type
        if self.refresh_token is not None:
            d["RefreshToken"] = self.refresh_token
        if self.id_token is not None:
            d["IdToken"] = self.id_token
        if self.new_device_metadata is not None:
            d["NewDeviceMetadata"] = self.new_device_metadata.to_dict()
        return d

    @classmethod
    def from_dict(cls, data: Mapping) -> Self:
        new_device_metadata = None
        if data.get("NewDeviceMetadata") is not None:
            new_device_metadata = NewDeviceMetadataType.create(data["NewDeviceMetadata"])
        return cls(
            access_token=data.get("AccessToken"),
            expires_in=data.get("ExpiresIn"),
            token_type=data.get("TokenType"),
            refresh_token=data.get("RefreshToken"),
            id_token=data.get("IdToken"),
            new_device_metadata=new_device_metadata,
        )

    @classmethod
    def create(cls, input: "Mapping | AuthenticationResultType") -> Self:
        return _create(cls, input)


# ============ 错误响应 ============

@dataclass
class CognitoError:
    """
    Cognito 错误响应

    JSON 协议错误体: {"__type": "...#UserNotFoundException", "message": "..."}
    部分错误使用大写的 Message
    """
    status: int
    type: str | None = None
    detail: str | None = None
    request_id: str | None = None

    @classmethod
    def from_dict(cls, data: dict, status_code: int = 0, request_id: str | None = None) -> "CognitoError":
        error_type = data.get("__type") or data.get("code")
        # 去掉命名空间前缀
        if error_type and "#" in error_type:
            error_type = error_type.rsplit("#", 1)[1]
        return cls(
            status=status_code,
            type=error_type,
            detail=data.get("message") or data.get("Message"),
            request_id=request_id,
        )

    def __str__(self) -> str:
        msg = f"[{self.status}] "
        if self.type:
            msg += f"{self.type}: "
        msg += self.detail or "Unknown error"
        if self.request_id:
            msg += f" (request: {self.request_id})"
        return msg
