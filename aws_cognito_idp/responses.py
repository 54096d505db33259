"""
Cognito 管理端认证 API 的响应

每个字段的解析规则:
1. 检查 wire 字段是否存在
2. 不存在: 可选标量为 None，列表 / map 为空集合
3. 存在: 转换为声明的类型 (coercion 模块)
4. 嵌套对象 / 对象列表: 对每个元素递归执行同样的规则

注意: 只有 UserMFASettingList 会丢弃 null 元素，
UserAttributes / MFAOptions 每个输入元素都对应一个输出元素。
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from .coercion import (
    as_list,
    as_mapping,
    is_empty,
    is_set,
    require,
    to_bool,
    to_datetime,
    to_int,
    to_str,
)
from .models import (
    AttributeType,
    AuthenticationResultType,
    MFAOptionType,
    NewDeviceMetadataType,
)
from .result import Result


def _optional_str(data: Mapping, key: str) -> str | None:
    return to_str(data[key]) if is_set(data, key) else None


def _optional_int(data: Mapping, key: str) -> int | None:
    return to_int(data[key]) if is_set(data, key) else None


def _optional_datetime(data: Mapping, key: str) -> datetime | None:
    return to_datetime(data[key]) if is_set(data, key) else None


# ============ AdminGetUser ============

class AdminGetUserResponse(Result):
    """
    AdminGetUser 响应

    user_status 可能的取值见 UserStatusType，未知取值原样返回。
    mfa_options 已不再维护，只描述 SMS MFA；请使用 user_mfa_setting_list。
    """

    @property
    def username(self) -> str:
        self.initialize()
        return self._username

    @property
    def user_attributes(self) -> list[AttributeType]:
        self.initialize()
        return list(self._user_attributes)

    @property
    def user_create_date(self) -> datetime | None:
        self.initialize()
        return self._user_create_date

    @property
    def user_last_modified_date(self) -> datetime | None:
        self.initialize()
        return self._user_last_modified_date

    @property
    def enabled(self) -> bool | None:
        self.initialize()
        return self._enabled

    @property
    def user_status(self) -> str | None:
        self.initialize()
        return self._user_status

    @property
    def mfa_options(self) -> list[MFAOptionType]:
        self.initialize()
        return list(self._mfa_options)

    @property
    def preferred_mfa_setting(self) -> str | None:
        self.initialize()
        return self._preferred_mfa_setting

    @property
    def user_mfa_setting_list(self) -> list[str]:
        self.initialize()
        return list(self._user_mfa_setting_list)

    def _populate_result(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return {
            "_username": to_str(require(data, "Username", "AdminGetUser")),
            "_user_attributes": (
                [] if is_empty(data, "UserAttributes")
                else self._populate_attribute_list(data["UserAttributes"])
            ),
            "_user_create_date": _optional_datetime(data, "UserCreateDate"),
            "_user_last_modified_date": _optional_datetime(data, "UserLastModifiedDate"),
            "_enabled": to_bool(data["Enabled"]) if is_set(data, "Enabled") else None,
            "_user_status": _optional_str(data, "UserStatus"),
            "_mfa_options": (
                [] if is_empty(data, "MFAOptions")
                else self._populate_mfa_option_list(data["MFAOptions"])
            ),
            "_preferred_mfa_setting": _optional_str(data, "PreferredMfaSetting"),
            "_user_mfa_setting_list": (
                [] if is_empty(data, "UserMFASettingList")
                else self._populate_user_mfa_setting_list(data["UserMFASettingList"])
            ),
        }

    def _populate_attribute_list(self, json: Any) -> list[AttributeType]:
        return [
            self._populate_attribute(as_mapping(item, "UserAttributes[]"))
            for item in as_list(json, "UserAttributes")
        ]

    def _populate_attribute(self, json: Mapping) -> AttributeType:
        return AttributeType(
            name=to_str(require(json, "Name", "AttributeType")),
            value=_optional_str(json, "Value"),
        )

    def _populate_mfa_option_list(self, json: Any) -> list[MFAOptionType]:
        return [
            self._populate_mfa_option(as_mapping(item, "MFAOptions[]"))
            for item in as_list(json, "MFAOptions")
        ]

    def _populate_mfa_option(self, json: Mapping) -> MFAOptionType:
        return MFAOptionType(
            delivery_medium=_optional_str(json, "DeliveryMedium"),
            attribute_name=_optional_str(json, "AttributeName"),
        )

    def _populate_user_mfa_setting_list(self, json: Any) -> list[str]:
        # null 元素直接丢弃
        items = []
        for item in as_list(json, "UserMFASettingList"):
            if item is not None:
                items.append(to_str(item))
        return items


# ============ AdminInitiateAuth ============

class AdminInitiateAuthResponse(Result):
    """
    AdminInitiateAuth 响应

    需要继续挑战时返回 challenge_name / challenge_parameters / session，
    session 应原样传给下一次 AdminRespondToAuthChallenge；
    否则返回 authentication_result。
    """

    @property
    def challenge_name(self) -> str | None:
        self.initialize()
        return self._challenge_name

    @property
    def session(self) -> str | None:
        self.initialize()
        return self._session

    @property
    def challenge_parameters(self) -> dict[str, str]:
        self.initialize()
        return dict(self._challenge_parameters)

    @property
    def authentication_result(self) -> AuthenticationResultType | None:
        self.initialize()
        return self._authentication_result

    def _populate_result(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return {
            "_challenge_name": _optional_str(data, "ChallengeName"),
            "_session": _optional_str(data, "Session"),
            "_challenge_parameters": (
                {} if is_empty(data, "ChallengeParameters")
                else self._populate_challenge_parameters(data["ChallengeParameters"])
            ),
            "_authentication_result": (
                None if is_empty(data, "AuthenticationResult")
                else self._populate_authentication_result(data["AuthenticationResult"])
            ),
        }

    def _populate_challenge_parameters(self, json: Any) -> dict[str, str]:
        return {
            to_str(name): to_str(value)
            for name, value in as_mapping(json, "ChallengeParameters").items()
        }

    def _populate_authentication_result(self, json: Any) -> AuthenticationResultType:
        json = as_mapping(json, "AuthenticationResult")
        return AuthenticationResultType(
            access_token=_optional_str(json, "AccessToken"),
            expires_in=_optional_int(json, "ExpiresIn"),
            token_type=_optional_str(json, "TokenType"),
            refresh_token=_optional_str(json, "RefreshToken"),
            id_token=_optional_str(json, "IdToken"),
            new_device_metadata=(
                None if is_empty(json, "NewDeviceMetadata")
                else self._populate_new_device_metadata(json["NewDeviceMetadata"])
            ),
        )

    def _populate_new_device_metadata(self, json: Any) -> NewDeviceMetadataType:
        json = as_mapping(json, "NewDeviceMetadata")
        return NewDeviceMetadataType(
            device_key=_optional_str(json, "DeviceKey"),
            device_group_key=_optional_str(json, "DeviceGroupKey"),
        )
