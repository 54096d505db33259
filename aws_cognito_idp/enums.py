"""
枚举字符串

Cognito 可能随时新增取值，所以解析结果保持为 str，不校验是否属于已知集合。
这里的枚举只用于比较和文档：

    >>> result.user_status == UserStatusType.CONFIRMED
    True
    >>> UserStatusType.exists("SOME_NEW_STATUS")
    False
"""

from enum import Enum


class _KnownValues(str, Enum):
    @classmethod
    def exists(cls, value: str) -> bool:
        """value 是否为已知取值 (未知取值不是错误)"""
        return value in cls._value2member_map_


class UserStatusType(_KnownValues):
    """
    用户状态

    - UNCONFIRMED: 已创建未确认
    - CONFIRMED: 已确认
    - RESET_REQUIRED: 需要重置密码才能登录
    - FORCE_CHANGE_PASSWORD: 首次登录必须修改临时密码
    - EXTERNAL_PROVIDER: 通过第三方 IdP 登录
    """
    UNCONFIRMED = "UNCONFIRMED"
    CONFIRMED = "CONFIRMED"
    ARCHIVED = "ARCHIVED"
    COMPROMISED = "COMPROMISED"
    UNKNOWN = "UNKNOWN"
    RESET_REQUIRED = "RESET_REQUIRED"
    FORCE_CHANGE_PASSWORD = "FORCE_CHANGE_PASSWORD"
    EXTERNAL_PROVIDER = "EXTERNAL_PROVIDER"


class ChallengeNameType(_KnownValues):
    """AdminInitiateAuth 返回的挑战名"""
    SMS_MFA = "SMS_MFA"
    EMAIL_OTP = "EMAIL_OTP"
    SOFTWARE_TOKEN_MFA = "SOFTWARE_TOKEN_MFA"
    SELECT_MFA_TYPE = "SELECT_MFA_TYPE"
    MFA_SETUP = "MFA_SETUP"
    PASSWORD_VERIFIER = "PASSWORD_VERIFIER"
    CUSTOM_CHALLENGE = "CUSTOM_CHALLENGE"
    SELECT_CHALLENGE = "SELECT_CHALLENGE"
    DEVICE_SRP_AUTH = "DEVICE_SRP_AUTH"
    DEVICE_PASSWORD_VERIFIER = "DEVICE_PASSWORD_VERIFIER"
    ADMIN_NO_SRP_AUTH = "ADMIN_NO_SRP_AUTH"
    NEW_PASSWORD_REQUIRED = "NEW_PASSWORD_REQUIRED"
    SMS_OTP = "SMS_OTP"
    PASSWORD = "PASSWORD"
    WEB_AUTHN = "WEB_AUTHN"
    PASSWORD_SRP = "PASSWORD_SRP"


class DeliveryMediumType(_KnownValues):
    SMS = "SMS"
    EMAIL = "EMAIL"


class MfaSettingType(_KnownValues):
    """UserMFASettingList / PreferredMfaSetting 的取值"""
    SMS_MFA = "SMS_MFA"
    EMAIL_OTP = "EMAIL_OTP"
    SOFTWARE_TOKEN_MFA = "SOFTWARE_TOKEN_MFA"
