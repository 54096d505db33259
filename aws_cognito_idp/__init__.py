"""
AWS Cognito Identity Provider

管理端认证 API (AdminGetUser, AdminInitiateAuth) 的响应解析。
"""

import logging

from .models import (
    AttributeType,
    MFAOptionType,
    NewDeviceMetadataType,
    AuthenticationResultType,
    CognitoError,
    CognitoDecodeError,
)

from .enums import (
    UserStatusType,
    ChallengeNameType,
    DeliveryMediumType,
    MfaSettingType,
)

from .result import Result, Response
from .responses import AdminGetUserResponse, AdminInitiateAuthResponse
from .transport import HttpResponse, CognitoClientError

__all__ = [
    # Results
    "Result",
    "Response",
    "AdminGetUserResponse",
    "AdminInitiateAuthResponse",
    # Transport
    "HttpResponse",
    "CognitoClientError",
    # Models
    "AttributeType",
    "MFAOptionType",
    "NewDeviceMetadataType",
    "AuthenticationResultType",
    "CognitoError",
    "CognitoDecodeError",
    # Enums
    "UserStatusType",
    "ChallengeNameType",
    "DeliveryMediumType",
    "MfaSettingType",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
