"""
Social login module for Cavos SDK.
"""

from .apple import (
    AppleLogin,
    Navigator,
    BrowserNavigator,
    CallbackNavigator,
    default_navigator,
    parse_user_data,
)

__all__ = [
    "AppleLogin",
    "Navigator",
    "BrowserNavigator",
    "CallbackNavigator",
    "default_navigator",
    "parse_user_data",
]
