"""Sign in with Apple through the Cavos wallet provider."""

import json
import logging
import webbrowser
from abc import ABC, abstractmethod
from typing import Callable, Optional, Dict, Any
from urllib.parse import urlparse, parse_qs

from pydantic import ValidationError

from ..core.http import HttpClient, bearer
from ..core.types import AppleUserData
from ..core.exceptions import CavosSDKError, SocialLoginError

logger = logging.getLogger(__name__)


class Navigator(ABC):
    """Sends the user agent to a URL."""

    @abstractmethod
    def navigate(self, url: str) -> Any:
        """Navigate to ``url``."""


class BrowserNavigator(Navigator):
    """Opens the URL in the system browser."""

    def navigate(self, url: str) -> bool:
        return webbrowser.open(url)


class CallbackNavigator(Navigator):
    """Hands the URL to a callable, e.g. a web framework's redirect helper."""

    def __init__(self, redirect: Callable[[str], Any]):
        self.redirect = redirect

    def navigate(self, url: str) -> Any:
        return self.redirect(url)


def default_navigator(redirect: Optional[Callable[[str], Any]] = None) -> Navigator:
    """Pick a navigator for the current environment.

    A redirect callable wins; otherwise the system browser is used when
    one is available.

    Raises:
        SocialLoginError: No redirect callable and no usable browser
    """
    if redirect is not None:
        return CallbackNavigator(redirect)
    try:
        webbrowser.get()
    except webbrowser.Error:
        raise SocialLoginError("No browser available; pass a redirect callable")
    return BrowserNavigator()


def parse_user_data(redirect_url: str) -> AppleUserData:
    """Decode the ``user_data`` query parameter of the final redirect.

    Args:
        redirect_url: URL the wallet provider redirected to after login

    Returns:
        User id, email, wallet and creation time

    Raises:
        SocialLoginError: Parameter missing or not valid user data JSON
    """
    values = parse_qs(urlparse(redirect_url).query).get('user_data')
    if not values:
        raise SocialLoginError("Redirect URL carries no user_data parameter")
    try:
        return AppleUserData(**json.loads(values[0]))
    except (ValueError, TypeError, ValidationError) as e:
        raise SocialLoginError(f"Invalid user_data: {e}")


class AppleLogin(HttpClient):
    """Fetches Apple login URLs and completes the callback."""

    async def get_login_url(self, org_token: str, network: str) -> str:
        """Get the Apple authorization URL for an organization.

        Raises:
            SocialLoginError: The wallet provider did not return a URL
        """
        try:
            data = await self._request(
                'GET',
                self._url('/auth/apple'),
                context='Failed to get Apple login URL',
                params={'network': network},
                headers=bearer(org_token)
            )
        except CavosSDKError as e:
            raise SocialLoginError(e.message)
        if not isinstance(data, dict) or not data.get('url'):
            raise SocialLoginError("Failed to get Apple login URL: response did not include a url")
        return data['url']

    async def login(self, org_token: str, network: str, navigator: Optional[Navigator] = None) -> Any:
        """Send the user agent to Apple's login page.

        Returns:
            Whatever the navigator returns
        """
        url = await self.get_login_url(org_token, network)
        navigator = navigator or default_navigator()
        logger.info(f"Redirecting to Apple login with {type(navigator).__name__}")
        return navigator.navigate(url)

    async def handle_callback(self, code: str, network: str, org_id: str) -> Dict[str, Any]:
        """Exchange the authorization code for the user's data.

        Raises:
            SocialLoginError: The callback was rejected
        """
        try:
            return await self._request(
                'GET',
                self._url('/auth/apple/callback'),
                context='Failed to handle Apple callback',
                params={'code': code, 'network': network, 'org_id': org_id}
            )
        except CavosSDKError as e:
            raise SocialLoginError(e.message)
