from typing import Any

import httpx

from welfare.auth.base import BaseIdentityProvider, Identity
from welfare.auth.exceptions import AuthError, AuthNetworkError
from welfare.logging.logger import Log


class SupabaseAuthAdapter(BaseIdentityProvider):
    """Identity provider adapter built on the Supabase Auth (GoTrue) REST API.

    The access token of the last successful sign-in is kept on the adapter and
    sent with user-scoped calls.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        timeout_seconds: int,
        access_token: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._access_token = access_token
        self._client = httpx.Client(
            base_url=f"{base_url.rstrip('/')}/auth/v1",
            timeout=timeout_seconds,
            headers={"apikey": api_key},
            transport=transport,
        )

    @property
    def access_token(self) -> str | None:
        return self._access_token

    def get_current_user(self) -> Identity | None:
        if self._access_token is None:
            return None
        response = self._request("GET", "/user", authorized=True)
        if response.status_code in (401, 403):
            Log.warning("Session token rejected, treating user as signed out")
            self._access_token = None
            return None
        return self._identity(self._json(response))

    def sign_up_with_email(self, email: str, password: str) -> Identity:
        body = self._json(self._request("POST", "/signup", json={"email": email, "password": password}))
        self._remember_session(body)
        return self._identity(body.get("user") or body)

    def sign_in_with_email(self, email: str, password: str) -> Identity:
        body = self._json(
            self._request(
                "POST",
                "/token",
                params={"grant_type": "password"},
                json={"email": email, "password": password},
            )
        )
        self._remember_session(body)
        return self._identity(body.get("user") or {})

    def sign_in_with_otp(self, phone: str) -> None:
        self._json(self._request("POST", "/otp", json={"phone": phone}))

    def sign_out(self) -> None:
        if self._access_token is None:
            return
        response = self._request("POST", "/logout", authorized=True)
        self._access_token = None
        if not response.is_success and response.status_code != 401:
            raise AuthError(f"Sign-out failed with status {response.status_code}")

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, url: str, authorized: bool = False, **kwargs: Any) -> httpx.Response:
        headers = {}
        if authorized and self._access_token is not None:
            headers["Authorization"] = f"Bearer {self._access_token}"
        try:
            return self._client.request(method, url, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            raise AuthNetworkError(f"Identity provider network error: {exc}") from exc

    def _remember_session(self, body: dict[str, Any]) -> None:
        token = body.get("access_token")
        if isinstance(token, str) and token:
            self._access_token = token

    @staticmethod
    def _json(response: httpx.Response) -> dict[str, Any]:
        if not response.is_success:
            raise AuthError(f"Identity provider returned status {response.status_code}: {response.text}")
        if not response.content:
            return {}
        try:
            body = response.json()
        except ValueError as exc:
            raise AuthError(f"Invalid identity provider response: {exc}") from exc
        if not isinstance(body, dict):
            raise AuthError("Identity provider response must be an object")
        return body

    @staticmethod
    def _identity(user: dict[str, Any]) -> Identity:
        user_id = user.get("id")
        if not user_id:
            raise AuthError("Identity provider response has no user id")
        return Identity(id=str(user_id), email=user.get("email"), phone=user.get("phone"))
