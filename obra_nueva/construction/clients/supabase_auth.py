# construction/clients/supabase_auth.py
"""Supabase Auth admin API: create and delete login identities."""

import logging

import requests

from ..exceptions import IdentityError

logger = logging.getLogger(__name__)


class SupabaseAuthAdmin:

    def __init__(self, config):
        self.base_url = f"{config.supabase_url}/auth/v1/admin/users"
        self.service_role_key = config.supabase_service_role_key
        self.timeout = config.timeout

    def _get_headers(self):
        return {
            "apikey": self.service_role_key,
            "Authorization": f"Bearer {self.service_role_key}",
            "Content-Type": "application/json",
        }

    @staticmethod
    def _error_message(response):
        try:
            body = response.json()
        except ValueError:
            return response.text
        return body.get('msg') or body.get('message') or body.get('error_description') or response.text

    def create_user(self, email: str, password: str) -> dict:
        """Create a confirmed identity. Returns the Supabase user object (id, email, ...)."""
        payload = {"email": email, "password": password, "email_confirm": True}
        try:
            response = requests.post(self.base_url, json=payload, headers=self._get_headers(), timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise IdentityError("Error creating user in auth", details=str(e)) from e

        if not response.ok:
            raise IdentityError(
                "Error creating user in auth",
                details=self._error_message(response),
                status_code=response.status_code,
            )
        body = response.json()
        # Older GoTrue versions wrap the user object
        return body.get('user', body)

    def delete_user(self, user_id: str) -> None:
        try:
            response = requests.delete(f"{self.base_url}/{user_id}", headers=self._get_headers(), timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise IdentityError("Error deleting user in auth", details=str(e)) from e

        if not response.ok:
            raise IdentityError(
                "Error deleting user in auth",
                details=self._error_message(response),
                status_code=response.status_code,
            )
