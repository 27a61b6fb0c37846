# construction/clients/hubspot.py
"""
HubSpot CRM client.
Creates deals for new constructions and patches deal properties.
"""

import logging

import requests

from ..exceptions import HubSpotError

logger = logging.getLogger(__name__)


class HubSpotClient:
    """
    Thin wrapper around the HubSpot CRM v3 objects API (deals only).
    """

    def __init__(self, config):
        self.api_base = config.hubspot_api_base
        self.access_token = config.hubspot_access_token
        self.timeout = config.timeout

    def _get_headers(self):
        return {
            "Authorization": f"Bearer {self.access_token}",
            "Content-Type": "application/json",
        }

    def _request(self, method, path, payload):
        url = f"{self.api_base}{path}"
        try:
            response = requests.request(
                method, url, json=payload, headers=self._get_headers(), timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"[HubSpot] ❌ {method} {path} failed: {e}")
            raise HubSpotError("HubSpot request failed", details=str(e)) from e

        logger.info(f"[HubSpot] 📡 {method} {path} → {response.status_code}")
        if not response.ok:
            logger.error(f"[HubSpot] ❌ API error {response.status_code}: {response.text}")
            raise HubSpotError(
                f"HubSpot API Error: {response.status_code}",
                details=f"HubSpot API Error: {response.status_code} - {response.text}",
                status_code=response.status_code,
            )
        return response.json()

    def create_deal(self, properties: dict) -> dict:
        """
        Create a deal.

        Args:
            properties: HubSpot deal properties (dealname, dealstage, ...)

        Returns:
            The created deal object; its id is under "id".
        """
        return self._request("POST", "/crm/v3/objects/deals", {"properties": properties})

    def update_deal(self, deal_id, properties: dict) -> dict:
        """Patch properties on an existing deal."""
        return self._request("PATCH", f"/crm/v3/objects/deals/{deal_id}", {"properties": properties})
