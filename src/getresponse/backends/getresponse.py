"""GetResponse contacts API integration."""

import logging
from urllib.parse import quote

import requests
from django.core.exceptions import ImproperlyConfigured

from getresponse.backends import Contact, CustomField, ErrorResponse
from getresponse.exceptions import (
    ERROR_DECODING_ERROR,
    ERROR_DECODING_RESPONSE,
    GetResponseApiError,
    GetResponseDecodingError,
    GetResponseTransportError,
)

from .base import BaseBackend

logger = logging.getLogger(__name__)

AUTH_MODE_HEADER = "header"
AUTH_MODE_QUERY = "query"


class GetResponseBackend(BaseBackend):
    """
    GetResponse v3 contacts API integration.

    Handles:
    - Contact creation, listing, retrieval and deletion
    - Contact and custom field updates

    Each call is a single request, nothing is retried. Responses with a status
    outside [200, 400) are decoded as API errors.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.getresponse.com/v3",
        auth_mode: str = AUTH_MODE_HEADER,
        timeout: int = 10,
    ):
        """Configure the GetResponse backend."""
        if auth_mode not in (AUTH_MODE_HEADER, AUTH_MODE_QUERY):
            raise ImproperlyConfigured(
                f"Invalid GetResponse auth_mode {auth_mode!r}, expected {AUTH_MODE_HEADER!r} or {AUTH_MODE_QUERY!r}"
            )
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.auth_mode = auth_mode
        self.timeout = timeout

    @property
    def _headers(self):
        """Get the HTTP headers sent with every request."""
        headers = {"Content-Type": "application/json"}
        if self.auth_mode == AUTH_MODE_HEADER:
            headers["X-Auth-Token"] = f"api-key {self._api_key}"
        return headers

    def _request(self, method, path, params=None, payload=None, timeout=None):
        """
        Send a request to the API and return the response of a successful call.

        Raises:
            GetResponseTransportError: If the API could not be reached
            GetResponseApiError: If the API answered with an error payload
            GetResponseDecodingError: If the error payload could not be decoded

        """
        params = dict(params or {})
        if self.auth_mode == AUTH_MODE_QUERY:
            params["api_key"] = self._api_key

        logger.debug("GetResponse request %s %s", method, path)
        try:
            response = requests.request(
                method,
                f"{self.base_url}{path}",
                params=params,
                json=payload,
                headers=self._headers,
                timeout=self.timeout if timeout is None else timeout,
            )
        except requests.RequestException as err:
            logger.error("GetResponse request %s %s failed: %s", method, path, err)
            raise GetResponseTransportError(f"Failed to reach GetResponse: {err}") from err

        if not requests.codes.ok <= response.status_code < requests.codes.bad_request:
            self._raise_error(response)

        return response

    @staticmethod
    def _raise_error(response):
        """Raise the exception matching an error response."""
        try:
            payload = response.json()
            error_response = ErrorResponse.from_dict(payload)
            if payload.get("code") is None:
                raise TypeError("error payload has no numeric code")
            error = GetResponseApiError(error_response, status_code=response.status_code)
        except (ValueError, TypeError) as err:
            logger.warning("Could not decode GetResponse error response (status %s)", response.status_code)
            raise GetResponseDecodingError(
                f"Could not unmarshal error response: {response.content!r}",
                content=response.content,
                status_code=response.status_code,
                code=ERROR_DECODING_ERROR,
            ) from err

        logger.warning("GetResponse API error %s (status %s): %s", error.code, response.status_code, error.message)
        raise error

    @staticmethod
    def _decode(response, decoder):
        """Decode a successful response body with the given decoder."""
        try:
            return decoder(response.json())
        except (ValueError, TypeError) as err:
            logger.warning("Could not decode GetResponse response (status %s)", response.status_code)
            raise GetResponseDecodingError(
                f"Could not unmarshal response: {response.content!r}",
                content=response.content,
                status_code=response.status_code,
                code=ERROR_DECODING_RESPONSE,
            ) from err

    @staticmethod
    def _decode_contacts(data):
        if not isinstance(data, list):
            raise TypeError(f"Contact list payload must be an array, got {type(data).__name__}")
        return [Contact.from_dict(item) for item in data]

    @staticmethod
    def _contact_path(contact_id):
        return f"/contacts/{quote(str(contact_id), safe='')}"

    def create_contact(
        self,
        email: str,
        campaign_id: str,
        name: str | None = None,
        day_of_cycle: int | None = None,
        custom_fields: list[CustomField] | None = None,
        ip_address: str | None = None,
        timeout: int = None,
    ) -> None:
        """
        Create a GetResponse contact.

        Optional arguments left to None are not sent to the API.

        Raises:
            GetResponseTransportError: If the API could not be reached
            GetResponseApiError: If the contact creation fails
            GetResponseDecodingError: If the error response cannot be decoded

        """
        payload = {
            "email": email,
            "campaign": {"campaignId": campaign_id},
        }
        if name is not None:
            payload["name"] = name
        if day_of_cycle is not None:
            payload["dayOfCycle"] = day_of_cycle
        if custom_fields:
            payload["customFieldValues"] = [custom_field.to_dict() for custom_field in custom_fields]
        if ip_address is not None:
            payload["ipAddress"] = ip_address

        self._request("POST", "/contacts", payload=payload, timeout=timeout)

    def get_contacts(
        self,
        filters: dict[str, str] | None = None,
        fields: list[str] | None = None,
        sort: dict[str, str] | None = None,
        page: int = 1,
        per_page: int = 100,
        additional_flags: str | None = None,
        timeout: int = None,
    ) -> list[Contact]:
        """List GetResponse contacts matching the filters."""
        if page < 1 or per_page < 1:
            raise ValueError(f"page and per_page must be positive integers, got {page} and {per_page}")

        params = {}
        for key, value in (filters or {}).items():
            params[f"filter[{key}]"] = value
        for key, value in (sort or {}).items():
            params[f"sort[{key}]"] = value
        if fields:
            params["fields"] = ",".join(fields)
        params["page"] = page
        params["perPage"] = per_page
        if additional_flags is not None:
            params["additionalFlags"] = additional_flags

        response = self._request("GET", "/contacts", params=params, timeout=timeout)
        return self._decode(response, self._decode_contacts)

    def get_contact(self, contact_id: str, fields: list[str] | None = None, timeout: int = None) -> Contact:
        """Retrieve a GetResponse contact, restricted to the given fields when set."""
        params = {}
        if fields:
            params["fields"] = ",".join(fields)

        response = self._request("GET", self._contact_path(contact_id), params=params, timeout=timeout)
        return self._decode(response, Contact.from_dict)

    def update_contact(self, contact_id: str, new_data: Contact, timeout: int = None) -> Contact:
        """Update a GetResponse contact, only the fields set on new_data are sent."""
        response = self._request(
            "POST", self._contact_path(contact_id), payload=new_data.to_dict(), timeout=timeout
        )
        return self._decode(response, Contact.from_dict)

    def update_contact_custom_fields(
        self, contact_id: str, custom_fields: list[CustomField], timeout: int = None
    ) -> Contact:
        """Upsert the custom field values of a GetResponse contact."""
        payload = {"customFieldValues": [custom_field.to_dict() for custom_field in custom_fields]}
        response = self._request(
            "POST", f"{self._contact_path(contact_id)}/custom-fields", payload=payload, timeout=timeout
        )
        return self._decode(response, Contact.from_dict)

    def delete_contact(self, contact_id: str, message_id: str, ip_address: str, timeout: int = None) -> None:
        """
        Delete a GetResponse contact.

        The message and IP address are used by the API to attribute the
        removal to an unsubscribe event.
        """
        params = {"messageId": message_id, "ipAddress": ip_address}
        self._request("DELETE", self._contact_path(contact_id), params=params, timeout=timeout)
