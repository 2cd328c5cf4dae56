"""GetResponse backend base module."""

from abc import ABC, abstractmethod

from getresponse.backends import Contact, CustomField


class BaseBackend(ABC):
    """Base class for all GetResponse backends."""

    @abstractmethod
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
        Create a contact in a campaign.

        Args:
            email: Contact email, required
            campaign_id: Identifier of the campaign the contact joins
            name: Contact name
            day_of_cycle: Day of the autoresponder cycle
            custom_fields: Custom field values to set on the contact
            ip_address: IP address the contact subscribed from
            timeout: API request timeout in seconds

        Raises:
            GetResponseError: If the contact creation fails

        """

    @abstractmethod
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
        """
        List contacts.

        Args:
            filters: Filters applied to the listing, by field name
            fields: Fields to return, all of them when empty
            sort: Sort direction ("asc" or "desc") by field name
            page: Page number, starting at 1
            per_page: Number of contacts per page
            additional_flags: Extra flags understood by the API
            timeout: API request timeout in seconds

        Returns:
            list[Contact]: The contacts of the requested page

        Raises:
            GetResponseError: If the listing fails

        """

    @abstractmethod
    def get_contact(self, contact_id: str, fields: list[str] | None = None, timeout: int = None) -> Contact:
        """Retrieve a contact by its identifier."""

    @abstractmethod
    def update_contact(self, contact_id: str, new_data: Contact, timeout: int = None) -> Contact:
        """Update a contact with a full or partial representation and return it."""

    @abstractmethod
    def update_contact_custom_fields(
        self, contact_id: str, custom_fields: list[CustomField], timeout: int = None
    ) -> Contact:
        """Upsert custom field values of a contact and return it."""

    @abstractmethod
    def delete_contact(self, contact_id: str, message_id: str, ip_address: str, timeout: int = None) -> None:
        """
        Delete a contact.

        Args:
            contact_id: Identifier of the contact to delete
            message_id: Message the removal is attributed to
            ip_address: IP address the removal was requested from
            timeout: API request timeout in seconds

        """
