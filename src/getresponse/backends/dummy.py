"""Dummy GetResponse backend."""

from getresponse.backends import Contact

from .base import BaseBackend


class DummyBackend(BaseBackend):
    """Dummy GetResponse backend doing nothing."""

    def create_contact(
        self, email, campaign_id, name=None, day_of_cycle=None, custom_fields=None, ip_address=None, timeout=None
    ):
        """Create a contact."""

    def get_contacts(
        self, filters=None, fields=None, sort=None, page=1, per_page=100, additional_flags=None, timeout=None
    ):
        """List contacts."""
        return []

    def get_contact(self, contact_id, fields=None, timeout=None):
        """Retrieve a contact."""
        return Contact(contact_id=contact_id)

    def update_contact(self, contact_id, new_data, timeout=None):
        """Update a contact."""
        return new_data

    def update_contact_custom_fields(self, contact_id, custom_fields, timeout=None):
        """Update the custom fields of a contact."""
        return Contact(contact_id=contact_id, custom_field_values=list(custom_fields))

    def delete_contact(self, contact_id, message_id, ip_address, timeout=None):
        """Delete a contact."""
