"""GetResponse tasks module."""

from celery import shared_task

from getresponse import client
from getresponse.backends import CustomField


def _custom_fields(custom_fields):
    return [CustomField.from_dict(custom_field) for custom_field in custom_fields or []]


@shared_task
def create_contact(
    email: str,
    campaign_id: str,
    name: str | None = None,
    day_of_cycle: int | None = None,
    custom_fields: list[dict] | None = None,
    ip_address: str | None = None,
    timeout: int = None,
):
    """Create a contact, custom fields are given as API payloads."""
    return client.create_contact(
        email,
        campaign_id,
        name=name,
        day_of_cycle=day_of_cycle,
        custom_fields=_custom_fields(custom_fields) or None,
        ip_address=ip_address,
        timeout=timeout,
    )


@shared_task
def update_contact_custom_fields(contact_id: str, custom_fields: list[dict], timeout: int = None):
    """Update the custom fields of a contact and return the contact payload."""
    contact = client.update_contact_custom_fields(contact_id, _custom_fields(custom_fields), timeout=timeout)
    return contact.to_dict()


@shared_task
def delete_contact(contact_id: str, message_id: str, ip_address: str, timeout: int = None):
    """Delete a contact."""
    return client.delete_contact(contact_id, message_id, ip_address, timeout=timeout)
