"""Test the GetResponse records serialization."""

import pytest

from getresponse.backends import Campaign, Contact, CustomField, ErrorResponse, Geolocation, Tag


def test_contact_to_dict_omits_unset_fields():
    """Test fields left to None are not serialized."""
    contact = Contact(email="foo@bar.baz", day_of_cycle=0, note="")

    assert contact.to_dict() == {"email": "foo@bar.baz", "dayOfCycle": 0, "note": ""}


def test_contact_to_dict_nested_records():
    """Test nested records are serialized with their API names."""
    contact = Contact(
        campaign=Campaign(campaign_id="V"),
        geolocation=Geolocation(country_code="FR"),
        tags=[Tag(tag_id="Xn")],
        custom_field_values=[CustomField(custom_field_id="n", value=["white", "black"])],
    )

    assert contact.to_dict() == {
        "campaign": {"campaignId": "V"},
        "geolocation": {"countryCode": "FR"},
        "tags": [{"tagId": "Xn"}],
        "customFieldValues": [{"customFieldId": "n", "value": ["white", "black"]}],
    }


def test_contact_from_dict_ignores_unknown_and_null_fields():
    """Test unknown keys are ignored and null values left unset."""
    contact = Contact.from_dict({"email": "foo@bar.baz", "name": None, "engagementScore": 3})

    assert contact == Contact(email="foo@bar.baz")


def test_contact_from_dict_invalid_payload():
    """Test a payload which is not an object is refused."""
    with pytest.raises(TypeError, match="Contact payload must be an object, got list"):
        Contact.from_dict([])


def test_campaign_to_dict_always_sends_identifier():
    """Test the campaign identifier is sent even when empty, the name only when set."""
    assert Campaign().to_dict() == {"campaignId": ""}
    assert Campaign(campaign_id="V", name="").to_dict() == {"campaignId": "V"}
    assert Campaign(campaign_id="V", name="news").to_dict() == {"campaignId": "V", "name": "news"}


def test_error_response_from_dict_defaults():
    """Test an error payload only holding a code."""
    error_response = ErrorResponse.from_dict({"code": 1008})

    assert error_response.code == 1008
    assert error_response.message == ""
    assert error_response.context == []
    assert error_response.uuid is None


def test_contact_from_dict_invalid_field_type():
    """Test a mistyped value is refused."""
    with pytest.raises(TypeError, match="'dayOfCycle' must be of type int, got str"):
        Contact.from_dict({"name": "foobar", "dayOfCycle": "five"})


def test_error_response_from_dict_invalid_context():
    """Test context entries must be strings."""
    with pytest.raises(TypeError, match="'context' must be of type str, got NoneType"):
        ErrorResponse.from_dict({"code": 1000, "context": [None]})
