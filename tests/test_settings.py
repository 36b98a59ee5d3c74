import pytest
from pydantic import ValidationError

from internify.core.errors import RecordNotFound
from internify.models.user_settings import CertificateTemplate
from internify.schemas.settings import UserSettingsUpdate
from internify.services.settings import get_user_settings, save_user_settings


def test_complete_branding_marks_setup_completed(memory_store, settings_payload):
    saved = save_user_settings(memory_store, "acct-1", UserSettingsUpdate.model_validate(settings_payload))

    assert saved.setup_completed is True
    assert saved.selected_template == CertificateTemplate.classic
    assert saved.updated_at is None
    assert get_user_settings(memory_store, "acct-1") == saved


@pytest.mark.parametrize("missing", ["companyName", "ceoSignature", "supervisorName"])
def test_blank_branding_field_keeps_setup_incomplete(memory_store, settings_payload, missing):
    settings_payload[missing] = "   "
    saved = save_user_settings(memory_store, "acct-1", UserSettingsUpdate.model_validate(settings_payload))
    assert saved.setup_completed is False


def test_overwrite_keeps_created_at(memory_store, settings_payload):
    first = save_user_settings(memory_store, "acct-1", UserSettingsUpdate.model_validate(settings_payload))
    settings_payload["companyName"] = "Acme Labs Ltd"
    second = save_user_settings(memory_store, "acct-1", UserSettingsUpdate.model_validate(settings_payload))

    assert second.created_at == first.created_at
    assert second.updated_at is not None
    assert second.company_name == "Acme Labs Ltd"


def test_snake_case_names_are_accepted():
    body = UserSettingsUpdate.model_validate({"company_name": "Acme", "selected_template": "elegant"})
    assert body.company_name == "Acme"
    assert body.selected_template == CertificateTemplate.elegant
    assert body.company_logo is None


def test_template_defaults_to_modern():
    assert UserSettingsUpdate().selected_template == CertificateTemplate.modern


@pytest.mark.parametrize("logo", ["not-a-url", "ftp://host/logo.png", "data:text/plain;base64,AAAA"])
def test_invalid_image_reference_is_rejected(settings_payload, logo):
    settings_payload["companyLogo"] = logo
    with pytest.raises(ValidationError):
        UserSettingsUpdate.model_validate(settings_payload)


def test_unknown_template_is_rejected(settings_payload):
    settings_payload["selectedTemplate"] = "neon"
    with pytest.raises(ValidationError):
        UserSettingsUpdate.model_validate(settings_payload)


def test_missing_settings(memory_store):
    with pytest.raises(RecordNotFound):
        get_user_settings(memory_store, "nobody")


def test_sql_store_round_trip(sql_store, settings_payload):
    first = save_user_settings(sql_store, "acct-1", UserSettingsUpdate.model_validate(settings_payload))
    again = save_user_settings(sql_store, "acct-1", UserSettingsUpdate.model_validate(settings_payload))

    assert again.created_at == first.created_at
    assert sql_store.get_settings("acct-1").company_logo == settings_payload["companyLogo"]
