import pytest

from citizen_connect.core.errors import FormValidationError
from citizen_connect.data.models import (
    LoginForm,
    ReportIssueForm,
    SignupForm,
    derive_display_name,
)


@pytest.mark.parametrize(
    ("email", "expected"),
    [
        ("john.doe@example.com", "John Doe"),
        ("a@b.com", "A"),
        ("mary.ann.smith@x.org", "Mary Ann Smith"),
        ("mcDonald@x.org", "McDonald"),
    ],
)
def test_derive_display_name(email, expected):
    assert derive_display_name(email) == expected


def test_login_form_missing_fields():
    form = LoginForm(email="", password="pw", role="")
    assert form.missing_fields() == ["email", "role"]
    with pytest.raises(FormValidationError) as excinfo:
        form.validate()
    assert excinfo.value.message == "Please fill in all fields."
    assert excinfo.value.fields == ["email", "role"]


def test_login_form_rejects_unknown_role():
    with pytest.raises(FormValidationError):
        LoginForm(email="a@b.com", password="pw", role="king").validate()


def test_signup_form_only_allows_public_roles():
    form = SignupForm(name="A", email="a@b.com", password="pw", role="admin", location="X")
    with pytest.raises(FormValidationError):
        form.validate()
    SignupForm(name="A", email="a@b.com", password="pw", role="citizen", location="X").validate()


def test_report_form_from_fields_ignores_unknown_keys():
    form = ReportIssueForm.from_fields(
        {"title": "Leak", "category": "infrastructure", "description": "Water", "extra": 1}
    )
    assert form.location == ""
    assert form.urgent is False
    form.validate()


def test_report_form_requires_title():
    form = ReportIssueForm(title="", category="infrastructure", description="Water leak")
    with pytest.raises(FormValidationError) as excinfo:
        form.validate()
    assert excinfo.value.message == "Please fill in all required fields."


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("false", False),
        ("False", False),
        ("0", False),
        ("off", False),
        ("", False),
        ("on", True),
        ("true", True),
        (True, True),
        (False, False),
        (None, False),
    ],
)
def test_report_form_urgent_checkbox_values(raw, expected):
    form = ReportIssueForm.from_fields(
        {"title": "Leak", "category": "infrastructure", "description": "Water", "urgent": raw}
    )
    assert form.urgent is expected
