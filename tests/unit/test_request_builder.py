"""
Unit tests for the option-model payload builders.
"""
import pytest

from meetingsdk.exceptions.meeting_exceptions import MissingFieldError, PreconditionError
from meetingsdk.sources.client.http.request_builder import (
    build_query_params,
    build_request_body,
    check_required,
)
from meetingsdk.sources.external.meeting.users import (
    AccountType,
    CreateOpts,
    DeleteOpts,
    GetOpts,
    UpdateOpts,
    UserFunction,
    UserStatus,
)


class TestCreateBody:
    """Body shaping for user creation."""

    def test_minimal_body_contains_only_name(self):
        body = build_request_body(CreateOpts(name="Alice", token="tok1"))
        assert body == {"name": "Alice"}

    def test_wire_keys_use_short_names(self):
        opts = CreateOpts(
            name="Alice",
            token="tok1",
            description="ops lead",
            password="S3cret!pass",
            english_name="Alice",
            dept_code="42",
            third_account="ext-001",
            send_notify="0",
            sort_level=5,
        )
        body = build_request_body(opts)
        assert body == {
            "name": "Alice",
            "desc": "ops lead",
            "pwd": "S3cret!pass",
            "englishName": "Alice",
            "deptCode": "42",
            "thirdAccount": "ext-001",
            "sendNotify": "0",
            "sortLevel": 5,
        }

    def test_token_never_serialized(self):
        body = build_request_body(CreateOpts(name="Alice", token="tok1", email="a@example.com"))
        assert "token" not in body
        assert "tok1" not in body.values()

    def test_explicit_status_zero_is_sent(self):
        body = build_request_body(CreateOpts(name="Alice", token="tok1", status=UserStatus.NORMAL))
        assert body["status"] == 0

    def test_explicit_hide_phone_false_is_sent(self):
        body = build_request_body(CreateOpts(name="Alice", token="tok1", hide_phone=False))
        assert body["hidePhone"] is False

    def test_zero_sort_level_is_omitted(self):
        body = build_request_body(CreateOpts(name="Alice", token="tok1", sort_level=0))
        assert "sortLevel" not in body

    def test_nested_function(self):
        enabled = build_request_body(CreateOpts(name="Alice", token="tok1", function=UserFunction(enable_room=True)))
        assert enabled["function"] == {"enableRoom": True}

        disabled = build_request_body(CreateOpts(name="Alice", token="tok1", function=UserFunction()))
        assert disabled["function"] == {}

    def test_accepts_wire_aliases_on_input(self):
        opts = CreateOpts.model_validate({"name": "Alice", "token": "tok1", "desc": "from alias"})
        assert build_request_body(opts)["desc"] == "from alias"

    @pytest.mark.parametrize(
        "kwargs,missing",
        [
            ({"token": "tok1"}, "name"),
            ({"name": "Alice"}, "token"),
            ({"name": "", "token": ""}, "name"),
        ],
    )
    def test_missing_required_field(self, kwargs, missing):
        with pytest.raises(MissingFieldError) as exc_info:
            build_request_body(CreateOpts(**kwargs))
        assert exc_info.value.field == missing
        assert isinstance(exc_info.value, PreconditionError)
        assert str(exc_info.value) == f"Missing input for argument [{missing}]"

    def test_parent_key_wraps_body(self):
        body = build_request_body(UserFunction(enable_room=True), parent="function")
        assert body == {"function": {"enableRoom": True}}


class TestUpdateBody:
    """Tri-state handling for user updates."""

    def test_unset_fields_are_absent(self):
        body = build_request_body(UpdateOpts(account="alice01", token="tok1"))
        assert body == {}

    def test_explicit_empty_string_is_present(self):
        body = build_request_body(UpdateOpts(account="alice01", token="tok1", description=""))
        assert body == {"desc": ""}

    def test_explicit_values_are_present(self):
        opts = UpdateOpts(
            account="alice01",
            token="tok1",
            title="",
            email="alice@example.com",
            vmr_id="9001",
            status=UserStatus.DISABLED,
        )
        body = build_request_body(opts)
        assert body == {"title": "", "email": "alice@example.com", "vmrId": "9001", "status": 1}

    def test_phone_and_country_stay_omit_empty(self):
        body = build_request_body(UpdateOpts(account="alice01", token="tok1", phone="", country=""))
        assert "phone" not in body
        assert "country" not in body

    def test_account_and_account_type_not_in_body(self):
        body = build_request_body(
            UpdateOpts(account="alice01", token="tok1", account_type=AccountType.THIRD_PARTY, name="Bob")
        )
        assert body == {"name": "Bob"}

    @pytest.mark.parametrize("kwargs,missing", [({"token": "tok1"}, "account"), ({"account": "alice01"}, "token")])
    def test_missing_required_field(self, kwargs, missing):
        with pytest.raises(MissingFieldError) as exc_info:
            check_required(UpdateOpts(**kwargs))
        assert exc_info.value.field == missing


class TestQueryParams:
    """Query string shaping."""

    def test_get_account_type(self):
        params = build_query_params(GetOpts(account="alice01", token="tok1", account_type=AccountType.THIRD_PARTY))
        assert params == {"accountType": "1"}

    def test_get_zero_account_type_is_omitted(self):
        assert build_query_params(GetOpts(account="alice01", token="tok1")) == {}

    def test_delete_explicit_zero_is_sent(self):
        params = build_query_params(DeleteOpts(token="tok1", account_type=AccountType.NATIVE))
        assert params == {"accountType": "0"}

    def test_delete_unset_account_type_is_omitted(self):
        assert build_query_params(DeleteOpts(token="tok1")) == {}
