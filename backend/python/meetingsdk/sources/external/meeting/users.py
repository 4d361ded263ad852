"""
Meeting enterprise user DataSource

Wraps the user-management endpoints of the meeting service
(``/v1/usg/abs/users``). Every call authenticates with the ``X-Access-Token``
header and sends exactly one request.
"""

import logging
from enum import IntEnum
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, model_validator  # type: ignore

from meetingsdk.exceptions.meeting_exceptions import PreconditionError
from meetingsdk.sources.client.http.http_request import HTTPRequest
from meetingsdk.sources.client.http.http_response import HTTPResponse
from meetingsdk.sources.client.http.request_builder import (
    build_query_params,
    build_request_body,
)
from meetingsdk.sources.client.meeting.meeting import (
    MeetingClient,
    MeetingRESTClientViaAccessToken,
)

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/json;charset=UTF-8"
ACCESS_TOKEN_HEADER = "X-Access-Token"


class AccountType(IntEnum):
    """Account identifier kinds"""

    NATIVE = 0       # Meeting service account, account/password authentication
    THIRD_PARTY = 1  # Third-party user ID, App ID authentication


class UserStatus(IntEnum):
    NORMAL = 0
    DISABLED = 1


class UserFunction(BaseModel):
    """User function bits"""
    model_config = ConfigDict(populate_by_name=True)

    # Uses an intelligent collaborative whiteboard resource of the enterprise;
    # cannot be enabled when those resources are exhausted.
    enable_room: bool = Field(default=False, alias="enableRoom")


class CreateOpts(BaseModel):
    """Options to create an enterprise user.

    Only ``name`` and ``token`` are mandatory; the service fills in the rest
    (country ``chinaPR``, root department, sort level 10000, normal status,
    account-opening notification sent).
    """
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(default="", json_schema_extra={"required": True}, description="Enterprise user name, 1-64 characters")
    account: str = Field(default="", description="Account, generated by the service when omitted")
    third_account: str = Field(default="", alias="thirdAccount", description="Third-party user ID for App ID authentication")
    country: str = Field(default="", description="Country the phone number belongs to")
    dept_code: str = Field(default="", alias="deptCode", description="Department code, root department when omitted")
    description: str = Field(default="", alias="desc")
    email: str = Field(default="")
    english_name: str = Field(default="", alias="englishName")
    function: Optional[UserFunction] = Field(default=None)
    phone: str = Field(default="", description="Phone number with country code, e.g. +86xxxxxxxxxxx")
    hide_phone: Optional[bool] = Field(default=None, alias="hidePhone")
    password: str = Field(default="", alias="pwd", description="Password, generated by the service when omitted")
    send_notify: str = Field(default="", alias="sendNotify", description="'0' suppresses the account-opening notification")
    signature: str = Field(default="")
    sort_level: int = Field(default=0, alias="sortLevel", description="Address book sort level, 1-10000")
    status: Optional[int] = Field(default=None, description="0 normal, 1 disabled")
    title: str = Field(default="")
    token: str = Field(default="", exclude=True, json_schema_extra={"required": True})


class GetOpts(BaseModel):
    """Options to query a single user"""
    model_config = ConfigDict(populate_by_name=True)

    # Meeting account or third-party user ID, depending on account_type
    account: str = Field(default="", exclude=True)
    account_type: int = Field(default=AccountType.NATIVE, alias="accountType", exclude=True, json_schema_extra={"query": "accountType"})
    token: str = Field(default="", exclude=True)


class UpdateOpts(BaseModel):
    """Options to update an enterprise user.

    Fields declared ``Optional`` are sent whenever they are not None, so an
    empty string clears the value on the service. Name, country, phone and
    sort level are only sent when non-empty.
    """
    model_config = ConfigDict(populate_by_name=True)

    account: str = Field(default="", exclude=True, json_schema_extra={"required": True})
    account_type: Optional[int] = Field(default=None, alias="accountType", exclude=True, json_schema_extra={"query": "accountType"})
    country: str = Field(default="")
    dept_code: Optional[str] = Field(default=None, alias="deptCode")
    description: Optional[str] = Field(default=None, alias="desc")
    email: Optional[str] = Field(default=None)
    english_name: Optional[str] = Field(default=None, alias="englishName")
    hide_phone: Optional[bool] = Field(default=None, alias="hidePhone")
    name: str = Field(default="")
    phone: str = Field(default="")
    signature: Optional[str] = Field(default=None)
    sort_level: int = Field(default=0, alias="sortLevel")
    status: Optional[int] = Field(default=None)
    title: Optional[str] = Field(default=None)
    vmr_id: Optional[str] = Field(default=None, alias="vmrId", description="Personal meeting ID")
    token: str = Field(default="", exclude=True, json_schema_extra={"required": True})


class DeleteOpts(BaseModel):
    """Options to delete users in batch"""
    model_config = ConfigDict(populate_by_name=True)

    account_type: Optional[int] = Field(default=None, alias="accountType", exclude=True, json_schema_extra={"query": "accountType"})
    token: str = Field(default="", exclude=True)


class User(BaseModel):
    """User record returned by the service"""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Optional[str] = None
    account: Optional[str] = Field(default=None, alias="userAccount")
    name: Optional[str] = None
    english_name: Optional[str] = Field(default=None, alias="englishName")
    phone: Optional[str] = None
    country: Optional[str] = None
    email: Optional[str] = None
    sip_num: Optional[str] = Field(default=None, alias="sipNum")
    dept_code: Optional[str] = Field(default=None, alias="deptCode")
    dept_name: Optional[str] = Field(default=None, alias="deptName")
    dept_name_path: Optional[str] = Field(default=None, alias="deptNamePath")
    user_type: Optional[int] = Field(default=None, alias="userType")
    admin_type: Optional[int] = Field(default=None, alias="adminType")
    signature: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = Field(default=None, alias="desc")
    function: Optional[UserFunction] = None
    status: Optional[int] = None
    sort_level: Optional[int] = Field(default=None, alias="sortLevel")
    hide_phone: Optional[bool] = Field(default=None, alias="hidePhone")
    third_account: Optional[str] = Field(default=None, alias="thirdAccount")
    vmr_list: Optional[List[Dict[str, Any]]] = Field(default=None, alias="vmrList")

    @model_validator(mode="before")
    @classmethod
    def _drop_token(cls, data: Any) -> Any:
        # Echoed payloads may carry the access token back; never keep it.
        if isinstance(data, dict) and "token" in data:
            data = {k: v for k, v in data.items() if k != "token"}
        return data


def root_url(client: MeetingRESTClientViaAccessToken) -> str:
    return client.service_url("v1", "usg", "abs", "users")


def resource_url(client: MeetingRESTClientViaAccessToken) -> str:
    return client.service_url("v1", "usg", "abs", "users", "{account}")


def delete_url(client: MeetingRESTClientViaAccessToken) -> str:
    return client.service_url("v1", "usg", "abs", "users", "delete")


def _account_path(account: str) -> Dict[str, str]:
    # One path segment; reserved characters and braces are escaped.
    return {"account": quote(account, safe="@")}


def _headers(token: str) -> Dict[str, str]:
    return {
        "Content-Type": CONTENT_TYPE,
        ACCESS_TOKEN_HEADER: token,
    }


def _decode_user(response: HTTPResponse) -> User:
    # An empty 2xx body is not a valid user record and fails to decode.
    return User.model_validate(response.json())


class MeetingUsersDataSource:
    """Meeting enterprise user API DataSource

    Errors are never swallowed: local input problems raise
    PreconditionError before any request, and transport failures or non-2xx
    responses propagate to the caller.
    """

    def __init__(self, meetingClient: MeetingClient) -> None:
        """Initialize the DataSource

        Args:
            meetingClient: MeetingClient instance
        """
        self.http_client = meetingClient.get_client()
        self._meeting_client = meetingClient

    def get_client(self) -> MeetingClient:
        """Get the underlying MeetingClient"""
        return self._meeting_client

    async def _send(self, operation: str, request: HTTPRequest) -> HTTPResponse:
        try:
            response = await self.http_client.execute(request)
            return response.raise_for_status()
        except Exception as e:
            logger.debug(f"Error in {operation}: {e}")
            raise

    async def create(self, opts: CreateOpts) -> User:
        """Create an enterprise user

        API Endpoint: POST /v1/usg/abs/users

        Args:
            opts: Creation options; name and token are required

        Returns:
            User: The record created by the service

        Raises:
            MissingFieldError: If name or token is empty
            ValueError: If the response body is not a JSON user record
        """
        body = build_request_body(opts)
        request = HTTPRequest(
            url=root_url(self.http_client),
            method="POST",
            headers=_headers(opts.token),
            body=body,
        )
        response = await self._send("create", request)
        return _decode_user(response)

    async def get(self, opts: GetOpts) -> User:
        """Get an enterprise user by account

        API Endpoint: GET /v1/usg/abs/users/{account}

        Raises:
            PreconditionError: If account or token is empty
            ValueError: If the response body is not a JSON user record
        """
        if not opts.account or not opts.token:
            raise PreconditionError("The account and authorization token must be supported.")

        request = HTTPRequest(
            url=resource_url(self.http_client),
            method="GET",
            path_params=_account_path(opts.account),
            headers=_headers(opts.token),
            query_params=build_query_params(opts),
        )
        response = await self._send("get", request)
        return _decode_user(response)

    async def update(self, opts: UpdateOpts) -> User:
        """Update an enterprise user

        API Endpoint: PUT /v1/usg/abs/users/{account}

        When account_type is set it is sent as the ``accountType`` query
        parameter; it is never part of the request body.

        Raises:
            MissingFieldError: If account or token is empty
            ValueError: If the response body is not a JSON user record
        """
        body = build_request_body(opts)
        request = HTTPRequest(
            url=resource_url(self.http_client),
            method="PUT",
            path_params=_account_path(opts.account),
            headers=_headers(opts.token),
            query_params=build_query_params(opts),
            body=body,
        )
        response = await self._send("update", request)
        return _decode_user(response)

    async def batch_delete(self, opts: DeleteOpts, accounts: List[str]) -> None:
        """Delete enterprise users in batch

        API Endpoint: POST /v1/usg/abs/users/delete

        The account list is sent verbatim as the JSON body. The service does
        not report per-account results, so the call succeeds or fails as a
        whole.

        Raises:
            PreconditionError: If token is empty
        """
        if not opts.token:
            raise PreconditionError("The authorization token must be supported.")

        request = HTTPRequest(
            url=delete_url(self.http_client),
            method="POST",
            headers=_headers(opts.token),
            query_params=build_query_params(opts),
            body=list(accounts),
        )
        await self._send("batch_delete", request)
