"""Meeting user-management data source module."""
from meetingsdk.sources.external.meeting.users import (
    AccountType,
    CreateOpts,
    DeleteOpts,
    GetOpts,
    MeetingUsersDataSource,
    UpdateOpts,
    User,
    UserFunction,
    UserStatus,
)

__all__ = [
    "AccountType",
    "CreateOpts",
    "DeleteOpts",
    "GetOpts",
    "MeetingUsersDataSource",
    "UpdateOpts",
    "User",
    "UserFunction",
    "UserStatus",
]
