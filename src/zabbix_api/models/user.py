"""User shapes for ``user.get`` and ``user.create``."""

from pydantic import AliasChoices, Field

from zabbix_api.models.base import ZabbixBaseModel, ZabbixRecordModel
from zabbix_api.models.types import ObjectID


class User(ZabbixRecordModel):
    """User record returned by ``user.get``.

    Older servers report the login name as ``alias``; both spellings are
    accepted.
    """

    user_id: ObjectID = Field(alias="userid")
    username: str = Field(validation_alias=AliasChoices("username", "alias"))
    name: str | None = None
    surname: str | None = None
    role_id: ObjectID | None = Field(default=None, alias="roleid")
    user_type: int | None = Field(default=None, alias="type")
    url: str | None = None


class UserGroupId(ZabbixBaseModel):
    user_group_id: ObjectID = Field(alias="usrgrpid")


class UserMedia(ZabbixBaseModel):
    """Notification media of a user.

    ``severity`` is a bitmask of the six trigger severities.
    """

    media_type_id: ObjectID = Field(alias="mediatypeid")
    sendto: str | list[str]
    active: int = Field(default=0, ge=0, le=1)
    severity: int = Field(default=63, ge=0, le=63)
    period: str | None = None


class CreateUserRequest(ZabbixBaseModel):
    """Params for ``user.create``."""

    username: str = Field(min_length=1)
    passwd: str = Field(min_length=1)
    role_id: ObjectID = Field(alias="roleid")
    user_groups: list[UserGroupId] = Field(alias="usrgrps", min_length=1)
    name: str | None = None
    surname: str | None = None
    url: str | None = None
    autologin: int | None = Field(default=None, ge=0, le=1)
    autologout: str | None = None
    lang: str | None = None
    refresh: str | None = None
    theme: str | None = None
    medias: list[UserMedia] | None = None
