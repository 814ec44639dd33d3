"""User group shapes for ``usergroup.get`` and ``usergroup.create``."""

from pydantic import Field

from zabbix_api.models.base import ZabbixBaseModel, ZabbixRecordModel
from zabbix_api.models.types import ObjectID


class UserGroupPermission(ZabbixBaseModel):
    """Access level to a host or template group: 0 deny, 2 read, 3 read-write."""

    id: ObjectID
    permission: int = Field(ge=0, le=3)


class UserGroupTagFilter(ZabbixBaseModel):
    group_id: ObjectID = Field(alias="groupid")
    tag: str = ""
    value: str = ""


class UserGroupUser(ZabbixBaseModel):
    user_id: ObjectID = Field(alias="userid")


class UserGroupMember(ZabbixRecordModel):
    user_id: ObjectID = Field(alias="userid")
    username: str | None = None


class UserGroup(ZabbixRecordModel):
    """User group record returned by ``usergroup.get``."""

    user_group_id: ObjectID = Field(alias="usrgrpid")
    name: str
    gui_access: int | None = None
    users_status: int | None = None
    debug_mode: int | None = None
    users: list[UserGroupMember] | None = None


class CreateUserGroupRequest(ZabbixBaseModel):
    """Params for ``usergroup.create``."""

    name: str = Field(min_length=1)
    debug_mode: int | None = Field(default=None, ge=0, le=1)
    gui_access: int | None = Field(default=None, ge=0, le=3)
    users_status: int | None = Field(default=None, ge=0, le=1)
    hostgroup_rights: list[UserGroupPermission] | None = None
    templategroup_rights: list[UserGroupPermission] | None = None
    tag_filters: list[UserGroupTagFilter] | None = None
    users: list[UserGroupUser] | None = None
