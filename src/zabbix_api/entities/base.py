"""Generic mapper between typed shapes and wire JSON for one entity kind.

An EntityMapper knows, for its kind, the API object name, the record model
decoded from ``get`` results, the request model encoded for ``create``, and
the id list the server returns from ``create``.

Decoding checks shape only. A missing required field or a value of the
wrong shape raises DecodeError with the path of the offending value;
nothing is silently defaulted.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from zabbix_api.errors import DecodeError
from zabbix_api.models.base import ZabbixBaseModel, ZabbixRecordModel
from zabbix_api.models.enums import EntityKind, Operation
from zabbix_api.models.requests import GetRequest
from zabbix_api.models.types import ObjectID, Params
from zabbix_api.transport.variants import ProtocolVariant

RecordT = TypeVar("RecordT", bound=ZabbixRecordModel)
CreateT = TypeVar("CreateT", bound=ZabbixBaseModel)

GetInput = GetRequest | Mapping[str, Any] | None


def format_loc(prefix: str, loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as a field path.

    Example:
        >>> format_loc("result[0]", ("steps", 1, "no"))
        'result[0].steps[1].no'
    """
    path = prefix
    for part in loc:
        if isinstance(part, int):
            path = f"{path}[{part}]"
        else:
            path = f"{path}.{part}"
    return path


def decode_error_from(prefix: str, error: ValidationError) -> DecodeError:
    """Build a DecodeError from the first pydantic validation failure."""
    first = error.errors(include_url=False)[0]
    return DecodeError(format_loc(prefix, tuple(first["loc"])), first["msg"])


@dataclass(frozen=True)
class EntityMapper(Generic[RecordT, CreateT]):
    """Encode params and decode results for one entity kind.

    Attributes:
        kind: Entity kind served by this mapper
        api_object: API object name (``host``, ``httptest``, ...)
        record_model: Model of one ``get`` result record
        create_model: Model of ``create`` params
        ids_field: Key of the id list in ``create`` results
        get_defaults: Params added to every ``get`` unless overridden
    """

    kind: EntityKind
    api_object: str
    record_model: type[RecordT]
    create_model: type[CreateT]
    ids_field: str
    get_defaults: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def method(self, operation: Operation) -> str:
        return f"{self.api_object}.{operation.value}"

    def encode_params(
        self, operation: Operation, typed_input: Any, variant: ProtocolVariant
    ) -> Params:
        """Encode typed input into params for ``operation``."""
        if operation is Operation.GET:
            params = self._encode_get(typed_input)
        else:
            params = self._encode_create(typed_input)
        return variant.adapt_params(self.method(operation), params)

    def decode_result(self, operation: Operation, value: Any) -> list[RecordT] | list[ObjectID]:
        """Decode a successful result of ``operation``.

        Returns:
            Records for ``get`` (possibly empty); ids for ``create`` (never empty)

        Raises:
            DecodeError: If the result does not have the expected shape
        """
        if operation is Operation.GET:
            return self.decode_records(value)
        return self.decode_ids(value)

    def _encode_get(self, request: GetInput) -> Params:
        if request is None:
            params = GetRequest().to_params()
        elif isinstance(request, GetRequest):
            params = request.to_params()
        elif isinstance(request, Mapping):
            params = dict(request)
        else:
            raise TypeError(
                f"{self.method(Operation.GET)} expects GetRequest or a mapping, "
                f"got {type(request).__name__}"
            )
        return {**self.get_defaults, **params}

    def _encode_create(self, request: CreateT | Mapping[str, Any]) -> Params:
        if isinstance(request, Mapping):
            request = self.create_model.model_validate(request)
        elif not isinstance(request, self.create_model):
            raise TypeError(
                f"{self.method(Operation.CREATE)} expects {self.create_model.__name__}, "
                f"got {type(request).__name__}"
            )
        return request.to_wire()

    def decode_records(self, value: Any) -> list[RecordT]:
        if not isinstance(value, list):
            raise DecodeError(
                "result", f"expected a list of {self.api_object} records, got {type(value).__name__}"
            )
        records: list[RecordT] = []
        for index, item in enumerate(value):
            try:
                records.append(self.record_model.model_validate(item))
            except ValidationError as e:
                raise decode_error_from(f"result[{index}]", e) from e
        return records

    def decode_ids(self, value: Any) -> list[ObjectID]:
        path = f"result.{self.ids_field}"
        if not isinstance(value, dict):
            raise DecodeError("result", f"expected an object, got {type(value).__name__}")
        if self.ids_field not in value:
            raise DecodeError(path, "field required")
        ids = value[self.ids_field]
        if not isinstance(ids, list):
            raise DecodeError(path, f"expected a list of ids, got {type(ids).__name__}")
        if not ids:
            raise DecodeError(path, "server returned an empty id list")
        for index, object_id in enumerate(ids):
            if not isinstance(object_id, str):
                raise DecodeError(
                    f"{path}[{index}]", f"expected a string id, got {type(object_id).__name__}"
                )
        return list(ids)
