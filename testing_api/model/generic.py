"""
Generic JSON-backed record base for the testing API.

Every resource exchanged with the remote service derives from `GenericJson`:
declared fields map to camelCase wire keys, and keys the schema does not
declare are kept in the pydantic extras store so a decode/encode round trip
never drops data. Assignment is never validated; type errors surface only
when a payload is decoded.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from testing_api.utils.logging import get_logger

logger = get_logger(__name__)

_T = TypeVar("_T", bound="GenericJson")


class GenericJson(BaseModel):
    """
    Base record preserving unknown keys alongside its declared fields.

    Both the wire key (``projectId``) and the attribute name (``project_id``)
    are accepted by `get`, `set` and the constructor. The decoders read wire
    keys only; a snake_case key in a document is an unknown key.
    """

    model_config = {
        "extra": "allow",
        "validate_by_name": True,
        "validate_by_alias": True,
        "alias_generator": to_camel,
    }

    # Records named Test* are not pytest test classes.
    __test__ = False

    @classmethod
    def field_for(cls, name: str) -> Optional[str]:
        """Resolve a wire key or attribute name to a declared attribute, if any."""
        fields = cls.model_fields
        if name in fields:
            return name
        for attr, info in fields.items():
            if (info.alias or to_camel(attr)) == name:
                return attr
        return None

    def get(self, field_name: str, default: Any = None) -> Any:
        attr = self.field_for(field_name)
        if attr is not None:
            value = getattr(self, attr)
            return default if value is None else value
        return (self.__pydantic_extra__ or {}).get(field_name, default)

    def set(self: _T, field_name: str, value: Any) -> _T:
        """
        Store `value` under `field_name` and return the record.

        Declared fields go through the same attribute the typed accessors use;
        anything else lands in the extras store and is serialized verbatim.
        """
        attr = self.field_for(field_name)
        if attr is not None:
            setattr(self, attr, value)
            return self
        if self.__pydantic_extra__ is None:
            object.__setattr__(self, "__pydantic_extra__", {})
        logger.debug(
            "Storing unrecognized field",
            extra={"model": type(self).__name__, "key": field_name},
        )
        self.__pydantic_extra__[field_name] = value
        return self

    def clone(self: _T) -> _T:
        """
        Copy the record. The clone owns its field and extras maps; nested
        records and lists are shared with the original.
        """
        return self.model_copy()

    def unknown_fields(self) -> Dict[str, Any]:
        """Keys preserved from input (or `set`) that the schema does not declare."""
        return dict(self.__pydantic_extra__ or {})

    @classmethod
    def from_dict(cls: Type[_T], payload: Dict[str, Any]) -> _T:
        record = cls.model_validate(payload, by_alias=True, by_name=False)
        record._log_unknown()
        return record

    @classmethod
    def from_json(cls: Type[_T], data: Union[str, bytes]) -> _T:
        """
        Decode a JSON document.

        Raises
        ------
        pydantic.ValidationError
            If the document is malformed or a declared field has the wrong type.
        """
        record = cls.model_validate_json(data, by_alias=True, by_name=False)
        record._log_unknown()
        return record

    def to_dict(self) -> Dict[str, Any]:
        """Wire form as plain JSON-compatible data; `None` values are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)

    def _log_unknown(self) -> None:
        if self.__pydantic_extra__:
            logger.debug(
                "Preserving unrecognized fields",
                extra={"model": type(self).__name__, "keys": sorted(self.__pydantic_extra__)},
            )


__all__ = ["GenericJson"]
