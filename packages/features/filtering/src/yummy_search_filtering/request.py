"""SearchRequest — the search payload carried by a list page's query string."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from yummy_search_core.exceptions import MalformedRequestError

from .compiler import SearchCriterion

if TYPE_CHECKING:
    from .config import SearchSettings


class SearchRequest(BaseModel):
    """Parallel ``field`` / ``operator`` / ``search`` lists of one search form.

    Row ``i`` of the form is ``(field[i], operator[i], search[i])``.
    """

    model_config = ConfigDict(frozen=True)

    field: list[str] = Field(default_factory=list)
    operator: list[str] = Field(default_factory=list)
    search: list[Any] = Field(default_factory=list)

    @field_validator("field", "operator", "search", mode="before")
    @classmethod
    def _as_list(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, (str, bytes, int, float)):
            return [value]
        if isinstance(value, Mapping):
            # field[0]=...&field[1]=... style payloads
            return [value[k] for k in sorted(value, key=_index_key)]
        return value

    @model_validator(mode="after")
    def _same_length(self) -> SearchRequest:
        lengths = (len(self.field), len(self.operator), len(self.search))
        if len(set(lengths)) != 1:
            raise ValueError(
                "field, operator and search must have the same length, "
                f"got {lengths[0]}, {lengths[1]} and {lengths[2]}"
            )
        return self

    @classmethod
    def from_query(
        cls, query_params: Mapping[str, Any], settings: SearchSettings
    ) -> SearchRequest | None:
        """Extract the search payload, or ``None`` when no search applies.

        ``None`` is returned when the payload is absent or empty, and
        whenever the clear key is present, whatever its value.

        Raises:
            MalformedRequestError: If the payload breaks the request contract.
        """
        if settings.clear_key in query_params:
            return None
        payload = query_params.get(settings.search_key)
        if not payload:
            return None
        if not isinstance(payload, Mapping):
            raise MalformedRequestError(
                {settings.search_key: ["expected field, operator and search lists"]}
            )
        try:
            return cls.model_validate(dict(payload))
        except PydanticValidationError as exc:
            errors: dict[str, list[str]] = {}
            for error in exc.errors():
                loc = ".".join(str(p) for p in error.get("loc", ())) or "__root__"
                msg = error.get("msg", "validation error")
                errors.setdefault(loc, []).append(msg)
            raise MalformedRequestError(errors) from exc

    def criteria(self) -> list[SearchCriterion]:
        return [
            SearchCriterion(field, operator, value)
            for field, operator, value in zip(self.field, self.operator, self.search)
        ]


def _index_key(key: Any) -> tuple[int, Any]:
    text = str(key)
    return (0, int(text)) if text.isdigit() else (1, text)
