"""SearchComponent — wires a list page's query string to its paginator."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from yummy_search_core.exceptions import ConfigurationError

from .catalog import FieldCatalogBuilder
from .compiler import ConditionCompiler
from .request import SearchRequest

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .config import SearchSettings
    from .pagination import PaginationSink
    from .schema import SchemaProvider

logger = logging.getLogger("yummy_search.filtering")


class SearchHelperData(BaseModel):
    """What a view needs to render the search form."""

    model_config = ConfigDict(frozen=True)

    base_url: str
    rows: dict[str, Any] | None
    operators: dict[str, str]
    models: dict[str, dict[str, str]]


class SearchComponent:
    """Request-level entry point.

    Usage::

        component = SearchComponent(settings, schema, paginator)
        component.search(request.query_params)
        context["search"] = component.helper_data(request.query_params, request.url)
    """

    def __init__(
        self,
        settings: SearchSettings,
        schema: SchemaProvider,
        paginator: PaginationSink | None = None,
        *,
        catalog_builder: FieldCatalogBuilder | None = None,
        compiler: ConditionCompiler | None = None,
    ) -> None:
        self._settings = settings
        self._schema = schema
        self._paginator = paginator
        self._catalog_builder = catalog_builder or FieldCatalogBuilder()
        self._compiler = compiler or ConditionCompiler()

    @property
    def settings(self) -> SearchSettings:
        return self._settings

    def startup(self) -> None:
        """Raise :class:`ConfigurationError` if a collaborator is missing."""
        self._require_paginator()

    def _require_paginator(self) -> PaginationSink:
        if self._paginator is None:
            raise ConfigurationError("SearchComponent requires a pagination sink")
        return self._paginator

    def search(self, query_params: Mapping[str, Any]) -> bool:
        """Append the submitted search to the paginator.

        Returns ``False`` when no search was requested or it was cleared,
        ``True`` otherwise (even if every criterion was dropped).
        """
        paginator = self._require_paginator()
        request = SearchRequest.from_query(query_params, self._settings)
        if request is None:
            logger.debug("No search requested for %s", self._settings.model)
            return False

        criteria = request.criteria()
        predicates = self._compiler.compile(criteria, self._settings.access)
        paginator.merge(predicates)
        logger.info(
            "Applied %d of %d search criteria to %s",
            len(predicates),
            len(criteria),
            self._settings.model,
        )
        return True

    def helper_data(
        self, query_params: Mapping[str, Any], base_url: str = ""
    ) -> SearchHelperData:
        """Collect base URL, submitted rows, operator labels and field catalog."""
        self.startup()
        request = SearchRequest.from_query(query_params, self._settings)
        # raw payload, not the normalised request
        rows = (
            dict(query_params[self._settings.search_key])
            if request is not None
            else None
        )
        models = self._catalog_builder.build(
            self._settings.model, self._schema, self._settings.access
        )
        return SearchHelperData(
            base_url=base_url,
            rows=rows,
            operators=dict(self._settings.operators),
            models=models,
        )
