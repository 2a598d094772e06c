# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the query used to search the catalog of a package manager.

A query is built by applying query options to an empty query:

>>> from packquery.packmanager.query import new_query, with_name, with_types, with_version
>>> str(new_query(with_types("lib"), with_name("musl"), with_version("stable")))
'lib-musl:stable'

Each option sets exactly one parameter, so options for different parameters can be given
in any order. When the same parameter is set more than once, the last option wins.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from frozendict import frozendict

from packquery.config.auth import AuthConfig
from packquery.unikraft.component import ComponentType
from packquery.util import list_join_str

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Query:
    """The request, with its associated attributes, used to search the catalog of a package manager.

    A query cannot be modified once it is built. The ``types`` are stored as a tuple and the
    ``auths`` as a frozendict copy, so the values returned by the attributes can be shared between
    callers, and the query can be copied and pickled.
    """

    #: Where the package originates from.
    source: str = ""
    #: The possible component types of the package. An empty tuple does not filter on types.
    types: tuple[ComponentType | str, ...] = ()
    #: The name of the package. An empty name matches any package.
    name: str = ""
    #: The version of the package.
    version: str = ""
    #: Whether the package manager may answer the query with what it has locally.
    use_cache: bool = False
    #: The authentication required for the query, per domain.
    #: None means no domain has (or requires) any authentication.
    auths: Mapping[str, AuthConfig] | None = field(default=None, hash=False)
    #: Whether all the packages are selected, e.g. when pruning every package on the host.
    all: bool = False
    #: Whether manifest packages are left out of a selection of all the packages.
    no_manifest_package: bool = False
    #: Whether OCI packages are left out of a selection of all the packages.
    no_oci_package: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "types", tuple(self.types))
        if self.auths is not None:
            object.__setattr__(self, "auths", frozendict(self.auths))

    def fields(self) -> dict[str, Any]:
        """Return the parameters of the query that can be reported, e.g. in structured logs.

        The authentication configuration is only reported by its presence so that credentials
        are never exposed.

        Returns
        -------
        dict[str, Any]
            The parameters keyed by ``name``, ``version``, ``source``, ``types``, ``cache`` and ``auth``.
        """
        return {
            "name": self.name,
            "version": self.version,
            "source": self.source,
            "types": self.types,
            "cache": self.use_cache,
            "auth": self.auths is not None,
        }

    def with_options(self, *options: "QueryOption") -> "Query":
        """Return a new query made of this query's parameters updated by ``options``.

        Parameters
        ----------
        options : QueryOption
            The options applied, in order, on top of this query's parameters.

        Returns
        -------
        Query
            The new query. This query is left unchanged.
        """
        builder = QueryBuilder.from_query(self)
        for option in options:
            option(builder)
        return builder.build()

    def __str__(self) -> str:
        """Return the canonical form of the query, e.g. ``{lib, app}-musl:stable``."""
        rendered = ""
        if len(self.types) == 1:
            rendered += f"{self.types[0]}-"
        elif len(self.types) > 1:
            rendered += "{" + list_join_str(self.types, ", ") + "}-"

        rendered += self.name or "*"

        if self.version:
            rendered += f":{self.version}"

        return rendered


@dataclass
class QueryBuilder:
    """The parameters of a query under construction."""

    source: str = ""
    types: list[ComponentType | str] = field(default_factory=list)
    name: str = ""
    version: str = ""
    use_cache: bool = False
    auths: Mapping[str, AuthConfig] | None = None
    all: bool = False
    no_manifest_package: bool = False
    no_oci_package: bool = False

    @classmethod
    def from_query(cls, query: Query) -> "QueryBuilder":
        """Return a builder holding the parameters of ``query``."""
        return cls(
            source=query.source,
            types=list(query.types),
            name=query.name,
            version=query.version,
            use_cache=query.use_cache,
            auths=None if query.auths is None else dict(query.auths),
            all=query.all,
            no_manifest_package=query.no_manifest_package,
            no_oci_package=query.no_oci_package,
        )

    def build(self) -> Query:
        """Return the finalized query."""
        return Query(
            source=self.source,
            types=tuple(self.types),
            name=self.name,
            version=self.version,
            use_cache=self.use_cache,
            auths=self.auths,
            all=self.all,
            no_manifest_package=self.no_manifest_package,
            no_oci_package=self.no_oci_package,
        )


#: A method-option which sets a specific query parameter.
QueryOption = Callable[[QueryBuilder], None]


def new_query(*options: QueryOption) -> Query:
    """Return the finalized query given the provided options.

    Parameters
    ----------
    options : QueryOption
        The options applied, in order, to an empty query.

    Returns
    -------
    Query
        The query. Without any option, the query matches every package, does not use the
        cache and has no authentication.
    """
    builder = QueryBuilder()
    for option in options:
        option(builder)

    query = builder.build()
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Built the package query %s with %s.", query, query.fields())
    return query


def with_source(source: str) -> QueryOption:
    """Set the query parameter for the origin source of the package."""

    def _apply(builder: QueryBuilder) -> None:
        builder.source = source

    return _apply


def with_types(*types: ComponentType | str) -> QueryOption:
    """Set the query parameter for the component types to search for.

    The given types replace any type set by a previous option. Without any type, the query
    does not filter on types.
    """

    def _apply(builder: QueryBuilder) -> None:
        builder.types = list(types)

    return _apply


def with_name(name: str) -> QueryOption:
    """Set the query parameter for the name of the package."""

    def _apply(builder: QueryBuilder) -> None:
        builder.name = name

    return _apply


def with_version(version: str) -> QueryOption:
    """Set the query parameter for the version of the package."""

    def _apply(builder: QueryBuilder) -> None:
        builder.version = version

    return _apply


def with_cache(use_cache: bool) -> QueryOption:
    """Set whether to use local caching when making the query."""

    def _apply(builder: QueryBuilder) -> None:
        builder.use_cache = use_cache

    return _apply


def with_auth_config(auths: Mapping[str, AuthConfig] | None) -> QueryOption:
    """Set the required authorization, per domain, for when making the query.

    Passing None removes the authentication from the query, while an empty mapping keeps
    the query authenticated without any credentials.
    """

    def _apply(builder: QueryBuilder) -> None:
        builder.auths = auths

    return _apply


def with_all(all_: bool) -> QueryOption:
    """Set whether all the packages are selected."""

    def _apply(builder: QueryBuilder) -> None:
        builder.all = all_

    return _apply


def with_no_manifest_package(no_manifest_package: bool) -> QueryOption:
    """Set whether manifest packages are left out when all the packages are selected."""

    def _apply(builder: QueryBuilder) -> None:
        builder.no_manifest_package = no_manifest_package

    return _apply


def with_no_oci_package(no_oci_package: bool) -> QueryOption:
    """Set whether OCI packages are left out when all the packages are selected."""

    def _apply(builder: QueryBuilder) -> None:
        builder.no_oci_package = no_oci_package

    return _apply
