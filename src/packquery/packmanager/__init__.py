# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module defines the requests made to the catalog of a package manager."""

from packquery.packmanager.query import (
    Query,
    QueryBuilder,
    QueryOption,
    new_query,
    with_all,
    with_auth_config,
    with_cache,
    with_name,
    with_no_manifest_package,
    with_no_oci_package,
    with_source,
    with_types,
    with_version,
)

__all__ = [
    "Query",
    "QueryBuilder",
    "QueryOption",
    "new_query",
    "with_all",
    "with_auth_config",
    "with_cache",
    "with_name",
    "with_no_manifest_package",
    "with_no_oci_package",
    "with_source",
    "with_types",
    "with_version",
]
