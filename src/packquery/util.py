# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module includes utility functions for packquery."""

from collections.abc import Iterable


def list_join_str(items: Iterable[object], delimiter: str = " ") -> str:
    """Join the string form of each item with ``delimiter``, keeping the iteration order.

    Parameters
    ----------
    items : Iterable[object]
        The items to join.
    delimiter : str
        The string placed between two consecutive items.

    Returns
    -------
    str
        The joined string, or an empty string if ``items`` is empty.

    Examples
    --------
    >>> list_join_str(["lib", "app"], ", ")
    'lib, app'
    >>> list_join_str([])
    ''
    """
    return delimiter.join(str(item) for item in items)
