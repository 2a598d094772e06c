# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the component types used to classify packages in a catalog."""

from enum import StrEnum


class ComponentType(StrEnum):
    """The kinds of components a package can provide."""

    UNKNOWN = "unknown"
    CORE = "core"
    ARCH = "arch"
    PLAT = "plat"
    LIB = "lib"
    APP = "app"

    @classmethod
    def from_str(cls, value: str) -> "ComponentType":
        """Return the component type matching ``value``.

        Parameters
        ----------
        value : str
            The string form of a component type, e.g. ``lib``.

        Returns
        -------
        ComponentType
            The matching component type, or ``ComponentType.UNKNOWN`` if ``value`` is not recognized.
        """
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN
