# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains error classes for packquery."""


class PackQueryError(Exception):
    """The base class for packquery errors."""


class ConfigurationError(PackQueryError):
    """Happens when there is an error in the configuration (.ini) file."""
