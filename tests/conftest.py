# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Fixtures for tests."""

from collections.abc import Iterator

import pytest

from packquery.config.auth import AuthConfig
from packquery.config.defaults import defaults, load_defaults


@pytest.fixture(autouse=True)
def setup_test() -> Iterator[None]:
    """Load the packaged default values before each test and clear them afterwards.

    Yields
    ------
    None
    """
    load_defaults("")
    yield
    defaults.clear()


@pytest.fixture()
def auths() -> dict[str, AuthConfig]:
    """Create the authentication configuration of two catalog domains.

    Returns
    -------
    dict[str, AuthConfig]
        The authentication configuration per domain.
    """
    return {
        "ghcr.io": AuthConfig(user="octocat", token="ghp_secret", endpoint="https://ghcr.io"),
        "index.unikraft.io": AuthConfig(token="uk_secret", verify_ssl=False),
    }
