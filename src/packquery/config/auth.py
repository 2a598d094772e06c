# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the authentication configuration used to access package catalogs."""

import logging
import os
from dataclasses import dataclass, field

from packquery.config.defaults import ConfigParser
from packquery.errors import ConfigurationError

logger: logging.Logger = logging.getLogger(__name__)

#: The prefix of the sections in ``defaults.ini`` that configure the authentication for a domain.
AUTH_SECTION_PREFIX = "auth."


@dataclass(frozen=True)
class AuthConfig:
    """The credentials required to access the catalog hosted at one domain."""

    #: The user name.
    user: str = ""
    #: The token or password. It is excluded from the representation so that it does not end up in logs.
    token: str = field(default="", repr=False)
    #: The endpoint of the catalog, if it differs from the domain.
    endpoint: str = ""
    #: Whether the TLS certificate of the endpoint is verified.
    verify_ssl: bool = True


def load_auths(parser: ConfigParser) -> dict[str, AuthConfig] | None:
    """Load the authentication configuration of every domain declared in ``parser``.

    Each ``[auth.<domain>]`` section produces one entry keyed by ``<domain>``. If the
    section has no ``token`` item, the token is read from the environment variable
    named by its ``token_env`` item.

    Parameters
    ----------
    parser : ConfigParser
        The configuration to read, usually the global ``defaults`` object.

    Returns
    -------
    dict[str, AuthConfig] | None
        The authentication configuration per domain, or None if no domain is configured.

    Raises
    ------
    ConfigurationError
        If the ``verify_ssl`` item of a section is not a boolean.
    """
    auths: dict[str, AuthConfig] = {}
    for section in parser.sections():
        if not section.startswith(AUTH_SECTION_PREFIX):
            continue

        domain = section[len(AUTH_SECTION_PREFIX) :]
        if not domain:
            logger.debug("Ignoring the auth section %s without a domain.", section)
            continue

        token = parser.get(section, "token", fallback="")
        token_env = parser.get(section, "token_env", fallback="")
        if not token and token_env:
            token = os.environ.get(token_env, "")
            if not token:
                logger.debug("The environment variable %s for %s is not set.", token_env, domain)

        try:
            verify_ssl = parser.getboolean(section, "verify_ssl", fallback=True)
        except ValueError as error:
            raise ConfigurationError(f"The verify_ssl value of {section} is not a boolean.") from error

        auths[domain] = AuthConfig(
            user=parser.get(section, "user", fallback=""),
            token=token,
            endpoint=parser.get(section, "endpoint", fallback=""),
            verify_ssl=verify_ssl,
        )
        logger.debug("Loaded authentication for %s.", domain)

    return auths or None
