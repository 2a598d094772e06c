# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This is the main entrypoint to run packquery."""

import argparse
import json
import logging
import os
import sys
from importlib import metadata as importlib_metadata

from packquery.config.auth import load_auths
from packquery.config.defaults import create_defaults, defaults, load_defaults
from packquery.console import print_query
from packquery.errors import ConfigurationError, PackQueryError
from packquery.packmanager.query import (
    Query,
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
from packquery.unikraft.component import ComponentType

logger: logging.Logger = logging.getLogger(__name__)


def _parse_types(values: list[str]) -> list[ComponentType | str]:
    """Convert the component types given on the command line, keeping the unknown ones as they are."""
    types: list[ComponentType | str] = []
    for value in values:
        component_type = ComponentType.from_str(value)
        if component_type is ComponentType.UNKNOWN and value != ComponentType.UNKNOWN:
            logger.warning("%s is not a known component type.", value)
            types.append(value)
        else:
            types.append(component_type)
    return types


def build_query(show_args: argparse.Namespace) -> Query:
    """Build the package query described by the arguments of the show command.

    The component types and the cache flag fall back to the ``[query]`` section of the
    defaults configuration when they are not given on the command line.

    Parameters
    ----------
    show_args : argparse.Namespace
        The parsed arguments of the show command.

    Returns
    -------
    Query
        The query.

    Raises
    ------
    ConfigurationError
        If the cache flag or the authentication configuration is invalid.
    """
    type_values = show_args.types
    if type_values is None:
        type_values = defaults.get_list("query", "types", fallback=[])

    use_cache = show_args.use_cache
    if use_cache is None:
        try:
            use_cache = defaults.getboolean("query", "use_cache", fallback=False)
        except ValueError as error:
            raise ConfigurationError("The use_cache value of the query section is not a boolean.") from error

    options: list[QueryOption] = [
        with_source(show_args.source),
        with_types(*_parse_types(type_values)),
        with_name(show_args.name),
        with_version(show_args.package_version),
        with_cache(use_cache),
        with_all(show_args.all),
        with_no_manifest_package(show_args.no_manifest_package),
        with_no_oci_package(show_args.no_oci_package),
    ]
    if show_args.with_auth:
        options.append(with_auth_config(load_auths(defaults)))

    return new_query(*options)


def show(show_args: argparse.Namespace) -> None:
    """Print the package query described by the arguments of the show command."""
    try:
        query = build_query(show_args)
    except PackQueryError as error:
        logger.error(error)
        sys.exit(os.EX_CONFIG)

    if show_args.json:
        print(json.dumps(query.fields(), indent=4))
    elif show_args.fields:
        print_query(query)
    else:
        print(query)


def dump_defaults() -> None:
    """Dump the default values in the current working directory."""
    cwd = os.getcwd()
    if not create_defaults(cwd, cwd):
        sys.exit(os.EX_CANTCREAT)


def perform_action(action_args: argparse.Namespace) -> None:
    """Perform the indicated action of packquery."""
    match action_args.action:
        case "show":
            show(action_args)
        case "dump-defaults":
            dump_defaults()
        case _:
            logger.error("Unexpected action %s.", action_args.action)
            sys.exit(os.EX_USAGE)


def main(argv: list[str] | None = None) -> None:
    """Execute packquery as a standalone command-line tool.

    Parameters
    ----------
    argv: list[str] | None
        Command-line arguments.
        If ``argv`` is ``None``, argparse automatically looks at ``sys.argv``.
        Hence, we set ``argv = None`` by default.
    """
    main_parser = argparse.ArgumentParser(prog="packquery")

    main_parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {importlib_metadata.version('packquery')}",
        help="Show packquery's version number and exit",
    )

    main_parser.add_argument(
        "-v",
        "--verbose",
        help="Run packquery with more debug logs",
        action="store_true",
    )

    main_parser.add_argument(
        "-dp",
        "--defaults-path",
        default="",
        help="The path to the defaults configuration file.",
    )

    # Add sub parsers for each action.
    sub_parser = main_parser.add_subparsers(dest="action", help="Run packquery <action> --help for help")

    # Build a package query and print it.
    show_parser = sub_parser.add_parser(name="show")

    show_parser.add_argument("-s", "--source", default="", help="The origin source of the package.")

    show_parser.add_argument(
        "-t",
        "--type",
        dest="types",
        action="append",
        default=None,
        help="A component type of the package. Can be repeated to search for several types.",
    )

    show_parser.add_argument("-n", "--name", default="", help="The name of the package.")

    show_parser.add_argument(
        "--version",
        dest="package_version",
        default="",
        help="The version of the package.",
    )

    show_parser.add_argument(
        "--cache",
        dest="use_cache",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Whether the package manager may use what it has locally.",
    )

    show_parser.add_argument("--all", action="store_true", help="Select all the packages.")

    show_parser.add_argument(
        "--no-manifest-package",
        action="store_true",
        help="Leave manifest packages out of the selection of all the packages.",
    )

    show_parser.add_argument(
        "--no-oci-package",
        action="store_true",
        help="Leave OCI packages out of the selection of all the packages.",
    )

    show_parser.add_argument(
        "--with-auth",
        action="store_true",
        help="Attach the authentication configured in the [auth.<domain>] sections of the defaults.",
    )

    output_group = show_parser.add_mutually_exclusive_group()
    output_group.add_argument("--fields", action="store_true", help="Print the parameters of the query as a table.")
    output_group.add_argument("--json", action="store_true", help="Print the parameters of the query as JSON.")

    # Dump the default values used by packquery.
    sub_parser.add_parser(name="dump-defaults")

    args = main_parser.parse_args(argv)

    if not args.action:
        main_parser.print_help()
        sys.exit(os.EX_USAGE)

    if args.verbose:
        log_level = logging.DEBUG
        log_format = "%(asctime)s [%(name)s:%(funcName)s:%(lineno)d] [%(levelname)s] %(message)s"
    else:
        log_level = logging.INFO
        log_format = "%(asctime)s [%(levelname)s] %(message)s"

    # The logs go to stderr so that the printed query can be piped.
    st_handler = logging.StreamHandler(sys.stderr)
    logging.basicConfig(format=log_format, handlers=[st_handler], force=True, level=log_level)

    # Load the default values from defaults.ini files.
    if not load_defaults(args.defaults_path):
        logger.error("Exiting because the defaults configuration could not be loaded.")
        sys.exit(os.EX_NOINPUT)

    perform_action(args)


if __name__ == "__main__":
    main()
