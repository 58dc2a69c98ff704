# Copyright (c) Hathor Labs and its affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.
import json
import logging
import logging.config
import os
import sys
from argparse import ArgumentParser, Namespace

import structlog
from structlog import get_logger

from netregistry.registry import NetworkRegistry, create_default_registry

logger = get_logger()


DEFAULT_LOGGING_CONFIG_FILE = "log.conf"


def create_parser() -> ArgumentParser:
    """Create a parser for the cmdline arguments."""
    import configargparse  # type: ignore

    parser: ArgumentParser = configargparse.ArgumentParser(auto_env_var_prefix="netregistry_")
    parser.add_argument("--networks-file", help="Json file with extra networks", type=str, default=None)
    parser.add_argument("--regtest", action="store_true", help="Use regtest parameters for testnet")
    parser.add_argument(
        "--field", help="Only match the key against this field (repeatable)", action="append", default=None)
    parser.add_argument("--serve", action="store_true", help="Run the networks API")
    parser.add_argument("--api-port", help="Port of the networks API", type=int, default=8080)
    parser.add_argument("key", help="Name, alias, prefix, port or magic of a network", type=str, nargs="?")

    logs = parser.add_mutually_exclusive_group()
    logs.add_argument("--log-config", help="Config file for logging", default=DEFAULT_LOGGING_CONFIG_FILE)
    logs.add_argument("--json-logs", help="Enabled logging in json", default=False, action="store_true")
    return parser


class RunService:
    """Load the registry and answer the request given in the cmdline."""

    registry: NetworkRegistry

    def __init__(self, args: Namespace) -> None:
        """Initialize the service."""
        self.args = args

        self.configure_logging(args)

        self.registry = create_default_registry()
        if args.networks_file:
            self.registry.load_from_file(args.networks_file)
        if args.regtest:
            self.registry.enable_regtest()

    def configure_logging(self, args: Namespace) -> None:
        """Configure logging. Logs go to stderr, stdout is kept for results."""
        if args.json_logs:
            logging.basicConfig(level=logging.INFO, format="%(message)s")
            from structlog.stdlib import LoggerFactory

            structlog.configure(
                logger_factory=LoggerFactory(),
                processors=[
                    structlog.stdlib.filter_by_level,
                    structlog.stdlib.add_logger_name,
                    structlog.processors.add_log_level,
                    structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
                    structlog.processors.format_exc_info,
                    structlog.processors.JSONRenderer(),
                ],
            )
            logger.info("Logging with json format...")
        elif os.path.exists(args.log_config):
            logging.config.fileConfig(args.log_config)
            from structlog.stdlib import LoggerFactory

            structlog.configure(logger_factory=LoggerFactory())
            logger.info("Configuring log...", log_config=args.log_config)
        else:
            structlog.configure(
                wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
                logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
            )
            logger.debug("Log config file not found; using default configuration.", log_config=args.log_config)

    def execute(self) -> int:
        """Run the service according to the args. Return the exit status."""
        if self.args.serve:
            self.serve()
            return 0

        if self.args.key is None:
            for network in self.registry:
                print(network.name)
            return 0

        network = self.registry.lookup(self.args.key, self.args.field)
        if network is None:
            logger.error("network-not-found", key=self.args.key, fields=self.args.field)
            return 1
        print(json.dumps(network.to_dict(), indent=2))
        return 0

    def serve(self) -> None:
        """Run the networks API until interrupted."""
        from aiohttp import web

        from netregistry.api import App

        api_app = App(self.registry)
        logger.info(
            "Networks API running at 0.0.0.0:{}...".format(self.args.api_port),
            networks=len(self.registry),
            mode=self.registry.mode.value,
        )
        web.run_app(api_app.app, host="0.0.0.0", port=self.args.api_port, print=None)


def main() -> None:
    """Run the service using the cmdline."""
    parser = create_parser()
    args = parser.parse_args()
    sys.exit(RunService(args).execute())
