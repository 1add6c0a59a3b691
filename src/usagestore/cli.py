import argparse

from usagestore.config import Config

CompareQuery = tuple[str, int, int]


def parse_args(
    argv: "list[str] | None" = None,
) -> "tuple[Config, CompareQuery | None]":
    """
    parses command line flags on top of the environment config.
    Returns the config and, when --compare was given, the
    (customer_id, later_year, month) query to run.
    """
    parser = argparse.ArgumentParser(
        prog="usagestore",
        description="In-memory customer utility usage store",
    )
    parser.add_argument(
        "--web.listen-address",
        dest="listen_address",
        default=None,
        help="Address to serve Prometheus metrics on, e.g. :9186 (default: off)",
    )
    parser.add_argument(
        "--log.level",
        dest="log_level",
        default=None,
        choices=["debug", "info", "warning", "error"],
        help="Log level (default: info)",
    )
    parser.add_argument(
        "--log.format",
        dest="log_format",
        default=None,
        choices=["console", "json"],
        help="Log output format (default: console)",
    )
    parser.add_argument(
        "--no-seed",
        dest="seed",
        action="store_false",
        default=None,
        help="Start with an empty store instead of the sample data",
    )
    parser.add_argument(
        "--compare",
        nargs=3,
        metavar=("CUSTOMER", "YEAR", "MONTH"),
        default=None,
        help="Compare a customer's usage for a month against the year before",
    )

    args = parser.parse_args(argv)
    config = Config.from_env()
    # flags only override the environment when given
    if args.listen_address is not None:
        config.listen_address = args.listen_address
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_format is not None:
        config.log_format = args.log_format
    if args.seed is not None:
        config.seed_sample_data = args.seed

    query: "CompareQuery | None" = None
    if args.compare is not None:
        customer_id, year, month = args.compare
        try:
            query = (customer_id, int(year), int(month))
        except ValueError:
            parser.error("--compare YEAR and MONTH must be integers")
    return config, query
