from typing import List, Optional
from argparse import ArgumentParser, Namespace as ArgNamespace
from dotenv import load_dotenv
from hn_comments.models import (
    AppEnvSettings,
    AppConfig,
    DEFAULT_FEED_URL,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_TIMEOUT,
)

def parse_cli_arguments(argv: Optional[List[str]] = None) -> ArgNamespace:
    """
    Parse the command line arguments.
    """
    parser = ArgumentParser(description="Republish the Hacker News feed with links to the comment pages.")
    parser.add_argument(
        "-t", "--timeout",
        type=int,
        help=f"HTTP client timeout in seconds (default: {DEFAULT_TIMEOUT}).",
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        help=f"The file path to write the RSS feed to (default: {DEFAULT_OUTPUT_PATH}).",
    )
    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        default=None,
        help="Print debug messages.",
    )
    parser.add_argument(
        "-u", "--url",
        type=str,
        help=f"The URL of the feed to republish (default: {DEFAULT_FEED_URL}).",
    )
    return parser.parse_args(argv)

def load_config(cli_args: Optional[ArgNamespace] = None) -> AppConfig:
    """
    Load the configuration. CLI arguments take precedence over the environment.
    """
    load_dotenv()
    if cli_args is None:
        cli_args = parse_cli_arguments([])
    env_settings = AppEnvSettings()

    timeout = cli_args.timeout if cli_args.timeout is not None else env_settings.timeout
    if timeout is None:
        timeout = DEFAULT_TIMEOUT
    if timeout <= 0:
        raise ValueError(f"Timeout must be a positive number of seconds, got {timeout}.")

    return AppConfig(
        feed_url=cli_args.url
            or env_settings.feed_url
            or DEFAULT_FEED_URL,
        timeout=timeout,
        output=cli_args.output
            or env_settings.output
            or DEFAULT_OUTPUT_PATH,
        debug=bool(cli_args.debug or env_settings.debug),
    )
