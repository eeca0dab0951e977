import sys
import logging
from typing import List, Optional

from hn_comments.config import parse_cli_arguments, load_config
from hn_comments.errors import HNCommentsError
from hn_comments.logics.fetch_feed import fetch_feed
from hn_comments.logics.parse_feed import parse_feed
from hn_comments.logics.generate_feed import generate_feed
from hn_comments.logics.write_feed import write_feed
from hn_comments.models import AppConfig
from hn_comments.protocols import logging_diagnostics_sink

class Main:
    """
    Main class for the HN Comments application.
    """
    def __init__(
            self,
            config: AppConfig,
            ):
        self.config = config

    def run(self) -> str:
        """
        Run the pipeline once. Returns the path of the written feed.
        """
        # Download feed.
        raw_feed = fetch_feed(
            url=self.config.feed_url,
            timeout=self.config.timeout,
            user_agent=self.config.user_agent,
        )
        # Parse feed.
        source_feed = parse_feed(raw_feed)
        # Generate comment feed.
        output_feed = generate_feed(
            source_feed=source_feed,
            diagnostics=logging_diagnostics_sink(self.config.debug),
        )
        # Write output.
        return write_feed(output_feed, self.config.output)

def main(argv: Optional[List[str]] = None):
    cli_args = parse_cli_arguments(argv)
    try:
        config = load_config(cli_args)
    except ValueError as e:
        logging.error(str(e))
        sys.exit(1)
    logging.basicConfig(level=logging.DEBUG if config.debug else logging.INFO)
    try:
        Main(config=config).run()
    except HNCommentsError as e:
        logging.error(str(e))
        sys.exit(1)

if __name__ == "__main__":
    main()
