"""Main entry point for the lexipath package."""

import sys

from loguru import logger

from lexipath.cli import create_parser
from lexipath.core import ConfigurationError, CostModel, SearchQuery, load_config
from lexipath.processing import (
    answer_query,
    format_result,
    load_dictionary,
    run_instruction_files,
    run_interactive,
)
from lexipath.utils import add_log_file_handler, setup_logger


def main(argv: list[str] | None = None) -> int:
    """Main entry point. Returns the process exit status."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config, args, parser)
    except ConfigurationError as e:
        parser.error(str(e))

    setup_logger(verbose=config.verbose, debug=config.debug)
    if config.log_file:
        add_log_file_handler(config.log_file, verbose=config.verbose, debug=config.debug)

    manual_parts = (args.costs, args.origin, args.target)
    has_manual_query = any(part is not None for part in manual_parts)
    if has_manual_query and not all(part is not None for part in manual_parts):
        parser.error("--costs, --origin and --target must be given together")
    if not (args.instructions or has_manual_query or args.interactive):
        parser.error(
            "Provide instruction files, a --costs/--origin/--target query or --interactive"
        )

    manual_query = None
    if has_manual_query:
        try:
            manual_query = SearchQuery(
                costs=CostModel.from_tokens(args.costs), origin=args.origin, target=args.target
            )
        except ConfigurationError as e:
            parser.error(str(e))

    if config.verbose:
        logger.info("=" * 60)
        logger.info("LexiPath - Minimum Edit Cost Search")
        logger.info("=" * 60)

    try:
        dictionary = load_dictionary(config)
    except (OSError, RuntimeError, ConfigurationError):
        logger.error("✗ Could not load the dictionary")
        return 1

    try:
        if manual_query is not None:
            cost = answer_query(manual_query, dictionary, config)
            print(format_result(manual_query, cost))
        if args.instructions:
            run_instruction_files(args.instructions, dictionary, config)
        if args.interactive:
            run_interactive(dictionary, config)
    except ConfigurationError:
        return 2
    except OSError:
        return 1
    except KeyboardInterrupt:
        logger.warning("⚠️  Search interrupted by user")
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
