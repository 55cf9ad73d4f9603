"""
Main CLI module with argument parsing and example dispatch.

This module provides the main CLI interface including:
- Command line argument parsing
- Configuration and logging setup
- Running the selected example
"""
import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError

from pattern_gallery._package import __version__
from pattern_gallery.application.examples import default_examples
from pattern_gallery.config import ConfigurationManager, ObserverConfig
from pattern_gallery.domain.core.exceptions import ConfigurationError, DomainException
from pattern_gallery.infrastructure.logging.logger import get_logger, setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="pattern-gallery",
        description="Run a design-pattern example",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s adapter                      # Draw legacy shapes through adapters
  %(prog)s observer --duration 3        # Broadcast ticks for three seconds
  %(prog)s strategy                     # Add and multiply 3 and 5
        """
    )

    parser.add_argument('example', help='Example to run (adapter, builder, car-builder, observer, strategy, singleton)')
    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--interval', type=float, help='Observer tick interval in seconds')
    parser.add_argument('--duration', type=float, help='Observer run time in seconds')
    parser.add_argument('--verbose', action='store_true', help='Print tracebacks for unexpected errors')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    return parser.parse_args(argv)


def run_example(args: argparse.Namespace, config_manager: ConfigurationManager) -> None:
    """Run the example named in ``args``."""
    example = default_examples().get(args.example)

    if example.name == "observer":
        observer_config = config_manager.get_observer_config()
        updates = {}
        if args.interval is not None:
            updates["interval_seconds"] = args.interval
        if args.duration is not None:
            updates["duration_seconds"] = args.duration
        if updates:
            try:
                observer_config = ObserverConfig.model_validate(
                    {**observer_config.model_dump(), **updates}
                )
            except PydanticValidationError as e:
                raise ConfigurationError(f"Invalid observer options: {e}")
        example.run(observer_config)
    else:
        example.run()


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)
        logger = get_logger(__name__)

        try:
            config_manager = ConfigurationManager(args.config)
            logging_config = config_manager.get_logging_config()
            if args.log_level:
                logging_config = logging_config.model_copy(update={"level": args.log_level})
            setup_logging(logging_config)
            run_example(args, config_manager)
        except DomainException as e:
            logger.error("Domain error", error=str(e))
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except Exception as e:
            logger.error("Unexpected error", error=str(e))
            if args.verbose:
                import traceback
                traceback.print_exc()
            print(f"Unexpected error: {e}", file=sys.stderr)
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
