"""Main entry point for spellpy package."""

import sys

from loguru import logger

from spellpy.cli import create_parser
from spellpy.core import SpellpyError, load_config
from spellpy.processing import run_pipeline
from spellpy.utils.logging import add_log_file_handler, setup_logger


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    # Load configuration
    try:
        config = load_config(args.config, args, parser)
    except (ValueError, OSError):
        # load_config has already logged the cause
        sys.exit(1)

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)
    if config.log_file:
        add_log_file_handler(config.log_file, verbose=config.verbose, debug=config.debug)

    if config.verbose:
        logger.info("=" * 60)
        logger.info("spellpy - Single-Edit Spell Checker")
        logger.info("=" * 60)
        logger.info("")
        logger.info("Configuration:")
        if config.builtin_dictionary:
            logger.info("  Dictionary: english-words package")
        else:
            logger.info(f"  Dictionary: {config.dictionary}")
        if config.expected_size:
            logger.info(f"  Expected size: {config.expected_size}")
        if config.include:
            logger.info(f"  Include file: {config.include}")
        logger.info(f"  Input: {config.input or '<stdin>'}")
        logger.info(f"  Format: {config.format}")
        logger.info(f"  Workers: {config.jobs}")
        logger.info("")

    try:
        run_pipeline(config)
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Processing interrupted by user")
        raise
    except SpellpyError as e:
        logger.error(f"✗ Spell check failed: {e}")
        sys.exit(1)

    if config.verbose:
        logger.info("")
        logger.info("=" * 60)
        logger.info("✓ Spell check completed successfully")
        logger.info("=" * 60)


if __name__ == "__main__":
    main()
