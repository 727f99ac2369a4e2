#!/usr/bin/env python3
"""
Command-line driver for the membership predicate workbench.

With no arguments, runs the four contains() variants on S = [3, 8, 2, 5, 10]
for a present target (5) and an absent one (99) and prints one
"<label>: <true|false>" line per variant and target.
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from config.settings import Settings, get_settings, print_settings
from core.models import PipelineResult, ProcessingStatus
from modules.control_flow.demo import print_demo
from modules.pipeline.pipeline import MembershipPipeline
from modules.z3.verifier import VerificationReporter

logger = logging.getLogger(__name__)

__version__ = '1.0.0'


# ============================================================================
# COLOR CODES FOR TERMINAL OUTPUT
# ============================================================================

class Colors:
    """ANSI color codes for terminal output."""
    OKGREEN = '\033[92m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'


def print_success(message: str):
    """Print success message."""
    print(f"{Colors.OKGREEN}✅ {message}{Colors.ENDC}")


def print_error(message: str):
    """Print error message to stderr."""
    print(f"{Colors.FAIL}❌ {message}{Colors.ENDC}", file=sys.stderr)


# ============================================================================
# OUTPUT
# ============================================================================

def separator_line(sequence: List[int], target: int) -> str:
    where = "in array" if target in sequence else "not in array"
    return f"Now testing with target = {target} ({where}):"


def format_results(result: PipelineResult, show_counts: bool = False) -> List[str]:
    """
    Driver output lines: each query's variant lines, queries after the first
    introduced by a separator line.
    """
    lines = []
    for position, report in enumerate(result.queries):
        if position > 0:
            lines.append(separator_line(result.sequence, report.target))
        lines.extend(run.format_line(show_counts) for run in report.runs)
    return lines


def configure_logging(level: str):
    """Send log records to stderr so stdout carries only driver output."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )


# ============================================================================
# COMMAND-LINE ARGUMENT PARSING
# ============================================================================

def verification_length(value: str) -> int:
    length = int(value)
    if not 0 <= length <= 8:
        raise argparse.ArgumentTypeError(f"must be between 0 and 8, got {length}")
    return length


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Membership predicate workbench - four contains() variants",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the four variants on the fixed inputs
  python main.py

  # Show comparison counts
  python main.py --counts

  # Prove every variant correct for all sequences up to length 5
  python main.py --verify --max-length 5

  # Control structures walkthrough
  python main.py --demo
        """
    )

    parser.add_argument(
        '--counts',
        action='store_true',
        help='Append the number of equality comparisons to each result line'
    )

    parser.add_argument(
        '--verify',
        action='store_true',
        help='Verify all variants with Z3 after printing the results'
    )

    parser.add_argument(
        '--max-length',
        type=verification_length,
        help='Largest sequence length to verify, 0-8 (default: from settings)'
    )

    parser.add_argument(
        '--demo',
        action='store_true',
        help='Print the control structures walkthrough instead'
    )

    parser.add_argument(
        '--show-settings',
        action='store_true',
        help='Print the effective settings and exit'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        help='Logging level (default: CONTAINS_LOG_LEVEL or WARNING)'
    )

    parser.add_argument(
        '--version', '-v',
        action='version',
        version=f'Membership Workbench v{__version__}'
    )

    return parser.parse_args(argv)


# ============================================================================
# MODES
# ============================================================================

def run_driver(settings: Settings, show_counts: bool, verify: bool, max_length: Optional[int]) -> int:
    """
    Run the variants and print their results.

    Returns:
        Process exit status
    """
    pipeline = MembershipPipeline(settings=settings)
    result = pipeline.run(verify=verify, max_length=max_length)

    for line in format_results(result, show_counts):
        print(line)

    if verify:
        print()
        print(VerificationReporter.format_summary(result.verification))
        if result.verification and result.verification_passed:
            print_success("All variants verified")

    if result.status != ProcessingStatus.SUCCESS:
        for error in result.errors:
            print_error(error)
        return 1
    return 0


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        print_error(f"Invalid settings: {e}")
        return 1

    configure_logging(args.log_level or settings.log_level)
    logger.debug(f"Arguments: {args}")

    if args.show_settings:
        print_settings(settings)
        return 0

    if args.demo:
        print_demo()
        return 0

    return run_driver(
        settings,
        show_counts=args.counts,
        verify=args.verify,
        max_length=args.max_length
    )


def cli():
    """Console-script wrapper around main()."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        print(f"\nFATAL ERROR: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc(file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli()
