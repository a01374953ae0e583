"""
Command-line driver for the sign-up form.

Usage:
    python sign_up.py --username validUser1 --email user@example.com
    python sign_up.py --username alice --email a@b.com --taken alice
    python sign_up.py --username validUser1 --email user@example.com --wait-banner
"""

import asyncio
from dataclasses import replace
from typing import Optional
import argparse
import logging
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from form_settings import Settings
from form_controller import FormController
from models.enums import FieldName
from models.submission_result import SubmissionResult

logger = logging.getLogger(__name__)


def configure_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def print_summary(controller: FormController, result: Optional[SubmissionResult]):
    """Print a formatted summary of the form after a submit."""
    print("\n" + "=" * 60)
    print("SIGN-UP RESULT")
    print("=" * 60)
    print(f"State:          {controller.state.value}")
    print(f"Handler status: {result.status.value if result else 'not called'}")
    print(f"Banner visible: {controller.banner_visible}")

    print("\nField Errors:")
    for field in FieldName:
        print(f"  {field.value}: {controller.error(field) or '-'}")

    if controller.form_error:
        print(f"\nForm Error: {controller.form_error}")

    if controller.submitted_data:
        print("\nSubmitted Data:")
        for key, value in controller.submitted_data.to_dict().items():
            print(f"  {key}: {value}")


async def run(args: argparse.Namespace) -> int:
    settings = Settings.from_env()
    if args.delay is not None:
        settings = replace(settings, submit_delay_seconds=args.delay)
    if args.banner_timeout is not None:
        settings = replace(settings, banner_timeout_seconds=args.banner_timeout)
    if args.taken:
        settings = replace(settings, taken_usernames=settings.taken_usernames + tuple(args.taken))

    controller = FormController(settings=settings)
    try:
        controller.update(FieldName.USERNAME, args.username)
        controller.update(FieldName.EMAIL, args.email)

        result = await controller.submit()
        print_summary(controller, result)

        if controller.banner_visible:
            if args.close_banner:
                controller.close_banner()
                print("\nBanner closed.")
            elif args.wait_banner:
                await asyncio.sleep(settings.banner_timeout_seconds)
                print(f"\nBanner visible after {settings.banner_timeout_seconds:.1f}s: "
                      f"{controller.banner_visible}")

        return 0 if result is not None and result.succeeded else 1
    finally:
        controller.close()


def main():
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        description='Fill in and submit the sign-up form',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python sign_up.py --username validUser1 --email user@example.com
  python sign_up.py --username 'ab$' --email ''
  python sign_up.py --username alice --email a@b.com --taken alice
        """
    )

    parser.add_argument('--username', default='', help='Username field value')
    parser.add_argument('--email', default='', help='Email field value')
    parser.add_argument('--taken', action='append', metavar='NAME',
                        help='Username the simulated backend rejects (repeatable)')
    parser.add_argument('--delay', type=float,
                        help='Simulated submit delay in seconds (default: SUBMIT_DELAY_SECONDS or 0.5)')
    parser.add_argument('--banner-timeout', type=float,
                        help='Seconds before the banner hides (default: BANNER_TIMEOUT_SECONDS or 5)')
    parser.add_argument('--close-banner', action='store_true',
                        help='Close the success banner right after submitting')
    parser.add_argument('--wait-banner', action='store_true',
                        help='Wait for the banner auto-hide before exiting')
    parser.add_argument('--log-level',
                        help='Logging level (default: LOG_LEVEL or INFO)')

    args = parser.parse_args()

    try:
        configure_logging(args.log_level or Settings.from_env().log_level)
        sys.exit(asyncio.run(run(args)))
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(2)


if __name__ == '__main__':
    main()
