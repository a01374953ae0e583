#!/usr/bin/env python3
"""
Demo script for the sign-up form.

Walks through validation, blocked and successful submissions, the
single-flight guard, the success banner and a server-side rejection using
short timings so it finishes in about a second.
"""

import asyncio
import sys
import os

# Add current directory to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from form_settings import Settings
from form_controller import FormController
from handlers.simulated_handler import SimulatedSubmitHandler
from models.enums import FieldName
from field_validators import validate_username

DEMO_SETTINGS = Settings(submit_delay_seconds=0.05, banner_timeout_seconds=0.2)


def print_header(title: str):
    """Print a formatted header."""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)


def print_form(controller: FormController):
    print(f"    username error: {controller.username_error or '-'}")
    print(f"    email error:    {controller.email_error or '-'}")
    print(f"    state:          {controller.state.value}")
    print(f"    banner visible: {controller.banner_visible}")


def demo_username_rules():
    """Demonstrate the username validator on its own."""
    print_header("1. USERNAME RULES")

    samples = ["", "ab", "ab$", "validUser1", "abcdefghijklmnopqrstuvwxyz"]
    print()
    for value in samples:
        failures = validate_username(value)
        outcome = failures[0].message if failures else "ok"
        print(f"  {value!r:30} -> {outcome}")


async def demo_blocked_submit():
    """Submitting an invalid form only surfaces errors."""
    print_header("2. BLOCKED SUBMISSIONS")

    for username, email in [("ab$", ""), ("abcdefghijklmnopqrstuvwxyz", "a@b.com")]:
        controller = FormController(settings=DEMO_SETTINGS)
        controller.update(FieldName.USERNAME, username)
        controller.update(FieldName.EMAIL, email)
        result = await controller.submit()
        print(f"\n  username={username!r} email={email!r} (handler called: {result is not None})")
        print_form(controller)
        controller.close()


async def demo_successful_submit():
    """A valid form is sent, the banner shows, fields reset, banner hides."""
    print_header("3. SUCCESSFUL SUBMISSION")

    controller = FormController(settings=DEMO_SETTINGS)
    controller.update(FieldName.USERNAME, "validUser1")
    controller.update(FieldName.EMAIL, "user@example.com")
    await controller.submit()

    print(f"\n  submitted data: {controller.submitted_data.to_dict()}")
    print(f"  fields after reset: {[controller.fields.get(f) for f in FieldName]}")
    print_form(controller)

    await asyncio.sleep(DEMO_SETTINGS.banner_timeout_seconds + 0.05)
    print(f"\n  after {DEMO_SETTINGS.banner_timeout_seconds}s:")
    print_form(controller)
    controller.close()


async def demo_single_flight():
    """Two rapid triggers result in one handler call."""
    print_header("4. SINGLE-FLIGHT GUARD")

    handler = SimulatedSubmitHandler(delay=DEMO_SETTINGS.submit_delay_seconds)
    controller = FormController(handler=handler, settings=DEMO_SETTINGS)
    controller.update(FieldName.USERNAME, "validUser1")
    controller.update(FieldName.EMAIL, "user@example.com")
    results = await asyncio.gather(controller.submit(), controller.submit())

    print(f"\n  handler calls: {handler.submit_count}")
    print(f"  second trigger result: {results[1]}")
    controller.close_banner()
    controller.close()


async def demo_server_rejection():
    """The handler rejects the username; the form keeps its values."""
    print_header("5. SERVER REJECTION")

    handler = SimulatedSubmitHandler(delay=DEMO_SETTINGS.submit_delay_seconds, taken_usernames=["alice"])
    controller = FormController(handler=handler, settings=DEMO_SETTINGS)
    controller.update(FieldName.USERNAME, "alice")
    controller.update(FieldName.EMAIL, "alice@example.com")
    await controller.submit()

    print(f"\n  username still: {controller.fields.get(FieldName.USERNAME)!r}")
    print_form(controller)

    controller.update(FieldName.USERNAME, "alice2")
    print("\n  after editing the username:")
    print_form(controller)
    controller.close()


async def run_demos():
    demo_username_rules()
    await demo_blocked_submit()
    await demo_successful_submit()
    await demo_single_flight()
    await demo_server_rejection()


def main():
    """Run all demos."""
    print("\n" + "=" * 60)
    print("       SIGN-UP FORM - DEMO")
    print("=" * 60)

    asyncio.run(run_demos())

    print_header("DEMO COMPLETE")
    print("""
To submit the form from the command line:

    python sign_up.py --username validUser1 --email user@example.com
    python sign_up.py --username alice --email a@b.com --taken alice
    """)


if __name__ == "__main__":
    main()
