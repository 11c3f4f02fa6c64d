"""A store customer whose requests are interpreted and routed to staff."""

from __future__ import annotations

import sys

from patterndemos.request_parser import RequestParser
from patterndemos.staff import StaffHandler, build_chain

_DIVIDER = "-" * 40


class Customer:
    """Asks for help in plain words."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.parser = RequestParser()

    def ask_for_help(self, request: str, first_staff: StaffHandler) -> str:
        """Interpret a request, hand it to the chain of staff and return its reading."""
        print(f'\n{self.name} says: "{request}"')
        print(_DIVIDER)
        interpreted = self.parser.parse(request).interpret({})
        print(f"Interpreted as: {interpreted}")
        print(_DIVIDER)
        first_staff.handle_request(interpreted, request)
        return interpreted


def main(argv=None) -> int:
    """Walk a few customers through the department store."""
    rule = "=" * 40
    print(rule)
    print("   WELCOME TO THE DEPARTMENT STORE")
    print(rule + "\n")

    staff = build_chain()
    alice = Customer("Alice")
    bob = Customer("Bob")
    charlie = Customer("Charlie")
    diana = Customer("Diana")

    alice.ask_for_help("I need help finding a new laptop", staff)
    bob.ask_for_help("Where can I find a nice shirt?", staff)
    charlie.ask_for_help("I'm looking for fresh bread and milk", staff)
    diana.ask_for_help("I need to return this item, it's broken", staff)
    alice.ask_for_help("Can you help me find something?", staff)

    print("\n" + rule)
    print("   THANK YOU FOR SHOPPING WITH US!")
    print(rule)
    return 0


if __name__ == "__main__":
    sys.exit(main())