"""Mediator: chat users who talk only through a chat room."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


class Mediator(ABC):
    """Routes events between users."""

    @abstractmethod
    def notify(self, sender: User, event: str, message: str = "") -> None:
        """Handle an event raised by a user."""


class User(ABC):
    """A participant that talks through a mediator."""

    def __init__(self, mediator: Mediator, name: str) -> None:
        self.mediator = mediator
        self.name = name

    @abstractmethod
    def send_message(self, message: str) -> None:
        """Send a message to the others."""

    @abstractmethod
    def receive_message(self, sender_name: str, message: str) -> None:
        """Receive a message from another user."""

    @abstractmethod
    def user_joined(self, user_name: str) -> None:
        """Be told that someone joined."""

    @abstractmethod
    def user_left(self, user_name: str) -> None:
        """Be told that someone left."""


class ChatRoom(Mediator):
    """A room that broadcasts messages to its members."""

    def __init__(self) -> None:
        self.users: list[User] = []

    def add_user(self, user: User) -> None:
        self.users.append(user)
        print(f"[SYSTEM] {user.name} joined the chat room.")
        for existing in self.users:
            if existing is not user:
                existing.user_joined(user.name)

    def remove_user(self, user: User) -> None:
        """Remove a member; does nothing if the user is not in the room."""
        if user not in self.users:
            return
        self.users.remove(user)
        print(f"[SYSTEM] {user.name} left the chat room.")
        for remaining in self.users:
            remaining.user_left(user.name)

    def notify(self, sender: User, event: str, message: str = "") -> None:
        if event != "message":
            return
        for user in self.users:
            if user is not sender:
                user.receive_message(sender.name, message)


class ChatUser(User):
    """A user who prints what happens in the room."""

    def send_message(self, message: str) -> None:
        print(f"{self.name} sends: {message}")
        self.mediator.notify(self, "message", message)

    def receive_message(self, sender_name: str, message: str) -> None:
        print(f"{self.name} received from {sender_name}: {message}")

    def user_joined(self, user_name: str) -> None:
        print(f"{self.name} notices: {user_name} joined the room")

    def user_left(self, user_name: str) -> None:
        print(f"{self.name} notices: {user_name} left the room")


def main(argv=None) -> int:
    """Run a short conversation in a chat room."""
    print("=== Mediator Pattern Demo - Chat Room ===\n")

    room = ChatRoom()
    alice = ChatUser(room, "Alice")
    bob = ChatUser(room, "Bob")
    charlie = ChatUser(room, "Charlie")

    print("\n--- Adding users to chat room ---")
    room.add_user(alice)
    room.add_user(bob)

    print("\n--- Users sending messages ---")
    alice.send_message("Hello everyone!")
    bob.send_message("Hi Alice, how are you?")

    print("\n--- Another user joins ---")
    room.add_user(charlie)

    print("\n--- More messages ---")
    charlie.send_message("Hey guys, what's up?")
    alice.send_message("Welcome Charlie!")

    print("\n--- User leaves ---")
    room.remove_user(bob)

    print("\n--- Final messages ---")
    alice.send_message("Goodbye Bob!")
    charlie.send_message("See you later!")

    print("\n=== Demo completed ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())