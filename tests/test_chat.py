import pytest

from patterndemos.chat import ChatRoom, ChatUser, Mediator, User, main


class RecordingUser(User):
    def __init__(self, mediator, name):
        super().__init__(mediator, name)
        self.received = []
        self.joined = []
        self.left = []

    def send_message(self, message):
        self.mediator.notify(self, "message", message)

    def receive_message(self, sender_name, message):
        self.received.append((sender_name, message))

    def user_joined(self, user_name):
        self.joined.append(user_name)

    def user_left(self, user_name):
        self.left.append(user_name)


def test_join_notifies_only_existing_users():
    room = ChatRoom()
    a, b = RecordingUser(room, "Alice"), RecordingUser(room, "Bob")
    room.add_user(a)
    room.add_user(b)
    assert a.joined == ["Bob"]
    assert b.joined == []


def test_message_goes_to_everyone_but_sender():
    room = ChatRoom()
    users = [RecordingUser(room, n) for n in ("Alice", "Bob", "Charlie")]
    for user in users:
        room.add_user(user)
    users[0].send_message("Hello everyone!")
    assert users[0].received == []
    assert users[1].received == [("Alice", "Hello everyone!")]
    assert users[2].received == [("Alice", "Hello everyone!")]


def test_remove_user_notifies_remaining_and_stops_delivery():
    room = ChatRoom()
    a, b, c = (RecordingUser(room, n) for n in ("Alice", "Bob", "Charlie"))
    for user in (a, b, c):
        room.add_user(user)
    room.remove_user(b)
    assert a.left == ["Bob"] and c.left == ["Bob"]
    a.send_message("Goodbye Bob!")
    assert b.received == []
    assert c.received == [("Alice", "Goodbye Bob!")]


def test_remove_absent_user_is_silent(capsys):
    room = ChatRoom()
    stranger = RecordingUser(room, "Eve")
    room.remove_user(stranger)
    assert capsys.readouterr().out == ""
    assert room.users == []


def test_non_message_event_is_ignored():
    room = ChatRoom()
    a, b = RecordingUser(room, "Alice"), RecordingUser(room, "Bob")
    room.add_user(a)
    room.add_user(b)
    room.notify(a, "typing", "...")
    assert b.received == []


def test_chat_user_output(capsys):
    room = ChatRoom()
    alice, bob = ChatUser(room, "Alice"), ChatUser(room, "Bob")
    room.add_user(alice)
    room.add_user(bob)
    out = capsys.readouterr().out
    assert "[SYSTEM] Bob joined the chat room." in out
    assert "Alice notices: Bob joined the room" in out
    alice.send_message("Hello everyone!")
    out = capsys.readouterr().out
    assert out == (
        "Alice sends: Hello everyone!\n"
        "Bob received from Alice: Hello everyone!\n"
    )


def test_abstract_classes_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Mediator()
    with pytest.raises(TypeError):
        User(ChatRoom(), "Alice")


def test_main_runs_demo(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert "[SYSTEM] Bob left the chat room." in out
    assert "Charlie received from Alice: Goodbye Bob!" in out
    assert "Bob received from Alice: Goodbye Bob!" not in out