import pytest

from rustdrills.drills.enums import (
    ChangeColor,
    Echo,
    MessageKind,
    Move,
    Point,
    Quit,
    State,
)


def test_match_message_call(capsys):
    state = State(color=(0, 0, 0), position=Point(0, 0), has_quit=False)
    state.process(ChangeColor(255, 0, 255))
    state.process(Echo("hello world"))
    state.process(Move(Point(x=10, y=15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.has_quit is True
    assert capsys.readouterr().out == "hello world\n"


def test_message_kinds():
    assert Quit().kind is MessageKind.QUIT
    assert Echo("hello world").kind is MessageKind.ECHO
    assert Move(Point(10, 30)).kind is MessageKind.MOVE
    assert ChangeColor(200, 255, 255).kind is MessageKind.CHANGE_COLOR


def test_fresh_state_defaults():
    state = State()
    assert state.color == (0, 0, 0)
    assert state.position == Point(0, 0)
    assert state.has_quit is False


def test_process_rejects_non_message():
    with pytest.raises(TypeError):
        State().process("Quit")