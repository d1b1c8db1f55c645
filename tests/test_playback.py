from bgengine.entity import Entity
from bgengine.fixed import Scalar
from bgengine.playback import CommandPlayback
from bgengine.recorded_command import (
    RecordedCommand,
    RecordedCommandType,
    RecordedMoveCommand,
)
from bgengine.vec2 import Vec2


class FakeSession:
    def __init__(self):
        self.moves = []

    def queue_move_command(self, entity, target_position):
        self.moves.append((entity, target_position))


def _pos(x, y):
    return Vec2(Scalar.from_int(x), Scalar.from_int(y))


def _commands():
    return [
        RecordedCommand.make_move(1, Entity(0, 0), _pos(1, 0)),
        RecordedCommand.make_move(2, Entity(1, 0), _pos(2, 0)),
        RecordedCommand.make_move(2, Entity(2, 0), _pos(3, 0)),
        RecordedCommand.make_move(5, Entity(0, 0), _pos(4, 0)),
    ]


def test_empty_playback_is_finished():
    playback = CommandPlayback()
    assert playback.is_finished() is True
    assert playback.command_count() == 0
    assert playback.next_command_index() == 0


def test_set_commands_copies_and_rewinds():
    source = _commands()
    playback = CommandPlayback()
    playback.set_commands(source)
    source.clear()
    assert playback.command_count() == len(_commands())
    assert playback.commands() == tuple(_commands())
    assert playback.is_finished() is False


def test_commands_before_their_tick_are_not_issued():
    playback = CommandPlayback()
    playback.set_commands(_commands())
    session = FakeSession()
    playback.playback_tick(0, session)
    assert session.moves == []
    assert playback.next_command_index() == 0


def test_issues_commands_on_matching_tick_in_order():
    playback = CommandPlayback()
    playback.set_commands(_commands())
    session = FakeSession()
    playback.playback_tick(1, session)
    assert session.moves == [(Entity(0, 0), _pos(1, 0))]
    playback.playback_tick(2, session)
    assert session.moves[1:] == [(Entity(1, 0), _pos(2, 0)), (Entity(2, 0), _pos(3, 0))]
    assert playback.is_finished() is False
    playback.playback_tick(5, session)
    assert session.moves[-1] == (Entity(0, 0), _pos(4, 0))
    assert playback.is_finished() is True
    assert playback.next_command_index() == playback.command_count()


def test_missed_ticks_are_skipped_without_issuing():
    playback = CommandPlayback()
    playback.set_commands(_commands())
    session = FakeSession()
    playback.playback_tick(2, session)
    assert session.moves == [(Entity(1, 0), _pos(2, 0)), (Entity(2, 0), _pos(3, 0))]
    playback.playback_tick(10, session)
    assert len(session.moves) == 2
    assert playback.is_finished() is True


def test_invalid_and_none_commands_are_consumed_silently():
    playback = CommandPlayback()
    playback.set_commands(
        [
            RecordedCommand.make_move(0, Entity.invalid(), _pos(1, 1)),
            RecordedCommand(0, RecordedCommandType.NONE, RecordedMoveCommand(Entity(0, 0))),
        ]
    )
    session = FakeSession()
    playback.playback_tick(0, session)
    assert session.moves == []
    assert playback.is_finished() is True


def test_reset_rewinds_and_clear_empties():
    playback = CommandPlayback()
    playback.set_commands(_commands())
    playback.playback_tick(5, FakeSession())
    assert playback.is_finished() is True
    playback.reset()
    assert playback.next_command_index() == 0
    assert playback.command_count() == len(_commands())
    playback.clear()
    assert playback.command_count() == 0
    assert playback.commands() == ()
    assert playback.is_finished() is True