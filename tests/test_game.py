import io

import pytest

from solong.game import (
    Game,
    MoveResult,
    counter_label,
    int_len,
    main,
    move_message,
    window_size,
)
from solong.keys import Direction, LinuxKey, MacKey
from solong.mapfile import MapError, validate_map

WIN_MAP = ["11111", "1PCE1", "11111"]
LOCKED_MAP = ["111111", "1PEC01", "111111"]


def make_game(rows, bonus=False):
    return Game(validate_map(rows), bonus=bonus)


def test_move_into_wall_is_blocked():
    game = make_game(WIN_MAP)
    before = game.map.render()
    assert game.move(Direction.UP) is MoveResult.BLOCKED
    assert game.moves == 0
    assert game.map.render() == before


def test_collect_then_win():
    game = make_game(WIN_MAP)
    assert game.move(Direction.RIGHT) is MoveResult.COLLECTED
    assert game.moves == 1
    assert game.map.collected == game.map.goal
    assert (game.map.player.x, game.map.player.y) == (2, 1)
    assert game.map.cell(1, 1) == "0"
    assert game.map.cell(2, 1) == "P"
    assert game.move(Direction.RIGHT) is MoveResult.WON
    assert game.won
    assert game.moves == 1


def test_exit_locked_until_collected():
    game = make_game(LOCKED_MAP)
    assert game.move(Direction.RIGHT) is MoveResult.EXIT_LOCKED
    assert game.moves == 0
    assert (game.map.player.x, game.map.player.y) == (1, 1)
    assert not game.won


def test_plain_move_counts():
    game = make_game(["11111", "10P01", "1C0E1", "11111"])
    assert game.move(Direction.LEFT) is MoveResult.MOVED
    assert game.move(Direction.DOWN) is MoveResult.COLLECTED
    assert game.moves == 2
    assert game.map.render().count("P") == 1


def test_press_key_layouts():
    linux_game = make_game(WIN_MAP)
    assert linux_game.press_key(LinuxKey.D, LinuxKey) is MoveResult.COLLECTED
    mac_game = make_game(WIN_MAP)
    assert mac_game.press_key(MacKey.RIGHT, MacKey) is MoveResult.COLLECTED
    assert mac_game.map.render() == linux_game.map.render()


def test_press_key_escape_and_unbound():
    game = make_game(WIN_MAP)
    assert game.press_key(LinuxKey.ESCAPE, LinuxKey) is MoveResult.QUIT
    assert game.press_key(LinuxKey.SPACE, LinuxKey) is None
    assert game.moves == 0


def test_move_message_plural():
    assert move_message(1) == "You did 1 move"
    assert move_message(0).endswith(" moves")
    assert move_message(7).endswith(" moves")


def test_int_len_grows_with_number():
    assert int_len(0) == int_len(10)
    assert int_len(11) == int_len(10) + 1
    assert int_len(1000) > int_len(100)


def test_counter_label():
    assert counter_label(1)[0] == "Move :"
    assert counter_label(2)[0] == "Moves :"
    assert counter_label(42)[1] == "42"
    assert counter_label(500)[2] > counter_label(5)[2]


def test_window_size_fits():
    game_map = validate_map(WIN_MAP)
    size = window_size(game_map, 32, 32, 1000, 1000)
    assert size == (game_map.width * 32, game_map.height * 32)


def test_window_size_exact_fit_depends_on_strict():
    game_map = validate_map(WIN_MAP)
    sw, sh = game_map.width * 32, game_map.height * 32
    assert window_size(game_map, 32, 32, sw, sh, strict=False) == (sw, sh)
    with pytest.raises(MapError):
        window_size(game_map, 32, 32, sw, sh, strict=True)


def test_window_size_too_small():
    game_map = validate_map(WIN_MAP)
    with pytest.raises(MapError):
        window_size(game_map, 32, 32, 64, 1000)


@pytest.fixture
def win_file(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("\n".join(WIN_MAP) + "\n")
    return path


def test_main_needs_one_argument():
    assert main([]) == 1
    assert main(["a.ber", "b.ber"]) == 1


def test_main_rejects_bad_extension(tmp_path, capsys):
    path = tmp_path / "level.txt"
    path.write_text("\n".join(WIN_MAP) + "\n")
    assert main([str(path)]) == 1
    assert "Bad extension file" in capsys.readouterr().err


def test_main_plays_to_win(win_file, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("dd\n"))
    assert main([str(win_file)]) == 0
    out = capsys.readouterr().out
    assert "You did 1 move" in out
    assert "11111" in out


def test_main_escape_quits(win_file, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("\x1bd\n"))
    assert main([str(win_file)]) == 0
    assert "You did 0 moves" in capsys.readouterr().out


def test_main_bonus_counter(win_file, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("d\n"))
    assert main(["--bonus", str(win_file)]) == 0
    assert "Move : 1" in capsys.readouterr().out