import pytest

from solong.mapfile import (
    GameMap,
    MapError,
    Player,
    check_file_name,
    load_map,
    read_lines,
    validate_map,
)

VALID = "1111111\n1P0C0E1\n10C0001\n1111111\n"


def _write(tmp_path, text, name="map.ber"):
    path = tmp_path / name
    path.write_text(text)
    return path


@pytest.mark.parametrize(
    "name", ["map.ber", "maps/map.ber", "./maps/map.ber", "maps/.hidden.ber"]
)
def test_good_names(name):
    assert check_file_name(name) == name


@pytest.mark.parametrize(
    "name",
    ["map.txt", "map.bers", "map.be", "map", "", "../maps/map.ber", "maps/.hidden", "map.ber.txt"],
)
def test_bad_names(name):
    with pytest.raises(MapError, match="Bad extension file"):
        check_file_name(name)


def test_bonus_name_rule_differs_on_hidden_files():
    assert check_file_name("maps/.hidden.ber") == "maps/.hidden.ber"
    with pytest.raises(MapError, match="Bad extension file"):
        check_file_name("maps/.hidden.ber", bonus=True)
    assert check_file_name("maps/map.ber", bonus=True) == "maps/map.ber"


def test_read_lines_drops_newlines(tmp_path):
    path = _write(tmp_path, "111\n1P1\n")
    assert read_lines(path) == ["111", "1P1"]


def test_read_lines_ignores_unterminated_tail(tmp_path):
    path = _write(tmp_path, "111\n1P1")
    assert read_lines(path) == ["111"]


@pytest.mark.parametrize("text", ["", "1111"])
def test_read_lines_empty(tmp_path, text):
    with pytest.raises(MapError, match="Empty file"):
        read_lines(_write(tmp_path, text))


def test_read_lines_directory(tmp_path):
    with pytest.raises(MapError, match="Directory"):
        read_lines(tmp_path)


def test_read_lines_missing(tmp_path):
    with pytest.raises(MapError, match="Open file"):
        read_lines(tmp_path / "absent.ber")


def test_load_valid_map(tmp_path):
    game_map = load_map(_write(tmp_path, VALID))
    assert game_map.render() == VALID.rstrip("\n")
    assert game_map.height == len(VALID.splitlines())
    assert game_map.width == len(VALID.splitlines()[0])
    assert game_map.goal == VALID.count("C")
    assert game_map.collected == 0
    assert game_map.player.moves == 0
    assert game_map.cell(game_map.player.x, game_map.player.y) == "P"


def test_validate_round_trip():
    rows = VALID.splitlines()
    game_map = validate_map(rows)
    assert game_map.render().split("\n") == rows


def test_set_cell():
    game_map = validate_map(VALID.splitlines())
    x, y = game_map.player.x, game_map.player.y
    game_map.set_cell(x, y, "0")
    assert game_map.cell(x, y) == "0"
    assert "P" not in game_map.render()


def test_game_map_defaults():
    game_map = GameMap(rows=[list("111")])
    assert game_map.player == Player()
    assert game_map.width == len("111")


@pytest.mark.parametrize(
    "text, message",
    [
        ("111111\n1PCXE1\n111111\n", "Bad characther in map"),
        ("111111\n1PCE1\n111111\n", "not a good size map"),
        ("111111\n0PC0E1\n111111\n", "map not close by '1'"),
        ("111111\n1PC0E0\n111111\n", "map not close by '1'"),
        ("110111\n1PC0E1\n111111\n", "map not close by '1'"),
        ("111111\n1PC0E1\n111101\n", "map not close by '1'"),
        ("111111\n1PPCE1\n111111\n", "player"),
        ("111111\n1P00E1\n111111\n", "collectible"),
        ("111111\n1P0C01\n111111\n", "exit"),
        ("111111\n100CE1\n111111\n", "player"),
    ],
)
def test_invalid_maps(text, message):
    with pytest.raises(MapError, match=message):
        validate_map(text.splitlines())


def test_bad_character_reported_before_size():
    with pytest.raises(MapError, match="Bad characther in map"):
        validate_map(["111111", "1PXE1", "111111"])


def test_empty_row_list():
    with pytest.raises(MapError, match="Empty file"):
        validate_map([])


def test_load_map_rejects_invalid_contents(tmp_path):
    with pytest.raises(MapError, match="not a good size map"):
        load_map(_write(tmp_path, "11111\n1PCE1\n1111\n"))