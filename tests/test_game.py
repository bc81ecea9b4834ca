import pytest

from solong.game import Game, GameOver, Key, Sprite

BASIC = ["111111", "1PC0E1", "100001", "111111"]


class Recorder:
    def __init__(self):
        self.calls = []
        self.texts = []

    def draw(self, sprite, x, y):
        self.calls.append((sprite, x, y))

    def show_moves(self, text):
        self.texts.append(text)


def test_init_state():
    game = Game(BASIC)
    assert game.player_pos == (1, 1)
    assert game.collectables == 1
    assert game.rows() == BASIC


def test_no_player_rejected():
    with pytest.raises(ValueError):
        Game(["1111", "1001", "1111"])


def test_draw_all_draws_every_cell_then_banner():
    recorder = Recorder()
    Game(BASIC, recorder).draw_all()
    assert len(recorder.calls) == sum(len(row) for row in BASIC) + 1
    assert recorder.calls[-1] == (Sprite.BANNER, 0, 0)
    assert (Sprite.PLAYER_FRONT, 1, 1) in recorder.calls


def test_collecting_opens_exit():
    recorder = Recorder()
    game = Game(BASIC, recorder)
    game.press("d")
    rows = game.rows()
    assert rows[1][2] == "P"
    assert rows[1][1] == "0"
    assert game.collectables == 0
    assert (Sprite.EXIT_OPEN, BASIC[1].index("E"), 1) in recorder.calls


def test_key_enum_and_letter_agree():
    by_letter = Game(BASIC)
    by_key = Game(BASIC)
    by_letter.press("d")
    by_key.press(Key.RIGHT)
    assert by_letter.rows() == by_key.rows()
    assert by_letter.player_pos == by_key.player_pos


def test_wall_blocks_but_counts_move():
    game = Game(BASIC)
    start = game.player_pos
    game.press("w")
    assert game.player_pos == start
    assert game.moves == 1
    assert game.rows() == BASIC


def test_closed_exit_blocks():
    grid = ["111111", "1PE0C1", "100001", "111111"]
    game = Game(grid)
    start = game.player_pos
    game.press("d")
    assert game.player_pos == start
    assert game.rows() == grid


def test_reaching_open_exit_wins():
    game = Game(BASIC)
    game.press("d")
    game.press("d")
    with pytest.raises(GameOver) as info:
        game.press("d")
    assert info.value.reason == "won"


def test_escape_quits():
    game = Game(BASIC)
    with pytest.raises(GameOver) as info:
        game.press(Key.ESCAPE)
    assert info.value.reason == "quit"
    assert game.moves == 1


def test_quit_raises():
    with pytest.raises(GameOver) as info:
        Game(BASIC).quit()
    assert info.value.reason == "quit"


def test_walking_into_enemy_loses():
    game = Game(["11111", "1PG01", "10001", "1C0E1", "11111"])
    with pytest.raises(GameOver) as info:
        game.press("d")
    assert info.value.reason == "caught"


def test_enemy_moves_every_second_press():
    game = Game(["1111111", "1P000G1", "1C000E1", "1111111"])
    before = game.enemy_positions[0]
    game.press("d")
    assert game.enemy_positions[0] == before
    game.press("a")
    after = game.enemy_positions[0]
    assert after == (before[0] - 1, before[1])
    assert game.rows()[1][after[0]] == "G"
    assert game.rows()[1][before[0]] == "0"


def test_enemy_catches_player():
    game = Game(["1111111", "1P0G001", "1C000E1", "1111111"])
    game.press("d")
    with pytest.raises(GameOver) as info:
        game.press("w")
    assert info.value.reason == "caught"


def test_can_move_rules():
    game = Game(BASIC)
    assert game.can_move(0, 1, "P") is False
    assert game.can_move(2, 1, "G") is False
    assert game.can_move(4, 1, "G") is False
    assert game.can_move(3, 1, "G") is True
    assert game.can_move(4, 1, "P") is False


def test_player_sprites_follow_direction():
    recorder = Recorder()
    game = Game(BASIC, recorder)
    game.press("a")
    assert recorder.calls[-1] == (Sprite.PLAYER_LEFT, *game.player_pos)
    game.press(Key.UP)
    assert recorder.calls[-1] == (Sprite.PLAYER_BACK, *game.player_pos)
    game.press("x")
    assert recorder.calls[-1] == (Sprite.PLAYER_FRONT, *game.player_pos)


def test_move_counter_shown():
    recorder = Recorder()
    game = Game(BASIC, recorder)
    game.press("s")
    game.press("w")
    assert recorder.texts == ["1", "2"]