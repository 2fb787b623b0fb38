import pytest

from selene.board import Board, BoardConfig, from_tiles
from selene.tile import Position, Tile


def pos(tile_id, ch, x, y):
    return Position(tile=Tile(id=tile_id, ch=ch), x=x, y=y)


def board_of(positions, unused=None, config=None):
    board = Board()
    for tile in unused or []:
        board.unused_tiles[tile.id] = tile
        board.unused_tile_ids.append(tile.id)
    for p in positions:
        board.used_tiles[p.tile.id] = p
        board.used_tile_locs.setdefault(p.x, {})[p.y] = p.tile
    if config is not None:
        board.config = config
    return board


@pytest.mark.parametrize(
    "config",
    [BoardConfig(), BoardConfig(num_rows=10, num_cols=3), BoardConfig(num_rows=3, num_cols=10)],
)
def test_new_board_invalid(config):
    with pytest.raises(ValueError):
        config.new_board([Tile(id=7)])


def test_new_board_minimum_size():
    board = BoardConfig(num_rows=10, num_cols=10).new_board([Tile(id=7)])
    assert board.unused_tile_ids == [7]
    assert board.unused_tiles[7].id == 7
    assert board.used_tiles == {}
    assert board.used_tile_locs == {}


def test_add_tile():
    board = Board(config=BoardConfig(num_cols=1, num_rows=1))
    tile = Tile(id=1)
    board.add_tile(tile)
    assert board.unused_tile_ids == [1]
    with pytest.raises(ValueError):
        board.add_tile(tile)
    board.move_tiles({tile.id: Position(tile=tile)})
    assert board.used_tiles[1] == Position(tile=tile)
    with pytest.raises(ValueError):
        board.add_tile(tile)


def test_used_words_inconsistent_ids():
    board = Board(
        used_tiles={
            5: pos(5, "A", 2, 7),
            4: pos(4, "B", 2, 8),
            7: pos(5, "C", 2, 10),
            3: pos(4, "D", 2, 11),
        },
        used_tile_locs={
            2: {
                7: Tile(5, "A"),
                8: Tile(4, "B"),
                10: Tile(7, "C"),
                11: Tile(3, "D"),
            }
        },
    )
    assert board.used_tile_words() == ["AB", "CD"]


@pytest.mark.parametrize(
    "positions, want",
    [
        ([pos(5, "A", 7, 2), pos(4, "B", 8, 2)], ["AB"]),
        (
            [
                pos(8, "N", 4, 3),
                pos(7, "A", 5, 3),
                pos(4, "P", 6, 3),
                pos(9, "O", 4, 4),
                pos(1, "R", 5, 4),
                pos(2, "E", 5, 5),
            ],
            ["NAP", "OR", "NO", "ARE"],
        ),
        (
            [
                pos(1, "C", 1, 1),
                pos(2, "O", 2, 1),
                pos(3, "N", 3, 1),
                pos(4, "A", 1, 2),
                pos(5, "R", 1, 3),
                pos(6, "U", 2, 3),
                pos(7, "T", 3, 3),
            ],
            ["CON", "RUT", "CAR"],
        ),
        ([], []),
        (
            [Position(tile=Tile(id=4), x=1, y=2), Position(tile=Tile(id=5), x=1, y=3)],
            ["\x00\x00"],
        ),
    ],
)
def test_used_words(positions, want):
    assert board_of(positions).used_tile_words() == want


CONFIG_5 = BoardConfig(num_cols=5, num_rows=5)


@pytest.mark.parametrize(
    "positions, unused, want",
    [
        ([], [], True),
        ([], [Tile(id=1)], False),
        ([pos(5, "A", 7, 2), pos(4, "B", 7, 3)], [], True),
        ([pos(5, "A", 7, 2), pos(4, "B", 7, 4)], [], False),
        (
            [
                pos(1, "C", 1, 1),
                pos(2, "O", 2, 1),
                pos(3, "N", 3, 1),
                pos(4, "A", 1, 2),
                pos(5, "R", 1, 3),
                pos(6, "U", 2, 3),
                pos(7, "T", 3, 3),
            ],
            [],
            True,
        ),
    ],
)
def test_can_be_finished(positions, unused, want):
    assert board_of(positions, unused, CONFIG_5).can_be_finished() is want


def test_move_tiles_swap():
    board = Board(config=BoardConfig(num_cols=3, num_rows=3))
    t1, t2 = Tile(id=1), Tile(id=2)
    board.add_tile(t1)
    board.add_tile(t2)
    board.move_tiles({1: Position(t1, 1, 1), 2: Position(t2, 2, 2)})
    board.move_tiles({1: Position(t1, 2, 2), 2: Position(t2, 1, 1)})
    assert len(board.used_tile_locs) == 2
    assert board.used_tile_locs == {1: {1: t2}, 2: {2: t1}}


CONFIG_10 = BoardConfig(num_cols=10, num_rows=10)


@pytest.mark.parametrize(
    "moves, board",
    [
        ([Position(Tile(id=1))], Board()),
        (
            [Position(Tile(id=1)), Position(Tile(id=2))],
            Board(unused_tiles={1: Tile(id=1), 2: Tile(id=2)}, unused_tile_ids=[1, 2]),
        ),
        (
            [Position(Tile(id=1), 2, 3)],
            Board(
                unused_tiles={1: Tile(id=1)},
                unused_tile_ids=[1],
                used_tiles={4: Position(Tile(id=4), 2, 3)},
                used_tile_locs={2: {3: Tile(id=4)}},
            ),
        ),
        (
            [Position(Tile(id=1), 2, 99)],
            Board(unused_tiles={1: Tile(id=1)}, unused_tile_ids=[1]),
        ),
    ],
)
def test_move_tiles_errors(moves, board):
    board.config = CONFIG_10
    before = Board(
        unused_tiles=dict(board.unused_tiles),
        unused_tile_ids=list(board.unused_tile_ids),
        used_tiles=dict(board.used_tiles),
        used_tile_locs={x: dict(c) for x, c in board.used_tile_locs.items()},
        config=CONFIG_10,
    )
    with pytest.raises(ValueError):
        board.move_tiles({p.tile.id: p for p in moves})
    assert board == before


def test_move_tiles_ok():
    board = Board(
        unused_tiles={1: Tile(id=1)},
        unused_tile_ids=[1],
        used_tiles={2: Position(Tile(id=2), 2, 4)},
        used_tile_locs={2: {4: Tile(id=2)}},
        config=CONFIG_10,
    )
    board.move_tiles({1: Position(Tile(id=1), 2, 3)})
    assert board.unused_tiles == {}
    assert board.unused_tile_ids == []
    assert board.used_tile_locs == {2: {3: Tile(id=1), 4: Tile(id=2)}}
    assert board.used_tiles[1] == Position(Tile(id=1), 2, 3)


def test_remove_tile_missing():
    with pytest.raises(ValueError):
        Board().remove_tile(Tile(id=0))


def test_remove_unused_tile_only():
    board = Board(unused_tiles={1: Tile(id=1)}, unused_tile_ids=[1])
    board.remove_tile(Tile(id=1))
    assert board.unused_tiles == {}
    assert board.unused_tile_ids == []


def test_remove_used_tile():
    board = Board(
        unused_tiles={1: Tile(id=1)},
        unused_tile_ids=[1],
        used_tiles={2: Position(Tile(id=2), 8, 9)},
        used_tile_locs={8: {9: Tile(id=2)}},
    )
    board.remove_tile(Tile(id=2))
    assert board.unused_tiles == {1: Tile(id=1)}
    assert board.unused_tile_ids == [1]
    assert board.used_tiles == {}
    assert board.used_tile_locs == {}


def test_remove_unused_tile_from_middle():
    board = Board(
        unused_tiles={1: Tile(id=1), 5: Tile(id=5), 3: Tile(id=3)},
        unused_tile_ids=[1, 3, 5],
    )
    board.remove_tile(Tile(id=3))
    assert board.unused_tiles == {1: Tile(id=1), 5: Tile(id=5)}
    assert board.unused_tile_ids == [1, 5]


T1, T2, T3 = Tile(1, "A"), Tile(2, "B"), Tile(3, "C")


@pytest.mark.parametrize(
    "delta_cols, delta_rows, want_tile2_unused",
    [(0, 0, False), (-10, 0, True), (10, 0, False), (0, -7, True), (0, -4, False)],
)
def test_resize(delta_cols, delta_rows, want_tile2_unused):
    config = BoardConfig(num_cols=20, num_rows=10)
    board = config.new_board([T1, T2, T3])
    board.move_tiles(
        {1: Position(T1, 1, 1), 2: Position(T2, 15, 5), 3: Position(T3, 2, 1)}
    )
    new_config = BoardConfig(num_cols=20 + delta_cols, num_rows=10 + delta_rows)
    result = board.resize(new_config)
    assert board.config == new_config
    if want_tile2_unused:
        assert board.unused_tile_ids == [2]
        assert [t.id for t in result.tiles] == [2]
        assert result.info
    else:
        assert board.unused_tile_ids == []
        assert result.tiles == []
        assert result.info == ""


def test_resize_orders_positions_top_down():
    board = BoardConfig(num_cols=20, num_rows=10).new_board([T1, T2, T3])
    board.move_tiles({1: Position(T1, 1, 1), 2: Position(T2, 15, 5), 3: Position(T3, 2, 1)})
    result = board.resize(BoardConfig(num_cols=20, num_rows=10))
    assert result.tile_positions == [
        Position(T2, 15, 5),
        Position(T1, 1, 1),
        Position(T3, 2, 1),
    ]


def test_from_tiles():
    board = from_tiles([Tile(1, "A")], [Position(Tile(2, "B"), 3, 4)])
    assert board == Board(
        unused_tiles={1: Tile(1, "A")},
        unused_tile_ids=[1],
        used_tiles={2: Position(Tile(2, "B"), 3, 4)},
        used_tile_locs={3: {4: Tile(2, "B")}},
    )


BASIC_JSON = (
    '{"tiles":[{"id":1,"ch":"A"}],'
    '"tilePositions":[{"t":{"id":2,"ch":"B"},"x":3,"y":4}],'
    '"config":{"r":17,"c":22}}'
)


def basic_board():
    return Board(
        unused_tiles={1: Tile(1, "A")},
        unused_tile_ids=[1],
        used_tiles={2: Position(Tile(2, "B"), 3, 4)},
        used_tile_locs={3: {4: Tile(2, "B")}},
        config=BoardConfig(num_rows=17, num_cols=22),
    )


def test_marshal_basic():
    assert basic_board().to_json() == BASIC_JSON


def test_marshal_ordered_tiles():
    t = {i: Tile(i, ch) for i, ch in enumerate("ABCDEFGHI", start=1)}
    board = Board(
        used_tiles={
            2: Position(t[2], 2, 3),
            3: Position(t[3], 3, 2),
            1: Position(t[1], 1, 4),
            5: Position(t[5], 2, 2),
            6: Position(t[6], 3, 1),
            4: Position(t[4], 2, 1),
        },
        used_tile_locs={3: {1: t[6], 6: t[3]}, 1: {4: t[1]}, 2: {1: t[4], 3: t[2], 2: t[5]}},
        unused_tiles={7: t[7], 9: t[9], 8: t[8]},
        unused_tile_ids=[9, 7, 8],
    )
    unused = '{"id":9,"ch":"I"},{"id":7,"ch":"G"},{"id":8,"ch":"H"}'
    used = (
        '{"t":{"id":1,"ch":"A"},"x":1,"y":4},'
        '{"t":{"id":4,"ch":"D"},"x":2,"y":1},'
        '{"t":{"id":5,"ch":"E"},"x":2,"y":2},'
        '{"t":{"id":2,"ch":"B"},"x":2,"y":3},'
        '{"t":{"id":6,"ch":"F"},"x":3,"y":1},'
        '{"t":{"id":3,"ch":"C"},"x":3,"y":2}'
    )
    assert board.to_json() == '{"tiles":[' + unused + '],"tilePositions":[' + used + "]}"


def test_marshal_empty_board():
    assert Board().to_json() == "{}"


def test_unmarshal_bad_tiles():
    with pytest.raises(ValueError):
        Board.from_json('{"tiles":"NOT_AN_ARRAY"}')


def test_unmarshal_bad_json():
    with pytest.raises(ValueError):
        Board.from_json("{not json")


def test_unmarshal():
    assert Board.from_json(BASIC_JSON) == basic_board()


def test_json_round_trip():
    board = basic_board()
    assert Board.from_json(board.to_json()) == board