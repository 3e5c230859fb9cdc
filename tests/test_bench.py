from loa.bench import POSITIONS, main, run_position
from loa.board import Board


def test_run_position():
    board = Board()
    result = run_position("Start", board, depth=1)
    assert set(result) == {"label", "move", "value", "nodes", "nps", "time_ms"}
    assert result["label"] == "Start"
    assert result["nodes"] == 37
    assert result["time_ms"] >= 1
    assert board == Board()


def test_positions_are_playable():
    for _, build in POSITIONS:
        assert not build().game_over()


def test_main_prints_table(capsys):
    main(["1"])
    out = capsys.readouterr().out
    assert "Position" in out
    for label, _ in POSITIONS:
        assert label in out
    assert "TOTAL" in out
