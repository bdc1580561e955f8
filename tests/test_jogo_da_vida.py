import io
import itertools

import pytest

from praticas.jogo_da_vida import InvalidCellError, JogoDaVida, main


def _cells(game):
    return {
        (i, j)
        for i in range(game.rows())
        for j in range(game.columns())
        if game.is_alive(i, j)
    }


def test_new_board_is_dead():
    t = JogoDaVida(3, 3)
    for i, j in itertools.product(range(3), range(3)):
        assert t.is_alive(i, j) is False


def test_dimensions():
    t = JogoDaVida(4, 7)
    assert t.rows() == 4
    assert t.columns() == 7


@pytest.mark.parametrize("rows,columns", [(0, 3), (3, 0), (-1, 2)])
def test_invalid_size_rejected(rows, columns):
    with pytest.raises(ValueError):
        JogoDaVida(rows, columns)


def test_revive_upper_triangle():
    t = JogoDaVida(3, 3)
    for i, j in itertools.product(range(3), range(3)):
        if i < j:
            t.revive(i, j)
    for i, j in itertools.product(range(3), range(3)):
        assert t.is_alive(i, j) == (i < j)


def test_kill_upper_triangle():
    t = JogoDaVida(3, 3)
    for i, j in itertools.product(range(3), range(3)):
        t.revive(i, j)
        assert t.is_alive(i, j)
    for i, j in itertools.product(range(3), range(3)):
        if i < j:
            t.kill(i, j)
    for i, j in itertools.product(range(3), range(3)):
        assert t.is_alive(i, j) != (i < j)


def _glider():
    t = JogoDaVida(5, 5)
    for cell in [(1, 2), (2, 3), (3, 1), (3, 2), (3, 3)]:
        t.revive(*cell)
    return t


def test_step_glider():
    t = _glider()
    p = JogoDaVida(5, 5)
    for cell in [(2, 1), (2, 3), (3, 2), (3, 3), (4, 2)]:
        p.revive(*cell)
    t.step()
    for i, j in itertools.product(range(5), range(5)):
        assert t.is_alive(i, j) == p.is_alive(i, j)


def test_glider_wraps_back_after_full_cycle():
    t = _glider()
    start = _cells(t)
    t.run(20)  # 4 generations per diagonal shift, 5 shifts around the torus
    assert _cells(t) == start


def test_run_matches_repeated_steps():
    a, b = _glider(), _glider()
    a.run(3)
    for _ in range(3):
        b.step()
    assert _cells(a) == _cells(b)


def test_run_zero_leaves_board():
    t = _glider()
    before = _cells(t)
    t.run(0)
    assert _cells(t) == before


def test_block_is_still_life():
    t = JogoDaVida(6, 6)
    block = {(2, 2), (2, 3), (3, 2), (3, 3)}
    for cell in block:
        t.revive(*cell)
    t.run(5)
    assert _cells(t) == block


def test_invalid_cells_raise():
    rows = columns = 3
    t = JogoDaVida(rows, columns)
    for i in range(-1, rows + 1):
        for j in range(-1, columns + 1):
            if i < 0 or j < 0 or i == rows or j == columns:
                for action in (t.revive, t.kill, t.is_alive):
                    with pytest.raises(InvalidCellError) as info:
                        action(i, j)
                    assert (info.value.row, info.value.column) == (i, j)
            else:
                t.revive(i, j)
                assert t.is_alive(i, j) is True
                t.kill(i, j)
                assert t.is_alive(i, j) is False


def test_invalid_cell_error_is_index_error():
    with pytest.raises(IndexError):
        JogoDaVida(2, 2).revive(5, 0)


def test_str_layout():
    t = JogoDaVida(2, 3)
    t.revive(0, 1)
    expected = (
        "  X X X \n"
        "X   o   X\n"
        "X       X\n"
        "  X X X \n"
    )
    assert str(t) == expected


def test_main_prints_initial_and_generations(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2 3 0 1"))
    assert main(["--delay", "0"]) == 0
    out = capsys.readouterr().out
    initial = JogoDaVida(2, 3)
    initial.revive(0, 1)
    after = JogoDaVida(2, 3)
    after.revive(0, 1)
    after.step()
    assert out == str(initial) + "\n" + str(after) + "\n"


def test_main_invalid_cell_abort(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 2 2 5 5 n"))
    assert main(["--delay", "0"]) == 1
    out = capsys.readouterr().out
    assert "Célula (5, 5) não é válida." in out


def test_main_invalid_cell_ignored(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 2 2 5 5 x s 1 1"))
    assert main(["--delay", "0"]) == 0
    out = capsys.readouterr().out
    expected = JogoDaVida(2, 2)
    expected.revive(1, 1)
    assert out.count("Deseja continuar") == 2
    assert out.endswith(str(expected) + "\n")


def test_main_bad_header(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc"))
    assert main(["--delay", "0"]) == 1
    assert "expected an integer" in capsys.readouterr().err