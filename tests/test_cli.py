from bermuda_solver.cli import main


def test_first_cell_run(capsys):
    assert main(["--rows", "1"]) == 0

    out = capsys.readouterr().out
    assert "16 pieces" in out
    assert "Solution number 4!" in out
    assert "Solution number 5!" not in out
    assert "4 solution(s) found" in out


def test_unique_and_capped(capsys):
    assert main(["--rows", "2", "--unique"]) == 0
    assert "17 solution(s) found" in capsys.readouterr().out

    assert main(["--rows", "2", "--max-solutions", "3"]) == 0
    assert "3 solution(s) found" in capsys.readouterr().out


def test_svg_output(tmp_path, capsys):
    target = tmp_path / "first.svg"
    assert main(["--rows", "1", "--svg", str(target)]) == 0
    assert target.exists()
    assert str(target) in capsys.readouterr().out


def test_bad_rows_is_a_usage_error(capsys):
    assert main(["--rows", "9"]) == 2
    assert "error:" in capsys.readouterr().err
