import os, sys
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

import main

SMALL = ["--seed", "4", "--width", "24", "--height", "24", "--cities", "1", "--villages", "2", "--hamlets", "2"]


def test_summary_output(capsys):
    assert main.main(SMALL) == 0
    out = capsys.readouterr().out
    assert "World 24x24, seed 4" in out
    assert "Road tiles:" in out
    assert "Start tile:" in out


def test_path_query(capsys):
    assert main.main(SMALL + ["--path", "12,12", "12,12"]) == 0
    assert "0 steps" in capsys.readouterr().out


def test_path_out_of_bounds():
    assert main.main(SMALL + ["--path", "0,0", "99,99"]) == 2


def test_parse_coord():
    assert main.parse_coord("3,7") == (3, 7)
