import logging
import textwrap

import pytest

from lineupcard.roster import read_roster


def write_csv(tmp_path, text, name="roster.csv"):
    path = tmp_path / name
    path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return path


def test_starters_and_bench_split_by_role(tmp_path):
    path = write_csv(tmp_path, """
        Number,Surname,Captain,Role
        1,Onana,,starter
        5,Maguire,yes,starter
        8,Fernandes,,
        12,Bayindir,,sub
        14,Eriksen,,Bench
    """)
    starters, bench = read_roster(str(path))
    assert [(p.number, p.surname) for p in starters] == [(1, "Onana"), (5, "Maguire"), (8, "Fernandes")]
    assert [(p.number, p.surname) for p in bench] == [(12, "Bayindir"), (14, "Eriksen")]
    assert [p.is_captain for p in starters] == [False, True, False]


def test_alternate_headers_without_role(tmp_path):
    path = write_csv(tmp_path, """
        no ,  Player
        9, Hojlund
        10 ,Rashford
    """)
    starters, bench = read_roster(str(path))
    assert [(p.number, p.surname) for p in starters] == [(9, "Hojlund"), (10, "Rashford")]
    assert bench == ()


def test_invalid_rows_are_skipped(tmp_path, caplog):
    path = write_csv(tmp_path, """
        number,surname
        1,Onana
        ,Dalot
        abc,Varane
        4,
        0,Shaw
        6,Casemiro
    """)
    with caplog.at_level(logging.INFO, logger="lineupcard.roster"):
        starters, _ = read_roster(str(path))
    assert [p.surname for p in starters] == ["Onana", "Casemiro"]
    assert any("skipped 4 row" in r.getMessage() for r in caplog.records)


def test_duplicate_numbers_keep_first_per_side(tmp_path):
    path = write_csv(tmp_path, """
        number,surname,role
        7,Mount,starter
        7,Antony,starter
        7,Amrabat,sub
    """)
    starters, bench = read_roster(str(path))
    assert [p.surname for p in starters] == ["Mount"]
    assert [p.surname for p in bench] == ["Amrabat"]


def test_one_captain_per_side(tmp_path):
    path = write_csv(tmp_path, """
        number,surname,captain,role
        1,Onana,1,starter
        2,Dalot,1,starter
        12,Bayindir,1,sub
        13,Evans,true,sub
    """)
    starters, bench = read_roster(str(path))
    assert [p.is_captain for p in starters] == [True, False]
    assert [p.is_captain for p in bench] == [True, False]


def test_missing_columns(tmp_path):
    path = write_csv(tmp_path, """
        shirt_size,club
        M,United
    """)
    with pytest.raises(ValueError, match="number and a surname"):
        read_roster(str(path))


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_roster(str(tmp_path / "nope.csv"))
