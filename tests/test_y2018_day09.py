import pytest

from adventsolve.y2018.day09 import main, play_marbles


def test_default_game_score():
    assert play_marbles(9, 25) == 32


def test_marbles_after_scoring_turn_do_not_score():
    assert play_marbles(9, 23) == play_marbles(9, 25)


@pytest.mark.parametrize("players", [1, 5, 9])
def test_no_score_before_first_multiple_of_23(players):
    assert play_marbles(players, 22) == 0


@pytest.mark.parametrize("last", [50, 100, 200])
def test_single_player_collects_at_least_the_winner_score(last):
    assert play_marbles(7, last) <= play_marbles(1, last)


def test_single_player_score_never_decreases():
    scores = [play_marbles(1, last) for last in range(0, 120, 7)]
    assert scores == sorted(scores)


def test_no_players_rejected():
    with pytest.raises(ValueError):
        play_marbles(0, 25)


def test_main_reports_score(capsys):
    main(["-players", "9", "-marble", "25", "-part", "a"])
    assert capsys.readouterr().out == "Part a - Winning Elf's score: 32\n"


def test_main_rejects_zero_players(capsys):
    main(["-players", "0"])
    assert capsys.readouterr().out == "Minimum players: 1\n"