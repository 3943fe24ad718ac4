import io

from carddeck.cards import Deck, new_deck
from carddeck.display import format_deck, print_deck


def test_format_deck_prefixes_zero_based_positions() -> None:
    lines = format_deck(new_deck())
    assert lines[0] == "0 Ace of Spades"
    assert lines[15] == "15 Four of Clubs"
    assert len(lines) == 16


def test_print_deck_writes_to_stream() -> None:
    stream = io.StringIO()
    print_deck(Deck(cards=["Ace of Spades", "Two of Spades"]), stream=stream)
    assert stream.getvalue() == "0 Ace of Spades\n1 Two of Spades\n"


def test_deck_print_defaults_to_stdout(capsys) -> None:
    Deck(cards=["Four of Hearts"]).print()
    assert capsys.readouterr().out == "0 Four of Hearts\n"


def test_empty_deck_prints_nothing() -> None:
    stream = io.StringIO()
    Deck(cards=[]).print(stream=stream)
    assert stream.getvalue() == ""
