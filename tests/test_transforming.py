import pytest

from segment import Transformer


@pytest.mark.parametrize('tokens, want', [
    (
        ["Her", "son", ",", "John", "Jones", "Jr.", ",", "was", "born", "on", "Dec.", "6", ",", "2008", "."],
        ["her", "son", ",", "john", "jones", "jr.", ",", "was", "born", "on", "dec.", "6", ",", "2008", "."],
    ),
    (
        ["When", "did", "Jane", "leave", "for", "the", "market", "?"],
        ["when", "did", "jane", "leave", "for", "the", "market", "?"],
    ),
    (
        ['"', "Holy", "cow", "!", '"', "screamed", "Jane", "."],
        ['"', "holy", "cow", "!", '"', "screamed", "jane", "."],
    ),
    (
        ["He", "[", "Mr.", "Jones", "]", "was", "the", "last", "person", "seen", "at", "the", "house", "."],
        ["he", "[", "mr.", "jones", "]", "was", "the", "last", "person", "seen", "at", "the", "house", "."],
    ),
    (
        ['"', "Do", "n't", "go", "outside", ",", '"', "she", "said", "."],
        ['"', "do", "n't", "go", "outside", ",", '"', "she", "said", "."],
    ),
    (
        ["He", "gave", "him", "her", "answer", "—", "No", "!"],
        ["he", "gave", "him", "her", "answer", "—", "no", "!"],
    ),
    (["He", "SAID"], ["he", "said"]),
    (["ÉCOLE", "Straße"], ["école", "straße"]),
    ([], []),
])
def test_lowercase(tokens, want):
    assert Transformer().lowercase(tokens) == want


def test_lowercase_keeps_input_untouched():
    tokens = ["Mr.", "Jones"]
    lowered = Transformer.lowercase(tokens)
    assert lowered == ["mr.", "jones"]
    assert tokens == ["Mr.", "Jones"]


def test_lowercase_passes_through_non_alphabetic():
    tokens = ["2008", ".", "flesh-colored", "n't"]
    assert Transformer.lowercase(tokens) == tokens


def test_ascii_fold():
    assert Transformer.ascii_fold(["café", "naïve", "2008"]) == ["cafe", "naive", "2008"]


def test_ascii_fold_keeps_length():
    tokens = ["pizza", "🙂", "déjà"]
    folded = Transformer.ascii_fold(tokens)
    assert len(folded) == len(tokens)
    assert folded[0] == "pizza"
    assert folded[2] == "deja"
