import pytest

from termwordle.dictionary import Dictionary

WORDS = ["about", "badge", "brand", "crane", "crate", "light", "store", "tiger", "trace"]


@pytest.fixture
def dictionary():
    return Dictionary(WORDS)


@pytest.fixture
def dictfile(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(WORDS) + "\n")
    return path
