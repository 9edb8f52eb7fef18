import pytest

from segment import Analyzer, Filter, Transformer, TokenizationError, ensure_punkt


class StubTokenizer:
    """Whitespace splitting, so pipeline tests do not depend on nltk heuristics."""
    def tokenize(self, text: str) -> list[str]:
        return text.split()


class FailingTokenizer:
    def tokenize(self, text: str) -> list[str]:
        raise TokenizationError(f'cannot tokenize input: {text!r}')


class RecordingTransformer(Transformer):
    def __init__(self):
        self.calls = []

    def lowercase(self, tokens):
        self.calls.append(list(tokens))
        return super().lowercase(tokens)


needs_punkt = pytest.mark.skipif(not ensure_punkt(), reason = 'punkt_tab model not installed')


@pytest.fixture
def analyzer() -> Analyzer:
    if not ensure_punkt(): pytest.skip("punkt_tab model not installed")
    return Analyzer()


@pytest.fixture
def stub_analyzer() -> Analyzer:
    return Analyzer(tokenizer = StubTokenizer())


@pytest.fixture
def english_filter() -> Filter:
    return Filter()
