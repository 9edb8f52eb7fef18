"""
Word tokenization on top of NLTK's Treebank-style tokenizer.
"""

import nltk
from nltk.tokenize import NLTKWordTokenizer


# typographic quotes -> ascii so the engine splits "don’t" like "don't"
quote_table = str.maketrans({
    '‘': "'",
    '’': "'",
    '“': '"',
    '”': '"',
})


class TokenizationError(Exception):
    """Raised when the engine cannot segment the input."""


def ensure_punkt(quiet: bool = True) -> bool:
    """Fetches the Punkt sentence model if it is not installed yet."""
    try:
        nltk.data.find('tokenizers/punkt_tab')
        return True
    except LookupError:
        return nltk.download('punkt_tab', quiet = quiet)


class Tokenizer:
    def __init__(self, split_sentences: bool = True, language: str = 'english', fold_quotes: bool = True) -> None:
        self.split_sentences = split_sentences
        self.language = language
        self.fold_quotes = fold_quotes
        self.engine = NLTKWordTokenizer()
        if split_sentences: ensure_punkt()

    def tokenize(self, text: str | bytes) -> list[str]:
        try:
            if isinstance(text, bytes): text = text.decode('utf-8')
            if self.fold_quotes: text = text.translate(quote_table)
            sentences = nltk.sent_tokenize(text, self.language) if self.split_sentences else [text]
            return [token for sentence in sentences for token in self.engine.tokenize(sentence)]
        except (UnicodeDecodeError, LookupError, TypeError, AttributeError) as e:
            raise TokenizationError(f'cannot tokenize input: {e}') from e

    def __call__(self, text: str | bytes) -> list[str]:
        return self.tokenize(text)
