"""
English analyzer: tokenize -> lowercase -> drop punctuation -> drop stopwords.
"""

import multiprocessing as mp
from typing import Iterable
from tqdm import tqdm

from segment.tokenizing import Tokenizer
from segment.transforming import Transformer
from segment.filtering import Filter


class Analyzer:
    def __init__(
            self,
            tokenizer: Tokenizer = None,
            transformer: Transformer = None,
            filter: Filter = None,
            fold_ascii: bool = False,
        ) -> None:
        self.tokenizer = tokenizer or Tokenizer()
        self.transformer = transformer or Transformer()
        self.filter = filter or Filter()
        self.fold_ascii = fold_ascii

    def analyze(self, text: str | bytes) -> list[str]:
        """
        Returns the content-bearing tokens of text in their original order.
        TokenizationError propagates untouched and no later stage runs.
        """
        tokens = self.tokenizer.tokenize(text)
        if self.fold_ascii:
            # romanizations may span several words ("我们" -> "Wo Men ")
            tokens = [part for token in self.transformer.ascii_fold(tokens) for part in token.split()]
        tokens = self.transformer.lowercase(tokens)
        return self.filter.stopwords(self.filter.punctuation(tokens))

    def analyze_many(self, texts: Iterable[str], processes: int = None, progress: bool = False) -> list[list[str]]:
        texts = list(texts)
        if processes == 1 or len(texts) < 2:
            return [self.analyze(text) for text in tqdm(texts, desc = 'Analyzing', disable = not progress)]
        with mp.Pool(processes) as p:
            return [tokens for tokens in tqdm(
                p.imap(self.analyze, texts, chunksize = 64),
                total = len(texts),
                desc = 'Analyzing',
                disable = not progress,
            )]

    def __call__(self, text: str | bytes) -> list[str]:
        return self.analyze(text)
