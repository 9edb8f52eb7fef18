"""
English text normalization: tokenize, lowercase, drop punctuation and stopwords.
"""

from segment.tokenizing import Tokenizer, TokenizationError, ensure_punkt
from segment.transforming import Transformer
from segment.filtering import Filter, PUNCTUATION, STOPWORDS
from segment.analyzing import Analyzer
