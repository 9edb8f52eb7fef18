"""

"""

from unidecode import unidecode


class Transformer:
    """Token-wise rewrites. Output always has the input's length and order."""

    @staticmethod
    def lowercase(tokens: list[str]) -> list[str]:
        return [token.lower() for token in tokens]

    @staticmethod
    def ascii_fold(tokens: list[str]) -> list[str]:
        return [unidecode(token) for token in tokens]
