from .linked_list import Chain
from .hash_map import ChainedHashTable
from .dictionary import StringDict

__all__ = [
    "Chain",
    "ChainedHashTable",
    "StringDict",
]
