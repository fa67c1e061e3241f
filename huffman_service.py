# filename: huffman_service.py

import logging
from dataclasses import dataclass
from typing import Any, Dict

from huffman_core import EmptyInput, HuffmanLogic, HuffmanNode, count_frequencies, encode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncodingResult:
    frequencies: Dict[Any, int]
    tree: HuffmanNode
    codes: Dict[Any, str]
    encoded: str

    @property
    def bit_length(self):
        return len(self.encoded)

    @property
    def symbol_count(self):
        return self.tree.freq

    @property
    def average_code_length(self):
        """Mean bits per input symbol."""
        return self.bit_length / self.symbol_count


class HuffmanService:
    def __init__(self):
        self.logic = HuffmanLogic()

    def compress(self, data):
        if not data:
            raise EmptyInput()
        freqs = count_frequencies(data)
        tree = self.logic.build_tree(freqs)
        codes = self.logic.generate_codes(tree)
        encoded = encode(data, codes)
        logger.debug("encoded %d symbols into %d bits", len(data), len(encoded))
        return EncodingResult(
            frequencies=dict(freqs),
            tree=tree,
            codes=codes,
            encoded=encoded,
        )
