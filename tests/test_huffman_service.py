import os
import sys
import random
import time

import pytest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

import huffman_core as hc
import huffman_service as hs
from reference_decoder import decode


def _get_service():
	return hs.HuffmanService()


def test_service_initializes_logic_attribute():
	svc = _get_service()
	assert isinstance(svc.logic, hc.HuffmanLogic)


def test_compress_known_text():
	result = _get_service().compress("abacabad")
	assert result.frequencies == {"a": 4, "b": 2, "c": 1, "d": 1}
	assert list(result.frequencies) == ["a", "b", "c", "d"]
	assert result.codes == {"a": "0", "b": "10", "c": "110", "d": "111"}
	assert result.encoded == "01001100100111"
	assert result.bit_length == 14
	assert result.symbol_count == 8
	assert result.average_code_length == pytest.approx(14 / 8)


def test_empty_input_raises():
	svc = _get_service()
	with pytest.raises(hc.EmptyInput):
		svc.compress("")
	with pytest.raises(hc.EmptyInput):
		svc.compress(b"")


def test_single_symbol_repeated():
	result = _get_service().compress("aaaa")
	assert result.tree.is_leaf
	assert result.codes == {"a": "0"}
	assert result.encoded == "0000"


def test_roundtrip_random_10kb():
	rng = random.Random(7)
	data = bytes(rng.getrandbits(8) for _ in range(10 * 1024))
	result = _get_service().compress(data)
	assert bytes(decode(result.encoded, result.tree)) == data


def test_roundtrip_all_bytes_once():
	data = bytes(range(256))
	result = _get_service().compress(data)
	# uniform frequencies over 256 symbols give a complete tree
	assert set(len(c) for c in result.codes.values()) == {8}
	assert bytes(decode(result.encoded, result.tree)) == data


def test_small_inputs():
	rng = random.Random(3)
	svc = _get_service()
	for n in (1, 2, 3):
		data = bytes(rng.getrandbits(8) for _ in range(n))
		result = svc.compress(data)
		assert bytes(decode(result.encoded, result.tree)) == data


def test_repeated_compress_is_deterministic():
	svc = _get_service()
	a = svc.compress("This is a test" * 100)
	b = svc.compress("This is a test" * 100)
	assert a.codes == b.codes
	assert a.encoded == b.encoded
	assert a.tree == b.tree


def test_service_holds_no_per_input_state():
	svc = _get_service()
	first = svc.compress("hello")
	svc.compress("completely different input")
	assert first.codes == _get_service().compress("hello").codes


def test_truncated_stream_fails_reference_decode():
	result = _get_service().compress("This is a test" * 10)
	with pytest.raises(ValueError):
		decode(result.encoded[:-1], result.tree)


def test_result_is_frozen():
	result = _get_service().compress("abc")
	with pytest.raises(AttributeError):
		result.encoded = ""


@pytest.mark.timeout(120)
def test_performance_1mb_text():
	rng = random.Random(0)
	alphabet = "etaoinshrdlu cmfwypvbgkqjxz"
	data = "".join(rng.choice(alphabet) for _ in range(1024 * 1024))
	t0 = time.time()
	result = _get_service().compress(data)
	dur = time.time() - t0
	assert result.symbol_count == len(data)
	print(f"Compression time for 1MB of text: {dur:.4f}s")
