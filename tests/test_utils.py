import json

import pytest

from geovaluate.core.utils import fnv1a_32, normalize_address, seeded_rand, strip_code_fences

BODY = '{"listings": [{"project_name": "X", "developer": "Y", "details": "Z", "source_url": "http://a"}]}'

@pytest.mark.parametrize("wrapped", [
    BODY,
    f"```json\n{BODY}\n```",
    f"```\n{BODY}\n```",
    f"  ```JSON\n{BODY}\n```  \n",
    f"```json{BODY}```",
])
def test_strip_code_fences_matches_unwrapped(wrapped):
    assert json.loads(strip_code_fences(wrapped)) == json.loads(BODY)

def test_strip_code_fences_is_idempotent():
    once = strip_code_fences(f"```json\n{BODY}\n```")
    assert strip_code_fences(once) == once == BODY

def test_strip_code_fences_keeps_inner_backticks():
    text = '```json\n{"details": "uses `quotes`"}\n```'
    assert json.loads(strip_code_fences(text)) == {"details": "uses `quotes`"}

def test_normalize_address():
    assert normalize_address("  Erode,   Tamil   Nadu ") == "erode, tamil nadu"

def test_seeded_rand_is_deterministic():
    seed = fnv1a_32("erode")
    assert seeded_rand(seed, 3) == seeded_rand(seed, 3)
    assert all(0.0 <= r < 1.0 for r in seeded_rand(seed, 10))
