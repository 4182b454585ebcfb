import json

import pytest

from vnwordle.dictionary import MemoryDictionary

SENSE = {"example": "", "sub_pos": "", "definition": "", "pos": "N"}

WORDS = [
    "Việt Nam",
    "việt hoá",
    "Việt ngữ",
    "việt",
    "Đà Nẵng",
    "con mèo",
    "cân",
    "sân",
    "tan",
    "mạn",
    "ăn",
    "đường  phố",
]

@pytest.fixture
def entries():
    return {word: [dict(SENSE)] for word in WORDS}

@pytest.fixture
def dictionary(entries):
    return MemoryDictionary(entries)

@pytest.fixture
def cache_file(tmp_path, entries):
    path = tmp_path / "dict_cache.json"
    path.write_text(json.dumps(entries, ensure_ascii=False), encoding="utf-8")
    return path
