"""Tests for the lookup driver."""

from vnwordle.dictionary import MemoryDictionary
from vnwordle.lookup import find, Lookup


class TestFind:
    def test_keeps_original_spelling(self, entries):
        assert list(find(entries, "viet ***")) == ["Việt Nam", "việt hoá", "Việt ngữ"]

    def test_dictionary_order(self, entries):
        assert list(find(entries, "*an")) == ["cân", "sân", "tan", "mạn"]

    def test_query_with_diacritics(self, entries):
        assert list(find(entries, "Việt ngữ")) == ["Việt ngữ"]

    def test_excluded(self, entries):
        assert list(find(entries, "viet *** -h")) == ["Việt Nam", "Việt ngữ"]

    def test_required(self, entries):
        assert list(find(entries, "*** *** +u")) == []
        assert list(find(entries, "***** *** +u")) == ["đường  phố"]

    def test_legacy(self, entries):
        assert list(find(entries, "3-3")) == ["con mèo"]
        assert list(find(entries, "2-4-n")) == ["Đà Nẵng"]
        assert list(find(entries, "4-3-ng")) == ["Việt ngữ"]

    def test_no_matches(self, entries):
        assert list(find(entries, "zzz")) == []

    def test_empty_dictionary(self):
        assert list(find({}, "viet ***")) == []
        assert list(find({}, "3-4-aug")) == []

    def test_generator_not_restartable(self, entries):
        found = find(entries, "*an")
        assert len(list(found)) == 4
        assert list(found) == []


class TestLookup:
    def test_load(self, dictionary, entries):
        lookup = Lookup(dictionary)
        assert lookup.words == entries
        assert lookup.length == len(entries)

    def test_find(self, dictionary):
        lookup = Lookup(dictionary)
        assert lookup.find("*an") == ["cân", "sân", "tan", "mạn"]
        assert lookup.find("*an", sort=True) == ["cân", "mạn", "sân", "tan"]

    def test_reload(self):
        provider = MemoryDictionary({"tan": []})
        lookup = Lookup(provider)
        provider.entries["san"] = []
        lookup.reload()
        assert lookup.find("*an", sort=True) == ["san", "tan"]

    def test_empty(self):
        lookup = Lookup(MemoryDictionary())
        assert lookup.length == 0
        assert lookup.find("viet ***") == []
