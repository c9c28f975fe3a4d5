import pytest

from dsakit.trie import Trie, main

WORDS = ["cat", "car", "cart", "dog", "done"]


@pytest.fixture
def dictionary():
    trie = Trie()
    for word in WORDS:
        trie.insert(word)
    return trie


@pytest.mark.parametrize("word", WORDS)
def test_inserted_words_found(dictionary, word):
    assert dictionary.search(word) is True
    assert word in dictionary


@pytest.mark.parametrize("word", ["do", "cats", "ca", ""])
def test_missing_words_not_found(dictionary, word):
    assert dictionary.search(word) is False


def test_size(dictionary):
    assert len(dictionary) == len(WORDS)


def test_duplicate_insert_keeps_size_and_count(dictionary):
    dictionary.insert("cat")
    assert len(dictionary) == len(WORDS)
    assert dictionary.count_prefix("") == len(WORDS)


def test_starts_with(dictionary):
    assert dictionary.starts_with("ca") is True
    assert dictionary.starts_with("do") is True
    assert dictionary.starts_with("tr") is False


@pytest.mark.parametrize("prefix", ["ca", "do", "car", "tr", "", "x"])
def test_count_matches_listing(dictionary, prefix):
    found = dictionary.find_all_with_prefix(prefix)
    assert dictionary.count_prefix(prefix) == len(found)
    assert sorted(found) == sorted(w for w in WORDS if w.startswith(prefix))


def test_prefix_listing(dictionary):
    assert sorted(dictionary.find_all_with_prefix("ca")) == ["car", "cart", "cat"]
    assert dictionary.find_all_with_prefix("tr") == []


def test_values_round_trip():
    trie = Trie()
    trie.insert_with_value("code", "Instructions for a computer")
    trie.insert_with_value("coder", "Someone who writes code")
    assert trie.search_with_value("code") == "Instructions for a computer"
    assert trie.search_with_value("coder") == "Someone who writes code"
    with pytest.raises(KeyError):
        trie.search_with_value("programmer")
    with pytest.raises(KeyError):
        trie.search_with_value("cod")


def test_insert_with_value_replaces():
    trie = Trie()
    trie.insert_with_value("key", 1)
    trie.insert_with_value("key", 2)
    assert trie.search_with_value("key") == 2
    assert len(trie) == 1


def test_plain_insert_then_value():
    trie = Trie()
    trie.insert("word")
    assert trie.search_with_value("word") is None
    trie.insert_with_value("word", "meaning")
    assert trie.search_with_value("word") == "meaning"
    assert len(trie) == 1


def test_delete_keeps_longer_words():
    trie = Trie()
    for word in ["apple", "app", "apricot", "banana", "band"]:
        trie.insert(word)
    assert trie.delete("app") is True
    assert trie.delete("banana") is True
    assert trie.delete("notexist") is False
    assert len(trie) == 3
    assert sorted(trie.find_all_with_prefix("ap")) == ["apple", "apricot"]
    assert trie.find_all_with_prefix("ban") == ["band"]
    assert trie.search("app") is False
    assert trie.starts_with("app") is True


def test_delete_prunes_branch(dictionary):
    assert dictionary.delete("done") is True
    assert dictionary.starts_with("don") is False
    assert dictionary.search("dog") is True
    assert dictionary.count_prefix("do") == 1


def test_delete_prefix_not_word(dictionary):
    assert dictionary.delete("ca") is False
    assert len(dictionary) == len(WORDS)
    assert dictionary.count_prefix("ca") == 3


def test_delete_twice(dictionary):
    assert dictionary.delete("cat") is True
    assert dictionary.delete("cat") is False
    assert len(dictionary) == len(WORDS) - 1


def test_delete_empty_word():
    trie = Trie()
    trie.insert("")
    assert trie.search("") is True
    assert trie.delete("") is False


def test_delete_all_then_empty(dictionary):
    for word in WORDS:
        assert dictionary.delete(word) is True
    assert len(dictionary) == 0
    assert dictionary.count_prefix("") == 0
    assert dictionary.starts_with("c") is False


def test_unicode_words():
    trie = Trie()
    trie.insert("héllo")
    assert trie.search("héllo") is True
    assert trie.delete("héllo") is True
    assert trie.search("héllo") is False


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "'cats' exists: false" in out
    assert "programmer: Not found in dictionary" in out
    assert "Deleting 'notexist': false" in out