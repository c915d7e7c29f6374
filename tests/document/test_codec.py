import pytest

from nicknamedb.document import codec


def test_decode_reads_every_token():
    assert codec.decode("menfie ^AFOO^bBAR", "^") == {"A": "FOO", "b": "BAR"}


def test_decode_last_duplicate_wins_but_find_value_returns_first():
    text = "nick ^Aone ^Atwo"

    assert codec.decode(text, "^") == {"A": "two"}
    assert codec.find_value(text, "A", "^") == "one"


def test_value_stops_at_whitespace_and_next_delimiter():
    assert codec.decode("^Afoo bar", "^") == {"A": "foo"}
    assert codec.decode("^Afoo^Bbar", "^") == {"A": "foo", "B": "bar"}


def test_malformed_tokens_are_plain_text():
    text = "a ^ b ^ ^-x"

    assert codec.decode(text, "^") == {}
    assert codec.strip_tokens(text, "^") == text


def test_encode_trims_residual_and_appends_tokens():
    out = codec.encode("  hello  world ^Ax ", {"b": "y"}, "^")

    assert out == "hello  world ^by"


def test_encode_with_no_attributes_keeps_separator():
    assert codec.encode("menfie ^AFOO", {}, "^") == "menfie "


@pytest.mark.parametrize("delimiter", ["$", "]", "-", "|", "."])
def test_regex_special_delimiters(delimiter):
    text = codec.encode("nick", {"k": "v1", "z": "v2"}, delimiter)

    assert codec.decode(text, delimiter) == {"k": "v1", "z": "v2"}
    assert codec.strip_tokens(text, delimiter).strip() == "nick"


def test_other_delimiter_tokens_are_ignored():
    assert codec.decode("nick ^Afoo $Bbar", "$") == {"B": "bar"}


@pytest.mark.parametrize("delimiter", ["", "^^", "a", "_", "1", " ", "^\n"])
def test_validate_delimiter_rejects(delimiter):
    with pytest.raises(ValueError):
        codec.validate_delimiter(delimiter)


@pytest.mark.parametrize("key", ["", "AB", "^", " ", "-", "A\n"])
def test_validate_key_rejects(key):
    with pytest.raises(ValueError):
        codec.validate_key(key)


@pytest.mark.parametrize("value", ["", "a b", "a^b", "tab\there"])
def test_validate_value_rejects(value):
    with pytest.raises(ValueError):
        codec.validate_value(value, "^")


def test_validate_value_allows_punctuation_and_unicode():
    codec.validate_value("he/him", "^")
    codec.validate_value("ñandú", "^")
    codec.validate_value("$$", "^")
