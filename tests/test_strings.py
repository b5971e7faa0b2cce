from cargo_tools.strings import capitalize, reverse, validate_email, word_count


def test_capitalize():
    assert capitalize("hello") == "Hello"
    assert capitalize("") == ""


def test_capitalize_leaves_rest_unchanged():
    assert capitalize("hELLO wORLD") == "HELLO wORLD"
    assert capitalize("1abc") == "1abc"


def test_capitalize_uses_full_unicode_mapping():
    assert capitalize("éclair") == "Éclair"
    assert capitalize("ßtraße") == "SStraße"


def test_reverse():
    assert reverse("hello") == "olleh"
    assert reverse("") == ""
    assert reverse("añb") == "bña"


def test_word_count():
    assert word_count("hello world test") == 3
    assert word_count("  a   b ") == 2
    assert word_count("") == 0
    assert word_count("one\ttwo\nthree") == 3


def test_word_count_matches_unicode_whitespace():
    # Information separators are not whitespace
    assert word_count("a\x1fb") == 1
    assert word_count("a\x1cb c") == 2
    assert word_count("a\u3000b\xa0c\u2028d") == 4


def test_validate_email_is_a_coarse_check():
    assert validate_email("test@example.com") is True
    assert validate_email("invalid-email") is False
    assert validate_email("a@b") is False
    assert validate_email("no-at.example.com") is False
    # Order and position are not checked
    assert validate_email(".@") is True
