from product_crawler.utils.filenames import sanitize_filename


def test_punctuation_and_non_ascii_letters_are_removed() -> None:
    assert sanitize_filename("Tkanina Misie 100% bawełna!") == "Tkanina_Misie_100_bawena"


def test_whitespace_runs_become_one_underscore() -> None:
    assert sanitize_filename("a  \t b\nc") == "a_b_c"


def test_hyphens_and_underscores_are_kept() -> None:
    assert sanitize_filename("minky-kropki_xl") == "minky-kropki_xl"


def test_sanitizing_twice_changes_nothing() -> None:
    for title in ["Tkanina Misie 100% bawełna!", "  (nowość)  Minky / Kropki  ", "już-_-gotowe"]:
        once = sanitize_filename(title)
        assert sanitize_filename(once) == once
