from wordwrap.pack import break_chunk, break_chunks, pack_chunks

RED = "\x1b[31m"
RESET = "\x1b[0m"


def test_pack_fills_line_up_to_width():
    chunks = ["the", " ", "quick", " ", "brown", " ", "fox"]
    assert pack_chunks(chunks, 10) == ["the quick ", "brown fox"]


def test_pack_exact_fit_stays_on_line():
    assert pack_chunks(["abc", " ", "def"], 7) == ["abc def"]


def test_oversized_first_chunk_leaves_empty_first_line():
    assert pack_chunks(["abcdefghijkl"], 5) == ["", "abcdefghijkl"]


def test_chunk_after_oversized_chunk_starts_new_line():
    assert pack_chunks(["abcdefgh", " ", "x"], 5) == ["", "abcdefgh", " x"]


def test_no_chunks_gives_single_empty_line():
    assert pack_chunks([], 10) == [""]


def test_non_positive_width_puts_every_chunk_on_its_own_line():
    assert pack_chunks(["a", " ", "b"], 0) == ["", "a", " ", "b"]
    assert pack_chunks(["a", "b"], -4) == ["", "a", "b"]


def test_pack_measures_visible_width():
    chunks = [RED + "red" + RESET, " ", "fox"]
    assert pack_chunks(chunks, 7) == [RED + "red" + RESET + " fox"]


def test_break_chunk_splits_into_width_pieces():
    assert break_chunk("abcdefghij", 3) == ["abc", "def", "ghi", "j"]


def test_break_chunk_leaves_fitting_chunk_alone():
    assert break_chunk("abc", 3) == ["abc"]
    assert break_chunk(RED + "ab" + RESET, 2) == [RED + "ab" + RESET]


def test_break_chunk_cuts_raw_characters():
    chunk = RED + "abc" + RESET
    pieces = break_chunk(chunk, 2)
    assert all(len(piece) <= 2 for piece in pieces)
    assert "".join(pieces) == chunk


def test_break_chunk_ignores_non_positive_width():
    assert break_chunk("abcdef", 0) == ["abcdef"]
    assert break_chunk("abcdef", -1) == ["abcdef"]


def test_break_chunks_flattens_pieces():
    assert break_chunks(["ab", " ", "cdef"], 2) == ["ab", " ", "cd", "ef"]
