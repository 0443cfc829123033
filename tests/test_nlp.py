import time

from textorigin.nlp.sentence_splitter import TerminatorSentenceSplitter
from textorigin.nlp.tokeniser import WordTokeniser, count_words


def test_sentences_split_after_terminators():
    splitter = TerminatorSentenceSplitter()
    assert splitter.split_into_sentences("Hello there. How are you? Fine!") == [
        "Hello there.",
        " How are you?",
        " Fine!",
    ]


def test_runs_of_terminators_end_one_sentence():
    splitter = TerminatorSentenceSplitter()
    assert splitter.split_into_sentences("Wait... what?!") == ["Wait...", " what?!"]


def test_text_without_terminators_is_one_sentence():
    splitter = TerminatorSentenceSplitter()
    assert splitter.split_into_sentences("No terminator here") == [
        "No terminator here"
    ]
    assert splitter.split_into_sentences("") == [""]
    assert splitter.split_into_sentences("?!...") == ["?!..."]


def test_unterminated_tail_is_dropped():
    splitter = TerminatorSentenceSplitter()
    assert splitter.split_into_sentences("One. trailing words") == ["One."]


def test_words_are_lowercase_alphanumeric_runs():
    tokeniser = WordTokeniser()
    assert tokeniser.tokenise("Hello, World! It's results-driven_stuff 42.") == [
        "hello",
        "world",
        "it",
        "s",
        "results",
        "driven_stuff",
        "42",
    ]


def test_punctuation_and_non_ascii_letters_are_not_words():
    tokeniser = WordTokeniser()
    assert tokeniser.tokenise("... !!! ---") == []
    assert tokeniser.tokenise("Café") == ["caf"]


def test_count_words():
    assert count_words("  a  b\tc ") == 3
    assert count_words("") == 0


def test_terminators_only_text_is_one_sentence():
    splitter = TerminatorSentenceSplitter()
    assert splitter.split_into_sentences("...") == ["..."]
    assert splitter.split_into_sentences("... Then words.") == [" Then words."]


def test_long_run_on_text_is_split_in_linear_time():
    splitter = TerminatorSentenceSplitter()
    run_on = "word " * 20_000
    tail = "Short one. " + "tail " * 20_000

    start = time.perf_counter()
    assert splitter.split_into_sentences(run_on) == [run_on]
    assert splitter.split_into_sentences(tail) == ["Short one."]
    assert time.perf_counter() - start < 1.0
