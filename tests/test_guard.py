from quizbot.quiz import find_duplicate, is_duplicate, parse_quiz


def _history(question):
    return parse_quiz({
        "subject": "History",
        "questions": [
            {"question": question, "options": ["1066", "1215", "1492", "1776"], "answer": "A"},
        ],
    })


def test_nothing_is_a_duplicate_of_an_empty_library():
    assert is_duplicate(_history("What year?"), []) is False


def test_whitespace_and_case_variants_are_duplicates():
    assert is_duplicate(_history(" What year? "), [_history("what year?")]) is True


def test_different_content_is_not_a_duplicate():
    assert is_duplicate(_history("What year?"), [_history("Which king?")]) is False


def test_stored_rows_are_compared_by_signature():
    rows = [
        {"subject": "History", "questions": [
            {"question": "Which king?", "options": ["a", "b", "c", "d"], "answer": "B"}]},
        _history("WHAT YEAR?").to_dict(),
    ]
    assert find_duplicate(_history("What year?"), rows) is rows[1]
