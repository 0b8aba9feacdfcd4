from quizbot.quiz import compute_signature, parse_quiz


def _quiz(subject, *questions):
    return parse_quiz({"subject": subject, "questions": list(questions)})


def _q(text, options, answer):
    return {"question": text, "options": options, "answer": answer}


def test_signature_format():
    quiz = _quiz("Colors", _q("Sky?", ["Red", "Blue", "Green", "Yellow"], "B"))
    assert compute_signature(quiz) == "colors::sky?|~|B|~|red|~|blue|~|green|~|yellow"


def test_signature_ignores_case_and_padding():
    a = _quiz("History", _q(" What year? ", ["1066", "1215", "1492", "1776"], "c"))
    b = _quiz("  history", _q("what year?", [" 1066", "1215 ", "1492", "1776"], "C"))
    assert compute_signature(a) == compute_signature(b)


def test_signature_is_order_sensitive():
    first = _q("One?", ["a", "b", "c", "d"], "A")
    second = _q("Two?", ["a", "b", "c", "d"], "B")
    assert compute_signature(_quiz("S", first, second)) != compute_signature(_quiz("S", second, first))


def test_signature_depends_on_option_order():
    a = _quiz("S", _q("Q?", ["a", "b", "c", "d"], "A"))
    b = _quiz("S", _q("Q?", ["b", "a", "c", "d"], "A"))
    assert compute_signature(a) != compute_signature(b)


def test_signature_depends_on_answer():
    a = _quiz("S", _q("Q?", ["a", "b", "c", "d"], "A"))
    b = _quiz("S", _q("Q?", ["a", "b", "c", "d"], "B"))
    assert compute_signature(a) != compute_signature(b)


def test_signature_of_stored_row_matches_quiz(sample_quiz):
    assert compute_signature(sample_quiz) == compute_signature(parse_quiz(sample_quiz))
