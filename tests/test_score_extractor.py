from app.services.score_extractor import DEFAULT_SCORE, extract_score


def test_score_line_is_parsed():
    text = "Score: 7/10\nFeedback: Good structure, missed edge cases."
    extraction = extract_score(text)
    assert extraction.score == 7
    assert extraction.parsed is True


def test_feedback_is_the_full_text():
    text = "Score: 9/10\nFeedback: Excellent."
    assert extract_score(text).feedback == text


def test_whitespace_around_slash_is_allowed():
    assert extract_score("Score: 8 / 10").score == 8


def test_missing_score_falls_back_to_default():
    text = "Feedback: The answer was vague."
    extraction = extract_score(text)
    assert extraction.score == DEFAULT_SCORE == 5
    assert extraction.parsed is False
    assert extraction.feedback == text


def test_first_match_wins():
    assert extract_score("Score: 6/10. Last time you got 9/10.").score == 6


def test_out_of_range_score_is_kept_as_written():
    assert extract_score("Score: 12/10").score == 12


def test_empty_text_does_not_raise():
    extraction = extract_score("")
    assert extraction.score == 5
    assert extraction.feedback == ""
