from __future__ import annotations

import itertools
import math

import pytest

from post_classifier.model.counts import train
from post_classifier.model.errors import EmptyTrainingSetError, UnknownLabelError, UntrainedModelError
from post_classifier.model.scoring import (
    NaiveBayesClassifier,
    Prediction,
    log_likelihood,
    log_prior,
    predict,
    score,
    word_log_likelihood,
)

from conftest import make_posts


def test_log_prior():
    model = train(make_posts(("spam", "a"), ("spam", "b"), ("spam", "c"), ("ham", "d")))

    assert log_prior(model, "spam") == math.log(0.75)
    assert log_prior(model, "ham") == math.log(0.25)


def test_likelihood_label_conditional_tier(five_posts):
    model = train(five_posts)
    assert word_log_likelihood(model, "ham", "meeting") == math.log(2 / 3)


def test_likelihood_corpus_tier(five_posts):
    model = train(five_posts)
    # 'deal' is in the corpus but never under ham
    assert word_log_likelihood(model, "ham", "deal") == math.log(2 / 5)
    assert word_log_likelihood(model, "spam", "meeting") == math.log(2 / 5)


def test_likelihood_unseen_word_floor(five_posts):
    model = train(five_posts)
    assert word_log_likelihood(model, "spam", "zebra") == math.log(1 / 5)
    assert word_log_likelihood(model, "ham", "zebra") == math.log(1 / 5)


def test_likelihood_sums_over_distinct_words(five_posts):
    model = train(five_posts)
    expected = math.log(2 / 3) + math.log(2 / 5) + math.log(1 / 5)

    assert log_likelihood(model, "ham", ["meeting", "deal", "zebra"]) == pytest.approx(expected)
    assert log_likelihood(model, "ham", ["meeting", "meeting", "deal", "zebra"]) == pytest.approx(expected)
    assert log_likelihood(model, "ham", []) == 0.0


def test_score_is_prior_plus_likelihood(five_posts):
    model = train(five_posts)
    post = {"content": "meeting meeting deal"}
    expected = math.log(3 / 5) + math.log(2 / 3) + math.log(2 / 5)

    assert score(model, "ham", post) == pytest.approx(expected)


def test_predict_end_to_end():
    model = train(make_posts(("spam", "buy now"), ("ham", "hello friend")))

    label, s = predict(model, {"content": "buy"})

    assert label == "spam"
    assert math.isfinite(s)
    assert s == pytest.approx(math.log(0.5) + math.log(1.0))


def test_predict_returns_named_tuple():
    model = train(make_posts(("spam", "buy now"), ("ham", "hello friend")))
    result = predict(model, {"tag": "ham", "content": "hello"})

    assert isinstance(result, Prediction)
    assert result.label == "ham"
    assert result.score == pytest.approx(math.log(0.5))


def test_tie_goes_to_first_label_in_ascending_order():
    posts = make_posts(("B", "x"), ("A", "x"))
    model = train(posts)

    assert score(model, "A", {"content": "x"}) == score(model, "B", {"content": "x"})
    assert predict(model, {"content": "x"}).label == "A"
    assert predict(model, {"content": ""}).label == "A"


def test_prediction_is_deterministic_across_permutations():
    posts = make_posts(
        ("spam", "buy now cheap"),
        ("ham", "hello friend"),
        ("spam", "cheap pills"),
        ("ham", "see you friend"),
        ("ham", "buy milk"),
    )
    query = {"content": "buy cheap milk today"}
    expected = predict(train(posts), query)

    for perm in itertools.permutations(posts):
        assert predict(train(perm), query) == expected


def test_empty_query_picks_most_frequent_label(five_posts):
    model = train(five_posts)
    label, s = predict(model, {"content": "   "})

    assert label == "ham"
    assert s == math.log(3 / 5)


def test_untrained_model_errors():
    model = train([])

    with pytest.raises(EmptyTrainingSetError):
        log_prior(model, "spam")
    with pytest.raises(EmptyTrainingSetError):
        log_likelihood(model, "spam", ["buy"])
    with pytest.raises(EmptyTrainingSetError):
        word_log_likelihood(model, "spam", "buy")
    with pytest.raises(EmptyTrainingSetError):
        score(model, "spam", {"content": "buy"})
    with pytest.raises(UntrainedModelError):
        predict(model, {"content": "buy"})


def test_classifier_wrapper():
    clf = NaiveBayesClassifier()
    assert not clf.is_trained
    with pytest.raises(UntrainedModelError):
        clf.predict({"content": "buy"})

    clf.fit(make_posts(("spam", "buy now"), ("ham", "hello friend")))
    assert clf.is_trained
    assert clf.predict({"content": "buy"}).label == "spam"
    assert clf.log_prior("ham") == math.log(0.5)

    # refitting starts over
    clf.fit(make_posts(("ham", "buy")))
    assert clf.model.total_posts == 1
    assert clf.predict({"content": "buy"}).label == "ham"


def test_log_prior_of_unknown_label(five_posts):
    model = train(five_posts)

    with pytest.raises(UnknownLabelError) as ei:
        log_prior(model, "zzz")
    assert ei.value.label == "zzz"
