import numpy as np
import suite
from grouping import (
    P, from_iterable, BufferIterator, TakeIterator,
    ExhaustedError, ShortfallError, EmptyJoinError, GroupingError
)

# --- setup ---
check = suite.check
assert_that = suite.assert_that
assert_raises = suite.assert_raises


# --- buffer replay ---

@check("from_iterable replays its data once")
def test_from_iterable_single_pass():
    it = from_iterable([3, 1, 2])
    assert_that(isinstance(it, BufferIterator), "should be a buffer iterator")
    assert_that(it.to.list() == [3, 1, 2], "first pass should return the data")
    assert_that(it.to.list() == [], "second pass should be empty")


@check("exhausted iterator keeps raising ExhaustedError")
def test_exhausted_is_sticky():
    it = P([1])
    assert_that(next(it) == 1, "should return the only element")
    for _ in range(3):
        with assert_raises(ExhaustedError):
            next(it)


@check("ExhaustedError ends for loops like StopIteration")
def test_exhausted_is_stop_iteration():
    assert_that(issubclass(ExhaustedError, StopIteration), "should be a StopIteration")
    assert_that(issubclass(ExhaustedError, GroupingError), "should be a GroupingError")
    seen = [x for x in P([5, 6])]
    assert_that(seen == [5, 6], "comprehension should stop cleanly")


@check("remaining counts unread elements")
def test_remaining():
    it = P(range(4))
    next(it)
    assert_that(it.remaining == 3, "three should be left")


# --- take ---

@check("take yields exactly k elements then stops")
def test_take_exact():
    source = P(range(10))
    chunk = source.take(3)
    assert_that(isinstance(chunk, TakeIterator), "take should return a TakeIterator")
    assert_that(chunk.to.list() == [0, 1, 2], "should take the first three")
    with assert_raises(ExhaustedError):
        next(chunk)
    assert_that(next(source) == 3, "source should have advanced by exactly three")


@check("successive takes on one source never overlap")
def test_take_successive():
    source = P(range(7))
    parts = [source.take(k).to.list() for k in (3, 2, 2)]
    assert_that(parts == [[0, 1, 2], [3, 4], [5, 6]], "chunks should be contiguous")
    assert_that(source.to.list() == [], "source should be drained")


@check("take pulls lazily from its source")
def test_take_lazy():
    source = P(range(5))
    chunk = source.take(4)
    assert_that(source.remaining == 5, "nothing pulled before iteration")
    next(chunk)
    assert_that(source.remaining == 4, "one pulled after one next()")


@check("take over a short source raises ShortfallError instead of returning fewer")
def test_take_shortfall():
    chunk = P([1, 2]).take(3)
    assert_that(next(chunk) == 1 and next(chunk) == 2, "available elements come through")
    with assert_raises(ShortfallError) as caught:
        next(chunk)
    error = caught['error']
    assert_that(error.requested == 3 and error.produced == 2, "should report requested and produced")
    assert_that(isinstance(error.__cause__, ExhaustedError), "should chain the source exhaustion")
    assert_that(not isinstance(error, StopIteration), "a shortfall must not look like a normal end")


@check("shortfall propagates through a draining list")
def test_take_shortfall_through_list():
    with assert_raises(ShortfallError):
        P([1]).take(2).to.list()


@check("take of zero is immediately exhausted, negative counts are rejected")
def test_take_zero_and_negative():
    source = P([1, 2])
    assert_that(source.take(0).to.list() == [], "take(0) yields nothing")
    assert_that(source.remaining == 2, "take(0) pulls nothing")
    with assert_raises(ValueError, "negative"):
        source.take(-1)
    for count in (2.5, "2", True, None):
        with assert_raises(TypeError, "must be an integer"):
            source.take(count)
    assert_that(source.remaining == 2, "rejected takes pull nothing")
    assert_that(source.take(np.int64(1)).to.list() == [1], "numpy counts are accepted")


@check("take accepts any python iterable as source")
def test_take_plain_iterable():
    assert_that(TakeIterator([9, 8, 7], 2).to.list() == [9, 8], "lists work as sources")


# --- sorted ---

@check("sorted drains its source and replays ascending")
def test_sorted():
    source = P([5, 2, 9, 0])
    ordered = source.sorted()
    assert_that(source.remaining == 0, "source should be drained at call time")
    assert_that(ordered.to.list() == [0, 2, 5, 9], "should be ascending")
    assert_that(ordered.to.list() == [], "sorted result is single-pass too")


@check("sorted after take only sorts the chunk")
def test_take_then_sorted():
    source = P([4, 3, 2, 1, 0])
    assert_that(source.take(3).sorted().to.list() == [2, 3, 4], "chunk should be sorted")
    assert_that(source.to.list() == [1, 0], "rest of source untouched")


@check("sorted surfaces a shortfall instead of sorting a short chunk")
def test_sorted_shortfall():
    with assert_raises(ShortfallError):
        P([1]).take(2).sorted()


# --- terminal ---

@check("join renders without leading or trailing delimiter")
def test_join():
    assert_that(P([0, 4, 7]).to.join(",") == "0,4,7", "comma join")
    assert_that(P([1, 2]).to.join(":::") == "1:::2", "multi-character delimiter")
    assert_that(P([3]).to.join("@") == "3", "single element has no delimiter")


@check("join over nothing raises EmptyJoinError")
def test_join_empty():
    with assert_raises(EmptyJoinError, "no elements"):
        P([]).to.join(",")
    with assert_raises(EmptyJoinError):
        P([1, 2]).take(0).to.join(",")


@check("count and array drain the iterator")
def test_count_and_array():
    assert_that(P(range(6)).to.count() == 6, "count should be 6")
    arr = P([2, 1]).sorted().to.array()
    assert_that(isinstance(arr, np.ndarray), "array should be a numpy array")
    assert_that(arr.tolist() == [1, 2], "array should hold the sorted data")


if __name__ == "__main__":
    suite.run(title="grouping iterator checks")
