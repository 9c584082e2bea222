"""Tests for euljitype.core.stats."""

from __future__ import annotations

from euljitype.core.stats import (
    LiveStats,
    SessionStats,
    TypingResult,
    TypingStatsEngine,
    round_half_up,
)


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------

class TestLifecycle:
    def test_initial_state(self, clock):
        engine = TypingStatsEngine(clock=clock)
        assert engine.stats == SessionStats()
        assert not engine.is_started()
        assert not engine.is_finished()

    def test_start_and_end(self, clock):
        engine = TypingStatsEngine(clock=clock)
        engine.start_typing()
        clock.advance(5)
        engine.end_typing()
        assert engine.stats.start_time == 1000.0
        assert engine.stats.end_time == 1005.0
        assert engine.stats.end_time >= engine.stats.start_time

    def test_restart_clears_end_time(self, clock):
        engine = TypingStatsEngine(clock=clock)
        engine.start_typing()
        engine.end_typing()
        clock.advance(3)
        engine.start_typing()
        assert engine.stats.start_time == 1003.0
        assert engine.stats.end_time is None

    def test_record_counters(self, clock):
        engine = TypingStatsEngine(clock=clock)
        engine.record_correct()
        engine.record_correct()
        engine.record_incorrect()
        assert engine.stats.total_chars == 3
        assert engine.stats.correct_chars == 2
        assert engine.stats.incorrect_chars == 1

    def test_reset_is_idempotent(self, clock):
        engine = TypingStatsEngine(clock=clock)
        engine.start_typing()
        engine.record_correct()
        engine.end_typing()

        engine.reset_stats()
        once = SessionStats(**vars(engine.stats))
        engine.reset_stats()
        assert engine.stats == once == SessionStats()

    def test_elapsed_time(self, clock):
        engine = TypingStatsEngine(clock=clock)
        assert engine.get_elapsed_time() == 0.0
        engine.start_typing()
        clock.advance(75)
        assert engine.get_elapsed_time() == 75
        assert engine.get_formatted_time() == "01:15"

    def test_callback_is_notified(self, clock):
        calls = []
        engine = TypingStatsEngine(lambda: calls.append(1), clock=clock)
        engine.start_typing()
        engine.record_correct()
        engine.reset_stats()
        assert len(calls) == 3

    def test_failing_callback_does_not_propagate(self, clock):
        def broken():
            raise RuntimeError("boom")

        engine = TypingStatsEngine(broken, clock=clock)
        engine.record_correct()
        assert engine.stats.correct_chars == 1


# ---------------------------------------------------------------------------
# calculate_result
# ---------------------------------------------------------------------------

class TestCalculateResult:
    def test_none_before_start(self, clock):
        engine = TypingStatsEngine(clock=clock)
        assert engine.calculate_result("abc", "abc") is None
        assert engine.calculate_result() is None

    def test_none_for_empty_input(self, clock):
        engine = TypingStatsEngine(clock=clock)
        engine.start_typing()
        assert engine.calculate_result("", "abc") is None

    def test_fully_correct_english(self, clock):
        engine = TypingStatsEngine(clock=clock)
        engine.start_typing()
        clock.advance(60)
        engine.end_typing()

        result = engine.calculate_result("abc", "abc")
        assert result == TypingResult(wpm=1, cpm=3, accuracy=100, error_rate=0, total_time=60)

    def test_korean_syllable_counts_strokes(self, clock):
        engine = TypingStatsEngine(clock=clock)
        engine.start_typing()
        clock.advance(30)
        engine.end_typing()

        result = engine.calculate_result("가", "가")
        assert result.cpm == 4
        assert result.wpm == 1
        assert result.total_time == 30

    def test_mismatch_gets_no_stroke_credit(self, clock):
        engine = TypingStatsEngine(clock=clock)
        engine.start_typing()
        clock.advance(60)
        engine.end_typing()

        result = engine.calculate_result("ax", "ab")
        assert result.accuracy == 50
        assert result.error_rate == 50
        assert result.cpm == 1

    def test_uses_end_time_when_finished(self, clock):
        engine = TypingStatsEngine(clock=clock)
        engine.start_typing()
        clock.advance(60)
        engine.end_typing()
        clock.advance(600)

        result = engine.calculate_result("abc", "abc")
        assert result.total_time == 60
        assert result.cpm == 3

    def test_runs_to_now_when_not_finished(self, clock):
        engine = TypingStatsEngine(clock=clock)
        engine.start_typing()
        clock.advance(120)

        result = engine.calculate_result("abcdef", "abcdef")
        assert result.total_time == 120
        assert result.cpm == 3

    def test_input_longer_than_target(self, clock):
        engine = TypingStatsEngine(clock=clock)
        engine.start_typing()
        clock.advance(60)

        result = engine.calculate_result("abcd", "ab")
        assert result.accuracy == 50
        assert result.error_rate == 50

    def test_zero_elapsed_gives_zero_speed(self, clock):
        engine = TypingStatsEngine(clock=clock)
        engine.start_typing()
        engine.end_typing()

        result = engine.calculate_result("a", "a")
        assert result.cpm == 0
        assert result.wpm == 0
        assert result.accuracy == 100

    def test_position_wise_rescores_corrected_character(self, clock):
        engine = TypingStatsEngine(clock=clock)
        engine.start_typing()
        # First attempt at position 1 was wrong, then fixed with backspace
        engine.record_correct()
        engine.record_incorrect()
        engine.record_correct()
        clock.advance(60)

        result = engine.calculate_result("ab", "ab")
        assert result.accuracy == 100
        assert result.error_rate == 0

    def test_counter_fallback(self, clock):
        engine = TypingStatsEngine(clock=clock)
        engine.start_typing()
        engine.record_correct()
        engine.record_correct()
        engine.record_correct()
        engine.record_incorrect()
        clock.advance(60)

        result = engine.calculate_result()
        assert result == TypingResult(wpm=1, cpm=3, accuracy=75, error_rate=25, total_time=60)

    def test_counter_fallback_without_records(self, clock):
        engine = TypingStatsEngine(clock=clock)
        engine.start_typing()
        assert engine.calculate_result() is None

    def test_single_string_uses_counters(self, clock):
        engine = TypingStatsEngine(clock=clock)
        engine.start_typing()
        engine.record_incorrect()
        clock.advance(60)

        result = engine.calculate_result("abc")
        assert result.accuracy == 0
        assert result.error_rate == 100

    def test_to_dict_shape(self):
        result = TypingResult(wpm=1, cpm=3, accuracy=100, error_rate=0, total_time=60)
        assert result.to_dict() == {
            "wpm": 1,
            "cpm": 3,
            "accuracy": 100,
            "errorRate": 0,
            "totalTime": 60,
        }


# ---------------------------------------------------------------------------
# get_current_stats
# ---------------------------------------------------------------------------

class TestCurrentStats:
    def test_zero_before_start(self, clock):
        engine = TypingStatsEngine(clock=clock)
        assert engine.get_current_stats("abc", "abc") == LiveStats.zero()
        assert engine.get_current_stats() == LiveStats.zero()

    def test_zero_for_empty_input_regardless_of_start(self, clock):
        engine = TypingStatsEngine(clock=clock)
        assert engine.get_current_stats("", "abc") == LiveStats.zero()
        engine.start_typing()
        clock.advance(10)
        stats = engine.get_current_stats("", "abc")
        assert stats.to_dict() == {"wpm": 0, "cpm": 0, "accuracy": 100, "errorRate": 0}

    def test_live_estimate(self, clock):
        engine = TypingStatsEngine(clock=clock)
        engine.start_typing()
        clock.advance(30)

        stats = engine.get_current_stats("한", "한글")
        assert stats == LiveStats(wpm=1, cpm=6, accuracy=100, error_rate=0)

    def test_ignores_end_time(self, clock):
        engine = TypingStatsEngine(clock=clock)
        engine.start_typing()
        clock.advance(60)
        engine.end_typing()
        clock.advance(60)

        stats = engine.get_current_stats("abc", "abc")
        assert stats.cpm == 2

    def test_zero_elapsed(self, clock):
        engine = TypingStatsEngine(clock=clock)
        engine.start_typing()
        stats = engine.get_current_stats("ab", "ax")
        assert stats.cpm == 0
        assert stats.accuracy == 50
        assert stats.error_rate == 50

    def test_counter_fallback(self, clock):
        engine = TypingStatsEngine(clock=clock)
        engine.start_typing()
        assert engine.get_current_stats() == LiveStats.zero()

        engine.record_correct()
        engine.record_incorrect()
        clock.advance(60)
        assert engine.get_current_stats() == LiveStats(wpm=0, cpm=1, accuracy=50, error_rate=50)


class TestRounding:
    def test_half_rounds_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(0.49) == 0
        assert round_half_up(66.666) == 67
