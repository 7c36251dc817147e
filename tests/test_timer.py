"""Tests for TickTimer."""

from gridsnake.timer import TickTimer


class TestTickTimer:

    def test_fires_once_per_period(self):
        t = TickTimer()
        t.start(0, 150)
        assert not t.poll(149)
        assert t.poll(150)
        assert not t.poll(200)
        assert t.poll(300)

    def test_stopped_timer_never_fires(self):
        t = TickTimer()
        assert not t.poll(10_000)
        t.start(0, 100)
        t.stop()
        assert not t.poll(10_000)
        assert t.elapsed(10_000) == 0

    def test_pause_freezes_elapsed_and_resume_keeps_phase(self):
        t = TickTimer()
        t.start(0, 100)
        t.pause(40)
        assert t.elapsed(5_000) == 40
        assert not t.poll(5_000)
        t.resume(5_000)
        assert t.elapsed(5_000) == 40
        assert not t.poll(5_059)
        assert t.poll(5_060)

    def test_falling_far_behind_reanchors(self):
        t = TickTimer()
        t.start(0, 100)
        assert t.poll(1_000)
        assert t.elapsed(1_000) == 0
        assert not t.poll(1_050)

    def test_set_period_keeps_phase(self):
        t = TickTimer()
        t.start(0, 200)
        t.set_period(100)
        assert not t.poll(99)
        assert t.poll(100)

    def test_set_period_while_paused_clamps_elapsed(self):
        """Time already spent in the tick cannot exceed the shorter period."""
        t = TickTimer()
        t.start(0, 200)
        t.pause(150)
        t.set_period(100)
        assert t.paused
        assert t.period_ms == 100
        assert t.elapsed(9_000) == 100
        assert not t.poll(9_000)
        t.resume(1_000)
        assert t.poll(1_000)
        assert not t.poll(1_099)
        assert t.poll(1_100)

    def test_set_period_while_paused_keeps_shorter_elapsed(self):
        t = TickTimer()
        t.start(0, 100)
        t.pause(30)
        t.set_period(200)
        t.resume(1_000)
        assert t.elapsed(1_000) == 30
        assert not t.poll(1_169)
        assert t.poll(1_170)
