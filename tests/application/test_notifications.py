"""Unit tests for the notification expiry logic."""

from ims.application.notifications import NOTIFICATION_TTL, Notifier
from tests.fakes import FakeTimerFactory


def _notifier():
    timers = FakeTimerFactory()
    return Notifier(timer_factory=timers), timers


class TestNotifier:

    def test_show_makes_message_visible(self):
        notifier, timers = _notifier()
        notifier.show("Product added successfully")
        assert notifier.current.message == "Product added successfully"
        assert timers.timers[0].started
        assert timers.timers[0].interval == NOTIFICATION_TTL == 3.0

    def test_expiry_hides_message(self):
        notifier, timers = _notifier()
        notifier.show("saved")
        timers.timers[0].fire()
        assert notifier.current is None

    def test_new_message_cancels_previous_timer(self):
        notifier, timers = _notifier()
        notifier.show("first")
        notifier.show("second")
        assert timers.timers[0].cancelled
        assert not timers.timers[1].cancelled

    def test_stale_expiry_does_not_hide_newer_message(self):
        notifier, timers = _notifier()
        notifier.show("first")
        notifier.show("second")
        timers.timers[0].fire()
        assert notifier.current.message == "second"
        timers.timers[1].fire()
        assert notifier.current is None

    def test_each_notification_has_its_own_identity(self):
        notifier, _ = _notifier()
        first = notifier.show("same")
        second = notifier.show("same")
        assert first.id != second.id

    def test_dismiss(self):
        notifier, timers = _notifier()
        notifier.show("saved")
        notifier.dismiss()
        assert notifier.current is None
        assert timers.timers[0].cancelled

    def test_real_timer_is_daemon(self):
        notifier = Notifier(ttl=60)
        notifier.show("hello")
        try:
            assert notifier._timer.daemon
        finally:
            notifier.dismiss()
