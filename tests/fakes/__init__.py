from tests.fakes.fake_notifier import FakeNotifier
from tests.fakes.fake_resolver import FakePathResolver

__all__ = ["FakeNotifier", "FakePathResolver"]
