import pytest

import typedenv


class RecordingHook:
    """Error hook that records every (key, error) it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Exception]] = []

    def __call__(self, key: str, error: Exception) -> None:
        self.calls.append((key, error))


@pytest.fixture()
def hook():
    return RecordingHook()


@pytest.fixture()
def global_hook(hook):
    prev = typedenv.set_error_hook(hook)
    try:
        yield hook
    finally:
        typedenv.set_error_hook(prev)
