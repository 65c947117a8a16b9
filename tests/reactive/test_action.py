from __future__ import annotations

from typing import Any

import pytest

from libx import ObservableList, action, batch
from libx.reactive import in_batch
from tests.helpers.people import ChangeRecorder


def test_batch_defers_until_outermost_exit(recorder: ChangeRecorder[Any]) -> None:
    items: ObservableList[int] = ObservableList()
    items.subscribe(recorder)

    with batch():
        items.append(1)
        with batch():
            items.append(2)
        assert recorder.calls == 0
        assert in_batch()

    assert not in_batch()
    assert recorder.calls == 1
    assert [change.added for change in recorder.changes] == [(1,), (2,)]


def test_batch_notifies_each_touched_list_once() -> None:
    left: ObservableList[int] = ObservableList()
    right: ObservableList[int] = ObservableList()
    left_recorder: ChangeRecorder[int] = ChangeRecorder()
    right_recorder: ChangeRecorder[int] = ChangeRecorder()
    left.subscribe(left_recorder)
    right.subscribe(right_recorder)

    with batch():
        left.append(1)
        right.append(2)
        left.append(3)

    assert left_recorder.calls == 1
    assert len(left_recorder.changes) == 2
    assert right_recorder.calls == 1


def test_batch_flushes_when_block_raises(recorder: ChangeRecorder[Any]) -> None:
    items: ObservableList[int] = ObservableList()
    items.subscribe(recorder)

    with pytest.raises(RuntimeError), batch():
        items.append(1)
        raise RuntimeError("boom")

    assert recorder.calls == 1
    assert not in_batch()


def test_action_wraps_function_in_batch(recorder: ChangeRecorder[Any]) -> None:
    items: ObservableList[int] = ObservableList()
    items.subscribe(recorder)

    @action
    def fill(count: int) -> int:
        """Append ``count`` numbers."""
        for number in range(count):
            items.append(number)
        return len(items)

    assert fill(3) == 3
    assert recorder.calls == 1
    assert fill.__name__ == "fill"
    assert fill.__doc__ == "Append ``count`` numbers."


def test_mutation_from_listener_is_delivered_in_same_flush() -> None:
    source: ObservableList[int] = ObservableList()
    mirror: ObservableList[int] = ObservableList()
    mirror_recorder: ChangeRecorder[int] = ChangeRecorder()
    mirror.subscribe(mirror_recorder)

    def copy_added(changes: tuple[Any, ...]) -> None:
        for change in changes:
            mirror.append(*change.added)

    source.subscribe(copy_added)

    with batch():
        source.append(1, 2)

    assert list(mirror) == [1, 2]
    assert mirror_recorder.calls == 1


def test_failing_listener_does_not_starve_other_lists() -> None:
    left: ObservableList[int] = ObservableList()
    right: ObservableList[int] = ObservableList()
    right_recorder: ChangeRecorder[int] = ChangeRecorder()

    def explode(changes: tuple[Any, ...]) -> None:  # noqa: ARG001
        raise RuntimeError("listener failed")

    left.subscribe(explode)
    right.subscribe(right_recorder)

    with pytest.raises(RuntimeError, match="listener failed"), batch():
        left.append(1)
        right.append(2)

    assert right_recorder.calls == 1
    assert right_recorder.changes[0].added == (2,)
    assert not in_batch()

    right.append(3)

    assert right_recorder.calls == 2
    assert [change.added for change in right_recorder.notifications[1]] == [(3,)]
