"""Subtree insertion notifications for a document.

The host owns a ``DocumentMutations`` for its document and performs insertions
through it. Observers receive lists of ``MutationRecord`` synchronously, one
list per insertion, or one list per ``batch()`` block.
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator

from swiper_attrs.dom import HtmlElement


@dataclass(frozen=True)
class MutationRecord:
    """Nodes added as children of ``target``."""

    target: HtmlElement
    added_nodes: list[HtmlElement] = field(default_factory=list)


MutationCallback = Callable[[list[MutationRecord]], None]


def _within(node: HtmlElement, ancestor: HtmlElement) -> bool:
    current = node
    while current is not None:
        if current is ancestor:
            return True
        current = current.getparent()
    return False


class TreeObserver:
    """Delivers insertion records under an observed subtree to a callback."""

    def __init__(self, hub: "DocumentMutations", callback: MutationCallback) -> None:
        self._hub = hub
        self._callback = callback
        self._target: HtmlElement | None = None
        self._subtree = True

    @property
    def is_observing(self) -> bool:
        return self._target is not None

    def observe(self, target: HtmlElement, subtree: bool = True) -> None:
        """Start observing child insertions under ``target``.

        Args:
            target: Element to watch.
            subtree: Also report insertions into descendants of ``target``.
        """
        self._target = target
        self._subtree = subtree
        self._hub._attach(self)

    def disconnect(self) -> None:
        """Stop receiving records."""
        self._target = None
        self._hub._detach(self)

    def _accepts(self, record: MutationRecord) -> bool:
        if self._target is None:
            return False
        if self._subtree:
            return _within(record.target, self._target)
        return record.target is self._target

    def _deliver(self, records: list[MutationRecord]) -> None:
        relevant = [record for record in records if self._accepts(record)]
        if relevant:
            self._callback(relevant)


class DocumentMutations:
    """Insertion primitive and notifier for one document."""

    def __init__(self, document: HtmlElement) -> None:
        self.document = document
        self._observers: list[TreeObserver] = []
        self._pending: list[MutationRecord] | None = None

    def observer(self, callback: MutationCallback) -> TreeObserver:
        """Create an observer bound to this document."""
        return TreeObserver(self, callback)

    def append_child(self, parent: HtmlElement, node: HtmlElement) -> HtmlElement:
        """Append ``node`` to ``parent`` and notify observers."""
        parent.append(node)
        self._record(MutationRecord(target=parent, added_nodes=[node]))
        return node

    def insert_child(self, parent: HtmlElement, index: int, node: HtmlElement) -> HtmlElement:
        """Insert ``node`` into ``parent`` at ``index`` and notify observers."""
        parent.insert(index, node)
        self._record(MutationRecord(target=parent, added_nodes=[node]))
        return node

    @contextmanager
    def batch(self) -> Iterator[None]:
        """Coalesce insertions made inside the block into one delivery."""
        if self._pending is not None:
            yield
            return

        self._pending = []
        try:
            yield
        finally:
            records, self._pending = self._pending, None
            if records:
                self._notify(records)

    def _record(self, record: MutationRecord) -> None:
        if self._pending is not None:
            self._pending.append(record)
        else:
            self._notify([record])

    def _notify(self, records: list[MutationRecord]) -> None:
        # Observers may disconnect while being notified
        for observer in list(self._observers):
            observer._deliver(records)

    def _attach(self, observer: TreeObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def _detach(self, observer: TreeObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)
