from enum import Enum
from typing import Any, Callable, List
import operator
from .errors import Underflow

class HeapType(Enum):
    MAXHEAP = -1
    MINHEAP = 1

    # this is useful for argparse
    def __str__(self):
        return self.name

class Heap:
    '''
    Binary heap stored as an implicit tree in a list.
    The only difference between a min heap and a max heap is the ordering 
    predicate: less(a, b) is a < b for MINHEAP and a > b for MAXHEAP, 
    so the root is always the item that is "less" than every other.
    '''

    def __init__(self, heaptype: HeapType = HeapType.MINHEAP) -> None:
        self.heap: List[Any] = []
        self.heaptype = heaptype
        if heaptype == HeapType.MINHEAP:
            self.less: Callable[[Any, Any], bool] = operator.lt
        elif heaptype == HeapType.MAXHEAP:
            self.less = operator.gt
        else:
            raise ValueError('Unknown heap type')

    def __len__(self) -> int:
        return len(self.heap)

    def __bool__(self) -> bool:
        return bool(self.heap)
    
    def len(self) -> int:
        return len(self.heap)

    def peek(self) -> Any:
        """Return the root without removing it."""
        if not self.heap:
            raise Underflow('peek from empty heap')
        return self.heap[0]

    def push(self, item: Any) -> None:
        """Push item onto heap, maintaining the heap invariant."""
        self.heap.append(item)
        self._siftdown(0, len(self.heap)-1)

    def pop(self) -> Any:
        """Pop the root off the heap, maintaining the heap invariant."""
        if not self.heap:
            raise Underflow('pop from empty heap')
        lastelt = self.heap.pop()
        if self.heap:
            returnitem = self.heap[0]
            self.heap[0] = lastelt
            self._siftup(0)
            return returnitem
        return lastelt

    def clear(self) -> None:
        self.heap.clear()

    # 'heap' is a heap at all indices >= startpos, except possibly for pos.  pos
    # is the index of a leaf with a possibly out-of-order value.  Restore the
    # heap invariant.
    def _siftdown(self, startpos: int, pos: int) -> None:
        newitem = self.heap[pos]
        # Follow the path to the root, moving parents down until finding a place
        # newitem fits.
        while pos > startpos:
            parentpos = (pos - 1) >> 1
            parent = self.heap[parentpos]
            if self.less(newitem, parent):
                self.heap[pos] = parent
                pos = parentpos
                continue
            break
        self.heap[pos] = newitem

    def _siftup(self, pos: int) -> None:
        endpos = len(self.heap)
        startpos = pos
        newitem = self.heap[pos]
        # Bubble up the higher priority child until hitting a leaf.
        childpos = 2*pos + 1    # leftmost child position
        while childpos < endpos:
            # Set childpos to index of higher priority child.
            rightpos = childpos + 1
            if rightpos < endpos and not self.less(self.heap[childpos], self.heap[rightpos]):
                childpos = rightpos
            self.heap[pos] = self.heap[childpos]
            pos = childpos
            childpos = 2*pos + 1
        # The leaf at pos is empty now.  Put newitem there, and bubble it up
        # to its final resting place (by sifting its parents down).
        self.heap[pos] = newitem
        self._siftdown(startpos, pos)

    def __str__(self):
        return str(self.heap)

def MinHeap() -> Heap:
    return Heap(HeapType.MINHEAP)

def MaxHeap() -> Heap:
    return Heap(HeapType.MAXHEAP)
