from numbers import Integral
from typing import Optional
import numpy as np
from numpy.typing import ArrayLike
from multiprocessing_logger import Logger
from .heap import Heap, HeapType
from .errors import EmptyStructure, InvalidInput

def truncated_mean(a: int, b: int) -> int:
    '''mean of two integers, rounded toward zero'''
    total = a + b
    if total < 0:
        return -(-total // 2)
    return total // 2

class MedianHeap:
    '''
    Running median of an integer stream:
    - the lower half of the values lives in a max heap, the upper half in a min heap
    - every value of the lower half is <= every value of the upper half
    - the first two values both go to the lower half, from the third insert on
      the two halves differ in size by at most one
    - insert is O(log n), median is O(1)
    - not thread safe, guard insert and median with a single lock if needed
    '''

    def __init__(
            self,
            name: str = '',
            logger: Optional[Logger] = None
        ) -> None:

        self.name = name
        self.logger = logger
        self.local_logger = None
        if self.logger:
            self.local_logger = self.logger.get_logger(self.name)

        self._lower = Heap(HeapType.MAXHEAP)
        self._upper = Heap(HeapType.MINHEAP)

    @property
    def lower(self) -> Heap:
        return self._lower

    @property
    def upper(self) -> Heap:
        return self._upper

    def __len__(self) -> int:
        return len(self._lower) + len(self._upper)

    def __bool__(self) -> bool:
        return len(self) > 0

    def _validate(self, value) -> int:
        if isinstance(value, bool) or not isinstance(value, Integral):
            if self.local_logger:
                self.local_logger.warning(f'rejected, {value!r}')
            raise InvalidInput(f'expected an integer, got {type(value).__name__}')
        return int(value)

    def insert(self, value: int) -> None:
        '''add value to the stream, raises InvalidInput if value is not an integer'''

        value = self._validate(value)

        # the first two values seed the lower half, no balancing yet
        if len(self._lower) < 2:
            self._lower.push(value)
            self._log_insert(value)
            return

        if self._lower.peek() >= value:
            self._lower.push(value)
        else:
            self._upper.push(value)

        self._log_insert(value)
        self._rebalance()

    def _log_insert(self, value: int) -> None:
        if self.local_logger:
            self.local_logger.info(f'insert, {value}, {len(self._lower)}, {len(self._upper)}')

    def _rebalance(self) -> None:
        if len(self._lower) > len(self._upper) + 1:
            moved = self._lower.pop()
            self._upper.push(moved)
            direction = 'up'
        elif len(self._upper) > len(self._lower) + 1:
            moved = self._upper.pop()
            self._lower.push(moved)
            direction = 'down'
        else:
            return

        if self.local_logger:
            self.local_logger.info(f'rebalance, {direction}, {moved}')

    def extend(self, values: ArrayLike) -> None:
        '''
        insert every value of a 1D integer array, in order.
        The whole batch is checked first: nothing is inserted if it is invalid.
        Object arrays (e.g. integers beyond 64 bits) are checked item by item.
        '''

        array = np.asarray(values)
        if array.ndim > 1:
            raise InvalidInput(f'expected a 1D array, got {array.ndim} dimensions')
        if array.size > 0 and array.dtype.kind not in 'iuO':
            if self.local_logger:
                self.local_logger.warning(f'rejected, batch of {array.dtype}')
            raise InvalidInput(f'expected integers, got {array.dtype}')

        batch = [self._validate(value) for value in array.reshape(-1).tolist()]
        for value in batch:
            self.insert(value)

    def median(self) -> int:
        '''raises EmptyStructure if nothing was inserted'''

        if not self._lower and not self._upper:
            raise EmptyStructure('median heap is empty')

        if len(self._lower) == len(self._upper):
            return truncated_mean(self._lower.peek(), self._upper.peek())

        if len(self._lower) > len(self._upper):
            return self._lower.peek()
        else:
            return self._upper.peek()

    def clear(self) -> None:
        self._lower.clear()
        self._upper.clear()

    def __str__(self):
        return f'lower: {self._lower}, upper: {self._upper}'
