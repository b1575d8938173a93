from .errors import MedianHeapError, EmptyStructure, InvalidInput, Underflow
from .heap import HeapType, Heap, MinHeap, MaxHeap
from .median_heap import MedianHeap, truncated_mean
