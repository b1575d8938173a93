class MedianHeapError(Exception):
    '''Base class for the errors raised by running_median'''
    pass

class EmptyStructure(MedianHeapError):
    '''median requested before any value was inserted'''
    pass

class InvalidInput(MedianHeapError, TypeError):
    '''value is not an integer'''
    pass

class Underflow(MedianHeapError, IndexError):
    '''peek or pop on an empty heap'''
    pass
