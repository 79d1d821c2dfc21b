from collections.abc import Iterable
import functools


def checksingleinput(val):
    """checks that input is a single name and not a sequence of names"""
    if isinstance(val,str): pass
    elif isinstance(val,Iterable): raise TypeError("input should not be a sequence: %r" %(val,))
    return val

def checkseq(val):
    """replaces None with an empty list, splits a string on whitespace
    and copies any other iterable into a list."""
    if not val: return []
    elif isinstance(val,str): return val.split()
    elif not isinstance(val,Iterable): return [val]
    return list(val)


## Decorators ########################

class reify(object):
    """ Use as a method decorator. It operates almost exactly like the
    Python ``@property`` decorator, but it puts the result of the method it
    decorates into the instance dict after the first call, effectively
    replacing the function it decorates with an instance variable. It is, in
    Python parlance, a non-data descriptor.
    .. code-block:: python
       class Command(object):
           @reify
           def argv(self):
               print('splitting')
               return self.text.split()
    >>> c = Command('echo hi')
    >>> c.argv
    'splitting'
    ['echo', 'hi']
    >>> c.argv
    ['echo', 'hi']
    """
    def __init__(self, wrapped):
        self.wrapped = wrapped
        functools.update_wrapper(self, wrapped)

    def __get__(self, inst, objtype=None):
        if inst is None:
            return self
        val = self.wrapped(inst)
        setattr(inst, self.wrapped.__name__, val)
        return val
