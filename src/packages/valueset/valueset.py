"""valueset -- An unordered set of unique values.

This module contains a class called Set, which implements a mutable,
unordered collection of unique hashable elements, together with set
algebra and a small set of functional combinators (map, filter,
reduce, find and quantifiers).

Iteration order is whatever the backing dict happens to give and is
not part of the interface; nothing returning a sequence (list,
findAll, string) promises any particular order.

The class performs no locking. Callers sharing a Set between threads
must synchronize access themselves.
"""

__all__ = ["Set", "configure", "new"]

import logging

logger = logging.getLogger(__name__)

# Active diagnostics settings; see configure().
_DEFAULT_SORT_ELEMENTS = False
_DEFAULT_SEPARATOR = " "
_sort_elements = _DEFAULT_SORT_ELEMENTS
_separator = _DEFAULT_SEPARATOR

# Marks a zero value that has not been computed yet.
_UNSET = object()


def configure(config):
    """Install diagnostics settings used when rendering sets.

    Arguments:

    config -- A valueset.config.Config instance, or None to restore
              the defaults. The configuration is verified before it
              is installed.
    """
    global _sort_elements, _separator
    if config is None:
        _sort_elements = _DEFAULT_SORT_ELEMENTS
        _separator = _DEFAULT_SEPARATOR
    else:
        config.verify()
        _sort_elements = config.getboolean("diagnostics", "sort_elements")
        _separator = config.getseparator("diagnostics", "separator")
    logger.debug(
        "diagnostics configured: sort_elements=%r separator=%r",
        _sort_elements, _separator)


def new(*elements, elementtype=None):
    """Create a Set containing the given elements.

    Duplicates collapse silently. Calling new() without elements gives
    an empty set.

    Keyword arguments:

    elementtype -- The type of the elements. If not given, the type of
                   the first element is used.
    """
    return Set(elements, elementtype)


class Set:
    """An unordered collection of unique hashable elements.

    Besides the Python container protocol (len, in, iteration, ==,
    <=, >=, |, & and -), the class has these methods:

    add          -- insert an element
    remove       -- delete an element if present
    clear        -- remove all elements
    update       -- add all elements of an iterable
    has          -- membership test
    len          -- number of elements
    isEmpty      -- whether the set has no elements
    list         -- the elements as a list
    toMap        -- the live backing dict
    union, intersection, difference, subset, superset, equal, clone
    iterate, iterateAll, filter, map, reduce, reduceAll,
    any, all, none, find, findAll
    string       -- a human-readable rendering for diagnostics

    Each set has an element type, which gives the zero value returned
    by reduce() and find() when there is nothing else to return. The
    element type is given to the constructor or taken from the first
    element added. The zero value is elementtype() if the type can be
    instantiated without arguments, otherwise None.
    """

    __hash__ = None

    def __init__(self, elements=None, elementtype=None):
        """Constructor.

        Arguments:

        elements    -- An iterable of elements to put in the set.
                       Duplicates are ignored.
        elementtype -- The type of the elements. If None, the type of
                       the first element added is used.
        """
        self._elements = {} # element --> True
        self._elementtype = None
        self._typegiven = False
        self._zerovalue = _UNSET
        if elementtype is not None:
            self._setElementType(elementtype)
            self._typegiven = True
        elif isinstance(elements, Set):
            self._adoptType(elements)
        if elements is not None:
            self.update(elements)

    def __and__(self, other):
        return self.intersection(other)

    def __bool__(self):
        return len(self._elements) > 0

    def __contains__(self, element):
        return element in self._elements

    def __copy__(self):
        return self.clone()

    def __eq__(self, other):
        if isinstance(other, Set):
            return self.equal(other)
        else:
            return NotImplemented

    def __ge__(self, other):
        return self.superset(other)

    def __iter__(self):
        return iter(self._elements)

    def __le__(self, other):
        return self.subset(other)

    def __len__(self):
        return len(self._elements)

    def __or__(self, other):
        return self.union(other)

    def __repr__(self):
        return "Set(%r)" % self.list()

    def __str__(self):
        return self.string()

    def __sub__(self, other):
        return self.difference(other)

    ##############################
    # Mutation.

    def add(self, element):
        """Add an element. Adding an existing element does nothing."""
        if self._elementtype is None:
            self._setElementType(type(element))
        self._elements[element] = True

    def clear(self):
        """Remove all elements.

        The backing dict is emptied in place, so a dict previously
        returned by toMap() stays attached to the set. An element type
        inferred from earlier elements is forgotten; one given to the
        constructor is kept.
        """
        self._elements.clear()
        if not self._typegiven:
            self._setElementType(None)

    def remove(self, element):
        """Remove an element. Removing a missing element does nothing."""
        self._elements.pop(element, None)

    def update(self, elements):
        """Add all elements of an iterable."""
        selfelements = self._elements
        for element in elements:
            if self._elementtype is None:
                self._setElementType(type(element))
            selfelements[element] = True

    ##############################
    # Queries.

    def getElementType(self):
        """Get the element type, or None if it is unknown."""
        return self._elementtype

    def getZeroValue(self):
        """Get the zero value of the element type.

        The zero value is elementtype() and is computed once per
        element type. None is returned if the element type is unknown
        or if calling it without arguments raises an exception.
        """
        if self._elementtype is None and self._elements:
            # Elements were put in through toMap().
            self._setElementType(type(next(iter(self._elements))))
        if self._zerovalue is _UNSET:
            self._zerovalue = _zeroValue(self._elementtype)
        return self._zerovalue

    def has(self, element):
        """Check whether an element is in the set."""
        return element in self._elements

    def isEmpty(self):
        return len(self._elements) == 0

    def len(self):
        return len(self._elements)

    def list(self):
        """Get the elements as a list, in no particular order."""
        return list(self._elements)

    def toMap(self):
        """Get the dict that stores the elements.

        The returned dict maps each element to True. It is the set's
        own storage, not a copy: changing it changes the set.
        """
        return self._elements

    ##############################
    # Set algebra.

    def clone(self):
        """Return a new set with the same elements and element type."""
        new = self._derive()
        new._elements.update(self._elements)
        return new

    def difference(self, other):
        """Return a new set with the elements not in other."""
        otherelements = _coerce(other)._elements
        new = self._derive()
        newelements = new._elements
        for x in self._elements:
            if x not in otherelements:
                newelements[x] = True
        return new

    def equal(self, other):
        """Check whether the set has exactly the elements of other."""
        other = _coerce(other)
        if len(self._elements) != len(other._elements):
            return False
        return self.subset(other)

    def intersection(self, other):
        """Return a new set with the elements also in other."""
        other = _coerce(other)
        otherelements = other._elements
        new = self._derive()
        if new._elementtype is None:
            new._adoptType(other)
        newelements = new._elements
        for x in self._elements:
            if x in otherelements:
                newelements[x] = True
        return new

    def subset(self, other):
        """Check whether all elements are in other."""
        otherelements = _coerce(other)._elements
        for x in self._elements:
            if x not in otherelements:
                return False
        return True

    def superset(self, other):
        """Check whether all elements of other are in the set."""
        selfelements = self._elements
        for x in _coerce(other)._elements:
            if x not in selfelements:
                return False
        return True

    def union(self, other):
        """Return a new set with the elements of both sets."""
        other = _coerce(other)
        new = self.clone()
        if new._elementtype is None:
            new._adoptType(other)
        new.update(other._elements)
        return new

    ##############################
    # Functional combinators.

    def all(self, predicate):
        """Check whether predicate holds for every element.

        True for an empty set.
        """
        for x in self._elements:
            if not predicate(x):
                return False
        return True

    def any(self, predicate):
        """Check whether predicate holds for some element.

        False for an empty set.
        """
        for x in self._elements:
            if predicate(x):
                return True
        return False

    def filter(self, predicate):
        """Return a new set with the elements satisfying predicate."""
        new = self._derive()
        newelements = new._elements
        for x in self._elements:
            if predicate(x):
                newelements[x] = True
        return new

    def find(self, predicate):
        """Find an element satisfying predicate.

        Returns a two-tuple (element, True) for the first matching
        element found, or (zero value, False) if no element matches.
        Which element is first is unspecified.
        """
        for x in self._elements:
            if predicate(x):
                return x, True
        return self.getZeroValue(), False

    def findAll(self, predicate):
        """Return a list of all elements satisfying predicate."""
        return [x for x in self._elements if predicate(x)]

    def iterate(self, function):
        """Call function for each element until it returns false.

        Iteration stops at the first element for which function
        returns a false value; a true value means "continue".
        """
        for x in self._elements:
            if not function(x):
                break

    def iterateAll(self, function):
        """Call function once for each element."""
        for x in self._elements:
            function(x)

    def map(self, function):
        """Return a new set of function(x) for each element x.

        Elements that function maps to the same value collapse into
        one, so the result may be smaller than the set.

        The element type of the result is the type of the mapped
        values, or the element type of the set if it is empty.
        """
        new = self._derive()
        newelements = new._elements
        for x in self._elements:
            newelements[function(x)] = True
        if newelements:
            new._typegiven = False
            new._setElementType(type(next(iter(newelements))))
        if len(newelements) < len(self._elements):
            logger.debug(
                "map collapsed %d elements into %d",
                len(self._elements), len(newelements))
        return new

    def none(self, predicate):
        """Check whether predicate holds for no element.

        True for an empty set.
        """
        return not self.any(predicate)

    def reduce(self, function):
        """Fold the elements with function, starting at the zero value.

        The accumulator starts at the element type's zero value (see
        getZeroValue), not at an element, and function(accumulator,
        element) is applied for every element. Note that the zero
        value need not be an identity for function: reducing integers
        with multiplication always gives 0.
        """
        return self.reduceAll(function, self.getZeroValue())

    def reduceAll(self, function, initial):
        """Fold the elements with function, starting at initial."""
        reduced = initial
        for x in self._elements:
            reduced = function(reduced, x)
        return reduced

    ##############################
    # Diagnostics.

    def string(self):
        """Get a human-readable rendering of the set.

        The rendering is meant for logs and debugging only.
        """
        elements = self.list()
        if _sort_elements:
            try:
                elements.sort()
            except TypeError:
                # Unorderable elements; keep storage order.
                pass
        return "[%s]" % _separator.join([str(x) for x in elements])

    ##############################
    # Internal helpers.

    def _adoptType(self, other):
        self._setElementType(other._elementtype)
        self._typegiven = other._typegiven

    def _derive(self):
        new = Set()
        new._adoptType(self)
        return new

    def _setElementType(self, elementtype):
        self._elementtype = elementtype
        self._zerovalue = _UNSET


def _zeroValue(elementtype):
    if elementtype is None:
        return None
    try:
        return elementtype()
    except Exception: # pylint: disable=broad-except
        # No usable no-argument constructor.
        return None


def _coerce(other):
    if isinstance(other, Set):
        return other
    else:
        return Set(other)
