import copy
import logging

log = logging.getLogger(__name__)

# marks a missing entry; None is a legal left or right value
_missing = object()


def _pairs(items):
    if hasattr(items, 'items'):
        items = items.items()
    for left, right in items:
        yield left, right


class BiMap(object):
    """
    A one-to-one association between left values and right values.

    Two dicts are kept as exact inverses of each other: forward maps
    left -> right and reverse maps right -> left.  Every mutating method
    leaves both of them consistent before it returns.  Absence is
    reported by returning None (or the caller's default), never by
    raising.
    """

    def __init__(self, pairs=None, capacity=None):
        if capacity is not None and capacity < 0:
            raise ValueError('capacity must be non-negative, got %r' % (capacity,))
        # dicts can't be pre-sized; the hint is only remembered for copies
        self.capacity = capacity
        self._forward = {}
        self._reverse = {}
        if pairs is not None:
            self.update(pairs)

    #
    ## mutation
    #

    def insert(self, left, right):
        """
        Associate left with right, evicting whatever stood in the way.

        Returns the evicted (left, right) pair, or None when nothing was
        evicted (either a fresh insert or the pair was already stored).
        A right value owned by some other left is checked first, and
        that pair is the one returned.
        """
        oldleft = self._reverse.get(right, _missing)
        if oldleft is not _missing and oldleft != left:
            # we're doing a -> b but we already have c -> b.  drop c, and
            # if a used to point at d, drop d's reverse entry too
            del self._forward[oldleft]
            oldright = self._forward.pop(left, _missing)
            if oldright is not _missing:
                del self._reverse[oldright]
                log.debug('insert %r -> %r also dropped %r -> %r',
                          left, right, left, oldright)
            self._forward[left] = right
            self._reverse[right] = left
            log.debug('insert %r -> %r evicted %r -> %r',
                      left, right, oldleft, right)
            return oldleft, right

        oldright = self._forward.get(left, _missing)
        if oldright is not _missing:
            if oldright == right:
                return None
            # we're doing a -> b but we already have a -> c; c loses its
            # reverse entry
            del self._reverse[oldright]
            self._forward[left] = right
            self._reverse[right] = left
            log.debug('insert %r -> %r evicted %r -> %r',
                      left, right, left, oldright)
            return left, oldright

        self._forward[left] = right
        self._reverse[right] = left
        return None

    def update(self, pairs):
        evicted = []
        for left, right in _pairs(pairs):
            old = self.insert(left, right)
            if old is not None:
                evicted.append(old)
        return evicted

    def remove_left(self, left):
        right = self._forward.pop(left, _missing)
        if right is _missing:
            return None
        # a reverse entry that doesn't point back belongs to someone else
        owner = self._reverse.get(right, _missing)
        if owner is _missing or owner != left:
            log.warning('no reverse entry for %r -> %r; treating as absent',
                        left, right)
            return None
        del self._reverse[right]
        return left, right

    def remove_right(self, right):
        left = self._reverse.pop(right, _missing)
        if left is _missing:
            return None
        owner = self._forward.get(left, _missing)
        if owner is _missing or owner != right:
            log.warning('no forward entry for %r -> %r; treating as absent',
                        left, right)
            return None
        del self._forward[left]
        return left, right

    def clear(self):
        self._forward.clear()
        self._reverse.clear()

    #
    ## queries
    #

    def get_left(self, left, default=None):
        return self._forward.get(left, default)

    def get_right(self, right, default=None):
        return self._reverse.get(right, default)

    def contains_left(self, left):
        return left in self._forward

    def contains_right(self, right):
        return right in self._reverse

    def is_empty(self):
        return not self._forward

    def lefts(self):
        for left in self._forward:
            yield left

    def rights(self):
        for right in self._reverse:
            yield right

    def items(self):
        for left, right in self._forward.items():
            yield left, right

    #
    ## copies
    #

    def copy(self):
        other = self.__class__(capacity=self.capacity)
        other._forward = dict(self._forward)
        other._reverse = dict(self._reverse)
        return other

    __copy__ = copy

    def __deepcopy__(self, memo):
        other = self.__class__(capacity=self.capacity)
        memo[id(self)] = other
        other._forward = copy.deepcopy(self._forward, memo)
        other._reverse = dict((r, l) for l, r in other._forward.items())
        return other

    #
    ## python protocol
    #

    def __len__(self):
        return len(self._forward)

    def __iter__(self):
        return self.items()

    def __contains__(self, pair):
        try:
            left, right = pair
            return left in self._forward and self._forward[left] == right
        except (TypeError, ValueError):
            return False

    def __eq__(self, other):
        if not isinstance(other, BiMap):
            return NotImplemented
        return self._forward == other._forward

    __hash__ = None

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, list(self.items()))
