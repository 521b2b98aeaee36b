from collections.abc import MutableMapping

from bimap.bimap import BiMap, _missing


def create_map(pairs=None):
    store = BiMap(pairs)
    first = BiMapView(store)
    second = first.inverse
    return first, second


class BiMapView(MutableMapping):
    """
    A plain dict interface over one side of a BiMap.

    Writes through either side go to the same store, so forward[a] = b
    and inverse[b] = a are the same insert.  Missing keys raise KeyError
    like any other mapping.
    """

    def __init__(self, store, inverted=False):
        self.store = store
        self.inverted = inverted

    @property
    def inverse(self):
        return BiMapView(self.store, not self.inverted)

    def __getitem__(self, key):
        if self.inverted:
            val = self.store.get_right(key, _missing)
        else:
            val = self.store.get_left(key, _missing)
        if val is _missing:
            raise KeyError(key)
        return val

    def __setitem__(self, key, value):
        if self.inverted:
            self.store.insert(value, key)
        else:
            self.store.insert(key, value)

    def __delitem__(self, key):
        if self.inverted:
            pair = self.store.remove_right(key)
        else:
            pair = self.store.remove_left(key)
        if pair is None:
            raise KeyError(key)

    def __contains__(self, key):
        if self.inverted:
            return self.store.contains_right(key)
        return self.store.contains_left(key)

    def __iter__(self):
        if self.inverted:
            return self.store.rights()
        return self.store.lefts()

    def __len__(self):
        return len(self.store)

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, dict(self.items()))
