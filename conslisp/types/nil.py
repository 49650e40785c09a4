from __future__ import annotations


class NilType:
    """The NIL reference: terminator of every list and the empty slot value.

    There is exactly one instance, NIL_REF; constructing or copying NilType
    hands back that instance, so `ref is NIL_REF` is always a valid test.
    """

    __slots__ = ()
    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "NIL"
    def __bool__(self): return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (NilType, ())


NIL_REF = NilType()
