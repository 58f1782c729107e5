from ctypes import *

def TypedEnumerationType(tp):
    class EnumerationType(type(tp)):  # type: ignore
        def __new__(metacls, name, bases, dict):
            if not "_members_" in dict:
                _members_ = {}
                for key, value in dict.items():
                    if not key.startswith("_") and isinstance(value, int):
                        _members_[key] = value

                dict["_members_"] = _members_
            else:
                _members_ = dict["_members_"]

            dict["_reverse_map_"] = {v: k for k, v in _members_.items()}
            cls = type(tp).__new__(metacls, name, bases, dict)
            # members become instances, so PixelFormat.RGB24 is a PixelFormat
            for key, value in _members_.items():
                setattr(cls, key, cls(value))
            return cls

        def __repr__(self):
            return "<Enumeration %s>" % self.__name__

        def __iter__(self):
            return (getattr(self, key) for key in self._members_)

        def __len__(self):
            return len(self._members_)

    return EnumerationType

def TypedCEnumeration(tp):
    class CEnumeration(tp, metaclass=TypedEnumerationType(tp)):
        _members_ = {}

        @property
        def name(self):
            return self._reverse_map_.get(self.value, '(unknown)')

        def __repr__(self):
            return f"<{self.__class__.__name__}.{self.name}: {self.value:#x}>"

        def __str__(self):
            return self.name

        def __eq__(self, other):
            if isinstance(other, int):
                return self.value == other

            return type(self) == type(other) and self.value == other.value

        def __hash__(self):
            return hash((type(self), self.value))

        def __int__(self):
            return self.value

    return CEnumeration
