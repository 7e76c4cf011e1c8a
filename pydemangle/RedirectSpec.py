

class RedirectSpec(object):
    """ simple DTO holding the parts of a decoded Z-encoded redirect specification """

    soname = None
    fnname = ""
    is_wrap = False
    eclass_tag = 0
    eclass_prio = 0

    def __init__(self, fnname, soname=None, is_wrap=False, eclass_tag=0, eclass_prio=0):
        self.fnname = fnname
        self.soname = soname
        self.is_wrap = is_wrap
        self.eclass_tag = eclass_tag
        self.eclass_prio = eclass_prio

    @property
    def has_eclass(self):
        return self.eclass_tag != 0

    @classmethod
    def fromDict(cls, spec_dict) -> "RedirectSpec":
        return cls(
            spec_dict["fnname"],
            soname=spec_dict["soname"],
            is_wrap=spec_dict["is_wrap"],
            eclass_tag=spec_dict["eclass_tag"],
            eclass_prio=spec_dict["eclass_prio"],
        )

    def toDict(self) -> dict:
        return {
            "soname": self.soname,
            "fnname": self.fnname,
            "is_wrap": self.is_wrap,
            "eclass_tag": self.eclass_tag,
            "eclass_prio": self.eclass_prio,
        }

    def __eq__(self, other):
        if not isinstance(other, RedirectSpec):
            return NotImplemented
        return self.toDict() == other.toDict()

    def __str__(self):
        kind = "wrap" if self.is_wrap else "replace"
        return "[{}] {}:{} (eclass {:04d}/{})".format(kind, self.soname, self.fnname, self.eclass_tag, self.eclass_prio)
