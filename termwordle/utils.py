class dotdict(dict):
    """dot.notation access to dictionary attributes"""
    __getattr__ = lambda self, key: self[key]
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def count_true(flags):
    """
    number of set flags, eg. revealed positions in a mask
    """
    return sum(1 for f in flags if f)
