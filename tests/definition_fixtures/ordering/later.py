from . import _Recording


class LaterEndpoints(_Recording):
    pass
