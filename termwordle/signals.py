import blinker


class Signal:
    """
    a blinker.Signal that is also a variable
    when signal.value is set, emit the new value

    each instance owns an anonymous blinker.Signal so receivers connected
    to one game never hear about another.
    """

    def __init__(self, name, value=None, sender=None):
        self.name = name
        self.sender = sender
        self._value = value
        self._signal = blinker.Signal(doc=name)

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, value):
        if value == self._value:
            return

        self._value = value
        self._signal.send(self.sender or self.name, value=self.value)

    def __getattr__(self, name):
        # connect, disconnect, receivers, send...
        if name.startswith('_'):
            raise AttributeError(name)
        return getattr(self._signal, name)
