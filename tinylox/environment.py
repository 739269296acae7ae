from contextlib import contextmanager

from tinylox.errors import UndefinedVariableError


class Environment:
    """Scope chain kept as a stack of frames; frame 0 holds the globals."""

    def __init__(self):
        self.scopes = [{}]

    @property
    def depth(self):
        return len(self.scopes)

    @property
    def globals(self):
        return self.scopes[0]

    def define(self, name, value):
        self.scopes[-1][name] = value

    def assign(self, name, value):
        for scope in reversed(self.scopes):
            if name.lexeme in scope:
                scope[name.lexeme] = value
                return
        raise UndefinedVariableError(name)

    def get(self, name):
        for scope in reversed(self.scopes):
            if name.lexeme in scope:
                return scope[name.lexeme]
        raise UndefinedVariableError(name)

    @contextmanager
    def enclosed(self):
        previous = self.depth
        try:
            self.scopes.append({})
            yield self
        finally:
            del self.scopes[previous:]
