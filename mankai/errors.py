
class MankaiError(Exception):
    """ Base class for all Mankai errors"""
    pass

class MankaiSyntaxError(MankaiError):
    """ Raised when source text cannot be read into a syntax tree"""

class MankaiRuntimeError(MankaiError):
    """ Base class for recoverable errors raised during evaluation"""

class MankaiUnboundSymbol(MankaiRuntimeError):
    """ Raised when a symbol is used before it is bound"""

class MankaiNotCallable(MankaiRuntimeError):
    """ Raised when the head of a form does not evaluate to a callable"""

class MankaiTypeError(MankaiRuntimeError):
    """ Raised when an operand has the wrong kind for the operation"""

class MankaiArityError(MankaiRuntimeError):
    """ Raised when the number of arguments passed to a callable is incorrect"""

    def __init__(self, name: str, required: int, found: int, at_least: bool = False):
        self.name = name
        self.required = required
        self.found = found
        self.at_least = at_least
        bound = f"at least {required}" if at_least else str(required)
        super().__init__(f"found {found} arguments but '{name}' requires {bound}")

class MankaiLexError(MankaiSyntaxError):
    """ Raised when source text cannot be split into tokens"""

    def __init__(self, message: str, position: int):
        self.message = message
        self.position = position
        super().__init__(f"{message} at {position}")
