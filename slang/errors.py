
class SlangError(Exception):
    """ Base class for all Slang errors"""
    pass

class SlangLexError(SlangError):
    """ Raised when a token buffer matches no token class"""
    pass

class SlangSyntaxError(SlangError):
    """ Raised when the token stream does not match the grammar"""

class SlangUnboundSymbol(SlangError):
    """ Raised when a variable is used before it is bound"""

class SlangArityError(SlangError):
    """ Raised when a special form receives the wrong number of operands"""

class SlangTypeError(SlangError):
    """ Raised when a node has a shape no evaluation rule accepts"""

class SlangNotImplementedError(SlangError):
    """ Raised by special forms that are reserved but not implemented yet"""

class SlangPatternError(SlangError):
    """ Raised when a literal lambda parameter does not match its argument"""

    def __init__(self, message, expected=None, actual=None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual

class SlangLoadError(SlangError):
    """ Raised when `load` cannot find its file"""
