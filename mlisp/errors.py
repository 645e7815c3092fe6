

class MLispError(Exception):
    """ Base class for all mlisp errors"""
    kind = "Error"


class MLispSyntaxError(MLispError):
    """ Raised when source text or a special form is malformed"""
    kind = "SyntaxError"


class MLispTypeError(MLispError):
    """ Raised when the types of arguments passed to a function are incorrect"""
    kind = "TypeError"


class MLispArityError(MLispTypeError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class MLispNotFound(MLispError):
    """ Raised when a symbol is used before it is bound, or a callee cannot be resolved"""
    kind = "Not Found"


class MLispValueError(MLispError):
    """ Raised when an argument has the right type but an invalid value"""
    kind = "ValueError"


class MLispShapeError(MLispValueError):
    """ Raised when vector or matrix dimensions do not line up"""


class MLispOutOfRange(MLispError):
    """ Raised when a number does not fit the 64-bit integer range"""
    kind = "OutOfRange"


class MLispDivisionByZero(MLispError):
    """ Raised when dividing by zero, or by a float within epsilon of zero"""
    kind = "DivisionByZero"
