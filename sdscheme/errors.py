class SchemeError(Exception):
    """ Base class for all sdscheme errors"""
    pass

class SchemeSyntaxError(SchemeError):
    """ Raised when the token stream is malformed"""

class SchemeUnboundVariable(SchemeError):
    """ Raised when a symbol is looked up or set before it is bound"""

class SchemeArityError(SchemeError):
    """ Raised when a special form or procedure gets the wrong number of arguments"""

class SchemeTypeError(SchemeError):
    """ Raised when a non-procedure is applied or a special form is malformed"""

class SchemeRuntimeError(SchemeError):
    """ Raised when a builtin fails on its arguments"""


class SchemeApplicationError(SchemeRuntimeError):
    """ Raised when an application fails; tags the failure with the applied name"""

    def __init__(self, procedure: str, cause: SchemeError):
        super().__init__(f"{procedure}: {cause}")
        self.procedure = procedure
        self.cause = cause
