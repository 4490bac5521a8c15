

class WahlbergError(Exception):
    """ Base class for all Wahlberg errors"""
    pass

class WahlbergParseError(WahlbergError):
    """ Raised when a snippet does not match the grammar"""
    pass

class WahlbergLexError(WahlbergParseError):
    """ Raised when the lexer meets a character it does not recognise"""

    def __init__(self, char: str, position: int):
        super().__init__(f"unexpected character {char!r} at {position}")
        self.char = char
        self.position = position

class WahlbergArithmeticError(WahlbergError, ArithmeticError):
    """ Raised when integer arithmetic cannot produce a result"""

class WahlbergOverflowError(WahlbergArithmeticError):
    """ Raised when a result does not fit in a signed 64-bit integer"""

class WahlbergZeroDivisionError(WahlbergArithmeticError):
    """ Raised on division by zero"""

class WahlbergInvalidIdent(WahlbergError):
    """ Raised when something other than an Ident is bound in an environment"""

class WahlbergConfigError(WahlbergError):
    """ Raised when a configuration value is not recognised"""
