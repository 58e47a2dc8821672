"""Handle custom atomtable exceptions."""


class AtomTableError(Exception):
    """Base class for all non-trivial errors raised by atomtable."""


class AtomTableWarning(Warning):
    """Base class for all non-trivial warnings raised by atomtable."""


class InvalidAtomicNumberError(AtomTableError, ValueError):
    """Raised when an atomic number does not identify an element."""

    def __init__(self, atomic_number):
        super(InvalidAtomicNumberError, self).__init__(
            "invalid atomic number {}".format(atomic_number)
        )
        self.atomic_number = atomic_number


class InvalidAtomicSymbolError(AtomTableError, ValueError):
    """Raised when a string matches no atomic symbol."""

    def __init__(self, symbol):
        super(InvalidAtomicSymbolError, self).__init__(
            "invalid atomic symbol {}".format(symbol)
        )
        self.symbol = symbol


class InvalidIsotopeError(AtomTableError, ValueError):
    """Raised when a mass number is not tabulated for an element."""

    def __init__(self, symbol, isotope):
        super(InvalidIsotopeError, self).__init__(
            "invalid isotope {} for element {}".format(isotope, symbol)
        )
        self.symbol = symbol
        self.isotope = isotope


class InvalidFormalChargeError(AtomTableError, ValueError):
    """Raised when a formal charge leaves fewer than 0 or more than 8 valence electrons."""

    def __init__(self, symbol, formal_charge):
        super(InvalidFormalChargeError, self).__init__(
            "invalid formal charge {} for element {}".format(formal_charge, symbol)
        )
        self.symbol = symbol
        self.formal_charge = formal_charge


class UnsupportedElementError(AtomTableError):
    """Raised when a property is not tabulated for an element."""

    def __init__(self, symbol, operation):
        super(UnsupportedElementError, self).__init__(
            "{} is not supported for element {}".format(operation, symbol)
        )
        self.symbol = symbol
        self.operation = operation


class ValidationError(AtomTableError):
    """Raised when validating .xml element table files."""

    def __init__(self, message, source, line):
        super(ValidationError, self).__init__(message)
        self.source = source
        self.line = line


class MultipleValidationError(AtomTableError):
    """Used for grouping and raising multiple ValidationErrors of one type."""

    def __init__(self, validation_errors):
        self.validation_errors = validation_errors

    def __str__(self):
        """Represent multiple atomtable ValidationErrors."""
        message = ["\n"]
        for err in self.validation_errors:
            message.append("\t" + str(err))
        return "\n".join(message)


class ValidationWarning(AtomTableWarning):
    """Raised when validating .xml element table files."""

    pass


def raise_collected(errors):
    """Return errors for all collected exceptions."""
    if len(errors) > 1:
        raise MultipleValidationError(errors)
    elif len(errors) == 1:
        raise errors[0]
