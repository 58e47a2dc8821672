from os.path import abspath, join, split
from warnings import warn

from lxml import etree
from lxml.etree import DocumentInvalid

from atomtable.exceptions import ValidationError, ValidationWarning, raise_collected

WILDCARD_SYMBOL = "*"


class Validator(object):
    """Check an element table XML file before it is loaded.

    Parameters
    ----------
    table_file_name : str
        Path to the element table XML file.

    Raises
    ------
    lxml.etree.XMLSyntaxError
        If the file is not well-formed XML.
    lxml.etree.DocumentInvalid
        If the file does not conform to ``elements.xsd``.
    ValidationError, MultipleValidationError
        If the rows of the table are inconsistent.
    """

    def __init__(self, table_file_name):
        table_tree = etree.parse(str(table_file_name))
        self.validate_xsd(table_tree)

        self.elements = table_tree.xpath("/ElementTable/Element")

        self.validate_ordering()
        self.validate_isotopes()
        self.validate_weights()

    @staticmethod
    def validate_xsd(table_tree, xsd_file=None):
        if xsd_file is None:
            xsd_file = join(split(abspath(__file__))[0], "tables", "elements.xsd")

        xmlschema_doc = etree.parse(xsd_file)
        xmlschema = etree.XMLSchema(xmlschema_doc)

        error_texts = {
            "element_number_key": "Atomic number {} is defined a second time at line {}",
            "element_symbol_key": "Atomic symbol {} is defined a second time at line {}",
            "isotope_mass_number_key": "Mass number {} is defined a second time at line {}",
        }

        def create_error(keyword, message, line, source):
            value = message[message.find("[") + 1 : message.find("]")].strip("'")
            error_text = error_texts[keyword].format(value, line)
            return ValidationError(error_text, source, line)

        try:
            xmlschema.assertValid(table_tree)
        except DocumentInvalid as ex:
            # rewrite error message for uniqueness violations only; a facet
            # error on a keyed attribute also logs an IDC entry without a key
            for entry in ex.error_log:
                if entry.type_name != "SCHEMAV_CVC_IDC":
                    continue
                for keyword in error_texts:
                    if keyword in entry.message and "Duplicate" in entry.message:
                        raise create_error(keyword, entry.message, entry.line, ex)
            raise

    def validate_ordering(self):
        """Row i must hold atomic number i, with the wildcard in row 0."""
        errors = []
        for position, entry in enumerate(self.elements):
            number = int(entry.attrib["number"])
            symbol = entry.attrib["symbol"]
            if number != position:
                error = ValidationError(
                    "Element {} has atomic number {} but is listed at position {}"
                    " (line {})".format(symbol, number, position, entry.sourceline),
                    None,
                    entry.sourceline,
                )
                errors.append(error)
            if (number == 0) != (symbol == WILDCARD_SYMBOL):
                error = ValidationError(
                    "Only the wildcard symbol '{}' may use atomic number 0, found"
                    " {} with atomic number {} at line {}".format(
                        WILDCARD_SYMBOL, symbol, number, entry.sourceline
                    ),
                    None,
                    entry.sourceline,
                )
                errors.append(error)
        raise_collected(errors)

    def validate_isotopes(self):
        errors = []
        for entry in self.elements:
            number = int(entry.attrib["number"])
            symbol = entry.attrib["symbol"]
            if symbol == WILDCARD_SYMBOL and entry.xpath("Isotope"):
                errors.append(
                    ValidationError(
                        "The wildcard may not define isotopes (line {})".format(
                            entry.sourceline
                        ),
                        None,
                        entry.sourceline,
                    )
                )
                continue
            for isotope in entry.iterchildren("Isotope"):
                mass_number = int(isotope.attrib["massNumber"])
                if mass_number < number:
                    error = ValidationError(
                        "Mass number {} of {} is below its atomic number {} at"
                        " line {}".format(mass_number, symbol, number, isotope.sourceline),
                        None,
                        isotope.sourceline,
                    )
                    errors.append(error)
        raise_collected(errors)

    def validate_weights(self):
        missing_weights = [
            entry.attrib["symbol"]
            for entry in self.elements
            if entry.attrib.get("weight") is None
            and entry.attrib["symbol"] != WILDCARD_SYMBOL
        ]
        if missing_weights:
            warn(
                "The following elements do not have standard atomic weights: {}".format(
                    ", ".join(missing_weights)
                ),
                ValidationWarning,
            )
