################################################################################
# pyisddecoder/__init__.py
#
# Main __init__ script for pyisddecoder
#
# 2026-10-19:
#   * First version
################################################################################
# IMPORTS
################################################################################
import json, logging, re
################################################################################
# EXCEPTION CLASSES
################################################################################
class DecodeError(Exception):
    def __init__(self, msg):
        self.msg = msg
        super().__init__(self.msg)
    def __str__(self):
        return self.msg
class InvalidCode(DecodeError):
    def __init__(self, val, desc):
        super().__init__("'{}' is not a valid code for {}".format(val, desc))
class InvalidValue(DecodeError):
    def __init__(self, val, desc):
        super().__init__("'{}' is not a valid {} value".format(val, desc))
class InvalidGroup(DecodeError):
    def __init__(self, group, msg=None):
        text = "'{}' is not a valid group".format(group)
        if msg is not None:
            text = "{} ({})".format(text, msg)
        super().__init__(text)
class FieldError(DecodeError):
    """
    Decode failure attributed to a single column of a row

    :param string column: Name of the column (e.g. WND, AA1)
    :param string raw: Raw value of the column
    :param Exception cause: The underlying error
    """
    def __init__(self, column, raw, cause):
        self.column = column
        self.raw    = raw
        self.cause  = cause
        super().__init__("Unable to decode {} group '{}': {}".format(column, raw, cause))
################################################################################
# VALUE CLASSES
################################################################################
class ScaledValue(object):
    """
    A single physical measurement

    :param int/float value: Scaled value, or None if the raw value was missing
    :param string unit: Unit of the measurement
    """
    __slots__ = ("value", "unit")
    def __init__(self, value, unit):
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "unit", unit)
    def __setattr__(self, name, value):
        raise AttributeError("{} is immutable".format(type(self).__name__))
    def __eq__(self, other):
        if not isinstance(other, ScaledValue):
            return NotImplemented
        return self.value == other.value and self.unit == other.unit
    def __hash__(self):
        return hash((self.value, self.unit))
    def to_dict(self):
        return { "value": self.value, "unit": self.unit }
    def __repr__(self):
        return "ScaledValue({!r}, {!r})".format(self.value, self.unit)
class CodedValue(object):
    """
    A single categorical observation

    :param string code: Code as reported (trimmed)
    :param string description: Meaning of the code
    """
    __slots__ = ("code", "description")
    def __init__(self, code, description):
        object.__setattr__(self, "code", code)
        object.__setattr__(self, "description", description)
    def __setattr__(self, name, value):
        raise AttributeError("{} is immutable".format(type(self).__name__))
    def __eq__(self, other):
        if not isinstance(other, CodedValue):
            return NotImplemented
        return self.code == other.code and self.description == other.description
    def __hash__(self):
        return hash((self.code, self.description))
    def to_dict(self):
        return { "code": self.code, "description": self.description }
    def __repr__(self):
        return "CodedValue({!r}, {!r})".format(self.code, self.description)
################################################################################
# FUNCTIONS
################################################################################
def is_missing(raw, char="9"):
    """
    Checks if the value is missing, i.e. every digit in the value is a 9.
    Signs, separators and other non-digit characters are ignored, so packed
    groups such as "999,9,9,9999,9" are also considered missing

    :param string raw: Value to check
    :param string char: Digit representing a missing value (default "9")
    :returns: True if the value is missing, otherwise False
    :rtype: boolean
    """
    if raw is None:
        return True
    for c in raw:
        if c.isdigit() and c != char:
            return False
    return True
_INT_REGEXP   = re.compile(r"^[+-]?\d+$")
_FLOAT_REGEXP = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)$")
def _truncate_divide(val, divisor):
    quotient = abs(val) // abs(divisor)
    return quotient if (val < 0) == (divisor < 0) else -quotient
def decode_numeric(raw, unit, divisor=1, type=int):
    """
    Decodes a fixed-point numeric value

    :param string raw: Raw value
    :param string unit: Unit of the value
    :param int/float divisor: Scale divisor applied to the raw value
    :param type type: Numeric type of the value (int or float)
    :returns: Scaled value. The value attribute is None if raw is missing
    :rtype: ScaledValue
    :raises: InvalidValue if raw is present but not a number
    """
    if is_missing(raw):
        return ScaledValue(None, unit)
    if type is int:
        if not _INT_REGEXP.match(raw):
            raise InvalidValue(raw, "integer")
        return ScaledValue(_truncate_divide(int(raw), int(divisor)), unit)
    if not _FLOAT_REGEXP.match(raw):
        raise InvalidValue(raw, "decimal")
    return ScaledValue(type(raw) / divisor, unit)
def lookup(raw, table, desc=None):
    """
    Looks up a code in a code table

    :param string raw: Raw code
    :param dict table: Mapping of codes to descriptions
    :param string desc: Name of the table, used in error messages
    :returns: Coded value
    :rtype: CodedValue
    :raises: InvalidCode if the code is not in the table
    """
    code = raw.strip()
    if code not in table:
        raise InvalidCode(code, desc if desc is not None else "code table")
    return CodedValue(code, table[code])
def tokenize(raw, sep=","):
    """
    Splits a packed group into its sub-values. Position is significant

    :param string raw: Raw group (e.g. "220,1,N,0072,1")
    :returns: List of sub-values
    :rtype: list
    """
    return raw.split(sep)
def split_pair(raw, offset=None, sep="-"):
    """
    Inserts a separator into a fixed-width value made from two concatenated
    values (e.g. "0315" -> "03-15"). Missing values are not reshaped

    :param string raw: Raw value
    :param int offset: Position to insert the separator (default: midpoint)
    :param string sep: Separator to insert
    :returns: Reshaped value, or None if raw is missing
    :rtype: string
    """
    if is_missing(raw):
        return None
    if offset is None:
        offset = len(raw) // 2
    return "{}{}{}".format(raw[:offset], sep, raw[offset:])
################################################################################
# BASE CLASSES
################################################################################
class Report(object):
    """
    Base class for a meteorological report
    """
    def decode(self, message):
        """
        Decode function
        """
        try:
            return self._decode(message)
        except DecodeError:
            raise
        except Exception as e:
            raise DecodeError(str(e))
    def _decode(self, message):
        """
        Actual decode function. Implement in subclass
        """
        raise NotImplementedError("_decode needs to be implemented in {} subclass".format(type(self).__name__))
    def toJSON(self, data):
        return json.dumps(data, cls=ObsEncoder, ensure_ascii=False)
class Observation(object):
    """
    Base class for one component of a field group. An observation consumes
    _WIDTH consecutive sub-values of the group
    """
    _WIDTH = 1
    def decode(self, raw):
        """
        Decodes the raw sub-value(s) into an observation value
        """
        return self._decode(raw)
    def _decode(self, raw):
        """
        Actual decode function. Implement in subclass
        """
        raise NotImplementedError("_decode needs to be implemented in {} subclass".format(type(self).__name__))
    def __repr__(self):
        return "{}({})".format(type(self).__name__, vars(self))
class Numeric(Observation):
    """
    Scaled numeric value

    :param string unit: Unit of the value
    :param int/float divisor: Scale divisor
    :param type type: int or float
    """
    def __init__(self, unit, divisor=1, type=int):
        self.unit    = unit
        self.divisor = divisor
        self.type    = type
    def _decode(self, raw):
        return decode_numeric(raw, self.unit, self.divisor, self.type)
class Multiplied(Numeric):
    """
    Numeric value reported in multiples of its unit (e.g. tens of degrees)

    :param string unit: Unit of the value
    :param int factor: Multiple the raw value is reported in
    """
    def __init__(self, unit, factor):
        super().__init__(unit)
        self.factor = factor
    def _decode(self, raw):
        result = super()._decode(raw)
        if result.value is None:
            return result
        return ScaledValue(result.value * self.factor, self.unit)
class Code(Observation):
    """
    Value from a code table

    :param CodeTable table: Code table class
    """
    def __init__(self, table):
        self.table = table
    def _decode(self, raw):
        return self.table().decode(raw)
class Raw(Observation):
    """
    Raw string value. None if missing
    """
    def _decode(self, raw):
        return None if is_missing(raw) else raw
class DatePairs(Observation):
    """
    Dates of occurrence reported as several DDdd values. Returns the present
    values as DD-dd

    :param int count: Number of sub-values consumed
    """
    def __init__(self, count):
        self._WIDTH = count
    def _decode(self, raw):
        dates = [split_pair(r) for r in raw]
        return [d for d in dates if d is not None]
class FieldGroup(object):
    """
    Base class for a field group. Subclasses declare _COMPONENTS, an ordered
    list of (name, Observation) tuples matching the sub-values of the group
    """
    _COMPONENTS = []
    @classmethod
    def arity(cls):
        return sum(o._WIDTH for (_, o) in cls._COMPONENTS)
    def decode(self, raw):
        """
        Decodes a packed group into a dict of observation values

        :param string raw: Raw group
        :returns: Decoded group
        :rtype: dict
        :raises: DecodeError if the group cannot be decoded
        """
        parts = tokenize(raw)
        if len(parts) != self.arity():
            raise InvalidGroup(raw, "{} expects {} values, got {}".format(
                type(self).__name__, self.arity(), len(parts)
            ))
        data = {}
        idx = 0
        for (name, o) in self._COMPONENTS:
            if o._WIDTH == 1:
                data[name] = o.decode(parts[idx])
            else:
                data[name] = o.decode(parts[idx:idx + o._WIDTH])
            idx += o._WIDTH
        logging.debug("Decoded {} group {}".format(type(self).__name__, raw))
        return data
class ObsEncoder(json.JSONEncoder):
    def default(self, o):
        if hasattr(o, "to_dict"):
            return o.to_dict()
        return o.__dict__
