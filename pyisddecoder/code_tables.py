################################################################################
# pyisddecoder/code_tables.py
#
# Code tables shared by all ISD field groups
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import pyisddecoder
################################################################################
# BASE CLASSES
################################################################################
class CodeTable(object):
    """
    Base class for code table object. Subclasses set _TABLE (name of the
    table) and _VALUES (mapping of code to description). Every code that can
    appear in the data, including the missing code, must be in _VALUES
    """
    _TABLE  = None
    _VALUES = {}
    def decode(self, value):
        """
        Decodes raw code into a coded value

        :raises: pyisddecoder.InvalidCode if the code is not in the table
        """
        return pyisddecoder.lookup(value, self._VALUES, desc="code table {}".format(self._TABLE))
    @classmethod
    def codes(cls):
        return list(cls._VALUES.keys())
################################################################################
# CODE TABLE CLASSES
################################################################################
class CodeTableQuality(CodeTable):
    """
    Quality status of a reported value
    """
    _TABLE = "quality"
    _VALUES = {
        "0": "Passed gross limits check",
        "1": "Passed all quality control checks",
        "2": "Suspect",
        "3": "Erroneous",
        "4": "Passed gross limits check, data originate from an NCEI data source",
        "5": "Passed all quality control checks, data originate from an NCEI data source",
        "6": "Suspect, data originate from an NCEI data source",
        "7": "Erroneous, data originate from an NCEI data source",
        "9": "Passed gross limits check if element is present",
        "A": "Data value flagged as suspect, but accepted as a good value",
        "C": "Temperature and dew point received from Automated Weather Observing System (AWOS) are reported in whole degrees Celsius. Automated QC flags these values, but they are accepted as valid.",
        "I": "Data value not originally in data, but inserted by validator",
        "M": "Manual changes made to value based on information provided by NWS or FAA",
        "P": "Data value not originally flagged as suspect, but replaced by validator",
        "R": "Data value replaced with value computed by NCEI software",
        "U": "Data value replaced with edited value"
    }
class CodeTableBool(CodeTable):
    """
    Yes/No condition
    """
    _TABLE = "bool"
    _VALUES = {
        "N": "No",
        "Y": "Yes",
        "9": "Missing"
    }
class CodeTableDailyQuality(CodeTable):
    """
    Quality status of a value in a daily summary or from a network sensor
    """
    _TABLE = "daily quality"
    _VALUES = {
        "1": "Passed all quality control checks",
        "3": "Failed all quality control checks",
        "9": "Missing"
    }
class CodeTableDailyQualityFlag(CodeTable):
    """
    Quality flag of a value in a daily summary or from a network sensor
    """
    _TABLE = "daily quality flag"
    _VALUES = {
        "0": "Passed all quality control checks",
        "1": "Did not pass all quality check",
        "2": "Did not pass all quality check",
        "3": "Did not pass all quality check",
        "4": "Did not pass all quality check",
        "5": "Did not pass all quality check",
        "6": "Did not pass all quality check",
        "7": "Did not pass all quality check",
        "8": "Did not pass all quality check",
        "9": "Did not pass all quality check"
    }
class CodeTableDerived(CodeTable):
    """
    Whether a summary value was derived from hourly values
    """
    _TABLE = "derived"
    _VALUES = {
        "D": "Derived from hourly values",
        "9": "Missing"
    }
