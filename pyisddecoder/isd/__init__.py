################################################################################
# pyisddecoder/isd/__init__.py
#
# ISD decoder module for pyisddecoder
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import logging
import pyisddecoder
from . import observations as obs
ATTRIBUTES = [
    "STATION", "DATE", "SOURCE", "LATITUDE", "LONGITUDE", "ELEVATION",
    "NAME", "REPORT_TYPE", "CALL_SIGN", "QUALITY_CONTROL"
]
FLOAT_ATTRIBUTES = ["LATITUDE", "LONGITUDE", "ELEVATION"]
MANDATORY_GROUPS = {
    "WND": obs.Wind,
    "CIG": obs.Ceiling,
    "VIS": obs.Visibility,
    "TMP": obs.Temperature,
    "DEW": obs.DewPoint,
    "SLP": obs.SeaLevelPressure
}
def _numbered(prefix, count, group, start=1):
    return { "{}{}".format(prefix, i): group for i in range(start, start + count) }
OPTIONAL_GROUPS = {
    # Precipitation
    **_numbered("AA", 4, obs.LiquidPrecipitation),
    "AB1": obs.MonthlyPrecipitation,
    "AC1": obs.PrecipitationHistory,
    "AD1": obs.GreatestPrecipitation,
    "AE1": obs.PrecipitationDays,
    "AG1": obs.PrecipitationEstimate,
    **_numbered("AH", 6, obs.ShortDurationPrecipitation),
    **_numbered("AI", 6, obs.ShortDurationPrecipitation),
    "AJ1": obs.SnowDepth,
    "AK1": obs.GreatestSnowDepth,
    **_numbered("AL", 4, obs.SnowAccumulation),
    "AM1": obs.GreatestSnowfall,
    "AN1": obs.MonthlySnowAccumulation,
    **_numbered("AO", 4, obs.MinutePrecipitation),
    # Weather occurrence
    **_numbered("AT", 8, obs.DailyPresentWeather),
    **_numbered("AU", 9, obs.PresentWeather),
    **_numbered("AW", 4, obs.AutomatedPresentWeather),
    **_numbered("AX", 6, obs.PastWeatherSummary),
    **_numbered("AY", 2, obs.ManualPastWeather),
    **_numbered("AZ", 2, obs.AutomatedPastWeather),
    **_numbered("MW", 7, obs.ManualPresentWeather),
    # Wind
    **_numbered("OA", 3, obs.SupplementaryWind),
    **_numbered("OB", 2, obs.HourlyWind),
    "OC1": obs.WindGust,
    **_numbered("OD", 3, obs.SupplementaryWindDirection),
    **_numbered("OE", 3, obs.WindSummary),
    **_numbered("RH", 3, obs.RelativeHumidity),
    # Temperature
    **_numbered("KA", 4, obs.ExtremeTemperature),
    **_numbered("KC", 2, obs.MonthlyExtremeTemperature),
    **_numbered("KD", 2, obs.DegreeDays),
    "KE1": obs.ExtremeTemperatureDays,
    "KF1": obs.DerivedTemperature,
    **_numbered("KG", 2, obs.AverageTemperature),
    # Pressure
    "MA1": obs.AtmosphericPressure,
    "MD1": obs.PressureChange,
    "ME1": obs.GeopotentialHeight,
    "MF1": obs.DailyPressure,
    "MG1": obs.DailyMinimumPressure,
    "MH1": obs.MonthlyPressure,
    "MK1": obs.MonthlyExtremePressure,
    # Cloud and solar
    **_numbered("GA", 6, obs.SkyCoverLayer),
    **_numbered("GD", 6, obs.SkyCoverSummation),
    "GE1": obs.SkyConditionSupplement,
    "GF1": obs.SkyCondition,
    **_numbered("GG", 6, obs.BelowStationCloud),
    "GH1": obs.HourlySolarRadiation,
    "GJ1": obs.SunshineDuration,
    "GK1": obs.SunshinePercentage,
    "GL1": obs.SunshineDuration,
    "GM1": obs.SolarIrradiance,
    "GN1": obs.SolarRadiation,
    "GO1": obs.NetSolarRadiation,
    "GP1": obs.ModelledSolarIrradiance,
    "GQ1": obs.SolarAngle,
    "GR1": obs.ExtraterrestrialRadiation,
    # Ground surface
    "IA1": obs.GroundSurface,
    "IA2": obs.GroundMinimumTemperature,
    "IB1": obs.SurfaceTemperature,
    "IC1": obs.PanEvaporation,
    # Marine
    "UA1": obs.Wave,
    **_numbered("UG", 2, obs.Swell),
    "WA1": obs.IceAccretion,
    "WD1": obs.SeaIce,
    "WG1": obs.SeaIceEdge,
    "WJ1": obs.WaterIce,
    # Network metadata
    "CO1": obs.ClimateDivision,
    **_numbered("CO", 8, obs.ElementTimeOffset, start=2),
    "CR1": obs.ControlSection,
    **_numbered("CT", 3, obs.SubhourlyTemperature),
    **_numbered("CU", 3, obs.HourlyTemperature),
    **_numbered("CV", 3, obs.HourlyTemperatureExtremes),
    "CW1": obs.Wetness,
    **_numbered("CX", 3, obs.GeonorPrecipitation),
    # Climate reference network
    **_numbered("CB", 2, obs.SubhourlyPrecipitation),
    **_numbered("CF", 3, obs.FanSpeed),
    **_numbered("CG", 3, obs.GaugeDepth),
    **_numbered("CH", 2, obs.TemperatureHumidity),
    "CI1": obs.HourlyTemperatureHumidity,
    "CN1": obs.BatteryVoltage,
    "CN2": obs.Diagnostic,
    "CN3": obs.ReferenceResistor,
    "CN4": obs.HeaterDoor,
    # Runway visual range and sea surface temperature
    "ED1": obs.RunwayVisualRange,
    "SA1": obs.SeaSurfaceTemperature
}
ERROR_POLICIES = ["raise", "mark", "ignore"]
################################################################################
# REPORT CLASSES
################################################################################
class ISD(pyisddecoder.Report):
    """
    Decoder for a single row of ISD global hourly data

    :param string optional_errors: What to do when an optional group fails to
        decode. "raise" fails the whole row, "mark" (default) drops the group
        and lists it under "_error", "ignore" drops the group
    """
    def __init__(self, optional_errors="mark"):
        if optional_errors not in ERROR_POLICIES:
            raise ValueError("optional_errors must be one of {}, not '{}'".format(
                ", ".join(ERROR_POLICIES), optional_errors
            ))
        self.optional_errors = optional_errors
    def _decode(self, row):
        """
        Decodes a row, given as a mapping of column name to raw value, and
        returns a dict of the decoded record
        """
        # Column names are upper case in the data, but accept any case
        row = { str(k).upper(): v for (k, v) in row.items() }
        data = {}

        # Station attributes
        for attr in ATTRIBUTES:
            if attr not in row or row[attr] is None:
                raise pyisddecoder.DecodeError("Missing attribute {}".format(attr))
            data[attr.lower()] = self._decode_attribute(attr, row[attr])

        # Mandatory groups. Any failure here is fatal for the row
        for (column, group) in MANDATORY_GROUPS.items():
            raw = row.get(column)
            if not self._is_present(raw):
                raise pyisddecoder.FieldError(column, raw, pyisddecoder.InvalidGroup(column, "missing mandatory group"))
            data[column.lower()] = self._decode_group(column, raw, group)

        # Optional groups. Absent groups are left out of the record altogether
        for (column, group) in OPTIONAL_GROUPS.items():
            raw = row.get(column)
            if not self._is_present(raw):
                continue
            try:
                data[column.lower()] = self._decode_group(column, raw, group)
            except pyisddecoder.FieldError as e:
                if self.optional_errors == "raise":
                    raise
                logging.warning(str(e))
                if self.optional_errors == "mark":
                    if "_error" not in data:
                        data["_error"] = []
                    data["_error"].append({
                        "column": e.column, "raw": e.raw, "message": str(e.cause)
                    })
        return data
    def decode_group(self, column, raw):
        """
        Decodes a single named group

        :param string column: Name of the column (e.g. WND, AA1)
        :param string raw: Raw value of the column
        :returns: Decoded group, or None if the group is empty
        :rtype: dict
        :raises: pyisddecoder.FieldError if the group cannot be decoded
        """
        column = column.upper()
        if column in MANDATORY_GROUPS:
            group = MANDATORY_GROUPS[column]
        elif column in OPTIONAL_GROUPS:
            group = OPTIONAL_GROUPS[column]
        else:
            raise pyisddecoder.InvalidGroup(column, "unknown column")
        if not self._is_present(raw):
            return None
        return self._decode_group(column, raw, group)
    def _decode_group(self, column, raw, group):
        try:
            return group().decode(str(raw))
        except pyisddecoder.DecodeError as e:
            raise pyisddecoder.FieldError(column, raw, e)
    def _decode_attribute(self, attr, raw):
        if attr in FLOAT_ATTRIBUTES:
            try:
                return float(raw)
            except ValueError:
                raise pyisddecoder.FieldError(attr, raw, pyisddecoder.InvalidValue(raw, "decimal"))
        if attr == "CALL_SIGN":
            return "".join(str(raw).split())
        return str(raw)
    def _is_present(self, raw):
        return raw is not None and str(raw).strip() != ""
