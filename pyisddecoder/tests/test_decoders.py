################################################################################
# pyisddecoder/tests/test_decoders.py
#
# Unit tests for the value decoders and code tables. Requires pytest
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import pytest
import pyisddecoder as p
from pyisddecoder import code_tables as ct
from pyisddecoder.isd import code_tables as ict
from pyisddecoder import isd
from pyisddecoder.isd import observations as obs
################################################################################
# MISSING VALUES
################################################################################
@pytest.mark.parametrize("raw", [
    "", "9", "999", "99999", "+999999", "-9999", "999,9,9,9999,9", "N", None
])
def test_is_missing(raw):
    assert p.is_missing(raw)
@pytest.mark.parametrize("raw", [
    "929", "0", "+0000", "1", "99989", "220,1,N,0072,1"
])
def test_is_present(raw):
    assert not p.is_missing(raw)
@pytest.mark.parametrize("raw", ["", "999", "+9999", "99999"])
def test_decode_numeric_missing(raw):
    result = p.decode_numeric(raw, "hPa", 10, float)
    assert result.value is None
    assert result.unit == "hPa"
################################################################################
# SCALING
################################################################################
@pytest.mark.parametrize("raw,divisor,type,expected", [
    ("220", 1, int, 220),
    ("0072", 10, float, 7.2),
    ("+0056", 10, float, 5.6),
    ("-0123", 10, float, -12.3),
    ("10132", 10, float, 1013.2),
    ("0129", 100, float, 1.29),
    ("929", 1, int, 929),
    ("7", 2, int, 3),
    ("-7", 2, int, -3)
])
def test_decode_numeric_scaled(raw, divisor, type, expected):
    assert p.decode_numeric(raw, "x", divisor, type) == p.ScaledValue(expected, "x")
@pytest.mark.parametrize("r", [1, 12, 345, 1013, 20000])
def test_decode_numeric_scale_law(r):
    assert p.decode_numeric(str(r), "mm", 10, float).value == r / 10
@pytest.mark.parametrize("raw,type", [
    ("12A", int), ("1.5", int), ("+00A6", float), ("1 2", float)
])
def test_decode_numeric_invalid(raw, type):
    with pytest.raises(p.InvalidValue):
        p.decode_numeric(raw, "x", 1, type)
def test_scaled_value_immutable():
    value = p.ScaledValue(1, "m")
    with pytest.raises(AttributeError):
        value.value = 2
################################################################################
# CODE LOOKUP
################################################################################
def test_lookup():
    assert p.lookup(" N ", ct.CodeTableBool._VALUES) == p.CodedValue("N", "No")
def test_lookup_unknown():
    with pytest.raises(p.InvalidCode) as e:
        p.lookup("X", ct.CodeTableBool._VALUES, desc="bool")
    assert "'X'" in str(e.value)
def test_code_table_unknown():
    with pytest.raises(p.InvalidCode) as e:
        ict.CodeTableWindType().decode("Z")
    assert "wind type" in str(e.value)
@pytest.mark.parametrize("table", [
    ct.CodeTableQuality, ct.CodeTableBool, ct.CodeTableDailyQuality,
    ict.CodeTableWindType, ict.CodeTableCeilingDetermination,
    ict.CodeTableVisibilityVariability, ict.CodeTablePrecipitationCondition,
    ict.CodeTableIntensity, ict.CodeTableDescriptor, ict.CodeTableObscuration,
    ict.CodeTablePressureTendency, ict.CodeTableIsobaricLevel
])
def test_code_table_missing_code(table):
    assert table().decode("9").code == "9"
@pytest.mark.parametrize("table,width", [
    (ict.CodeTablePrecipitationType, 2), (ict.CodeTablePastWeatherSummary, 2),
    (ict.CodeTableAutomatedWeather, 2), (ict.CodeTableManualPresentWeather, 2)
])
def test_code_table_two_figure_codes(table, width):
    assert table().decode("99").code == "99"
    assert all(len(c) == width for c in table.codes())
def test_manual_present_weather_complete():
    assert ict.CodeTableManualPresentWeather.codes() == ["{:02d}".format(i) for i in range(100)]
################################################################################
# TOKENIZING
################################################################################
def test_tokenize():
    assert p.tokenize("220,1,N,0072,1") == ["220", "1", "N", "0072", "1"]
    assert p.tokenize("a,,b") == ["a", "", "b"]
@pytest.mark.parametrize("raw,offset,expected", [
    ("0315", None, "03-15"),
    ("123456", 2, "12-3456"),
    ("9999", None, None)
])
def test_split_pair(raw, offset, expected):
    assert p.split_pair(raw, offset) == expected
################################################################################
# FIELD GROUPS
################################################################################
def test_field_group_arity():
    assert obs.Wind.arity() == 5
    assert obs.GreatestPrecipitation.arity() == 6
    assert obs.HourlyWind.arity() == 13
def test_field_group_wrong_arity():
    with pytest.raises(p.InvalidGroup):
        obs.Temperature().decode("+0056,1,1")
def test_field_group_all_missing_dates():
    data = obs.GreatestSnowfall().decode("9999,9,9999,9999,9999,9")
    assert data["depth_dimension"] == p.ScaledValue(None, "cm")
    assert data["dates_of_occurrence"] == []
################################################################################
# CODE DOMAINS
################################################################################
def _codes(start, stop, width=1, *extra):
    return ["{:0{}d}".format(i, width) for i in range(start, stop + 1)] + list(extra)
PRECIPITATION_CONDITION = _codes(0, 8, 1, "E", "I", "J", "9")
SHARED_DOMAINS = {
    ct.CodeTableQuality: _codes(0, 7, 1, "9"),
    ct.CodeTableDailyQuality: ["1", "3", "9"],
    ct.CodeTableDailyQualityFlag: _codes(0, 9),
    ct.CodeTableBool: ["N", "Y", "9"],
    ct.CodeTableDerived: ["D", "9"]
}
FIELD_DOMAINS = {
    ("Wind", "type_code"): list("ABCHNRQTV9"),
    ("Ceiling", "determination_code"): list("ABCDEMPRSUVW9"),
    ("Visibility", "variability"): ["N", "V", "9"],
    ("LiquidPrecipitation", "condition_code"): PRECIPITATION_CONDITION,
    ("MonthlyPrecipitation", "condition_code"): PRECIPITATION_CONDITION,
    ("PrecipitationHistory", "duration_code"): _codes(0, 3, 1, "9"),
    ("PrecipitationHistory", "characteristic_code"): ["C", "I", "9"],
    ("GreatestPrecipitation", "condition_code"): PRECIPITATION_CONDITION,
    ("PrecipitationEstimate", "discrepancy_code"): _codes(0, 5, 1, "9"),
    ("ShortDurationPrecipitation", "condition_code"): PRECIPITATION_CONDITION,
    ("SnowDepth", "condition_code"): PRECIPITATION_CONDITION,
    ("SnowDepth", "equivalent_water_condition_code"): PRECIPITATION_CONDITION,
    ("GreatestSnowDepth", "condition_code"): PRECIPITATION_CONDITION,
    ("SnowAccumulation", "condition_code"): PRECIPITATION_CONDITION,
    ("GreatestSnowfall", "condition_code"): PRECIPITATION_CONDITION,
    ("MonthlySnowAccumulation", "condition_code"): PRECIPITATION_CONDITION,
    ("MinutePrecipitation", "condition_code"): PRECIPITATION_CONDITION,
    ("DailyPresentWeather", "source_element"): ["AU", "AW", "MW"],
    ("DailyPresentWeather", "weather_type"): _codes(1, 19, 2, "21", "22"),
    ("DailyPresentWeather", "weather_type_abbreviation"): ["FG", "FG+", "TS", "RA", "SN", "MIFG", "FZFG"],
    ("PresentWeather", "intensity_code"): _codes(0, 4, 1, "9"),
    ("PresentWeather", "descriptor_code"): _codes(0, 9),
    ("PresentWeather", "precipitation_code"): _codes(0, 9, 2, "99"),
    ("PresentWeather", "obscuration_code"): _codes(0, 9),
    ("PresentWeather", "weather_phenomena_code"): _codes(0, 5, 1, "9"),
    ("PresentWeather", "combination_indicator_code"): _codes(1, 3, 1, "9"),
    ("AutomatedPresentWeather", "atmospheric_condition_code"): ["00", "01", "05", "10", "20", "30", "40", "50", "61", "70", "89", "96", "99"],
    ("PastWeatherSummary", "atmospheric_condition_code"): _codes(0, 11, 2, "99"),
    ("ManualPastWeather", "manual_atmospheric_condition_code"): _codes(0, 9),
    ("AutomatedPastWeather", "automated_atmospheric_condition_code"): _codes(0, 9),
    ("ManualPresentWeather", "manual_atmospheric_condition_code"): _codes(0, 99, 2),
    ("SupplementaryWind", "type_code"): _codes(1, 6, 1, "9"),
    ("SupplementaryWindDirection", "type_code"): _codes(1, 6, 1, "9"),
    ("WindSummary", "type_code"): _codes(1, 5, 1, "9"),
    ("RelativeHumidity", "code"): ["M", "N", "X", "9"],
    ("ExtremeTemperature", "code"): ["N", "M", "O", "P", "9"],
    ("MonthlyExtremeTemperature", "code"): ["N", "M", "O", "P", "9"],
    ("MonthlyExtremeTemperature", "condition_code"): ["1", "9"],
    ("DegreeDays", "code"): ["H", "C", "9"],
    ("AverageTemperature", "code"): ["D", "W", "9"],
    ("PressureChange", "tendency_code"): _codes(0, 9),
    ("GeopotentialHeight", "code"): _codes(1, 5, 1, "9"),
    ("SkyCoverLayer", "coverage_code"): _codes(0, 10, 2, "99"),
    ("SkyCoverLayer", "cloud_type_code"): _codes(0, 23, 2, "99"),
    ("SkyCoverSummation", "coverage_code"): _codes(0, 6, 1, "9"),
    ("SkyCoverSummation", "coverage_code_2"): _codes(0, 19, 2, "99"),
    ("SkyCoverSummation", "characteristic_code"): _codes(1, 4, 1, "9"),
    ("SkyConditionSupplement", "convective_cloud_code"): _codes(0, 7, 1, "9"),
    ("SkyConditionSupplement", "vertical_datum_code"): ["AGL", "MSL", "WGS84E", "WGS84G", "999999"],
    ("SkyCondition", "total_coverage_code"): _codes(0, 10, 2, "99"),
    ("SkyCondition", "total_opaque_coverage_code"): _codes(0, 10, 2, "99"),
    ("SkyCondition", "total_lowest_cloud_cover_code"): _codes(0, 10, 2, "99"),
    ("SkyCondition", "low_cloud_genus_code"): _codes(0, 9, 2, "99"),
    ("SkyCondition", "mid_cloud_genus_code"): _codes(0, 9, 2, "99"),
    ("SkyCondition", "high_cloud_genus_code"): _codes(0, 9, 2, "99"),
    ("BelowStationCloud", "coverage_code"): _codes(0, 10, 2, "99"),
    ("BelowStationCloud", "type_code"): _codes(0, 23, 2, "99"),
    ("BelowStationCloud", "top_code"): _codes(0, 9, 2, "99"),
    ("SolarIrradiance", "global_irradiance_data_flag"): _codes(0, 99, 2),
    ("SolarIrradiance", "direct_beam_irradiance_data_flag"): _codes(0, 99, 2),
    ("SolarIrradiance", "diffuse_irradiance_data_flag"): _codes(0, 99, 2),
    ("SolarIrradiance", "uvb_global_irradiance_data_flag"): _codes(0, 99, 2),
    ("ModelledSolarIrradiance", "global_horizontal_source_flag"): _codes(1, 3, 2, "99"),
    ("ModelledSolarIrradiance", "direct_normal_source_flag"): _codes(1, 3, 2, "99"),
    ("ModelledSolarIrradiance", "diffuse_horizontal_source_flag"): _codes(1, 3, 2, "99"),
    ("GroundSurface", "observation_code"): _codes(0, 31, 2, "99"),
    ("PanEvaporation", "wind_movement_condition_code"): _codes(1, 3, 1, "9"),
    ("PanEvaporation", "evaporation_condition_code"): _codes(1, 3, 1, "9"),
    ("PanEvaporation", "max_pan_water_temperature_condition_code"): _codes(1, 3, 1, "9"),
    ("PanEvaporation", "min_pan_water_temperature_condition_code"): _codes(1, 3, 1, "9"),
    ("Wave", "method_code"): ["M", "I", "9"],
    ("Wave", "sea_state_code"): _codes(0, 9, 2, "99"),
    ("IceAccretion", "source_code"): _codes(1, 5, 1, "9"),
    ("IceAccretion", "tendency_code"): _codes(0, 4, 1, "9"),
    ("SeaIce", "edge_bearing_code"): _codes(0, 10, 2, "99"),
    ("SeaIce", "non_uniform_concentration_code"): _codes(6, 9, 2, "99"),
    ("SeaIce", "ship_relative_position_code"): _codes(0, 2, 1, "9"),
    ("SeaIce", "ship_penetrability_code"): _codes(1, 3, 1, "9"),
    ("SeaIce", "ice_trend_code"): _codes(1, 6, 1, "9"),
    ("SeaIce", "development_code"): _codes(0, 9, 2, "99"),
    ("SeaIce", "growler_bergy_bit_presence_code"): _codes(0, 2, 1, "9"),
    ("SeaIceEdge", "edge_bearing_code"): _codes(0, 10, 2, "99"),
    ("SeaIceEdge", "edge_orientation_code"): _codes(0, 9, 2, "99"),
    ("SeaIceEdge", "formation_type_code"): _codes(0, 9, 2, "99"),
    ("SeaIceEdge", "navigation_effect_code"): _codes(0, 9, 2, "99"),
    ("WaterIce", "primary_ice_phenomenon"): ["00", "04", "10", "12", "20", "29", "37", "47", "59", "65", "73", "99"],
    ("WaterIce", "secondary_ice_phenomenon"): ["00", "04", "10", "12", "20", "29", "37", "47", "59", "65", "73", "99"],
    ("WaterIce", "under_ice_slush_condition"): _codes(0, 3, 1, "9"),
    ("WaterIce", "water_level"): ["B", "H", "N", "O", "9"],
    ("HeaterDoor", "gauge_heater_code"): ["0", "1", "9"],
    ("HeaterDoor", "door_code"): ["0", "1", "9"],
    ("RunwayVisualRange", "designator_code"): ["L", "C", "R", "U", "9"]
}
def _code_fields():
    groups = set(isd.MANDATORY_GROUPS.values()) | set(isd.OPTIONAL_GROUPS.values())
    fields = []
    for group in sorted(groups, key=lambda g: g.__name__):
        for (name, o) in group._COMPONENTS:
            if isinstance(o, p.Code):
                fields.append((group.__name__, name, o))
    return fields
@pytest.mark.parametrize("group,name,observation", _code_fields())
def test_code_field_domain(group, name, observation):
    domain = FIELD_DOMAINS.get((group, name), SHARED_DOMAINS.get(observation.table))
    assert domain is not None, "No code domain for {}.{}".format(group, name)
    for code in domain:
        assert observation.decode(code).code == code
def test_code_field_domains_known():
    known = set((group, name) for (group, name, _) in _code_fields())
    assert set(FIELD_DOMAINS.keys()) <= known
def test_automated_past_weather_single_figure():
    with pytest.raises(p.InvalidCode):
        obs.AutomatedPastWeather().decode("01,1,01,1")
