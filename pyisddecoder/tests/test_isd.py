################################################################################
# pyisddecoder/tests/test_isd.py
#
# Unit tests for ISD rows. Requires pytest
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import json
import pytest
from pyisddecoder import isd
from pyisddecoder import ScaledValue as S, CodedValue as C
from pyisddecoder import DecodeError, FieldError, InvalidCode, InvalidGroup
QC_1 = C("1", "Passed all quality control checks")
QC_5 = C("5", "Passed all quality control checks, data originate from an NCEI data source")
QC_9 = C("9", "Passed gross limits check if element is present")
BASE_ROW = {
    "STATION": "72530094846",
    "DATE": "2023-01-01T00:51:00",
    "SOURCE": "7",
    "LATITUDE": "41.96019",
    "LONGITUDE": "-87.93162",
    "ELEVATION": "201.8",
    "NAME": "CHICAGO OHARE INTERNATIONAL AIRPORT, IL US",
    "REPORT_TYPE": "FM-15",
    "CALL_SIGN": "KORD ",
    "QUALITY_CONTROL": "V030",
    "WND": "220,1,N,0072,1",
    "CIG": "22000,1,9,N",
    "VIS": "016093,1,9,9",
    "TMP": "+0056,1",
    "DEW": "-0017,1",
    "SLP": "10132,1"
}
BASE_EXPECTED = {
    "station": "72530094846",
    "date": "2023-01-01T00:51:00",
    "source": "7",
    "latitude": 41.96019,
    "longitude": -87.93162,
    "elevation": 201.8,
    "name": "CHICAGO OHARE INTERNATIONAL AIRPORT, IL US",
    "report_type": "FM-15",
    "call_sign": "KORD",
    "quality_control": "V030",
    "wnd": {
        "direction_angle": S(220, "deg"),
        "direction_quality_code": QC_1,
        "type_code": C("N", "Normal"),
        "speed_rate": S(7.2, "m/s"),
        "speed_quality_code": QC_1
    },
    "cig": {
        "height": S(22000, "m"),
        "quality_code": QC_1,
        "determination_code": C("9", "Missing"),
        "cavok": C("N", "No")
    },
    "vis": {
        "distance": S(16093, "m"),
        "distance_quality_code": QC_1,
        "variability": C("9", "Missing"),
        "variability_quality_code": QC_9
    },
    "tmp": {
        "air_temperature": S(5.6, "Cel"),
        "air_temperature_quality_code": QC_1
    },
    "dew": {
        "dew_point_temperature": S(-1.7, "Cel"),
        "dew_point_temperature_quality_code": QC_1
    },
    "slp": {
        "pressure": S(1013.2, "hPa"),
        "pressure_quality_code": QC_1
    }
}
################################################################################
# CLASSES
################################################################################
class BaseTestISD:
    """
    Base class for ISD tests
    """
    ROW = None
    OPTIONS = {}
    @pytest.fixture
    def decoded(self):
        data = isd.ISD(**self.OPTIONS).decode(self.ROW)
        yield data
    def pytest_generate_tests(self, metafunc):
        data = isd.ISD(**self.OPTIONS).decode(self.ROW)

        if metafunc.function.__name__ == "test_values":
            attrs = self.TEST_ATTRS if hasattr(self, "TEST_ATTRS") else list(data.keys())
            metafunc.parametrize("attr", attrs)

    def test_values(self, decoded, attr):
        if attr not in self.expected:
            assert False, "Expected attribute '{}' not present in decoded output".format(attr)
        else:
            assert decoded[attr] == self.expected[attr], "Decoded attribute '{}' does not match expected output".format(attr)

    def test_no_missing_attributes(self, decoded):
        for attr in self.expected:
            assert attr in decoded, "Attribute '{}' missing from decoded output".format(attr)
class TestISDMandatory(BaseTestISD):
    """
    Tests a row with only the mandatory groups
    """
    ROW = BASE_ROW
    expected = BASE_EXPECTED
class TestISDMissingWind(BaseTestISD):
    """
    Tests a row where the wind is reported as missing. The coded values must
    still be looked up
    """
    ROW = { **BASE_ROW, "WND": "999,9,9,9999,9", "CIG": "99999,9,9,9" }
    TEST_ATTRS = ["wnd", "cig"]
    expected = {
        "wnd": {
            "direction_angle": S(None, "deg"),
            "direction_quality_code": QC_9,
            "type_code": C("9", "Missing"),
            "speed_rate": S(None, "m/s"),
            "speed_quality_code": QC_9
        },
        "cig": {
            "height": S(None, "m"),
            "quality_code": QC_9,
            "determination_code": C("9", "Missing"),
            "cavok": C("9", "Missing")
        }
    }
class TestISDPrecipitation(BaseTestISD):
    """
    Tests precipitation groups
    """
    ROW = {
        **BASE_ROW,
        "AA1": "01,0000,9,5",
        "AA2": "",
        "AD1": "00520,1,0315,9999,2122,1",
        "AH1": "015,0003,9,011230,5",
        "AI1": "060,0010,9,999999,5",
        "AJ1": "0012,1,1,000150,1,1"
    }
    TEST_ATTRS = ["aa1", "ad1", "ah1", "ai1", "aj1"]
    expected = {
        "aa1": {
            "period_quantity": S(1, "h"),
            "depth_dimension": S(0.0, "mm"),
            "condition_code": C("9", "Missing"),
            "quality_code": QC_5
        },
        "ad1": {
            "depth_dimension": S(52.0, "mm"),
            "condition_code": C("1", "Measurement impossible or inaccurate"),
            "dates_of_occurrence": ["03-15", "21-22"],
            "quality_code": QC_1
        },
        "ah1": {
            "period_quantity": S(15, "min"),
            "depth_dimension": S(0.3, "mm"),
            "condition_code": C("9", "Missing"),
            "end_date_time": "011230",
            "quality_code": QC_5
        },
        "ai1": {
            "period_quantity": S(60, "min"),
            "depth_dimension": S(1.0, "mm"),
            "condition_code": C("9", "Missing"),
            "end_date_time": None,
            "quality_code": QC_5
        },
        "aj1": {
            "depth_dimension": S(12, "cm"),
            "condition_code": C("1", "Measurement impossible or inaccurate"),
            "quality_code": QC_1,
            "equivalent_water_depth_dimension": S(15.0, "mm"),
            "equivalent_water_condition_code": C("1", "Measurement impossible or inaccurate"),
            "equivalent_water_condition_quality_code": QC_1
        }
    }
    def test_empty_group_omitted(self, decoded):
        assert "aa2" not in decoded
        assert "_error" not in decoded
class TestISDWeather(BaseTestISD):
    """
    Tests weather occurrence groups
    """
    ROW = {
        **BASE_ROW,
        "AU1": "1,0,02,0,0,1,7",
        "AW1": "61,7",
        "MW1": "05,1",
        "AY1": "6,1,06,1",
        "AZ1": "1,1,01,1"
    }
    TEST_ATTRS = ["au1", "aw1", "mw1", "ay1", "az1"]
    expected = {
        "au1": {
            "intensity_code": C("1", "Light (-)"),
            "descriptor_code": C("0", "No Descriptor"),
            "precipitation_code": C("02", "Rain (RA)"),
            "obscuration_code": C("0", "No Obscuration"),
            "weather_phenomena_code": C("0", "None Reported"),
            "combination_indicator_code": C("1", "Not part of combined weather elements"),
            "quality_code": C("7", "Erroneous, data originate from an NCEI data source")
        },
        "aw1": {
            "atmospheric_condition_code": C("61", "Rain, not freezing, slight"),
            "quality_code": C("7", "Erroneous, data originate from an NCEI data source")
        },
        "mw1": {
            "manual_atmospheric_condition_code": C("05", "Haze"),
            "manual_atmospheric_condition_quality_code": QC_1
        },
        "ay1": {
            "manual_atmospheric_condition_code": C("6", "Rain"),
            "manual_atmospheric_condition_quality_code": QC_1,
            "period_quantity": S(6, "h"),
            "period_quality_code": QC_1
        },
        "az1": {
            "automated_atmospheric_condition_code": C("1", "Visibility reduced"),
            "automated_atmospheric_condition_quality_code": QC_1,
            "period_quantity": S(1, "h"),
            "period_quality_code": QC_1
        }
    }
class TestISDWindTemperaturePressure(BaseTestISD):
    """
    Tests supplementary wind, temperature and pressure groups
    """
    ROW = {
        **BASE_ROW,
        "OC1": "0129,1",
        "KA1": "120,M,+0123,1",
        "MA1": "10129,1,09935,1",
        "MD1": "8,1,0012,1,-0050,1"
    }
    TEST_ATTRS = ["oc1", "ka1", "ma1", "md1"]
    expected = {
        "oc1": {
            "speed_rate": S(12.9, "m/s"),
            "speed_quality_code": QC_1
        },
        "ka1": {
            "period_quantity": S(12.0, "h"),
            "code": C("M", "Maximum temperature"),
            "air_temperature": S(12.3, "Cel"),
            "air_temperature_quality_code": QC_1
        },
        "ma1": {
            "altimeter_setting_rate": S(1012.9, "hPa"),
            "altimeter_quality_code": QC_1,
            "station_pressure_rate": S(993.5, "hPa"),
            "station_pressure_quality_code": QC_1
        },
        "md1": {
            "tendency_code": C("8", "Steady or increasing, then decreasing; or decreasing, then decreasing more rapidly; atmospheric pressure now lower than 3 hours ago"),
            "tendency_quality_code": QC_1,
            "three_hour_quantity": S(1.2, "hPa"),
            "three_hour_quantity_quality_code": QC_1,
            "twenty_four_hour_quantity": S(-5.0, "hPa"),
            "twenty_four_hour_quantity_quality_code": QC_1
        }
    }
class TestISDCloudMarine(BaseTestISD):
    """
    Tests cloud, marine, network metadata, runway and sea surface groups
    """
    ROW = {
        **BASE_ROW,
        "GA1": "07,1,+00800,1,06,1",
        "GF1": "08,99,1,08,1,99,9,01000,1,99,9,99,9",
        "UA1": "I,05,020,1,03,1",
        "CO1": "4,-06",
        "ED1": "18,L,0800,1",
        "SA1": "0152,1"
    }
    TEST_ATTRS = ["ga1", "gf1", "ua1", "co1", "ed1", "sa1"]
    expected = {
        "ga1": {
            "coverage_code": C("07", "Seven oktas - 9/10 or more but not 10/10, or BKN"),
            "coverage_quality_code": QC_1,
            "base_height_dimension": S(800, "m"),
            "base_height_quality_code": QC_1,
            "cloud_type_code": C("06", "Stratocumulus (Sc)"),
            "cloud_type_quality_code": QC_1
        },
        "gf1": {
            "total_coverage_code": C("08", "Eight oktas - 10/10, or OVC"),
            "total_opaque_coverage_code": C("99", "Missing"),
            "total_coverage_quality_code": QC_1,
            "total_lowest_cloud_cover_code": C("08", "Eight oktas - 10/10, or OVC"),
            "total_lowest_cloud_cover_quality_code": QC_1,
            "low_cloud_genus_code": C("99", "Missing"),
            "low_cloud_genus_quality_code": QC_9,
            "lowest_cloud_base_height": S(1000, "m"),
            "lowest_cloud_base_height_quality_code": QC_1,
            "mid_cloud_genus_code": C("99", "Missing"),
            "mid_cloud_genus_quality_code": QC_9,
            "high_cloud_genus_code": C("99", "Missing"),
            "high_cloud_genus_quality_code": QC_9
        },
        "ua1": {
            "method_code": C("I", "Instrumental"),
            "wave_period_quantity": S(5, "s"),
            "wave_height_dimension": S(2.0, "m"),
            "wave_quality_code": QC_1,
            "sea_state_code": C("03", "Slight, wave height = 0.5-1.25 meters"),
            "sea_state_quality_code": QC_1
        },
        "co1": {
            "climate_division_number": "4",
            "utc_lst_conversion": S(-6, "h")
        },
        "ed1": {
            "direction_angle": S(180, "deg"),
            "designator_code": C("L", "Left"),
            "visibility_dimension": S(800, "m"),
            "quality_code": QC_1
        },
        "sa1": {
            "temperature": S(15.2, "Cel"),
            "temperature_quality_code": QC_1
        }
    }
################################################################################
# OPTIONAL GROUP ERROR POLICY
################################################################################
MIXED_ROW = {
    **BASE_ROW,
    "AA1": "01,0000,9,5",
    "AB1": "",
    "AC1": "X,C,1",
    "REM": "MET069METAR KORD 010051Z"
}
def test_optional_groups_independent():
    data = isd.ISD().decode(MIXED_ROW)
    assert data["aa1"]["period_quantity"] == S(1, "h")
    assert "ab1" not in data
    assert "ac1" not in data
    assert data["_error"] == [{
        "column": "AC1", "raw": "X,C,1",
        "message": "'X' is not a valid code for code table precipitation duration"
    }]
def test_optional_error_raise():
    with pytest.raises(FieldError) as e:
        isd.ISD(optional_errors="raise").decode(MIXED_ROW)
    assert e.value.column == "AC1"
    assert e.value.raw == "X,C,1"
    assert isinstance(e.value.cause, InvalidCode)
    assert "AC1" in str(e.value) and "X,C,1" in str(e.value)
def test_optional_error_ignore():
    data = isd.ISD(optional_errors="ignore").decode(MIXED_ROW)
    assert "aa1" in data
    assert "ac1" not in data
    assert "_error" not in data
def test_invalid_policy():
    with pytest.raises(ValueError):
        isd.ISD(optional_errors="skip")
def test_optional_arity_mismatch():
    data = isd.ISD().decode({ **BASE_ROW, "AA1": "01,0000,9" })
    assert "aa1" not in data
    assert data["_error"][0]["column"] == "AA1"
################################################################################
# MANDATORY GROUP ERRORS
################################################################################
@pytest.mark.parametrize("policy", isd.ERROR_POLICIES)
def test_mandatory_invalid_code(policy):
    with pytest.raises(FieldError) as e:
        isd.ISD(optional_errors=policy).decode({ **BASE_ROW, "WND": "220,1,Z,0072,1" })
    assert e.value.column == "WND"
    assert isinstance(e.value.cause, InvalidCode)
def test_mandatory_arity_mismatch():
    with pytest.raises(FieldError) as e:
        isd.ISD().decode({ **BASE_ROW, "WND": "220,1,N,0072" })
    assert isinstance(e.value.cause, InvalidGroup)
def test_mandatory_bad_number():
    with pytest.raises(FieldError) as e:
        isd.ISD().decode({ **BASE_ROW, "TMP": "+00A6,1" })
    assert e.value.column == "TMP"
@pytest.mark.parametrize("value", [None, ""])
def test_mandatory_missing(value):
    row = { **BASE_ROW, "SLP": value }
    with pytest.raises(FieldError) as e:
        isd.ISD().decode(row)
    assert e.value.column == "SLP"
    assert e.value.raw == value
    assert isinstance(e.value.cause, InvalidGroup)
def test_attribute_missing():
    row = dict(BASE_ROW)
    del row["STATION"]
    with pytest.raises(DecodeError):
        isd.ISD().decode(row)
def test_attribute_bad_latitude():
    with pytest.raises(FieldError) as e:
        isd.ISD().decode({ **BASE_ROW, "LATITUDE": "north" })
    assert e.value.column == "LATITUDE"
################################################################################
# OTHER
################################################################################
def test_lower_case_columns():
    row = { k.lower(): v for (k, v) in BASE_ROW.items() }
    assert isd.ISD().decode(row) == isd.ISD().decode(BASE_ROW)
def test_decode_group():
    decoder = isd.ISD()
    assert decoder.decode_group("wnd", "220,1,N,0072,1") == BASE_EXPECTED["wnd"]
    assert decoder.decode_group("AA3", "") is None
    with pytest.raises(InvalidGroup):
        decoder.decode_group("XX1", "1,2,3")
def test_numbered_groups_share_schema():
    for i in range(1, 7):
        assert isd.OPTIONAL_GROUPS["AH{}".format(i)] is isd.OPTIONAL_GROUPS["AI1"]
        assert isd.OPTIONAL_GROUPS["GA{}".format(i)] is isd.OPTIONAL_GROUPS["GA1"]
    for i in range(2, 10):
        assert isd.OPTIONAL_GROUPS["CO{}".format(i)] is not isd.OPTIONAL_GROUPS["CO1"]
    assert len(isd.OPTIONAL_GROUPS) > 180
def test_json():
    decoder = isd.ISD()
    data = decoder.decode({ **BASE_ROW, "AA1": "01,0000,9,5", "AB1": "" })
    output = json.loads(decoder.toJSON(data))
    assert output["wnd"]["direction_angle"] == { "value": 220, "unit": "deg" }
    assert output["wnd"]["type_code"] == { "code": "N", "description": "Normal" }
    assert output["aa1"]["depth_dimension"] == { "value": 0.0, "unit": "mm" }
    assert "ab1" not in output
