################################################################################
# pyisddecoder/isd/code_tables.py
#
# Code tables for decoding ISD field groups
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
from pyisddecoder.code_tables import CodeTable
################################################################################
# MANDATORY GROUPS
################################################################################
class CodeTableWindType(CodeTable):
    """
    Wind observation type
    """
    _TABLE = "wind type"
    _VALUES = {
        "A": "Abridged Beaufort",
        "B": "Beaufort",
        "C": "Calm",
        "H": "5-Minute Average Speed",
        "N": "Normal",
        "R": "60-Minute Average Speed",
        "Q": "Squall",
        "T": "180 Minute Average Speed",
        "V": "Variable",
        "9": "Missing"
    }
class CodeTableCeilingDetermination(CodeTable):
    """
    Method used to determine the ceiling
    """
    _TABLE = "ceiling determination"
    _VALUES = {
        "A": "Aircraft",
        "B": "Balloon",
        "C": "Statistically derived",
        "D": "Persistent cirriform ceiling (pre-1950 data)",
        "E": "Estimated",
        "M": "Measured",
        "P": "Precipitation ceiling (pre-1950 data)",
        "R": "Radar",
        "S": "ASOS augmented",
        "U": "Unknown ceiling (pre-1950 data)",
        "V": "Variable ceiling (pre-1950 data)",
        "W": "Obscured",
        "9": "Missing"
    }
class CodeTableVisibilityVariability(CodeTable):
    """
    Whether the visibility is variable
    """
    _TABLE = "visibility variability"
    _VALUES = {
        "N": "Not variable",
        "V": "Variable",
        "9": "Missing"
    }
################################################################################
# PRECIPITATION
################################################################################
class CodeTablePrecipitationCondition(CodeTable):
    """
    Condition of a precipitation or snow measurement
    """
    _TABLE = "precipitation condition"
    _VALUES = {
        "0": "Not reported",
        "1": "Measurement impossible or inaccurate",
        "2": "Trace",
        "3": "Begin accumulated period (precipitation amount missing until end of accumulated period)",
        "4": "End accumulated period",
        "5": "Begin deleted period (precipitation amount missing due to data problem)",
        "6": "End deleted period",
        "7": "Begin missing period",
        "8": "End missing period",
        "E": "Estimated data value (eg, from nearby station)",
        "I": "Incomplete precipitation amount, excludes one or more missing reports, such as one or more 15-minute reports not included in the 1-hour precipitation total",
        "J": "Incomplete precipitation amount, excludes one or more erroneous reports, such as one or more 1-hour precipitation amounts excluded from the 24-hour total",
        "9": "Missing"
    }
class CodeTablePrecipitationDuration(CodeTable):
    """
    Duration of precipitation
    """
    _TABLE = "precipitation duration"
    _VALUES = {
        "0": "Lasted less than 1 hour",
        "1": "Lasted 1 - 3 hours",
        "2": "Lasted 3 - 6 hours",
        "3": "Lasted more than 6 hours",
        "9": "Missing"
    }
class CodeTablePrecipitationCharacteristic(CodeTable):
    """
    Characteristic of precipitation
    """
    _TABLE = "precipitation characteristic"
    _VALUES = {
        "C": "Continuous",
        "I": "Intermittent",
        "9": "Missing"
    }
class CodeTablePrecipitationDiscrepancy(CodeTable):
    """
    Agreement between reported precipitation and reported weather
    """
    _TABLE = "precipitation discrepancy"
    _VALUES = {
        "0": "Reported amount of precipitation and reported weather agree",
        "1": "Precipitation missing or not reported and none inferred by weather",
        "2": "Precipitation missing, but precipitation inferred by weather",
        "3": "Precipitation reported, but none inferred by weather",
        "4": "Zero precipitation reported, but precipitation inferred by weather",
        "5": "Zero precipitation reported, no precipitation inferred and precipitation not occurring at the reporting station",
        "9": "Missing"
    }
################################################################################
# WEATHER OCCURRENCE
################################################################################
class CodeTableWeatherSource(CodeTable):
    """
    Source of a daily present weather element
    """
    _TABLE = "weather source"
    _VALUES = {
        "AU": "Sourced from automated ASOS/AWOS sensors",
        "AW": "Sourced from automated sensors",
        "MW": "Sourced from manually reported present weather"
    }
class CodeTableWeatherType(CodeTable):
    """
    Daily present weather type
    """
    _TABLE = "weather type"
    _VALUES = {
        "01": "Fog, ice fog or freezing fog (may include heavy fog)",
        "02": "Heavy fog or heavy freezing fog (not always distinguished from fog)",
        "03": "Thunder",
        "04": "Ice pellets, sleet, snow pellets or small hail",
        "05": "Hail (may include small hail)",
        "06": "Glaze or rime",
        "07": "Dust, volcanic ash, blowing dust, blowing sand or blowing obstruction",
        "08": "Smoke or haze",
        "09": "Blowing or drifting snow",
        "10": "Tornado, water spout or funnel cloud",
        "11": "High or damaging winds",
        "12": "Blowing spray",
        "13": "Mist",
        "14": "Drizzle",
        "15": "Freezing drizzle",
        "16": "Rain",
        "17": "Freezing rain",
        "18": "Snow, snow pellets, snow grains or ice crystals",
        "19": "Unknown precipitation",
        "21": "Ground fog",
        "22": "Ice fog or freezing fog"
    }
class CodeTableWeatherAbbreviation(CodeTable):
    """
    Daily present weather type abbreviation
    """
    _TABLE = "weather abbreviation"
    _VALUES = {
        "FG": "Fog, ice fog or freezing fog (may include heavy fog)",
        "FG+": "Heavy fog or heavy freezing fog (not always distinguished from fog)",
        "TS": "Thunder",
        "PL": "Ice pellets, sleet, snow pellets or small hail",
        "GR": "Hail (may include small hail)",
        "GL": "Glaze or rime",
        "DU": "Dust, volcanic ash, blowing dust, blowing sand or blowing obstruction",
        "HZ": "Smoke or haze",
        "BLSN": "Blowing or drifting snow",
        "FC": "Tornado, water spout or funnel cloud",
        "WIND": "High or damaging winds",
        "BLPY": "Blowing spray",
        "BR": "Mist",
        "DZ": "Drizzle",
        "FZDZ": "Freezing drizzle",
        "RA": "Rain",
        "FZRA": "Freezing rain",
        "SN": "Snow, snow pellets, snow grains or ice crystals",
        "UP": "Unknown precipitation",
        "MIFG": "Ground fog",
        "FZFG": "Ice fog or freezing fog"
    }
class CodeTableIntensity(CodeTable):
    """
    Intensity and proximity of present weather
    """
    _TABLE = "intensity"
    _VALUES = {
        "0": "Not Reported",
        "1": "Light (-)",
        "2": "Moderate or Not Reported (no entry in original observation)",
        "3": "Heavy (+)",
        "4": "Vicinity (VC)",
        "9": "Missing"
    }
class CodeTableDescriptor(CodeTable):
    """
    Present weather descriptor
    """
    _TABLE = "descriptor"
    _VALUES = {
        "0": "No Descriptor",
        "1": "Shallow (MI)",
        "2": "Partial (PR)",
        "3": "Patches (BC)",
        "4": "Low Drifting (DR)",
        "5": "Blowing (BL)",
        "6": "Shower(s) (SH)",
        "7": "Thunderstorm (TS)",
        "8": "Freezing (FZ)",
        "9": "Missing"
    }
class CodeTablePrecipitationType(CodeTable):
    """
    Present weather precipitation type
    """
    _TABLE = "precipitation type"
    _VALUES = {
        "00": "No Precipitation",
        "01": "Drizzle (DZ)",
        "02": "Rain (RA)",
        "03": "Snow (SN)",
        "04": "Snow Grains (SG)",
        "05": "Ice Crystals (IC)",
        "06": "Ice Pellets (PL)",
        "07": "Hail (GR)",
        "08": "Small Hail and/or Snow Pellets (GS)",
        "09": "Unknown Precipitation (UP)",
        "99": "Missing"
    }
class CodeTableObscuration(CodeTable):
    """
    Present weather obscuration
    """
    _TABLE = "obscuration"
    _VALUES = {
        "0": "No Obscuration",
        "1": "Mist (BR)",
        "2": "Fog (FG)",
        "3": "Smoke (FU)",
        "4": "Volcanic Ash (VA)",
        "5": "Widespread Dust (DU)",
        "6": "Sand (SA)",
        "7": "Haze (HZ)",
        "8": "Spray (PY)",
        "9": "Missing"
    }
class CodeTableOtherPhenomena(CodeTable):
    """
    Other present weather phenomena
    """
    _TABLE = "other weather phenomena"
    _VALUES = {
        "0": "None Reported",
        "1": "Well-Developed Dust/Sand Whirls (PO)",
        "2": "Squalls (SQ)",
        "3": "Funnel Cloud, Tornado, Waterspout (FC)",
        "4": "Sandstorm (SS)",
        "5": "Duststorm (DS)",
        "9": "Missing"
    }
class CodeTableCombinationIndicator(CodeTable):
    """
    Whether a present weather element is part of a combined report
    """
    _TABLE = "combination indicator"
    _VALUES = {
        "1": "Not part of combined weather elements",
        "2": "Beginning element of combined weather elements",
        "3": "Combined with previous weather element to form a single weather report",
        "9": "Missing"
    }
class CodeTableAutomatedWeather(CodeTable):
    """
    Present weather reported by an automated station
    """
    _TABLE = "automated weather"
    _VALUES = {
        "00": "No significant weather observed",
        "01": "Clouds generally dissolving or becoming less developed",
        "02": "State of sky on the whole unchanged during the past hour",
        "03": "Clouds generally forming or developing during the past hour",
        "04": "Haze, smoke, or dust in suspension in the air, visibility equal to or greater than 1km",
        "05": "Smoke",
        "07": "Dust or sand raised by wind at or near the station at the time of observation, but no well-developed dust whirl(s) or sand whirl(s), and no duststorm or sandstorm seen or, in the case of ships, blowing spray at the station",
        "10": "Mist",
        "11": "Diamond dust",
        "12": "Distant lightning",
        "18": "Squalls",
        "20": "Fog",
        "21": "Precipitation",
        "22": "Drizzle (not freezing) or snow grains",
        "23": "Rain (not freezing)",
        "24": "Snow",
        "25": "Freezing drizzle or freezing rain",
        "26": "Thunderstorm (with or without precipitation)",
        "27": "Blowing or drifting snow or sand",
        "28": "Blowing or drifting snow or sand, visibility equal to or greater than 1 km",
        "29": "Blowing or drifting snow or sand, visibility less than 1 km",
        "30": "Fog",
        "31": "Fog or ice fog in patches",
        "32": "Fog or ice fog, has become thinner during the past hour",
        "33": "Fog or ice fog, no appreciable change during the past hour",
        "34": "Fog or ice fog, has begun or become thicker during the past hour",
        "35": "Fog, depositing rime",
        "40": "Precipitation",
        "41": "Precipitation, slight or moderate",
        "42": "Precipitation, heavy",
        "43": "Liquid precipitation, slight or moderate",
        "44": "Liquid precipitation, heavy",
        "45": "Solid precipitation, slight or moderate",
        "46": "Solid precipitation, heavy",
        "47": "Freezing precipitation, slight or moderate",
        "48": "Freezing precipitation, heavy",
        "50": "Drizzle",
        "51": "Drizzle, not freezing, slight",
        "52": "Drizzle, not freezing, moderate",
        "53": "Drizzle, not freezing, heavy",
        "54": "Drizzle, freezing, slight",
        "55": "Drizzle, freezing, moderate",
        "56": "Drizzle, freezing, heavy",
        "57": "Drizzle and rain, slight",
        "58": "Drizzle and rain, moderate or heavy",
        "60": "Rain",
        "61": "Rain, not freezing, slight",
        "62": "Rain, not freezing, moderate",
        "63": "Rain, not freezing, heavy",
        "64": "Rain, freezing, slight",
        "65": "Rain, freezing, moderate",
        "66": "Rain, freezing, heavy",
        "67": "Rain or drizzle and snow, slight",
        "68": "Rain or drizzle and snow, moderate or heavy",
        "70": "Snow",
        "71": "Snow, slight",
        "72": "Snow, moderate",
        "73": "Snow, heavy",
        "74": "Ice pellets, slight",
        "75": "Ice pellets, moderate",
        "76": "Ice pellets, heavy",
        "77": "Snow grains",
        "78": "Ice crystals",
        "80": "Showers or intermittent precipitation",
        "81": "Rain showers or intermittent rain, slight",
        "82": "Rain showers or intermittent rain, moderate",
        "83": "Rain showers or intermittent rain, heavy",
        "84": "Rain showers or intermittent rain, violent",
        "85": "Snow showers or intermittent snow, slight",
        "86": "Snow showers or intermittent snow, moderate",
        "87": "Snow showers or intermittent snow, heavy",
        "89": "Hail",
        "90": "Thunderstorm",
        "91": "Thunderstorm, slight or moderate, with no precipitation",
        "92": "Thunderstorm, slight or moderate, with rain showers and/or snow showers",
        "93": "Thunderstorm, slight or moderate, with hail",
        "94": "Thunderstorm, heavy, with no precipitation",
        "95": "Thunderstorm, heavy, with rain showers and/or snow",
        "96": "Thunderstorm, heavy, with hail",
        "99": "Tornado"
    }
class CodeTablePastWeatherSummary(CodeTable):
    """
    Past weather summary of day
    """
    _TABLE = "past weather summary"
    _VALUES = {
        "00": "None to report",
        "01": "Fog",
        "02": "Fog reducing visibility to 1/4 mile or less",
        "03": "Thunder",
        "04": "Ice pellets",
        "05": "Hail",
        "06": "Glaze or rime",
        "07": "Blowing dust or sand, visibility 1/2 mile or less",
        "08": "Smoke or haze",
        "09": "Blowing snow",
        "10": "Tornado",
        "11": "High or damaging winds",
        "99": "Missing"
    }
class CodeTableManualPastWeather(CodeTable):
    """
    Past weather reported manually
    """
    _TABLE = "manual past weather"
    _VALUES = {
        "0": "Cloud covering 1/2 or less of the sky throughout the appropriate period",
        "1": "Cloud covering more than 1/2 of the sky during part of the appropriate period and covering 1/2 or less during part of the period",
        "2": "Cloud covering more than 1/2 of the sky throughout the appropriate period",
        "3": "Sandstorm, duststorm or blowing snow",
        "4": "Fog or ice fog or thick haze",
        "5": "Drizzle",
        "6": "Rain",
        "7": "Snow, or rain and snow mixed",
        "8": "Shower(s)",
        "9": "Thunderstorm(s) with or without precipitation"
    }
class CodeTableAutomatedPastWeather(CodeTable):
    """
    Past weather reported by an automated station
    """
    _TABLE = "automated past weather"
    _VALUES = {
        "0": "No significant weather observed",
        "1": "Visibility reduced",
        "2": "Blowing phenomena, visibility reduced",
        "3": "Fog",
        "4": "Precipitation",
        "5": "Drizzle",
        "6": "Rain",
        "7": "Snow or ice pellets",
        "8": "Showers or intermittent precipitation",
        "9": "Thunderstorm"
    }
class CodeTableManualPresentWeather(CodeTable):
    """
    Present weather reported manually
    """
    _TABLE = "manual present weather"
    _VALUES = {
        "00": "Cloud development not observed or not observable",
        "01": "Clouds generally dissolving or becoming less developed",
        "02": "State of sky on the whole unchanged",
        "03": "Clouds generally forming or developing",
        "04": "Visibility reduced by smoke, e.g. veldt or forest fires, industrial smoke or volcanic ashes",
        "05": "Haze",
        "06": "Widespread dust in suspension in the air, not raised by wind at or near the station at the time of observation",
        "07": "Dust or sand raised by wind at or near the station at the time of observation, but no well-developed dust whirl(s) sand whirl(s), and no duststorm or sandstorm seen or, in the case of ships, blowing spray at the station",
        "08": "Well developed dust whirl(s) or sand whirl(s) seen at or near the station during the preceding hour or at the time of observation, but no duststorm or sandstorm",
        "09": "Duststorm or sandstorm within sight at the time of observation, or at the station during the preceding hour",
        "10": "Mist",
        "11": "Patches of shallow fog or ice fog at the station, whether on land or sea, not deeper than about 2 meters on land or 10 meters at sea",
        "12": "More or less continuous shallow fog or ice fog at the station, whether on land or sea, not deeper than about 2 meters on land or 10 meters at sea",
        "13": "Lightning visible, no thunder heard",
        "14": "Precipitation within sight, not reaching the ground or the surface of the sea",
        "15": "Precipitation within sight, reaching the ground or the surface of the sea, but distant, i.e., estimated to be more than 5 km from the station",
        "16": "Precipitation within sight, reaching the ground or the surface of the sea, near to, but not at the station",
        "17": "Thunderstorm, but no precipitation at the time of observation",
        "18": "Squalls at or within sight of the station during the preceding hour or at the time of observation",
        "19": "Funnel cloud(s) (Tornado cloud or waterspout) at or within sight of the station during the preceding hour or at the time of observation",
        "20": "Drizzle (not freezing) or snow grains not falling as shower(s)",
        "21": "Rain (not freezing) not falling as shower(s)",
        "22": "Snow not falling as shower(s)",
        "23": "Rain and snow or ice pellets not falling as shower(s)",
        "24": "Freezing drizzle or freezing rain not falling as shower(s)",
        "25": "Shower(s) of rain",
        "26": "Shower(s) of snow or of rain and snow",
        "27": "Shower(s) of hail (Hail, small hail, snow pellets), or rain and hail",
        "28": "Fog or ice fog",
        "29": "Thunderstorm (with or without precipitation)",
        "30": "Slight or moderate duststorm or sandstorm has decreased during the preceding hour",
        "31": "Slight or moderate duststorm or sandstorm no appreciable change during the preceding hour",
        "32": "Slight or moderate duststorm or sandstorm has begun or has increased during the preceding hour",
        "33": "Severe duststorm or sandstorm has decreased during the preceding hour",
        "34": "Severe duststorm or sandstorm no appreciable change during the preceding hour",
        "35": "Severe duststorm or sandstorm has begun or has increased during the preceding hour",
        "36": "Slight or moderate drifting snow generally low (below eye level)",
        "37": "Heavy drifting snow generally low (below eye level)",
        "38": "Slight or moderate blowing snow generally high (above eye level)",
        "39": "Heavy blowing snow generally high (above eye level)",
        "40": "Fog or ice fog at a distance at the time of observation, but not at the station during the preceding hour, the fog or ice fog extending to a level above that of the observer",
        "41": "Fog or ice fog in patches",
        "42": "Fog or ice fog, sky visible, has become thinner during the preceding hour",
        "43": "Fog or ice fog, sky invisible, has become thinner during the preceding hour",
        "44": "Fog or ice fog, sky visible, no appreciable change during the preceding hour",
        "45": "Fog or ice fog, sky invisible, no appreciable change during the preceding hour",
        "46": "Fog or ice fog, sky visible, has begun or has become thicker during the preceding hour",
        "47": "Fog or ice fog, sky invisible, has begun or has become thicker during the preceding hour",
        "48": "Fog, depositing rime, sky visible",
        "49": "Fog, depositing rime, sky invisible",
        "50": "Drizzle, not freezing, intermittent, slight at time of observation",
        "51": "Drizzle, not freezing, continuous, slight at time of observation",
        "52": "Drizzle, not freezing, intermittent, moderate at time of observation",
        "53": "Drizzle, not freezing, continuous, moderate at time of observation",
        "54": "Drizzle, not freezing, intermittent, heavy (dense) at time of observation",
        "55": "Drizzle, not freezing, continuous, heavy (dense) at time of observation",
        "56": "Drizzle, freezing, slight",
        "57": "Drizzle, freezing, moderate or heavy (dense)",
        "58": "Drizzle and rain, slight",
        "59": "Drizzle and rain, moderate or heavy",
        "60": "Rain, not freezing, intermittent, slight at time of observation",
        "61": "Rain, not freezing, continuous, slight at time of observation",
        "62": "Rain, not freezing, intermittent, moderate at time of observation",
        "63": "Rain, not freezing, continuous, moderate at time of observation",
        "64": "Rain, not freezing, intermittent, heavy at time of observation",
        "65": "Rain, not freezing, continuous, heavy at time of observation",
        "66": "Rain, freezing, slight",
        "67": "Rain, freezing, moderate or heavy",
        "68": "Rain or drizzle and snow, slight",
        "69": "Rain or drizzle and snow, moderate or heavy",
        "70": "Intermittent fall of snowflakes, slight at time of observation",
        "71": "Continuous fall of snowflakes, slight at time of observation",
        "72": "Intermittent fall of snowflakes, moderate at time of observation",
        "73": "Continuous fall of snowflakes, moderate at time of observation",
        "74": "Intermittent fall of snowflakes, heavy at time of observation",
        "75": "Continuous fall of snowflakes, heavy at time of observation",
        "76": "Diamond dust (with or without fog)",
        "77": "Snow grains (with or without fog)",
        "78": "Isolated star-like snow crystals (with or without fog)",
        "79": "Ice pellets",
        "80": "Rain shower(s), slight",
        "81": "Rain shower(s), moderate or heavy",
        "82": "Rain shower(s), violent",
        "83": "Shower(s) of rain and snow mixed, slight",
        "84": "Shower(s) of rain and snow mixed, moderate or heavy",
        "85": "Show shower(s), slight",
        "86": "Snow shower(s), moderate or heavy",
        "87": "Shower(s) of snow pellets or small hail, with or without rain or rain and snow mixed, slight",
        "88": "Shower(s) of snow pellets or small hail, with or without rain or rain and snow mixed, moderate or heavy",
        "89": "Shower(s) of hail (hail, small hail, snow pellets), with or without rain or rain and snow mixed, not associated with thunder, slight",
        "90": "Shower(s) of hail (hail, small hail, snow pellets), with or without rain or rain and snow mixed, not associated with thunder, moderate or heavy",
        "91": "Slight rain at time of observation, thunderstorm during the preceding hour but not at time of observation",
        "92": "Moderate or heavy rain at time of observation, thunderstorm during the preceding hour but not at time of observation",
        "93": "Slight snow, or rain and snow mixed or hail (Hail, small hail, snow pellets), at time of observation, thunderstorm during the preceding hour but not at time of observation",
        "94": "Moderate or heavy snow, or rain and snow mixed or hail(Hail, small hail, snow pellets) at time of observation, thunderstorm during the preceding hour but not at time of observation",
        "95": "Thunderstorm, slight or moderate, without hail (Hail, small hail, snow pellets), but with rain and/or snow at time of observation, thunderstorm at time of observation",
        "96": "Thunderstorm, slight or moderate, with hail (hail, small hail, snow pellets) at time of observation, thunderstorm at time of observation",
        "97": "Thunderstorm, heavy, without hail (Hail, small hail, snow pellets), but with rain and/or snow at time of observation, thunderstorm at time of observation",
        "98": "Thunderstorm combined with duststorm or sandstorm at time of observation, thunderstorm at time of observation",
        "99": "Thunderstorm, heavy, with hail (Hail, small hail, snow pellets) at time of observation, thunderstorm at time of observation"
    }
################################################################################
# WIND
################################################################################
class CodeTableSupplementaryWind(CodeTable):
    """
    Type of supplementary wind observation
    """
    _TABLE = "supplementary wind type"
    _VALUES = {
        "1": "Average speed of prevailing wind",
        "2": "Mean wind speed",
        "3": "Maximum instantaneous wind speed",
        "4": "Maximum gust speed",
        "5": "Maximum mean wind speed",
        "6": "Maximum 1-minute mean wind speed",
        "9": "Missing"
    }
class CodeTableWindSummary(CodeTable):
    """
    Type of wind summary of day
    """
    _TABLE = "wind summary type"
    _VALUES = {
        "1": "Peak wind speed for the day",
        "2": "Fastest 2-minute wind speed for the day",
        "3": "Average wind speed for the day",
        "4": "Fastest 5-minute wind speed for the day",
        "5": "Fastest mile wind speed for the day",
        "9": "Missing"
    }
class CodeTableRelativeHumidity(CodeTable):
    """
    Type of relative humidity summary
    """
    _TABLE = "relative humidity"
    _VALUES = {
        "M": "Mean relative humidity",
        "N": "Minimum relative humidity",
        "X": "Maximum relative humidity",
        "9": "Missing"
    }
################################################################################
# TEMPERATURE
################################################################################
class CodeTableExtremeTemperature(CodeTable):
    """
    Type of extreme air temperature
    """
    _TABLE = "extreme temperature"
    _VALUES = {
        "N": "Minimum temperature",
        "M": "Maximum temperature",
        "O": "Estimated minimum temperature",
        "P": "Estimated maximum temperature",
        "9": "Missing"
    }
class CodeTableExtremeCondition(CodeTable):
    """
    Condition of an extreme temperature for the month
    """
    _TABLE = "extreme condition"
    _VALUES = {
        "1": "The value occurred on other dates in addition to those listed",
        "9": "Missing or not applicable"
    }
class CodeTableDegreeDays(CodeTable):
    """
    Type of degree days
    """
    _TABLE = "degree days"
    _VALUES = {
        "H": "Heating Degree Days",
        "C": "Cooling Degree Days",
        "9": "Missing"
    }
class CodeTableAverageTemperature(CodeTable):
    """
    Type of average dew point or wet bulb temperature
    """
    _TABLE = "average temperature"
    _VALUES = {
        "D": "Average dew point temperature",
        "W": "Average wet bulb temperature",
        "9": "Missing"
    }
################################################################################
# PRESSURE
################################################################################
class CodeTablePressureTendency(CodeTable):
    """
    Characteristic of pressure tendency over the last 3 hours
    """
    _TABLE = "pressure tendency"
    _VALUES = {
        "0": "Increasing, then decreasing; atmospheric pressure the same or higher than 3 hours ago",
        "1": "Increasing then steady; or increasing, then increasing more slowly; atmospheric pressure now higher than 3 hours ago",
        "2": "Increasing (steadily or unsteadily); atmospheric pressure now higher than 3 hours ago",
        "3": "Decreasing or steady, then increasing; or increasing, then increasing more rapidly; atmospheric pressure now higher than 3 hours ago",
        "4": "Steady; atmospheric pressure the same as 3 hours ago",
        "5": "Decreasing, then increasing; atmospheric pressure the same or lower than 3 hours ago",
        "6": "Decreasing, then steady; or decreasing, then decreasing more slowly; atmospheric pressure now lower than 3 hours ago",
        "7": "Decreasing (steadily or unsteadily); atmospheric pressure now lower than 3 hours ago",
        "8": "Steady or increasing, then decreasing; or decreasing, then decreasing more rapidly; atmospheric pressure now lower than 3 hours ago",
        "9": "Missing"
    }
class CodeTableIsobaricLevel(CodeTable):
    """
    Standard isobaric surface for which the geopotential is reported
    """
    _TABLE = "isobaric level"
    _VALUES = {
        "1": "1000 hectopascals",
        "2": "925 hectopascals",
        "3": "850 hectopascals",
        "4": "700 hectopascals",
        "5": "500 hectopascals",
        "9": "Missing"
    }
################################################################################
# CLOUD AND SOLAR
################################################################################
class CodeTableCloudCoverage(CodeTable):
    """
    Fraction of the sky covered by cloud, in oktas or tenths
    """
    _TABLE = "cloud coverage"
    _VALUES = {
        "00": "None, SKC or CLR",
        "01": "One okta - 1/10 or less but not zero",
        "02": "Two oktas - 2/10 - 3/10, or FEW",
        "03": "Three oktas - 4/10",
        "04": "Four oktas - 5/10, or SCT",
        "05": "Five oktas - 6/10",
        "06": "Six oktas - 7/10 - 8/10",
        "07": "Seven oktas - 9/10 or more but not 10/10, or BKN",
        "08": "Eight oktas - 10/10, or OVC",
        "09": "Sky obscured, or cloud amount cannot be estimated",
        "10": "Partial obscuration",
        "11": "Thin scattered",
        "12": "Scattered",
        "13": "Dark scattered",
        "14": "Thin broken",
        "15": "Broken",
        "16": "Dark broken",
        "17": "Thin overcast",
        "18": "Overcast",
        "19": "Dark overcast",
        "99": "Missing"
    }
class CodeTableCloudSummation(CodeTable):
    """
    Sky cover summation state of a cloud layer
    """
    _TABLE = "cloud summation"
    _VALUES = {
        "0": "Clear - No coverage",
        "1": "FEW - 2/8 or less coverage (not including zero)",
        "2": "SCATTERED - 3/8-4/8 coverage",
        "3": "BROKEN - 5/8-7/8 coverage",
        "4": "OVERCAST - 8/8 coverage",
        "5": "OBSCURED",
        "6": "PARTIALLY OBSCURED",
        "9": "Missing"
    }
class CodeTableCloudType(CodeTable):
    """
    Cloud type of a layer
    """
    _TABLE = "cloud type"
    _VALUES = {
        "00": "Cirrus (Ci)",
        "01": "Cirrocumulus (Cc)",
        "02": "Cirrostratus (Cs)",
        "03": "Altocumulus (Ac)",
        "04": "Altostratus (As)",
        "05": "Nimbostratus (Ns)",
        "06": "Stratocumulus (Sc)",
        "07": "Stratus (St)",
        "08": "Cumulus (Cu)",
        "09": "Cumulonimbus (Cb)",
        "10": "Cloud not visible owing to darkness, fog, duststorm, sandstorm, or other analogous phenomena/sky obscured",
        "11": "Not used",
        "12": "Towering Cumulus (Tcu)",
        "13": "Stratus fractus (Stfra)",
        "14": "Stratocumulus Lenticular (Scsl)",
        "15": "Cumulus Fractus (Cufra)",
        "16": "Cumulonimbus Mammatus (Cbmam)",
        "17": "Altocumulus Lenticular (Acsl)",
        "18": "Altocumulus Castellanus (Accas)",
        "19": "Altocumulus Mammatus (Acmam)",
        "20": "Cirrocumulus Lenticular (Ccsl)",
        "21": "Cirrus and/or Cirrocumulus",
        "22": "Stratus and/or Fracto-stratus",
        "23": "Cumulus and/or Fracto-cumulus",
        "99": "Missing"
    }
class CodeTableConvectiveCloud(CodeTable):
    """
    Convective cloud attribute
    """
    _TABLE = "convective cloud"
    _VALUES = {
        "0": "None",
        "1": "ACSL (Altocumulus Standing Lenticular)",
        "2": "ACCAS (Altocumulus Castelanus)",
        "3": "TCU (Towering Cumulus)",
        "4": "MDT CU (Moderate Cumulus)",
        "5": "CB/CB MAM DISTANT (Cumulonimbus or Cumulonimbus Mammatus in the distance)",
        "6": "CB/CBMAM (Cumulonimbus or Cumulonimbus Mammatus within 20 nautical miles)",
        "7": "Unknown",
        "9": "Missing"
    }
class CodeTableVerticalDatum(CodeTable):
    """
    Vertical datum of cloud base heights
    """
    _TABLE = "vertical datum"
    _VALUES = {
        "AGL": "Above Ground Level",
        "ALAT": "Approximate lowest astronomical tide",
        "AP": "Apparent",
        "CFB": "Crest of first berm",
        "CRD": "Columbia River datum",
        "ESLW": "Equatorial Spring low water",
        "GCLWD": "Gulf Coast low water datum",
        "HAT": "Highest astronomical tide",
        "HHW": "Higher high water",
        "HTWW": "High tide wave wash",
        "HW": "High water",
        "HWFC": "High water full and change",
        "IND": "Indefinite",
        "ISLW": "Indian Spring low water",
        "LAT": "Lowest astronomical tide",
        "LLW": "Lowest low water",
        "LNLW": "Lowest normal low water",
        "LRLW": "Lower low water",
        "LSD": "Land survey datum",
        "LW": "Low water",
        "LWD": "Low water datum",
        "LWFC": "Low water full and charge",
        "MHHW": "Mean higher high water",
        "MHLW": "Mean higher low water",
        "MHW": "Mean high water",
        "MHWN": "Mean high water neap",
        "MHWS": "Mean high water spring",
        "MLHW": "Mean lower high water",
        "MLLW": "Mean lower low water",
        "MLLWS": "Mean lower low water springs",
        "MLWN": "Mean low water neap",
        "MLW": "Mean low water",
        "MLWS": "Mean low water spring",
        "MSL": "Mean sea level",
        "MTL": "Mean tide level",
        "NC": "No correction",
        "NT": "Neap tide",
        "ST": "Spring tide",
        "SWA": "Storm wave action",
        "TLLW": "Tropic lower low water",
        "UD": "Undetermined",
        "UK": "Unknown",
        "WGS84E": "WGS84 Ellipsoid",
        "WGS84G": "WGS84 GEOID",
        "999999": "Missing"
    }
class CodeTableLowCloudGenus(CodeTable):
    """
    Genus of the low cloud
    """
    _TABLE = "low cloud genus"
    _VALUES = {
        "00": "No low clouds",
        "01": "Cumulus humulis or Cumulus fractus other than of bad weather or both",
        "02": "Cumulus mediocris or congestus, with or without Cumulus of species fractus or humulis or Stratocumulus all having bases at the same level",
        "03": "Cumulonimbus calvus, with or without Cumulus, Stratocumulus or Stratus",
        "04": "Stratocumulus cumulogenitus",
        "05": "Stratocumulus other than Stratocumulus cumulogenitus",
        "06": "Stratus nebulosus or Stratus fractus other than of bad weather, or both",
        "07": "Stratus fractus or Cumulus fractus of bad weather, both (pannus) usually below Altostratus or Nimbostratus",
        "08": "Cumulus and Stratocumulus other than Stratocumulus cumulogenitus, with bases at different levels",
        "09": "Cumulonimbus capillatus (often with an anvil), with or without Cumulonimbus calvus, Cumulus, Stratocumulus, Stratus or pannus",
        "99": "Missing"
    }
class CodeTableMidCloudGenus(CodeTable):
    """
    Genus of the middle cloud
    """
    _TABLE = "mid cloud genus"
    _VALUES = {
        "00": "No middle clouds",
        "01": "Altostratus translucidus",
        "02": "Altostratus opacus or Nimbostratus",
        "03": "Altocumulus translucidus at a single level",
        "04": "Patches (often lenticular) of Altocumulus translucidus, continually changing and occurring at one or more levels",
        "05": "Altocumulus translucidus in bands, or one or more layers of Altocumulus translucidus or opacus, progressively invading the sky; these Altocumulus clouds generally thicken as a whole",
        "06": "Altocumulus cumulogenitus (or cumulonimbogenitus)",
        "07": "Altocumulus translucidus or opacus in two or more layers, or Altocumulus opacus in a single layer, not progressively invading the sky, or Altocumulus with Altostratus or Nimbostratus",
        "08": "Altocumulus castellanus or floccus",
        "09": "Altocumulus of a chaotic sky; generally at several levels",
        "99": "Missing"
    }
class CodeTableHighCloudGenus(CodeTable):
    """
    Genus of the high cloud
    """
    _TABLE = "high cloud genus"
    _VALUES = {
        "00": "No High Clouds",
        "01": "Cirrus fibratus, sometimes uncinus, not progressively invading the sky",
        "02": "Cirrus spissatus, in patches or entangled sheaves, which usually do not increase and sometimes seem to be the remains of the upper part of a Cumulonimbus; or Cirrus castellanus or floccus",
        "03": "Cirrus spissatus cumulonimbogenitus",
        "04": "Cirrus uncinus or fibratus, or both, progressively invading the sky; they generally thicken as a whole",
        "05": "Cirrus (often in bands) and Cirrostratus, or Cirrostratus alone, progressively invading the sky; they generally thicken as a whole, but the continuous veil does not reach 45 degrees above the horizon",
        "06": "Cirrus (often in bands) and Cirrostratus, or Cirrostratus alone, progressively invading the sky; they generally thicken as a whole; the continuous veil extends more than 45 degrees above the horizon, without the sky being totally covered",
        "07": "Cirrostratus covering the whole sky",
        "08": "Cirrostratus not progressively invading the sky and not entirely covering it",
        "09": "Cirrocumulus alone, or Cirrocumulus predominant among the High clouds",
        "99": "Missing"
    }
class CodeTableCloudTop(CodeTable):
    """
    Shape of the top of a cloud layer below the station
    """
    _TABLE = "cloud top"
    _VALUES = {
        "00": "Isolated cloud or fragments of clouds",
        "01": "Continuous flat tops",
        "02": "Broken cloud - small breaks, flat tops",
        "03": "Broken cloud - large breaks, flat tops",
        "04": "Continuous cloud, undulating tops",
        "05": "Broken cloud - small breaks, undulating tops",
        "06": "Broken cloud - large breaks, undulating tops",
        "07": "Continuous or almost continuous with towering clouds above the top of the layer",
        "08": "Groups of waves with towering clouds above the top of the layer",
        "09": "Two or more layers at different levels",
        "99": "Missing"
    }
class CodeTableCloudCharacteristic(CodeTable):
    """
    Characteristic of a cloud layer
    """
    _TABLE = "cloud characteristic"
    _VALUES = {
        "1": "Variable height",
        "2": "Variable amount",
        "3": "Thin clouds",
        "4": "Dark layer (reported in data prior to 1950)",
        "9": "Missing"
    }
class CodeTableSolarDataFlag(CodeTable):
    """
    Quality test result of a solar irradiance value
    """
    _TABLE = "solar data flag"
    _VALUES = {
        "00": "Untested (raw data)",
        "01": "Passed one-component test; data fall within max-min limits of Kt, Kn, or Kd",
        "02": "Passed two-component test; data fall within 0.03 of the Gompertz boundaries",
        "03": "Passed three-component test; data come within + 0.03 of satisfying Kt = Kn + Kd",
        "04": "Passed visual inspection: not used by SERI_QC1",
        "05": "Failed visual inspection: not used by SERI_QC1",
        "06": "Value estimated; passes all pertinent SERI_QC tests",
        "07": "Failed one-component test; lower than allowed minimum",
        "08": "Failed one-component test; higher than allowed maximum",
        "09": "Passed three-component test but failed two-component test by 0.05",
        **{ "{:02d}".format(i): "Failed two- or three- component tests in one of four ways" for i in range(10, 94) },
        "94": "Data fall into physically impossible region where Kn > Kt by K-space distances of 0.05 to 0.10",
        "95": "Data fall into physically impossible region where Kn > Kt by K-space distances of 0.10 to 0.15",
        "96": "Data fall into physically impossible region where Kn > Kt by K-space distances of 0.15 to 0.20",
        "97": "Data fall into physically impossible region where Kn > Kt by K-space distances of > 0.20",
        "98": "Not used",
        "99": "Missing"
    }
class CodeTableModelledSolarSource(CodeTable):
    """
    Source of a modelled solar irradiance value
    """
    _TABLE = "modelled solar source"
    _VALUES = {
        "01": "Value modeled from METSTAT model",
        "02": "Value time-shifted from SUNY satellite model",
        "03": "Value time-shifted from SUNY satellite model, adjusted to a minimum low-diffuse envelope",
        "99": "Missing"
    }
################################################################################
# GROUND SURFACE
################################################################################
class CodeTableGroundSurface(CodeTable):
    """
    Physical condition of the ground surface. Codes 10-19 describe the ground
    without snow or measurable ice cover
    """
    _TABLE = "ground surface"
    _VALUES = {
        "00": "Surface of ground dry (no appreciable amount of dust or loose sand)",
        "01": "Surface of ground dry (without cracks and no appreciable amount of dust or loose sand and without snow or measurable ice cover)",
        "02": "Extremely dry with cracks (without snow or measurable ice cover)",
        "03": "Loose dry dust or sand not covering ground completely (without snow or measurable ice cover)",
        "04": "Loose dry dust or sand covering more than one-half of ground (but not completely)",
        "05": "Loose dry dust or sand covering ground completely",
        "06": "Thin cover of loose dry dust or sand covering ground completely (without snow or measurable ice cover)",
        "07": "Moderate or thick cover of loose dry dust or sand covering ground completely (without snow or measurable ice cover)",
        "08": "Surface of ground moist",
        "09": "Surface of ground moist (without snow or measurable ice cover)",
        "10": "Surface of ground wet (standing water in small or large pools on surface)",
        "11": "Surface of ground wet (standing water in small or large pools on surface without snow or measurable ice cover)",
        "12": "Flooded (without snow or measurable ice cover)",
        "13": "Surface of ground frozen",
        "14": "Surface of ground frozen (without snow or measurable ice cover)",
        "15": "Glaze or ice on ground, but no snow or melting snow",
        "16": "Glaze on ground (without snow or measurable ice cover)",
        "17": "Ground predominantly covered by ice",
        "18": "Snow or melting snow (with or without ice) covering less than one-half of the ground",
        "19": "Snow or melting snow (with or without ice) covering more than one-half of the ground but ground not completely covered",
        "20": "Snow or melting snow (with or without ice) covering ground completely",
        "21": "Loose dry snow covering less than one-half of the ground",
        "22": "Loose dry snow covering at least one half of the ground (but not completely)",
        "23": "Even layer of loose dry snow covering ground completely",
        "24": "Uneven layer of loose dry snow covering ground completely",
        "25": "Compact or wet snow (with or without ice) covering less than one-half of the ground",
        "26": "Compact or wet snow (with or without ice) covering at least one-half of the ground but ground not completely covered",
        "27": "Even layer of compact or wet snow covering ground completely",
        "28": "Uneven layer of compact or wet snow covering ground completely",
        "29": "Snow covering ground completely; deep drifts",
        "30": "Loose dry dust or sand covering one-half of the ground (but not completely)",
        "31": "Loose dry snow, dust or sand covering ground completely",
        "99": "Missing"
    }
class CodeTablePanCondition(CodeTable):
    """
    Condition of a pan evaporation measurement
    """
    _TABLE = "pan condition"
    _VALUES = {
        "1": "No special conditions",
        "2": "Data will be included in subsequent observation",
        "3": "Data are accumulated from previous observation(s), so cover a longer than typical time period",
        "9": "Missing"
    }
################################################################################
# MARINE
################################################################################
class CodeTableWaveMethod(CodeTable):
    """
    Method used to measure wave data
    """
    _TABLE = "wave method"
    _VALUES = {
        "M": "Manual",
        "I": "Instrumental",
        "9": "Missing"
    }
class CodeTableSeaState(CodeTable):
    """
    State of the sea
    """
    _TABLE = "sea state"
    _VALUES = {
        "00": "Calm, glassy - wave height = 0 meters",
        "01": "Calm, rippled - wave height = 0-0.1 meters",
        "02": "Smooth, wavelets - wave height = 0.1-0.5 meters",
        "03": "Slight, wave height = 0.5-1.25 meters",
        "04": "Moderate - wave height 1.25-2.5 meters",
        "05": "Rough - wave height = 2.5-4.0 meters",
        "06": "Very rough - wave height = 4.0-6.0 meters",
        "07": "High - wave height = 6.0-9.0 meters",
        "08": "Very high - wave height 9.0-14.0 meters",
        "09": "Phenomenal - wave height = over 14.0 meters",
        "99": "Missing"
    }
class CodeTableIceAccretionSource(CodeTable):
    """
    Source of ice accretion on a ship
    """
    _TABLE = "ice accretion source"
    _VALUES = {
        "1": "Icing from ocean spray",
        "2": "Icing from fog",
        "3": "Icing from spray and fog",
        "4": "Icing from rain",
        "5": "Icing from spray and rain",
        "9": "Missing"
    }
class CodeTableIceAccretionTendency(CodeTable):
    """
    Tendency of ice accretion on a ship
    """
    _TABLE = "ice accretion tendency"
    _VALUES = {
        "0": "Ice not building up",
        "1": "Ice building up slowly",
        "2": "Ice building up rapidly",
        "3": "Ice melting or breaking up slowly",
        "4": "Ice melting or breaking up rapidly",
        "9": "Missing"
    }
class CodeTableIceEdgeBearing(CodeTable):
    """
    Bearing of the principal sea ice edge
    """
    _TABLE = "ice edge bearing"
    _VALUES = {
        "00": "Ship in shore or flaw lead",
        "01": "Principal ice edge towards NE",
        "02": "Principal ice edge towards E",
        "03": "Principal ice edge towards SE",
        "04": "Principal ice edge towards S",
        "05": "Principal ice edge towards SW",
        "06": "Principal ice edge towards W",
        "07": "Principal ice edge towards NW",
        "08": "Principal ice edge towards N",
        "09": "Not determined (ship in ice)",
        "10": "Unable to report, because of darkness, lack of visibility or because only ice of land origin is visible",
        "99": "Missing"
    }
class CodeTableIceEdgeOrientation(CodeTable):
    """
    Orientation of the sea ice edge
    """
    _TABLE = "ice edge orientation"
    _VALUES = {
        "00": "Orientation of ice edge impossible to estimate--ship outside the ice",
        "01": "Ice edge lying in a direction NE to SW with ice situated to the NW",
        "02": "Ice edge lying in a direction E to W with ice situated to the N",
        "03": "Ice edge lying in a direction SE to NW with ice situated to the NE",
        "04": "Ice edge lying in a direction S to N with ice situated to the E",
        "05": "Ice edge lying in a direction SW to NE with ice situated to the SE",
        "06": "Ice edge lying in a direction W to E with ice situated to the S",
        "07": "Ice edge lying in a direction NW to SE with ice situated to the SW",
        "08": "Ice edge lying in a direction N to S with ice situated to the W",
        "09": "Orientation of ice edge impossible to estimate--ship inside the ice",
        "99": "Missing"
    }
class CodeTableIceConcentration(CodeTable):
    """
    Non-uniform sea ice concentration
    """
    _TABLE = "ice concentration"
    _VALUES = {
        "06": "Strips and patches of pack ice with open water between",
        "07": "Strips and patches of close or very close pack ice with areas of lesser concentration between",
        "08": "Fast ice with open water, very open or open pack ice to seaward of the ice boundary",
        "09": "Fast ice with close or very close pack ice to seaward of the ice boundary",
        "99": "Unable to report, because of darkness, lack of visibility, or because ship is more than 0.5 nautical mile away from ice edge"
    }
class CodeTableShipPosition(CodeTable):
    """
    Position of the ship relative to the ice
    """
    _TABLE = "ship position"
    _VALUES = {
        "0": "Ship in open water with floating ice in sight",
        "1": "In open lead or fast ice",
        "2": "In ice or within 0.5 nautical miles of ice edge",
        "9": "Missing"
    }
class CodeTableShipPenetrability(CodeTable):
    """
    Penetrability of the ice for the ship
    """
    _TABLE = "ship penetrability"
    _VALUES = {
        "1": "Easy",
        "2": "Difficult",
        "3": "Beset (surrounded so closely by sea ice that steering control is lost)",
        "9": "Missing"
    }
class CodeTableIceTrend(CodeTable):
    """
    Trend of the ice conditions
    """
    _TABLE = "ice trend"
    _VALUES = {
        "1": "Conditions improving",
        "2": "Conditions static",
        "3": "Conditions worsening",
        "4": "Conditions worsening; ice forming and floes freezing together",
        "5": "Conditions worsening; ice under slight pressure",
        "6": "Conditions worsening; ice under moderate or severe pressure",
        "9": "Missing"
    }
class CodeTableIceDevelopment(CodeTable):
    """
    Stage of development of the sea ice
    """
    _TABLE = "ice development"
    _VALUES = {
        "00": "New ice only (frazil ice, grease ice, slush, slugs)",
        "01": "Nilas or ice rind, less than 10 cm thick",
        "02": "Young ice (grey ice, grey-white ice), 10 - 30 cm thick",
        "03": "Predominantly new and/or young ice with some first year ice",
        "04": "Predominantly thin first year ice with some new and/or young ice",
        "05": "All thin first year ice (30 - 70 cm thick)",
        "06": "Predominantly medium first year ice (70 - 120 cm thick) and thick first year ice (> 120 cm thick) with some thinner (younger) first year ice",
        "07": "All medium and thick first year ice",
        "08": "Predominantly medium and thick first year ice with some old ice (usually more than 2 m thick)",
        "09": "Predominantly old ice",
        "99": "Unable to report, because of darkness, lack of visibility or because only ice of land origin is visible or because ship is more than 0.5 NM away from ice"
    }
class CodeTableGrowlerPresence(CodeTable):
    """
    Presence of growlers and bergy bits
    """
    _TABLE = "growler presence"
    _VALUES = {
        "0": "Not present",
        "1": "Present",
        "2": "Unknown",
        "9": "Missing"
    }
class CodeTableIceFormation(CodeTable):
    """
    Type of ice formation
    """
    _TABLE = "ice formation"
    _VALUES = {
        "00": "No ice (0 may be used to report ice blink and then a direction must be reported)",
        "01": "New ice",
        "02": "Fast ice",
        "03": "Pack-ice/drift-ice",
        "04": "Packed (compact) slush or sludge",
        "05": "Shore lead",
        "06": "Heavy fast ice",
        "07": "Heavy pack-ice/drift-ice",
        "08": "Hummocked ice",
        "09": "Icebergs-icebergs can be reported in plain language",
        "99": "Missing"
    }
class CodeTableNavigationEffect(CodeTable):
    """
    Effect of the ice on navigation
    """
    _TABLE = "navigation effect"
    _VALUES = {
        "00": "Navigation unobstructed",
        "01": "Navigation unobstructed for steamers, difficult for sailing ships",
        "02": "Navigation difficult for low-powered steamers, closed to sailing ships",
        "03": "Navigation possible only for powerful steamers",
        "04": "Navigation possible only for steamers constructed to withstand ice pressure",
        "05": "Navigation possible with the assistance of ice-breakers",
        "06": "Channel open in the solid ice",
        "07": "Navigation temporarily closed",
        "08": "Navigation closed",
        "09": "Navigation conditions unknown, e.g., owing to bad weather",
        "99": "Missing"
    }
class CodeTableIcePhenomena(CodeTable):
    """
    Ice phenomena on a river, lake or reservoir
    """
    _TABLE = "ice phenomena"
    _VALUES = {
        "00": "Water surface free of ice",
        "01": "Ice along banks",
        "02": "Ice crystals",
        "03": "Ice slush",
        "04": "Ice flows from tributaries entering near the river, lake or reservoir station",
        "10": "Floating slush ice covering approximately 1/3 (up to 30%) of the water surface",
        "11": "Floating slush ice covering about half (40% - 60%) of the water surface",
        "12": "Floating slush ice covering more than half (70% - 100%) of the water surface",
        "20": "Floating ice covering 10% of the water surface",
        "21": "Floating ice covering 20% of the water surface",
        "22": "Floating ice covering 30% of the water surface",
        "23": "Floating ice covering 40% of the water surface",
        "24": "Floating ice covering 50% of the water surface",
        "25": "Floating ice covering 60% of the water surface",
        "26": "Floating ice covering 70% of the water surface",
        "27": "Floating ice covering 80% of the water surface",
        "28": "Floating ice covering 90% of the water surface",
        "29": "Floating ice covering 100% of the water surface",
        "30": "Water surface frozen at station, free upstream",
        "31": "Water surface frozen at station, free downstream",
        "32": "Water surface free at station, free upstream",
        "33": "Water surface free at station, free downstream",
        "34": "Ice floes near the station, water surface frozen downstream",
        "35": "Water surface frozen with breaks",
        "36": "Water surface completely frozen over",
        "37": "Water surface frozen over with pile-ups",
        "40": "Ice melting along the banks",
        "41": "Some water on the ice",
        "42": "Ice waterlogged",
        "43": "Water holes in the ice cover",
        "44": "Ice moving",
        "45": "Open water in breaks",
        "46": "Break up (first day of movement of ice on the entire water surface)",
        "47": "Ice broken artificially",
        "50": "Ice jam below the station",
        "51": "Ice jam at the station",
        "52": "Ice jam above the station",
        "53": "Scale and position of jam unchanged",
        "54": "Jam has frozen solid in the same place",
        "55": "Jam has solidified and expanded upstream",
        "56": "Jam has solidified and moved downstream",
        "57": "Jam is weakening",
        "58": "Jam broken up by explosives or other methods",
        "59": "Jam broken",
        "60": "Fractured ice",
        "61": "Ice piling up against the bank",
        "62": "Ice carried towards the bank",
        "63": "Band of ice less than 100 meters wide fixed to banks",
        "64": "Band of ice 100 to 500 meters wide fixed to banks",
        "65": "Band of ice wider than 500 meters fixed to banks",
        "70": "Cracks in the ice, mainly across the line of flow",
        "71": "Cracks along the flow line",
        "72": "Smooth sheet of ice",
        "73": "Ice sheet with pile-ups",
        "99": "Missing"
    }
class CodeTableSlushCondition(CodeTable):
    """
    Slush ice below the ice surface
    """
    _TABLE = "slush condition"
    _VALUES = {
        "0": "No slush ice",
        "1": "Slush ice to approximately 1/3 of depth of the river, lake or reservoir",
        "2": "Slush ice from 1/3 to 2/3 of depth of the river, lake or reservoir",
        "3": "Slush ice to depth of the river, lake or reservoir greater than 2/3",
        "9": "Missing"
    }
class CodeTableWaterLevel(CodeTable):
    """
    Water level of a river, lake or reservoir
    """
    _TABLE = "water level"
    _VALUES = {
        "B": "Much below normal",
        "H": "High but not overflowing",
        "N": "Normal",
        "O": "Banks overflowing",
        "9": "Missing"
    }
################################################################################
# CLIMATE REFERENCE NETWORK
################################################################################
class CodeTableGaugeHeater(CodeTable):
    """
    State of the precipitation gauge heater
    """
    _TABLE = "gauge heater"
    _VALUES = {
        "0": "Heater off",
        "1": "Heater on",
        "9": "Missing"
    }
class CodeTableDoor(CodeTable):
    """
    State of the datalogger enclosure door
    """
    _TABLE = "door"
    _VALUES = {
        "0": "Door closed",
        "1": "Door open",
        "9": "Missing"
    }
################################################################################
# RUNWAY VISUAL RANGE
################################################################################
class CodeTableRunwayDesignator(CodeTable):
    """
    Runway designator of a parallel runway
    """
    _TABLE = "runway designator"
    _VALUES = {
        "L": "Left",
        "C": "Center",
        "R": "Right",
        "U": "Unknown",
        "9": "Missing"
    }
