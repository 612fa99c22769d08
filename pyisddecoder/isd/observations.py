################################################################################
# pyisddecoder/isd/observations.py
#
# Field group classes for ISD observations
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
from pyisddecoder import FieldGroup, Numeric, Multiplied, Code, Raw, DatePairs
from pyisddecoder import code_tables as ct
from . import code_tables as ict
################################################################################
# SHARED COMPONENTS
################################################################################
def Quality():
    return Code(ct.CodeTableQuality)
def Hours(divisor=1):
    if divisor == 1:
        return Numeric("h")
    return Numeric("h", divisor, float)
def Minutes():
    return Numeric("min")
def Days():
    return Numeric("d")
def Celsius():
    return Numeric("Cel", 10, float)
def Hectopascals():
    return Numeric("hPa", 10, float)
def Millimetres(divisor=10):
    if divisor == 1:
        return Numeric("mm")
    return Numeric("mm", divisor, float)
def Centimetres(divisor=1):
    if divisor == 1:
        return Numeric("cm")
    return Numeric("cm", divisor, float)
def Speed(divisor=10):
    return Numeric("m/s", divisor, float)
def Degrees(divisor=1):
    if divisor == 1:
        return Numeric("deg")
    return Numeric("deg", divisor, float)
def Irradiance(divisor=1):
    if divisor == 1:
        return Numeric("W/m2")
    return Numeric("W/m2", divisor, float)
def NetworkQuality():
    return Code(ct.CodeTableDailyQuality)
def NetworkFlag():
    return Code(ct.CodeTableDailyQualityFlag)
################################################################################
# MANDATORY GROUPS
################################################################################
class Wind(FieldGroup):
    """
    Wind observation (WND)

    * direction angle, quality, type, speed rate, quality
    """
    _COMPONENTS = [
        ("direction_angle", Degrees()),
        ("direction_quality_code", Quality()),
        ("type_code", Code(ict.CodeTableWindType)),
        ("speed_rate", Speed()),
        ("speed_quality_code", Quality())
    ]
class Ceiling(FieldGroup):
    """
    Sky condition observation (CIG)
    """
    _COMPONENTS = [
        ("height", Numeric("m")),
        ("quality_code", Quality()),
        ("determination_code", Code(ict.CodeTableCeilingDetermination)),
        ("cavok", Code(ct.CodeTableBool))
    ]
class Visibility(FieldGroup):
    """
    Visibility observation (VIS)
    """
    _COMPONENTS = [
        ("distance", Numeric("m")),
        ("distance_quality_code", Quality()),
        ("variability", Code(ict.CodeTableVisibilityVariability)),
        ("variability_quality_code", Quality())
    ]
class Temperature(FieldGroup):
    """
    Air temperature observation (TMP)
    """
    _COMPONENTS = [
        ("air_temperature", Celsius()),
        ("air_temperature_quality_code", Quality())
    ]
class DewPoint(FieldGroup):
    """
    Dew point observation (DEW)
    """
    _COMPONENTS = [
        ("dew_point_temperature", Celsius()),
        ("dew_point_temperature_quality_code", Quality())
    ]
class SeaLevelPressure(FieldGroup):
    """
    Sea level pressure observation (SLP)
    """
    _COMPONENTS = [
        ("pressure", Hectopascals()),
        ("pressure_quality_code", Quality())
    ]
################################################################################
# PRECIPITATION
################################################################################
class LiquidPrecipitation(FieldGroup):
    """
    Liquid precipitation occurrence (AA1-AA4)
    """
    _COMPONENTS = [
        ("period_quantity", Hours()),
        ("depth_dimension", Millimetres()),
        ("condition_code", Code(ict.CodeTablePrecipitationCondition)),
        ("quality_code", Quality())
    ]
class MonthlyPrecipitation(FieldGroup):
    """
    Liquid precipitation for the month (AB1)
    """
    _COMPONENTS = [
        ("depth_dimension", Millimetres()),
        ("condition_code", Code(ict.CodeTablePrecipitationCondition)),
        ("quality_code", Quality())
    ]
class PrecipitationHistory(FieldGroup):
    """
    Precipitation history (AC1)
    """
    _COMPONENTS = [
        ("duration_code", Code(ict.CodeTablePrecipitationDuration)),
        ("characteristic_code", Code(ict.CodeTablePrecipitationCharacteristic)),
        ("quality_code", Quality())
    ]
class GreatestPrecipitation(FieldGroup):
    """
    Greatest amount of liquid precipitation in 24 hours for the month (AD1).
    Up to three dates of occurrence, each reported as begin and end day
    """
    _COMPONENTS = [
        ("depth_dimension", Millimetres()),
        ("condition_code", Code(ict.CodeTablePrecipitationCondition)),
        ("dates_of_occurrence", DatePairs(3)),
        ("quality_code", Quality())
    ]
class PrecipitationDays(FieldGroup):
    """
    Number of days with precipitation for the month (AE1)
    """
    _COMPONENTS = [
        ("days_01", Days()),
        ("days_01_quality_code", Quality()),
        ("days_10", Days()),
        ("days_10_quality_code", Quality()),
        ("days_50", Days()),
        ("days_50_quality_code", Quality()),
        ("days_100", Days()),
        ("days_100_quality_code", Quality())
    ]
class PrecipitationEstimate(FieldGroup):
    """
    Precipitation estimated from weather (AG1)
    """
    _COMPONENTS = [
        ("discrepancy_code", Code(ict.CodeTablePrecipitationDiscrepancy)),
        ("estimated_water_depth_dimension", Millimetres(1))
    ]
class ShortDurationPrecipitation(FieldGroup):
    """
    Maximum short duration precipitation (AH1-AH6, AI1-AI6)
    """
    _COMPONENTS = [
        ("period_quantity", Minutes()),
        ("depth_dimension", Millimetres()),
        ("condition_code", Code(ict.CodeTablePrecipitationCondition)),
        ("end_date_time", Raw()),
        ("quality_code", Quality())
    ]
class SnowDepth(FieldGroup):
    """
    Snow depth (AJ1)
    """
    _COMPONENTS = [
        ("depth_dimension", Centimetres()),
        ("condition_code", Code(ict.CodeTablePrecipitationCondition)),
        ("quality_code", Quality()),
        ("equivalent_water_depth_dimension", Millimetres()),
        ("equivalent_water_condition_code", Code(ict.CodeTablePrecipitationCondition)),
        ("equivalent_water_condition_quality_code", Quality())
    ]
class GreatestSnowDepth(FieldGroup):
    """
    Greatest snow depth on the ground for the month (AK1)
    """
    _COMPONENTS = [
        ("depth_dimension", Centimetres()),
        ("condition_code", Code(ict.CodeTablePrecipitationCondition)),
        ("dates_of_occurrence", Raw()),
        ("quality_code", Quality())
    ]
class SnowAccumulation(FieldGroup):
    """
    Snow accumulation (AL1-AL4)
    """
    _COMPONENTS = [
        ("period_quantity", Hours()),
        ("depth_dimension", Centimetres()),
        ("condition_code", Code(ict.CodeTablePrecipitationCondition)),
        ("quality_code", Quality())
    ]
class GreatestSnowfall(FieldGroup):
    """
    Greatest snowfall in 24 hours for the month (AM1)
    """
    _COMPONENTS = [
        ("depth_dimension", Centimetres(10)),
        ("condition_code", Code(ict.CodeTablePrecipitationCondition)),
        ("dates_of_occurrence", DatePairs(3)),
        ("quality_code", Quality())
    ]
class MonthlySnowAccumulation(FieldGroup):
    """
    Snow accumulation for the month (AN1)
    """
    _COMPONENTS = [
        ("period_quantity", Hours()),
        ("depth_dimension", Centimetres(10)),
        ("condition_code", Code(ict.CodeTablePrecipitationCondition)),
        ("quality_code", Quality())
    ]
class MinutePrecipitation(FieldGroup):
    """
    Liquid precipitation reported in minutes (AO1-AO4)
    """
    _COMPONENTS = [
        ("period_quantity", Minutes()),
        ("depth_dimension", Millimetres()),
        ("condition_code", Code(ict.CodeTablePrecipitationCondition)),
        ("quality_code", Quality())
    ]
################################################################################
# WEATHER OCCURRENCE
################################################################################
class DailyPresentWeather(FieldGroup):
    """
    Daily present weather observation (AT1-AT8)
    """
    _COMPONENTS = [
        ("source_element", Code(ict.CodeTableWeatherSource)),
        ("weather_type", Code(ict.CodeTableWeatherType)),
        ("weather_type_abbreviation", Code(ict.CodeTableWeatherAbbreviation)),
        ("quality_code", Quality())
    ]
class PresentWeather(FieldGroup):
    """
    Present weather observation (AU1-AU9)
    """
    _COMPONENTS = [
        ("intensity_code", Code(ict.CodeTableIntensity)),
        ("descriptor_code", Code(ict.CodeTableDescriptor)),
        ("precipitation_code", Code(ict.CodeTablePrecipitationType)),
        ("obscuration_code", Code(ict.CodeTableObscuration)),
        ("weather_phenomena_code", Code(ict.CodeTableOtherPhenomena)),
        ("combination_indicator_code", Code(ict.CodeTableCombinationIndicator)),
        ("quality_code", Quality())
    ]
class AutomatedPresentWeather(FieldGroup):
    """
    Present weather from an automated station (AW1-AW4)
    """
    _COMPONENTS = [
        ("atmospheric_condition_code", Code(ict.CodeTableAutomatedWeather)),
        ("quality_code", Quality())
    ]
class PastWeatherSummary(FieldGroup):
    """
    Past weather summary of day (AX1-AX6)
    """
    _COMPONENTS = [
        ("atmospheric_condition_code", Code(ict.CodeTablePastWeatherSummary)),
        ("atmospheric_condition_quality_code", Quality()),
        ("period_quantity", Hours()),
        ("period_quality_code", Quality())
    ]
class ManualPastWeather(FieldGroup):
    """
    Past weather reported manually (AY1-AY2)
    """
    _COMPONENTS = [
        ("manual_atmospheric_condition_code", Code(ict.CodeTableManualPastWeather)),
        ("manual_atmospheric_condition_quality_code", Quality()),
        ("period_quantity", Hours()),
        ("period_quality_code", Quality())
    ]
class AutomatedPastWeather(FieldGroup):
    """
    Past weather from an automated station (AZ1-AZ2)
    """
    _COMPONENTS = [
        ("automated_atmospheric_condition_code", Code(ict.CodeTableAutomatedPastWeather)),
        ("automated_atmospheric_condition_quality_code", Quality()),
        ("period_quantity", Hours()),
        ("period_quality_code", Quality())
    ]
class ManualPresentWeather(FieldGroup):
    """
    Present weather reported manually (MW1-MW7)
    """
    _COMPONENTS = [
        ("manual_atmospheric_condition_code", Code(ict.CodeTableManualPresentWeather)),
        ("manual_atmospheric_condition_quality_code", Quality())
    ]
################################################################################
# WIND
################################################################################
class SupplementaryWind(FieldGroup):
    """
    Supplementary wind observation (OA1-OA3)
    """
    _COMPONENTS = [
        ("type_code", Code(ict.CodeTableSupplementaryWind)),
        ("period_quantity", Hours()),
        ("speed_rate", Speed()),
        ("speed_quality_code", Quality())
    ]
class HourlyWind(FieldGroup):
    """
    Hourly and sub-hourly wind section (OB1-OB2)
    """
    _COMPONENTS = [
        ("wind_avg_time", Minutes()),
        ("wind_max_gust", Speed()),
        ("wind_max_quality_code", Code(ct.CodeTableDailyQuality)),
        ("wind_max_quality_flag", Code(ct.CodeTableDailyQualityFlag)),
        ("wind_max_direction", Degrees()),
        ("wind_max_direction_quality_code", Code(ct.CodeTableDailyQuality)),
        ("wind_max_direction_quality_flag", Code(ct.CodeTableDailyQualityFlag)),
        ("wind_speed_std_dev", Speed(100)),
        ("wind_speed_std_dev_quality_code", Code(ct.CodeTableDailyQuality)),
        ("wind_speed_std_dev_quality_flag", Code(ct.CodeTableDailyQualityFlag)),
        ("wind_direction_std_dev", Degrees(100)),
        ("wind_direction_std_dev_quality_code", Code(ct.CodeTableDailyQuality)),
        ("wind_direction_std_dev_quality_flag", Code(ct.CodeTableDailyQualityFlag))
    ]
class WindGust(FieldGroup):
    """
    Wind gust observation (OC1)
    """
    _COMPONENTS = [
        ("speed_rate", Speed()),
        ("speed_quality_code", Quality())
    ]
class SupplementaryWindDirection(FieldGroup):
    """
    Supplementary wind observation with direction (OD1-OD3)
    """
    _COMPONENTS = [
        ("type_code", Code(ict.CodeTableSupplementaryWind)),
        ("period_quantity", Hours()),
        ("direction_quantity", Degrees()),
        ("speed_rate", Speed()),
        ("speed_quality_code", Quality())
    ]
class WindSummary(FieldGroup):
    """
    Summary of day wind observation (OE1-OE3)
    """
    _COMPONENTS = [
        ("type_code", Code(ict.CodeTableWindSummary)),
        ("period_quantity", Hours()),
        ("speed_rate", Speed(100)),
        ("direction", Degrees()),
        ("time", Raw()),
        ("quality_code", Quality())
    ]
class RelativeHumidity(FieldGroup):
    """
    Relative humidity summary (RH1-RH3)
    """
    _COMPONENTS = [
        ("period_quantity", Hours()),
        ("code", Code(ict.CodeTableRelativeHumidity)),
        ("percentage", Numeric("%")),
        ("derived_code", Code(ct.CodeTableDerived)),
        ("quality_code", Quality())
    ]
################################################################################
# TEMPERATURE
################################################################################
class ExtremeTemperature(FieldGroup):
    """
    Extreme air temperature (KA1-KA4)
    """
    _COMPONENTS = [
        ("period_quantity", Hours(10)),
        ("code", Code(ict.CodeTableExtremeTemperature)),
        ("air_temperature", Celsius()),
        ("air_temperature_quality_code", Quality())
    ]
class MonthlyExtremeTemperature(FieldGroup):
    """
    Extreme air temperature for the month (KC1-KC2)
    """
    _COMPONENTS = [
        ("code", Code(ict.CodeTableExtremeTemperature)),
        ("condition_code", Code(ict.CodeTableExtremeCondition)),
        ("temperature", Celsius()),
        ("dates_of_occurrence", Raw()),
        ("temperature_quality_code", Quality())
    ]
class DegreeDays(FieldGroup):
    """
    Heating and cooling degree days (KD1-KD2)
    """
    _COMPONENTS = [
        ("period_quantity", Hours()),
        ("code", Code(ict.CodeTableDegreeDays)),
        ("value", Numeric("degree days")),
        ("quality_code", Quality())
    ]
class ExtremeTemperatureDays(FieldGroup):
    """
    Number of days exceeding criteria temperatures for the month (KE1)
    """
    _COMPONENTS = [
        ("max_temp_32f_days", Days()),
        ("max_temp_32f_days_quality_code", Quality()),
        ("max_temp_90f_days", Days()),
        ("max_temp_90f_days_quality_code", Quality()),
        ("min_temp_32f_days", Days()),
        ("min_temp_32f_days_quality_code", Quality()),
        ("min_temp_0f_days", Days()),
        ("min_temp_0f_days_quality_code", Quality())
    ]
class DerivedTemperature(FieldGroup):
    """
    Hourly calculated temperature (KF1)
    """
    _COMPONENTS = [
        ("air_temperature", Celsius()),
        ("air_temperature_quality_code", Quality())
    ]
class AverageTemperature(FieldGroup):
    """
    Average dew point or wet bulb temperature (KG1-KG2)
    """
    _COMPONENTS = [
        ("period_quantity", Hours()),
        ("code", Code(ict.CodeTableAverageTemperature)),
        ("temperature", Celsius()),
        ("derived_code", Code(ct.CodeTableDerived)),
        ("quality_code", Quality())
    ]
################################################################################
# PRESSURE
################################################################################
class AtmosphericPressure(FieldGroup):
    """
    Altimeter setting and station pressure (MA1)
    """
    _COMPONENTS = [
        ("altimeter_setting_rate", Hectopascals()),
        ("altimeter_quality_code", Quality()),
        ("station_pressure_rate", Hectopascals()),
        ("station_pressure_quality_code", Quality())
    ]
class PressureChange(FieldGroup):
    """
    Atmospheric pressure change (MD1)
    """
    _COMPONENTS = [
        ("tendency_code", Code(ict.CodeTablePressureTendency)),
        ("tendency_quality_code", Quality()),
        ("three_hour_quantity", Hectopascals()),
        ("three_hour_quantity_quality_code", Quality()),
        ("twenty_four_hour_quantity", Hectopascals()),
        ("twenty_four_hour_quantity_quality_code", Quality())
    ]
class GeopotentialHeight(FieldGroup):
    """
    Geopotential height of an isobaric level (ME1)
    """
    _COMPONENTS = [
        ("code", Code(ict.CodeTableIsobaricLevel)),
        ("height_dimension", Numeric("m")),
        ("height_dimension_quality_code", Quality())
    ]
class DailyPressure(FieldGroup):
    """
    Average station and sea level pressure for the day (MF1)
    """
    _COMPONENTS = [
        ("avg_station_pressure_day", Hectopascals()),
        ("avg_station_pressure_day_quality_code", Quality()),
        ("avg_sea_level_pressure_day", Hectopascals()),
        ("avg_sea_level_pressure_day_quality_code", Quality())
    ]
class DailyMinimumPressure(FieldGroup):
    """
    Average station pressure and minimum sea level pressure for the day (MG1)
    """
    _COMPONENTS = [
        ("avg_station_pressure_day", Hectopascals()),
        ("avg_station_pressure_day_quality_code", Quality()),
        ("min_sea_level_pressure_day", Hectopascals()),
        ("min_sea_level_pressure_day_quality_code", Quality())
    ]
class MonthlyPressure(FieldGroup):
    """
    Average station and sea level pressure for the month (MH1)
    """
    _COMPONENTS = [
        ("avg_station_pressure_month", Hectopascals()),
        ("avg_station_pressure_month_quality_code", Quality()),
        ("avg_sea_level_pressure_month", Hectopascals()),
        ("avg_sea_level_pressure_month_quality_code", Quality())
    ]
class MonthlyExtremePressure(FieldGroup):
    """
    Maximum and minimum sea level pressure for the month (MK1)
    """
    _COMPONENTS = [
        ("max_sea_level_pressure_month", Hectopascals()),
        ("max_sea_level_pressure_month_date_time", Raw()),
        ("max_sea_level_pressure_month_quality_code", Quality()),
        ("min_sea_level_pressure_month", Hectopascals()),
        ("min_sea_level_pressure_month_date_time", Raw()),
        ("min_sea_level_pressure_month_quality_code", Quality())
    ]
################################################################################
# CLOUD AND SOLAR
################################################################################
class SkyCoverLayer(FieldGroup):
    """
    Sky cover layer (GA1-GA6)
    """
    _COMPONENTS = [
        ("coverage_code", Code(ict.CodeTableCloudCoverage)),
        ("coverage_quality_code", Quality()),
        ("base_height_dimension", Numeric("m")),
        ("base_height_quality_code", Quality()),
        ("cloud_type_code", Code(ict.CodeTableCloudType)),
        ("cloud_type_quality_code", Quality())
    ]
class SkyCoverSummation(FieldGroup):
    """
    Sky cover summation state (GD1-GD6)
    """
    _COMPONENTS = [
        ("coverage_code", Code(ict.CodeTableCloudSummation)),
        ("coverage_code_2", Code(ict.CodeTableCloudCoverage)),
        ("coverage_quality_code", Quality()),
        ("height_dimension", Numeric("m")),
        ("height_dimension_quality_code", Quality()),
        ("characteristic_code", Code(ict.CodeTableCloudCharacteristic))
    ]
class SkyConditionSupplement(FieldGroup):
    """
    Sky condition identifier (GE1). Heights are the upper and lower range of
    the lowest cloud base
    """
    _COMPONENTS = [
        ("convective_cloud_code", Code(ict.CodeTableConvectiveCloud)),
        ("vertical_datum_code", Code(ict.CodeTableVerticalDatum)),
        ("base_height_upper_range", Numeric("m")),
        ("base_height_lower_range", Numeric("m"))
    ]
class SkyCondition(FieldGroup):
    """
    Sky condition observation (GF1)
    """
    _COMPONENTS = [
        ("total_coverage_code", Code(ict.CodeTableCloudCoverage)),
        ("total_opaque_coverage_code", Code(ict.CodeTableCloudCoverage)),
        ("total_coverage_quality_code", Quality()),
        ("total_lowest_cloud_cover_code", Code(ict.CodeTableCloudCoverage)),
        ("total_lowest_cloud_cover_quality_code", Quality()),
        ("low_cloud_genus_code", Code(ict.CodeTableLowCloudGenus)),
        ("low_cloud_genus_quality_code", Quality()),
        ("lowest_cloud_base_height", Numeric("m")),
        ("lowest_cloud_base_height_quality_code", Quality()),
        ("mid_cloud_genus_code", Code(ict.CodeTableMidCloudGenus)),
        ("mid_cloud_genus_quality_code", Quality()),
        ("high_cloud_genus_code", Code(ict.CodeTableHighCloudGenus)),
        ("high_cloud_genus_quality_code", Quality())
    ]
class BelowStationCloud(FieldGroup):
    """
    Cloud layer below the station level (GG1-GG6)
    """
    _COMPONENTS = [
        ("coverage_code", Code(ict.CodeTableCloudCoverage)),
        ("coverage_quality_code", Quality()),
        ("top_height_dimension", Numeric("m")),
        ("top_height_quality_code", Quality()),
        ("type_code", Code(ict.CodeTableCloudType)),
        ("type_quality_code", Quality()),
        ("top_code", Code(ict.CodeTableCloudTop)),
        ("top_quality_code", Quality())
    ]
class HourlySolarRadiation(FieldGroup):
    """
    Hourly solar radiation (GH1)
    """
    _COMPONENTS = [
        ("avg_solar_radiation", Irradiance(10)),
        ("avg_solar_radiation_quality_code", Quality()),
        ("avg_solar_radiation_quality_flag", NetworkFlag()),
        ("min_solar_radiation", Irradiance(10)),
        ("min_solar_radiation_quality_code", Quality()),
        ("min_solar_radiation_quality_flag", NetworkFlag()),
        ("max_solar_radiation", Irradiance(10)),
        ("max_solar_radiation_quality_code", Quality()),
        ("max_solar_radiation_quality_flag", NetworkFlag()),
        ("std_solar_radiation", Irradiance(10)),
        ("std_solar_radiation_quality_code", Quality()),
        ("std_solar_radiation_quality_flag", NetworkFlag())
    ]
class SunshineDuration(FieldGroup):
    """
    Sunshine duration in minutes (GJ1, GL1)
    """
    _COMPONENTS = [
        ("duration_quantity", Minutes()),
        ("duration_quality_code", Quality())
    ]
class SunshinePercentage(FieldGroup):
    """
    Percentage of possible sunshine (GK1)
    """
    _COMPONENTS = [
        ("percent_quantity", Numeric("%")),
        ("percent_quality_code", Quality())
    ]
class SolarIrradiance(FieldGroup):
    """
    Solar irradiance (GM1)
    """
    _COMPONENTS = [
        ("time_period", Minutes()),
        ("global_irradiance", Irradiance()),
        ("global_irradiance_data_flag", Code(ict.CodeTableSolarDataFlag)),
        ("global_irradiance_quality_code", Quality()),
        ("direct_beam_irradiance", Irradiance()),
        ("direct_beam_irradiance_data_flag", Code(ict.CodeTableSolarDataFlag)),
        ("direct_beam_irradiance_quality_code", Quality()),
        ("diffuse_irradiance", Irradiance()),
        ("diffuse_irradiance_data_flag", Code(ict.CodeTableSolarDataFlag)),
        ("diffuse_irradiance_quality_code", Quality()),
        ("uvb_global_irradiance", Irradiance()),
        ("uvb_global_irradiance_data_flag", Code(ict.CodeTableSolarDataFlag)),
        ("uvb_global_irradiance_quality_code", Quality())
    ]
class SolarRadiation(FieldGroup):
    """
    Solar radiation (GN1)
    """
    _COMPONENTS = [
        ("time_period", Minutes()),
        ("upwelling_global_solar_radiation", Irradiance()),
        ("upwelling_global_solar_radiation_quality_code", Quality()),
        ("downwelling_thermal_infrared_radiation", Irradiance()),
        ("downwelling_thermal_infrared_radiation_quality_code", Quality()),
        ("upwelling_thermal_infrared_radiation", Irradiance()),
        ("upwelling_thermal_infrared_radiation_quality_code", Quality()),
        ("photosynthetically_active_radiation", Irradiance()),
        ("photosynthetically_active_radiation_quality_code", Quality()),
        ("solar_zenith_angle", Degrees()),
        ("solar_zenith_angle_quality_code", Quality())
    ]
class NetSolarRadiation(FieldGroup):
    """
    Net solar radiation (GO1)
    """
    _COMPONENTS = [
        ("time_period", Minutes()),
        ("net_solar_radiation", Irradiance()),
        ("net_solar_radiation_quality_code", Quality()),
        ("net_infrared_radiation", Irradiance()),
        ("net_infrared_radiation_quality_code", Quality()),
        ("net_radiation", Irradiance()),
        ("net_radiation_quality_code", Quality())
    ]
class ModelledSolarIrradiance(FieldGroup):
    """
    Modelled solar irradiance (GP1)
    """
    _COMPONENTS = [
        ("time_period", Minutes()),
        ("global_horizontal", Irradiance()),
        ("global_horizontal_source_flag", Code(ict.CodeTableModelledSolarSource)),
        ("global_horizontal_uncertainty", Numeric("%")),
        ("direct_normal", Irradiance()),
        ("direct_normal_source_flag", Code(ict.CodeTableModelledSolarSource)),
        ("direct_normal_uncertainty", Numeric("%")),
        ("diffuse_horizontal", Irradiance()),
        ("diffuse_horizontal_source_flag", Code(ict.CodeTableModelledSolarSource)),
        ("diffuse_horizontal_uncertainty", Numeric("%"))
    ]
class SolarAngle(FieldGroup):
    """
    Hourly solar angle (GQ1)
    """
    _COMPONENTS = [
        ("time_period", Minutes()),
        ("mean_zenith_angle", Degrees(10)),
        ("mean_zenith_angle_quality_code", Quality()),
        ("mean_azimuth_angle", Degrees(10)),
        ("mean_azimuth_angle_quality_code", Quality())
    ]
class ExtraterrestrialRadiation(FieldGroup):
    """
    Hourly extraterrestrial radiation (GR1)
    """
    _COMPONENTS = [
        ("time_period", Minutes()),
        ("horizontal_surface", Irradiance()),
        ("horizontal_surface_quality_code", Quality()),
        ("direct_normal", Irradiance()),
        ("direct_normal_quality_code", Quality())
    ]
################################################################################
# GROUND SURFACE
################################################################################
class GroundSurface(FieldGroup):
    """
    Ground surface observation (IA1)
    """
    _COMPONENTS = [
        ("observation_code", Code(ict.CodeTableGroundSurface)),
        ("observation_quality_code", Quality())
    ]
class GroundMinimumTemperature(FieldGroup):
    """
    Ground surface minimum temperature (IA2)
    """
    _COMPONENTS = [
        ("period_quantity", Hours(10)),
        ("min_temperature", Celsius()),
        ("min_temperature_quality_code", Quality())
    ]
class SurfaceTemperature(FieldGroup):
    """
    Hourly surface temperature from a radiation sensor (IB1)
    """
    _COMPONENTS = [
        ("surface_temperature", Celsius()),
        ("surface_temperature_quality_code", NetworkQuality()),
        ("surface_temperature_quality_flag", NetworkFlag()),
        ("surface_temperature_min", Celsius()),
        ("surface_temperature_min_quality_code", NetworkQuality()),
        ("surface_temperature_min_quality_flag", NetworkFlag()),
        ("surface_temperature_max", Celsius()),
        ("surface_temperature_max_quality_code", NetworkQuality()),
        ("surface_temperature_max_quality_flag", NetworkFlag())
    ]
class PanEvaporation(FieldGroup):
    """
    Pan evaporation data (IC1). Wind movement is in statute miles and
    evaporation in hundredths of an inch
    """
    _COMPONENTS = [
        ("period_quantity", Hours()),
        ("wind_movement", Numeric("mi")),
        ("wind_movement_condition_code", Code(ict.CodeTablePanCondition)),
        ("wind_movement_quality_code", Quality()),
        ("evaporation", Numeric("in", 100, float)),
        ("evaporation_condition_code", Code(ict.CodeTablePanCondition)),
        ("evaporation_quality_code", Quality()),
        ("max_pan_water_temperature", Celsius()),
        ("max_pan_water_temperature_condition_code", Code(ict.CodeTablePanCondition)),
        ("max_pan_water_temperature_quality_code", Quality()),
        ("min_pan_water_temperature", Celsius()),
        ("min_pan_water_temperature_condition_code", Code(ict.CodeTablePanCondition)),
        ("min_pan_water_temperature_quality_code", Quality())
    ]
################################################################################
# MARINE
################################################################################
class Wave(FieldGroup):
    """
    Wave measurement (UA1)
    """
    _COMPONENTS = [
        ("method_code", Code(ict.CodeTableWaveMethod)),
        ("wave_period_quantity", Numeric("s")),
        ("wave_height_dimension", Numeric("m", 10, float)),
        ("wave_quality_code", Quality()),
        ("sea_state_code", Code(ict.CodeTableSeaState)),
        ("sea_state_quality_code", Quality())
    ]
class Swell(FieldGroup):
    """
    Wave measurement of the primary and secondary swell (UG1-UG2)
    """
    _COMPONENTS = [
        ("period_quantity", Numeric("s")),
        ("height_dimension", Numeric("m", 10, float)),
        ("direction_angle", Degrees()),
        ("quality_code", Quality())
    ]
class IceAccretion(FieldGroup):
    """
    Ice accretion on a ship (WA1)
    """
    _COMPONENTS = [
        ("source_code", Code(ict.CodeTableIceAccretionSource)),
        ("thickness_dimension", Centimetres(10)),
        ("tendency_code", Code(ict.CodeTableIceAccretionTendency)),
        ("quality_code", Quality())
    ]
class SeaIce(FieldGroup):
    """
    Surface sea ice observation (WD1)
    """
    _COMPONENTS = [
        ("edge_bearing_code", Code(ict.CodeTableIceEdgeBearing)),
        ("uniform_concentration_rate", Numeric("%")),
        ("non_uniform_concentration_code", Code(ict.CodeTableIceConcentration)),
        ("ship_relative_position_code", Code(ict.CodeTableShipPosition)),
        ("ship_penetrability_code", Code(ict.CodeTableShipPenetrability)),
        ("ice_trend_code", Code(ict.CodeTableIceTrend)),
        ("development_code", Code(ict.CodeTableIceDevelopment)),
        ("growler_bergy_bit_presence_code", Code(ict.CodeTableGrowlerPresence)),
        ("growler_bergy_bit_quantity", Numeric("")),
        ("iceberg_quantity", Numeric("")),
        ("quality_code", Quality())
    ]
class SeaIceEdge(FieldGroup):
    """
    Surface sea ice edge observation (WG1)
    """
    _COMPONENTS = [
        ("edge_bearing_code", Code(ict.CodeTableIceEdgeBearing)),
        ("edge_distance_dimension", Numeric("km", 10, float)),
        ("edge_orientation_code", Code(ict.CodeTableIceEdgeOrientation)),
        ("formation_type_code", Code(ict.CodeTableIceFormation)),
        ("navigation_effect_code", Code(ict.CodeTableNavigationEffect)),
        ("quality_code", Quality())
    ]
class WaterIce(FieldGroup):
    """
    Water surface ice observation for a river, lake or reservoir (WJ1)
    """
    _COMPONENTS = [
        ("ice_thickness", Centimetres()),
        ("discharge_rate", Numeric("m3/s")),
        ("primary_ice_phenomenon", Code(ict.CodeTableIcePhenomena)),
        ("secondary_ice_phenomenon", Code(ict.CodeTableIcePhenomena)),
        ("stage_height", Centimetres()),
        ("under_ice_slush_condition", Code(ict.CodeTableSlushCondition)),
        ("water_level", Code(ict.CodeTableWaterLevel))
    ]
################################################################################
# NETWORK METADATA
################################################################################
class ClimateDivision(FieldGroup):
    """
    US cooperative network climate division (CO1)
    """
    _COMPONENTS = [
        ("climate_division_number", Raw()),
        ("utc_lst_conversion", Hours())
    ]
class ElementTimeOffset(FieldGroup):
    """
    US cooperative network element time offset (CO2-CO9)
    """
    _COMPONENTS = [
        ("element_id", Raw()),
        ("time_offset", Hours(10))
    ]
class ControlSection(FieldGroup):
    """
    Climate reference network control section (CR1)
    """
    _COMPONENTS = [
        ("datalogger_version", Numeric("", 1000, float)),
        ("datalogger_version_quality_code", NetworkQuality()),
        ("datalogger_version_quality_flag", NetworkFlag())
    ]
class SubhourlyTemperature(FieldGroup):
    """
    Subhourly air temperature (CT1-CT3)
    """
    _COMPONENTS = [
        ("air_temperature", Celsius()),
        ("air_temperature_quality_code", NetworkQuality()),
        ("air_temperature_quality_flag", NetworkFlag())
    ]
class HourlyTemperature(FieldGroup):
    """
    Hourly average air temperature (CU1-CU3)
    """
    _COMPONENTS = [
        ("air_temperature", Celsius()),
        ("air_temperature_quality_code", NetworkQuality()),
        ("air_temperature_quality_flag", NetworkFlag()),
        ("air_temperature_std_dev", Celsius()),
        ("air_temperature_std_dev_quality_code", NetworkQuality()),
        ("air_temperature_std_dev_quality_flag", NetworkFlag())
    ]
class HourlyTemperatureExtremes(FieldGroup):
    """
    Hourly minimum and maximum air temperature (CV1-CV3). Times are HHMM
    """
    _COMPONENTS = [
        ("air_temperature_min", Celsius()),
        ("air_temperature_min_quality_code", NetworkQuality()),
        ("air_temperature_min_quality_flag", NetworkFlag()),
        ("air_temperature_min_time", Raw()),
        ("air_temperature_min_time_quality_code", NetworkQuality()),
        ("air_temperature_min_time_quality_flag", NetworkFlag()),
        ("air_temperature_max", Celsius()),
        ("air_temperature_max_quality_code", NetworkQuality()),
        ("air_temperature_max_quality_flag", NetworkFlag()),
        ("air_temperature_max_time", Raw()),
        ("air_temperature_max_time_quality_code", NetworkQuality()),
        ("air_temperature_max_time_quality_flag", NetworkFlag())
    ]
class Wetness(FieldGroup):
    """
    Subhourly wetness sensor readings (CW1)
    """
    _COMPONENTS = [
        ("wetness_1", Numeric("", 10, float)),
        ("wetness_1_quality_code", NetworkQuality()),
        ("wetness_1_quality_flag", NetworkFlag()),
        ("wetness_2", Numeric("", 10, float)),
        ("wetness_2_quality_code", NetworkQuality()),
        ("wetness_2_quality_flag", NetworkFlag())
    ]
class GeonorPrecipitation(FieldGroup):
    """
    Hourly precipitation and vibrating wire gauge frequencies (CX1-CX3)
    """
    _COMPONENTS = [
        ("precipitation", Millimetres()),
        ("precipitation_quality_code", NetworkQuality()),
        ("precipitation_quality_flag", NetworkFlag()),
        ("avg_frequency", Numeric("Hz", 10, float)),
        ("avg_frequency_quality_code", NetworkQuality()),
        ("avg_frequency_quality_flag", NetworkFlag()),
        ("min_frequency", Numeric("Hz", 10, float)),
        ("min_frequency_quality_code", NetworkQuality()),
        ("min_frequency_quality_flag", NetworkFlag()),
        ("max_frequency", Numeric("Hz", 10, float)),
        ("max_frequency_quality_code", NetworkQuality()),
        ("max_frequency_quality_flag", NetworkFlag())
    ]
################################################################################
# CLIMATE REFERENCE NETWORK
################################################################################
class SubhourlyPrecipitation(FieldGroup):
    """
    Subhourly observed liquid precipitation (CB1-CB2)
    """
    _COMPONENTS = [
        ("period_quantity", Minutes()),
        ("precipitation", Millimetres()),
        ("precipitation_quality_code", NetworkQuality()),
        ("precipitation_quality_flag", NetworkFlag())
    ]
class FanSpeed(FieldGroup):
    """
    Hourly aspirated shield fan speed (CF1-CF3)
    """
    _COMPONENTS = [
        ("fan_speed", Numeric("rev/s", 10, float)),
        ("fan_speed_quality_code", NetworkQuality()),
        ("fan_speed_quality_flag", NetworkFlag())
    ]
class GaugeDepth(FieldGroup):
    """
    Subhourly total precipitation gauge depth (CG1-CG3)
    """
    _COMPONENTS = [
        ("precipitation", Millimetres()),
        ("precipitation_quality_code", NetworkQuality()),
        ("precipitation_quality_flag", NetworkFlag())
    ]
class TemperatureHumidity(FieldGroup):
    """
    Average air temperature and relative humidity (CH1-CH2)
    """
    _COMPONENTS = [
        ("period_quantity", Minutes()),
        ("avg_air_temperature", Celsius()),
        ("avg_air_temperature_quality_code", NetworkQuality()),
        ("avg_air_temperature_quality_flag", NetworkFlag()),
        ("avg_relative_humidity", Numeric("%", 10, float)),
        ("avg_relative_humidity_quality_code", NetworkQuality()),
        ("avg_relative_humidity_quality_flag", NetworkFlag())
    ]
class HourlyTemperatureHumidity(FieldGroup):
    """
    Hourly temperature and relative humidity statistics (CI1)
    """
    _COMPONENTS = [
        ("min_air_temperature", Celsius()),
        ("min_air_temperature_quality_code", NetworkQuality()),
        ("min_air_temperature_quality_flag", NetworkFlag()),
        ("max_air_temperature", Celsius()),
        ("max_air_temperature_quality_code", NetworkQuality()),
        ("max_air_temperature_quality_flag", NetworkFlag()),
        ("std_dev_air_temperature", Celsius()),
        ("std_dev_air_temperature_quality_code", NetworkQuality()),
        ("std_dev_air_temperature_quality_flag", NetworkFlag()),
        ("std_dev_relative_humidity", Numeric("%", 10, float)),
        ("std_dev_relative_humidity_quality_code", NetworkQuality()),
        ("std_dev_relative_humidity_quality_flag", NetworkFlag())
    ]
class BatteryVoltage(FieldGroup):
    """
    Hourly battery voltage (CN1)
    """
    _COMPONENTS = [
        ("battery_voltage", Numeric("V", 10, float)),
        ("battery_voltage_quality_code", NetworkQuality()),
        ("battery_voltage_quality_flag", NetworkFlag()),
        ("battery_voltage_full_load", Numeric("V", 10, float)),
        ("battery_voltage_full_load_quality_code", NetworkQuality()),
        ("battery_voltage_full_load_quality_flag", NetworkFlag()),
        ("datalogger_battery_voltage", Numeric("V", 10, float)),
        ("datalogger_battery_voltage_quality_code", NetworkQuality()),
        ("datalogger_battery_voltage_quality_flag", NetworkFlag())
    ]
class Diagnostic(FieldGroup):
    """
    Hourly datalogger enclosure diagnostics (CN2)
    """
    _COMPONENTS = [
        ("inlet_temperature", Celsius()),
        ("inlet_temperature_quality_code", NetworkQuality()),
        ("inlet_temperature_quality_flag", NetworkFlag()),
        ("inlet_max_temperature", Celsius()),
        ("inlet_max_temperature_quality_code", NetworkQuality()),
        ("inlet_max_temperature_quality_flag", NetworkFlag()),
        ("door_open_time", Minutes()),
        ("door_open_time_quality_code", NetworkQuality()),
        ("door_open_time_quality_flag", NetworkFlag())
    ]
class ReferenceResistor(FieldGroup):
    """
    Hourly reference resistor and datalogger signature (CN3)
    """
    _COMPONENTS = [
        ("reference_resistor_avg", Numeric("ohm", 10, float)),
        ("reference_resistor_avg_quality_code", NetworkQuality()),
        ("reference_resistor_avg_quality_flag", NetworkFlag()),
        ("datalogger_signature", Raw()),
        ("datalogger_signature_quality_code", NetworkQuality()),
        ("datalogger_signature_quality_flag", NetworkFlag())
    ]
class HeaterDoor(FieldGroup):
    """
    Gauge heater, door and transmitter power (CN4)
    """
    _COMPONENTS = [
        ("gauge_heater_code", Code(ict.CodeTableGaugeHeater)),
        ("gauge_heater_quality_code", NetworkQuality()),
        ("gauge_heater_quality_flag", NetworkFlag()),
        ("door_code", Code(ict.CodeTableDoor)),
        ("door_quality_code", NetworkQuality()),
        ("door_quality_flag", NetworkFlag()),
        ("forward_transmitter_power", Numeric("W", 10, float)),
        ("forward_transmitter_power_quality_code", NetworkQuality()),
        ("forward_transmitter_power_quality_flag", NetworkFlag()),
        ("reflected_transmitter_power", Numeric("W", 10, float)),
        ("reflected_transmitter_power_quality_code", NetworkQuality()),
        ("reflected_transmitter_power_quality_flag", NetworkFlag())
    ]
################################################################################
# RUNWAY VISUAL RANGE AND SEA SURFACE
################################################################################
class RunwayVisualRange(FieldGroup):
    """
    Runway visual range (ED1). The runway direction is reported in tens of
    degrees
    """
    _COMPONENTS = [
        ("direction_angle", Multiplied("deg", 10)),
        ("designator_code", Code(ict.CodeTableRunwayDesignator)),
        ("visibility_dimension", Numeric("m")),
        ("quality_code", Quality())
    ]
class SeaSurfaceTemperature(FieldGroup):
    """
    Sea surface temperature (SA1)
    """
    _COMPONENTS = [
        ("temperature", Celsius()),
        ("temperature_quality_code", Quality())
    ]
