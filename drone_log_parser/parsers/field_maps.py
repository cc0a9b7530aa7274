"""
Static field alias tables for each supported export variant.

All vendor-specific naming knowledge lives here. Parsers select a table and
resolve logical fields through it, so supporting a new exporter's column
names is a data change.
"""

from typing import Dict, List, Tuple

FieldMap = Dict[str, List[str]]

FIELD_MAPPINGS: Dict[str, FieldMap] = {
    # Airdata.com CSV export
    'airdata': {
        'timestamp': ['datetime(utc)', 'time(millisecond)', 'datetime'],
        'latitude': ['latitude', 'lat'],
        'longitude': ['longitude', 'lng', 'lon'],
        'altitude': ['height_above_takeoff(feet)', 'height_above_takeoff',
                     'altitude_above_seaLevel(feet)', 'altitude'],
        'altitude_meters': ['height_above_takeoff(meters)', 'altitude_above_seaLevel(meters)'],
        'speed': ['speed(mph)', 'speed'],
        'speed_mps': ['speed(m/s)'],
        'speed_kph': ['speed(km/h)'],
        'battery': ['battery_percent', 'battery(%)', 'battery'],
        'distance': ['distance(feet)', 'distance'],
        'distance_meters': ['distance(meters)'],
    },

    # DJI native logs converted to CSV (OSD./GPS./BATTERY. prefixed columns)
    'dji': {
        'timestamp': ['time', 'timestamp', 'OSD.flyTime', 'datetime', 'Time'],
        'latitude': ['OSD.latitude', 'GPS.latitude', 'latitude', 'lat', 'GPS_Latitude'],
        'longitude': ['OSD.longitude', 'GPS.longitude', 'longitude', 'lng', 'lon', 'GPS_Longitude'],
        'altitude': ['OSD.altitude', 'OSD.height', 'GPS.heightMSL', 'altitude', 'height', 'GPS_Height'],
        'speed': ['OSD.hSpeed', 'OSD.xSpeed', 'GPS.velN', 'speed', 'GPS_Speed'],
        'battery': ['BATTERY.chargePercent', 'OSD.batteryPercent', 'battery', 'Battery'],
    },

    # Fallback for unlabelled CSV/JSON handled by the DJI parser
    'generic': {
        'timestamp': ['time', 'timestamp', 'datetime', 'date', 't'],
        'latitude': ['latitude', 'lat', 'y'],
        'longitude': ['longitude', 'lng', 'lon', 'x'],
        'altitude': ['altitude', 'alt', 'height', 'elevation', 'z'],
        'speed': ['speed', 'velocity', 'groundspeed'],
        'battery': ['battery', 'battery_percent', 'batt'],
    },

    # Autel Sky app JSON export
    'autel_json': {
        'timestamp': ['timestamp', 'time', 'datetime', 'recordTime', 'flyTime'],
        'latitude': ['latitude', 'lat', 'gpsLatitude', 'droneLatitude'],
        'longitude': ['longitude', 'lng', 'lon', 'gpsLongitude', 'droneLongitude'],
        'altitude': ['altitude', 'alt', 'height', 'relativeHeight', 'absoluteHeight'],
        'speed': ['speed', 'groundSpeed', 'horizontalSpeed', 'hSpeed'],
        'battery': ['batteryPercent', 'battery', 'batteryLevel', 'remainPower'],
        'distance': ['distance', 'homeDistance', 'distanceFromHome'],
    },

    # Autel Sky app CSV export
    'autel_csv': {
        'timestamp': ['time', 'timestamp', 'datetime', 'Time(s)', 'Time'],
        'latitude': ['latitude', 'lat', 'droneLatitude', 'GPS.latitude'],
        'longitude': ['longitude', 'lng', 'lon', 'droneLongitude', 'GPS.longitude'],
        'altitude': ['altitude', 'alt', 'height', 'Altitude(m)', 'Height(m)', 'RelativeHeight'],
        'speed': ['speed', 'Speed(m/s)', 'HSpeed(m/s)', 'groundSpeed'],
        'battery': ['battery', 'Battery(%)', 'BatteryPercent', 'remainPower'],
        'distance': ['distance', 'Distance(m)', 'HomeDistance'],
    },

    # Skydio app CSV export
    'skydio_csv': {
        'timestamp': ['timestamp', 'time', 'time_utc', 'datetime', 'elapsed_time', 'flight_time'],
        'latitude': ['latitude', 'lat', 'gps_latitude', 'vehicle_latitude', 'drone_lat'],
        'longitude': ['longitude', 'lng', 'lon', 'gps_longitude', 'vehicle_longitude', 'drone_lon'],
        'altitude': ['altitude', 'alt', 'height', 'altitude_msl', 'altitude_agl',
                     'height_above_ground', 'relative_altitude'],
        'speed': ['speed', 'ground_speed', 'horizontal_speed', 'velocity', 'vehicle_speed'],
        'battery': ['battery', 'battery_percent', 'battery_level', 'remaining_battery', 'soc'],
        'distance': ['distance', 'distance_from_home', 'home_distance', 'range'],
    },

    # Skydio Cloud JSON export
    'skydio_cloud': {
        'timestamp': ['recorded_at', 'timestamp', 'time'],
        'latitude': ['latitude', 'lat', 'vehicle_latitude', 'position.latitude'],
        'longitude': ['longitude', 'lon', 'vehicle_longitude', 'position.longitude'],
        'altitude': ['altitude', 'height', 'position.altitude'],
        'speed': ['speed', 'velocity.horizontal'],
        'battery': ['battery_percentage', 'battery'],
    },
}

# Ordered dotted paths probed for a telemetry array in JSON exports.
JSON_RECORD_PATHS: Dict[str, Tuple[str, ...]] = {
    'dji': ('flightData', 'records', 'telemetry', 'data',
            'data.flightData', 'data.telemetry', 'data.records'),
    'autel': ('flightData', 'telemetry', 'records', 'data', 'flightRecords',
              'gpsData', 'flight.telemetry', 'flight.records',
              'data.flightData', 'data.telemetry', 'data.records'),
    'skydio': ('telemetry', 'flight_data', 'records', 'data', 'positions',
               'flight.telemetry', 'flight.positions',
               'data.flightData', 'data.telemetry', 'data.records'),
    'generic': ('data', 'records', 'telemetry', 'flightData', 'points', 'positions',
                'data.flightData', 'data.telemetry', 'data.records'),
}

# Keys that mark an array element as carrying a latitude.
LATITUDE_KEYS: Tuple[str, ...] = ('latitude', 'lat', 'gpsLatitude', 'droneLatitude',
                                  'vehicle_latitude')

# Flight-level metadata keys probed in JSON exports.
METADATA_KEYS: Dict[str, Dict[str, List[str]]] = {
    'autel': {
        'drone_model': ['droneModel', 'aircraftModel', 'model', 'deviceModel', 'aircraft.model'],
        'firmware_version': ['firmwareVersion', 'version', 'aircraft.firmwareVersion'],
        'serial_number': ['serialNumber', 'aircraft.serialNumber'],
        'start_time': ['startTime', 'takeoffTime', 'flightStartTime'],
        'end_time': ['endTime', 'landingTime', 'flightEndTime'],
        'duration': ['duration', 'flightDuration', 'totalTime'],
    },
    'skydio': {
        'drone_model': ['vehicle_type', 'drone_model', 'model', 'aircraft.model'],
        'firmware_version': ['firmware_version', 'vehicle_firmware', 'aircraft.firmware'],
        'serial_number': ['serial_number', 'vehicle_serial', 'aircraft.serial'],
        'start_time': ['start_time', 'flight_start', 'takeoff_time'],
        'end_time': ['end_time', 'flight_end', 'landing_time'],
        'duration': ['duration', 'flight_duration'],
    },
    'dji': {
        'drone_model': ['aircraftName', 'aircraft_name', 'droneModel', 'model', 'aircraft.model'],
        'firmware_version': ['firmwareVersion', 'firmware', 'aircraft.firmwareVersion'],
        'serial_number': ['aircraftSerial', 'serialNumber', 'aircraft_sn', 'aircraft.serial'],
        'start_time': ['startTime', 'takeoffTime'],
        'end_time': ['endTime', 'landingTime'],
        'duration': ['duration', 'flightDuration'],
    },
}

# Generic parser: lowercase substrings matched against column names.
GENERIC_COLUMNS: Dict[str, List[str]] = {
    'latitude': ['latitude', 'lat', 'y'],
    'longitude': ['longitude', 'lng', 'lon', 'x'],
    'altitude': ['altitude', 'alt', 'height', 'elevation', 'z'],
    'speed': ['speed', 'velocity', 'groundspeed'],
    'timestamp': ['time', 'timestamp', 'datetime', 'date'],
    'battery': ['battery', 'battery_percent', 'batt'],
}
