"""Temperature and resistance conversions for platinum RTD sensors

This module converts between temperature (degC) and resistance (ohm) for the platinum
resistance temperature detectors PT50, PT100, PT200, PT500 and PT1000, using the
Callendar-Van Dusen equation with the IEC 60751 coefficients. The supported range is
-200 degC to +850 degC.

For temperatures above or at 0 degC::

    R(T) = R0 * (1 + A*T + B*T^2)

and below 0 degC::

    R(T) = R0 * (1 + A*T + B*T^2 + C*(T - 100)*T^3)

The resistance to temperature direction is solved with Newton-Raphson iteration.

There are two flavours of each conversion. :func:`.resistance` and :func:`.temperature`
raise :class:`.ConversionFailure` when a conversion is not possible, while
:func:`.calculate_resistance` and :func:`.calculate_temperature` return the
:data:`.RTD_CONVERSION_FAILED` sentinel instead, which must be checked before the
result is trusted::

    >>> from PyPlatinumRTD.auxiliary.rtd_calculator import (
    ...     SensorType, calculate_resistance, RTD_CONVERSION_FAILED)
    >>> calculate_resistance(SensorType.PT100, 0.0)
    100.0
    >>> calculate_resistance(SensorType.PT100, 900.0) == RTD_CONVERSION_FAILED
    True

All functions are pure. They touch no shared mutable state and are therefore safe to
call from several threads at once.

"""

import enum
import logging
import math
from collections import namedtuple

import numpy

from ..common.supported_versions import python3_only

# Configure logger as library logger and set supported python versions
LOGGER = logging.getLogger(__name__)
LOGGER.addHandler(logging.NullHandler())
python3_only(__file__)

#: Callendar-Van Dusen A coefficient (all temperatures)
RTD_A_COEFFICIENT = 3.908302087e-3
#: Callendar-Van Dusen B coefficient (all temperatures)
RTD_B_COEFFICIENT = -5.775000000e-7
#: Callendar-Van Dusen C coefficient (only below 0 degC)
RTD_C_COEFFICIENT = -4.183010000e-12

#: Lowest supported temperature in degC
MIN_TEMPERATURE = -200.0
#: Highest supported temperature in degC
MAX_TEMPERATURE = 850.0
#: Temperatures this far outside the supported range are still accepted
TEMPERATURE_TOLERANCE = 0.5

#: Value returned by the sentinel functions when a conversion fails
RTD_CONVERSION_FAILED = -1.0e6

#: Maximum number of Newton-Raphson iterations
MAX_ITERATIONS = 1000
#: Convergence limit on the change of the temperature estimate between iterations
CONVERGENCE_TOLERANCE = 1e-8
#: Initial temperature estimate used when none is given
INITIAL_TEMPERATURE_ESTIMATE = 25.0

# Failure causes
UNKNOWN_SENSOR = 'unknown_sensor'
OUT_OF_RANGE = 'out_of_range'
NO_CONVERGENCE = 'no_convergence'


class SensorType(enum.IntEnum):
    """The supported platinum RTD sensor types

    The value of each member is the nominal resistance at 0 degC, so plain integers
    (e.g. ``100`` for a PT100) may be used wherever a sensor type is expected.
    """
    PT50 = 50
    PT100 = 100
    PT200 = 200
    PT500 = 500
    PT1000 = 1000


#: Reference resistance at 0 degC and valid resistance band for a sensor type
SensorSpec = namedtuple('SensorSpec', ['resistance_at_0', 'min_resistance',
                                       'max_resistance'])

#: The sensor table. The resistance bands match the resistance at -200 and 850 degC
SENSORS = {
    SensorType.PT50: SensorSpec(50.0, 9.2, 195.3),
    SensorType.PT100: SensorSpec(100.0, 18.3, 390.6),
    SensorType.PT200: SensorSpec(200.0, 36.5, 781.3),
    SensorType.PT500: SensorSpec(500.0, 91.5, 1953.0),
    SensorType.PT1000: SensorSpec(1000.0, 182.5, 3906.5),
}


class ConversionFailure(ValueError):
    """Raised when a temperature or resistance conversion is not possible

    Attributes:
        cause (str): One of :data:`.UNKNOWN_SENSOR`, :data:`.OUT_OF_RANGE` or
            :data:`.NO_CONVERGENCE`
    """

    def __init__(self, cause, message):
        super(ConversionFailure, self).__init__(message)
        self.cause = cause


def _failure(cause, message, *args):
    """Log and return a ConversionFailure"""
    message = message.format(*args)
    LOGGER.debug('Conversion failed (%s): %s', cause, message)
    return ConversionFailure(cause, message)


def sensor_spec(sensor_type):
    """Return the :class:`.SensorSpec` for a sensor type

    Args:
        sensor_type (SensorType or int): The sensor type

    Raises:
        ConversionFailure: With cause :data:`.UNKNOWN_SENSOR` if the sensor type is not
            recognized
    """
    try:
        spec = SENSORS[SensorType(sensor_type)]
    except (ValueError, TypeError):
        raise _failure(UNKNOWN_SENSOR, 'Unknown sensor type: {!r}', sensor_type) from None

    # A zero reference resistance is not a usable sensor
    if not spec.resistance_at_0:
        raise _failure(UNKNOWN_SENSOR, 'No reference resistance for: {!r}', sensor_type)
    return spec


def _callendar_van_dusen(resistance_at_0, temperature):
    """Return the resistance and its derivative with respect to temperature"""
    temp_squared = temperature * temperature
    ratio = 1.0 + RTD_A_COEFFICIENT * temperature + RTD_B_COEFFICIENT * temp_squared
    slope = RTD_A_COEFFICIENT + 2.0 * RTD_B_COEFFICIENT * temperature
    if temperature < 0.0:
        temp_cubed = temp_squared * temperature
        ratio += RTD_C_COEFFICIENT * (temperature - 100.0) * temp_cubed
        slope += RTD_C_COEFFICIENT * (4.0 * temp_cubed - 300.0 * temp_squared)
    return resistance_at_0 * ratio, resistance_at_0 * slope


def resistance(sensor_type, temperature):
    """Return the resistance of the sensor at a temperature

    Args:
        sensor_type (SensorType or int): The sensor type
        temperature (float): The temperature in degC. Must be within -200.5 to 850.5

    Returns:
        float: The resistance in ohm

    Raises:
        ConversionFailure: If the temperature is out of range or the sensor type is
            unknown
    """
    lower = MIN_TEMPERATURE - TEMPERATURE_TOLERANCE
    upper = MAX_TEMPERATURE + TEMPERATURE_TOLERANCE
    # Written so that NaN also fails
    if not lower <= temperature <= upper:
        raise _failure(OUT_OF_RANGE, 'Temperature {} degC outside [{}, {}]',
                       temperature, lower, upper)
    spec = sensor_spec(sensor_type)
    return _callendar_van_dusen(spec.resistance_at_0, temperature)[0]


def temperature(sensor_type, resistance, initial_temperature_estimate=None,
                max_iterations=None, tolerance=None):
    """Return the temperature of the sensor at a resistance

    The Callendar-Van Dusen equation is solved with Newton-Raphson iteration, starting
    from ``initial_temperature_estimate``.

    Args:
        sensor_type (SensorType or int): The sensor type
        resistance (float): The measured resistance in ohm. Must be within the resistance
            band of the sensor type (see :data:`.SENSORS`)
        initial_temperature_estimate (float): The initial temperature guess in degC.
            Defaults to :data:`.INITIAL_TEMPERATURE_ESTIMATE`
        max_iterations (int): Maximum number of iterations. Defaults to
            :data:`.MAX_ITERATIONS`
        tolerance (float): Convergence limit in degC. Defaults to
            :data:`.CONVERGENCE_TOLERANCE`

    Returns:
        float: The temperature in degC

    Raises:
        ConversionFailure: If the sensor type is unknown, the resistance is out of range
            or the iteration does not converge
    """
    # pylint: disable=redefined-outer-name
    if initial_temperature_estimate is None:
        initial_temperature_estimate = INITIAL_TEMPERATURE_ESTIMATE
    if max_iterations is None:
        max_iterations = MAX_ITERATIONS
    if tolerance is None:
        tolerance = CONVERGENCE_TOLERANCE

    spec = sensor_spec(sensor_type)
    if not spec.min_resistance <= resistance <= spec.max_resistance:
        raise _failure(OUT_OF_RANGE, 'Resistance {} ohm outside [{}, {}] for {}',
                       resistance, spec.min_resistance, spec.max_resistance,
                       SensorType(sensor_type).name)

    estimate = initial_temperature_estimate
    for _ in range(max_iterations):
        value, derivative = _callendar_van_dusen(spec.resistance_at_0, estimate)
        if derivative == 0.0:
            raise _failure(NO_CONVERGENCE, 'Zero derivative at {} degC', estimate)
        new_estimate = estimate - (value - resistance) / derivative
        if not math.isfinite(new_estimate):
            raise _failure(NO_CONVERGENCE, 'Diverged from initial estimate {} degC',
                           initial_temperature_estimate)
        if abs(new_estimate - estimate) < tolerance:
            return new_estimate
        estimate = new_estimate

    raise _failure(NO_CONVERGENCE, 'No convergence within {} iterations for {} ohm',
                   max_iterations, resistance)


def calculate_resistance(sensor_type, temperature):
    """Return the resistance of the sensor at a temperature or
    :data:`.RTD_CONVERSION_FAILED`

    See :func:`.resistance` for details.
    """
    # pylint: disable=redefined-outer-name
    try:
        return resistance(sensor_type, temperature)
    except ConversionFailure:
        return RTD_CONVERSION_FAILED


def calculate_temperature(sensor_type, resistance, initial_temperature_estimate=None):
    """Return the temperature of the sensor at a resistance or
    :data:`.RTD_CONVERSION_FAILED`

    Non-convergence of the solver is also reported as :data:`.RTD_CONVERSION_FAILED`.
    See :func:`.temperature` for details.
    """
    # pylint: disable=redefined-outer-name
    try:
        return temperature(sensor_type, resistance, initial_temperature_estimate)
    except ConversionFailure:
        return RTD_CONVERSION_FAILED


def resistances(sensor_type, temperatures):
    """Return an array of resistances for an array of temperatures

    Temperatures outside the supported range give ``nan``.

    Args:
        sensor_type (SensorType or int): The sensor type
        temperatures (array_like): Temperatures in degC

    Returns:
        numpy.ndarray: Resistances in ohm, same shape as ``temperatures``

    Raises:
        ConversionFailure: If the sensor type is unknown
    """
    # pylint: disable=redefined-outer-name
    spec = sensor_spec(sensor_type)
    temps = numpy.asarray(temperatures, dtype=float)
    # Out of range elements, inf and nan included, are replaced by nan below
    with numpy.errstate(invalid='ignore', over='ignore'):
        in_range = (temps >= MIN_TEMPERATURE - TEMPERATURE_TOLERANCE) & \
            (temps <= MAX_TEMPERATURE + TEMPERATURE_TOLERANCE)
        ratio = 1.0 + RTD_A_COEFFICIENT * temps + RTD_B_COEFFICIENT * temps * temps
        correction = RTD_C_COEFFICIENT * (temps - 100.0) * temps * temps * temps
        ratio = numpy.where(temps < 0.0, ratio + correction, ratio)
        return numpy.where(in_range, spec.resistance_at_0 * ratio, numpy.nan)


def temperatures(sensor_type, resistances, initial_temperature_estimate=None):
    """Return an array of temperatures for an array of resistances

    Each element is solved on its own with :func:`.temperature`. Elements that can not
    be converted give ``nan``.

    Args:
        sensor_type (SensorType or int): The sensor type
        resistances (array_like): Resistances in ohm
        initial_temperature_estimate (float): The initial temperature guess in degC,
            used for all elements

    Returns:
        numpy.ndarray: Temperatures in degC, same shape as ``resistances``

    Raises:
        ConversionFailure: If the sensor type is unknown
    """
    # pylint: disable=redefined-outer-name
    sensor_spec(sensor_type)
    values = numpy.asarray(resistances, dtype=float)
    out = numpy.empty(values.size)
    for index, value in enumerate(values.flat):
        try:
            out[index] = temperature(sensor_type, value, initial_temperature_estimate)
        except ConversionFailure:
            out[index] = numpy.nan
    return out.reshape(values.shape)


class RtdCalculator(object):
    """Temperature and resistance calculator for a single platinum RTD sensor

    Args:
        sensor_type (SensorType or int): The sensor type. Default is PT100

    Raises:
        ConversionFailure: If the sensor type is unknown
    """

    def __init__(self, sensor_type=SensorType.PT100):
        spec = sensor_spec(sensor_type)
        self.sensor_type = SensorType(sensor_type)
        self.resistance_at_0 = spec.resistance_at_0
        self.min_resistance = spec.min_resistance
        self.max_resistance = spec.max_resistance

    def __repr__(self):
        return '{}({})'.format(self.__class__.__name__, self.sensor_type.name)

    def find_r(self, temperature):
        """Find the resistance for a given temperature"""
        # pylint: disable=redefined-outer-name
        return resistance(self.sensor_type, temperature)

    def find_temperature(self, resistance, initial_temperature_estimate=None):
        """Find the temperature for a given resistance"""
        # pylint: disable=redefined-outer-name
        return temperature(self.sensor_type, resistance, initial_temperature_estimate)


def main():
    """Print out example conversions"""
    # Temperature of a PT100 at 268.5 ohm, starting from 25 degC
    temp = calculate_temperature(SensorType.PT100, 268.5, 25)
    print('Temperature is {:.2f}'.format(temp))

    # Resistance of a PT500 at 438 degC
    res = calculate_resistance(SensorType.PT500, 438)
    print('Resistance is {:.2f}'.format(res))


if __name__ == '__main__':
    main()
