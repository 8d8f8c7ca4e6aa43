r"""
This module provides the scalar math kernel used throughout enginemath.

Every function here operates on individual python floats, is pure, and is total: no finite or non-finite input causes
an exception.  Instead each function resolves its domain edge cases to a fixed fallback value.  The transcendental
functions are evaluated with a statically fixed amount of work (a fixed number of series terms or Newton iterations)
so that their cost is bounded and their results are reproducible independent of the platform math library.

.. _scalar-fallback-table:

=====================  ================================================================================================
Function               Edge case policy
=====================  ================================================================================================
:func:`power`          an exponent of 0 gives 1 (even for a base of 0), a base within :data:`EPSILON` of 0 gives 0 for
                       any other exponent, a negative exponent gives the reciprocal of the positive power (or
                       :data:`INF` if the positive power underflows to 0)
:func:`factorial`      ``n < 2`` gives 1.  No overflow guard is applied; the result is an exact python integer
:func:`normalize_angle` the result is always in :math:`(-\pi, \pi]`; :math:`\pi` stays :math:`\pi` and :math:`-\pi`
                       wraps to :math:`\pi`
:func:`sqrt`           negative inputs and inputs within :data:`EPSILON` of 0 give 0
:func:`atan2`          ``x`` within :data:`EPSILON` of 0 gives :math:`\pm\pi/2` according to the sign of ``y``, or 0
                       if ``y`` is also within :data:`EPSILON` of 0
:func:`asin`           inputs above :math:`1-\epsilon` give :math:`\pi/2`, inputs below :math:`-1+\epsilon` give
                       :math:`-\pi/2`
:func:`acos`           inputs above :math:`1-\epsilon` give 0, inputs below :math:`-1+\epsilon` give :math:`\pi`
:func:`floor`,         non-finite inputs are returned unchanged
:func:`ceil`,
:func:`round`
=====================  ================================================================================================

The accuracy of the approximations is bounded rather than exact.  For double precision inputs the worst case errors
are approximately:

* :func:`sin`: :math:`2.2\times 10^{-5}` (at :math:`|\theta|=\pi`, after normalization)
* :func:`cos`: :math:`1.1\times 10^{-4}` (at :math:`|\theta|=\pi`, after normalization)
* :func:`atan` (and therefore :func:`atan2`, :func:`asin`, :func:`acos`): below :math:`10^{-11}`
* :func:`sqrt`: machine precision for inputs between :data:`EPSILON` and :math:`10^{8}`, degrading for larger inputs
  since only 15 Newton iterations are performed
"""


__all__ = ['PI', 'HALF_PI', 'TWO_PI', 'E', 'EPSILON', 'INF',
           'abs', 'approx_equal', 'maximum', 'minimum', 'power', 'factorial', 'normalize_angle',
           'sin', 'cos', 'sqrt', 'atan', 'atan2', 'asin', 'acos',
           'radians', 'degrees', 'floor', 'ceil', 'round']


PI: float = 3.14159265358979323846
"""
The ratio of a circle's circumference to its diameter
"""

HALF_PI: float = PI * 0.5
"""
Half of :data:`PI`
"""

TWO_PI: float = PI * 2.0
"""
Twice :data:`PI`
"""

E: float = 2.71828182845904523536
"""
The base of the natural logarithm
"""

EPSILON: float = 1e-5
"""
The tolerance used for every approximate equality, near-zero, and near-singular check in enginemath.
"""

INF: float = float('inf')
"""
Positive infinity
"""

_SIN_COS_TERMS: int = 7
"""
The number of terms used in the sine and cosine Taylor series.
"""

_ATAN_TERMS: int = 13
"""
The number of terms used in the arctangent Taylor series.
"""

_ATAN_REDUCTION_LIMIT: float = 0.4143
"""
Arguments with a magnitude above this value (just over tan(pi/8)) are halved in angle before the arctangent series is
evaluated.
"""

_SQRT_ITERATIONS: int = 15
"""
The number of Newton (Babylonian) iterations used by :func:`sqrt`.
"""


def abs(value: float) -> float:
    """
    Returns the absolute value of a float.

    :param value: the value
    :return: the absolute value
    """

    return -value if value < 0.0 else value


def approx_equal(a: float, b: float) -> bool:
    """
    Checks whether two floats are within :data:`EPSILON` of each other.

    :param a: the first value
    :param b: the second value
    :return: ``True`` if ``|a - b| < EPSILON``
    """

    return abs(a - b) < EPSILON


def maximum(a: float, b: float) -> float:
    """
    Returns the larger of two floats.
    """

    return a if a > b else b


def minimum(a: float, b: float) -> float:
    """
    Returns the smaller of two floats.
    """

    return a if a < b else b


def power(base: float, exponent: int) -> float:
    """
    Raises base to an integer exponent by repeated multiplication.

    An exponent of 0 always gives 1 (including for a base of 0).  Otherwise, a base within :data:`EPSILON` of 0 gives
    0, regardless of the sign of the exponent.  Negative exponents give the reciprocal of the positive power.

    :param base: the base
    :param exponent: the integer exponent
    :return: the base raised to the exponent
    """

    exponent = int(exponent)

    if exponent == 0:
        return 1.0

    if approx_equal(base, 0.0):
        return 0.0

    result = 1.0
    for _ in range(exponent if exponent > 0 else -exponent):
        result *= base

    if exponent < 0:
        if result == 0.0:
            # the positive power underflowed
            return INF

        return 1.0 / result

    return result


def factorial(n: int) -> int:
    """
    Computes n! by accumulating the product 2*3*...*n.

    Values of n less than 2 give 1.

    :param n: the integer to compute the factorial of
    :return: the factorial as an integer
    """

    result = 1
    for factor in range(2, int(n) + 1):
        result *= factor

    return result


def normalize_angle(angle: float) -> float:
    r"""
    Wraps an angle in radians into the interval :math:`(-\pi, \pi]`.

    The angle is first reduced into :math:`[0, 2\pi)` using a floor based modulo

    .. math::
        \theta' = \theta - 2\pi\lfloor\frac{\theta}{2\pi}\rfloor

    and then shifted down by :math:`2\pi` if it exceeds :math:`\pi`.  Therefore :math:`\pi` maps to :math:`\pi` and
    :math:`-\pi` maps to :math:`\pi`.

    :param angle: the angle in radians
    :return: the equivalent angle in :math:`(-\pi, \pi]`
    """

    angle = angle - TWO_PI * floor(angle / TWO_PI)

    if angle > PI:
        angle -= TWO_PI

    if angle <= -PI:
        angle += TWO_PI

    return angle


def sin(angle: float) -> float:
    r"""
    Computes the sine of an angle in radians using a fixed 7 term Taylor series.

    The angle is first wrapped into :math:`(-\pi, \pi]` using :func:`normalize_angle` and then

    .. math::
        \text{sin}(\theta)\approx\sum_{k=0}^{6}\frac{(-1)^k\theta^{2k+1}}{(2k+1)!}

    is evaluated.  The series is not checked for convergence, so the worst case error is about
    :math:`2.2\times 10^{-5}` near :math:`\pm\pi`.

    :param angle: the angle in radians
    :return: the approximate sine of the angle
    """

    angle = normalize_angle(angle)
    angle_squared = angle * angle

    result = 0.0
    x_pow = angle
    sign = 1.0

    for n in range(1, 2 * _SIN_COS_TERMS, 2):
        result += sign * x_pow / factorial(n)
        x_pow *= angle_squared
        sign = -sign

    return result


def cos(angle: float) -> float:
    r"""
    Computes the cosine of an angle in radians using a fixed 7 term Taylor series.

    The angle is first wrapped into :math:`(-\pi, \pi]` using :func:`normalize_angle` and then

    .. math::
        \text{cos}(\theta)\approx\sum_{k=0}^{6}\frac{(-1)^k\theta^{2k}}{(2k)!}

    is evaluated.  The worst case error is about :math:`1.1\times 10^{-4}` near :math:`\pm\pi`.

    :param angle: the angle in radians
    :return: the approximate cosine of the angle
    """

    angle = normalize_angle(angle)
    angle_squared = angle * angle

    result = 0.0
    x_pow = 1.0
    sign = 1.0

    for n in range(0, 2 * _SIN_COS_TERMS - 1, 2):
        result += sign * x_pow / factorial(n)
        x_pow *= angle_squared
        sign = -sign

    return result


def sqrt(value: float) -> float:
    """
    Computes the square root of a float with 15 Newton (Babylonian) iterations seeded at the value itself.

    Negative values and values within :data:`EPSILON` of 0 give 0.

    :param value: the value to take the square root of
    :return: the approximate square root
    """

    if value < 0.0 or approx_equal(value, 0.0):
        return 0.0

    root = value
    for _ in range(_SQRT_ITERATIONS):
        root = 0.5 * (root + value / root)

    return root


def atan(x: float) -> float:
    r"""
    Computes the arctangent of x using a fixed 13 term Taylor series.

    Arguments with :math:`|x|>1` are first reduced using

    .. math::
        \text{tan}^{-1}(x) = \pm\frac{\pi}{2} - \text{tan}^{-1}\left(\frac{1}{x}\right)

    and arguments with :math:`|x|>\text{tan}(\pi/8)` are then halved in angle using

    .. math::
        \text{tan}^{-1}(x) = 2\text{tan}^{-1}\left(\frac{x}{1+\sqrt{1+x^2}}\right)

    so that the odd power series (powers 1 through 25) is only ever evaluated for :math:`|x|\le 0.4143`, where its
    truncation error is below :math:`10^{-11}`.

    :param x: the tangent value
    :return: the angle in radians in :math:`[-\pi/2, \pi/2]`
    """

    if x > 1.0:
        return HALF_PI - atan(1.0 / x)

    if x < -1.0:
        return -HALF_PI - atan(1.0 / x)

    if x > _ATAN_REDUCTION_LIMIT or x < -_ATAN_REDUCTION_LIMIT:
        return 2.0 * atan(x / (1.0 + sqrt(1.0 + x * x)))

    x_squared = x * x

    result = 0.0
    x_pow = x
    sign = 1.0

    for n in range(1, 2 * _ATAN_TERMS, 2):
        result += sign * x_pow / n
        x_pow *= x_squared
        sign = -sign

    return result


def atan2(y: float, x: float) -> float:
    r"""
    Computes the angle of the point (x, y) from the positive x axis, accounting for the quadrant.

    When ``x`` is within :data:`EPSILON` of 0 the result is :math:`\pm\pi/2` according to the sign of ``y`` (or 0 if
    ``y`` is also within :data:`EPSILON` of 0).  Otherwise :func:`atan` of ``y/x`` is corrected by :math:`\pm\pi`
    when ``x`` is negative.

    :param y: the y coordinate
    :param x: the x coordinate
    :return: the angle in radians in :math:`(-\pi, \pi]`
    """

    if approx_equal(x, 0.0):
        if approx_equal(y, 0.0):
            return 0.0

        return HALF_PI if y > 0.0 else -HALF_PI

    angle = atan(y / x)

    if x < 0.0:
        if y >= 0.0:
            return angle + PI

        return angle - PI

    return angle


def asin(x: float) -> float:
    r"""
    Computes the arcsine of x as :math:`\text{tan}^{-1}(x/\sqrt{1-x^2})`.

    Inputs within :data:`EPSILON` of :math:`\pm 1` (or beyond) are clamped to exactly :math:`\pm\pi/2`.

    :param x: the sine value
    :return: the angle in radians in :math:`[-\pi/2, \pi/2]`
    """

    if x > 1.0 - EPSILON:
        return HALF_PI

    if x < -1.0 + EPSILON:
        return -HALF_PI

    # past the clamps 1 - x**2 >= 2*EPSILON - EPSILON**2 so the root is never 0
    return atan(x / sqrt(1.0 - x * x))


def acos(x: float) -> float:
    r"""
    Computes the arccosine of x as :math:`\pi/2-\text{sin}^{-1}(x)`.

    Inputs within :data:`EPSILON` of 1 (or above) give exactly 0 and inputs within :data:`EPSILON` of -1 (or below)
    give exactly :math:`\pi`.

    :param x: the cosine value
    :return: the angle in radians in :math:`[0, \pi]`
    """

    if x > 1.0 - EPSILON:
        return 0.0

    if x < -1.0 + EPSILON:
        return PI

    return HALF_PI - asin(x)


def radians(degrees: float) -> float:
    """
    Converts an angle from degrees to radians.
    """

    return degrees * (PI / 180.0)


def degrees(radians: float) -> float:
    """
    Converts an angle from radians to degrees.
    """

    return radians * (180.0 / PI)


def _is_finite(value: float) -> bool:
    # nan is the only value not equal to itself
    return value == value and value != INF and value != -INF


def floor(value: float) -> float:
    """
    Returns the largest integer less than or equal to value (as a float).

    The value is truncated toward zero and then corrected down by one for negative non-integers.  Non-finite values
    are returned unchanged.

    :param value: the value to floor
    :return: the floored value
    """

    if not _is_finite(value):
        return value

    truncated = int(value)

    if value < 0.0 and value != truncated:
        return float(truncated - 1)

    return float(truncated)


def ceil(value: float) -> float:
    """
    Returns the smallest integer greater than or equal to value (as a float).

    The value is truncated toward zero and then corrected up by one for positive non-integers.  Non-finite values
    are returned unchanged.

    :param value: the value to ceil
    :return: the ceiled value
    """

    if not _is_finite(value):
        return value

    truncated = int(value)

    if value > 0.0 and value != truncated:
        return float(truncated + 1)

    return float(truncated)


def round(value: float) -> float:
    """
    Rounds value to the nearest integer (as a float) using ``floor(value + 0.5)``.

    Ties are therefore always broken toward positive infinity (``round(2.5) == 3`` and ``round(-2.5) == -2``).

    :param value: the value to round
    :return: the rounded value
    """

    return floor(value + 0.5)
