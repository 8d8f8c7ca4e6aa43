"""
Print a walkthrough of sample enginemath computations.

The report exercises the scalar kernel (square root, absolute value, min/max, rounding, trigonometry and inverse
trigonometry in degrees) and the rotation algebra (axis-angle construction, vector rotation, composition, inverse,
conjugate, normalization, SLERP, quaternion to 4x4 matrix round trip, and axis-angle extraction), printing each result
next to the value it should be close to.

Example::

    enginemath-showcase --precision 6 --angle 60 --fraction 0.25
"""

import logging

import sys

from argparse import ArgumentParser

from dataclasses import dataclass

from typing import Sequence, TextIO

import numpy as np

from enginemath import scalar_math as sm
from enginemath.rotations import Quaternion
from enginemath.utilities.options import UserOptions
from enginemath.utilities.mixin_classes import UserOptionConfigured


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting progress of the showcase.
"""


@dataclass
class ShowcaseOptions(UserOptions):
    """
    This dataclass serves as one way to control the settings for the :class:`.KernelShowcase` class.

    You can set any of the options on an instance of this dataclass and pass it to the :class:`.KernelShowcase` class
    at initialization to set the settings on the class.
    """

    precision: int = 4
    """
    The number of decimal places printed for each value.
    """

    sqrt_value: float = 25.0
    """
    The value whose square root is shown.
    """

    rotation_axis: tuple[float, float, float] = (0.0, 1.0, 0.0)
    """
    The axis of the primary sample rotation.
    """

    rotation_angle: float = 90.0
    """
    The angle of the primary sample rotation in degrees.
    """

    secondary_axis: tuple[float, float, float] = (0.0, 0.0, 1.0)
    """
    The axis of the rotation composed with the primary rotation.
    """

    secondary_angle: float = 45.0
    """
    The angle of the rotation composed with the primary rotation in degrees.
    """

    sample_vector: tuple[float, float, float] = (1.0, 0.0, 0.0)
    """
    The vector rotated by the sample rotations.
    """

    interpolation_fraction: float = 0.5
    """
    The fraction used when interpolating from the identity to the primary rotation.
    """


class KernelShowcase(UserOptionConfigured[ShowcaseOptions], ShowcaseOptions):
    """
    Builds a human readable report of sample computations.

    Each section is available on its own (:meth:`scalar_section`, :meth:`trigonometry_section`,
    :meth:`quaternion_section`, :meth:`matrix_section`) as a list of lines, and :meth:`write` prints all of them.
    """

    def __init__(self, options: ShowcaseOptions | None = None):
        """
        :param options: the options to configure the report with.  If ``None`` the defaults are used.
        """

        super().__init__(ShowcaseOptions, options=options)

    def _format(self, value: float) -> str:
        return f'{value:.{self.precision}f}'

    def _format_vector(self, vector: Sequence[float]) -> str:
        return '(' + ', '.join(self._format(float(value)) for value in vector) + ')'

    def _format_quaternion(self, quaternion: Quaternion) -> str:
        return 'Quaternion(x:{}, y:{}, z:{}, w:{})'.format(*(self._format(value) for value in quaternion))

    def _format_matrix(self, matrix: np.ndarray) -> list[str]:
        return ['| ' + '\t'.join(self._format(float(value)) for value in row) + ' |' for row in matrix]

    def scalar_section(self) -> list[str]:
        """
        Returns the square root, absolute value, min/max, and rounding samples.
        """

        lines = [f'sqrt({self._format(self.sqrt_value)}): {self._format(sm.sqrt(self.sqrt_value))}',
                 f'sqrt(2): {self._format(sm.sqrt(2.0))} (expected 1.4142)',
                 f'abs(-5.5): {self._format(sm.abs(-5.5))}',
                 f'maximum(10, 20): {self._format(sm.maximum(10.0, 20.0))}',
                 f'minimum(10, 20): {self._format(sm.minimum(10.0, 20.0))}']

        for value in (3.4, 3.6, 3.5, -3.4, -3.6, -3.5):
            lines.append(f'round({value}): {self._format(sm.round(value))}')

        lines.extend([f'floor(5.7): {self._format(sm.floor(5.7))}',
                      f'floor(-5.7): {self._format(sm.floor(-5.7))}',
                      f'ceil(5.2): {self._format(sm.ceil(5.2))}',
                      f'ceil(-5.2): {self._format(sm.ceil(-5.2))}'])

        return lines

    def trigonometry_section(self) -> list[str]:
        """
        Returns the trigonometric and inverse trigonometric samples (angles in degrees).
        """

        lines = []

        for angle, expected_sin, expected_cos in ((90, 1.0, 0.0), (0, 0.0, 1.0), (30, 0.5, 0.8660), (180, 0.0, -1.0)):
            radians = sm.radians(angle)
            lines.append(f'sin({angle} deg): {self._format(sm.sin(radians))} (expected {self._format(expected_sin)})')
            lines.append(f'cos({angle} deg): {self._format(sm.cos(radians))} (expected {self._format(expected_cos)})')

        lines.extend([f'asin(0.5): {self._format(sm.degrees(sm.asin(0.5)))} deg (expected 30)',
                      f'acos(0.5): {self._format(sm.degrees(sm.acos(0.5)))} deg (expected 60)',
                      f'atan(1): {self._format(sm.degrees(sm.atan(1.0)))} deg (expected 45)'])

        for y, x, expected in ((1, 1, 45), (1, -1, 135), (-1, -1, -135), (-1, 1, -45), (1, 0, 90), (-1, 0, -90)):
            lines.append(f'atan2({y}, {x}): {self._format(sm.degrees(sm.atan2(y, x)))} deg (expected {expected})')

        return lines

    def quaternion_section(self) -> list[str]:
        """
        Returns the quaternion construction, rotation, composition, inversion, normalization, and SLERP samples.
        """

        identity = Quaternion.identity()
        primary = Quaternion.from_axis_angle(self.rotation_axis, sm.radians(self.rotation_angle))
        secondary = Quaternion.from_axis_angle(self.secondary_axis, sm.radians(self.secondary_angle))

        inverse = primary.inverse()
        unnormalized = Quaternion(1.0, 2.0, 3.0, 4.0)
        interpolated = Quaternion.slerp(identity, primary, self.interpolation_fraction)

        return [f'identity: {self._format_quaternion(identity)}',
                f'primary rotation ({self.rotation_angle} deg): {self._format_quaternion(primary)}',
                f'sample vector: {self._format_vector(self.sample_vector)}',
                f'rotated by primary: {self._format_vector(primary * self.sample_vector)}',
                f'secondary rotation ({self.secondary_angle} deg): {self._format_quaternion(secondary)}',
                f'primary * secondary: {self._format_quaternion(primary * secondary)}',
                f'primary inverse: {self._format_quaternion(inverse)}',
                f'primary conjugate: {self._format_quaternion(primary.conjugate())}',
                f'primary * inverse (identity): {self._format_quaternion(primary * inverse)}',
                f'unnormalized: {self._format_quaternion(unnormalized)}',
                f'normalized: {self._format_quaternion(unnormalized.normalized())}',
                f'normalized magnitude: {self._format(unnormalized.normalized().magnitude())}',
                f'slerp({self.interpolation_fraction}) identity -> primary: {self._format_quaternion(interpolated)}',
                f'sample vector rotated by slerp: {self._format_vector(interpolated * self.sample_vector)}']

    def matrix_section(self) -> list[str]:
        """
        Returns the quaternion to 4x4 matrix round trip and axis-angle extraction samples.
        """

        axis = np.array([1.0, 1.0, 0.0]) / sm.sqrt(2.0)
        quaternion = Quaternion.from_axis_angle(axis, sm.radians(90.0))

        matrix = quaternion.to_matrix4()
        recovered = Quaternion.from_matrix(matrix)

        extracted_axis, extracted_angle = quaternion.to_axis_angle()

        return ([f'quaternion (90 deg about (1, 1, 0)): {self._format_quaternion(quaternion)}',
                 'as 4x4 matrix:'] +
                self._format_matrix(matrix) +
                [f'recovered from matrix: {self._format_quaternion(recovered)}',
                 f'axis: {self._format_vector(extracted_axis)}, '
                 f'angle: {self._format(sm.degrees(extracted_angle))} deg'])

    def write(self, stream: TextIO | None = None) -> None:
        """
        Writes every section of the report to the stream.

        :param stream: where to write the report.  Defaults to stdout.
        """

        if stream is None:
            stream = sys.stdout

        _LOGGER.info('Writing the report with %s', self.current_options())

        sections = (('Scalar kernel', self.scalar_section),
                    ('Trigonometry', self.trigonometry_section),
                    ('Quaternion', self.quaternion_section),
                    ('Quaternion <-> 4x4 matrix', self.matrix_section))

        for title, section in sections:
            _LOGGER.info('Computing the %s section', title)

            stream.write(f'--- {title} ---\n')
            for line in section():
                stream.write(line + '\n')
            stream.write('\n')


def _get_parser() -> ArgumentParser:
    """
    Helper function for the argparse extension

    :return: A setup argument parser
    """

    parser = ArgumentParser(description='Print sample computations from the enginemath kernel and rotation algebra')

    parser.add_argument('-p', '--precision', help='the number of decimal places to print', default=4, type=int)
    parser.add_argument('-a', '--angle', help='the primary rotation angle in degrees', default=90.0, type=float)
    parser.add_argument('-x', '--axis', help='the primary rotation axis', nargs=3, type=float,
                        default=[0.0, 1.0, 0.0])
    parser.add_argument('-f', '--fraction', help='the slerp interpolation fraction', default=0.5, type=float)
    parser.add_argument('-v', '--verbose', help='log progress messages', action='store_true')

    return parser


def main(argv: Sequence[str] | None = None) -> None:

    parser = _get_parser()

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    options = ShowcaseOptions(precision=args.precision, rotation_angle=args.angle, rotation_axis=tuple(args.axis),
                              interpolation_fraction=args.fraction)

    KernelShowcase(options=options).write()


if __name__ == "__main__":

    main()
