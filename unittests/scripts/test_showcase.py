from unittest import TestCase

from contextlib import redirect_stdout

from io import StringIO

from enginemath.scripts.showcase import KernelShowcase, ShowcaseOptions, main, _get_parser


class TestKernelShowcase(TestCase):

    def test_defaults(self):

        showcase = KernelShowcase()

        self.assertEqual(showcase.precision, 4)
        self.assertEqual(showcase.rotation_axis, (0.0, 1.0, 0.0))
        self.assertEqual(showcase.rotation_angle, 90.0)

    def test_scalar_section(self):

        lines = KernelShowcase().scalar_section()

        self.assertIn('sqrt(25.0000): 5.0000', lines)
        self.assertIn('abs(-5.5): 5.5000', lines)
        self.assertIn('maximum(10, 20): 20.0000', lines)
        self.assertIn('minimum(10, 20): 10.0000', lines)
        self.assertIn('round(-3.5): -3.0000', lines)
        self.assertIn('round(3.5): 4.0000', lines)
        self.assertIn('floor(-5.7): -6.0000', lines)
        self.assertIn('ceil(-5.2): -5.0000', lines)

    def test_trigonometry_section(self):

        lines = KernelShowcase().trigonometry_section()

        self.assertIn('sin(90 deg): 1.0000 (expected 1.0000)', lines)
        self.assertIn('asin(0.5): 30.0000 deg (expected 30)', lines)
        self.assertIn('acos(0.5): 60.0000 deg (expected 60)', lines)
        self.assertIn('atan(1): 45.0000 deg (expected 45)', lines)
        self.assertIn('atan2(1, -1): 135.0000 deg (expected 135)', lines)
        self.assertIn('atan2(1, 0): 90.0000 deg (expected 90)', lines)

    def test_quaternion_section(self):

        lines = KernelShowcase().quaternion_section()

        self.assertEqual(lines[0], 'identity: Quaternion(x:0.0000, y:0.0000, z:0.0000, w:1.0000)')
        self.assertEqual(lines[1], 'primary rotation (90.0 deg): Quaternion(x:0.0000, y:0.7071, z:0.0000, w:0.7071)')

        rotated = [line for line in lines if line.startswith('rotated by primary')][0]

        self.assertTrue(rotated.endswith('-1.0000)'))

        self.assertIn('normalized magnitude: 1.0000', lines)

    def test_matrix_section(self):

        lines = KernelShowcase().matrix_section()

        self.assertEqual(lines[1], 'as 4x4 matrix:')
        self.assertEqual(len(lines), 8)
        self.assertTrue(lines[-1].endswith('angle: 90.0000 deg'))

    def test_options(self):

        showcase = KernelShowcase(ShowcaseOptions(precision=2, sqrt_value=16.0))

        self.assertIn('sqrt(16.00): 4.00', showcase.scalar_section())

        showcase.precision = 6
        showcase.reset_settings()

        self.assertEqual(showcase.precision, 2)

    def test_write(self):

        stream = StringIO()

        KernelShowcase().write(stream)

        report = stream.getvalue()

        for title in ['--- Scalar kernel ---', '--- Trigonometry ---', '--- Quaternion ---',
                      '--- Quaternion <-> 4x4 matrix ---']:
            self.assertIn(title, report)

        self.assertLess(report.index('Scalar kernel'), report.index('Trigonometry'))

    def test_write_logs_options(self):

        showcase = KernelShowcase(ShowcaseOptions(precision=3))

        with self.assertLogs('enginemath.scripts.showcase', level='INFO') as logs:
            showcase.write(StringIO())

        self.assertIn('precision=3', logs.output[0])


class TestMain(TestCase):

    def test_parser(self):

        args = _get_parser().parse_args(['--precision', '3', '--angle', '60', '--axis', '1', '0', '0', '-f', '0.25'])

        self.assertEqual(args.precision, 3)
        self.assertEqual(args.angle, 60.0)
        self.assertEqual(args.axis, [1.0, 0.0, 0.0])
        self.assertEqual(args.fraction, 0.25)
        self.assertFalse(args.verbose)

    def test_main(self):

        stream = StringIO()

        with redirect_stdout(stream):
            main(['--precision', '2', '--angle', '180', '--axis', '0', '0', '1'])

        report = stream.getvalue()

        self.assertIn('primary rotation (180.0 deg): Quaternion(x:0.00, y:0.00, z:1.00, w:0.00)', report)
        self.assertIn('sqrt(25.00): 5.00', report)
