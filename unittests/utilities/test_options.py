from unittest import TestCase

from dataclasses import dataclass, field

from enginemath.utilities.options import UserOptions
from enginemath.utilities.mixin_classes import UserOptionConfigured


@dataclass
class ExampleOptions(UserOptions):

    count: int = 3

    scale: float = 1.5

    axis: list = field(default_factory=lambda: [0.0, 0.0, 1.0])

    label: str = 'default'

    def override_options(self):
        # the label always follows the count
        if self.label == 'default':
            self.label = f'count-{self.count}'


class Example(UserOptionConfigured[ExampleOptions], ExampleOptions):

    def __init__(self, options: ExampleOptions | None = None):
        super().__init__(ExampleOptions, options=options)


class TestUserOptions(TestCase):

    def test_options_dict(self):

        options = ExampleOptions(count=5)

        self.assertEqual(options.options_dict, {'count': 5, 'scale': 1.5, 'axis': [0.0, 0.0, 1.0],
                                                'label': 'count-5'})

    def test_apply_options(self):

        class Target:
            pass

        target = Target()

        ExampleOptions(scale=2.0, label='custom').apply_options(target)

        self.assertEqual(target.count, 3)
        self.assertEqual(target.scale, 2.0)
        self.assertEqual(target.axis, [0.0, 0.0, 1.0])
        self.assertEqual(target.label, 'custom')


class TestUserOptionConfigured(TestCase):

    def test_defaults(self):

        example = Example()

        self.assertEqual(example.count, 3)
        self.assertEqual(example.scale, 1.5)
        self.assertEqual(example.label, 'count-3')
        self.assertIsInstance(example.original_options, ExampleOptions)

    def test_options(self):

        options = ExampleOptions(count=7, scale=-1.0)

        example = Example(options=options)

        self.assertEqual(example.count, 7)
        self.assertEqual(example.scale, -1.0)
        self.assertEqual(example.original_options, options)
        self.assertIsNot(example.original_options, options)

    def test_reset_settings(self):

        example = Example(options=ExampleOptions(count=2))

        example.count = 10
        example.scale = 0.0

        example.reset_settings()

        self.assertEqual(example.count, 2)
        self.assertEqual(example.scale, 1.5)
        self.assertEqual(example.label, 'count-2')

    def test_reset_mutable(self):

        options = ExampleOptions()

        example = Example(options=options)

        example.axis.append(5.0)
        options.count = 100

        example.reset_settings()

        self.assertEqual(example.axis, [0.0, 0.0, 1.0])
        self.assertEqual(example.count, 3)

        example.axis.append(6.0)
        example.reset_settings()

        self.assertEqual(example.axis, [0.0, 0.0, 1.0])

    def test_current_options(self):

        example = Example()

        example.scale = 4.0

        current = example.current_options()

        self.assertIsInstance(current, ExampleOptions)
        self.assertEqual(current.scale, 4.0)
        self.assertEqual(current.count, 3)
        self.assertEqual(example.original_options.scale, 1.5)
