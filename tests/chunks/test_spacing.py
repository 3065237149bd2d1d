import unittest

from completion_data.chunks.spacing import ParameterSpacing
from completion_data.model import ChunkKind


def _pads(spacing, kinds):
    return [spacing.spacing_before(k) for k in kinds]


class TestParameterSpacing(unittest.TestCase):

    def test_pads_around_parameters(self):
        spacing = ParameterSpacing(extra_space=True)
        pads = _pads(spacing, [
            ChunkKind.TYPED_TEXT,
            ChunkKind.LEFT_PAREN,
            ChunkKind.PLACEHOLDER,
            ChunkKind.COMMA,
            ChunkKind.PLACEHOLDER,
            ChunkKind.RIGHT_PAREN,
        ])
        self.assertEqual(pads, ["", "", " ", "", "", " "])
        self.assertTrue(spacing.saw_left_paren)
        self.assertTrue(spacing.saw_function_params)

    def test_no_parameters_never_padded(self):
        spacing = ParameterSpacing(extra_space=True)
        pads = _pads(spacing, [
            ChunkKind.TYPED_TEXT, ChunkKind.LEFT_PAREN, ChunkKind.RIGHT_PAREN,
        ])
        self.assertEqual(pads, ["", "", ""])
        self.assertFalse(spacing.saw_function_params)

    def test_informative_does_not_start_parameters(self):
        spacing = ParameterSpacing(extra_space=True)
        pads = _pads(spacing, [
            ChunkKind.LEFT_PAREN, ChunkKind.INFORMATIVE, ChunkKind.RIGHT_PAREN,
        ])
        self.assertEqual(pads, ["", "", ""])

    def test_optional_group_starts_parameters(self):
        spacing = ParameterSpacing(extra_space=True)
        pads = _pads(spacing, [
            ChunkKind.LEFT_PAREN, ChunkKind.OPTIONAL, ChunkKind.RIGHT_PAREN,
        ])
        self.assertEqual(pads, ["", " ", " "])

    def test_disabled_tracks_state_without_padding(self):
        spacing = ParameterSpacing()
        pads = _pads(spacing, [
            ChunkKind.LEFT_PAREN, ChunkKind.PLACEHOLDER, ChunkKind.RIGHT_PAREN,
        ])
        self.assertEqual(pads, ["", "", ""])
        self.assertTrue(spacing.saw_function_params)

    def test_nothing_before_left_paren(self):
        spacing = ParameterSpacing(extra_space=True)
        pads = _pads(spacing, [ChunkKind.TYPED_TEXT, ChunkKind.RIGHT_PAREN])
        self.assertEqual(pads, ["", ""])


if __name__ == '__main__':
    unittest.main()
