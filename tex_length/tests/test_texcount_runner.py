"""Test cases for the texcount wrapper."""

import subprocess
import unittest
from pathlib import Path
from unittest.mock import patch

from tex_length.parser.texcount_runner import TexcountRunner, parse_sum_count
from tex_length.utils.errors import FatalIOError, FatalMismatchError

TEXCOUNT_OUTPUT = """\
File: paper.tex
Encoding: utf8
Sum count: 2713
Words in text: 2450
Words in headers: 12
Words outside text (captions, etc.): 201
Number of headers: 5
Number of floats/tables/figures: 4
Number of math inlines: 50
Number of math displayed: 9
"""


class TexcountRunnerTest(unittest.TestCase):
    """Test invocation and summary parsing of texcount."""

    def test_parse_sum_count(self):
        self.assertEqual(parse_sum_count(TEXCOUNT_OUTPUT), 2713)

    def test_missing_sum_line_is_fatal(self):
        with self.assertRaises(FatalMismatchError):
            parse_sum_count("File: paper.tex\nWords in text: 10\n")

    def test_command_line(self):
        command = TexcountRunner().command(Path("paper.tex"))
        self.assertEqual(command, ['texcount', 'paper.tex', '-utf8', '-sum=1,1,1,0,0,1,0'])

    @patch('tex_length.parser.texcount_runner.subprocess.run')
    def test_run_captures_output(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(args=[], returncode=0, stdout=TEXCOUNT_OUTPUT, stderr='')

        result = TexcountRunner().run(Path("paper.tex"))

        self.assertEqual(result.sum_count, 2713)
        self.assertEqual(result.output, TEXCOUNT_OUTPUT)
        args, kwargs = mock_run.call_args
        self.assertEqual(args[0][0], 'texcount')
        self.assertFalse(kwargs['check'])
        self.assertEqual(kwargs['encoding'], 'utf-8')
        self.assertEqual(kwargs['errors'], 'replace')

    @patch('tex_length.parser.texcount_runner.subprocess.run', side_effect=FileNotFoundError('texcount'))
    def test_missing_executable_is_fatal(self, _mock_run):
        with self.assertRaises(FatalIOError):
            TexcountRunner().run(Path("paper.tex"))


if __name__ == '__main__':
    unittest.main()
