import io
import unittest

from ffnet.util.prompt import (
    prompt_float, prompt_hyperparameters, prompt_int)


class TestPrompt(unittest.TestCase):

    def test_prompt_hyperparameters(self):

        stdin = io.StringIO("5\n 0.25 \n")
        stdout = io.StringIO()

        n_hidden, bias = prompt_hyperparameters(stdin=stdin, stdout=stdout)

        self.assertEqual(n_hidden, 5)
        self.assertEqual(bias, 0.25)
        self.assertEqual(stdout.getvalue(),
                         "Number of Hidden Nodes: Bias: ")

    def test_prompt_int_rejects_float(self):

        with self.assertRaises(ValueError):
            prompt_int("Number", stdin=io.StringIO("2.5\n"),
                       stdout=io.StringIO())

    def test_prompt_float_rejects_text(self):

        with self.assertRaises(ValueError):
            prompt_float("Bias", stdin=io.StringIO("abc\n"),
                         stdout=io.StringIO())

    def test_end_of_input(self):

        with self.assertRaises(EOFError):
            prompt_int("Number", stdin=io.StringIO(""),
                       stdout=io.StringIO())
