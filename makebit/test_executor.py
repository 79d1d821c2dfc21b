#!/usr/bin/env python
"""unit tests for running single commands. These use standard posix tools
(echo, false, ls)."""

import io
import unittest

from makebit.errors import CommandExecutionFailed
from makebit.executor import execute
from makebit.rules import Command


class TestExecute(unittest.TestCase):

    def setUp(self):
        self.out = io.StringIO()

    def test_echoed(self):
        execute(Command("echo 'executing test'"),self.out)
        self.assertEqual(self.out.getvalue(),"echo 'executing test'\n'executing test'\n")

    def test_suppressed(self):
        execute(Command("echo 'cmd2'",suppressed=True),self.out)
        self.assertEqual(self.out.getvalue(),"'cmd2'\n")

    def test_whitespace_split(self):
        execute(Command("echo   a    b",suppressed=True),self.out)
        self.assertEqual(self.out.getvalue(),"a b\n")

    def test_no_shell(self):
        execute(Command("echo $HOME;",suppressed=True),self.out)
        self.assertEqual(self.out.getvalue(),"$HOME;\n")

    def test_non_zero_exit(self):
        with self.assertRaises(CommandExecutionFailed) as cm:
            execute(Command("false",suppressed=True),self.out)
        self.assertEqual(cm.exception.command,'false')
        self.assertIn('exit status',cm.exception.reason)

    def test_missing_executable(self):
        with self.assertRaises(CommandExecutionFailed) as cm:
            execute(Command("makebit-no-such-program --flag"),self.out)
        self.assertEqual(cm.exception.command,'makebit-no-such-program --flag')

    def test_embedded_null_byte(self):
        with self.assertRaises(CommandExecutionFailed) as cm:
            execute(Command("echo a\x00b",suppressed=True),self.out)
        self.assertIn('null',cm.exception.reason)

    def test_failure_output_kept(self):
        with self.assertRaises(CommandExecutionFailed) as cm:
            execute(Command("ls /makebit/no/such/path",suppressed=True),self.out)
        self.assertIn('/makebit/no/such/path',cm.exception.output)
        self.assertEqual(self.out.getvalue(),'')


if __name__ == '__main__':
    unittest.main()
