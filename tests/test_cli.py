"""
End-to-end tests for the conjoint command line front end.

Author: xwest
"""

import unittest
import sys
import os
import io
import json
import tempfile
from contextlib import redirect_stdout, redirect_stderr

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from conjoint.cli import main, EXIT_OK, EXIT_SYNTAX_ERROR, EXIT_UNREADABLE_SOURCE


class TestCLI(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def _write(self, content: str) -> str:
        path = os.path.join(self.tmpdir.name, "main.cj")
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def _run(self, *argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            code = main(list(argv))
        return code, stdout.getvalue(), stderr.getvalue()

    def test_ast_dump(self):
        path = self._write("let n : Int = 42;\n")
        code, out, err = self._run(path)
        self.assertEqual(code, EXIT_OK)
        self.assertTrue(out.startswith("TYPE: Program\n"))
        self.assertIn("TYPE: VariableDeclaration", out)
        self.assertEqual(err, "")

    def test_token_dump(self):
        path = self._write("let x")
        code, out, _ = self._run(path, "--tokens")
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(out.count("---------"), 3)
        self.assertIn("TYPE: KEYWORD", out)
        self.assertIn("TYPE: END_OF_FILE", out)

    def test_json_dumps(self):
        path = self._write('import { a } from "b";')
        code, out, _ = self._run(path, "--json")
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(json.loads(out)["children"][0]["value"]["kind"], "ImportDeclaration")

        code, out, _ = self._run(path, "--tokens", "--json")
        self.assertEqual(code, EXIT_OK)
        tokens = json.loads(out)
        self.assertEqual(tokens[-1]["kind"], "END_OF_FILE")
        self.assertEqual(len(tokens), 8)

    def test_syntax_error(self):
        path = self._write("let n Int = 1;")
        code, out, err = self._run(path)
        self.assertEqual(code, EXIT_SYNTAX_ERROR)
        self.assertEqual(out, "")
        self.assertIn("P001", err)
        self.assertIn("main.cj:1:7", err)

    def test_lexer_error_in_token_dump(self):
        path = self._write("let $")
        code, _, err = self._run(path, "--tokens")
        self.assertEqual(code, EXIT_SYNTAX_ERROR)
        self.assertIn("L001", err)

    def test_unreadable_file(self):
        code, _, err = self._run(os.path.join(self.tmpdir.name, "missing.cj"))
        self.assertEqual(code, EXIT_UNREADABLE_SOURCE)
        self.assertIn("Unable to read file", err)


if __name__ == '__main__':
    unittest.main()
